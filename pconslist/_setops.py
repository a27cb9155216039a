"""
Set like operations on lists with a caller supplied equivalence.

Elements are only compared, never hashed, so all of these are quadratic. The
equivalence is expected to be reflexive and symmetric, if it isn't the results are
unspecified. Nothing here raises, a missing element simply leaves the list as it is.
"""
from operator import eq

from pconslist._plist import _EMPTY_PLIST, _PList, _reverse_onto
from pconslist._transform import concat, filter, foldl


def _any(predicate, xs):
    for x in xs:
        if predicate(x):
            return True

    return False


def nub_by(equivalent, xs):
    """
    Keep only the first of every set of equivalent elements. Later elements are
    compared against each kept element as equivalent(kept, later).

    >>> nub_by(lambda a, b: a % 3 == b % 3, plist([1, 2, 4, 3, 5]))
    plist([1, 2, 3])
    """
    kept = _EMPTY_PLIST
    for x in xs:
        if not _any(lambda k: equivalent(k, x), kept):
            kept = _PList(x, kept)

    return _reverse_onto(kept, _EMPTY_PLIST)


def nub(xs):
    """
    >>> nub(plist([1, 2, 1, 3, 2]))
    plist([1, 2, 3])
    """
    return nub_by(eq, xs)


def delete_by(equivalent, elem, xs):
    """
    Remove the first element y of xs for which equivalent(elem, y) holds. Returns xs
    itself if there is no such element. The part after the removed element is shared.

    >>> delete_by(eq, 2, plist([1, 2, 3, 2]))
    plist([1, 3, 2])
    """
    acc = _EMPTY_PLIST
    head = xs
    while head:
        if equivalent(elem, head.first):
            return _reverse_onto(acc, head.rest)

        acc = _PList(head.first, acc)
        head = head.rest

    return xs


def delete(elem, xs):
    return delete_by(eq, elem, xs)


def difference_by(equivalent, xs, ys):
    """
    Remove from xs one equivalent element for every element in ys, left to right.

    >>> difference_by(eq, plist([1, 2, 2, 3]), plist([2]))
    plist([1, 2, 3])
    """
    return foldl(lambda acc, y: delete_by(equivalent, y, acc), xs, ys)


def difference(xs, ys):
    return difference_by(eq, xs, ys)


def union_by(equivalent, xs, ys):
    """
    xs followed by the distinct elements of ys that have no equivalent in xs.

    >>> union_by(eq, plist([1, 2]), plist([2, 3, 3, 4]))
    plist([1, 2, 3, 4])
    """
    extra = foldl(lambda acc, x: delete_by(equivalent, x, acc), nub_by(equivalent, ys), xs)
    return concat((xs, extra))


def union(xs, ys):
    return union_by(eq, xs, ys)


def intersect_by(equivalent, xs, ys):
    """
    Keep the elements x of xs for which some y in ys satisfies equivalent(x, y).
    Duplicates in xs are all kept.

    >>> intersect_by(eq, plist([1, 2, 2, 3]), plist([2, 3, 4]))
    plist([2, 2, 3])
    """
    return filter(lambda x: _any(lambda y: equivalent(x, y), ys), xs)


def intersect(xs, ys):
    return intersect_by(eq, xs, ys)
