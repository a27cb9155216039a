from enum import IntEnum

from pconslist._plist import _EMPTY_PLIST, _PList, _reverse_onto


class Ordering(IntEnum):
    """
    Result of a three way comparison.

    Comparators used with the functions in this package may return an Ordering or any
    integer, only the sign of the result is looked at. That means that classic cmp
    style functions returning -1, 0 and 1 can be used directly.
    """
    LT = -1
    EQ = 0
    GT = 1


def compare_natural(a, b):
    """
    Compare two elements using their natural order.

    >>> compare_natural(1, 2)
    <Ordering.LT: -1>
    """
    return Ordering((a > b) - (a < b))


def comparing(key):
    """
    Create a comparator that compares elements by key(element).

    >>> sort_by(comparing(len), plist(['ccc', 'a', 'bb']))
    plist(['a', 'bb', 'ccc'])
    """
    def compare(a, b):
        return compare_natural(key(a), key(b))

    return compare


def sort_by(compare, xs):
    """
    Return a new list with the elements of xs sorted according to compare. The sort
    is stable, elements that compare equal keep their relative order.

    The sort is a natural bottom up merge sort. The input is first cut into runs that
    are already ascending (or strictly descending, those are reversed), then adjacent
    runs are merged pairwise until a single run remains. This gives O(n log(n))
    comparisons in general and O(n) for input that is already sorted in either
    direction.

    compare is trusted to be a consistent total preorder. If it isn't the result is
    unspecified but still contains exactly the elements of xs.

    >>> sort_by(lambda a, b: b - a, plist([2, 3, 1]))
    plist([3, 2, 1])
    >>> sort_by(comparing(lambda p: p[0]), plist([(1, 'a'), (1, 'b'), (0, 'c')]))
    plist([(0, 'c'), (1, 'a'), (1, 'b')])
    """
    if not xs:
        return xs

    return _merge_all(compare, _runs(compare, xs))


def sort(xs, key=None):
    """
    Sort xs by the natural order of the elements, or of key(element) if key is given.

    >>> sort(plist([3, 1, 2]))
    plist([1, 2, 3])
    """
    return sort_by(comparing(key) if key is not None else compare_natural, xs)


def _runs(compare, xs):
    runs = _EMPTY_PLIST
    while xs:
        run = _PList(xs.first, _EMPTY_PLIST)
        xs = xs.rest
        if xs and compare(run.first, xs.first) > 0:
            # Strictly descending, prepending the elements leaves the run ascending.
            # Equal elements end a descending run to keep the sort stable.
            while xs and compare(run.first, xs.first) > 0:
                run = _PList(xs.first, run)
                xs = xs.rest
        else:
            while xs and not compare(run.first, xs.first) > 0:
                run = _PList(xs.first, run)
                xs = xs.rest
            run = _reverse_onto(run, _EMPTY_PLIST)

        runs = _PList(run, runs)

    return _reverse_onto(runs, _EMPTY_PLIST)


def _merge_all(compare, runs):
    while runs.rest:
        runs = _merge_pairs(compare, runs)

    return runs.first


def _merge_pairs(compare, runs):
    merged = _EMPTY_PLIST
    while runs and runs.rest:
        merged = _PList(_merge(compare, runs.first, runs.rest.first), merged)
        runs = runs.rest.rest

    if runs:
        merged = _PList(runs.first, merged)

    return _reverse_onto(merged, _EMPTY_PLIST)


def _merge(compare, left, right):
    # Ties are resolved in favour of left, the earlier run
    acc = _EMPTY_PLIST
    while left and right:
        if compare(left.first, right.first) > 0:
            acc = _PList(right.first, acc)
            right = right.rest
        else:
            acc = _PList(left.first, acc)
            left = left.rest

    return _reverse_onto(acc, left or right)


def insert_by(compare, elem, xs):
    """
    Insert elem into the sorted list xs, before the first element that it is not
    greater than. Runs in O(k) where k is the position of the inserted element, the
    rest of xs is shared.

    >>> insert_by(comparing(lambda p: p[0]), (1, 'new'), plist([(0, 'a'), (1, 'b')]))
    plist([(0, 'a'), (1, 'new'), (1, 'b')])
    """
    acc = _EMPTY_PLIST
    while xs and compare(elem, xs.first) > 0:
        acc = _PList(xs.first, acc)
        xs = xs.rest

    return _reverse_onto(acc, _PList(elem, xs))


def insert(elem, xs):
    """
    >>> insert(2, plist([1, 3]))
    plist([1, 2, 3])
    """
    return insert_by(compare_natural, elem, xs)
