from collections import namedtuple
from operator import eq

from pconslist._plist import _EMPTY_PLIST, _PList, _reverse_onto
from pconslist._ordering import Ordering, compare_natural, sort_by

Span = namedtuple('Span', 'init rest')
Span.__doc__ = """
Result of span. init is the longest prefix satisfying the predicate, rest is the
remaining part of the original list, shared and not copied.
"""

Partition = namedtuple('Partition', 'yes no')


def span(predicate, xs):
    """
    Split xs into the longest prefix whose elements satisfy predicate and the rest.
    Elements after the first one failing predicate are never looked at.

    >>> span(lambda x: x % 2 == 1, plist([1, 3, 2, 4, 5]))
    Span(init=plist([1, 3]), rest=plist([2, 4, 5]))
    """
    acc = _EMPTY_PLIST
    rest = xs
    while rest and predicate(rest.first):
        acc = _PList(rest.first, acc)
        rest = rest.rest

    return Span(_reverse_onto(acc, _EMPTY_PLIST), rest)


def group_by(relation, xs):
    """
    Group consecutive elements into non-empty lists. Each group starts with an anchor
    element and extends over the following elements y for which relation(anchor, y)
    holds. Concatenating the groups gives back xs.

    >>> group_by(lambda a, b: b - a < 2, plist([1, 2, 3, 4, 5]))
    plist([plist([1, 2]), plist([3, 4]), plist([5])])
    """
    groups = _EMPTY_PLIST
    while xs:
        anchor = xs.first
        init, xs = span(lambda y: relation(anchor, y), xs.rest)
        groups = _PList(_PList(anchor, init), groups)

    return _reverse_onto(groups, _EMPTY_PLIST)


def group(xs):
    """
    Group equal consecutive elements.

    >>> group(plist([1, 1, 2, 2, 1]))
    plist([plist([1, 1]), plist([2, 2]), plist([1])])
    """
    return group_by(eq, xs)


def group_all_by(compare, xs):
    """
    Sort xs with compare and group elements comparing equal. The original order of
    the groups is lost, the order within a group is kept.
    """
    return group_by(lambda a, b: compare(a, b) == Ordering.EQ, sort_by(compare, xs))


def group_all(xs):
    """
    Group all equal elements, whether consecutive or not. The groups come out sorted.

    >>> group_all(plist([1, 2, 1, 3, 2]))
    plist([plist([1, 1]), plist([2, 2]), plist([3])])
    """
    return group_all_by(compare_natural, xs)


def partition(predicate, xs):
    """
    Split xs into the elements that satisfy predicate and those that don't, keeping
    their relative order.

    >>> partition(lambda x: x > 2, plist([3, 1, 4, 2]))
    Partition(yes=plist([3, 4]), no=plist([1, 2]))
    """
    yes = _EMPTY_PLIST
    no = _EMPTY_PLIST
    for x in xs:
        if predicate(x):
            yes = _PList(x, yes)
        else:
            no = _PList(x, no)

    return Partition(_reverse_onto(yes, _EMPTY_PLIST), _reverse_onto(no, _EMPTY_PLIST))
