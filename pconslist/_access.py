"""
Partial accessors and index based updates.

None of these raise. Absence, an empty list, a missing element or an index that is
negative or past the end, is reported by returning None. Updates rebuild the prefix
up to the index and share the rest of the list.
"""
from pconslist._plist import _EMPTY_PLIST, _PList, _reverse_onto


def head(xs):
    """
    >>> head(plist([1, 2]))
    1
    >>> head(plist()) is None
    True
    """
    return xs.first if xs else None


def last(xs):
    """
    >>> last(plist([1, 2]))
    2
    """
    if not xs:
        return None

    while xs.rest:
        xs = xs.rest

    return xs.first


def tail(xs):
    return xs.rest if xs else None


def init(xs):
    """
    All elements but the last.

    >>> init(plist([1, 2, 3]))
    plist([1, 2])
    """
    result = unsnoc(xs)
    return result[0] if result is not None else None


def uncons(xs):
    """
    Split a list into its head and tail.

    >>> uncons(plist([1, 2, 3]))
    (1, plist([2, 3]))
    >>> uncons(plist()) is None
    True
    """
    return (xs.first, xs.rest) if xs else None


def unsnoc(xs):
    """
    Split a list into all elements but the last and the last element.

    >>> unsnoc(plist([1, 2, 3]))
    (plist([1, 2]), 3)
    """
    if not xs:
        return None

    acc = _EMPTY_PLIST
    while xs.rest:
        acc = _PList(xs.first, acc)
        xs = xs.rest

    return _reverse_onto(acc, _EMPTY_PLIST), xs.first


def _node_at(xs, i):
    if i < 0:
        return _EMPTY_PLIST

    while i > 0 and xs:
        xs = xs.rest
        i -= 1

    return xs


def index(xs, i):
    """
    Element at index i, O(i).

    >>> index(plist('abc'), 1)
    'b'
    >>> index(plist('abc'), 3) is None
    True
    """
    node = _node_at(xs, i)
    return node.first if node else None


def find_index(predicate, xs):
    """
    >>> find_index(lambda x: x > 1, plist([1, 2, 3]))
    1
    """
    i = 0
    for x in xs:
        if predicate(x):
            return i
        i += 1

    return None


def find_last_index(predicate, xs):
    """
    >>> find_last_index(lambda x: x > 1, plist([1, 2, 3]))
    2
    """
    found = None
    i = 0
    for x in xs:
        if predicate(x):
            found = i
        i += 1

    return found


def elem_index(elem, xs):
    return find_index(lambda x: x == elem, xs)


def elem_last_index(elem, xs):
    return find_last_index(lambda x: x == elem, xs)


def _rebuild_at(i, xs, rebuild):
    # Walk to index i collecting the prefix, let rebuild produce the new
    # suffix from the node found there and put the prefix back in front.
    if i < 0:
        return None

    acc = _EMPTY_PLIST
    while i > 0 and xs:
        acc = _PList(xs.first, acc)
        xs = xs.rest
        i -= 1

    if i > 0:
        return None

    suffix = rebuild(xs)
    if suffix is None:
        return None

    return _reverse_onto(acc, suffix)


def insert_at(i, elem, xs):
    """
    Insert elem so that it ends up at index i. Valid for 0 <= i <= len(xs).

    >>> insert_at(1, 'x', plist('ab'))
    plist(['a', 'x', 'b'])
    >>> insert_at(2, 'x', plist('ab'))
    plist(['a', 'b', 'x'])
    >>> insert_at(3, 'x', plist('ab')) is None
    True
    """
    return _rebuild_at(i, xs, lambda node: _PList(elem, node))


def delete_at(i, xs):
    """
    >>> delete_at(0, plist('ab'))
    plist(['b'])
    """
    return _rebuild_at(i, xs, lambda node: node.rest if node else None)


def update_at(i, elem, xs):
    """
    >>> update_at(1, 'x', plist('ab'))
    plist(['a', 'x'])
    """
    return _rebuild_at(i, xs, lambda node: _PList(elem, node.rest) if node else None)


def modify_at(i, f, xs):
    """
    >>> modify_at(1, str.upper, plist('ab'))
    plist(['a', 'B'])
    """
    return _rebuild_at(i, xs, lambda node: _PList(f(node.first), node.rest) if node else None)


def alter_at(i, f, xs):
    """
    Replace the element at index i with f(element). If f returns None the element
    is deleted instead.

    >>> alter_at(0, lambda x: None, plist('ab'))
    plist(['b'])
    >>> alter_at(0, str.upper, plist('ab'))
    plist(['A', 'b'])
    """
    def rebuild(node):
        if not node:
            return None

        value = f(node.first)
        if value is None:
            return node.rest

        return _PList(value, node.rest)

    return _rebuild_at(i, xs, rebuild)
