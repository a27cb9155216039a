"""
One-pass transformations of persistent lists.

Every operation here visits its input at most once and never recurses. Output that
keeps the input order is built by prepending onto a private accumulator, which is
reversed once when the input is exhausted (optionally onto a suffix of the input
that can be shared as is). The accumulator never escapes the function building it.
"""
from pconslist._plist import _EMPTY_PLIST, _PList, _reverse_onto, plist


def singleton(elem):
    """
    >>> singleton(1)
    plist([1])
    """
    return _PList(elem, _EMPTY_PLIST)


def range(start, end):
    """
    Create a list of the integers from start to end, both inclusive. Counts
    down if start is larger than end.

    >>> range(1, 4)
    plist([1, 2, 3, 4])
    >>> range(3, 1)
    plist([3, 2, 1])
    """
    # Build from the end so that no reversal is needed
    step = 1 if end >= start else -1
    result = _EMPTY_PLIST
    current = end
    while current != start:
        result = _PList(current, result)
        current -= step

    return _PList(start, result)


def reverse(xs):
    """
    >>> reverse(plist([1, 2, 3]))
    plist([3, 2, 1])
    """
    return _reverse_onto(xs, _EMPTY_PLIST)


def snoc(xs, elem):
    """
    Append elem to the end of xs. O(n), the whole list is copied.

    >>> snoc(plist([1, 2]), 3)
    plist([1, 2, 3])
    """
    return _reverse_onto(_PList(elem, reverse(xs)), _EMPTY_PLIST)


def concat(xss):
    """
    Flatten an iterable of lists into a single list. The last list is shared.

    >>> concat(plist([plist([1, 2]), plist(), plist([3])]))
    plist([1, 2, 3])
    """
    acc = _EMPTY_PLIST
    last = _EMPTY_PLIST
    for xs in xss:
        acc = acc.mcons(last)
        last = xs

    return _reverse_onto(acc, plist(last))


def concat_map(f, xs):
    """
    Apply f, which returns an iterable, to every element and concatenate the results.

    >>> concat_map(lambda x: [x, x * 10], plist([1, 2]))
    plist([1, 10, 2, 20])
    """
    acc = _EMPTY_PLIST
    for x in xs:
        acc = acc.mcons(f(x))

    return reverse(acc)


def filter(predicate, xs):
    """
    >>> filter(lambda x: x % 2 == 0, plist([1, 2, 3, 4]))
    plist([2, 4])
    """
    acc = _EMPTY_PLIST
    for x in xs:
        if predicate(x):
            acc = _PList(x, acc)

    return reverse(acc)


def map_maybe(f, xs):
    """
    Apply f to every element, keeping the results that are not None.

    >>> map_maybe(lambda x: x * 2 if x > 1 else None, plist([1, 2, 3]))
    plist([4, 6])
    """
    acc = _EMPTY_PLIST
    for x in xs:
        y = f(x)
        if y is not None:
            acc = _PList(y, acc)

    return reverse(acc)


def cat_maybes(xs):
    """
    >>> cat_maybes(plist([1, None, 3]))
    plist([1, 3])
    """
    return filter(lambda x: x is not None, xs)


def map_with_index(f, xs):
    """
    Apply f to every element together with its index, f is called as f(index, element).

    >>> map_with_index(lambda i, x: (i, x), plist('ab'))
    plist([(0, 'a'), (1, 'b')])
    """
    acc = _EMPTY_PLIST
    i = 0
    for x in xs:
        acc = _PList(f(i, x), acc)
        i += 1

    return reverse(acc)


def foldl(f, initial, xs):
    """
    >>> foldl(lambda acc, x: acc - x, 10, plist([1, 2, 3]))
    4
    """
    result = initial
    for x in xs:
        result = f(result, x)

    return result


def foldr(f, initial, xs):
    """
    Right fold, f is called as f(element, acc) starting from the last element.

    >>> foldr(lambda x, acc: x - acc, 0, plist([1, 2, 3]))
    2
    """
    result = initial
    for x in reverse(xs):
        result = f(x, result)

    return result


def take(n, xs):
    """
    >>> take(2, plist([1, 2, 3]))
    plist([1, 2])
    >>> take(5, plist([1, 2]))
    plist([1, 2])
    """
    acc = _EMPTY_PLIST
    head = xs
    while n > 0 and head:
        acc = _PList(head.first, acc)
        head = head.rest
        n -= 1

    if not head:
        return xs

    return reverse(acc)


def take_while(predicate, xs):
    """
    >>> take_while(lambda x: x < 3, plist([1, 2, 3, 1]))
    plist([1, 2])
    """
    acc = _EMPTY_PLIST
    head = xs
    while head and predicate(head.first):
        acc = _PList(head.first, acc)
        head = head.rest

    if not head:
        return xs

    return reverse(acc)


def drop(n, xs):
    """
    Drop the first n elements, the remaining suffix is shared with xs.

    >>> drop(2, plist([1, 2, 3]))
    plist([3])
    """
    head = xs
    while n > 0 and head:
        head = head.rest
        n -= 1

    return head


def drop_while(predicate, xs):
    """
    >>> drop_while(lambda x: x < 3, plist([1, 2, 3, 1]))
    plist([3, 1])
    """
    head = xs
    while head and predicate(head.first):
        head = head.rest

    return head


def take_end(n, xs):
    """
    >>> take_end(2, plist([1, 2, 3]))
    plist([2, 3])
    """
    return drop(len(xs) - n, xs)


def drop_end(n, xs):
    """
    >>> drop_end(2, plist([1, 2, 3]))
    plist([1])
    """
    return take(len(xs) - n, xs)


def slice(start, end, xs):
    """
    Elements from index start (inclusive) to index end (exclusive).

    >>> slice(1, 3, plist([1, 2, 3, 4]))
    plist([2, 3])
    """
    return take(end - start, drop(start, xs))


def zip_with(f, xs, ys):
    """
    Combine the elements of two lists pairwise with f. The result is as long as
    the shorter of the two.

    >>> zip_with(lambda x, y: x + y, plist([1, 2, 3]), plist([10, 20]))
    plist([11, 22])
    """
    acc = _EMPTY_PLIST
    while xs and ys:
        acc = _PList(f(xs.first, ys.first), acc)
        xs = xs.rest
        ys = ys.rest

    return reverse(acc)


def zip(xs, ys):
    """
    >>> zip(plist([1, 2]), plist('ab'))
    plist([(1, 'a'), (2, 'b')])
    """
    return zip_with(lambda x, y: (x, y), xs, ys)


def unzip(pairs):
    """
    >>> unzip(plist([(1, 'a'), (2, 'b')]))
    (plist([1, 2]), plist(['a', 'b']))
    """
    firsts = _EMPTY_PLIST
    seconds = _EMPTY_PLIST
    for x, y in reverse(pairs):
        firsts = _PList(x, firsts)
        seconds = _PList(y, seconds)

    return firsts, seconds


def transpose(xss):
    """
    Turn the rows of a list of lists into columns. Rows that are too short to
    contribute to a column are skipped.

    >>> transpose(plist([plist([10, 11]), plist([20]), plist(), plist([30, 31, 32])]))
    plist([plist([10, 20, 30]), plist([11, 31]), plist([32])])
    """
    columns = _EMPTY_PLIST
    rows = filter(bool, xss)
    while rows:
        column = _EMPTY_PLIST
        remaining = _EMPTY_PLIST
        for row in rows:
            column = _PList(row.first, column)
            if row.rest:
                remaining = _PList(row.rest, remaining)

        columns = _PList(reverse(column), columns)
        rows = reverse(remaining)

    return reverse(columns)


def strip_prefix(prefix, xs):
    """
    Return the rest of xs if it starts with prefix, None otherwise.

    >>> strip_prefix(plist([1, 2]), plist([1, 2, 3]))
    plist([3])
    >>> strip_prefix(plist([2]), plist([1, 2, 3])) is None
    True
    """
    while prefix:
        if not xs or not prefix.first == xs.first:
            return None
        prefix = prefix.rest
        xs = xs.rest

    return xs
