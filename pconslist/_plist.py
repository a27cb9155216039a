from collections.abc import Sequence, Hashable
from functools import total_ordering
from numbers import Integral


def _reverse_onto(acc, tail):
    """
    Prepend the elements of acc, one by one, onto tail. The result is acc reversed
    followed by tail, which is shared and not copied.

    This is the second half of the accumulate-then-reverse pattern used by every
    operation that has to rebuild a prefix of a list.
    """
    while acc:
        tail = _PList(acc.first, tail)
        acc = acc.rest

    return tail


@total_ordering
class PList(object):
    """
    Classical Lisp style singly linked list. Adding elements to the head using cons is O(1).
    Element access is O(k) where k is the position of the element in the list. Taking the
    length of the list is O(n).

    A list is either the empty list or a node holding ``first`` and ``rest``. Nodes are
    never modified after they have been handed out, so lists built on top of each other
    safely share their common suffix.

    Fully supports the Sequence and Hashable protocols including indexing and slicing but
    indexing is linear in the index.

    Do not instantiate directly, instead use the factory functions :py:func:`l` or :py:func:`plist` to
    create an instance.

    Some examples:

    >>> x = plist([1, 2])
    >>> y = x.cons(3)
    >>> x
    plist([1, 2])
    >>> y
    plist([3, 1, 2])
    >>> y.first
    3
    >>> y.rest == x
    True
    >>> y[:2]
    plist([3, 1])
    """
    __slots__ = ('__weakref__',)

    # Selected implementations can be taken straight from the Sequence
    # class, other are less suitable. Especially those that work with
    # index lookups.
    count = Sequence.count
    index = Sequence.index

    def __reduce__(self):
        # Pickling support
        return plist, (list(self),)

    def __len__(self):
        # O(n), storing the length in every node would make cons
        # noticeably more expensive.
        return sum(1 for _ in self)

    def __repr__(self):
        return "plist({0})".format(list(self))
    __str__ = __repr__

    def cons(self, elem):
        """
        Return a new list with elem inserted as new head.

        >>> plist([1, 2]).cons(3)
        plist([3, 1, 2])
        """
        return _PList(elem, self)

    def mcons(self, iterable):
        """
        Return a new list with all elements of iterable repeatedly cons:ed to the current list.
        NB! The elements will be inserted in the reverse order of the iterable.
        Runs in O(len(iterable)).

        >>> plist([1, 2]).mcons([3, 4])
        plist([4, 3, 1, 2])
        """
        head = self
        for elem in iterable:
            head = _PList(elem, head)

        return head

    def reverse(self):
        """
        Return a reversed version of list. Runs in O(n) where n is the length of the list.

        >>> plist([1, 2, 3]).reverse()
        plist([3, 2, 1])

        Also supports the standard reversed function.

        >>> reversed(plist([1, 2, 3]))
        plist([3, 2, 1])
        """
        return _reverse_onto(self, _EMPTY_PLIST)
    __reversed__ = reverse

    def split(self, index):
        """
        Split the list at position specified by index. Returns a tuple containing the
        list up until index and the list after the index. Runs in O(index).

        >>> plist([1, 2, 3, 4]).split(2)
        (plist([1, 2]), plist([3, 4]))
        """
        acc = _EMPTY_PLIST
        right_list = self
        i = 0
        while right_list and i < index:
            acc = _PList(right_list.first, acc)
            right_list = right_list.rest
            i += 1

        if not right_list:
            # No split occurred, the whole list is the left part
            return self, _EMPTY_PLIST

        return _reverse_onto(acc, _EMPTY_PLIST), right_list

    def __iter__(self):
        li = self
        while li:
            yield li.first
            li = li.rest

    def __lt__(self, other):
        if not isinstance(other, PList):
            return NotImplemented

        return tuple(self) < tuple(other)

    def __eq__(self, other):
        """
        Traverses the lists, checking equality of elements.

        This is an O(n) operation, but preserves the standard semantics of list equality.
        """
        if not isinstance(other, PList):
            return NotImplemented

        self_head = self
        other_head = other
        while self_head and other_head:
            if self_head is other_head:
                # Shared suffix
                return True
            if not self_head.first == other_head.first:
                return False
            self_head = self_head.rest
            other_head = other_head.rest

        return not self_head and not other_head

    def __getitem__(self, index):
        # Indexing is O(index), lists that are indexed a lot are better off
        # converted to a tuple first.

        if isinstance(index, slice):
            if index.start is not None and index.start >= 0 and index.stop is None and (index.step is None or index.step == 1):
                return self._drop(index.start)

            # Take the easy way out for all other slicing cases, not much structural reuse possible anyway
            return plist(tuple(self)[index])

        if not isinstance(index, Integral):
            raise TypeError("'%s' object cannot be interpreted as an index" % type(index).__name__)

        if index < 0:
            # NB: O(n)!
            index += len(self)

        try:
            return self._drop(index).first
        except AttributeError as e:
            raise IndexError("PList index out of range") from e

    def _drop(self, count):
        if count < 0:
            raise IndexError("PList index out of range")

        head = self
        while count > 0 and head:
            head = head.rest
            count -= 1

        return head

    def __hash__(self):
        return hash(tuple(self))

    def remove(self, elem):
        """
        Return new list with first element equal to elem removed. O(k) where k is the position
        of the element that is removed. The part of the list after the removed element is shared.

        Raises ValueError if no matching element is found.

        >>> plist([1, 2, 1]).remove(1)
        plist([2, 1])
        """
        acc = _EMPTY_PLIST
        head = self
        while head:
            if head.first == elem:
                return _reverse_onto(acc, head.rest)

            acc = _PList(head.first, acc)
            head = head.rest

        raise ValueError('{0} not found in PList'.format(elem))


class _PList(PList):
    __slots__ = ('first', 'rest')

    def __new__(cls, first, rest):
        instance = super(_PList, cls).__new__(cls)
        instance.first = first
        instance.rest = rest
        return instance

    def __bool__(self):
        return True


class _EmptyPList(PList):
    __slots__ = ()

    def __bool__(self):
        return False

    @property
    def first(self):
        raise AttributeError("Empty PList has no first")

    @property
    def rest(self):
        return self


Sequence.register(PList)
Hashable.register(PList)

_EMPTY_PLIST = _EmptyPList()


def plist(iterable=(), reverse=False):
    """
    Creates a new persistent list containing all elements of iterable.
    Optional parameter reverse specifies if the elements should be inserted in
    reverse order or not.

    >>> plist([1, 2, 3])
    plist([1, 2, 3])
    >>> plist([1, 2, 3], reverse=True)
    plist([3, 2, 1])
    """
    if isinstance(iterable, PList) and not reverse:
        return iterable

    if not reverse:
        iterable = list(iterable)
        iterable.reverse()

    return _EMPTY_PLIST.mcons(iterable)


def l(*elements):
    """
    Creates a new persistent list containing all arguments.

    >>> l(1, 2, 3)
    plist([1, 2, 3])
    """
    return plist(elements)
