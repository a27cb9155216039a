from abc import ABCMeta, abstractmethod

from pconslist._plist import _EMPTY_PLIST, _PList, _reverse_onto


class Monad(metaclass=ABCMeta):
    """
    Capability describing how to sequence effectful computations.

    The effectful list functions below know nothing about the effect itself, they
    only thread it through a traversal of the list, left to right, using the two
    operations implemented by subclasses:

        - pure(value) wraps a plain value
        - bind(m, f) runs m and passes its value to f, which returns a new effect

    Steps are chained with a loop of bind calls, never with recursion over the list.
    For effects that run their continuation immediately no stack grows with the length
    of the list. Effects that suspend their continuations are responsible for
    running the resulting chain without recursing.

    A minimal optional value effect where None means failure:

    >>> class Optional(Monad):
    ...     def pure(self, value):
    ...         return (value,)
    ...     def bind(self, m, f):
    ...         return f(m[0]) if m is not None else None
    >>> fold_m(Optional(), lambda acc, x: (acc + x,) if x > 0 else None, 0, plist([1, 2, 3]))
    (6,)
    """

    @abstractmethod
    def pure(self, value):
        """
        Wrap value in the effect.
        """

    @abstractmethod
    def bind(self, m, f):
        """
        Sequence m with f, f receives the value produced by m and returns a new effect.
        """

    def map(self, m, f):
        return self.bind(m, lambda value: self.pure(f(value)))


def fold_m(monad, f, initial, xs):
    """
    Left fold where every step, f(acc, element), returns an effect.
    """
    result = monad.pure(initial)
    for x in xs:
        result = monad.bind(result, lambda acc, x=x: f(acc, x))

    return result


def filter_m(monad, predicate, xs):
    """
    Filter where predicate(element) returns an effect producing a bool. The effects
    are run in list order and the result list keeps the original order.
    """
    def step(kept, x):
        return monad.map(predicate(x), lambda keep: _PList(x, kept) if keep else kept)

    result = fold_m(monad, step, _EMPTY_PLIST, xs)
    return monad.map(result, lambda kept: _reverse_onto(kept, _EMPTY_PLIST))


def zip_with_a(monad, f, xs, ys):
    """
    Combine two lists pairwise with f, which returns an effect, and collect the
    produced values. Stops at the end of the shorter list.
    """
    result = monad.pure(_EMPTY_PLIST)
    while xs and ys:
        result = monad.bind(
            result,
            lambda acc, x=xs.first, y=ys.first: monad.map(f(x, y), lambda value: _PList(value, acc)))
        xs = xs.rest
        ys = ys.rest

    return monad.map(result, lambda acc: _reverse_onto(acc, _EMPTY_PLIST))


def many(attempt, failure):
    """
    Call attempt repeatedly until it raises one of the exception types in failure and
    return the values produced until then, zero or more of them.

    >>> it = iter([1, 2])
    >>> many(lambda: next(it), StopIteration)
    plist([1, 2])
    """
    acc = _EMPTY_PLIST
    done = False
    while not done:
        try:
            value = attempt()
        except failure:
            done = True
        else:
            acc = _PList(value, acc)

    return _reverse_onto(acc, _EMPTY_PLIST)


def some(attempt, failure):
    """
    Like many but at least one call must succeed, a failure of the first call propagates.

    >>> it = iter([])
    >>> some(lambda: next(it), StopIteration)
    Traceback (most recent call last):
    ...
    StopIteration
    """
    first = attempt()
    return many(attempt, failure).cons(first)
