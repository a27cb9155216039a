from pconslist import (
    plist, l, nub, nub_by, union, union_by, delete, delete_by, difference, difference_by,
    intersect, intersect_by)


def same_parity(a, b):
    return a % 2 == b % 2


def test_nub():
    assert nub(l(1, 2, 1, 3, 2, 1)) == l(1, 2, 3)
    assert nub(plist()) == plist()


def test_nub_by_keeps_first_occurrence():
    assert nub_by(same_parity, l(4, 1, 2, 3)) == l(4, 1)


def test_nub_works_with_unhashable_elements():
    assert nub(l([1], [2], [1])) == l([1], [2])


def test_delete():
    assert delete(2, l(1, 2, 3, 2)) == l(1, 3, 2)


def test_delete_missing_element_returns_same_list():
    x = l(1, 2, 3)
    assert delete(4, x) is x
    assert delete(4, plist()) is plist()


def test_delete_by_calls_relation_with_element_first():
    calls = []

    def relation(a, b):
        calls.append((a, b))
        return a == b

    delete_by(relation, 'x', l('a', 'x'))
    assert calls == [('x', 'a'), ('x', 'x')]


def test_difference():
    assert difference(l(1, 2, 2, 3), l(2)) == l(1, 2, 3)
    assert difference(l(1, 2, 2, 3), l(2, 2, 2)) == l(1, 3)
    assert difference(l(1, 2), plist()) == l(1, 2)


def test_difference_by():
    assert difference_by(same_parity, l(1, 2, 3, 4), l(5)) == l(2, 3, 4)


def test_difference_with_itself_is_empty():
    x = l(1, 2, 2, 3)
    assert difference(x, x) == plist()


def test_union():
    assert union(l(1, 2, 2), l(2, 3, 3, 4)) == l(1, 2, 2, 3, 4)
    assert union(plist(), l(1, 1)) == l(1)
    assert union(l(1), plist()) == l(1)


def test_union_by():
    assert union_by(same_parity, l(1), l(3, 2, 4)) == l(1, 2)


def test_intersect():
    assert intersect(l(1, 2, 2, 3), l(2, 3, 4)) == l(2, 2, 3)
    assert intersect(l(1, 2), plist()) == plist()


def test_intersect_by():
    assert intersect_by(same_parity, l(1, 2, 3), l(5)) == l(1, 3)
