import pytest

from pconslist import (
    plist, reverse, filter, map_maybe, map_with_index, take, take_while, snoc, zip_with, sort,
    sort_by, span, group, nub, concat, compare_natural, transpose, unsnoc, insert_at, foldr)

LARGE = 100000


@pytest.fixture(scope='module')
def large_list():
    return plist(range(LARGE))


def test_large_list_equality_and_hash(large_list):
    assert large_list == plist(range(LARGE))
    assert hash(large_list) == hash(plist(range(LARGE)))


def test_deep_traversals_are_stack_safe(large_list):
    assert reverse(reverse(large_list)) == large_list
    assert len(filter(lambda x: x % 2 == 0, large_list)) == LARGE // 2
    assert len(map_maybe(lambda x: x if x % 2 else None, large_list)) == LARGE // 2
    assert map_with_index(lambda i, x: i - x, large_list).first == 0
    assert len(take(LARGE - 1, large_list)) == LARGE - 1
    assert len(take_while(lambda x: x < LARGE - 1, large_list)) == LARGE - 1
    assert len(snoc(large_list, -1)) == LARGE + 1
    assert len(zip_with(lambda x, y: x + y, large_list, large_list)) == LARGE
    assert foldr(lambda x, acc: acc + 1, 0, large_list) == LARGE
    assert unsnoc(large_list)[1] == LARGE - 1
    assert insert_at(LARGE, -1, large_list).rest.first == 1


def test_sort_is_stack_safe(large_list):
    assert sort(reverse(large_list)) == large_list
    assert sort(large_list) == large_list

    # Lots of short runs
    zigzag = plist(x ^ 1 for x in range(LARGE))
    assert sort(zigzag) == large_list


def test_sort_by_many_equal_keys_is_stack_safe(large_list):
    result = sort_by(lambda a, b: compare_natural(a % 2, b % 2), large_list)
    assert result.first == 0
    assert len(result) == LARGE


def test_grouping_is_stack_safe(large_list):
    init, rest = span(lambda x: x < LARGE - 1, large_list)
    assert len(init) == LARGE - 1
    assert len(group(large_list)) == LARGE
    assert len(group(plist([1] * LARGE))) == 1
    assert concat(group(large_list)) == large_list


def test_transpose_is_stack_safe(large_list):
    assert len(transpose(plist([large_list]))) == LARGE


def test_nub_on_long_list_with_few_distinct_values():
    assert nub(plist(x % 3 for x in range(LARGE))) == plist([0, 1, 2])


def test_deallocating_long_list():
    # Dropping the last reference to a long chain of nodes must not overflow
    # the C stack while the nodes are freed.
    pl = plist(range(LARGE * 2))
    del pl
