"""
Hypothesis-based tests for the list functions, checked against python lists.
"""
from collections import Counter

import hypothesis
from hypothesis import given, strategies as st

from pconslist import (
    plist, reverse, filter, map_maybe, take, drop, span, group, group_by, concat, sort, sort_by,
    comparing, compare_natural, insert, nub, difference, intersect, union, Ordering, transpose,
    insert_at, delete_at)

hypothesis.settings.register_profile('proof', max_examples=2000)
#  hypothesis.settings.load_profile('proof')

small_ints = st.lists(st.integers(0, 10))
pairs = st.lists(st.tuples(st.integers(0, 5), st.integers()))


def by_first(a, b):
    return compare_natural(a[0], b[0])


@given(small_ints)
def test_reverse_involution(items):
    xs = plist(items)
    assert reverse(reverse(xs)) == xs
    assert list(reverse(xs)) == items[::-1]


@given(small_ints)
def test_filter(items):
    assert list(filter(lambda x: x > 5, plist(items))) == [x for x in items if x > 5]


@given(small_ints)
def test_map_maybe(items):
    result = map_maybe(lambda x: x * 2 if x % 3 else None, plist(items))
    assert list(result) == [x * 2 for x in items if x % 3]


@given(small_ints, st.integers(-2, 15))
def test_take_and_drop(items, n):
    xs = plist(items)
    assert list(take(n, xs)) == items[:max(n, 0)]
    assert list(drop(n, xs)) == items[max(n, 0):]


@given(pairs)
def test_sort_is_permutation(items):
    result = sort_by(by_first, plist(items))
    assert len(result) == len(items)
    assert Counter(result) == Counter(items)


@given(pairs)
def test_sort_is_sorted(items):
    result = list(sort_by(by_first, plist(items)))
    for a, b in zip(result, result[1:]):
        assert by_first(a, b) != Ordering.GT


@given(pairs)
def test_sort_is_stable(items):
    # python's sort is stable as well
    assert list(sort_by(by_first, plist(items))) == sorted(items, key=lambda p: p[0])


@given(small_ints)
def test_sort_is_idempotent(items):
    once = sort(plist(items))
    assert sort(once) == once


@given(st.lists(st.integers()))
def test_sort_matches_sorted(items):
    assert list(sort(plist(items))) == sorted(items)


@given(st.lists(st.text(max_size=3)))
def test_sort_by_key(items):
    assert list(sort_by(comparing(len), plist(items))) == sorted(items, key=len)


@given(st.lists(st.integers(0, 10)).map(sorted), st.integers(0, 10))
def test_insert_keeps_sorted(items, elem):
    assert list(insert(elem, plist(items))) == sorted(items + [elem])


@given(small_ints)
def test_span_reconstructs(items):
    xs = plist(items)
    init, rest = span(lambda x: x < 5, xs)
    assert list(init) + list(rest) == items
    assert all(x < 5 for x in init)
    assert not rest or not rest.first < 5


@given(small_ints)
def test_group_reconstructs(items):
    groups = group(plist(items))
    assert concat(groups) == plist(items)
    assert all(groups)
    for g in groups:
        assert len(set(g)) == 1


@given(small_ints)
def test_adjacent_groups_are_unrelated(items):
    groups = list(group_by(lambda a, b: abs(a - b) <= 2, plist(items)))
    for previous, following in zip(groups, groups[1:]):
        assert abs(previous.first - following.first) > 2


@given(small_ints)
def test_nub_is_idempotent(items):
    once = nub(plist(items))
    assert nub(once) == once
    assert list(once) == list(dict.fromkeys(items))


@given(small_ints, small_ints)
def test_intersect_is_sub_multiset(items1, items2):
    result = Counter(intersect(plist(items1), plist(items2)))
    assert not result - Counter(items1)


@given(small_ints, small_ints)
def test_difference(items1, items2):
    expected = list(items1)
    for y in items2:
        if y in expected:
            expected.remove(y)
    assert list(difference(plist(items1), plist(items2))) == expected


@given(small_ints, small_ints)
def test_union(items1, items2):
    expected = list(items1) + [y for y in dict.fromkeys(items2) if y not in items1]
    assert list(union(plist(items1), plist(items2))) == expected


@given(st.lists(small_ints))
def test_transpose(rows):
    result = transpose(plist(plist(row) for row in rows))
    columns = []
    i = 0
    while any(len(row) > i for row in rows):
        columns.append([row[i] for row in rows if len(row) > i])
        i += 1
    assert [list(column) for column in result] == columns


@given(small_ints, st.integers(-2, 12))
def test_insert_and_delete_at(items, i):
    xs = plist(items)
    inserted = insert_at(i, 'x', xs)
    deleted = delete_at(i, xs)
    if 0 <= i <= len(items):
        assert list(inserted) == items[:i] + ['x'] + items[i:]
    else:
        assert inserted is None
    if 0 <= i < len(items):
        assert list(deleted) == items[:i] + items[i + 1:]
    else:
        assert deleted is None
