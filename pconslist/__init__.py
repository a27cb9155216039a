# -*- coding: utf-8 -*-

from pconslist._plist import plist, l, PList

from pconslist._transform import (
    singleton, range, reverse, snoc, concat, concat_map, filter, map_maybe, cat_maybes,
    map_with_index, foldl, foldr, take, take_end, take_while, drop, drop_end, drop_while,
    slice, zip_with, zip, unzip, transpose, strip_prefix)

from pconslist._access import (
    head, last, tail, init, uncons, unsnoc, index, elem_index, elem_last_index,
    find_index, find_last_index, insert_at, delete_at, update_at, modify_at, alter_at)

from pconslist._ordering import Ordering, compare_natural, comparing, sort, sort_by, insert, insert_by

from pconslist._grouping import Span, Partition, span, group, group_all, group_by, group_all_by, partition

from pconslist._setops import (
    nub, nub_by, union, union_by, delete, delete_by, difference, difference_by,
    intersect, intersect_by)

from pconslist._effects import Monad, fold_m, filter_m, zip_with_a, some, many

__all__ = (
    'plist', 'l', 'PList',
    'singleton', 'range', 'reverse', 'snoc', 'concat', 'concat_map', 'filter', 'map_maybe',
    'cat_maybes', 'map_with_index', 'foldl', 'foldr', 'take', 'take_end', 'take_while', 'drop',
    'drop_end', 'drop_while', 'slice', 'zip_with', 'zip', 'unzip', 'transpose', 'strip_prefix',
    'head', 'last', 'tail', 'init', 'uncons', 'unsnoc', 'index', 'elem_index', 'elem_last_index',
    'find_index', 'find_last_index', 'insert_at', 'delete_at', 'update_at', 'modify_at', 'alter_at',
    'Ordering', 'compare_natural', 'comparing', 'sort', 'sort_by', 'insert', 'insert_by',
    'Span', 'Partition', 'span', 'group', 'group_all', 'group_by', 'group_all_by', 'partition',
    'nub', 'nub_by', 'union', 'union_by', 'delete', 'delete_by', 'difference', 'difference_by',
    'intersect', 'intersect_by',
    'Monad', 'fold_m', 'filter_m', 'zip_with_a', 'some', 'many',
)
