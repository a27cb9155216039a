from pyperform import BenchmarkedFunction
from pconslist import plist, sort, sort_by, filter, reverse, group, nub, compare_natural #!


class Benchmarked(BenchmarkedFunction):
    def __init__(self, scale=1, *args, **kwargs):
        super(Benchmarked, self).__init__(*args, timeit_number=scale*100, **kwargs)

################# Create ###################

def _small_list():
    small_list = range(10)

def _large_list():
    large_list = range(2000)

@Benchmarked(setup=_small_list)
def create_small_plist():
    for x in range(100):
        _ = plist(small_list)

@Benchmarked(setup=_large_list)
def create_large_plist():
    _ = plist(large_list)

@Benchmarked(setup=_large_list)
def reference_create_large_list():
    _ = list(large_list)

################# Traverse ###################

def _large_plist():
    large_plist = plist(range(2000))

@Benchmarked(setup=_large_plist)
def reverse_large_plist():
    _ = reverse(large_plist)

@Benchmarked(setup=_large_plist)
def filter_large_plist():
    _ = filter(lambda x: x % 2, large_plist)

@Benchmarked(setup=_large_plist)
def group_large_plist():
    _ = group(large_plist)

################# Sort ###################

def _shuffled_plist():
    import random
    shuffled = list(range(2000))
    random.shuffle(shuffled)
    shuffled_plist = plist(shuffled)

@Benchmarked(setup=_shuffled_plist)
def sort_shuffled_plist():
    _ = sort(shuffled_plist)

@Benchmarked(setup=_shuffled_plist)
def sort_by_shuffled_plist():
    _ = sort_by(compare_natural, shuffled_plist)

@Benchmarked(setup=_shuffled_plist)
def reference_sort_shuffled_list():
    _ = sorted(shuffled)

@Benchmarked(setup=_large_plist)
def sort_sorted_plist():
    _ = sort(large_plist)

@Benchmarked(setup=_large_plist)
def sort_reverse_sorted_plist():
    _ = sort(reverse(large_plist))

################# Set operations ###################

def _few_distinct_plist():
    few_distinct_plist = plist(x % 10 for x in range(2000))

@Benchmarked(setup=_few_distinct_plist)
def nub_few_distinct_plist():
    _ = nub(few_distinct_plist)
