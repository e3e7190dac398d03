# dsakit

A small collection of classic algorithms over arrays, strings and matrices,
written as plain Python functions. Each function takes ordinary Python values
(lists, strings, integers) and returns a new result; inputs are never changed
in place.

Where there is no answer, functions return `None` (for example
`second_largest`, `majority_element`, `search_rotated`, `search_range`,
`two_sum_pair`, `min_bouquet_days`). Functions that need at least one item,
such as `largest_element`, `max_subarray`, `find_peak_element` and
`single_non_duplicate`, raise `ValueError` on an empty sequence.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `dsakit.strings`: `is_anagram`, `beauty_sum`, `is_isomorphic`,
  `length_of_last_word`, `largest_odd_number`, `longest_palindrome`,
  `reverse_words`, `rotate_string`, `longest_common_prefix`,
  `frequency_sort`, `my_atoi` (clamped to the signed 32-bit range),
  `is_palindrome`, `count_vowels`
- `dsakit.frequency`: `count_frequencies`, `query_counts`, and `main` for the
  `dsakit-freq` command
- `dsakit.combinatorics`: `n_cr`, `pascal_triangle`, `climb_stairs`
- `dsakit.sorting`: `insertion_sort`, `merge_sort`, `quick_sort`,
  `selection_sort`, `bubble_sort`
- `dsakit.arrays`: `largest_element`, `intersection`,
  `max_consecutive_ones`, `remove_duplicates`, `single_number`,
  `move_zeroes`, `rotate_left`, `rotate_right`, `second_largest`,
  `second_smallest`, `max_profit`
- `dsakit.matrix`: `set_matrix_zeros`, `rotate_matrix` (90 degrees
  clockwise), `spiral_order`
- `dsakit.array_problems`: `two_sum_pair`, `has_two_sum`,
  `is_sorted_rotated`, `max_subarray`, `leaders`,
  `longest_subarray_with_sum`, `longest_subarray_with_sum_nonnegative`,
  `majority_element`, `majority_elements_third`, `missing_number`,
  `next_permutation`, `rearrange_by_sign`, `longest_consecutive`,
  `sort_colors`, `count_subarrays_with_sum`
- `dsakit.binary_search`: `lower_bound`, `upper_bound`, `floor_and_ceil`,
  `find_peak_element`, `search_range`, `count_occurrences`,
  `search_rotated`, `search_rotated_with_duplicates`,
  `single_non_duplicate`, `floor_sqrt`
- `dsakit.answers`: `min_eating_speed`, `min_bouquet_days`,
  `smallest_divisor`, `ship_within_days`, `split_array`

## Examples

```python
from dsakit.strings import longest_palindrome, reverse_words
from dsakit.sorting import merge_sort
from dsakit.matrix import spiral_order
from dsakit.binary_search import lower_bound
from dsakit.answers import min_eating_speed

longest_palindrome("babad")           # "bab"
reverse_words("  the sky  is blue ")  # "blue is sky the"
merge_sort([4, 6, 2, 5, 7, 2, 9, 8])  # [2, 2, 4, 5, 6, 7, 8, 9]
spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])  # [1, 2, 3, 6, 9, 8, 7, 4, 5]
lower_bound([1, 2, 2, 3], 2)          # 1
min_eating_speed([7, 15, 6, 3], 8)    # 5
```

## Command line

The `dsakit-freq` command reads whitespace-separated integers from standard
input: a count `n`, then `n` numbers, then a count `q`, then `q` queries. It
prints one `value->count` line for each distinct number, in order of first
appearance, and then one line with the count for each query:

```
dsakit-freq < input.txt
```

For the input `5 1 2 2 3 2 2 2 4` it prints:

```
1->1
2->3
3->1
3
0
```

Malformed input makes it print an error to standard error and exit with
status 1.