# problemset

Plain-Python solutions to a collection of classic algorithm problems.
Every solution is an ordinary function (or a small class) that takes
built-in Python values and returns built-in Python values. The package
has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `problemset.subarrays` | `shortest_subarray`, `sum_subarray_mins` |
| `problemset.number_theory` | `nth_magical_number`, `sum_subseq_widths` |
| `problemset.structures` | `FreqStack` (`push`, `pop`, `len()`), `ParkingSystem` (`add_car`) |
| `problemset.text_parsing` | `ambiguous_coordinates`, `parse_bool_expr`, `array_strings_are_equal`, `max_repeating`, `interpret`, `count_consistent_strings` |
| `problemset.graphs` | `reachable_nodes` |
| `problemset.grids` | `shortest_bridge`, `best_coordinate` |
| `problemset.packing` | `box_delivering`, `maximum_units`, `minimum_boxes`, `maximum_score` |
| `problemset.sequences` | `largest_altitude`, `count_balls`, `check_sorted_rotated`, `can_choose`, `min_operations_to_move_balls`, `closest_cost` |
| `problemset.words` | `halves_are_alike`, `largest_merge`, `min_operations_alternating`, `count_homogenous`, `merge_alternately`, `count_matches` |
| `problemset.arrays` | `min_operations_equal_sum`, `nearest_valid_point`, `check_powers_of_three`, `min_elements`, `array_sign`, `min_operations_increasing`, `find_k_distant_indices`, `check_x_matrix`, `match_players_and_trainers`, `average_value`, `apply_operations` |
| `problemset.characters` | `beauty_sum`, `second_highest`, `num_different_integers`, `square_is_white`, `check_if_pangram`, `get_lucky`, `final_value_after_operations`, `minimum_moves`, `remove_anagrams` |
| `problemset.windows` | `maximum_subarray_sum`, `subarray_lcm` |
| `problemset.assorted` | `most_popular_creator`, `convert_temperature`, `is_circular_sentence`, `divide_players`, `hanota` |

## Examples

```python
from problemset.subarrays import shortest_subarray
from problemset.text_parsing import parse_bool_expr
from problemset.structures import FreqStack
from problemset.assorted import hanota

shortest_subarray([2, -1, 2], 3)        # 3
parse_bool_expr("|(&(t,f,t),!(t))")     # False

stack = FreqStack()
for value in (5, 7, 5, 7, 4, 5):
    stack.push(value)
stack.pop()                             # 5, the most frequent value

a, b, c = [2, 1, 0], [], []
hanota(a, b, c)                         # moves every disk from a to c
c                                       # [2, 1, 0]
```

## Behaviour notes

- Results that the problems define modulo 10^9 + 7 are returned already
  reduced.
- Inputs that a problem cannot accept (for example an unknown rule key in
  `count_matches`, a malformed expression in `parse_bool_expr`, or a
  non-square grid in `shortest_bridge`) raise `ValueError`.
  `FreqStack.pop` on an empty stack raises `IndexError`.
- `hanota` changes the lists you pass in; the end of each list is the top
  of its peg. `shortest_bridge` works on a copy and leaves its grid as it
  was.

## What it does not do

This is a library only: there is no command-line program, no input
reading or output printing. Call the functions from your own code.