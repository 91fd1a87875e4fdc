# exercisekit

A collection of classic programming exercises written as small Python
functions and classes: number puzzles, base conversions, sorting and
searching, string handling, simple data structures, trees and graphs,
dynamic programming, text patterns, round-robin scheduling, SHA-3 and a
console tic-tac-toe game. It has no dependencies outside the standard library.

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
| `exercisekit.numbers` | `clock_add`, `is_even`, `is_leap_year`, `is_prime`, `primes_in_interval`, `count_primes`, `is_armstrong`, `is_neon`, `is_happy`, `gcd`, `lcm`, `factorial`, `power`, `power_mod`, `reverse_number`, `century`, `quadrant`, `can_form_triangle`, `fibonacci`, `fizzbuzz`, `calculate`, `total`, `average`, `min_max`, `matrix_multiply`, `random_in_range` |
| `exercisekit.conversions` | `binary_to_decimal`, `binary_to_octal`, `decimal_to_binary`, `decimal_to_octal`, `roman_to_decimal` |
| `exercisekit.sorting` | `insertion_sort`, `selection_sort`, `quick_sort`, `merge_sort`, `shell_sort`, `bubble_sort` |
| `exercisekit.searching` | `binary_search`, `linear_search` |
| `exercisekit.text` | `is_anagram`, `is_palindrome`, `reverse_string`, `sort_string`, `zigzag`, `count_characters` (returns `CharacterCounts`), `word_frequencies`, `is_vowel`, `is_alpha`, `longest_common_subsequence`, `postfix_to_infix` |
| `exercisekit.structures` | `MinHeap`, `PriorityQueue`, `BoundedQueue`, `Stack` |
| `exercisekit.trees` | `TreeNode`, `build_tree`, `postorder`, `are_mirror` |
| `exercisekit.graphs` | `Graph` (adjacency lists, `bfs`), `tree_diameter` |
| `exercisekit.dp` | `knapsack`, `subset_sum`, `is_jolly` |
| `exercisekit.patterns` | `floyd_triangle`, `pascal_triangle`, `star_pattern`, `rule30_step`, `rule30`, `hanoi_moves` |
| `exercisekit.scheduling` | `Process`, `ProcessResult`, `Schedule`, `round_robin` |
| `exercisekit.sha3` | `keccak_f`, `sha3`, `sha3_512_hex`, `main` |
| `exercisekit.tictactoe` | `Board`, `main` |

A few behaviours worth knowing:

- Invalid input raises an exception (`ValueError`, `IndexError` or
  `OverflowError`) and no sentinel value is returned. For example,
  `primes_in_interval` rejects a bound of 1, `count_primes` accepts `n` up
  to 2 000 000, and `calculate` accepts `+ - * /` or the menu numbers 1–4.
- The sorting functions take any iterable and return a new sorted list.
  The input is not modified.
- `binary_search` and `linear_search` return the index, or `None` when the
  target is absent.
- `PriorityQueue.pop` removes the entry with the largest priority.
  `items()` lists entries from the lowest priority to the highest.
- `MinHeap`, `PriorityQueue` and `BoundedQueue` have a capacity.
  Inserting into a full container raises `OverflowError`.
- `Graph.add_edge` puts each new neighbour first, so `bfs` visits the
  newest neighbours first.
- `round_robin` returns a `Schedule` whose results are in completion order.
  It has `average_waiting` and `average_turnaround` properties.
- `sha3(message, bits)` accepts digest sizes that are a multiple of 8 and
  shorter than 800 bits. `sha3_512_hex` returns upper-case hexadecimal.

## Examples

```python
from exercisekit.numbers import gcd, fizzbuzz
from exercisekit.conversions import roman_to_decimal
from exercisekit.dp import knapsack, is_jolly
from exercisekit.sorting import merge_sort
from exercisekit.structures import Stack

gcd(5, 2)                                          # 1
fizzbuzz(5)                                        # ['1', '2', 'Fizz', '4', 'Buzz']
roman_to_decimal("MCMIV")                          # 1904
knapsack(50, [10, 20, 30], [60, 100, 120])         # 220
is_jolly([11, 7, 4, 2, 1, 6])                      # True
merge_sort([12, 11, 13, 5, 6, 7])                  # [5, 6, 7, 11, 12, 13]

stack = Stack()
stack.push(1)
stack.push(2)
stack.pop()                                        # 2
```

## Command-line tools

Print the SHA3-512 digest of the first argument in upper-case hexadecimal.
If no argument is given, nothing is printed:

```
exercisekit-sha3 "some text"
```

Play tic-tac-toe for two players in the terminal. X moves first. Each player
enters the number of a free field from 1 to 9:

```
exercisekit-tictactoe
```

## What it does not do

The tic-tac-toe game is only for two human players at the same keyboard.
It has no computer opponent, and games are not saved. The package has no
interactive menus for its other exercises. Those exercises are available
only as functions and classes to call from Python.