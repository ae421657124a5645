# codedrills

A collection of small, self-contained algorithm drills together with a grader
that walks a configured list of exercises, builds and tests each one, and writes
a scored report.

## Installation

```
pip install .
```

For running the test suite:

```
pip install .[test]
pytest
```

## The drills

Everything lives in plain modules inside the `codedrills` package. None of
them needs anything beyond the standard library.

Data structures:

- `codedrills.linked_list.LinkedList`: a singly linked list with `add`, `get`
  (returns `None` for a position that does not exist), `reverse`, and the class
  method `merge`, which combines two ascending lists into a new ascending list.
- `codedrills.stack.Stack` (`push`, `pop`, `peek`, `clear`, `is_empty`) and
  `codedrills.stack.bracket_match`, which checks that `()`, `{}` and `[]` are
  properly matched and nested.
- `codedrills.queue_stack.Queue` and `codedrills.queue_stack.QueueStack`, a
  stack built from two queues. Taking from an empty one raises `IndexError`.
- `codedrills.heap.Heap`, ordered by a comparator, with `Heap.min_heap()` and
  `Heap.max_heap()`; iterating a heap removes its items in priority order.
- `codedrills.bst.BinarySearchTree`: insertion (duplicates are ignored) and
  membership search, also through `in`.
- `codedrills.graph.UndirectedGraph`: a weighted undirected graph with
  `add_node`, `add_edge`, `nodes` and `edges`.
- `codedrills.traversal.AdjacencyGraph`: a graph on vertices `0..n-1` with
  `bfs` and `dfs`, each returning the visiting order.

Algorithms and puzzles:

```python
from codedrills.sorting import insertion_sort
from codedrills.arrays import find_missing_number, merge_intervals
from codedrills.strings import is_palindrome, are_anagrams
from codedrills.arithmetic import fib, get_sum
from codedrills.base_convert import convert_base
from codedrills.calendar_info import time_info
from codedrills.retirement import retire_time

find_missing_number([1, 2, 4, 5])          # 3
merge_intervals([[1, 4], [4, 5]])          # [[1, 5]]
is_palindrome("Racecar")                   # True
are_anagrams("listen", "silent")           # True
fib(10)                                    # 55
get_sum(-50, -50)                          # -100
convert_base("9(10)", 8)                   # "11"
time_info("2025-01-01")                    # "1,3,1,364,28,0"
retire_time("1971-04", "原法定退休年龄55周岁女职工")  # "2026-08,55.33,4"
```

Further functions:

- `arrays.find_duplicates` and `arrays.intersection`
- `strings.longest_substring_without_repeating_chars`
- `matrix.rotate_matrix_90_degrees`, which rotates a list of rows clockwise in place
- `distinct.count_distinct`, counting distinct comma-separated elements
- `birthday.birthday_probability`
- `change.count_notes`, a greedy count of banknotes for an amount
- `odd_fibonacci.odd_fibonacci_sum`
- `goldbach.goldbach_conjecture` and `goldbach.is_prime`
- `prime_factor.find_max_prime_factor` and `prime_factor.is_probably_prime`
- `calendar_info.is_leap_year`, `calendar_info.days_in_month` and
  `calendar_info.day_of_week`
- `district.count_provinces`, which counts connected groups of cities in
  batches `"1"` to `"5"` of a JSON file (by default `district.json`), and
  `district.count_connected_components` for a single batch

## The grader

`codedrills-grade` reads `exercise_config.json` from the current directory.
The file holds three lists, `easy`, `normal` and `hard`, whose entries look like:

```json
{"name": "algorithm1", "path": "easy/algorithm1.rs", "type": "single_file", "score": 2}
```

Paths are relative to the `exercises` directory. An entry of type
`single_file` is compiled with `rustc --test`, the resulting binary is run and
then removed. An entry of type `cargo_project` must pass `cargo build`,
`cargo test` and `cargo clippy`; its `target` directory is removed afterwards.
Any other type counts as a failure. These tools must be on the `PATH`.

Grade every exercise in one go:

```
codedrills-grade all
```

Or step through them, pausing after each one (enter `q` to stop):

```
codedrills-grade watch
```

A summary is printed at the end and a full report, with per-exercise results
and totals (including the elapsed time in whole seconds), is written to
`report.json`.

## What it does not do

The grader only reports pass or fail for each exercise: the output of the
compiler and of the tests it runs is captured and not shown. It ships no
exercises of its own and knows no exercise types besides `single_file` and
`cargo_project`. The config and report file names are fixed.