# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
fixed set of operations. It prints the operations it performs, one per
line. Replaying them on the input leaves stack `a` sorted in ascending
order, with the smallest number on top.

The operations used are:

| Operation | Effect |
|-----------|--------|
| `sa`  | swap the top two values of `a` |
| `pa`  | move the top of `b` onto `a` |
| `pb`  | move the top of `a` onto `b` |
| `ra`  | rotate `a` up: the top element goes to the bottom |
| `rra` | rotate `a` down: the bottom element goes to the top |

Stacks of two to five numbers get fixed move sequences. Larger stacks
are sorted with a binary radix sort on each number's rank, where the
smallest number has rank 0.

## Installation

```
pip install .
```

## Command line

Pass the numbers as separate arguments:

```
push-swap 3 1 2
```

or as one space-separated argument:

```
push-swap "3 1 2"
```

Output for that input:

```
ra
```

The same command can be run as `python -m pushswap.cli 3 1 2`.

When the input is already sorted, or there are no arguments, nothing is
printed. `Error` is printed (without a trailing newline) and nothing is
sorted when:

- an argument is not an optional `+` or `-` followed by digits,
- a value lies outside the 32-bit signed range, or
- a value occurs twice.

The exit status is 0 in every case.

## Library use

```python
from pushswap.cli import solve

solve(["5", "4", "3", "2", "1"])   # list of operation names, in order
```

- `pushswap.parse` checks and converts arguments. `parse_values(argv)`
  returns the integers. `check_arguments(argv)` returns the validated
  tokens. Both raise `InputError`, a `ValueError`, on bad input.
  `tokens(argv)` splits a single argument on spaces. `is_number(text)`
  checks one token.
- `pushswap.stack.Stacks(values)` holds the two stacks as `a` and `b`.
  It has the operations as methods (`sa`, `pa`, `pb`, `ra`, `rra`), and
  each call is appended to its `operations` list. It also has
  `values()`, `is_sorted()`, `min_node()` and `max_node()`. Every
  element is a `Node` with `data` and `index` (its rank), and ranks are
  assigned by `index_stack(nodes)`.
- `pushswap.sort` sorts a `Stacks` in place. `sort_stack` picks the
  strategy by size from `sort_three`, `sort_four`, `sort_five` and
  `radix_sort`.

The package also has small general helpers:

- `pushswap.convert`: `atoi` and `itoa`.
- `pushswap.strings`: `split`, `substr`, `strtrim`, `strncmp`,
  `strlcpy` and related functions.
- `pushswap.chars`: character-code tests and case mapping.
- `pushswap.memory`: byte-buffer fill, search, compare and copy.
- `pushswap.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`
  for writing to a text stream.

## What it does not do

The sorter only produces operations. It does not read a list of
operations back to check it against an input. It uses only `sa`, `pa`,
`pb`, `ra` and `rra`; the other stack-`b` and combined operations
(`sb`, `ss`, `rb`, `rr`, `rrb`, `rrr`) are not provided.

## Running the tests

```
pip install ".[test]"
pytest
```