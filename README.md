# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of instructions. The numbers start on stack `a`, first number on top.
The program prints the instructions that leave them on `a` in ascending
order from the top, with `b` empty, one instruction per line.

## Instructions

| Name  | Effect                                           |
|-------|--------------------------------------------------|
| `sa`  | swap the top two elements of `a`                 |
| `sb`  | swap the top two elements of `b`                 |
| `ss`  | `sa` and `sb` together                           |
| `pa`  | move the top of `b` onto `a`                     |
| `pb`  | move the top of `a` onto `b`                     |
| `ra`  | rotate `a` up: the top goes to the bottom        |
| `rb`  | rotate `b` up                                    |
| `rr`  | `ra` and `rb` together                           |
| `rra` | rotate `a` down: the bottom goes to the top      |
| `rrb` | rotate `b` down                                  |
| `rrr` | `rra` and `rrb` together                         |

Swaps and rotations on a stack with fewer than two elements, and pushes from
an empty stack, change nothing.

## Usage

Install the package, then pass the numbers as separate arguments, as one
space-separated argument, or both:

```
pushswap 3 2 1
pushswap "4 67 3 87 23"
```

The first command prints:

```
ra
sa
```

Input that is already sorted prints nothing, and with no arguments the
program prints nothing either. The exit status is 0 on success.

Two, three and four numbers are sorted by fixed short sequences. Five or more
are sorted by moving all but three onto `b`, each time choosing the element
that needs the fewest rotations to land in place, then moving them back onto
`a` the same way and finally rotating the smallest value to the top.

## Errors

`Error` is written to standard error and the exit status is 1 when:

- an argument holds anything other than digits, an optional leading `+` or
  `-` on each number, and single spaces between numbers;
- a number does not fit in a signed 32-bit integer;
- a number appears more than once.

## Library use

```python
import io
from pushswap.stacks import Machine
from pushswap.sorting import sort

out = io.StringIO()
machine = Machine([5, 1, 4, 2, 3], out)
sort(machine)
print(out.getvalue().split())
print(list(machine.a))           # [1, 2, 3, 4, 5]
print(len(machine.history))      # number of operations run
```

- `pushswap.stacks.Stack` holds the integers, iterated from top to bottom,
  with `swap`, `rotate`, `reverse_rotate`, `push_onto`, `position`, `top`
  and `is_sorted`.
- `pushswap.stacks.Machine` holds stacks `a` and `b`; its methods `sa` …
  `rrr`, or `apply` with an `Operation` or its name, run an instruction,
  record it in `history` and write its name to `output` when one is given.
- `pushswap.sorting` has `sort`, and the steps it uses: `sort_three`,
  `sort_four`, `sort_large`, `costs_a_to_b`, `costs_b_to_a`,
  `nearest_below` and `nearest_above`.
- `pushswap.commands.Moves` counts planned rotations on each stack;
  `apply` runs them, pairing matching ones into `rr` and `rrr`.
- `pushswap.parsing.parse_arguments` turns command-line strings into
  integers and raises `pushswap.parsing.InputError` on bad input;
  `is_allowed_args`, `is_allowed_token`, `parse_long`, `split_words` and
  `has_duplicates` are the checks it and the command use.

## What it does not do

The package only produces a sequence of instructions. It has no command that
reads instructions back and checks whether they sort a given list.

## Tests

```
pip install -e ".[test]"
pytest
```