# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a small set of
operations. The sorter prints the operations it uses; the checker reads a list of
operations and tells you whether they sort the numbers.

## Operations

| Name  | Effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the top two elements of `a`              |
| `sb`  | swap the top two elements of `b`              |
| `ss`  | `sa` and `sb` together                        |
| `pa`  | move the top of `b` onto `a`                  |
| `pb`  | move the top of `a` onto `b`                  |
| `ra`  | rotate `a` upwards (top goes to the bottom)   |
| `rb`  | rotate `b` upwards                            |
| `rr`  | `ra` and `rb` together                        |
| `rra` | rotate `a` downwards (bottom goes to the top) |
| `rrb` | rotate `b` downwards                          |
| `rrr` | `rra` and `rrb` together                      |

Swaps and rotations on a stack with fewer than two elements do nothing.

## Installing

```
pip install .
```

## Sorting

Give the numbers as arguments, the first one being the top of stack `a`:

```
push-swap 3 1 2
```

Each operation is printed on its own line. Exit statuses:

- `0` – operations were printed;
- `1` – no numbers were given (nothing is printed), or the input was bad;
- `2` – the numbers are already in ascending order (nothing is printed).

Bad input is an argument that is not a decimal integer (only digits and one
leading `+` or `-` are accepted), a value outside the 32-bit signed range, or a
repeated number. It prints `Error` to standard error.

## Checking

The checker takes the same numbers and reads operations from standard input, one
per line:

```
push-swap 3 1 2 | push-swap-checker 3 1 2
```

It prints `OK` when the operations leave `a` sorted and `b` empty, and `KO`
otherwise, exiting with status 0. A final piece of input not ended by a newline
is ignored. An unknown operation, a push from an empty stack or invalid numbers
print `Error` to standard error and exit with status 1. With fewer than two
numbers the checker reads nothing, prints nothing and exits with status 2.

## Using it from Python

```python
from pushswap.sorter import sort_operations
from pushswap.checker import run_instructions

ops = sort_operations([3, 1, 2])
print([str(op) for op in ops])         # ['ra']
print(run_instructions([3, 1, 2], ops))  # ([1, 2, 3], [])
```

- `pushswap.stack` – `Stack`, `Node`, the `Operation` enum,
  `apply_operation` and `EmptyStackError`.
- `pushswap.parsing` – `parse_int`, `parse_arguments`, `has_duplicates`,
  `has_only_number_chars` and `InputError`.
- `pushswap.sorter` – `sort_operations`, plus the pieces of the strategy:
  `assign_order`, `target_in_a` and `move_price`.
- `pushswap.checker` – `parse_instruction`, `split_instructions`,
  `run_instructions` and the checker's `main`.
- `pushswap.cli` – the sorter's `main`.

## Helper modules

The package also carries small general-purpose helpers:

- `pushswap.chars` – `atoi`, `itoa`, ASCII classification (`is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`) and `to_lower` / `to_upper`.
- `pushswap.memory` – byte-buffer functions `bzero`, `calloc`, `memchr`,
  `memcmp`, `memcpy`, `memmove`, `memset`.
- `pushswap.strings` – `split`, `word_count`, `strchr`, `strrchr`, `strdup`,
  `striteri`, `strmapi`, `strjoin`, `strlcpy`, `strlcat`, `strlen`, `strncmp`,
  `strnstr`, `strtrim`, `substr`.
- `pushswap.linked_list` – `LinkedList` and `ListNode`.
- `pushswap.output` – `put_char`, `put_str`, `put_line`, `put_number`, writing
  to a file descriptor.
- `pushswap.line_reader` – `LineReader` and `get_next_line`, reading a file
  descriptor line by line.
- `pushswap.formatting` – `format_text` and `print_formatted`, a formatter
  for `%c %s %p %d %i %u %x %X %%` without flags, widths or precision.

## Running the tests

```
pip install .[test]
pytest
```