"""Command that checks whether a list of instructions sorts the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .parsing import InputError, parse_arguments, parse_int
from .stack import EmptyStackError, Operation, Stack, apply_operation


def parse_instruction(line: str) -> Operation:
    """Return the instruction named exactly by ``line``."""
    try:
        return Operation(line)
    except ValueError:
        raise InputError(f"unknown instruction: {line!r}") from None


def split_instructions(text: str) -> list[str]:
    """Return the newline-terminated lines of ``text``.

    A trailing piece without a newline is not an instruction and is dropped.
    """
    *complete, _unterminated = text.split("\n")
    return complete


def run_instructions(
    values: Sequence[int], instructions: Iterable[Operation | str]
) -> tuple[list[int], list[int]]:
    """Apply ``instructions`` to a stack A holding ``values`` and an empty stack B.

    Returns the final contents of A and B, top first. Raises
    :class:`InputError` for an unknown instruction and
    :class:`EmptyStackError` for a push from an empty stack.
    """
    stack_a = Stack(values)
    stack_b = Stack()
    for instruction in instructions:
        apply_operation(parse_instruction(str(instruction)), stack_a, stack_b)
    return stack_a.values(), stack_b.values()


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print ``OK`` or ``KO``.

    Returns 2 when fewer than two numbers are given, 1 after printing
    ``Error`` for bad numbers or instructions, and 0 otherwise.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if len(args) <= 1:
            for arg in args:
                parse_int(arg)
            return 2
        values = parse_arguments(args)
        final_a, final_b = run_instructions(values, split_instructions(sys.stdin.read()))
    except (InputError, EmptyStackError):
        sys.stderr.write("Error\n")
        return 1
    sorted_ok = final_a == sorted(final_a) and not final_b
    sys.stdout.write("OK\n" if sorted_ok else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())