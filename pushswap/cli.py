"""Command that prints the instructions sorting the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import InputError, parse_arguments
from .sorter import sort_operations

EXIT_NO_ARGUMENTS = 1
EXIT_ERROR = 1
EXIT_ALREADY_SORTED = 2


def main(argv: Sequence[str] | None = None) -> int:
    """Print one instruction per line that sorts the numbers in ``argv``.

    Returns 1 when no numbers are given, 1 after printing ``Error`` for bad
    input, 2 when the numbers are already in order and 0 otherwise.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return EXIT_NO_ARGUMENTS
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return EXIT_ERROR
    if values == sorted(values):
        return EXIT_ALREADY_SORTED
    operations = sort_operations(values)
    sys.stdout.write("".join(f"{operation}\n" for operation in operations))
    return 0


if __name__ == "__main__":
    sys.exit(main())