"""Command-line entry point: print the operations that sort the arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .algorithms import little_sort, normalize, radix_sort
from .parsing import PushSwapError, check_unique, parse
from .piles import is_sorted
from .stacks import Stacks

_LITTLE_LIMIT = 6


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the integers given as arguments, writing one operation per line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        sys.stderr.write("")
        return 1
    try:
        values = parse(args)
        check_unique(values)
    except PushSwapError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    if is_sorted(values):
        return 0
    stacks = Stacks(normalize(values))
    if stacks.size_a <= _LITTLE_LIMIT:
        little_sort(stacks)
    else:
        radix_sort(stacks)
    if is_sorted(stacks.a):
        sys.stdout.write("lets go")
    return 0


if __name__ == "__main__":
    sys.exit(main())