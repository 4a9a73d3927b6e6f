"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from philosim.parsing import ArgumentError, parse_arguments
from philosim.simulation import Table

USAGE = (
    "usage: philosim number_of_philosophers time_to_die time_to_eat "
    "time_to_sleep [number_of_times_each_philosopher_must_eat]"
)


def run_simulation(args: Sequence[str], out: TextIO | None = None) -> int:
    """Validate ``args``, run one simulation writing its log to ``out`` and return 0.

    Raises :class:`ArgumentError` when the arguments are not acceptable.
    """
    settings = parse_arguments(args)
    table = Table(settings, out if out is not None else sys.stdout)
    table.run()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation from command-line arguments; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    out = sys.stdout
    try:
        return run_simulation(args, out)
    except ArgumentError as error:
        out.write(f"{error.line}\n")
        out.flush()
        return 1


if __name__ == "__main__":
    sys.exit(main())