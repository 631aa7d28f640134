"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from philosophers.parsing import ArgumentError, parse_args
from philosophers.simulation import Simulation

EXIT_FAILURE = 2


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, run the simulation and return the exit status.

    Invalid arguments print an error line and yield status 2.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_args(args)
    except ArgumentError as exc:
        print(f"Error: {exc}")
        return EXIT_FAILURE
    Simulation(settings).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())