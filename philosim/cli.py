"""Command-line entry point for the dining-philosophers simulation."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from philosim.parsing import ArgumentError, parse_rules
from philosim.simulation import Simulation


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a simulation from command-line arguments; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        rules = parse_rules(args)
    except ArgumentError as error:
        print(error)
        return 1
    Simulation(rules).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())