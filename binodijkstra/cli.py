"""Command line entry point running the experiment grid."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence
from dataclasses import dataclass, replace

from .experiments import ExperimentResult, append_result, run, write_csv_header


@dataclass(frozen=True)
class Config:
    """Settings for one run of the experiment grid."""

    trials: int = 50
    max_weight: float = 1000.0
    sizes: tuple[int, ...] = (500, 750, 1000, 1250, 1500, 1750, 2000, 2250, 2500)
    cs: tuple[float, ...] = (1.5, 1.75, 2.0)
    output: str = "output.csv"


def _split_list(value: str) -> list[str]:
    if not value:
        return []
    tokens = value.split(",")
    if tokens[-1] == "":
        tokens.pop()
    return tokens


def parse_args(argv: Sequence[str]) -> Config:
    """Build a configuration from ``M=``, ``n=`` and ``c=`` arguments.

    Unknown arguments are reported on standard error and ignored; malformed
    numbers raise ``ValueError``.
    """
    config = Config()
    for arg in argv:
        if arg.startswith("M="):
            config = replace(config, trials=int(arg[2:]))
        elif arg.startswith("n="):
            config = replace(config, sizes=tuple(int(t) for t in _split_list(arg[2:])))
        elif arg.startswith("c="):
            config = replace(config, cs=tuple(float(t) for t in _split_list(arg[2:])))
        else:
            print(f"Unknown argument: {arg}", file=sys.stderr)
    return config


def _report(result: ExperimentResult) -> None:
    print(f"n = {result.n}, c = {result.c:g}, M = {result.trials}")
    print(f"Average time: {result.time.mean:g} s")
    print(f"Average edges: {result.edges.mean:g}")
    print(f"Average links: {result.links.mean:g}")
    print(f"Average swaps: {result.swaps.mean:g}")
    print(f"Average extracts: {result.extracts.mean:g}")
    print(f"Average decrease-prio: {result.decreases.mean:g}")
    print("-" * 50)


def main(argv: Sequence[str] | None = None) -> int:
    """Run every (n, c) combination and record the results as CSV."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        config = parse_args(argv)
    except ValueError as exc:
        print(f"Invalid argument: {exc}", file=sys.stderr)
        return 2

    try:
        write_csv_header(config.output)
    except OSError:
        print(f"Could not open CSV file: {config.output}", file=sys.stderr)
        return 1

    rng = random.Random()
    for n in config.sizes:
        for c in config.cs:
            result = run(n, c, config.trials, config.max_weight, rng)
            _report(result)
            append_result(config.output, result)
    return 0


if __name__ == "__main__":
    sys.exit(main())