"""Command entry point that runs a solution once per test case."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from typing import Any, TextIO


def solve(out: TextIO | None = None) -> None:
    """Solve a single case."""
    print(5, file=sys.stdout if out is None else out)


def run_cases(solve: Callable[[], Any], cases: int) -> list:
    """Call ``solve`` once for each case and collect what it returns."""
    return [solve() for _ in range(cases)]


def _first_token(stream: TextIO) -> str | None:
    for line in stream:
        tokens = line.split()
        if tokens:
            return tokens[0]
    return None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="cpkit", description="Run the solution for each test case.")
    parser.add_argument(
        "-t",
        "--read-cases",
        action="store_true",
        help="read the number of test cases from the first token of standard input",
    )
    args = parser.parse_args(argv)

    cases = 1
    if args.read_cases:
        token = _first_token(sys.stdin)
        if token is None:
            parser.error("expected the number of test cases on standard input")
        try:
            cases = int(token)
        except ValueError:
            parser.error(f"invalid number of test cases: {token!r}")

    run_cases(solve, cases)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())