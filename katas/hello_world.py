"""The classic greeting."""

from __future__ import annotations

import argparse

_COMMAND_GREETING = "Hello, world!"


def hello() -> str:
    """Return the greeting."""
    return "Hello, World!"


def main(argv: list[str] | None = None) -> int:
    """Parse the command line, print the greeting and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="katas", description="Print a friendly greeting."
    )
    parser.parse_args(argv)
    print(_COMMAND_GREETING)
    return 0