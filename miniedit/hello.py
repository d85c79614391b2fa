"""A program that greets the user."""

from __future__ import annotations

import sys


def main(argv: list[str] | None = None) -> int:
    """Print the greeting and return the exit status."""
    sys.stdout.write("Hello\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())