"""The classic first program: print a greeting."""

from __future__ import annotations

import sys
from collections.abc import Sequence

_GREETING = "Hello, World!"


def greeting() -> str:
    """Return the greeting text."""
    return _GREETING


def main(argv: Sequence[str] | None = None) -> int:
    """Write the greeting to standard output, with no trailing newline."""
    sys.stdout.write(greeting())
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())