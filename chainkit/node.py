"""Node entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

__all__ = ["main"]

GREETING = "Hello, world!"


def _build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="chainkit-node",
        description="Start the node.",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Start the node: parse the command line and print the greeting."""
    parser = _build_parser()
    parser.parse_args(list(argv) if argv is not None else None)
    print(GREETING)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())