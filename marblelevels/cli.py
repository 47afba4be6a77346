"""Command line entry point that prints a level script."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence

from marblelevels.rings import creatures_level, engine_level, galaxy_level, platonic_level
from marblelevels.scatter import moon_level, nebula_level, pandemonium_level
from marblelevels.script import tutorial_level, yinyang_level
from marblelevels.spirals import custom_level, redeye_level, shell_level, whirlpool_level

_LEVELS: dict[str, Callable[[], str]] = {
    "creatures": creatures_level,
    "custom": custom_level,
    "engine": engine_level,
    "galaxy": galaxy_level,
    "moon": moon_level,
    "nebula": nebula_level,
    "pandemonium": pandemonium_level,
    "platonic": platonic_level,
    "redeye": redeye_level,
    "shell": shell_level,
    "tutorial": tutorial_level,
    "whirlpool": whirlpool_level,
    "yinyang": yinyang_level,
}


def level_names() -> list[str]:
    """Return the names of all known levels, sorted."""
    return sorted(_LEVELS)


def generate(name: str) -> str:
    """Return the script of the named level."""
    try:
        builder = _LEVELS[name]
    except KeyError:
        raise ValueError(
            f"unknown level {name!r}; choose from {', '.join(level_names())}"
        ) from None
    return builder()


def main(argv: Sequence[str] | None = None) -> int:
    """Print a level script to standard output."""
    parser = argparse.ArgumentParser(
        prog="marblelevels", description="Print a marble level script."
    )
    parser.add_argument("level", nargs="?", choices=level_names(), help="level to print")
    parser.add_argument("--list", action="store_true", help="list the level names")
    args = parser.parse_args(argv)

    if args.list:
        for name in level_names():
            print(name)
        return 0
    if args.level is None:
        parser.error("a level name is required")
    sys.stdout.write(generate(args.level))
    return 0


if __name__ == "__main__":
    sys.exit(main())