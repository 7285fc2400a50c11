"""Command line entry point: read monsters from a file and run a tournament."""

from __future__ import annotations

import os
import re
import sys
from typing import Optional, Sequence, Union

from scaregames.dot import save_tree_as_dot
from scaregames.monster import Monster
from scaregames.tournament import build_double_elimination, build_single_elimination

WINNERS_FILE = "winners_bracket.dot"
LOSERS_FILE = "losers_bracket.dot"

_POWER = re.compile(r"\s*([+-]?[0-9]+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


def _parse_line(line: str) -> Optional[Monster]:
    name, comma, rest = line.partition(",")
    if not comma:
        return None
    match = _POWER.match(rest)
    if match is None:
        return None
    power = int(match.group(1))
    if not _INT_MIN <= power <= _INT_MAX:
        return None
    return Monster(name.rstrip(" \t\r\n"), power)


def read_competitors(filename: Union[str, os.PathLike]) -> list[Monster]:
    """Read "name, power" lines; lines that do not parse are skipped."""
    with open(filename, encoding="utf-8") as handle:
        return [
            monster
            for monster in (_parse_line(line.rstrip("\n")) for line in handle)
            if monster is not None
        ]


def run_tournament(filename: Union[str, os.PathLike], mode: str) -> Monster:
    """Run a "single" or "double" tournament, write DOT files, return the champion."""
    competitors = read_competitors(filename)

    if mode == "single":
        root = build_single_elimination(competitors)
        if root is None:
            raise ValueError("a tournament needs at least one competitor")
        save_tree_as_dot(WINNERS_FILE, root)
    elif mode == "double":
        root, losers_root = build_double_elimination(competitors)
        save_tree_as_dot(WINNERS_FILE, root)
        save_tree_as_dot(LOSERS_FILE, losers_root)
    else:
        raise ValueError("Invalid mode. Use 'single' or 'double'.")

    return root.winner


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Usage: scaregames <input_file> <single|double>", file=sys.stderr)
        return 1

    input_file, mode = args
    try:
        champion = run_tournament(input_file, mode)
    except OSError as error:
        print(f"Error opening file: {error}", file=sys.stderr)
        return 1
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    print("Tournament completed. DOT files generated.")
    print(f"Champion: {champion}")
    return 0


if __name__ == "__main__":
    sys.exit(main())