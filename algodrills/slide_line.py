"""Sliding and merging a line of numbers the way tiles move in 2048."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Sequence
from enum import IntEnum

LINE_SIZE = 32

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


class Direction(IntEnum):
    """Which way the numbers slide."""

    LEFT = 0
    RIGHT = 1


def _slide_left(values: list[int]) -> list[int]:
    tiles = [value for value in values if value != 0]
    merged: list[int] = []
    pending = iter(tiles)
    for tile in pending:
        following = next(pending, None)
        if following is None:
            merged.append(tile)
        elif following == tile:
            merged.append(tile * 2)
        else:
            merged.append(tile)
            # The unmatched tile gets its own chance to merge with the next one.
            rest = [following, *pending]
            return merged + _slide_left(rest) + [0] * (len(values) - len(tiles))
    return merged + [0] * (len(values) - len(merged))


def slide_line(line: Iterable[int], direction: Direction | int) -> list[int]:
    """Return ``line`` slid towards ``direction``, equal neighbours merged once."""
    try:
        direction = Direction(direction)
    except ValueError:
        raise ValueError(f"unknown direction: {direction!r}") from None
    values = list(line)
    if direction is Direction.LEFT:
        return _slide_left(values)
    return _slide_left(values[::-1])[::-1]


def _parse_int(text: str) -> int:
    match = _LEADING_INTEGER.match(text)
    return int(match.group(1)) if match else 0


def _format_line(values: Sequence[int]) -> str:
    return "Line: " + ", ".join(str(value) for value in values)


def main(argv: Sequence[str] | None = None) -> int:
    """Slide the numbers given on the command line to the left or the right."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        prog = sys.argv[0] if sys.argv and sys.argv[0] else "slide_line"
        print(f"Usage: {prog} <R/L> <n1> [n2...]", file=sys.stderr)
        return 1

    line = [_parse_int(arg) for arg in args[1 : 1 + LINE_SIZE]]
    print(_format_line(line))

    letter = args[0][:1]
    if letter == "L":
        direction = Direction.LEFT
        print("Slide to the left")
    elif letter == "R":
        direction = Direction.RIGHT
        print("Slide to the right")
    else:
        print(f"Unknown direction '{letter}'. Please use 'L' or 'R'", end="", file=sys.stderr)
        return 1

    print(_format_line(slide_line(line, direction)))
    return 0