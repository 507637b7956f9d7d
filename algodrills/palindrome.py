"""Checking whether a non-negative integer reads the same reversed."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

_ULONG_MODULUS = 1 << 64
_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def is_palindrome_number(n: int) -> bool:
    """Tell whether the decimal digits of ``n`` form a palindrome."""
    if n < 0:
        raise ValueError("n must not be negative")
    digits = str(n)
    return digits == digits[::-1]


def _parse_ulong(text: str) -> int:
    match = _LEADING_INTEGER.match(text)
    value = int(match.group(1)) if match else 0
    return value % _ULONG_MODULUS


def main(argv: Sequence[str] | None = None) -> int:
    """Report whether the number given as the first argument is a palindrome."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        prog = sys.argv[0] if sys.argv and sys.argv[0] else "palindrome"
        print(f"Usage: {prog} arg", file=sys.stderr)
        return 1
    n = _parse_ulong(args[0])
    verdict = "" if is_palindrome_number(n) else "not "
    print(f"{n} is {verdict}a palindrome.")
    return 0