"""Small text helpers with the exact semantics the scene parser relies on."""

from __future__ import annotations

_ATOI_SPACES = "\t\n \v\f\r"
_LONG_MAX = 9223372036854775807


def c_atoi(text: str) -> int:
    """Parse a leading integer the way C's atoi does, with 32-bit wrap-around.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. A magnitude past the 64-bit signed range gives -1 for positive
    input and 0 for negative input.
    """
    rest = text.lstrip(_ATOI_SPACES)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        result = result * 10 + (ord(char) - ord("0"))
        if result > _LONG_MAX:
            return -1 if sign == 1 else 0
    value = (result * sign) & 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def split_fields(text: str, sep: str) -> list[str]:
    """Split on a separator character, dropping empty fields."""
    return [part for part in text.split(sep) if part]


def trim(text: str, chars: str) -> str:
    """Remove any of the given characters from both ends."""
    return text.strip(chars)