"""Tag utility helpers.

Where: src/tunetree/features/metadata/usecases/extraction/_tag_utils.py
What: Provide pure helper routines for parsing and safe metadata tag access.
Why: Share small parsing rules between the format extractors.
"""

from __future__ import annotations

from collections.abc import Iterable

MAX_TAG_NUMBER = 2**32 - 1

__all__ = [
    "MAX_TAG_NUMBER",
    "lowercase_tag_map",
    "non_empty",
    "parse_number",
    "parse_slash_separated",
]


def non_empty(value: str | None) -> str | None:
    """Return ``value`` unless it is ``None`` or blank."""
    if value is None or not value.strip():
        return None
    return value


def lowercase_tag_map(pairs: Iterable[tuple[str, str]]) -> dict[str, str]:
    """Collect ``(key, value)`` tag pairs into a dict keyed by lower-cased key.

    When a key occurs more than once the first value is kept.
    """
    result: dict[str, str] = {}
    for key, value in pairs:
        _ = result.setdefault(key.lower(), value)
    return result


def parse_number(value: str) -> int | None:
    """Parse an unsigned 32-bit base-10 integer, tolerating surrounding whitespace.

    A single leading ``+`` is accepted. Returns ``None`` when ``value`` is not
    such an integer or does not fit in 32 bits.
    """
    cleaned = value.strip()
    digits = cleaned[1:] if cleaned.startswith("+") else cleaned
    if not digits.isascii() or not digits.isdigit():
        return None
    number = int(digits)
    return number if number <= MAX_TAG_NUMBER else None


def parse_slash_separated(value: str) -> tuple[int | None, int | None]:
    """Parse a string in 'number/total' format.

    Returns a tuple (number, total); either side is ``None`` when it is not numeric.
    """
    parts: list[str] = value.split(sep="/") if value else []
    num: int | None = parse_number(parts[0]) if parts else None
    total: int | None = parse_number(parts[1]) if len(parts) > 1 else None
    return num, total
