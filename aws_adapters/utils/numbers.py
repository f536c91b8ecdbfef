"""
Strict decimal integer parsing for string-encoded API values.
"""

import re

_DECIMAL_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_decimal(value: str) -> int | None:
    """
    Parse a plain base-10 integer string.

    Underscores, surrounding whitespace and non-ASCII digits are rejected,
    which int() alone would accept.

    Returns:
        The integer, or None when value is not a plain decimal
    """
    if not _DECIMAL_PATTERN.fullmatch(value):
        return None
    return int(value)
