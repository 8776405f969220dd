from __future__ import annotations

import re
from typing import Optional

# Signed 64-bit limits; bounds and guesses must fit a Java-style long.
LONG_MIN: int = -(2**63)
LONG_MAX: int = 2**63 - 1
_LONG_DIGITS = len(str(LONG_MAX))

_INTEGER_RE = re.compile(r"([+-]?)0*([0-9]*)")


def parse_long(text: Optional[str]) -> Optional[int]:
    """Parse ``text`` as a base-10 signed 64-bit integer.

    Returns None for anything that is not a plain ASCII integer literal
    (whitespace, underscores, decimals, non-ASCII digits) or that falls outside
    the signed 64-bit range. Leading zeros are allowed in any number.
    """
    if not text:
        return None
    match = _INTEGER_RE.fullmatch(text)
    if match is None:
        return None
    sign, digits = match.groups()
    if not digits:
        # Only zeros (or a bare sign) left after stripping
        return 0 if text.lstrip("+-") else None
    # Reject before int() so huge inputs never hit the str-to-int digit limit
    if len(digits) > _LONG_DIGITS:
        return None
    value = -int(digits) if sign == "-" else int(digits)
    if value < LONG_MIN or value > LONG_MAX:
        return None
    return value


def is_valid_number(text: Optional[str]) -> bool:
    """Return True if ``text`` is a non-negative integer that fits in 64 bits."""
    value = parse_long(text)
    return value is not None and value >= 0


def is_valid_range(lower_text: Optional[str], upper_text: Optional[str]) -> bool:
    """Return True if both bounds are valid numbers and lower <= upper."""
    if not is_valid_number(lower_text) or not is_valid_number(upper_text):
        return False
    return parse_long(lower_text) <= parse_long(upper_text)  # type: ignore[operator]
