"""Request parameter helpers."""

import math
import re

_LEADING_INTEGER = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]*|[0-9]+)")


def parse_int(raw: str | None) -> int | float:
    """Parse the integer at the start of ``raw``.

    Leading whitespace and trailing garbage are tolerated (``" 12abc"`` gives
    12). Only ASCII digits are read, and a ``0x`` prefix switches to base 16
    (``"0x1A"`` gives 26). When no integer can be read, ``math.nan`` is
    returned instead of raising; callers forward it unchanged.
    """
    if raw is None:
        return math.nan
    match = _LEADING_INTEGER.match(raw)
    if match is None:
        return math.nan

    sign, digits = match.groups()
    if digits[:2] in ("0x", "0X"):
        if len(digits) == 2:
            return math.nan
        value = int(digits[2:], 16)
    else:
        value = int(digits)
    return -value if sign == "-" else value
