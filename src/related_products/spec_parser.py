"""Numeric parsing for product spec values.

Spec values arrive either as native numbers or as strings carrying units
("550W", "10kWh", "97.6%"). Everything that compares specs numerically goes
through parse_leading_number.
"""

from __future__ import annotations

import math
import re

# Optional sign, then digits with optional fraction (or ".5"), optional exponent
_LEADING_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_leading_number(value: object) -> float | None:
    """Extract the leading numeric portion of a spec value.

    Examples:
        550 → 550.0
        "550W" → 550.0
        " 3.5 kW" → 3.5
        "2384×1096×35mm" → 2384.0
        "IEC, CE" → None

    Returns:
        The parsed number, or None when the value has no leading number.
        Booleans and non-finite numbers are treated as unparseable.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        match = _LEADING_NUMBER_RE.match(value.lstrip())
        if not match:
            return None
        number = float(match.group(0))
    else:
        return None
    if not math.isfinite(number):
        return None
    return number
