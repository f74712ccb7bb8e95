"""
Lenient number parsing for raw form text.

Form fields hand over whatever the user typed. A leading numeric prefix is
accepted ("85%" -> 85.0, "12abc" -> 12.0); anything else is NaN and maps to
the field's "absent" value instead of an error.
"""

import math
import re
from typing import Optional, Union

_NUMBER_PREFIX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?", re.IGNORECASE)

RawValue = Union[str, int, float, None]


def parse_number(raw: RawValue) -> float:
    if raw is None:
        return math.nan
    if isinstance(raw, bool):
        raise TypeError("Boolean is not a numeric form value")
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        match = _NUMBER_PREFIX.match(raw.strip())
        if not match:
            return math.nan
        value = float(match.group(0))

    # overflowing input such as "1e999" is not a usable number either
    return value if math.isfinite(value) else math.nan


def parse_weight(raw: RawValue) -> float:
    value = parse_number(raw)
    if math.isnan(value) or value == 0:
        return 0.0
    return value


def parse_score(raw: RawValue) -> Optional[float]:
    if raw is None or (isinstance(raw, str) and raw == ""):
        return None
    value = parse_number(raw)
    if math.isnan(value):
        return None
    return value


def parse_target(raw: RawValue) -> Optional[float]:
    # "0" counts as no target, same as an empty custom field
    value = parse_number(raw)
    if math.isnan(value) or value == 0:
        return None
    return value
