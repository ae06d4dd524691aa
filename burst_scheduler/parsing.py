from __future__ import annotations

import re
from typing import Iterable, List

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

# ASCII only: C isspace() and isdigit() in the "C" locale.
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]+)")


def atoi(token: str) -> int:
    """
    Parse the leading integer of `token`, yielding 0 when there is none.

    Parsing is deliberately permissive: "12abc" gives 12 and "abc" gives 0
    rather than an error. Values outside the 32-bit int range saturate at
    INT_MIN / INT_MAX.
    """
    match = _LEADING_INT.match(token)
    if match is None:
        return 0

    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    # Anything longer than 10 digits is out of range; skip int() on it.
    magnitude = int(digits) if len(digits) <= 10 else INT_MAX + 1

    value = -magnitude if sign == "-" else magnitude
    return max(INT_MIN, min(INT_MAX, value))


def parse_bursts(tokens: Iterable[str]) -> List[int]:
    return [atoi(tok) for tok in tokens]
