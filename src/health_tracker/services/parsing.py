"""Text and number parsing helpers for nutrition estimation.

Pattern grammars (all case-insensitive):

``QUANTITY``
    A standalone number, ``DIGITS ["." DIGITS]``, not glued to a letter,
    digit or ``%`` on either side (a trailing sentence period is fine).
    ``"2 eggs"``, ``"1.5 cups"`` and ``"ate 3."`` yield a quantity;
    ``"200g"``, ``"b12"`` and ``"0%"`` do not.

``GRAMS``
    ``NUMBER SPACES? ("g" | "gram" | "grams")`` ending at a word boundary, e.g.
    ``"200g"``, ``"250 g"``, ``"1.5 grams"``. ``"2 glasses"`` does not match.

``MULTIPACK``
    ``INT SPACES? ("x" | "×") SPACES? NUMBER SPACES? GRAM_UNIT``, e.g.
    ``"3 x 60 g"``; the total is count times unit weight.
"""

import math
import re
from decimal import ROUND_HALF_UP, Decimal

_NUMBER = r"\d+(?:\.\d+)?"
_GRAM_UNIT = r"(?:grams?|g)\b"

QUANTITY_PATTERN = re.compile(rf"(?<![\w.%])({_NUMBER})(?![\w%]|\.\d)")
GRAMS_PATTERN = re.compile(rf"({_NUMBER})\s*{_GRAM_UNIT}", re.IGNORECASE)
MULTIPACK_PATTERN = re.compile(
    rf"(\d+)\s*[x×]\s*({_NUMBER})\s*{_GRAM_UNIT}", re.IGNORECASE
)
_LEADING_NUMBER = re.compile(rf"^\s*({_NUMBER})")
# Floats at or above 2**52 have no fractional part left to round.
_FLOAT_INTEGER_LIMIT = 2.0**52


def to_number(value: object) -> float:
    """Coerce an upstream value to a non-negative float, 0 when unusable."""
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, int | float):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return 0.0
    else:
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def positive_number(value: object) -> float | None:
    """Return a positive number from a numeric or leading-number string value."""
    number = to_number(value)
    if number == 0 and isinstance(value, str):
        match = _LEADING_NUMBER.match(value)
        if match:
            number = _finite(float(match.group(1))) or 0.0
    return number if number > 0 else None


def round_half_up(value: float, digits: int = 0) -> float:
    """Round half away from zero, as JavaScript's Math.round does for positives."""
    if not math.isfinite(value) or abs(value) >= _FLOAT_INTEGER_LIMIT:
        return value
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def extract_quantity(text: str) -> float | None:
    """Return the first standalone number in the text."""
    match = QUANTITY_PATTERN.search(text)
    if match is None:
        return None
    return _finite(float(match.group(1)))


def extract_grams(text: str) -> float | None:
    """Return the first explicit gram amount in the text."""
    match = GRAMS_PATTERN.search(text)
    if match is None:
        return None
    return _finite(float(match.group(1)))


def extract_multipack_grams(text: str) -> float | None:
    """Return the total grams of an ``N x M g`` multipack description."""
    match = MULTIPACK_PATTERN.search(text)
    if match is None:
        return None
    return _finite(float(match.group(1)) * float(match.group(2)))


def _finite(number: float) -> float | None:
    """Drop digit strings too long to parse into a finite float."""
    return number if math.isfinite(number) else None
