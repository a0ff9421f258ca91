"""rem -> px value conversion.

The converter scans a declaration value (or an at-rule parameter string) for
numbers suffixed with ``rem`` and replaces each with its pixel equivalent::

    >>> UnitConverter(root_value=8).convert("2rem .5rem")
    '16px 4px'
"""

from __future__ import annotations

import math
import re

__all__ = ["SOURCE_UNIT", "TARGET_UNIT", "UNIT_RE", "UnitConverter", "to_fixed", "format_number"]

SOURCE_UNIT = "rem"
TARGET_UNIT = "px"

# Quoted strings and url() are consumed whole (without a numeric group) so that
# anything that looks like a length inside them is left alone.
UNIT_RE = re.compile(
    r"""
    "[^"]+"                          # double-quoted string
    | '[^']+'                        # single-quoted string
    | url\([^)]+\)                   # url(...)
    | (?P<number>[-+]?\d*\.?\d+)rem\b  # signed decimal immediately followed by rem
    """,
    re.VERBOSE,
)


def to_fixed(number: float, precision: int) -> float:
    """Round *number* to *precision* decimals, halves rounding up.

    The value is first floored at one extra decimal place, then that digit is
    rounded, which keeps float noise below the last kept decimal out of the
    result.
    """
    multiplier = 10 ** (precision + 1)
    whole_number = math.floor(number * multiplier)
    return math.floor(whole_number / 10 + 0.5) * 10 / multiplier


def format_number(value: float, precision: int) -> str:
    """Render *value* without trailing zeros or a dangling decimal point."""
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


class UnitConverter:
    """Replace every ``<number>rem`` in a string with ``<number * root_value>px``.

    Occurrences whose magnitude is below *min_unit_value*, or whose pixel value
    does not fit in a float at the configured precision, are kept verbatim,
    and a result that rounds to zero is written as a bare ``0``.
    """

    def __init__(
        self,
        root_value: float = 8,
        unit_precision: int = 5,
        min_unit_value: float = 0,
    ) -> None:
        self.root_value = root_value
        self.unit_precision = unit_precision
        self.min_unit_value = min_unit_value

    @staticmethod
    def may_contain_units(text: str) -> bool:
        """Cheap pre-check: False means *text* has nothing to convert."""
        return SOURCE_UNIT in text

    def replace_match(self, match: re.Match[str]) -> str:
        """Replacement callback for a single :data:`UNIT_RE` match."""
        number = match.group("number")
        if not number:
            return match.group(0)
        units = float(number)
        if abs(units) < self.min_unit_value:
            return match.group(0)
        scaled = units * self.root_value
        if not math.isfinite(scaled):
            return match.group(0)
        try:
            fixed = to_fixed(scaled, self.unit_precision)
        except OverflowError:
            return match.group(0)
        if fixed == 0:
            return "0"
        return format_number(fixed, self.unit_precision) + TARGET_UNIT

    def convert(self, value: str) -> str:
        """Return *value* with every rem occurrence converted, left to right."""
        return UNIT_RE.sub(self.replace_match, value)
