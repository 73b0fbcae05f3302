"""Leading quantity / unit detection for raw ingredient lines."""
from __future__ import annotations
import re
from typing import Optional, Tuple

from recipe_saviour.utilities.constants import QUANTITY_UNITS, VULGAR_FRACTIONS

_MIXED_RE = re.compile(r'^(\d+)([' + ''.join(VULGAR_FRACTIONS) + r'])$')
_FRACTION_RE = re.compile(r'^(\d+(?:\.\d+)?)/(\d+(?:\.\d+)?)$')
_RANGE_RE = re.compile(r'^(\d+(?:\.\d+)?)[-–](\d+(?:\.\d+)?)$')
_NUMBER_RE = re.compile(r'^\d+(?:\.\d+)?$|^\.\d+$')

Quantity = Tuple[Optional[float], Optional[str]]


def parse_amount(token: str) -> Optional[float]:
    """Parse a single token such as "½", "1½", "1/2", "2-3" or "1.5"."""
    if not token:
        return None
    if token in VULGAR_FRACTIONS:
        return VULGAR_FRACTIONS[token]
    m = _MIXED_RE.match(token)
    if m:
        return int(m.group(1)) + VULGAR_FRACTIONS[m.group(2)]
    m = _FRACTION_RE.match(token)
    if m:
        denominator = float(m.group(2))
        if denominator == 0:
            return None
        return float(m.group(1)) / denominator
    m = _RANGE_RE.match(token)
    if m:
        return (float(m.group(1)) + float(m.group(2))) / 2
    if _NUMBER_RE.match(token):
        return float(token)
    return None


def parse_unit(token: str) -> Optional[str]:
    cleaned = re.sub(r'[^0-9a-zA-Z]', '', token or '').lower()
    return cleaned if cleaned in QUANTITY_UNITS else None


def parse_quantity(line: str) -> Quantity:
    """Return (quantity, unit) read from the first two tokens of an ingredient line.

    The quantity is None when the first token is not a number, fraction or
    range; the unit is looked up independently on the second token.
    """
    tokens = (line or '').split()
    if not tokens:
        return None, None
    quantity = parse_amount(tokens[0])
    unit = parse_unit(tokens[1]) if len(tokens) > 1 else None
    return quantity, unit


def format_quantity(value: float) -> str:
    """Whole numbers without decimals, everything else to one decimal place."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"


__all__ = ['parse_quantity', 'parse_amount', 'parse_unit', 'format_quantity']
