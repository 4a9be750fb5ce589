"""
Quantity Parsing

Coerces numbers handed over by collaborators (floats, decimals, strings,
fractions like '1 1/2' or '½') into floats.
"""

import math
import re
from decimal import Decimal

from .errors import ValidationError

# Unicode fraction characters mapping
UNICODE_FRACTIONS = {
    '\u00bd': 0.5,    # ½
    '\u2153': 1/3,    # ⅓
    '\u2154': 2/3,    # ⅔
    '\u00bc': 0.25,   # ¼
    '\u00be': 0.75,   # ¾
    '\u215b': 0.125,  # ⅛
    '\u215c': 0.375,  # ⅜
    '\u215d': 0.625,  # ⅝
    '\u215e': 0.875,  # ⅞
}


def normalize_fractions(text):
    """Replace Unicode fraction characters with decimal equivalents."""
    text = re.sub(r'[\s\u00a0\u2000-\u200b]+', ' ', text)

    for char, value in UNICODE_FRACTIONS.items():
        if char in text:
            # Mixed fraction like "1½" or "1 ½"
            pattern = r'(\d+)\s*' + re.escape(char)
            match = re.search(pattern, text)
            if match:
                whole = float(match.group(1))
                text = re.sub(pattern, str(whole + value), text)
            else:
                text = text.replace(char, str(value))
    return text


def parse_fraction(value):
    """
    Parse a fraction string like '1 1/2' or '1/4' into a float.
    Also handles plain numbers like '2' or '0.5'.

    Raises:
        ValidationError: If the text is not a number or fraction
    """
    text = normalize_fractions(str(value).strip())
    if not text:
        raise ValidationError('Quantity is required')

    try:
        return float(text)
    except ValueError:
        pass

    mixed_match = re.match(r'^(\d+)\s+(\d+)\s*/\s*(\d+)$', text)
    if mixed_match:
        whole, num, denom = (float(g) for g in mixed_match.groups())
    else:
        frac_match = re.match(r'^(\d+)\s*/\s*(\d+)$', text)
        if not frac_match:
            raise ValidationError(f"Invalid quantity: '{value}'",
                                  'Use a number such as 2, 0.5 or 1 1/2.')
        whole = 0.0
        num, denom = (float(g) for g in frac_match.groups())

    if denom == 0:
        raise ValidationError(f"Invalid quantity: '{value}'", 'Fraction denominator cannot be zero.')
    return whole + num / denom


def parse_quantity(value, field='quantity', allow_negative=False):
    """Coerce a quantity value to a finite float."""
    if value is None or isinstance(value, bool):
        raise ValidationError(f'{field} is required')

    if isinstance(value, (int, float, Decimal)):
        result = float(value)
    else:
        result = parse_fraction(value)

    if not math.isfinite(result):
        raise ValidationError(f'{field} must be a finite number')
    if result < 0 and not allow_negative:
        raise ValidationError(f'{field} cannot be negative')
    return result


def parse_count(value, field='guest_count', min_val=1, max_val=None):
    """Coerce a whole-number count (guests, servings) and check its bounds."""
    if value is None or value == '' or isinstance(value, bool):
        raise ValidationError(f'{field} is required')

    try:
        result = float(value)
    except (ValueError, TypeError):
        raise ValidationError(f'{field} must be a whole number') from None

    if not math.isfinite(result) or result != int(result):
        raise ValidationError(f'{field} must be a whole number')
    result = int(result)

    if min_val is not None and result < min_val:
        raise ValidationError(f'{field} must be at least {min_val}')
    if max_val is not None and result > max_val:
        raise ValidationError(f'{field} cannot exceed {max_val}')
    return result
