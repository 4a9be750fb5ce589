"""
Input Sanitization Module

Cleans names, units and instruction text handed over by collaborators so that
keys built from them are stable.
"""

import re

from constants import MAX_LENGTHS

_CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b-\x1f\x7f-\x9f]')


def sanitize_text(text, max_length=10000):
    """
    Sanitize a single-line text value.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 10000)

    Returns:
        Cleaned string, truncated if necessary
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    # Remove control characters and null bytes
    text = _CONTROL_CHARS.sub('', text)

    # Collapse multiple spaces and newlines
    text = re.sub(r'\s+', ' ', text).strip()

    if len(text) > max_length:
        text = text[:max_length]

    return text


def sanitize_ingredient_name(name):
    """Sanitize an ingredient name. Case is preserved for display."""
    return sanitize_text(name, MAX_LENGTHS['ingredient_name'])


def sanitize_unit(unit):
    """Sanitize a unit string. Empty units are treated as a count."""
    unit = sanitize_text(unit, MAX_LENGTHS['unit'])
    return unit or 'each'


def sanitize_instructions(instructions, max_length=None):
    """
    Sanitize recipe instructions.

    Preserves newlines because prep task mining works line by line.
    """
    if not instructions:
        return ''

    if not isinstance(instructions, str):
        instructions = str(instructions)

    if max_length is None:
        max_length = MAX_LENGTHS['instructions']

    instructions = instructions.replace('\r\n', '\n').replace('\r', '\n')
    instructions = _CONTROL_CHARS.sub('', instructions).strip()

    if len(instructions) > max_length:
        instructions = instructions[:max_length]

    return instructions
