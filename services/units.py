"""
Unit Table Service

Resolves unit strings to unit definitions.
"""

from constants import BASE_UNITS, UNIT_DEFINITIONS, UNIT_SYNONYMS, DIMENSIONS
from models import UnitDefinition

# Built once; every synonym points at exactly one definition
_DEFINITIONS = {
    symbol: UnitDefinition(symbol, dimension, factor)
    for symbol, (dimension, factor) in UNIT_DEFINITIONS.items()
}


def normalize_unit_text(unit):
    """Trim, lowercase, drop a trailing period and collapse inner spaces."""
    if not unit:
        return ''
    text = ' '.join(str(unit).strip().lower().split())
    return text.rstrip('.')


def resolve_unit(unit):
    """Return the UnitDefinition for a unit string, or None if unrecognized."""
    symbol = UNIT_SYNONYMS.get(normalize_unit_text(unit))
    if symbol is None:
        return None
    return _DEFINITIONS[symbol]


def get_dimension(unit):
    definition = resolve_unit(unit)
    return definition.dimension if definition else None


def get_factor(unit):
    definition = resolve_unit(unit)
    return definition.factor_to_base if definition else None


def base_unit_for(dimension):
    return BASE_UNITS[dimension]


def same_unit(unit_a, unit_b):
    """True when two unit strings name the same unit ('kg' and 'kilograms')."""
    def_a = resolve_unit(unit_a)
    def_b = resolve_unit(unit_b)
    if def_a and def_b:
        return def_a.symbol == def_b.symbol
    return normalize_unit_text(unit_a) == normalize_unit_text(unit_b)


def get_all_units():
    """Recognized unit strings grouped by dimension."""
    grouped = {dimension: [] for dimension in DIMENSIONS}
    for synonym, symbol in UNIT_SYNONYMS.items():
        grouped[_DEFINITIONS[symbol].dimension].append(synonym)
    return grouped
