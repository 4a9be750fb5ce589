"""
Unit Conversion Service

Converts quantities between units of the same dimension, and between weight
and volume when the ingredient's density is known.
"""

import logging

from constants import WEIGHT, VOLUME
from models import ConversionResult
from utils.errors import ConversionError

from .density import DEFAULT_REGISTRY, grams_per_ml
from .units import resolve_unit, base_unit_for, same_unit

logger = logging.getLogger(__name__)


def _resolve_or_raise(unit):
    definition = resolve_unit(unit)
    if definition is None:
        raise ConversionError(
            f"Unknown unit '{unit}'",
            'Use a weight (g, kg, oz, lb), volume (ml, l, cup, tbsp, tsp, fl oz, '
            'pint, quart, gallon) or count (each, piece, item) unit.'
        )
    return definition


def convert(ingredient_name, quantity, from_unit, to_unit, registry=None):
    """
    Convert a quantity of an ingredient from one unit to another.

    Same-dimension conversions are exact and ignore the ingredient. Weight to
    volume (or back) uses the ingredient's density.

    Args:
        ingredient_name: Name used for the density lookup
        quantity: The quantity to convert
        from_unit: The unit the quantity is in
        to_unit: The unit to convert to
        registry: DensityRegistry to use (default registry if None)

    Returns:
        ConversionResult with the converted quantity

    Raises:
        ConversionError: Unknown unit, count crossing, or no density available
    """
    source = _resolve_or_raise(from_unit)
    target = _resolve_or_raise(to_unit)

    # =========== SAME DIMENSION ===========
    if source.dimension == target.dimension:
        base_qty = quantity * source.factor_to_base
        return ConversionResult(
            target_quantity=base_qty / target.factor_to_base,
            target_unit=target.symbol,
            base_quantity=base_qty,
            base_unit=base_unit_for(source.dimension),
            conversion_factor=source.factor_to_base / target.factor_to_base,
        )

    # =========== WEIGHT <-> VOLUME ===========
    if {source.dimension, target.dimension} == {WEIGHT, VOLUME}:
        if registry is None:
            registry = DEFAULT_REGISTRY
        density = registry.find(ingredient_name)
        if density is None:
            raise ConversionError(
                f"Cannot convert {from_unit} to {to_unit} for '{ingredient_name or 'unknown ingredient'}': "
                f"no density available",
                f"Add a density for '{ingredient_name}' or use units of the same dimension."
            )

        g_per_ml = grams_per_ml(density)
        if source.dimension == WEIGHT:
            # ml = g / (g/ml)
            crossing = 1 / g_per_ml
        else:
            # g = ml * (g/ml)
            crossing = g_per_ml

        base_qty = quantity * source.factor_to_base * crossing
        logger.debug("Converted %s %s of '%s' to %s using density of '%s'",
                     quantity, from_unit, ingredient_name, to_unit, density.name)
        return ConversionResult(
            target_quantity=base_qty / target.factor_to_base,
            target_unit=target.symbol,
            base_quantity=base_qty,
            base_unit=base_unit_for(target.dimension),
            conversion_factor=source.factor_to_base * crossing / target.factor_to_base,
            density_used=density.name,
        )

    # =========== COUNT <-> WEIGHT/VOLUME ===========
    raise ConversionError(
        f"Cannot convert between {source.dimension} ({from_unit}) and {target.dimension} ({to_unit})",
        'Count units only convert to other count units. Record the ingredient by weight or volume instead.'
    )


def convert_quantity(ingredient_name, quantity, from_unit, to_unit, registry=None):
    """Shortcut returning only the converted number."""
    return convert(ingredient_name, quantity, from_unit, to_unit, registry).target_quantity


def convert_to_base(quantity, unit):
    """
    Express a quantity in its dimension's base unit (g, ml or each).

    Returns:
        (base_quantity, base_unit)
    """
    definition = _resolve_or_raise(unit)
    return quantity * definition.factor_to_base, base_unit_for(definition.dimension)


def can_convert(ingredient_name, from_unit, to_unit, registry=None):
    try:
        convert(ingredient_name, 1.0, from_unit, to_unit, registry)
    except ConversionError:
        return False
    return True


def quantity_in_unit(ingredient_name, quantity, unit, target_unit, registry=None):
    """
    Express a quantity in target_unit.

    Identical unit strings pass through unchanged, including units outside
    the unit table ('bunch', 'slices'); anything else goes through convert().

    Raises:
        ConversionError: If the quantity cannot be expressed in target_unit
    """
    if same_unit(unit, target_unit):
        return quantity
    return convert(ingredient_name, quantity, unit, target_unit, registry).target_quantity


def add_in_unit(ingredient_name, total, total_unit, quantity, unit, registry=None):
    """Add a quantity onto a running total kept in total_unit."""
    return total + quantity_in_unit(ingredient_name, quantity, unit, total_unit, registry)
