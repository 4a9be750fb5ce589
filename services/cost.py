"""
Cost Calculation Service

Functions for pricing ingredients and recipes from purchase prices, and GST
helpers for purchase estimates.
"""

import logging

from models import ConversionResult
from utils.errors import CalculationError, ConversionError, ValidationError

from .conversion import convert, convert_to_base, quantity_in_unit
from .density import extend_with_catalog
from .matching import index_by_identity, find_by_identity
from .scaling import scale_recipe

logger = logging.getLogger(__name__)

GST_RATE = 0.15


def calculate_ingredient_cost(ingredient_name, purchase_qty, purchase_unit, purchase_price,
                              target_qty, target_unit, registry=None):
    """
    Price a target quantity of an ingredient from what was paid for a purchase.

    pricePerBaseUnit = purchase_price / purchase quantity in its base unit
    targetPrice = target quantity in that same base unit * pricePerBaseUnit

    The target is converted into the purchase's base unit, crossing between
    weight and volume through the ingredient's density when needed.

    Returns:
        ConversionResult with price_per_base_unit and target_price set

    Raises:
        CalculationError: If purchase_qty is not positive
        ValidationError: If purchase_price is negative
        ConversionError: If the target cannot be expressed in the purchase unit
    """
    if purchase_qty is None or purchase_qty <= 0:
        raise CalculationError(
            'Purchase quantity must be greater than zero',
            'Enter the amount that was bought for the given price.'
        )
    if purchase_price is None or purchase_price < 0:
        raise ValidationError('Purchase price cannot be negative')

    purchase_base, base_unit = convert_to_base(purchase_qty, purchase_unit)
    price_per_base_unit = purchase_price / purchase_base

    # Target expressed in the purchase's base unit
    in_base = convert(ingredient_name, target_qty, target_unit, base_unit, registry)

    return ConversionResult(
        target_quantity=target_qty,
        target_unit=target_unit,
        base_quantity=in_base.target_quantity,
        base_unit=base_unit,
        conversion_factor=in_base.conversion_factor,
        price_per_base_unit=price_per_base_unit,
        target_price=in_base.target_quantity * price_per_base_unit,
        density_used=in_base.density_used,
    )


def price_line(ingredient, quantity, unit, registry=None):
    """Cost of a quantity of a catalog ingredient (priced per its own unit)."""
    in_catalog_unit = quantity_in_unit(ingredient.name, quantity, unit, ingredient.unit, registry)
    return in_catalog_unit * ingredient.cost_per_unit


def calculate_recipe_cost(recipe, catalog, target_servings=None, registry=None):
    """
    Cost a recipe against the ingredient catalog, optionally scaled first.

    Lines without a catalog entry, or in a unit that cannot be expressed in
    the catalog unit, are listed as unpriced instead of being guessed.
    """
    if target_servings is None:
        scaled = scale_recipe(recipe, recipe.servings, validate_target=False)
    else:
        scaled = scale_recipe(recipe, target_servings)
    registry = extend_with_catalog(registry, catalog)
    index = index_by_identity(catalog)

    lines = []
    unpriced = []
    total = 0.0
    for line in scaled.ingredients:
        ingredient = find_by_identity(index, line.name)
        if ingredient is None:
            unpriced.append({'ingredient': line.name, 'reason': 'Not in ingredient catalog'})
            continue
        try:
            cost = price_line(ingredient, line.quantity, line.unit, registry)
        except ConversionError as e:
            logger.warning("Could not price '%s' in recipe '%s': %s", line.name, recipe.name, e.message)
            unpriced.append({'ingredient': line.name, 'reason': e.message})
            continue
        total += cost
        lines.append({
            'ingredient': line.name,
            'quantity': line.quantity,
            'unit': line.unit,
            'cost': cost,
        })

    return {
        'recipe': recipe.name,
        'servings': scaled.target_servings,
        'scale_factor': scaled.scale_factor,
        'total_cost': total,
        'cost_per_serving': total / scaled.target_servings,
        'lines': lines,
        'unpriced': unpriced,
    }


def round_recipe_cost(costing, precision=2):
    """Presentation form of calculate_recipe_cost output."""
    return {
        **costing,
        'scale_factor': round(costing['scale_factor'], 4),
        'total_cost': round(costing['total_cost'], precision),
        'cost_per_serving': round(costing['cost_per_serving'], precision),
        'lines': [
            {**line, 'quantity': round(line['quantity'], precision), 'cost': round(line['cost'], precision)}
            for line in costing['lines']
        ],
    }


# =========== GST ===========

def calculate_gst(exclusive_price, rate=GST_RATE):
    """GST amount on a GST-exclusive price."""
    return exclusive_price * rate


def add_gst(exclusive_price, rate=GST_RATE):
    return exclusive_price * (1 + rate)


def remove_gst(inclusive_price, rate=GST_RATE):
    return inclusive_price / (1 + rate)


def gst_from_inclusive(inclusive_price, rate=GST_RATE):
    return inclusive_price - remove_gst(inclusive_price, rate)


def totals_with_gst(subtotal, rate=GST_RATE):
    gst = calculate_gst(subtotal, rate)
    return {'subtotal': subtotal, 'gst': gst, 'total': subtotal + gst}
