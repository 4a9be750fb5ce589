"""
Purchasing Service

Compares consolidated demand against on-hand inventory and prices what has
to be bought.
"""

import logging
import math

from models import PurchaseItem
from utils.errors import ConversionError

from .conversion import add_in_unit, quantity_in_unit
from .cost import price_line, totals_with_gst, GST_RATE
from .matching import normalize_identity, index_by_identity, find_by_identity

logger = logging.getLogger(__name__)

SHORTFALL_TOLERANCE = 1e-9


def total_demand(prep_tasks, registry=None):
    """
    Sum prep task quantities per ingredient.

    An ingredient prepared two ways ('dice onions', 'slice onions') is bought
    once. Totals stay in the first-seen unit; a quantity that cannot be
    converted into it becomes its own demand entry.

    Returns:
        List of (ingredient_name, quantity, unit)
    """
    groups = {}
    for task in prep_tasks:
        entries = groups.setdefault(normalize_identity(task.ingredient), [])
        for entry in entries:
            try:
                entry[1] = add_in_unit(task.ingredient, entry[1], entry[2], task.quantity, task.unit, registry)
                break
            except ConversionError:
                continue
        else:
            entries.append([task.ingredient, task.quantity, task.unit])

    return [tuple(entry) for entries in groups.values() for entry in entries]


def calculate_shortfall(needed, available):
    """
    shortfall = max(0, needed - available)

    Amounts equal up to float residue (0.1 + 0.2 kg against 0.3 kg) count as
    covered.
    """
    if math.isclose(needed, available, rel_tol=SHORTFALL_TOLERANCE, abs_tol=SHORTFALL_TOLERANCE):
        return 0.0
    return max(0.0, needed - available)


def check_inventory(name, needed, unit, item, registry=None, reserve_minimum_stock=False):
    """
    Build the PurchaseItem for one demand entry, or None when stock covers it.

    The need is converted into the inventory item's unit, compared with the
    stock there, and the shortfall is reported back in the demand's unit.
    """
    if item is None:
        return PurchaseItem(ingredient=name, needed_quantity=needed, unit=unit,
                            current_stock=0.0, shortfall=needed)

    available = item.current_stock
    if reserve_minimum_stock:
        available = max(0.0, available - item.minimum_stock)

    try:
        needed_in_stock_unit = quantity_in_unit(name, needed, unit, item.unit, registry)
    except ConversionError as e:
        # Units cannot be aligned: buy the whole need rather than guess
        logger.warning("Cannot compare '%s' need (%s) with stock (%s): %s",
                       name, unit, item.unit, e.message)
        return PurchaseItem(
            ingredient=name, needed_quantity=needed, unit=unit,
            current_stock=item.current_stock, shortfall=needed,
            note=f'Stock is recorded in {item.unit} and could not be compared',
        )

    shortfall = calculate_shortfall(needed_in_stock_unit, available)
    if shortfall <= 0:
        return None

    return PurchaseItem(
        ingredient=name,
        needed_quantity=needed,
        unit=unit,
        current_stock=quantity_in_unit(name, item.current_stock, item.unit, unit, registry),
        shortfall=quantity_in_unit(name, shortfall, item.unit, unit, registry),
    )


def build_purchase_list(prep_tasks, inventory, registry=None, reserve_minimum_stock=False):
    """
    Purchase items for every ingredient whose need exceeds stock.

    Ingredients missing from inventory are bought in full. Nothing is emitted
    for an ingredient whose stock covers the need.
    """
    inventory_index = index_by_identity(inventory)
    purchase_items = []

    for name, needed, unit in total_demand(prep_tasks, registry):
        if needed <= 0:
            continue
        item = check_inventory(name, needed, unit, find_by_identity(inventory_index, name),
                               registry, reserve_minimum_stock)
        if item is not None:
            purchase_items.append(item)

    return purchase_items


def estimate_purchase_cost(purchase_items, catalog, registry=None, gst_rate=GST_RATE):
    """
    Price shortfalls against the ingredient catalog.

    Sets estimated_cost on every item that can be priced and returns
    {subtotal, gst, total}.
    """
    catalog_index = index_by_identity(catalog)
    subtotal = 0.0

    for item in purchase_items:
        ingredient = find_by_identity(catalog_index, item.ingredient)
        if ingredient is None or ingredient.cost_per_unit <= 0:
            continue
        try:
            item.estimated_cost = price_line(ingredient, item.shortfall, item.unit, registry)
        except ConversionError as e:
            logger.warning("Could not price purchase of '%s': %s", item.ingredient, e.message)
            continue
        subtotal += item.estimated_cost

    return totals_with_gst(subtotal, gst_rate)
