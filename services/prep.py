"""
Prep List Service

Turns scaled recipes into a consolidated, prioritized prep list: merges
ingredient demand across recipes, mines instruction text for prep steps and
checks the result against inventory.
"""

import logging
import math
import re
from dataclasses import replace

from constants import (
    CATEGORY_PRIORITY, DEFAULT_CATEGORY, DEFAULT_PRIORITY, PRIORITY_RANK, PREP_VERBS,
    MIN_GUEST_COUNT,
)
from models import PrepList, PrepSummary, PrepTask
from utils.errors import ConversionError, NotFoundError, ValidationError
from utils.parsing import parse_count

from .conversion import add_in_unit
from .cost import GST_RATE
from .density import extend_with_catalog
from .matching import normalize_identity, index_by_identity, find_by_identity
from .purchasing import build_purchase_list, estimate_purchase_cost
from .scaling import scale_recipes

logger = logging.getLogger(__name__)

PREP_MINUTES_PER_TASK = 5

# Per verb: digit-anchored phrase first, bare verb in context as fallback
_VERB_PATTERNS = [
    (
        verb,
        re.compile(r'\d+[^\d]*' + re.escape(verb) + r'[^\d]*', re.IGNORECASE),
        re.compile(r'[^\d]*' + re.escape(verb) + r'[^\d]*', re.IGNORECASE),
    )
    for verb in PREP_VERBS
]


# =========== CONSOLIDATION ===========

def prep_descriptor(line):
    """Lowercased notes, or 'prep <name>' when the line has none."""
    notes = ' '.join((line.notes or '').lower().split())
    if notes:
        return notes
    return f'prep {normalize_identity(line.name)}'


def consolidation_key(line):
    return prep_descriptor(line), normalize_identity(line.name)


def task_text(line):
    notes = ' '.join((line.notes or '').split())
    if notes:
        return f'{notes} {line.name}'
    return f'prep {line.name}'


def get_priority(category):
    return CATEGORY_PRIORITY.get((category or '').lower(), DEFAULT_PRIORITY)


def _new_task(line):
    category = line.category or DEFAULT_CATEGORY
    return PrepTask(
        task=task_text(line),
        ingredient=line.name,
        quantity=line.quantity,
        unit=line.unit,
        category=category,
        priority=get_priority(category),
    )


def consolidate_prep_tasks(lines, registry=None):
    """
    Merge scaled ingredient lines into prep tasks.

    Lines sharing a consolidation key are summed into the unit of the first
    line seen for that key, converting where needed. A line whose unit cannot
    be converted into any task for its key becomes a separate task.
    """
    groups = {}
    for line in lines:
        key = consolidation_key(line)
        tasks = groups.get(key)
        if tasks is None:
            groups[key] = [_new_task(line)]
            continue

        for task in tasks:
            try:
                task.quantity = add_in_unit(line.name, task.quantity, task.unit,
                                            line.quantity, line.unit, registry)
                logger.debug("Merged %s %s of '%s' into '%s'", line.quantity, line.unit, line.name, task.task)
                break
            except ConversionError as e:
                logger.debug("'%s' (%s) does not merge into %s: %s", line.name, line.unit, task.unit, e.message)
        else:
            logger.warning("Keeping '%s' in %s as a separate task: no conversion to %s",
                           line.name, line.unit, ', '.join(task.unit for task in tasks))
            tasks.append(_new_task(line))

    return [task for tasks in groups.values() for task in tasks]


def sort_prep_tasks(tasks):
    """Order by priority (high first), then category. Ties keep their order."""
    return sorted(tasks, key=lambda task: (PRIORITY_RANK.get(task.priority, len(PRIORITY_RANK)), task.category))


# =========== INSTRUCTIONS ===========

def extract_prep_tasks(instructions):
    """
    Find prep steps in free-form instruction text.

    Each line is checked against the prep verb vocabulary. A phrase starting
    at a number ('2 onions, diced finely') is preferred over the verb with its
    surrounding text. Results are deduplicated and keep their order.
    """
    tasks = []
    seen = set()
    for line in (instructions or '').splitlines():
        line = line.strip()
        if not line:
            continue
        lowered = line.lower()
        for verb, anchored, contextual in _VERB_PATTERNS:
            if verb not in lowered:
                continue
            match = anchored.search(line) or contextual.search(line)
            if not match:
                continue
            phrase = match.group(0).strip(' \t,;:.')
            if phrase and phrase not in seen:
                seen.add(phrase)
                tasks.append(phrase)
    return tasks


def collect_instruction_tasks(scaled_recipes):
    """Instruction-mined tasks per recipe, deduplicated across the batch."""
    seen = set()
    collected = []
    for recipe in scaled_recipes:
        for phrase in extract_prep_tasks(recipe.instructions):
            key = phrase.lower()
            if key in seen:
                continue
            seen.add(key)
            collected.append({'task': phrase, 'recipe': recipe.name})
    return collected


# =========== PREP LIST ===========

def _apply_catalog_categories(lines, catalog):
    """Fill in categories missing from recipe lines from the catalog."""
    index = index_by_identity(catalog)
    if not index:
        return lines

    categorized = []
    for line in lines:
        if line.category == DEFAULT_CATEGORY:
            ingredient = find_by_identity(index, line.name)
            if ingredient is not None and ingredient.category:
                line = replace(line, category=ingredient.category)
        categorized.append(line)
    return categorized


def estimate_prep_time(task_count, minutes_per_task=PREP_MINUTES_PER_TASK):
    """Whole minutes: ceil(tasks * minutes per task)."""
    return math.ceil(task_count * minutes_per_task)


def generate_prep_list(guest_count, menus=None, recipes=None, inventory=None, catalog=None,
                       overrides=None, registry=None, gst_rate=GST_RATE,
                       minutes_per_task=PREP_MINUTES_PER_TASK, max_guests=None,
                       reserve_minimum_stock=False):
    """
    Build the prep list for an event.

    Args:
        guest_count: Number of guests every recipe is scaled to
        menus: Selected Menu objects (their recipes are included)
        recipes: Individually selected Recipe objects
        inventory: InventoryItem objects describing on-hand stock
        catalog: Ingredient objects used for categories, densities and prices
        overrides: Map of ingredient id or name -> {quantity, unit}
        registry: DensityRegistry (default registry if None)
        gst_rate: Rate applied to the purchase estimate
        minutes_per_task: Prep time estimate per consolidated task
        max_guests: Upper bound for guest_count, if any
        reserve_minimum_stock: Treat minimum stock as unavailable

    Returns:
        PrepList with unrounded quantities (use .rounded() to present)

    Raises:
        ValidationError: Missing or invalid guest count, or nothing selected
        NotFoundError: The selection contains no recipes
    """
    if guest_count is None or guest_count == '':
        raise ValidationError('Guest count is required', 'Enter the number of guests for the event.')
    guest_count = parse_count(guest_count, 'guest_count', min_val=MIN_GUEST_COUNT, max_val=max_guests)

    menus = list(menus or [])
    recipes = list(recipes or [])
    if not menus and not recipes:
        raise ValidationError('Select at least one menu or recipe')

    selected = recipes + [recipe for menu in menus for recipe in menu.recipes]
    if not selected:
        raise NotFoundError('No recipes found in the selected menus',
                            'Add recipes to the menu before generating a prep list.')

    registry = extend_with_catalog(registry, catalog)
    scaled_recipes, errors = scale_recipes(selected, guest_count, overrides)

    lines = _apply_catalog_categories(
        [line for recipe in scaled_recipes for line in recipe.ingredients], catalog
    )
    prep_tasks = sort_prep_tasks(consolidate_prep_tasks(lines, registry))
    purchase_list = build_purchase_list(prep_tasks, inventory or [], registry, reserve_minimum_stock)

    estimated_cost = None
    if catalog:
        estimated_cost = estimate_purchase_cost(purchase_list, catalog, registry, gst_rate)

    summary = PrepSummary(
        total_ingredients=len({normalize_identity(line.name) for line in lines}),
        total_prep_tasks=len(prep_tasks),
        items_to_purchase=len(purchase_list),
        estimated_prep_time=estimate_prep_time(len(prep_tasks), minutes_per_task),
    )

    logger.info("Prep list for %s guests: %s recipes, %s tasks, %s items to purchase",
                guest_count, len(scaled_recipes), summary.total_prep_tasks, summary.items_to_purchase)

    return PrepList(
        guest_count=guest_count,
        prep_tasks=prep_tasks,
        instruction_tasks=collect_instruction_tasks(scaled_recipes),
        purchase_list=purchase_list,
        scaled_ingredients=lines,
        summary=summary,
        estimated_cost=estimated_cost,
        menus=[{'name': menu.name, 'category': menu.category, 'recipes': len(menu.recipes)} for menu in menus],
        errors=errors,
    )
