"""
Recipe Scaling Service

Scales recipes linearly to a target number of servings. Each ingredient is
scaled independently; a caller override replaces one ingredient's value and
leaves every other ingredient at its linearly scaled quantity.
"""

import logging

from constants import DEFAULT_CATEGORY, MIN_SERVINGS, MIN_GUEST_COUNT
from models import Override, ScaledIngredient, ScaledRecipe
from utils.errors import CalculationError, ValidationError
from utils.parsing import parse_count

from .matching import normalize_identity

logger = logging.getLogger(__name__)


def get_scale_factor(recipe_servings, target_servings):
    """scale_factor = target_servings / recipe_servings"""
    if recipe_servings is None or recipe_servings < MIN_SERVINGS:
        raise CalculationError(
            f'Recipe servings must be at least {MIN_SERVINGS} (got {recipe_servings})',
            'Fix the recorded servings of the recipe before scaling it.'
        )
    return target_servings / recipe_servings


def normalize_overrides(overrides):
    """
    Index overrides by ingredient id and by normalized ingredient name.

    Accepts Override objects or {quantity, unit} dictionaries.

    Raises:
        ValidationError: If overrides is not a mapping
    """
    if overrides is None:
        return {}
    if not isinstance(overrides, dict):
        raise ValidationError('overrides must be an object',
                              'Key overrides by ingredient id or name, e.g. {"onions": {"quantity": 2, "unit": "kg"}}.')

    index = {}
    for key, value in overrides.items():
        override = value if isinstance(value, Override) else Override.from_dict(value)
        key = str(key)
        index.setdefault(key, override)
        index.setdefault(normalize_identity(key), override)
    return index


def find_override(index, line):
    if not index:
        return None
    if line.ingredient_id is not None and line.ingredient_id in index:
        return index[line.ingredient_id]
    return index.get(normalize_identity(line.name))


def scale_ingredient(line, scale_factor, recipe_name=None, override=None):
    """Scale one ingredient line, or pin it to an override."""
    if override is not None:
        quantity, unit = override.quantity, override.unit
    else:
        quantity, unit = line.quantity * scale_factor, line.unit

    return ScaledIngredient(
        name=line.name,
        original_quantity=line.quantity,
        original_unit=line.unit,
        quantity=quantity,
        unit=unit,
        category=line.category or DEFAULT_CATEGORY,
        notes=line.notes,
        ingredient_id=line.ingredient_id,
        recipe=recipe_name,
        overridden=override is not None,
    )


def scale_recipe(recipe, target_servings, overrides=None, validate_target=True):
    """
    Scale every ingredient of a recipe to target_servings.

    Args:
        recipe: Recipe snapshot (not modified)
        target_servings: Whole number of servings (guests) to produce
        overrides: Optional map of ingredient id or name -> {quantity, unit}
        validate_target: Check target_servings is a whole number >= 1

    Returns:
        ScaledRecipe

    Raises:
        ValidationError: If target_servings is missing or not a whole number >= 1
        CalculationError: If the recipe records fewer than one serving
    """
    if validate_target:
        target_servings = parse_count(target_servings, 'target_servings', min_val=MIN_GUEST_COUNT)

    scale_factor = get_scale_factor(recipe.servings, target_servings)
    override_index = normalize_overrides(overrides)

    ingredients = [
        scale_ingredient(line, scale_factor, recipe.name, find_override(override_index, line))
        for line in recipe.ingredients
    ]

    return ScaledRecipe(
        name=recipe.name,
        original_servings=recipe.servings,
        target_servings=target_servings,
        scale_factor=scale_factor,
        ingredients=ingredients,
        instructions=recipe.instructions,
    )


def scale_recipes(recipes, guest_count, overrides=None):
    """
    Scale a batch of recipes to one guest count.

    A recipe that cannot be scaled (bad servings) is reported in the error
    list and the rest of the batch is still scaled.

    Returns:
        (scaled_recipes, errors)
    """
    guest_count = parse_count(guest_count, 'guest_count', min_val=MIN_GUEST_COUNT)
    override_index = normalize_overrides(overrides)

    scaled = []
    errors = []
    for recipe in recipes:
        try:
            scaled.append(scale_recipe(recipe, guest_count, override_index, validate_target=False))
        except CalculationError as e:
            logger.warning("Skipping recipe '%s': %s", recipe.name, e.message)
            errors.append({'recipe': recipe.name, **e.to_dict()})

    return scaled, errors
