"""
Recipe Models

Read-only recipe, menu and ingredient snapshots handed over by the
surrounding application, plus the scaled form of a recipe.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from constants import DEFAULT_CATEGORY, MAX_LENGTHS
from utils.errors import ValidationError
from utils.parsing import parse_quantity
from utils.sanitizer import (
    sanitize_text, sanitize_ingredient_name, sanitize_unit, sanitize_instructions
)

from .base import Model, pick, require_mapping


def _category(value):
    category = sanitize_text(value, MAX_LENGTHS['category']).lower()
    return category or None


@dataclass(frozen=True)
class RecipeIngredient(Model):
    """One ingredient line of a recipe."""
    name: str
    quantity: float
    unit: str
    notes: Optional[str] = None
    ingredient_id: Optional[str] = None
    category: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        data = require_mapping(data, 'Recipe ingredient')
        # Nested form: {"ingredient": {"id", "name", "category"}, "quantity", ...}
        nested = pick(data, 'ingredient', default={})
        if not isinstance(nested, dict):
            nested = {'name': nested}

        name = sanitize_ingredient_name(pick(data, 'name', default=pick(nested, 'name', default='')))
        if not name:
            raise ValidationError('Recipe ingredient name is required')

        ingredient_id = pick(data, 'ingredient_id', 'ingredientId', default=pick(nested, 'id'))
        notes = sanitize_text(pick(data, 'notes', default=''), MAX_LENGTHS['notes'])
        return cls(
            name=name,
            quantity=parse_quantity(pick(data, 'quantity'), f"quantity of '{name}'"),
            unit=sanitize_unit(pick(data, 'unit')),
            notes=notes or None,
            ingredient_id=None if ingredient_id is None else str(ingredient_id),
            category=_category(pick(data, 'category', default=pick(nested, 'category'))),
        )


@dataclass(frozen=True)
class Recipe(Model):
    """Recipe snapshot: recorded servings, ingredient lines, instructions."""
    name: str
    servings: float
    ingredients: List[RecipeIngredient] = field(default_factory=list)
    instructions: str = ''
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        data = require_mapping(data, 'Recipe')
        recipe_id = pick(data, 'id')
        name = sanitize_text(pick(data, 'name', default=''), MAX_LENGTHS['recipe_name'])
        ingredients = pick(data, 'ingredients', default=[])
        if not isinstance(ingredients, list):
            raise ValidationError(f"Ingredients of recipe '{name}' must be a list")
        return cls(
            name=name or 'Untitled Recipe',
            # Servings are checked when scaling so one bad recipe fails alone
            servings=parse_quantity(pick(data, 'servings', default=1), 'servings', allow_negative=True),
            ingredients=[RecipeIngredient.from_dict(item) for item in ingredients],
            instructions=sanitize_instructions(pick(data, 'instructions', default='')),
            id=None if recipe_id is None else str(recipe_id),
        )


@dataclass(frozen=True)
class Menu(Model):
    """A named selection of recipes served at an event."""
    name: str
    recipes: List[Recipe] = field(default_factory=list)
    category: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        data = require_mapping(data, 'Menu')
        recipes = pick(data, 'recipes', default=[])
        if not isinstance(recipes, list):
            raise ValidationError('Menu recipes must be a list')
        return cls(
            name=sanitize_text(pick(data, 'name', default=''), MAX_LENGTHS['recipe_name']) or 'Menu',
            recipes=[Recipe.from_dict(item) for item in recipes],
            category=_category(pick(data, 'category')),
        )


@dataclass(frozen=True)
class Ingredient(Model):
    """
    Catalog ingredient.

    cost_per_unit is the price of one `unit` of the ingredient. density, when
    present, is in grams per milliliter.
    """
    name: str
    cost_per_unit: float = 0.0
    unit: str = 'each'
    category: Optional[str] = None
    density: Optional[float] = None
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        data = require_mapping(data, 'Ingredient')
        name = sanitize_ingredient_name(pick(data, 'name', default=''))
        if not name:
            raise ValidationError('Ingredient name is required')
        density = pick(data, 'density')
        ingredient_id = pick(data, 'id')
        return cls(
            name=name,
            cost_per_unit=parse_quantity(pick(data, 'cost_per_unit', 'costPerUnit', default=0),
                                         f"cost of '{name}'"),
            unit=sanitize_unit(pick(data, 'unit', 'default_unit', 'defaultUnit')),
            category=_category(pick(data, 'category')),
            density=None if density in (None, '') else parse_quantity(density, f"density of '{name}'"),
            id=None if ingredient_id is None else str(ingredient_id),
        )


@dataclass(frozen=True)
class Override(Model):
    """Caller-fixed quantity for one ingredient, replacing its scaled value."""
    quantity: float
    unit: str

    @classmethod
    def from_dict(cls, data):
        data = require_mapping(data, 'Override')
        return cls(
            quantity=parse_quantity(pick(data, 'quantity'), 'override quantity'),
            unit=sanitize_unit(pick(data, 'unit')),
        )


@dataclass(frozen=True)
class ScaledIngredient(Model):
    """An ingredient line after scaling to a target number of servings."""
    name: str
    original_quantity: float
    original_unit: str
    quantity: float
    unit: str
    category: str = DEFAULT_CATEGORY
    notes: Optional[str] = None
    ingredient_id: Optional[str] = None
    recipe: Optional[str] = None
    overridden: bool = False

    def rounded(self, precision=2):
        data = self.to_dict()
        data['original_quantity'] = round(self.original_quantity, precision)
        data['quantity'] = round(self.quantity, precision)
        return data


@dataclass(frozen=True)
class ScaledRecipe(Model):
    name: str
    original_servings: float
    target_servings: int
    scale_factor: float
    ingredients: List[ScaledIngredient] = field(default_factory=list)
    instructions: str = ''

    def rounded(self, precision=2):
        return {
            'name': self.name,
            'original_servings': self.original_servings,
            'target_servings': self.target_servings,
            'scale_factor': round(self.scale_factor, 4),
            'ingredients': [line.rounded(precision) for line in self.ingredients],
        }
