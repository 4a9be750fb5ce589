"""
Models Package

Exports the plain-data models exchanged between the prep engine and the
surrounding application.
"""

from .quantity import UnitDefinition, IngredientDensity, Quantity, ConversionResult
from .recipe import (
    RecipeIngredient, Recipe, Menu, Ingredient, Override,
    ScaledIngredient, ScaledRecipe,
)
from .prep import InventoryItem, PrepTask, PurchaseItem, PrepSummary, PrepList

__all__ = [
    'UnitDefinition',
    'IngredientDensity',
    'Quantity',
    'ConversionResult',
    'RecipeIngredient',
    'Recipe',
    'Menu',
    'Ingredient',
    'Override',
    'ScaledIngredient',
    'ScaledRecipe',
    'InventoryItem',
    'PrepTask',
    'PurchaseItem',
    'PrepSummary',
    'PrepList',
]
