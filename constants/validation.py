"""
Validation Constants

Contains limits used to validate engine input before any computation.
"""

# Maximum field lengths
MAX_LENGTHS = {
    'ingredient_name': 200,
    'recipe_name': 200,
    'category': 50,
    'unit': 20,
    'notes': 500,
    'instructions': 50000,
}

# Minimum servings a recipe may record
MIN_SERVINGS = 1

# Minimum guest count for scaling and prep lists
MIN_GUEST_COUNT = 1
