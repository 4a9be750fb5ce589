"""
Unit Constants and Conversion Tables

Contains every recognized unit, its dimension and its factor to the
dimension's base unit (grams, milliliters, pieces).
"""

WEIGHT = 'weight'
VOLUME = 'volume'
COUNT = 'count'

DIMENSIONS = (WEIGHT, VOLUME, COUNT)

# Base unit per dimension
BASE_UNITS = {
    WEIGHT: 'g',
    VOLUME: 'ml',
    COUNT: 'each',
}

# Canonical unit symbol -> (dimension, factor_to_base)
UNIT_DEFINITIONS = {
    # Weight: base = g
    'g': (WEIGHT, 1.0),
    'kg': (WEIGHT, 1000.0),
    'oz': (WEIGHT, 28.3495),
    'lb': (WEIGHT, 453.592),
    # Volume: base = ml (US customary)
    'ml': (VOLUME, 1.0),
    'l': (VOLUME, 1000.0),
    'tsp': (VOLUME, 4.92892),
    'tbsp': (VOLUME, 14.7868),
    'fl oz': (VOLUME, 29.5735),
    'cup': (VOLUME, 236.588),
    'pint': (VOLUME, 473.176),
    'quart': (VOLUME, 946.353),
    'gallon': (VOLUME, 3785.41),
    # Count: base = each
    'each': (COUNT, 1.0),
}

# Unit synonyms (lowercase input -> canonical symbol)
UNIT_SYNONYMS = {
    'g': 'g', 'gram': 'g', 'grams': 'g', 'gm': 'g',
    'kg': 'kg', 'kgs': 'kg', 'kilogram': 'kg', 'kilograms': 'kg',
    'oz': 'oz', 'ounce': 'oz', 'ounces': 'oz',
    'lb': 'lb', 'lbs': 'lb', 'pound': 'lb', 'pounds': 'lb',
    'ml': 'ml', 'milliliter': 'ml', 'milliliters': 'ml', 'millilitre': 'ml', 'millilitres': 'ml',
    'l': 'l', 'liter': 'l', 'liters': 'l', 'litre': 'l', 'litres': 'l',
    'tsp': 'tsp', 'teaspoon': 'tsp', 'teaspoons': 'tsp',
    'tbsp': 'tbsp', 'tbs': 'tbsp', 'tablespoon': 'tbsp', 'tablespoons': 'tbsp',
    'fl oz': 'fl oz', 'fl. oz': 'fl oz', 'fluid ounce': 'fl oz', 'fluid ounces': 'fl oz',
    'cup': 'cup', 'cups': 'cup',
    'pint': 'pint', 'pints': 'pint', 'pt': 'pint',
    'quart': 'quart', 'quarts': 'quart', 'qt': 'quart',
    'gallon': 'gallon', 'gallons': 'gallon', 'gal': 'gallon',
    'each': 'each', 'ea': 'each',
    'piece': 'each', 'pieces': 'each', 'pc': 'each', 'pcs': 'each',
    'item': 'each', 'items': 'each',
    'whole': 'each',
}

# Volume units a density may be quoted against (g per <unit>)
DENSITY_CONVENTIONS = {
    'g/ml': 'ml',
    'g/cup': 'cup',
    'g/tbsp': 'tbsp',
    'g/tsp': 'tsp',
}
