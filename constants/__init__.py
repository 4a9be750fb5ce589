"""
Constants Package

Static reference data shared by the prep engine.
"""

from .units import (
    WEIGHT,
    VOLUME,
    COUNT,
    DIMENSIONS,
    BASE_UNITS,
    UNIT_DEFINITIONS,
    UNIT_SYNONYMS,
    DENSITY_CONVENTIONS,
)

from .ingredients import (
    INGREDIENT_DENSITIES,
    PREP_VERBS,
    CATEGORY_PRIORITY,
    DEFAULT_PRIORITY,
    PRIORITY_RANK,
    DEFAULT_CATEGORY,
)

from .validation import (
    MAX_LENGTHS,
    MIN_SERVINGS,
    MIN_GUEST_COUNT,
)
