"""
Services Package

Measurement, scaling and prep-list logic for the catering engine.
"""

from .units import (
    normalize_unit_text,
    resolve_unit,
    get_dimension,
    get_factor,
    base_unit_for,
    same_unit,
    get_all_units,
)

from .density import (
    DensityRegistry,
    DEFAULT_REGISTRY,
    get_registry,
    extend_with_catalog,
)

from .conversion import (
    convert,
    convert_quantity,
    convert_to_base,
    can_convert,
    quantity_in_unit,
    add_in_unit,
)

from .cost import (
    GST_RATE,
    calculate_ingredient_cost,
    calculate_recipe_cost,
    round_recipe_cost,
    calculate_gst,
    add_gst,
    remove_gst,
    gst_from_inclusive,
    totals_with_gst,
)

from .matching import (
    normalize_identity,
    index_by_identity,
    find_by_identity,
)

from .scaling import (
    get_scale_factor,
    scale_recipe,
    scale_recipes,
)

from .purchasing import (
    calculate_shortfall,
    build_purchase_list,
    estimate_purchase_cost,
)

from .prep import (
    consolidation_key,
    consolidate_prep_tasks,
    sort_prep_tasks,
    extract_prep_tasks,
    generate_prep_list,
)

__all__ = [
    # Units
    'normalize_unit_text',
    'resolve_unit',
    'get_dimension',
    'get_factor',
    'base_unit_for',
    'same_unit',
    'get_all_units',
    # Densities
    'DensityRegistry',
    'DEFAULT_REGISTRY',
    'get_registry',
    'extend_with_catalog',
    # Conversion
    'convert',
    'convert_quantity',
    'convert_to_base',
    'can_convert',
    'quantity_in_unit',
    'add_in_unit',
    # Cost
    'GST_RATE',
    'calculate_ingredient_cost',
    'calculate_recipe_cost',
    'round_recipe_cost',
    'calculate_gst',
    'add_gst',
    'remove_gst',
    'gst_from_inclusive',
    'totals_with_gst',
    # Matching
    'normalize_identity',
    'index_by_identity',
    'find_by_identity',
    # Scaling
    'get_scale_factor',
    'scale_recipe',
    'scale_recipes',
    # Purchasing
    'calculate_shortfall',
    'build_purchase_list',
    'estimate_purchase_cost',
    # Prep lists
    'consolidation_key',
    'consolidate_prep_tasks',
    'sort_prep_tasks',
    'extract_prep_tasks',
    'generate_prep_list',
]
