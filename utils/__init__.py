# Utility modules for the prep engine
from .errors import (
    PrepEngineError, ValidationError, ConversionError,
    NotFoundError, CalculationError
)
from .parsing import parse_fraction, parse_quantity, parse_count
from .sanitizer import (
    sanitize_text, sanitize_ingredient_name, sanitize_unit,
    sanitize_instructions
)
