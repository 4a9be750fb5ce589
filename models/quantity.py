"""
Quantity Models

Contains unit definitions, ingredient densities, quantities and the result
of a unit conversion.
"""

from dataclasses import dataclass
from typing import Optional

from constants import DENSITY_CONVENTIONS, MAX_LENGTHS
from utils.errors import ValidationError
from utils.parsing import parse_quantity
from utils.sanitizer import sanitize_ingredient_name, sanitize_text

from .base import Model, pick, require_mapping


@dataclass(frozen=True)
class UnitDefinition(Model):
    """A recognized unit: its dimension and multiplicative factor to the base unit."""
    symbol: str
    dimension: str
    factor_to_base: float


@dataclass(frozen=True)
class IngredientDensity(Model):
    """
    Mass per volume for one ingredient.

    The density is quoted against a convention: 'g/ml' for liquids or
    'g/cup' (also 'g/tbsp', 'g/tsp') for solids measured by the cup.
    """
    name: str
    density: float
    convention: str = 'g/ml'

    def __post_init__(self):
        if self.convention not in DENSITY_CONVENTIONS:
            raise ValidationError(
                f"Unknown density convention '{self.convention}'",
                f"Use one of: {', '.join(DENSITY_CONVENTIONS)}"
            )
        if self.density <= 0:
            raise ValidationError(f"Density for '{self.name}' must be positive")

    @property
    def key(self):
        return self.name.strip().lower()

    @classmethod
    def from_dict(cls, data):
        data = require_mapping(data, 'Density')
        return cls(
            name=sanitize_ingredient_name(pick(data, 'name', default='')),
            density=parse_quantity(pick(data, 'density'), 'density'),
            convention=pick(data, 'convention', 'unit', default='g/ml'),
        )


@dataclass(frozen=True)
class Quantity(Model):
    """An amount in a named unit."""
    value: float
    unit: str

    @classmethod
    def from_dict(cls, data, field='quantity'):
        """
        Build from {value|quantity, unit}.

        Unlike recipe lines, a standalone quantity has no implied count unit:
        a missing unit is a ValidationError.
        """
        data = require_mapping(data, 'Quantity')
        unit = sanitize_text(pick(data, 'unit', default=''), MAX_LENGTHS['unit'])
        if not unit:
            raise ValidationError(f'{field} unit is required', 'Give the unit, for example g, cup or each.')
        return cls(
            value=parse_quantity(pick(data, 'value', 'quantity'), field),
            unit=unit,
        )


@dataclass
class ConversionResult(Model):
    """Outcome of converting (and optionally pricing) a quantity."""
    target_quantity: float
    target_unit: str
    base_quantity: float
    base_unit: str
    conversion_factor: float
    price_per_base_unit: Optional[float] = None
    target_price: Optional[float] = None
    density_used: Optional[str] = None

    def rounded(self, precision=2):
        """Copy with every number rounded for presentation."""
        def _round(value):
            return None if value is None else round(value, precision)

        return ConversionResult(
            target_quantity=_round(self.target_quantity),
            target_unit=self.target_unit,
            base_quantity=_round(self.base_quantity),
            base_unit=self.base_unit,
            # Factors and unit prices are tiny numbers; keep their precision
            conversion_factor=self.conversion_factor,
            price_per_base_unit=self.price_per_base_unit,
            target_price=_round(self.target_price),
            density_used=self.density_used,
        )
