"""
Prep List Models

Contains inventory snapshots and the prep tasks, purchase items and summary
produced for an event.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from utils.errors import ValidationError
from utils.parsing import parse_quantity
from utils.sanitizer import sanitize_ingredient_name, sanitize_unit

from .base import Model, pick, require_mapping


@dataclass(frozen=True)
class InventoryItem(Model):
    """On-hand stock of one ingredient."""
    name: str
    current_stock: float
    unit: str
    minimum_stock: float = 0.0

    @classmethod
    def from_dict(cls, data):
        data = require_mapping(data, 'Inventory item')
        name = sanitize_ingredient_name(pick(data, 'name', default=''))
        if not name:
            raise ValidationError('Inventory item name is required')
        return cls(
            name=name,
            current_stock=parse_quantity(pick(data, 'current_stock', 'currentStock', default=0),
                                         f"stock of '{name}'"),
            unit=sanitize_unit(pick(data, 'unit')),
            minimum_stock=parse_quantity(pick(data, 'minimum_stock', 'minimumStock', default=0),
                                         f"minimum stock of '{name}'"),
        )


@dataclass
class PrepTask(Model):
    task: str
    ingredient: str
    quantity: float
    unit: str
    category: str
    priority: str

    def rounded(self, precision=2):
        data = self.to_dict()
        data['quantity'] = round(self.quantity, precision)
        return data


@dataclass
class PurchaseItem(Model):
    """Quantity to buy because stock does not cover the need."""
    ingredient: str
    needed_quantity: float
    unit: str
    current_stock: float
    shortfall: float
    estimated_cost: Optional[float] = None
    note: Optional[str] = None

    def rounded(self, precision=2):
        data = {
            'ingredient': self.ingredient,
            'needed': round(self.needed_quantity, precision),
            'unit': self.unit,
            'current_stock': round(self.current_stock, precision),
            'shortfall': round(self.shortfall, precision),
        }
        if self.estimated_cost is not None:
            data['estimated_cost'] = round(self.estimated_cost, precision)
        if self.note:
            data['note'] = self.note
        return data


@dataclass
class PrepSummary(Model):
    total_ingredients: int
    total_prep_tasks: int
    items_to_purchase: int
    estimated_prep_time: int


@dataclass
class PrepList(Model):
    """Everything produced by one prep-list generation."""
    guest_count: int
    prep_tasks: List[PrepTask] = field(default_factory=list)
    instruction_tasks: List[dict] = field(default_factory=list)
    purchase_list: List[PurchaseItem] = field(default_factory=list)
    scaled_ingredients: list = field(default_factory=list)
    summary: Optional[PrepSummary] = None
    estimated_cost: Optional[dict] = None
    menus: List[dict] = field(default_factory=list)
    errors: List[dict] = field(default_factory=list)

    def rounded(self, precision=2):
        """Presentation form: the only place numbers are rounded."""
        return {
            'guest_count': self.guest_count,
            'menus': self.menus,
            'prep_tasks': [task.rounded(precision) for task in self.prep_tasks],
            'instruction_tasks': self.instruction_tasks,
            'purchase_list': [item.rounded(precision) for item in self.purchase_list],
            'scaled_ingredients': [line.rounded(precision) for line in self.scaled_ingredients],
            'summary': self.summary.to_dict() if self.summary else None,
            'estimated_cost': (
                {key: round(value, precision) for key, value in self.estimated_cost.items()}
                if self.estimated_cost else None
            ),
            'errors': self.errors,
        }
