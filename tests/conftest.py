import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from models import Recipe  # noqa: E402


@pytest.fixture
def client():
    from app import app
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


@pytest.fixture
def make_recipe():
    """Build a Recipe from (name, quantity, unit, notes) tuples."""
    def _make(name, servings, lines, instructions=''):
        return Recipe.from_dict({
            'name': name,
            'servings': servings,
            'instructions': instructions,
            'ingredients': [
                {'name': line[0], 'quantity': line[1], 'unit': line[2],
                 'notes': line[3] if len(line) > 3 else None,
                 'category': line[4] if len(line) > 4 else None}
                for line in lines
            ],
        })
    return _make
