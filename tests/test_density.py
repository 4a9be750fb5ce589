"""Tests for the density registry."""

import pytest

from models import Ingredient, IngredientDensity
from services.density import (
    DEFAULT_REGISTRY, DensityRegistry, extend_with_catalog, get_registry, grams_per_ml
)
from utils.errors import ValidationError


def test_exact_match_is_case_insensitive():
    density = DEFAULT_REGISTRY.find('  Flour ')
    assert density.name == 'flour'
    assert density.density == 120
    assert density.convention == 'g/cup'


def test_longest_name_inside_query_wins():
    assert DEFAULT_REGISTRY.find('light coconut milk').name == 'coconut milk'
    assert DEFAULT_REGISTRY.find('extra virgin olive oil').name == 'olive oil'


def test_shortest_name_containing_query():
    # 'onions' rather than 'onion powder'
    assert DEFAULT_REGISTRY.find('onion').name == 'onions'


def test_no_match_returns_none():
    assert DEFAULT_REGISTRY.find('dragonfruit') is None
    assert DEFAULT_REGISTRY.find('') is None
    assert 'dragonfruit' not in DEFAULT_REGISTRY


def test_first_policy_keeps_registration_order():
    registry = get_registry('first')
    # 'milk' is registered before 'coconut milk'
    assert registry.find('light coconut milk').name == 'milk'
    assert get_registry() is DEFAULT_REGISTRY


def test_unknown_policy_rejected():
    with pytest.raises(ValidationError):
        DensityRegistry(policy='closest')


def test_with_densities_leaves_default_untouched():
    extended = DEFAULT_REGISTRY.with_densities([IngredientDensity('Saffron', 0.4, 'g/ml')])
    assert extended.find('saffron').density == 0.4
    assert DEFAULT_REGISTRY.find('saffron') is None
    assert len(extended) == len(DEFAULT_REGISTRY) + 1


def test_with_densities_overrides_existing_name():
    extended = DEFAULT_REGISTRY.with_densities([IngredientDensity('Flour', 125, 'g/cup')])
    assert extended.find('flour').density == 125
    assert DEFAULT_REGISTRY.find('flour').density == 120


def test_extend_with_catalog_uses_catalog_density():
    catalog = [Ingredient(name='Tahini', density=1.08), Ingredient(name='Eggs')]
    registry = extend_with_catalog(None, catalog)
    assert registry.find('tahini').density == 1.08
    assert registry.find('tahini').convention == 'g/ml'
    assert registry.find('eggs') is None


def test_empty_registry_is_not_replaced_by_default():
    empty = DensityRegistry()
    assert len(empty) == 0
    assert extend_with_catalog(empty, []).find('flour') is None


def test_grams_per_ml():
    assert grams_per_ml(DEFAULT_REGISTRY.find('water')) == 1.0
    assert grams_per_ml(DEFAULT_REGISTRY.find('flour')) == pytest.approx(120 / 236.588)


def test_invalid_density_rejected():
    with pytest.raises(ValidationError):
        IngredientDensity('sand', 1.5, 'g/bucket')
    with pytest.raises(ValidationError):
        IngredientDensity('air', 0)


def test_search():
    names = [density.name for density in DEFAULT_REGISTRY.search('Flour')]
    assert 'flour' in names
    assert 'bread flour' in names
    assert all('flour' in name for name in names)
    assert len(DEFAULT_REGISTRY.search('')) == len(DEFAULT_REGISTRY.all())
