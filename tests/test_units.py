"""Tests for unit lookup."""

import pytest

from constants import UNIT_DEFINITIONS, UNIT_SYNONYMS
from services.units import (
    resolve_unit, get_dimension, get_factor, same_unit, get_all_units, normalize_unit_text
)


@pytest.mark.parametrize('text,symbol', [
    ('kg', 'kg'),
    ('Kilograms', 'kg'),
    ('  LBS ', 'lb'),
    ('tbsp.', 'tbsp'),
    ('Tablespoons', 'tbsp'),
    ('fl oz', 'fl oz'),
    ('Fluid  Ounces', 'fl oz'),
    ('cups', 'cup'),
    ('pcs', 'each'),
    ('whole', 'each'),
])
def test_resolve_synonyms(text, symbol):
    assert resolve_unit(text).symbol == symbol


def test_unknown_unit_is_none():
    assert resolve_unit('smidge') is None
    assert resolve_unit('') is None
    assert resolve_unit(None) is None
    assert get_dimension('smidge') is None
    assert get_factor('smidge') is None


def test_every_synonym_maps_to_a_definition():
    for synonym, symbol in UNIT_SYNONYMS.items():
        assert symbol in UNIT_DEFINITIONS, synonym


def test_factors_are_positive():
    for dimension, factor in UNIT_DEFINITIONS.values():
        assert factor > 0


def test_us_customary_volumes():
    assert get_factor('cup') == 236.588
    assert get_factor('tbsp') == 14.7868
    assert get_factor('tsp') == 4.92892


def test_base_units_have_factor_one():
    assert get_factor('g') == 1
    assert get_factor('ml') == 1
    assert get_factor('each') == 1


def test_dimensions():
    assert get_dimension('oz') == 'weight'
    assert get_dimension('quart') == 'volume'
    assert get_dimension('item') == 'count'


def test_same_unit():
    assert same_unit('kg', 'kilograms')
    assert same_unit('Cup', 'cups')
    assert not same_unit('kg', 'g')
    assert same_unit('bunch', 'Bunch')


def test_normalize_unit_text():
    assert normalize_unit_text(' Fl.  Oz. ') == 'fl. oz'


def test_get_all_units_groups_by_dimension():
    grouped = get_all_units()
    assert set(grouped) == {'weight', 'volume', 'count'}
    assert 'kg' in grouped['weight']
    assert 'tablespoon' in grouped['volume']
    assert 'piece' in grouped['count']
