"""Tests for prep list aggregation."""

import pytest

from models import Ingredient, InventoryItem, Menu, ScaledIngredient
from services.prep import (
    consolidate_prep_tasks, consolidation_key, estimate_prep_time, extract_prep_tasks,
    generate_prep_list, get_priority, sort_prep_tasks,
)
from utils.errors import NotFoundError, ValidationError


def line(name, quantity, unit, notes=None, category='other'):
    return ScaledIngredient(name=name, original_quantity=quantity, original_unit=unit,
                            quantity=quantity, unit=unit, category=category, notes=notes)


# =========== CONSOLIDATION ===========

def test_consolidation_key():
    assert consolidation_key(line('Onions', 1, 'kg', 'Dice')) == ('dice', 'onion')
    assert consolidation_key(line('Carrots', 1, 'kg')) == ('prep carrot', 'carrot')


def test_merge_converts_into_first_seen_unit():
    tasks = consolidate_prep_tasks([
        line('onions', 500, 'g', 'dice'),
        line('Onion', 1, 'kg', 'Dice'),
    ])
    assert len(tasks) == 1
    assert tasks[0].task == 'dice onions'
    assert tasks[0].quantity == 1500
    assert tasks[0].unit == 'g'


def test_merge_same_unit_sums():
    tasks = consolidate_prep_tasks([
        line('Carrots', 2, 'kg'),
        line('carrot', 0.5, 'kg'),
    ])
    assert [(task.task, task.quantity, task.unit) for task in tasks] == [('prep Carrots', 2.5, 'kg')]


def test_merge_across_volume_units():
    tasks = consolidate_prep_tasks([line('Milk', 1, 'l'), line('milk', 500, 'ml')])
    assert tasks[0].quantity == pytest.approx(1.5)
    assert tasks[0].unit == 'l'


def test_unconvertible_lines_stay_separate():
    tasks = consolidate_prep_tasks([
        line('onions', 2, 'each', 'dice'),
        line('onions', 500, 'g', 'dice'),
        line('onions', 1, 'kg', 'dice'),
    ])
    assert [(task.quantity, task.unit) for task in tasks] == [(2, 'each'), (1500, 'g')]


def test_different_prep_stays_separate():
    tasks = consolidate_prep_tasks([
        line('onions', 500, 'g', 'dice'),
        line('onions', 500, 'g', 'slice'),
    ])
    assert [task.task for task in tasks] == ['dice onions', 'slice onions']


def test_priority_table():
    assert get_priority('protein') == 'high'
    assert get_priority('Seafood') == 'high'
    assert get_priority('produce') == 'medium'
    assert get_priority('dairy') == 'medium'
    assert get_priority('bakery') == 'low'
    assert get_priority(None) == 'low'


def test_sort_by_priority_then_category():
    tasks = consolidate_prep_tasks([
        line('Rice', 1, 'kg', category='other'),
        line('Carrots', 1, 'kg', category='produce'),
        line('Chicken', 1, 'kg', category='protein'),
        line('Cream', 1, 'l', category='dairy'),
        line('Beef', 1, 'kg', category='protein'),
    ])
    ordered = sort_prep_tasks(tasks)
    assert [task.ingredient for task in ordered] == ['Chicken', 'Beef', 'Cream', 'Carrots', 'Rice']


def test_estimate_prep_time():
    assert estimate_prep_time(3) == 15
    assert estimate_prep_time(3, 2.5) == 8
    assert estimate_prep_time(0) == 0


# =========== INSTRUCTIONS ===========

def test_extract_prefers_number_anchored_phrase():
    tasks = extract_prep_tasks('Preheat the oven\n3 carrots, peeled and sliced')
    assert tasks == ['3 carrots, peeled and sliced']


def test_extract_verb_in_context():
    assert extract_prep_tasks('Whisk the eggs until pale.') == ['Whisk the eggs until pale']


def test_extract_stops_at_digits():
    assert extract_prep_tasks('Dice 2 onions') == ['Dice']


def test_extract_deduplicates_in_order():
    tasks = extract_prep_tasks('Chop parsley\nGrate the cheese\nChop parsley')
    assert tasks == ['Chop parsley', 'Grate the cheese']


def test_extract_nothing():
    assert extract_prep_tasks('Serve warm') == []
    assert extract_prep_tasks('') == []
    assert extract_prep_tasks(None) == []


# =========== PREP LIST ===========

@pytest.fixture
def soups(make_recipe):
    return [
        make_recipe('Onion Soup', 10, [('Onions', 500, 'g', 'dice')],
                    instructions='Dice the onions finely'),
        make_recipe('French Onion', 10, [('Onion', 1, 'kg', 'Dice')],
                    instructions='Dice the onions finely\nSimmer for 1 hour'),
    ]


def test_prep_list_consolidates_and_checks_stock(soups):
    prep = generate_prep_list(
        10,
        menus=[Menu(name='Winter', recipes=soups)],
        inventory=[InventoryItem(name='Onions', current_stock=1, unit='kg')],
    )

    assert len(prep.prep_tasks) == 1
    task = prep.prep_tasks[0]
    assert (task.task, task.quantity, task.unit) == ('dice Onions', 1500, 'g')

    assert len(prep.purchase_list) == 1
    item = prep.purchase_list[0]
    assert item.needed_quantity == 1500
    assert item.current_stock == 1000
    assert item.shortfall == 500
    assert item.unit == 'g'

    assert prep.summary.total_ingredients == 1
    assert prep.summary.total_prep_tasks == 1
    assert prep.summary.items_to_purchase == 1
    assert prep.summary.estimated_prep_time == 5
    assert prep.instruction_tasks == [{'task': 'Dice the onions finely', 'recipe': 'Onion Soup'}]
    assert prep.menus == [{'name': 'Winter', 'category': None, 'recipes': 2}]
    assert prep.errors == []


def test_prep_list_scales_to_guests(soups):
    prep = generate_prep_list(30, recipes=soups)
    assert prep.prep_tasks[0].quantity == 4500
    assert prep.purchase_list[0].shortfall == 4500


def test_prep_list_catalog_category_and_cost(soups):
    catalog = [Ingredient(name='Onion', cost_per_unit=2.0, unit='kg', category='produce')]
    prep = generate_prep_list(
        10, recipes=soups, catalog=catalog,
        inventory=[InventoryItem(name='onion', current_stock=1000, unit='g')],
    )
    assert prep.prep_tasks[0].category == 'produce'
    assert prep.prep_tasks[0].priority == 'medium'
    assert prep.purchase_list[0].estimated_cost == pytest.approx(1.0)
    assert prep.estimated_cost['subtotal'] == pytest.approx(1.0)
    assert prep.estimated_cost['gst'] == pytest.approx(0.15)
    assert prep.estimated_cost['total'] == pytest.approx(1.15)


def test_prep_list_applies_overrides(soups):
    prep = generate_prep_list(20, recipes=soups[:1], overrides={'onions': {'quantity': 2, 'unit': 'kg'}})
    assert (prep.prep_tasks[0].quantity, prep.prep_tasks[0].unit) == (2, 'kg')


def test_prep_list_reports_broken_recipe(soups, make_recipe):
    broken = make_recipe('Broken', 0, [('Salt', 1, 'g')])
    prep = generate_prep_list(10, recipes=soups + [broken])
    assert len(prep.errors) == 1
    assert prep.errors[0]['recipe'] == 'Broken'
    assert prep.summary.total_prep_tasks == 1


def test_prep_list_rounded(soups):
    data = generate_prep_list(
        7, recipes=soups, inventory=[InventoryItem(name='Onions', current_stock=1, unit='kg')],
    ).rounded()
    assert data['guest_count'] == 7
    assert data['prep_tasks'][0]['quantity'] == 1050.0
    assert data['purchase_list'][0] == {
        'ingredient': 'Onions', 'needed': 1050.0, 'unit': 'g', 'current_stock': 1000.0, 'shortfall': 50.0,
    }
    assert data['summary']['estimated_prep_time'] == 5
    assert data['estimated_cost'] is None


@pytest.mark.parametrize('guest_count', [None, '', 0, -5, 2.5, 'lots'])
def test_invalid_guest_count(soups, guest_count):
    with pytest.raises(ValidationError):
        generate_prep_list(guest_count, recipes=soups)


def test_guest_limit(soups):
    with pytest.raises(ValidationError):
        generate_prep_list(500, recipes=soups, max_guests=100)


def test_nothing_selected():
    with pytest.raises(ValidationError):
        generate_prep_list(10)


def test_empty_menu():
    with pytest.raises(NotFoundError):
        generate_prep_list(10, menus=[Menu(name='Empty')])
