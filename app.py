import logging

from flask import Flask, jsonify, request

from config import get_config
from constants import MAX_LENGTHS
from models import (
    Ingredient, IngredientDensity, InventoryItem, Menu, Quantity, Recipe
)
from models.base import pick
from services import (
    get_all_units, get_registry, convert, calculate_ingredient_cost,
    calculate_recipe_cost, round_recipe_cost, scale_recipe, generate_prep_list,
)
from utils.errors import PrepEngineError, ValidationError
from utils.parsing import parse_quantity
from utils.sanitizer import sanitize_ingredient_name, sanitize_text

app = Flask(__name__)
app.config.from_object(get_config())
app.json.sort_keys = app.config['JSON_SORT_KEYS']

logging.basicConfig(
    level=app.config['LOG_LEVEL'],
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)
logger = logging.getLogger(__name__)


# ============================================
# REQUEST HELPERS
# ============================================

def json_body():
    """Request JSON as a dict, or a ValidationError."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data


def list_field(data, *keys):
    value = pick(data, *keys, default=[])
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValidationError(f'{keys[0]} must be a list')
    return value


def quantity_field(data, value_keys, unit_keys):
    """Quantity from separate value and unit keys; both are required."""
    return Quantity.from_dict(
        {'value': pick(data, *value_keys), 'unit': pick(data, *unit_keys)},
        field=value_keys[0],
    )


def unit_field(data, *keys):
    unit = sanitize_text(pick(data, *keys, default=''), MAX_LENGTHS['unit'])
    if not unit:
        raise ValidationError(f'{keys[0]} is required', 'Give the unit, for example g, cup or each.')
    return unit


def flag_field(data, *keys):
    value = pick(data, *keys, default=False)
    if not isinstance(value, bool):
        raise ValidationError(f'{keys[0]} must be true or false')
    return value


def request_registry(data):
    """Default densities under the configured policy, plus any sent with the request."""
    registry = get_registry(app.config['DENSITY_MATCH_POLICY'])
    return registry.with_densities(
        IngredientDensity.from_dict(item) for item in list_field(data, 'densities')
    )


def precision():
    return app.config['DISPLAY_PRECISION']


# ============================================
# ERROR HANDLERS
# ============================================

@app.errorhandler(PrepEngineError)
def handle_engine_error(error):
    logger.info("%s: %s", type(error).__name__, error.message)
    return jsonify(error.to_dict()), error.status_code


@app.errorhandler(404)
def handle_not_found(error):
    return jsonify({'error': 'Not found'}), 404


@app.errorhandler(405)
def handle_method_not_allowed(error):
    return jsonify({'error': 'Method not allowed'}), 405


# ============================================
# ROUTES - REFERENCE DATA
# ============================================

@app.route('/api/units')
def list_units():
    return jsonify(get_all_units())


@app.route('/api/densities')
def list_densities():
    registry = get_registry(app.config['DENSITY_MATCH_POLICY'])
    query = request.args.get('query', '')
    return jsonify([density.to_dict() for density in registry.search(query)])


# ============================================
# ROUTES - CONVERSION & COST
# ============================================

@app.route('/api/convert', methods=['POST'])
def convert_units():
    data = json_body()
    source = quantity_field(data, ('quantity',), ('from_unit', 'fromUnit'))
    result = convert(
        sanitize_ingredient_name(pick(data, 'ingredient', 'name', default='')),
        source.value,
        source.unit,
        unit_field(data, 'to_unit', 'toUnit'),
        request_registry(data),
    )
    return jsonify(result.rounded(precision()).to_dict())


@app.route('/api/ingredient-cost', methods=['POST'])
def ingredient_cost():
    data = json_body()
    purchase = quantity_field(data, ('purchase_quantity', 'purchaseQuantity'), ('purchase_unit', 'purchaseUnit'))
    target = quantity_field(data, ('target_quantity', 'targetQuantity'), ('target_unit', 'targetUnit'))
    result = calculate_ingredient_cost(
        sanitize_ingredient_name(pick(data, 'ingredient', 'name', default='')),
        purchase.value,
        purchase.unit,
        parse_quantity(pick(data, 'purchase_price', 'purchasePrice'), 'purchase_price'),
        target.value,
        target.unit,
        request_registry(data),
    )
    return jsonify(result.rounded(precision()).to_dict())


# ============================================
# ROUTES - RECIPES
# ============================================

@app.route('/api/recipes/scale', methods=['POST'])
def recipe_scale():
    data = json_body()
    recipe = Recipe.from_dict(pick(data, 'recipe'))
    scaled = scale_recipe(
        recipe,
        pick(data, 'target_servings', 'targetServings'),
        pick(data, 'overrides', default=None),
    )
    return jsonify(scaled.rounded(precision()))


@app.route('/api/recipes/cost', methods=['POST'])
def recipe_cost():
    data = json_body()
    recipe = Recipe.from_dict(pick(data, 'recipe'))
    catalog = [Ingredient.from_dict(item) for item in list_field(data, 'catalog', 'ingredients')]
    costing = calculate_recipe_cost(
        recipe,
        catalog,
        pick(data, 'target_servings', 'targetServings'),
        request_registry(data),
    )
    return jsonify(round_recipe_cost(costing, precision()))


# ============================================
# ROUTES - PREP LISTS
# ============================================

@app.route('/api/prep-lists', methods=['POST'])
def prep_list():
    data = json_body()
    prep = generate_prep_list(
        pick(data, 'guest_count', 'guestCount'),
        menus=[Menu.from_dict(item) for item in list_field(data, 'menus')],
        recipes=[Recipe.from_dict(item) for item in list_field(data, 'recipes')],
        inventory=[InventoryItem.from_dict(item) for item in list_field(data, 'inventory')],
        catalog=[Ingredient.from_dict(item) for item in list_field(data, 'catalog', 'ingredients')],
        overrides=pick(data, 'overrides', default=None),
        registry=request_registry(data),
        gst_rate=app.config['GST_RATE'],
        minutes_per_task=app.config['PREP_MINUTES_PER_TASK'],
        max_guests=app.config['MAX_GUEST_COUNT'],
        reserve_minimum_stock=flag_field(data, 'reserve_minimum_stock', 'reserveMinimumStock'),
    )
    return jsonify(prep.rounded(precision()))


if __name__ == '__main__':
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000)
