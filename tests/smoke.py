"""
Smoke tests for the prep engine.
Run with: python tests/smoke.py
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

def test_app_imports():
    """Verify app can be imported without errors."""
    from app import app
    assert app is not None
    print("OK: App imports successfully")

def test_models_import():
    """Verify models can be imported."""
    from models import Recipe, Ingredient, InventoryItem, PrepTask, PurchaseItem
    assert Recipe is not None
    assert PrepTask is not None
    print("OK: Models import successfully")

def test_utils_import():
    """Verify input utilities can be imported."""
    from utils import parse_fraction, sanitize_text, ValidationError
    assert callable(parse_fraction)
    assert callable(sanitize_text)
    assert issubclass(ValidationError, Exception)
    print("OK: Utils import successfully")

def test_constants_import():
    """Verify constants can be imported."""
    from constants import UNIT_DEFINITIONS, UNIT_SYNONYMS, INGREDIENT_DENSITIES, PREP_VERBS
    assert 'cup' in UNIT_DEFINITIONS
    assert UNIT_SYNONYMS['lbs'] == 'lb'
    assert 'dice' in PREP_VERBS
    assert len(INGREDIENT_DENSITIES) > 0
    print("OK: Constants import successfully")

def test_conversion_constants_unchanged():
    """Verify critical conversion constants have expected values."""
    from constants import UNIT_DEFINITIONS

    # These values must not change
    assert UNIT_DEFINITIONS['g'][1] == 1
    assert UNIT_DEFINITIONS['kg'][1] == 1000
    assert UNIT_DEFINITIONS['ml'][1] == 1
    assert UNIT_DEFINITIONS['l'][1] == 1000
    assert UNIT_DEFINITIONS['cup'][1] == 236.588
    assert UNIT_DEFINITIONS['tbsp'][1] == 14.7868
    assert UNIT_DEFINITIONS['tsp'][1] == 4.92892
    assert UNIT_DEFINITIONS['lb'][1] == 453.592
    print("OK: Conversion constants unchanged")

def test_app_runs():
    """Verify app can create test client."""
    from app import app
    app.config['TESTING'] = True
    with app.test_client() as client:
        response = client.get('/api/units')
        assert response.status_code == 200
        print("OK: App serves unit list")

if __name__ == '__main__':
    print("Running smoke tests...\n")

    tests = [
        test_app_imports,
        test_models_import,
        test_utils_import,
        test_constants_import,
        test_conversion_constants_unchanged,
        test_app_runs,
    ]

    failed = 0
    for test in tests:
        try:
            test()
        except Exception as e:
            print(f"FAIL: {test.__name__} - {e}")
            failed += 1

    print(f"\n{'='*40}")
    if failed:
        print(f"FAILED: {failed}/{len(tests)} tests")
        sys.exit(1)
    else:
        print(f"PASSED: {len(tests)}/{len(tests)} tests")
        sys.exit(0)
