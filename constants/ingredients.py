"""
Ingredient Constants

Contains ingredient densities, prep task vocabulary and category priorities.
"""

# Ingredient densities (name, density, convention)
# Solids are quoted in grams per cup, liquids in grams per ml.
INGREDIENT_DENSITIES = (
    # Flours and grains
    ('flour', 120, 'g/cup'),
    ('all-purpose flour', 120, 'g/cup'),
    ('bread flour', 136, 'g/cup'),
    ('cake flour', 100, 'g/cup'),
    ('whole wheat flour', 120, 'g/cup'),
    ('rice', 185, 'g/cup'),
    ('brown rice', 195, 'g/cup'),
    ('oats', 80, 'g/cup'),
    ('quinoa', 170, 'g/cup'),
    # Sugars
    ('sugar', 200, 'g/cup'),
    ('brown sugar', 220, 'g/cup'),
    ('powdered sugar', 120, 'g/cup'),
    ('coconut sugar', 200, 'g/cup'),
    # Liquids
    ('water', 1.0, 'g/ml'),
    ('milk', 1.03, 'g/ml'),
    ('coconut milk', 0.97, 'g/ml'),
    ('cream', 1.01, 'g/ml'),
    ('oil', 0.92, 'g/ml'),
    ('olive oil', 0.92, 'g/ml'),
    ('vegetable oil', 0.92, 'g/ml'),
    ('honey', 1.4, 'g/ml'),
    ('maple syrup', 1.33, 'g/ml'),
    ('vinegar', 1.01, 'g/ml'),
    ('wine', 0.99, 'g/ml'),
    ('beer', 1.01, 'g/ml'),
    ('stock', 1.0, 'g/ml'),
    # Dairy
    ('butter', 227, 'g/cup'),
    ('cheese', 113, 'g/cup'),
    ('yogurt', 245, 'g/cup'),
    ('sour cream', 240, 'g/cup'),
    # Nuts and seeds
    ('almonds', 95, 'g/cup'),
    ('walnuts', 100, 'g/cup'),
    ('pecans', 100, 'g/cup'),
    ('cashews', 130, 'g/cup'),
    ('peanuts', 150, 'g/cup'),
    ('sunflower seeds', 140, 'g/cup'),
    ('chia seeds', 170, 'g/cup'),
    # Spices and seasonings
    ('salt', 292, 'g/cup'),
    ('pepper', 120, 'g/cup'),
    ('cinnamon', 120, 'g/cup'),
    ('paprika', 120, 'g/cup'),
    ('garlic powder', 120, 'g/cup'),
    ('onion powder', 120, 'g/cup'),
    ('oregano', 30, 'g/cup'),
    ('basil', 30, 'g/cup'),
    ('thyme', 30, 'g/cup'),
    # Vegetables (approximate, chopped)
    ('onions', 160, 'g/cup'),
    ('carrots', 128, 'g/cup'),
    ('celery', 100, 'g/cup'),
    ('potatoes', 150, 'g/cup'),
    ('tomatoes', 180, 'g/cup'),
    ('bell peppers', 150, 'g/cup'),
    ('mushrooms', 70, 'g/cup'),
    ('spinach', 30, 'g/cup'),
    ('lettuce', 30, 'g/cup'),
    # Fruits
    ('apples', 125, 'g/cup'),
    ('bananas', 150, 'g/cup'),
    ('strawberries', 150, 'g/cup'),
    ('blueberries', 150, 'g/cup'),
    ('lemons', 200, 'g/cup'),
    ('limes', 200, 'g/cup'),
)

# Preparation verbs looked for in free-form instructions
PREP_VERBS = (
    'dice', 'chop', 'slice', 'mince', 'julienne', 'brunoise', 'chiffonade',
    'blanch', 'boil', 'steam', 'roast', 'bake', 'grill', 'fry', 'saute', 'sauté',
    'marinate', 'season', 'mix', 'combine', 'whisk', 'beat', 'fold',
    'portion', 'divide', 'separate', 'trim', 'clean', 'wash', 'peel',
    'grate', 'shred', 'crush', 'mash', 'puree', 'strain', 'drain',
)

# Ingredient category -> prep priority
CATEGORY_PRIORITY = {
    'protein': 'high',
    'meat': 'high',
    'poultry': 'high',
    'seafood': 'high',
    'fish': 'high',
    'dairy': 'medium',
    'produce': 'medium',
    'vegetable': 'medium',
    'vegetables': 'medium',
    'fruit': 'medium',
    'herbs': 'medium',
}

DEFAULT_PRIORITY = 'low'

# Sort order for priorities
PRIORITY_RANK = {'high': 0, 'medium': 1, 'low': 2}

DEFAULT_CATEGORY = 'other'
