"""Seed meal patterns.

Classic breakfast sets reference catalog food ids. Single-food patterns are
built at seed time for every food that reaches ``SINGLE_FOOD_MIN_PROTEIN``
on its own and carry the ``single`` category.
"""

SINGLE_FOOD_MIN_PROTEIN = 15.0

CLASSIC_PATTERNS = [
    # Japanese
    {"id": "japanese-traditional", "name": "Japanese Breakfast (rice, natto, egg)", "description": "The classic Japanese style", "food_ids": ["rice_1", "natto_1", "egg_1"], "category": "japanese", "icon": "🍚"},
    {"id": "japanese-fish", "name": "Japanese Breakfast (rice, salmon, miso soup)", "description": "Grilled fish at the center", "food_ids": ["rice_1", "salmon_1", "miso_soup_tofu_1"], "category": "japanese", "icon": "🐟"},
    {"id": "natto-teishoku", "name": "Natto Teishoku", "description": "Natto and tofu for plenty of protein", "food_ids": ["rice_1", "natto_1", "tofu_1"], "category": "japanese", "icon": "🍚"},
    # Western
    {"id": "western-classic", "name": "Western Breakfast (bread, egg, ham)", "description": "The classic Western style", "food_ids": ["bread_1", "egg_1", "ham_1", "milk_1"], "category": "western", "icon": "🥖"},
    {"id": "cheese-toast", "name": "Cheese Toast Set", "description": "Cheese toast with yogurt", "food_ids": ["cheese_toast_1", "yogurt_1", "milk_1"], "category": "western", "icon": "🥖"},
    {"id": "cereal-bowl", "name": "Cereal Bowl", "description": "Granola with dairy", "food_ids": ["granola_1", "yogurt_1", "milk_1", "banana_1"], "category": "yogurt", "icon": "🥛"},
    {"id": "egg-toast", "name": "Egg Toast", "description": "Toast with egg and bacon", "food_ids": ["bread_1", "egg_1", "bacon_1", "soymilk_1"], "category": "western", "icon": "🍳"},
    # Balanced
    {"id": "pfc-balance", "name": "PFC Balanced Breakfast", "description": "Protein, fat and carbs in balance", "food_ids": ["rice_1", "egg_1", "natto_1", "avocado_1"], "category": "balanced", "icon": "🍱"},
    {"id": "protein-boost", "name": "Protein Boost Set", "description": "Salad chicken for more than 20g of protein", "food_ids": ["chicken_salad_1", "bread_1", "tomato_1"], "category": "high_protein", "icon": "💪"},
    {"id": "healthy-morning", "name": "Healthy Breakfast", "description": "Low calorie, tofu and vegetables", "food_ids": ["tofu_1", "edamame_1", "tomato_1", "miso_soup_tofu_1"], "category": "healthy", "icon": "🌱"},
    {"id": "light-morning", "name": "Light Morning", "description": "A light start", "food_ids": ["bread_1", "milk_1"], "category": "light", "icon": "☕"},
]
