"""Default breakfast food catalog.

Values are per typical serving (``typical_amount`` grams, described by
``unit``). Seeded into the ``foods`` table on first startup.
"""

FOODS_DATA = [
    # Eggs
    {"id": "egg_1", "name": "Egg (1 large)", "name_kana": "tamago", "protein": 6.2, "energy": 91, "fat": 6.2, "carbs": 0.2, "category": "egg", "typical_amount": 60, "unit": "1 egg", "image_url": "egg.jpg"},
    {"id": "pudding_1", "name": "Custard Pudding", "name_kana": "purin", "protein": 5.6, "energy": 126, "fat": 5.0, "carbs": 15.3, "category": "egg", "typical_amount": 100, "unit": "1 cup", "image_url": "pudding.jpg"},
    # Dairy
    {"id": "yogurt_1", "name": "Yogurt (1 cup)", "name_kana": "yoguruto", "protein": 4.3, "energy": 61, "fat": 3.0, "carbs": 4.9, "category": "dairy", "typical_amount": 100, "unit": "1 cup", "image_url": "yogurt.jpg"},
    {"id": "milk_1", "name": "Milk (200ml)", "name_kana": "gyunyu", "protein": 6.6, "energy": 134, "fat": 7.6, "carbs": 9.6, "category": "dairy", "typical_amount": 206, "unit": "200ml", "image_url": "milk.jpg"},
    {"id": "cheese_1", "name": "Cheese (1 slice)", "name_kana": "chizu", "protein": 4.5, "energy": 68, "fat": 5.2, "carbs": 0.3, "category": "dairy", "typical_amount": 20, "unit": "1 slice", "image_url": "cheese.jpg"},
    {"id": "cheese_toast_1", "name": "Cheese Toast", "name_kana": "chizu tosuto", "protein": 10.5, "energy": 240, "fat": 10.8, "carbs": 22.5, "category": "dairy", "typical_amount": 80, "unit": "1 slice", "image_url": "cheese_toast.jpg"},
    # Soy
    {"id": "natto_1", "name": "Natto (1 pack)", "name_kana": "natto", "protein": 8.3, "energy": 100, "fat": 5.0, "carbs": 6.1, "category": "soy", "typical_amount": 50, "unit": "1 pack", "image_url": "natto.jpg"},
    {"id": "tofu_1", "name": "Tofu (half block)", "name_kana": "tofu", "protein": 10.0, "energy": 108, "fat": 6.0, "carbs": 2.4, "category": "soy", "typical_amount": 150, "unit": "half block", "image_url": "tofu.jpg"},
    {"id": "miso_soup_tofu_1", "name": "Miso Soup with Tofu", "name_kana": "misoshiru", "protein": 4.5, "energy": 45, "fat": 2.1, "carbs": 3.2, "category": "soy", "typical_amount": 180, "unit": "1 bowl", "image_url": "miso_soup_tofu.jpg"},
    {"id": "soymilk_1", "name": "Soy Milk (200ml)", "name_kana": "tonyu", "protein": 7.2, "energy": 92, "fat": 4.0, "carbs": 6.2, "category": "soy", "typical_amount": 210, "unit": "200ml", "image_url": "soymilk.jpg"},
    {"id": "atsuage_1", "name": "Fried Tofu (half sheet)", "name_kana": "atsuage", "protein": 5.3, "energy": 75, "fat": 5.6, "carbs": 0.4, "category": "soy", "typical_amount": 50, "unit": "half sheet", "image_url": "atsuage.jpg"},
    {"id": "edamame_1", "name": "Edamame (50g)", "name_kana": "edamame", "protein": 5.8, "energy": 67, "fat": 3.1, "carbs": 4.3, "category": "soy", "typical_amount": 50, "unit": "50g", "image_url": "edamame.jpg"},
    # Meat
    {"id": "ham_1", "name": "Ham (2 slices)", "name_kana": "hamu", "protein": 3.3, "energy": 39, "fat": 2.8, "carbs": 0.4, "category": "meat", "typical_amount": 20, "unit": "2 slices", "image_url": "ham.jpg"},
    {"id": "sausage_1", "name": "Sausage (2 links)", "name_kana": "uinna", "protein": 5.2, "energy": 96, "fat": 8.6, "carbs": 0.6, "category": "meat", "typical_amount": 40, "unit": "2 links", "image_url": "sausage.jpg"},
    {"id": "bacon_1", "name": "Bacon (2 strips)", "name_kana": "bekon", "protein": 5.9, "energy": 81, "fat": 7.8, "carbs": 0.1, "category": "meat", "typical_amount": 36, "unit": "2 strips", "image_url": "bacon.jpg"},
    {"id": "chicken_1", "name": "Chicken Breast (50g)", "name_kana": "torimuneniku", "protein": 11.5, "energy": 54, "fat": 0.8, "carbs": 0.0, "category": "meat", "typical_amount": 50, "unit": "50g", "image_url": "chicken.jpg"},
    {"id": "chicken_salad_1", "name": "Salad Chicken", "name_kana": "sarada chikin", "protein": 21.7, "energy": 108, "fat": 1.5, "carbs": 0.1, "category": "meat", "typical_amount": 110, "unit": "1 pack", "image_url": "chicken_salad.jpg"},
    {"id": "meatball_1", "name": "Meatballs (3)", "name_kana": "mitoboru", "protein": 6.1, "energy": 99, "fat": 6.6, "carbs": 4.5, "category": "meat", "typical_amount": 45, "unit": "3 pieces", "image_url": "meatball.jpg"},
    # Fish
    {"id": "salmon_1", "name": "Salmon (1 fillet)", "name_kana": "sake", "protein": 17.8, "energy": 133, "fat": 4.1, "carbs": 0.1, "category": "fish", "typical_amount": 80, "unit": "1 fillet", "image_url": "salmon.jpg"},
    {"id": "tuna_can_1", "name": "Canned Tuna (half can)", "name_kana": "tsunakan", "protein": 8.8, "energy": 71, "fat": 4.5, "carbs": 0.1, "category": "fish", "typical_amount": 35, "unit": "half can", "image_url": "tuna_can.jpg"},
    {"id": "saba_can_1", "name": "Canned Mackerel (half can)", "name_kana": "sabakan", "protein": 13.0, "energy": 95, "fat": 5.3, "carbs": 0.2, "category": "fish", "typical_amount": 75, "unit": "half can", "image_url": "saba_can.jpg"},
    {"id": "shirasu_1", "name": "Whitebait (2 tbsp)", "name_kana": "shirasu", "protein": 4.1, "energy": 19, "fat": 0.4, "carbs": 0.1, "category": "fish", "typical_amount": 10, "unit": "2 tbsp", "image_url": "shirasu.jpg"},
    {"id": "kamaboko_1", "name": "Fish Cake (2 slices)", "name_kana": "kamaboko", "protein": 2.4, "energy": 19, "fat": 0.2, "carbs": 1.9, "category": "fish", "typical_amount": 20, "unit": "2 slices", "image_url": "kamaboko.jpg"},
    {"id": "chikuwa_1", "name": "Chikuwa (1 stick)", "name_kana": "chikuwa", "protein": 3.7, "energy": 30, "fat": 0.5, "carbs": 3.4, "category": "fish", "typical_amount": 30, "unit": "1 stick", "image_url": "chikuwa.jpg"},
    # Grains
    {"id": "rice_1", "name": "Rice (1 bowl)", "name_kana": "gohan", "protein": 3.8, "energy": 252, "fat": 0.5, "carbs": 55.7, "category": "grain", "typical_amount": 150, "unit": "1 bowl", "image_url": "rice.jpg"},
    {"id": "bread_1", "name": "White Bread (1 slice)", "name_kana": "shokupan", "protein": 5.6, "energy": 158, "fat": 2.6, "carbs": 28.0, "category": "grain", "typical_amount": 60, "unit": "1 slice", "image_url": "bread.jpg"},
    {"id": "udon_1", "name": "Udon (1 serving)", "name_kana": "udon", "protein": 6.1, "energy": 210, "fat": 0.6, "carbs": 43.2, "category": "grain", "typical_amount": 200, "unit": "1 serving", "image_url": "udon.jpg"},
    {"id": "pasta_1", "name": "Pasta (80g)", "name_kana": "pasuta", "protein": 10.4, "energy": 299, "fat": 1.5, "carbs": 57.0, "category": "grain", "typical_amount": 80, "unit": "80g dry", "image_url": "pasta.jpg"},
    {"id": "oatmeal_1", "name": "Oatmeal (30g)", "name_kana": "otomiru", "protein": 4.1, "energy": 114, "fat": 1.7, "carbs": 20.7, "category": "grain", "typical_amount": 30, "unit": "30g", "image_url": "oatmeal.jpg"},
    {"id": "granola_1", "name": "Granola (40g)", "name_kana": "guranora", "protein": 3.6, "energy": 180, "fat": 6.4, "carbs": 28.0, "category": "grain", "typical_amount": 40, "unit": "40g", "image_url": "granola.jpg"},
    # Other
    {"id": "nuts_1", "name": "Mixed Nuts (25g)", "name_kana": "mikkusu nattsu", "protein": 4.8, "energy": 152, "fat": 13.6, "carbs": 5.1, "category": "other", "typical_amount": 25, "unit": "25g", "image_url": "nuts.jpg"},
    {"id": "kinako_1", "name": "Roasted Soy Flour (2 tbsp)", "name_kana": "kinako", "protein": 4.4, "energy": 45, "fat": 2.3, "carbs": 3.1, "category": "other", "typical_amount": 10, "unit": "2 tbsp", "image_url": "kinako.jpg"},
    {"id": "protein_bar_1", "name": "Protein Bar", "name_kana": "purotein ba", "protein": 15.0, "energy": 200, "fat": 8.0, "carbs": 18.0, "category": "other", "typical_amount": 45, "unit": "1 bar", "image_url": "protein_bar.jpg"},
    {"id": "banana_1", "name": "Banana (1)", "name_kana": "banana", "protein": 1.1, "energy": 86, "fat": 0.2, "carbs": 22.5, "category": "fruit", "typical_amount": 100, "unit": "1 banana", "image_url": "banana.jpg"},
    {"id": "tomato_1", "name": "Tomato (1)", "name_kana": "tomato", "protein": 0.9, "energy": 30, "fat": 0.2, "carbs": 7.0, "category": "vegetable", "typical_amount": 150, "unit": "1 tomato", "image_url": "tomato.jpg"},
    {"id": "avocado_1", "name": "Avocado (half)", "name_kana": "abokado", "protein": 1.8, "energy": 131, "fat": 13.1, "carbs": 3.5, "category": "fruit", "typical_amount": 70, "unit": "half", "image_url": "avocado.jpg"},
]
