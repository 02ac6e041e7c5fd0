"""Unit tests for single-food recommendations and combination suggestions."""

from types import SimpleNamespace

import pytest

from data.foods_catalog import FOODS_DATA
from services.meal_recommender import MealRecommender, meal_recommender

CATALOG = [SimpleNamespace(**item) for item in FOODS_DATA]
BY_ID = {f.id: f for f in CATALOG}


def test_recommendations_for_bread_selection():
    result = meal_recommender.get_recommendations([BY_ID["bread_1"]], CATALOG, 20)
    ids = [r["id"] for r in result["recommendations"]]

    assert result["remaining_protein"] == pytest.approx(14.4)
    assert result["is_target_met"] is False
    assert len(ids) == 5
    assert "bread_1" not in ids
    assert "chicken_salad_1" in ids
    scores = [r["score"] for r in result["recommendations"]]
    assert scores == sorted(scores, reverse=True)
    for r in result["recommendations"]:
        assert "protein" in r["reason"]
        assert r["protein_gap"] == pytest.approx(abs(14.4 - r["protein"]))


def test_recommendations_when_target_met():
    result = meal_recommender.get_recommendations([BY_ID["chicken_salad_1"]], CATALOG, 20)
    assert result == {"recommendations": [], "remaining_protein": 0.0, "is_target_met": True}


def test_recommendations_are_deterministic():
    selected = [BY_ID["egg_1"], BY_ID["rice_1"]]
    first = meal_recommender.get_recommendations(selected, CATALOG, 25)
    second = meal_recommender.get_recommendations(selected, CATALOG, 25)
    assert first == second


def test_score_rewards_fit_and_new_category():
    rec = MealRecommender()
    from collections import Counter
    # 14.4 * 0.8 <= 13.0 <= 14.4 * 1.2, category not yet selected
    fit = rec.score_food(BY_ID["saba_can_1"], 14.4, Counter({"grain": 1}))
    assert fit == pytest.approx(50 + 30 + 26.0)
    # same category already twice: no novelty points
    repeat = rec.score_food(BY_ID["rice_1"], 14.4, Counter({"grain": 2}))
    assert repeat == pytest.approx(10 * 3.8 / 14.4 + 3.8 * 2)


def test_explain_mentions_category_balance_for_new_category():
    from collections import Counter
    reason = meal_recommender.explain(BY_ID["salmon_1"], 14.4, Counter({"grain": 1}))
    assert "protein" in reason
    assert reason.endswith("adds category balance")


def test_combination_suggestions_include_direct_completion():
    pool = [BY_ID["bread_1"], BY_ID["chicken_salad_1"], BY_ID["egg_1"]]
    suggestions = meal_recommender.get_combination_suggestions([BY_ID["bread_1"]], pool, 20)

    assert 1 <= len(suggestions) <= 3
    id_sets = [[f["id"] for f in s["foods"]] for s in suggestions]
    assert ["bread_1", "chicken_salad_1"] in id_sets
    direct = suggestions[id_sets.index(["bread_1", "chicken_salad_1"])]
    assert direct["total_protein"] == pytest.approx(27.3)
    for s in suggestions:
        assert s["foods"][0]["id"] == "bread_1"
    balances = [s["category_balance"] for s in suggestions]
    assert balances == sorted(balances, reverse=True)


def test_combination_suggestions_reach_target_on_full_catalog():
    suggestions = meal_recommender.get_combination_suggestions([BY_ID["bread_1"]], CATALOG, 20)
    assert len(suggestions) == 3
    for s in suggestions:
        assert s["total_protein"] >= 20 - 1e-9
        assert s["description"]


def test_combination_suggestions_when_target_met():
    assert meal_recommender.get_combination_suggestions([BY_ID["chicken_salad_1"]], CATALOG, 20) == []


def test_category_balance():
    assert meal_recommender.calculate_category_balance([]) == 0
    same = [BY_ID["egg_1"], BY_ID["pudding_1"]]
    assert meal_recommender.calculate_category_balance(same) == pytest.approx(25.0)
    mixed = [BY_ID["egg_1"], BY_ID["rice_1"]]
    assert meal_recommender.calculate_category_balance(mixed) == pytest.approx(75.0)


def test_balanced_combination_uses_distinct_categories_first():
    combo = meal_recommender.find_balanced_combination(CATALOG, 14.4, 3)
    assert 1 <= len(combo) <= 3
    categories = [f.category for f in combo]
    assert len(set(categories)) == len(categories)
    assert sum(f.protein for f in combo) >= 14.4


def item(id, protein, category):
    return SimpleNamespace(id=id, name=id, protein=protein, category=category)


def test_pairs_stay_within_overshoot_bound():
    # no single food closes a 10g gap; only a+c lands in [10, 15]
    a, b, c = item("a", 9, "x"), item("b", 8, "y"), item("c", 1, "z")
    suggestions = meal_recommender.get_combination_suggestions([], [a, b, c], 10)
    assert suggestions
    for s in suggestions:
        ids = {f["id"] for f in s["foods"]}
        assert not {"a", "b"} <= ids
        assert 10 <= s["total_protein"] <= 10 * 1.5


def test_pairs_stop_after_five_candidates(monkeypatch):
    rec = MealRecommender()
    built = []
    original = rec._suggestion

    def counting(foods, description):
        built.append([f.id for f in foods])
        return original(foods, description)

    monkeypatch.setattr(rec, "_suggestion", counting)
    pool = [item(f"f{i}", 5, f"cat{i}") for i in range(6)]
    suggestions = rec.get_combination_suggestions([], pool, 10)

    assert built == [["f0", "f1"], ["f0", "f2"], ["f0", "f3"], ["f0", "f4"], ["f0", "f5"]]
    assert len(suggestions) == 3
    assert all(s["total_protein"] == 10 for s in suggestions)


def test_balanced_combination_falls_back_to_closest_food():
    a, b, c = item("a", 8, "x"), item("b", 7, "x"), item("c", 12, "y")
    # c overshoots the 13g cap, so only the fallback can add a second food
    combo = meal_recommender.find_balanced_combination([a, b, c], 10, 3)
    assert [f.id for f in combo] == ["a", "b"]


def test_balanced_combination_respects_item_cap():
    small = [item(f"s{i}", 1, f"cat{i}") for i in range(5)]
    combo = meal_recommender.find_balanced_combination(small, 20, 3)
    assert [f.id for f in combo] == ["s0", "s1", "s2"]
    suggestions = meal_recommender.get_combination_suggestions([], small, 20)
    assert [[f["id"] for f in s["foods"]] for s in suggestions] == [["s0", "s1", "s2"]]
