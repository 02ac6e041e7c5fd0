"""Meal recommender service.

Suggests foods that close the protein gap of a partial selection. Single
foods are ranked by how well their protein fits the gap and by category
novelty. Combination suggestions merge direct completions, bounded-overshoot
pairs and a category-diverse set, ranked by category balance.

Scoring is fully deterministic: identical inputs give identical output.
"""

from collections import Counter
from typing import Dict, List, Sequence

from core.logger import get_logger
from services.nutrients import food_to_dict, total
from services.protein_calculator import DEFAULT_PROTEIN_GOAL

logger = get_logger("services.meal_recommender")

TOP_RECOMMENDATIONS = 5
TOP_COMBINATIONS = 3
MAX_DIRECT_COMPLETIONS = 2
MAX_COMBINATION_CANDIDATES = 5
BALANCED_COMBINATION_SIZE = 3
# upper bound of a pair's protein, as a multiple of the gap
PAIR_OVERSHOOT = 1.5
# running-total cap of the diverse combination, as a multiple of the gap
DIVERSE_CAP = 1.3


class MealRecommender:
    """Scores catalog foods against the remaining protein gap."""

    def get_recommendations(
        self,
        selected_foods: Sequence,
        all_foods: Sequence,
        target_protein: float = DEFAULT_PROTEIN_GOAL,
    ) -> Dict:
        """Return the top single-food additions for a selection.

        Args:
            selected_foods: Foods already on the plate.
            all_foods: Catalog to choose from.
            target_protein: Protein goal in grams.

        Returns:
            Dict with ``recommendations`` (food fields plus ``score``,
            ``reason`` and ``protein_gap``), ``remaining_protein`` and
            ``is_target_met``. When the goal is already met the list is empty.
        """
        current_protein = total(selected_foods, "protein")
        remaining = max(0.0, target_protein - current_protein)
        if remaining == 0:
            return {"recommendations": [], "remaining_protein": 0.0, "is_target_met": True}

        selected_ids = {f.id for f in selected_foods}
        category_counts = Counter(getattr(f, "category", None) for f in selected_foods)

        scored = []
        for food in all_foods:
            if food.id in selected_ids:
                continue
            scored.append((self.score_food(food, remaining, category_counts), food))
        scored.sort(key=lambda x: x[0], reverse=True)

        recommendations = []
        for score, food in scored[:TOP_RECOMMENDATIONS]:
            item = food_to_dict(food)
            item["score"] = score
            item["reason"] = self.explain(food, remaining, category_counts)
            item["protein_gap"] = abs(remaining - food.protein)
            recommendations.append(item)

        logger.debug("Recommendations for gap %.1fg: %s", remaining, [r["id"] for r in recommendations])
        return {
            "recommendations": recommendations,
            "remaining_protein": remaining,
            "is_target_met": False,
        }

    def score_food(self, food, remaining: float, category_counts: Counter) -> float:
        """Protein efficiency + category novelty + 2 points per gram of protein."""
        score = 0.0
        efficiency = food.protein / remaining
        if 0.8 <= efficiency <= 1.2:
            score += 50
        elif 0.5 <= efficiency <= 1.5:
            score += 30
        else:
            score += 10 * min(1.0, efficiency)

        seen = category_counts.get(getattr(food, "category", None), 0)
        if seen == 0:
            score += 30
        elif seen == 1:
            score += 10

        score += food.protein * 2
        return score

    def explain(self, food, remaining: float, category_counts: Counter) -> str:
        """Human-readable reason for a recommendation."""
        if remaining * 0.8 <= food.protein <= remaining * 1.2:
            reason = f"Fits the remaining protein gap ({remaining:.1f}g) almost exactly"
        elif food.protein > remaining:
            reason = f"Reaches the goal on its own (protein {food.protein:g}g)"
        else:
            reason = f"Efficient high-protein pick (protein {food.protein:g}g)"
        if category_counts.get(getattr(food, "category", None), 0) == 0:
            reason += ", adds category balance"
        return reason

    def get_combination_suggestions(
        self,
        selected_foods: Sequence,
        all_foods: Sequence,
        target_protein: float = DEFAULT_PROTEIN_GOAL,
    ) -> List[Dict]:
        """Suggest up to three food sets that complete the selection.

        Each suggestion includes the already selected foods. Returns an empty
        list when the goal is already met.
        """
        selected = list(selected_foods)
        current_protein = total(selected, "protein")
        remaining = max(0.0, target_protein - current_protein)
        if remaining == 0:
            return []

        selected_ids = {f.id for f in selected}
        available = [f for f in all_foods if f.id not in selected_ids]
        suggestions = []

        # direct completions
        for food in [f for f in available if f.protein >= remaining][:MAX_DIRECT_COMPLETIONS]:
            suggestions.append(self._suggestion(selected + [food], f"{food.name} reaches the goal on its own"))

        # bounded-overshoot pairs
        upper = remaining * PAIR_OVERSHOOT
        for i in range(len(available) - 1):
            if len(suggestions) >= MAX_COMBINATION_CANDIDATES:
                break
            for j in range(i + 1, len(available)):
                if len(suggestions) >= MAX_COMBINATION_CANDIDATES:
                    break
                pair = [available[i], available[j]]
                pair_protein = total(pair, "protein")
                if remaining <= pair_protein <= upper:
                    suggestions.append(self._suggestion(
                        selected + pair,
                        f"{pair[0].name} and {pair[1].name} together",
                    ))

        if len(suggestions) < TOP_COMBINATIONS:
            balanced = self.find_balanced_combination(available, remaining, BALANCED_COMBINATION_SIZE)
            if balanced:
                suggestions.append(self._suggestion(selected + balanced, "Balanced combination across categories"))

        suggestions.sort(key=lambda s: s["category_balance"], reverse=True)
        return suggestions[:TOP_COMBINATIONS]

    def _suggestion(self, foods: List, description: str) -> Dict:
        return {
            "foods": [food_to_dict(f) for f in foods],
            "total_protein": total(foods, "protein"),
            "description": description,
            "category_balance": self.calculate_category_balance(foods),
        }

    def calculate_category_balance(self, foods: Sequence) -> float:
        """Diversity score in [0, 100]: distinct/total, penalized by the largest category share."""
        if not foods:
            return 0.0
        counts = Counter(getattr(f, "category", None) for f in foods)
        n = len(foods)
        diversity = len(counts) / n
        dominance = max(counts.values()) / n
        return diversity * 100 * (1 - dominance * 0.5)

    def find_balanced_combination(self, foods: Sequence, target_protein: float, max_items: int) -> List:
        """Pick at most one food per category toward ``target_protein``.

        Within a category the highest-protein food that keeps the running total
        under ``target * DIVERSE_CAP`` wins. If the total is still short, one
        more food that comes closest to closing the gap is appended.
        """
        groups = {}
        for food in foods:
            groups.setdefault(getattr(food, "category", None), []).append(food)

        combination = []
        current = 0.0
        cap = target_protein * DIVERSE_CAP
        for category_foods in groups.values():
            if len(combination) >= max_items or current >= target_protein:
                break
            for food in sorted(category_foods, key=lambda f: f.protein, reverse=True):
                if current + food.protein <= cap:
                    combination.append(food)
                    current += food.protein
                    break

        if current < target_protein and len(combination) < max_items:
            chosen_ids = {f.id for f in combination}
            rest = [f for f in foods if f.id not in chosen_ids]
            if rest:
                gap = target_protein - current
                combination.append(min(rest, key=lambda f: abs(gap - f.protein)))
        return combination


# export a default instance
meal_recommender = MealRecommender()
