"""Meal pattern generator.

Builds breakfast patterns that approach a protein target by greedily picking
foods from the in-memory catalog. Each pattern is shaped by its index: a
seeded generator keyed by ``(pattern_index, food_id)`` breaks ties and adds a
bounded score jitter, and the pick among the top candidates rotates with the
index. The same inputs and index always give the same foods, while
different indices give different sets.
"""

import re
import uuid
import zlib
from functools import lru_cache
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from core.logger import get_logger
from services.nutrients import food_to_dict, total

logger = get_logger("services.meal_generator")

# slack above the remaining gap when filtering candidates
PROTEIN_MARGIN = 5.0
CANDIDATE_POOL_SIZE = 50
TOP_CHOICES = 3
MIN_PATTERN_FOODS = 2
NEW_CATEGORY_BONUS = 50.0
RANDOM_SCORE_RANGE = 30.0

CATEGORY_ICONS = {
    "japanese": "🍚",
    "western": "🥖",
    "yogurt": "🥛",
    "light": "☕",
    "balanced": "🍱",
}
DEFAULT_ICON = "🍽️"


@lru_cache(maxsize=4096)
def _seeded_draws(pattern_index: int, food_id) -> Tuple[float, float]:
    """Two reproducible uniforms in [0, 1) for a (pattern index, food) pair.

    The first orders the candidate pool, the second jitters the greedy score.
    Cached per pair: pool sorting and every greedy pass reuse the same draws.
    """
    seed = [int(pattern_index), zlib.crc32(str(food_id).encode("utf-8"))]
    tiebreak, jitter = np.random.default_rng(seed).random(2)
    return float(tiebreak), float(jitter)


def _short_name(name: str) -> str:
    """Drop a trailing serving note such as "(1 fillet)" from a food name."""
    return re.sub(r"\s*\(.*?\)", "", name or "").strip() or name


class MealGenerator:
    """Greedy protein-target meal pattern generator."""

    def __init__(
        self,
        protein_margin: float = PROTEIN_MARGIN,
        pool_size: int = CANDIDATE_POOL_SIZE,
        top_choices: int = TOP_CHOICES,
    ):
        self.protein_margin = protein_margin
        self.pool_size = pool_size
        self.top_choices = top_choices

    def generate_meal_patterns(
        self,
        foods: Iterable,
        target_protein: float,
        main_food_id: Optional[str] = None,
        max_items: int = 4,
        exclude_categories: Optional[Sequence[str]] = None,
        prefer_categories: Optional[Sequence[str]] = None,
        count: int = 3,
    ) -> List[Dict]:
        """Generate up to ``count`` meal patterns approaching ``target_protein``.

        Args:
            foods: Catalog foods (ORM rows or attribute objects).
            target_protein: Protein goal in grams.
            main_food_id: Optional food seeded into every pattern. An unknown id
                is logged and ignored.
            max_items: Maximum foods per pattern, main food included.
            exclude_categories: Categories never picked as additions.
            prefer_categories: Categories ranked first, earlier entries first.
            count: Number of patterns to attempt.

        Returns:
            List of pattern dicts. May hold fewer than ``count`` entries, or
            none at all when no pattern reaches two foods.
        """
        catalog = list(foods)
        main_food = None
        if main_food_id:
            main_food = next((f for f in catalog if f.id == main_food_id), None)
            if main_food is None:
                logger.warning("Main food %s not found; generating without a seeded food", main_food_id)

        patterns = []
        for pattern_index in range(count):
            pattern = self.generate_single_pattern(
                catalog,
                target_protein,
                pattern_index,
                main_food=main_food,
                max_items=max_items,
                exclude_categories=exclude_categories,
                prefer_categories=prefer_categories,
            )
            if pattern is not None:
                patterns.append(pattern)

        logger.info(
            "Generated %s/%s patterns for target=%.1fg main=%s",
            len(patterns), count, target_protein, getattr(main_food, "id", None),
        )
        return patterns

    def generate_single_pattern(
        self,
        foods: Sequence,
        target_protein: float,
        pattern_index: int,
        main_food=None,
        max_items: int = 4,
        exclude_categories: Optional[Sequence[str]] = None,
        prefer_categories: Optional[Sequence[str]] = None,
    ) -> Optional[Dict]:
        """Build one pattern, or return None if it ends with fewer than 2 foods."""
        selected = []
        current_protein = 0.0
        if main_food is not None:
            selected.append(main_food)
            current_protein += main_food.protein
        remaining = target_protein - current_protein

        candidates = self.build_candidate_pool(
            foods,
            remaining,
            selected,
            pattern_index,
            max_items=max_items,
            exclude_categories=exclude_categories,
            prefer_categories=prefer_categories,
        )

        while len(selected) < max_items and remaining > 0 and candidates:
            best = self.select_best_food(candidates, remaining, selected, pattern_index)
            if best is None:
                break
            selected.append(best)
            current_protein += best.protein
            remaining = target_protein - current_protein
            candidates = [c for c in candidates if c.id != best.id]

        if len(selected) < MIN_PATTERN_FOODS:
            logger.debug("Pattern %s rejected with %s food(s)", pattern_index, len(selected))
            return None
        return self.build_pattern(selected, pattern_index, main_food)

    def build_candidate_pool(
        self,
        foods: Sequence,
        remaining: float,
        selected: Sequence,
        pattern_index: int,
        max_items: int = 4,
        exclude_categories: Optional[Sequence[str]] = None,
        prefer_categories: Optional[Sequence[str]] = None,
    ) -> List:
        """Filter and order the foods that may still join the pattern.

        Keeps foods with ``0 < protein <= remaining + margin`` that are neither
        selected nor in an excluded category. Orders them by preferred
        category rank, then closeness to an even per-slot share of the
        remaining gap, then the seeded tiebreaker. Truncates to the pool size.
        """
        selected_ids = {f.id for f in selected}
        excluded = set(exclude_categories or [])
        upper = remaining + self.protein_margin

        pool = [
            f for f in foods
            if f.id not in selected_ids
            and getattr(f, "category", None) not in excluded
            and 0 < f.protein <= upper
        ]

        open_slots = max(1, max_items - len(selected))
        ideal_share = remaining / open_slots

        preference_rank = {}
        for idx, category in enumerate(prefer_categories or []):
            preference_rank.setdefault(category, idx)
        no_preference = len(prefer_categories or [])

        def sort_key(food):
            key = []
            if preference_rank:
                key.append(preference_rank.get(getattr(food, "category", None), no_preference))
            key.append(abs(food.protein - ideal_share))
            key.append(_seeded_draws(pattern_index, food.id)[0])
            return tuple(key)

        pool.sort(key=sort_key)
        return pool[:self.pool_size]

    def select_best_food(self, candidates: Sequence, remaining: float, selected: Sequence, pattern_index: int):
        """Score candidates and pick one of the best few by pattern index.

        Score = protein fit (100 minus 10 per gram off the gap, floored at 0)
        + a bonus for a category not yet on the plate + seeded jitter.
        """
        if not candidates:
            return None
        selected_categories = {getattr(f, "category", None) for f in selected}

        scored = []
        for food in candidates:
            score = max(0.0, 100.0 - abs(food.protein - remaining) * 10)
            category = getattr(food, "category", None)
            if category and category not in selected_categories:
                score += NEW_CATEGORY_BONUS
            score += _seeded_draws(pattern_index, food.id)[1] * RANDOM_SCORE_RANGE
            scored.append((score, food))

        scored.sort(key=lambda x: x[0], reverse=True)
        top = scored[:self.top_choices]
        return top[pattern_index % len(top)][1]

    def build_pattern(self, selected: Sequence, pattern_index: int, main_food=None) -> Dict:
        """Assemble the pattern dict for a finished selection."""
        return {
            "id": f"generated-{uuid.uuid4().hex[:12]}-{pattern_index}",
            "name": self.generate_pattern_name(selected),
            "description": self.generate_pattern_description(selected),
            "total_protein": total(selected, "protein"),
            "total_energy": total(selected, "energy"),
            "total_fat": total(selected, "fat"),
            "total_carbs": total(selected, "carbs"),
            "category": self.determine_pattern_category(selected),
            "tags": self.generate_tags(selected),
            "icon": self.select_icon(selected),
            "is_auto_generated": True,
            "main_food_id": getattr(main_food, "id", None),
            "foods": [
                {
                    "food_id": f.id,
                    "food": food_to_dict(f),
                    "quantity": 1.0,
                    "serving_size": getattr(f, "typical_amount", None),
                }
                for f in selected
            ],
        }

    def generate_pattern_name(self, foods: Sequence) -> str:
        """Name the pattern after its highest-protein food and category mix."""
        main = max(foods, key=lambda f: f.protein)
        main_name = _short_name(main.name)
        categories = {getattr(f, "category", None) for f in foods} - {None}

        if "grain" in categories and "fish" in categories:
            return f"{main_name} Teishoku"
        if "dairy" in categories and "grain" in categories:
            return f"{main_name} Morning"
        if len(categories) >= 3:
            return f"Balanced {main_name} Set"
        return f"{main_name} Set"

    def generate_pattern_description(self, foods: Sequence) -> str:
        names = ", ".join(_short_name(f.name) for f in foods[:3])
        return f"{names} combination (protein {total(foods, 'protein'):.1f}g)"

    def determine_pattern_category(self, foods: Sequence) -> str:
        """Classify the pattern by the categories it contains."""
        categories = [getattr(f, "category", None) for f in foods]
        if "grain" in categories and ("fish" in categories or "soy" in categories):
            return "japanese"
        if categories.count("dairy") >= 2:
            return "yogurt"
        if "dairy" in categories or "meat" in categories:
            return "western"
        if len(foods) <= 2:
            return "light"
        return "balanced"

    def generate_tags(self, foods: Sequence) -> List[str]:
        tags = []
        total_protein = total(foods, "protein")
        if total_protein >= 25:
            tags.append("high_protein")
        elif total_protein >= 20:
            tags.append("protein_20g_plus")

        categories = {getattr(f, "category", None) for f in foods}
        for category in ("fish", "soy", "dairy"):
            if category in categories:
                tags.append(category)
        if len(foods) >= 4:
            tags.append("variety")
        return tags

    def select_icon(self, foods: Sequence) -> str:
        return CATEGORY_ICONS.get(self.determine_pattern_category(foods), DEFAULT_ICON)


# export a default instance
meal_generator = MealGenerator()
