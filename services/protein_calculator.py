"""Protein goal calculator.

Sums protein over a selection and reports progress toward the breakfast
goal (20g unless configured otherwise).
"""

from typing import Dict, Iterable
from core.logger import get_logger

logger = get_logger("services.protein_calculator")

DEFAULT_PROTEIN_GOAL = 20.0


class ProteinCalculator:
    """Class-based protein calculator used by the recommendation endpoints."""

    def __init__(self, goal: float = DEFAULT_PROTEIN_GOAL):
        self.goal = goal

    def calculate(self, foods: Iterable) -> float:
        """Sum the protein of the given foods."""
        return sum(f.protein for f in foods)

    def is_goal_achieved(self, current_protein: float) -> bool:
        return current_protein >= self.goal

    def get_remaining_to_goal(self, current_protein: float) -> float:
        """Protein still missing, never negative."""
        return max(0.0, self.goal - current_protein)

    def get_progress_percentage(self, current_protein: float) -> int:
        """Progress as a rounded percentage of the goal. May exceed 100."""
        if self.goal <= 0:
            return 100
        return round(current_protein / self.goal * 100)

    def get_goal_amount(self) -> float:
        return self.goal

    def summarize(self, foods: Iterable) -> Dict[str, float]:
        """Bundle every calculator figure for a selection."""
        current = self.calculate(foods)
        summary = {
            "current_protein": round(current, 1),
            "goal_protein": self.goal,
            "remaining_protein": round(self.get_remaining_to_goal(current), 1),
            "progress_percentage": self.get_progress_percentage(current),
            "is_goal_achieved": self.is_goal_achieved(current),
        }
        logger.debug("Protein summary: %s", summary)
        return summary


# export singleton
protein_calculator = ProteinCalculator()
__all__ = ["ProteinCalculator", "protein_calculator", "DEFAULT_PROTEIN_GOAL"]
