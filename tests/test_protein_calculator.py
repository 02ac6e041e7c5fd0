"""Tests for the protein goal calculator."""

from types import SimpleNamespace

import pytest

from services.protein_calculator import ProteinCalculator, protein_calculator, DEFAULT_PROTEIN_GOAL


def food(protein):
    return SimpleNamespace(protein=protein)


def test_calculate_sums_protein():
    assert protein_calculator.calculate([food(6.2), food(5.6)]) == pytest.approx(11.8)
    assert protein_calculator.calculate([]) == 0


def test_goal_achieved_at_exact_goal():
    calc = ProteinCalculator()
    assert calc.get_goal_amount() == DEFAULT_PROTEIN_GOAL == 20.0
    assert calc.is_goal_achieved(20.0)
    assert not calc.is_goal_achieved(19.9)


def test_remaining_never_negative():
    calc = ProteinCalculator(20)
    assert calc.get_remaining_to_goal(25) == 0
    assert calc.get_remaining_to_goal(12) == pytest.approx(8)


def test_progress_percentage_rounds_and_may_exceed_100():
    calc = ProteinCalculator(20)
    assert calc.get_progress_percentage(11.8) == 59
    assert calc.get_progress_percentage(25) == 125
    assert calc.get_progress_percentage(0) == 0


def test_summarize_empty_selection():
    summary = ProteinCalculator(30).summarize([])
    assert summary == {
        "current_protein": 0,
        "goal_protein": 30,
        "remaining_protein": 30,
        "progress_percentage": 0,
        "is_goal_achieved": False,
    }
