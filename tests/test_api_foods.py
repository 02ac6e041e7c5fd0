"""Tests for the food catalog endpoints, called directly with DB sessions."""

import pytest
from database import init_db
from database.database import ReadSessionLocal
from core.exceptions import NotFoundError
from api.foods import (
    search_foods,
    list_categories,
    search_suggestions,
    protein_ranking,
    get_food,
    get_similar_foods,
)


@pytest.fixture(scope="module", autouse=True)
def setup_db():
    """Initialize database before tests."""
    init_db()


@pytest.fixture
def db():
    session = ReadSessionLocal()
    try:
        yield session
    finally:
        session.close()


def search(db, **kwargs):
    params = dict(q="", category="", limit=20, offset=0, sort="protein", order="desc")
    params.update(kwargs)
    return search_foods(db=db, **params)


def test_search_defaults_to_protein_desc(db):
    res = search(db)
    assert len(res.foods) == 20
    assert res.pagination.total == 36
    assert res.pagination.has_more is True
    assert res.foods[0].id == "chicken_salad_1"
    proteins = [f.protein for f in res.foods]
    assert proteins == sorted(proteins, reverse=True)


def test_search_by_name(db):
    res = search(db, q="tofu")
    ids = [f.id for f in res.foods]
    assert "tofu_1" in ids
    for f in res.foods:
        assert "tofu" in f.name.lower() or "tofu" in (f.name_kana or "").lower()


def test_search_by_category(db):
    res = search(db, category="fish")
    assert res.pagination.total == 6
    assert all(f.category == "fish" for f in res.foods)


def test_search_sort_by_name_ascending(db):
    res = search(db, sort="name", order="asc", limit=100)
    names = [f.name for f in res.foods]
    assert names == sorted(names)


def test_search_unknown_sort_falls_back_to_protein(db):
    res = search(db, sort="DROP TABLE foods")
    assert res.foods[0].id == "chicken_salad_1"


def test_search_pagination_tail_and_limit_cap(db):
    res = search(db, offset=30)
    assert len(res.foods) == 6
    assert res.pagination.has_more is False
    capped = search(db, limit=1000)
    assert capped.pagination.limit == 100
    assert len(capped.foods) == 36


def test_categories(db):
    stats = list_categories(db=db)
    assert sum(s.count for s in stats) == 36
    counts = [s.count for s in stats]
    assert counts == sorted(counts, reverse=True)
    egg = next(s for s in stats if s.category == "egg")
    assert egg.count == 2
    assert egg.avg_protein == pytest.approx(5.9)


def test_suggestions_prefix_first(db):
    results = search_suggestions(q="to", db=db)
    assert results
    assert len(results) <= 10
    assert results[0].name.lower().startswith("to")
    assert search_suggestions(q="", db=db) == []
    assert search_suggestions(q="   ", db=db) == []


def test_protein_ranking(db):
    top = protein_ranking(limit=3, db=db)
    assert [f.id for f in top] == ["chicken_salad_1", "salmon_1", "protein_bar_1"]
    assert len(protein_ranking(limit=500, db=db)) == 36


def test_food_detail_with_related_patterns(db):
    res = get_food("natto_1", db=db)
    assert res.food.id == "natto_1"
    assert 1 <= len(res.related_patterns) <= 5
    for pattern in res.related_patterns:
        assert "natto_1" in [pf.food_id for pf in pattern.foods]


def test_food_detail_not_found(db):
    with pytest.raises(NotFoundError) as exc_info:
        get_food("no_such_food", db=db)
    assert exc_info.value.status_code == 404
    assert "Food" in exc_info.value.message


def test_similar_foods(db):
    similar = get_similar_foods("tofu_1", top_k=3, db=db)
    assert len(similar) == 3
    assert "tofu_1" not in [f.id for f in similar]
    scores = [f.score for f in similar]
    assert scores == sorted(scores, reverse=True)
    with pytest.raises(NotFoundError):
        get_similar_foods("no_such_food", top_k=3, db=db)
