"""Unit tests for the content-based similar-food recommender."""

from services.content_recommender import ContentBasedRecommender


class DummyFood:
    """Simple stand-in object mimicking the Food ORM fields used by the recommender."""
    def __init__(self, id, protein, energy, fat, carbs, category):
        self.id = id
        self.name = id
        self.protein = protein
        self.energy = energy
        self.fat = fat
        self.carbs = carbs
        self.category = category


class DummyDB:
    """Minimal DB wrapper that returns a list of dummy foods for queries."""
    def __init__(self, foods):
        self._foods = foods

    def query(self, model):
        class Q:
            def __init__(self, foods):
                self._foods = foods

            def all(self):
                return self._foods

        return Q(self._foods)


def test_recommend_similar_basic():
    """A food with a near-identical profile and category ranks first."""
    a = DummyFood("chicken", 20, 110, 2, 0.5, "meat")
    b = DummyFood("turkey", 21, 115, 2.5, 0.4, "meat")
    c = DummyFood("bread", 5, 160, 2.5, 28, "grain")
    db = DummyDB([a, b, c])
    rec = ContentBasedRecommender()
    ranked = rec.recommend_similar(db, "chicken", top_k=2)
    assert len(ranked) == 2
    assert ranked[0][0] == "turkey"
    assert ranked[0][1] > ranked[1][1]


def test_recommend_similar_excludes_query_food():
    foods = [DummyFood(f"f{i}", 5 + i, 100, 3, 10, "soy") for i in range(4)]
    ranked = ContentBasedRecommender().recommend_similar(DummyDB(foods), "f0", top_k=10)
    assert [fid for fid, _ in ranked].count("f0") == 0
    assert len(ranked) == 3


def test_recommend_similar_unknown_or_empty():
    rec = ContentBasedRecommender()
    assert rec.recommend_similar(DummyDB([]), "anything") == []
    foods = [DummyFood("a", 1, 1, 1, 1, "x")]
    assert rec.recommend_similar(DummyDB(foods), "missing") == []


def test_vectorize_handles_missing_nutrients():
    """Missing nutrient values count as zero and columns are max-normalized."""
    a = DummyFood("a", 10, None, None, None, "egg")
    b = DummyFood("b", 5, 200, 4, None, None)
    X, ids = ContentBasedRecommender()._vectorize_foods([a, b])
    assert ids == ["a", "b"]
    assert X.shape == (2, 5)
    assert X[0, 0] == 1.0
    assert X[1, 0] == 0.5
    assert X[0, 1] == 0.0
