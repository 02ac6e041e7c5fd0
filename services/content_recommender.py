"""Content-based similar-food recommender.

Vectorizes foods by their nutrient profile (protein, energy, fat, carbs)
plus a one-hot category, then ranks by cosine similarity. Used to offer
swaps for a food with a comparable profile.
"""

from typing import List, Tuple
from sqlalchemy.orm import Session
from database import models
from core.logger import get_logger
import numpy as np
from sklearn.metrics.pairwise import cosine_similarity

logger = get_logger("services.content_recommender")

NUTRIENT_COLUMNS = ("protein", "energy", "fat", "carbs")


class ContentBasedRecommender:
    """Content-based recommender over nutrient vectors and categories.

    Methods
    -------
    _vectorize_foods(foods)
        Convert foods into a numeric feature matrix and id list.
    recommend_similar(db, food_id, top_k=5)
        Return (food_id, score) tuples for the top-k most similar foods.
    """

    def __init__(self):
        self.logger = logger

    def _vectorize_foods(self, foods: List[models.Food]):
        """Convert foods into a feature matrix and the matching ids.

        Nutrient columns are divided by their column maximum so energy does
        not dominate. Category columns are 0/1 indicators.

        Returns:
            Tuple[numpy.ndarray, List[str]]: ``(X, ids)``.
        """
        categories = sorted({f.category for f in foods if f.category})
        features = []
        ids = []
        for f in foods:
            num_feats = [float(getattr(f, col, None) or 0.0) for col in NUTRIENT_COLUMNS]
            cat_feats = [1.0 if f.category == c else 0.0 for c in categories]
            features.append(num_feats + cat_feats)
            ids.append(f.id)

        X = np.array(features, dtype=float)
        if X.shape[0] > 0:
            num_cols = len(NUTRIENT_COLUMNS)
            col_max = X[:, :num_cols].max(axis=0)
            col_max[col_max == 0] = 1.0
            X[:, :num_cols] = X[:, :num_cols] / col_max
        return X, ids

    def recommend_similar(self, db: Session, food_id: str, top_k: int = 5) -> List[Tuple[str, float]]:
        """Return the top-k foods most similar to ``food_id``.

        Args:
            db (Session): SQLAlchemy session used to load the catalog.
            food_id (str): Food to find neighbours for.
            top_k (int): Maximum number of results.

        Returns:
            List[Tuple[str, float]]: ``(food_id, score)`` pairs, best first.
            Empty if the food is unknown or the catalog is empty.
        """
        foods = db.query(models.Food).all()
        if not foods:
            return []
        X, ids = self._vectorize_foods(foods)
        if food_id not in ids:
            self.logger.warning("food_id %s not found for similarity", food_id)
            return []
        idx = ids.index(food_id)
        row = cosine_similarity(X[idx:idx + 1], X)[0]
        ranked = [(ids[i], float(row[i])) for i in range(len(ids)) if i != idx]
        ranked.sort(key=lambda x: x[1], reverse=True)
        return ranked[:top_k]


content_recommender = ContentBasedRecommender()
