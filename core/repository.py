"""Repository pattern classes for database operations.

`BaseRepository` carries the common CRUD helpers. `FoodRepository` and
`MealPatternRepository` add the catalog search and pattern queries used by
the API routers and the batch generator.
"""

import json
from typing import TypeVar, Generic, Type, Optional, List, Any, Dict, Tuple
from sqlalchemy import func, case
from sqlalchemy.orm import Session, selectinload
from database.models import Base, Food, MealPattern, MealPatternFood

T = TypeVar('T', bound=Base)

FOOD_SORT_FIELDS = {
    "protein": Food.protein,
    "name": Food.name,
    "energy": Food.energy,
    "fat": Food.fat,
    "carbs": Food.carbs,
}


class BaseRepository(Generic[T]):
    """Generic repository for common database operations.

    Attributes:
        model: SQLAlchemy model class to operate on.
        session: Database session for executing queries.
    """

    def __init__(self, model: Type[T], session: Session):
        self.model = model
        self.session = session

    def create(self, obj: T) -> T:
        """Add, commit and refresh a new object."""
        self.session.add(obj)
        self.session.commit()
        self.session.refresh(obj)
        return obj

    def get_by_id(self, id: Any) -> Optional[T]:
        """Retrieve an object by its primary key, or None."""
        return self.session.get(self.model, id)

    def get_all(self, skip: int = 0, limit: Optional[int] = None) -> List[T]:
        """Retrieve all objects, optionally paginated."""
        query = self.session.query(self.model).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def count(self) -> int:
        """Count total number of records."""
        return self.session.query(self.model).count()


class FoodRepository(BaseRepository[Food]):
    """Catalog queries over the ``foods`` table."""

    def __init__(self, session: Session):
        super().__init__(Food, session)

    def _filtered(self, q: str = "", category: str = ""):
        query = self.session.query(Food)
        if q:
            pattern = f"%{q}%"
            query = query.filter((Food.name.ilike(pattern)) | (Food.name_kana.ilike(pattern)))
        if category:
            query = query.filter(Food.category == category)
        return query

    def search(
        self,
        q: str = "",
        category: str = "",
        sort: str = "protein",
        order: str = "desc",
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[List[Food], int]:
        """Search foods by name or reading, filter by category, sort and paginate.

        Unknown sort fields fall back to protein. Returns the page of foods and
        the total number of matches.
        """
        column = FOOD_SORT_FIELDS.get(sort, Food.protein)
        ordering = column.asc() if (order or "").lower() == "asc" else column.desc()
        query = self._filtered(q, category)
        total = query.count()
        foods = query.order_by(ordering, Food.id).offset(offset).limit(limit).all()
        return foods, total

    def get_many(self, ids: List[str]) -> Dict[str, Food]:
        """Return the foods for the given ids keyed by id. Unknown ids are absent."""
        if not ids:
            return {}
        rows = self.session.query(Food).filter(Food.id.in_(ids)).all()
        return {f.id: f for f in rows}

    def categories(self) -> List[Dict[str, Any]]:
        """Per-category food count and average protein, largest category first."""
        rows = (
            self.session.query(Food.category, func.count(Food.id), func.avg(Food.protein))
            .filter(Food.category.isnot(None))
            .group_by(Food.category)
            .order_by(func.count(Food.id).desc(), Food.category)
            .all()
        )
        return [
            {"category": category, "count": count, "avg_protein": round(float(avg or 0), 2)}
            for category, count, avg in rows
        ]

    def suggestions(self, q: str, limit: int = 10) -> List[Food]:
        """Autocomplete candidates. Prefix matches on name come first."""
        pattern = f"%{q}%"
        prefix_first = case((Food.name.ilike(f"{q}%"), 0), else_=1)
        return (
            self.session.query(Food)
            .filter((Food.name.ilike(pattern)) | (Food.name_kana.ilike(pattern)))
            .order_by(prefix_first, Food.protein.desc(), Food.name)
            .limit(limit)
            .all()
        )

    def protein_ranking(self, limit: int = 10) -> List[Food]:
        """Foods ordered by protein, highest first."""
        return self.session.query(Food).order_by(Food.protein.desc(), Food.id).limit(limit).all()

    def for_batch_generation(self, min_protein: float) -> List[Food]:
        """Foods eligible as main food for batch generation, by protein descending."""
        return (
            self.session.query(Food)
            .filter(Food.protein > min_protein)
            .order_by(Food.protein.desc(), Food.id)
            .all()
        )


class MealPatternRepository(BaseRepository[MealPattern]):
    """Queries and writes over ``meal_patterns`` and ``meal_pattern_foods``."""

    def __init__(self, session: Session):
        super().__init__(MealPattern, session)

    def list_patterns(
        self,
        food_id: Optional[str] = None,
        category: Optional[str] = None,
        popular: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[MealPattern]:
        """List patterns, optionally only those containing ``food_id``."""
        query = self.session.query(MealPattern).options(
            selectinload(MealPattern.foods).selectinload(MealPatternFood.food)
        )
        if food_id:
            query = query.join(MealPatternFood, MealPatternFood.pattern_id == MealPattern.id).filter(
                MealPatternFood.food_id == food_id
            )
        if category:
            query = query.filter(MealPattern.category == category)
        if popular:
            query = query.order_by(MealPattern.popularity.desc(), MealPattern.id)
        else:
            query = query.order_by(MealPattern.total_protein.desc(), MealPattern.id)
        return query.offset(offset).limit(limit).all()

    def related_to_food(self, food_id: str, limit: int = 5) -> List[MealPattern]:
        """Most popular patterns that contain the given food."""
        return self.list_patterns(food_id=food_id, popular=True, limit=limit)

    def increment_popularity(self, pattern_id: str) -> None:
        """Bump the view counter with a single UPDATE statement and commit."""
        self.session.query(MealPattern).filter(MealPattern.id == pattern_id).update(
            {MealPattern.popularity: MealPattern.popularity + 1},
            synchronize_session=False,
        )
        self.session.commit()

    def delete_auto_generated(self) -> int:
        """Delete every auto-generated pattern with its food rows. Returns the count."""
        patterns = self.session.query(MealPattern).filter(MealPattern.is_auto_generated.is_(True)).all()
        for pattern in patterns:
            self.session.delete(pattern)
        self.session.commit()
        return len(patterns)

    def save_generated(self, pattern: Dict[str, Any]) -> MealPattern:
        """Persist a generator pattern dict in one transaction.

        Rolls back and re-raises if any row fails to insert.
        """
        row = MealPattern(
            id=pattern["id"],
            name=pattern["name"],
            description=pattern.get("description"),
            total_protein=pattern["total_protein"],
            total_energy=pattern.get("total_energy") or 0,
            total_fat=pattern.get("total_fat") or 0,
            total_carbs=pattern.get("total_carbs") or 0,
            category=pattern.get("category"),
            tags=json.dumps(pattern.get("tags") or []),
            icon=pattern.get("icon") or "🍽️",
            popularity=0,
            is_auto_generated=True,
            main_food_id=pattern.get("main_food_id"),
        )
        for position, entry in enumerate(pattern.get("foods") or []):
            row.foods.append(MealPatternFood(
                food_id=entry["food_id"],
                position=position,
                quantity=entry.get("quantity") or 1.0,
                serving_size=entry.get("serving_size"),
            ))
        try:
            return self.create(row)
        except Exception:
            self.session.rollback()
            raise


def save(session: Session, obj: Base) -> Base:
    """Convenience function to add, commit and refresh an object.

    Args:
        session: Database session.
        obj: Model instance to persist.

    Returns:
        The persisted object with refreshed attributes.
    """
    session.add(obj)
    session.commit()
    session.refresh(obj)
    return obj
