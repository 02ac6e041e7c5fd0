"""Database helpers: engines, session factories and DB initialization.

Provides read/write session factories and an `init_db` helper that creates
tables and seeds the food catalog and the classic meal patterns when the
tables are empty.
"""

import json
import os
from datetime import datetime
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from .models import Base, Food, MealPattern, MealPatternFood, UpdateHistory
from data.foods_catalog import FOODS_DATA
from data.meal_patterns import CLASSIC_PATTERNS, SINGLE_FOOD_MIN_PROTEIN
from core.logger import get_logger

logger = get_logger("database.database")

# Read/Write partitioning pattern
# Point WRITE_DATABASE_URL and READ_DATABASE_URL at different instances in production.
# For SQLite both default to the same file.
WRITE_DATABASE_URL = os.getenv("WRITE_DATABASE_URL", "sqlite:///asatan.db")
READ_DATABASE_URL = os.getenv("READ_DATABASE_URL", WRITE_DATABASE_URL)

write_engine = create_engine(WRITE_DATABASE_URL, connect_args={"check_same_thread": False})
read_engine = create_engine(READ_DATABASE_URL, connect_args={"check_same_thread": False})

WriteSessionLocal = sessionmaker(bind=write_engine)
ReadSessionLocal = sessionmaker(bind=read_engine)


def _seed_foods(session) -> int:
    """Insert the default catalog. Returns the number of rows added."""
    for item in FOODS_DATA:
        session.add(Food(is_default=True, **item))
    return len(FOODS_DATA)


def _pattern_row(pattern_id, name, description, category, icon, foods, tags=None) -> MealPattern:
    total_protein = sum(f.protein for f in foods)
    row = MealPattern(
        id=pattern_id,
        name=name,
        description=description,
        total_protein=total_protein,
        total_energy=sum(f.energy or 0 for f in foods),
        total_fat=sum(f.fat or 0 for f in foods),
        total_carbs=sum(f.carbs or 0 for f in foods),
        category=category,
        tags=json.dumps(tags or []),
        icon=icon,
        popularity=0,
        is_auto_generated=False,
    )
    for position, food in enumerate(foods):
        row.foods.append(MealPatternFood(
            food_id=food.id,
            position=position,
            quantity=1.0,
            serving_size=food.typical_amount,
        ))
    return row


def _seed_meal_patterns(session) -> int:
    """Insert single-food and classic patterns. Returns the number of rows added."""
    foods_by_id = {f.id: f for f in session.query(Food).all()}
    added = 0

    for food in sorted(foods_by_id.values(), key=lambda f: f.protein, reverse=True):
        if food.protein < SINGLE_FOOD_MIN_PROTEIN:
            continue
        session.add(_pattern_row(
            f"single-{food.id}",
            f"{food.name} Breakfast",
            f"A simple breakfast built around {food.name} ({food.energy or 0:.0f} kcal)",
            "single",
            "🍽️",
            [food],
        ))
        added += 1

    for item in CLASSIC_PATTERNS:
        foods = []
        for food_id in item["food_ids"]:
            food = foods_by_id.get(food_id)
            if food is None:
                logger.warning("Seed pattern %s references unknown food %s; skipping it", item["id"], food_id)
                continue
            foods.append(food)
        if len(foods) < 2:
            logger.warning("Seed pattern %s has fewer than 2 known foods; not seeded", item["id"])
            continue
        total_protein = sum(f.protein for f in foods)
        session.add(_pattern_row(
            item["id"],
            item["name"],
            f"{item['description']} (P:{total_protein:.1f}g)",
            item["category"],
            item.get("icon"),
            foods,
        ))
        added += 1
    return added


def init_db():
    """Initialize database schema and seed default data.

    Creates all tables and populates foods and meal patterns if they are
    empty. Each seeding step is recorded in ``update_history``.
    """
    Base.metadata.create_all(bind=write_engine)
    session = WriteSessionLocal()
    try:
        if session.query(Food).count() == 0:
            started = datetime.utcnow()
            count = _seed_foods(session)
            session.add(UpdateHistory(
                update_type="initial_setup", target_table="foods", record_count=count,
                status="success", started_at=started, completed_at=datetime.utcnow(),
                created_by="init_db",
            ))
            session.commit()
            logger.info("Seeded %s foods", count)

        if session.query(MealPattern).count() == 0:
            started = datetime.utcnow()
            count = _seed_meal_patterns(session)
            session.add(UpdateHistory(
                update_type="initial_setup", target_table="meal_patterns", record_count=count,
                status="success", started_at=started, completed_at=datetime.utcnow(),
                created_by="init_db",
            ))
            session.commit()
            logger.info("Seeded %s meal patterns", count)
    except Exception:
        session.rollback()
        logger.exception("Database initialization failed")
        raise
    finally:
        session.close()


# Convenience generators for dependency injection
def get_write_session():
    """Yield a write-enabled SQLAlchemy session for the request scope.

    Use this generator as a FastAPI dependency so the session is closed
    after the request completes.
    """
    db = WriteSessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_read_session():
    """Yield a read-only SQLAlchemy session for the request scope."""
    db = ReadSessionLocal()
    try:
        yield db
    finally:
        db.close()
