"""Database package: session factories, seeding and the ORM models.

`init_db` creates the schema and seeds the food catalog and the classic
meal patterns on first startup.
"""

from .database import (
    WriteSessionLocal,
    ReadSessionLocal,
    init_db,
    get_write_session,
    get_read_session,
)
from . import models
from .models import Food, MealPattern, MealPatternFood, UpdateHistory

__all__ = [
    "WriteSessionLocal",
    "ReadSessionLocal",
    "init_db",
    "get_write_session",
    "get_read_session",
    "models",
    "Food",
    "MealPattern",
    "MealPatternFood",
    "UpdateHistory",
]
