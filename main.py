"""Application entry point for the Protein Breakfast API.

Defines the FastAPI app, middleware and exception handlers, and includes the
API routers from the `api` package. The `lifespan` handler initializes and
seeds the DB on startup.
"""

import os
from fastapi import FastAPI, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session
from contextlib import asynccontextmanager

from database import init_db, models
from database.deps import get_db_read
from core.exceptions import DatabaseError
from core.logger import get_logger
from core.error_handlers import register_exception_handlers
from api.foods import router as foods_router
from api.meals import router as meals_router
from api.recommendations import router as recommendations_router
from api.admin import router as admin_router

logger = get_logger("main")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")
    if origin.strip()
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Fastapi lifespan context: initialize resources before serving requests."""
    init_db()
    logger.info("Database ready")
    yield


app = FastAPI(title="Protein Breakfast API", version="1.0.0", lifespan=lifespan)


app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log incoming requests and their responses."""
    logger.info("%s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
        logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
        return response
    except Exception:
        logger.exception("Request error: %s %s", request.method, request.url.path)
        raise


@app.get("/")
def root():
    """Service status and a map of the main endpoints."""
    return {
        "status": "ok",
        "message": "Protein Breakfast API is running",
        "endpoints": {
            "foods": "/api/foods",
            "meals": "/api/meals/patterns",
            "generate": "/api/meals/generate",
            "recommendations": "/api/recommendations",
            "admin": "/api/admin",
            "health": "/health",
        },
    }


@app.get("/health")
def health(db: Session = Depends(get_db_read)):
    """Return basic health status and database connectivity.

    Raises:
        DatabaseError: If database connection fails.
    """
    try:
        _ = db.query(models.Food).first()
        return {"status": "healthy", "database": "connected"}
    except Exception as e:
        logger.exception("Health check failed")
        raise DatabaseError("Database health check failed", operation="health", details={"error": str(e)})


app.include_router(foods_router)
app.include_router(meals_router)
app.include_router(recommendations_router)
app.include_router(admin_router)


if __name__ == "__main__":
    # Allow starting the app via `python ./main.py`
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=int(os.getenv("PORT", "8000")), reload=True)
