"""Test error handling functionality.

Verifies that custom exceptions carry the right attributes and that the
handlers render them in the shared error envelope.
"""
import asyncio
import json

import pytest
from starlette.requests import Request
from starlette.exceptions import HTTPException as StarletteHTTPException
from database import init_db
from database.database import ReadSessionLocal
from core.exceptions import NotFoundError, ValidationError, DatabaseError, InfeasibleMealError
from core.error_handlers import create_error_response, app_exception_handler, http_exception_handler
from main import root, health


@pytest.fixture(scope="module", autouse=True)
def setup_db():
    """Initialize database before tests."""
    init_db()


def make_request(path="/api/test"):
    return Request({"type": "http", "method": "GET", "path": path, "headers": [], "query_string": b""})


def body_of(response):
    return json.loads(response.body)


def test_exception_classes_have_proper_attributes():
    """Test that custom exception classes have expected attributes."""
    exc = NotFoundError("Food", "natto_1")
    assert exc.status_code == 404
    assert "Food" in exc.message
    assert "natto_1" in exc.message

    exc = ValidationError("Invalid input", field="target_protein")
    assert exc.status_code == 400
    assert exc.message == "Invalid input"
    assert exc.details == {"field": "target_protein"}

    exc = DatabaseError("boom", operation="insert")
    assert exc.status_code == 500
    assert exc.details == {"operation": "insert"}

    exc = InfeasibleMealError(30, ["meat"], 2)
    assert exc.status_code == 404
    assert exc.details == {"target_protein": 30, "exclude_categories": ["meat"], "max_items": 2}


def test_error_envelope():
    body = body_of(create_error_response("Nope", 404, {"id": "x"}))
    assert body == {"error": {"message": "Nope", "status_code": 404, "details": {"id": "x"}}}
    assert "details" not in body_of(create_error_response("Nope", 400))["error"]


def test_app_exception_handler_renders_status():
    response = asyncio.run(app_exception_handler(make_request(), InfeasibleMealError(20)))
    assert response.status_code == 404
    assert "Loosen" in body_of(response)["error"]["message"]


def test_unknown_route_message():
    response = asyncio.run(http_exception_handler(make_request("/api/nowhere"), StarletteHTTPException(404)))
    assert response.status_code == 404
    assert body_of(response)["error"]["message"] == "Endpoint /api/nowhere does not exist"


def test_root_and_health():
    assert root()["status"] == "ok"
    db = ReadSessionLocal()
    try:
        assert health(db=db) == {"status": "healthy", "database": "connected"}
    finally:
        db.close()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
