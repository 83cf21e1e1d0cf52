"""Shared test fixtures and configuration."""
import pytest
import os
from pathlib import Path
from fastapi.testclient import TestClient

# Set test environment variables before importing app
os.environ.pop("FOOD_API_URL", None)
os.environ.setdefault("CURRENCY_SYMBOL", "$")

from app.main import app
from app.core.dependencies import get_food_service
from app.services.catalog.base import FoodService, FoodServiceError
from app.services.catalog.in_memory import InMemoryFoodService
from app.services.food_session import manager as session_manager
from app.services.food_session.manager import FoodSessionManager


class FailingFoodService(InMemoryFoodService):
    """In-memory catalog whose mutation requests always fail."""

    async def add_favorite(self, item):
        raise FoodServiceError("POST /favorites returned 500")

    async def remove_favorite(self, item_id):
        raise FoodServiceError(f"DELETE /favorites/{item_id} returned 500")

    async def submit_order(self, submission):
        raise FoodServiceError("POST /orders returned 503")


@pytest.fixture
def test_catalog_path():
    """Return path to test catalog YAML file."""
    return Path(__file__).parent / "fixtures" / "test_foods.yaml"


@pytest.fixture
def food_service(test_catalog_path):
    """Create in-memory food service with test data."""
    return InMemoryFoodService(catalog_file=str(test_catalog_path))


@pytest.fixture
def failing_food_service(test_catalog_path):
    """Create food service whose remote mutations fail."""
    return FailingFoodService(catalog_file=str(test_catalog_path))


@pytest.fixture
def manager(food_service):
    """Create session manager over the test catalog."""
    return FoodSessionManager(service=food_service)


@pytest.fixture
def override_get_food_service(food_service):
    """Override get_food_service dependency with test catalog."""
    def _override_get_food_service() -> FoodService:
        return food_service
    return _override_get_food_service


@pytest.fixture
def test_client(override_get_food_service):
    """Create FastAPI test client with overrides."""
    app.dependency_overrides[get_food_service] = override_get_food_service

    client = TestClient(app)

    yield client

    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def clean_sessions():
    """Clean up food sessions before and after tests."""
    session_manager._sessions.clear()
    yield
    session_manager._sessions.clear()
