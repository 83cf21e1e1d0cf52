"""FastAPI dependencies."""
from functools import lru_cache

from fastapi import Depends

from app.core.config import settings
from app.services.catalog.base import FoodService
from app.services.catalog.http_client import HttpFoodService
from app.services.catalog.in_memory import InMemoryFoodService
from app.services.food_session.manager import FoodSessionManager


@lru_cache
def get_food_service() -> FoodService:
    """Get the food service instance shared by all sessions."""
    if settings.food_api_url:
        return HttpFoodService(
            base_url=settings.food_api_url,
            timeout=settings.food_api_timeout,
        )
    return InMemoryFoodService(catalog_file=settings.catalog_file)


def get_session_manager(
    service: FoodService = Depends(get_food_service),
) -> FoodSessionManager:
    """Get session manager instance."""
    return FoodSessionManager(
        service=service,
        money_format={
            "symbol": settings.currency_symbol,
            "decimal_separator": settings.decimal_separator,
            "thousands_separator": settings.thousands_separator,
        },
    )
