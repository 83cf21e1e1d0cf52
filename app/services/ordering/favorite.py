"""Favorite toggle."""
import logging
from typing import Iterable

from app.services.catalog.base import FoodService, FoodServiceError, MenuItem
from app.services.ordering.models import FavoriteOutcome

logger = logging.getLogger(__name__)


class FavoriteToggle:
    """Two-state favorite flag mirrored to the remote favorites collection."""

    def __init__(self, is_favorite: bool = False):
        self.is_favorite = is_favorite

    def resolve(self, favorites: Iterable[MenuItem], item_id: int) -> bool:
        """Set the state from a favorites collection, by item id."""
        # Overwrites whatever a toggle set before the check landed.
        self.is_favorite = any(favorite.id == item_id for favorite in favorites)
        return self.is_favorite

    def flip(self) -> bool:
        self.is_favorite = not self.is_favorite
        return self.is_favorite

    async def toggle(self, service: FoodService, item: MenuItem) -> FavoriteOutcome:
        """
        Flip the flag and mirror the change remotely.

        The local flip happens first. If the remote request fails the flag
        is set back to its value before this toggle and the outcome carries
        the error.
        """
        previous = self.is_favorite
        now_favorite = self.flip()
        try:
            if now_favorite:
                await service.add_favorite(item)
            else:
                await service.remove_favorite(item.id)
        except FoodServiceError as e:
            self.is_favorite = previous
            logger.warning(
                f"[FAVORITE] Could not sync favorite for item {item.id}, reverted - {e}"
            )
            return FavoriteOutcome(ok=False, error=str(e), is_favorite=self.is_favorite)

        logger.info(f"[FAVORITE] Item {item.id} favorite={now_favorite}")
        return FavoriteOutcome(is_favorite=now_favorite)
