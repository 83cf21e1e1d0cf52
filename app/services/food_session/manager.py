"""Food details session manager."""
import logging
import uuid
from typing import Dict, Optional

from app.services.catalog.base import FoodService, FoodServiceError, ItemNotFoundError
from app.services.food_session.models import FoodDetailsSession

logger = logging.getLogger(__name__)

# Module-level session storage (persists across requests)
_sessions: Dict[str, FoodDetailsSession] = {}


class SessionNotFoundError(KeyError):
    """Raised when a session id is not registered."""

    def __init__(self, session_id: str):
        super().__init__(session_id)
        self.session_id = session_id

    def __str__(self) -> str:
        return f"Session {self.session_id} not found"


class FoodSessionManager:
    """Opens, looks up and discards food details sessions."""

    def __init__(
        self,
        service: FoodService,
        money_format: Optional[Dict[str, str]] = None,
    ):
        self.service = service
        self.money_format = money_format

    async def open_session(self, item_id: int) -> FoodDetailsSession:
        """
        Load an item and start configuring it.

        Raises:
            ItemNotFoundError: the lookup returned no item
            FoodServiceError: the item lookup failed
        """
        items = await self.service.fetch_items(item_id)
        if not items:
            logger.info(f"[SESSION] Item {item_id} not found")
            raise ItemNotFoundError(item_id)

        session = FoodDetailsSession(
            session_id=uuid.uuid4().hex,
            item=items[0],
            service=self.service,
            money_format=self.money_format,
        )

        try:
            await session.refresh_favorite()
        except FoodServiceError as e:
            # The item is usable without knowing its favorite state
            logger.warning(f"[SESSION] Favorites check failed for item {item_id} - {e}")

        _sessions[session.session_id] = session
        logger.info(
            f"[SESSION] Opened {session.session_id} for item {item_id} - "
            f"{len(session.extras)} extras, favorite={session.is_favorite}"
        )
        return session

    async def get_session(self, session_id: str) -> FoodDetailsSession:
        session = _sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    async def close_session(self, session_id: str) -> None:
        if _sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)
        logger.info(f"[SESSION] Closed {session_id}")
