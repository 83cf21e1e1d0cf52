"""Food details session API endpoints."""
import logging
from decimal import Decimal
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from pydantic import BaseModel

from app.core.dependencies import get_session_manager
from app.services.catalog.base import FoodServiceError, ItemNotFoundError, MenuItem
from app.services.food_session.manager import FoodSessionManager, SessionNotFoundError
from app.services.food_session.models import FoodDetailsSession
from app.services.ordering.models import ExtraLine, FavoriteOutcome, OrderOutcome

router = APIRouter(prefix="/api/sessions")
logger = logging.getLogger(__name__)


class OpenSessionRequest(BaseModel):
    """Open session request model."""
    item_id: int


class SessionResponse(BaseModel):
    """Session snapshot response model."""
    session_id: str
    item: MenuItem
    formatted_price: str
    extras: List[ExtraLine] = []
    quantity: int
    total: Decimal
    formatted_total: str
    is_favorite: bool


def _snapshot(session: FoodDetailsSession) -> SessionResponse:
    return SessionResponse(**session.snapshot())


async def _load(manager: FoodSessionManager, session_id: str) -> FoodDetailsSession:
    try:
        return await manager.get_session(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=SessionResponse, status_code=201)
async def open_session(
    request: Request,
    body: OpenSessionRequest,
    manager: FoodSessionManager = Depends(get_session_manager),
):
    """Load a menu item and start configuring an order for it."""
    logger.info(
        f"[SESSIONS] Open requested - item: {body.item_id}, "
        f"Client: {request.client.host if request.client else 'unknown'}"
    )
    try:
        session = await manager.open_session(body.item_id)
    except ItemNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except FoodServiceError as e:
        logger.error(f"[SESSIONS] Item lookup failed - item: {body.item_id}, Error: {e}")
        raise HTTPException(status_code=502, detail=f"Error loading item: {e}")
    return _snapshot(session)


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(
    session_id: str,
    manager: FoodSessionManager = Depends(get_session_manager),
):
    """Get the current state of a session."""
    return _snapshot(await _load(manager, session_id))


@router.delete("/{session_id}", status_code=204)
async def close_session(
    session_id: str,
    manager: FoodSessionManager = Depends(get_session_manager),
):
    """Discard a session."""
    try:
        await manager.close_session(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)


@router.post("/{session_id}/extras/{extra_id}/increment", response_model=SessionResponse)
async def increment_extra(
    session_id: str,
    extra_id: int,
    manager: FoodSessionManager = Depends(get_session_manager),
):
    session = await _load(manager, session_id)
    session.increment_extra(extra_id)
    return _snapshot(session)


@router.post("/{session_id}/extras/{extra_id}/decrement", response_model=SessionResponse)
async def decrement_extra(
    session_id: str,
    extra_id: int,
    manager: FoodSessionManager = Depends(get_session_manager),
):
    session = await _load(manager, session_id)
    session.decrement_extra(extra_id)
    return _snapshot(session)


@router.post("/{session_id}/quantity/increment", response_model=SessionResponse)
async def increment_quantity(
    session_id: str,
    manager: FoodSessionManager = Depends(get_session_manager),
):
    session = await _load(manager, session_id)
    session.increment_quantity()
    return _snapshot(session)


@router.post("/{session_id}/quantity/decrement", response_model=SessionResponse)
async def decrement_quantity(
    session_id: str,
    manager: FoodSessionManager = Depends(get_session_manager),
):
    session = await _load(manager, session_id)
    session.decrement_quantity()
    return _snapshot(session)


@router.post("/{session_id}/favorite/toggle", response_model=FavoriteOutcome)
async def toggle_favorite(
    session_id: str,
    manager: FoodSessionManager = Depends(get_session_manager),
):
    """Flip the favorite flag of the session's item."""
    session = await _load(manager, session_id)
    try:
        return await session.toggle_favorite()
    except Exception as e:
        logger.error(
            f"[SESSIONS] Error toggling favorite - session: {session_id}, "
            f"Error: {type(e).__name__}: {str(e)}",
            exc_info=True
        )
        raise HTTPException(status_code=500, detail=f"Error toggling favorite: {str(e)}")


@router.post("/{session_id}/order", response_model=OrderOutcome)
async def finish_order(
    session_id: str,
    manager: FoodSessionManager = Depends(get_session_manager),
):
    """Submit the order as currently configured."""
    session = await _load(manager, session_id)
    try:
        return await session.finish_order()
    except Exception as e:
        logger.error(
            f"[SESSIONS] Error finishing order - session: {session_id}, "
            f"Error: {type(e).__name__}: {str(e)}",
            exc_info=True
        )
        raise HTTPException(status_code=500, detail=f"Error finishing order: {str(e)}")
