"""Main FastAPI application."""
from fastapi import FastAPI
from contextlib import asynccontextmanager

from app.core.logging import setup_logging
from app.api import health, sessions


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    setup_logging()
    yield


app = FastAPI(
    title="Food Details Ordering",
    description="Configure a menu item with extras, track favorites and submit orders",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health.router, tags=["health"])
app.include_router(sessions.router, tags=["sessions"])


@app.get("/")
async def root():
    return {
        "message": "Food Details Ordering API",
        "version": "0.1.0",
    }
