"""Liveness endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(request: Request) -> dict[str, str]:
    settings = getattr(request.app.state, "settings", None)
    return {
        "status": "healthy",
        "environment": settings.environment if settings is not None else "unknown",
    }
