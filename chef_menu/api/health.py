"""Liveness endpoint for the menu service."""
import logging

from fastapi import APIRouter, Request

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check(request: Request):
    """Report that the menu service is up."""
    client = request.client.host if request.client else "unknown"
    logger.debug(f"[HEALTH] Liveness probe from {client}")
    return {"status": "healthy"}
