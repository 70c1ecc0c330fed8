"""Health check endpoint."""
import logging
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from cupcake_corner.core.config import settings
from cupcake_corner.core.dependencies import get_order_session
from cupcake_corner.services.order_session.models import OrderSession

router = APIRouter()
logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str
    store: str
    orderEndpoint: str
    pendingSubmissions: int


@router.get("/health", response_model=HealthResponse)
async def health_check(session: OrderSession = Depends(get_order_session)):
    """Report the store, where orders are sent and how many are in flight."""
    logger.debug(f"[HEALTH] Health check - {session.pending_submissions} order(s) in flight")
    return HealthResponse(
        status="healthy",
        store=settings.store_name,
        orderEndpoint=settings.order_endpoint_url,
        pendingSubmissions=session.pending_submissions,
    )
