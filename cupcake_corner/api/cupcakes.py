"""Reference order endpoint that echoes submitted orders."""
import logging
from fastapi import APIRouter, Request
from fastapi.responses import Response

from cupcake_corner.services.ordering.models import Order

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/api/cupcakes")
async def echo_order(request: Request, order: Order):
    """
    Accept an order and send it straight back.

    Bodies that don't match the order schema are rejected with 422 by FastAPI.
    """
    logger.info(
        f"[ECHO] Order received - {order.quantity}x {order.flavor_name}, "
        f"Client: {request.client.host if request.client else 'unknown'}"
    )
    return Response(content=order.to_json(), media_type="application/json")
