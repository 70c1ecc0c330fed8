"""HTTP client for the cupcake order endpoint."""
import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from cupcake_corner.core.config import settings
from cupcake_corner.services.ordering.models import Order

logger = logging.getLogger(__name__)


def confirmation_message(order: Order) -> str:
    """Build the confirmation shown once the endpoint echoes an order back."""
    return f"Your order for {order.quantity}x {order.flavor_name} cupcakes is on it's way!"


class OrderClient:
    """Client for posting orders to the order endpoint."""

    def __init__(
        self,
        endpoint_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.endpoint_url = endpoint_url or settings.order_endpoint_url
        self.timeout = timeout if timeout is not None else settings.order_request_timeout
        self.transport = transport

    async def submit(self, order: Order) -> Optional[Order]:
        """
        Post an order and decode the echoed response.

        Failures are logged and reported as None; nothing is retried.

        Args:
            order: Order to post

        Returns:
            The order decoded from the response body, or None if the request
            failed or the body did not match the order schema
        """
        logger.info(
            f"[ORDER CLIENT] Posting order to {self.endpoint_url} - "
            f"quantity: {order.quantity}, flavor: {order.flavor_name}"
        )

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.post(
                    self.endpoint_url,
                    content=order.to_json(),
                    headers={"Content-Type": "application/json"},
                )
            except httpx.HTTPError as e:
                logger.error(f"[ORDER CLIENT] No data in response: {type(e).__name__}: {str(e)}")
                return None

        try:
            decoded = Order.from_json(response.content)
        except ValidationError:
            logger.error(
                f"[ORDER CLIENT] Invalid response (status {response.status_code}): {response.text}"
            )
            return None

        logger.info(f"[ORDER CLIENT] Order echoed back - status: {response.status_code}")
        return decoded
