"""FastAPI dependencies."""
from fastapi import Depends

from cupcake_corner.services.order_session.manager import get_session
from cupcake_corner.services.order_session.models import OrderSession
from cupcake_corner.services.ordering.client import OrderClient
from cupcake_corner.services.ordering.submission import OrderSubmissionService
from cupcake_corner.services.view.controls import QuantityStepper


def get_order_session() -> OrderSession:
    """Get the order session."""
    return get_session()


def get_order_client() -> OrderClient:
    """Get order endpoint client instance."""
    return OrderClient()


def get_quantity_stepper() -> QuantityStepper:
    """Get the quantity stepper (3 to 20 cakes)."""
    return QuantityStepper(minimum=3, maximum=20)


def get_submission_service(
    session: OrderSession = Depends(get_order_session),
    client: OrderClient = Depends(get_order_client),
) -> OrderSubmissionService:
    """Get order submission service."""
    return OrderSubmissionService(session, client)
