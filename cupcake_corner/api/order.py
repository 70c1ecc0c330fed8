"""Order form endpoints."""
import logging
from typing import List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Form, HTTPException
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import BaseModel

from cupcake_corner.core.dependencies import (
    get_order_session,
    get_quantity_stepper,
    get_submission_service,
)
from cupcake_corner.services.order_session.models import OrderSession
from cupcake_corner.services.ordering.models import Order
from cupcake_corner.services.ordering.submission import OrderSubmissionService
from cupcake_corner.services.view.controls import FlavorPicker, QuantityStepper
from cupcake_corner.services.view.page import render_order_page


router = APIRouter()
logger = logging.getLogger(__name__)


class AlertResponse(BaseModel):
    """Confirmation alert response model."""
    title: str
    message: str
    isPresented: bool


class OrderStateResponse(BaseModel):
    """Order form state response model."""
    order: dict
    specialRequestsEnabled: bool
    isValid: bool
    missingFields: List[str] = []
    revision: int
    pendingSubmissions: int
    alert: AlertResponse


def _back_to_form() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=303)


@router.get("/", response_class=HTMLResponse)
async def show_order_form(
    session: OrderSession = Depends(get_order_session),
    stepper: QuantityStepper = Depends(get_quantity_stepper),
):
    """Render the order form."""
    logger.debug(f"[ORDER] Rendering order form - revision: {session.revision}")
    return HTMLResponse(render_order_page(session, stepper))


@router.get("/api/order", response_model=OrderStateResponse)
async def get_order_state(session: OrderSession = Depends(get_order_session)):
    """Get the current form state."""
    form = session.form
    order: Order = form.to_order()
    return OrderStateResponse(
        order=order.model_dump(by_alias=True),
        specialRequestsEnabled=form.special_requests_enabled,
        isValid=form.is_valid,
        missingFields=form.missing_fields(),
        revision=session.revision,
        pendingSubmissions=session.pending_submissions,
        alert=AlertResponse(
            title=session.alert.title,
            message=session.alert.message,
            isPresented=session.alert.is_presented,
        ),
    )


@router.post("/order/flavor")
async def choose_flavor(
    type: int = Form(...),
    session: OrderSession = Depends(get_order_session),
):
    """Select the cake flavor."""
    if not FlavorPicker().is_valid_index(type):
        logger.warning(f"[ORDER] Rejected unknown flavor index: {type}")
        raise HTTPException(status_code=400, detail=f"Unknown flavor: {type}")

    session.form.update(type=type)
    logger.info(f"[ORDER] Flavor set - index: {type}")
    return _back_to_form()


@router.post("/order/quantity/increment")
async def increment_quantity(
    session: OrderSession = Depends(get_order_session),
    stepper: QuantityStepper = Depends(get_quantity_stepper),
):
    """Add one cake, up to the stepper maximum."""
    session.form.update(quantity=stepper.increment(session.form.quantity))
    logger.info(f"[ORDER] Quantity set - {session.form.quantity}")
    return _back_to_form()


@router.post("/order/quantity/decrement")
async def decrement_quantity(
    session: OrderSession = Depends(get_order_session),
    stepper: QuantityStepper = Depends(get_quantity_stepper),
):
    """Remove one cake, down to the stepper minimum."""
    session.form.update(quantity=stepper.decrement(session.form.quantity))
    logger.info(f"[ORDER] Quantity set - {session.form.quantity}")
    return _back_to_form()


@router.post("/order/special-requests")
async def set_special_requests(
    enabled: bool = Form(...),
    session: OrderSession = Depends(get_order_session),
):
    """Switch special requests on or off."""
    session.form.update(special_requests_enabled=enabled)
    logger.info(f"[ORDER] Special requests {'enabled' if enabled else 'disabled'}")
    return _back_to_form()


@router.post("/order/extras")
async def set_extras(
    extra_frosting: Optional[bool] = Form(None),
    add_sprinkles: Optional[bool] = Form(None),
    session: OrderSession = Depends(get_order_session),
):
    """Toggle extra frosting and/or sprinkles."""
    changes = {}
    if extra_frosting is not None:
        changes["extra_frosting"] = extra_frosting
    if add_sprinkles is not None:
        changes["add_sprinkles"] = add_sprinkles

    session.form.update(**changes)
    logger.info(
        f"[ORDER] Extras set - frosting: {session.form.extra_frosting}, "
        f"sprinkles: {session.form.add_sprinkles}"
    )
    return _back_to_form()


@router.post("/order/contact")
async def set_contact_details(
    name: str = Form(""),
    address: str = Form(""),
    city: str = Form(""),
    zipcode: str = Form(""),
    session: OrderSession = Depends(get_order_session),
):
    """Save the contact and shipping details."""
    session.form.update(name=name, address=address, city=city, zipcode=zipcode)
    logger.info(f"[ORDER] Contact details saved - valid: {session.form.is_valid}")
    return _back_to_form()


@router.post("/order/place")
async def place_order(
    background_tasks: BackgroundTasks,
    session: OrderSession = Depends(get_order_session),
    submission_service: OrderSubmissionService = Depends(get_submission_service),
):
    """Send the order off; the confirmation appears once it is echoed back."""
    missing = session.form.missing_fields()
    if missing:
        logger.warning(f"[PLACE ORDER] Rejected incomplete order - missing: {', '.join(missing)}")
        raise HTTPException(
            status_code=400,
            detail=f"Order is missing: {', '.join(missing)}",
        )

    logger.info(
        f"[PLACE ORDER] Scheduling order - {session.form.quantity}x "
        f"{session.form.to_order().flavor_name}"
    )
    submission_service.schedule_order(background_tasks)
    return _back_to_form()


@router.post("/order/alert/dismiss")
async def dismiss_alert(session: OrderSession = Depends(get_order_session)):
    """Dismiss the confirmation alert."""
    session.dismiss_confirmation()
    return _back_to_form()
