"""Server-rendered order page."""
from html import escape

from cupcake_corner.core.config import settings
from cupcake_corner.services.order_session.models import OrderSession
from cupcake_corner.services.ordering.models import CONTACT_FIELDS
from cupcake_corner.services.view.controls import FlavorPicker, QuantityStepper

# Seconds between reloads while an order is in flight
PENDING_REFRESH_SECONDS = 1


def _disabled(disabled: bool) -> str:
    return " disabled" if disabled else ""


def _toggle(action: str, field: str, label: str, is_on: bool) -> str:
    """A toggle rendered as a one-button form posting the flipped value."""
    state = "on" if is_on else "off"
    return f"""
      <form method="post" action="{action}" class="toggle toggle-{state}">
        <input type="hidden" name="{field}" value="{str(not is_on).lower()}">
        <span>{escape(label)}</span>
        <button type="submit" aria-pressed="{str(is_on).lower()}">{state.upper()}</button>
      </form>"""


def _flavor_section(session: OrderSession, stepper: QuantityStepper) -> str:
    form = session.form
    picker = FlavorPicker()
    options = "".join(
        f'<option value="{index}"{" selected" if index == form.type else ""}>{escape(label)}</option>'
        for index, label in picker.options()
    )
    return f"""
    <section class="flavor">
      <form method="post" action="/order/flavor">
        <label for="type">{escape(picker.label)}</label>
        <select id="type" name="type">{options}</select>
        <button type="submit">Choose</button>
      </form>
      <div class="stepper">
        <span>Number of Cakes: {form.quantity}</span>
        <form method="post" action="/order/quantity/decrement">
          <button type="submit" aria-label="Fewer cakes"{_disabled(not stepper.can_decrement(form.quantity))}>&minus;</button>
        </form>
        <form method="post" action="/order/quantity/increment">
          <button type="submit" aria-label="More cakes"{_disabled(not stepper.can_increment(form.quantity))}>+</button>
        </form>
      </div>
    </section>"""


def _special_requests_section(session: OrderSession) -> str:
    form = session.form
    parts = [
        _toggle(
            "/order/special-requests",
            "enabled",
            "Any Special Requests?",
            form.special_requests_enabled,
        )
    ]
    # Extras are only offered while special requests are switched on
    if form.special_requests_enabled:
        parts.append(_toggle("/order/extras", "add_sprinkles", "Add Sprinkles", form.add_sprinkles))
        parts.append(_toggle("/order/extras", "extra_frosting", "Extra Frosting", form.extra_frosting))
    return f"""
    <section class="special-requests">{"".join(parts)}
    </section>"""


def _contact_section(session: OrderSession) -> str:
    form = session.form
    fields = "".join(
        f"""
        <input type="text" name="{field_name}" placeholder="Enter your {field_name}" value="{escape(getattr(form, field_name))}">"""
        for field_name in CONTACT_FIELDS
    )
    return f"""
    <section class="contact">
      <form method="post" action="/order/contact">{fields}
        <button type="submit">Save details</button>
      </form>
    </section>"""


def _place_order_section(session: OrderSession) -> str:
    return f"""
    <section class="place-order">
      <form method="post" action="/order/place">
        <button type="submit"{_disabled(not session.form.is_valid)}>Place Order</button>
      </form>
    </section>"""


def _alert(session: OrderSession) -> str:
    alert = session.alert
    if not alert.is_presented:
        return ""
    return f"""
    <div class="alert" role="alertdialog">
      <h2>{escape(alert.title)}</h2>
      <p>{escape(alert.message)}</p>
      <form method="post" action="/order/alert/dismiss">
        <button type="submit">{escape(alert.dismiss_label)}</button>
      </form>
    </div>"""


def render_order_page(session: OrderSession, stepper: QuantityStepper | None = None) -> str:
    """
    Render the order screen from the session's current state.

    Args:
        session: Session holding the form and confirmation alert
        stepper: Quantity stepper whose bounds drive the +/- buttons

    Returns:
        Complete HTML document
    """
    stepper = stepper or QuantityStepper()
    refresh = ""
    if session.pending_submissions:
        refresh = f'\n    <meta http-equiv="refresh" content="{PENDING_REFRESH_SECONDS}">'

    title = escape(settings.store_name)
    return f"""<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8">
    <title>{title}</title>
    <link rel="stylesheet" href="/assets/style.css">{refresh}
  </head>
  <body data-revision="{session.revision}">
    <h1>{title}</h1>{_flavor_section(session, stepper)}{_special_requests_section(session)}{_contact_section(session)}{_place_order_section(session)}{_alert(session)}
  </body>
</html>
"""
