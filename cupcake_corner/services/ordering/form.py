"""Observable order form state."""
import logging
from typing import Any, Callable, List

from cupcake_corner.services.ordering.models import Order
from cupcake_corner.services.ordering.validator import OrderValidator

logger = logging.getLogger(__name__)

# Fields the view may change through OrderForm.update()
FORM_FIELDS = (
    "type",
    "quantity",
    "special_requests_enabled",
    "extra_frosting",
    "add_sprinkles",
    "name",
    "address",
    "city",
    "zipcode",
)

Subscriber = Callable[[], None]


class UnknownFieldError(ValueError):
    """Raised when an update names a field the form does not have."""


class OrderForm:
    """
    Form state for the order being built on screen.

    All changes go through ``update()``, which applies the mutation,
    re-derives dependent fields and then notifies subscribers. The
    special-requests gate is form-only state and never reaches the wire.
    """

    def __init__(self, validator: OrderValidator | None = None):
        self.validator = validator or OrderValidator()
        self._subscribers: List[Subscriber] = []

        self.type = 0
        self.quantity = 3
        self.special_requests_enabled = False
        self.extra_frosting = False
        self.add_sprinkles = False
        self.name = ""
        self.address = ""
        self.city = ""
        self.zipcode = ""

    @property
    def is_valid(self) -> bool:
        """Whether the order can be placed."""
        return self.validator.is_valid(self)

    def missing_fields(self) -> List[str]:
        """Contact fields still left empty."""
        return self.validator.missing_fields(self)

    def update(self, **changes: Any) -> None:
        """
        Apply field changes and notify subscribers once.

        Raises:
            UnknownFieldError: if any name is not a form field; nothing is
                changed in that case
        """
        unknown = sorted(set(changes) - set(FORM_FIELDS))
        if unknown:
            raise UnknownFieldError(f"Unknown order form field(s): {', '.join(unknown)}")

        for field_name, value in changes.items():
            setattr(self, field_name, value)

        # Turning special requests off clears both extras
        if not self.special_requests_enabled:
            self.extra_frosting = False
            self.add_sprinkles = False

        logger.debug(f"[ORDER FORM] Updated fields: {', '.join(changes) or 'none'}")
        self._notify()

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a no-argument callback run after every change.

        Returns:
            A function that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        for callback in list(self._subscribers):
            callback()

    def to_order(self) -> Order:
        """Snapshot the form as a wire record."""
        return Order(
            type=self.type,
            quantity=self.quantity,
            extraFrosting=self.extra_frosting,
            addSprinkles=self.add_sprinkles,
            name=self.name,
            address=self.address,
            city=self.city,
            zipcode=self.zipcode,
        )
