"""Order validation service."""
from typing import Any, List

from cupcake_corner.services.ordering.models import CONTACT_FIELDS


class OrderValidator:
    """Service for validating orders before they are placed."""

    def __init__(self, required_fields: tuple = CONTACT_FIELDS):
        self.required_fields = required_fields

    def missing_fields(self, order: Any) -> List[str]:
        """
        List the required fields left empty on an order or order form.

        Only emptiness is checked; whitespace counts as a value.
        """
        return [
            field_name
            for field_name in self.required_fields
            if getattr(order, field_name) == ""
        ]

    def is_valid(self, order: Any) -> bool:
        """Check whether every required field is filled in."""
        return not self.missing_fields(order)
