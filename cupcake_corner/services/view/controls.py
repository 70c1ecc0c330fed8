"""Form controls backing the order page."""
from typing import List, Tuple

from cupcake_corner.services.ordering.models import FLAVORS


class QuantityStepper:
    """Stepper that keeps a value within fixed bounds."""

    def __init__(self, minimum: int = 3, maximum: int = 20, step: int = 1):
        if minimum > maximum:
            raise ValueError(f"Stepper minimum {minimum} is above maximum {maximum}")
        self.minimum = minimum
        self.maximum = maximum
        self.step = step

    def clamp(self, value: int) -> int:
        return max(self.minimum, min(self.maximum, value))

    def increment(self, value: int) -> int:
        return self.clamp(value + self.step)

    def decrement(self, value: int) -> int:
        return self.clamp(value - self.step)

    def can_increment(self, value: int) -> bool:
        return value < self.maximum

    def can_decrement(self, value: int) -> bool:
        return value > self.minimum


class FlavorPicker:
    """Picker over the store's flavors."""

    label = "Select your cake flavor"

    def options(self) -> List[Tuple[int, str]]:
        """(index, label) pairs in display order."""
        return list(enumerate(FLAVORS))

    def is_valid_index(self, index: int) -> bool:
        return 0 <= index < len(FLAVORS)


class ConfirmationAlert:
    """Dismissible alert shown after an order is echoed back."""

    title = "Thank you!"
    dismiss_label = "OK"

    def __init__(self):
        self.message = ""
        self.is_presented = False

    def present(self, message: str) -> None:
        self.message = message
        self.is_presented = True

    def dismiss(self) -> None:
        self.is_presented = False
