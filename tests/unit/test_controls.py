"""Unit tests for the order page controls."""
import pytest

from cupcake_corner.services.view.controls import ConfirmationAlert, FlavorPicker, QuantityStepper


class TestQuantityStepper:
    """Test the quantity stepper bounds."""

    def test_increment_stops_at_twenty(self):
        """Test stepping up from the maximum stays at 20."""
        stepper = QuantityStepper()

        assert stepper.increment(19) == 20
        assert stepper.increment(20) == 20
        assert stepper.can_increment(20) is False

    def test_decrement_stops_at_three(self):
        """Test stepping down from the minimum stays at 3."""
        stepper = QuantityStepper()

        assert stepper.decrement(4) == 3
        assert stepper.decrement(3) == 3
        assert stepper.can_decrement(3) is False

    def test_walk_never_leaves_bounds(self):
        """Test long runs of presses stay inside [3, 20]."""
        stepper = QuantityStepper()
        value = 3
        seen = set()
        for _ in range(30):
            value = stepper.increment(value)
            seen.add(value)
        for _ in range(30):
            value = stepper.decrement(value)
            seen.add(value)

        assert seen == set(range(3, 21))

    @pytest.mark.parametrize("value,expected", [(-5, 3), (0, 3), (3, 3), (11, 11), (20, 20), (99, 20)])
    def test_clamp(self, value, expected):
        """Test out-of-range values are pulled back in."""
        assert QuantityStepper().clamp(value) == expected

    def test_inverted_bounds_rejected(self):
        """Test a stepper can't be built with min above max."""
        with pytest.raises(ValueError):
            QuantityStepper(minimum=20, maximum=3)


class TestFlavorPicker:
    """Test the flavor picker."""

    def test_options(self):
        assert FlavorPicker().options() == [
            (0, "vanilla"), (1, "chocolate"), (2, "strawberry"), (3, "rainbow"),
        ]

    @pytest.mark.parametrize("index,valid", [(-1, False), (0, True), (3, True), (4, False)])
    def test_is_valid_index(self, index, valid):
        assert FlavorPicker().is_valid_index(index) is valid


class TestConfirmationAlert:
    """Test the confirmation alert."""

    def test_present_and_dismiss(self):
        alert = ConfirmationAlert()
        assert alert.is_presented is False

        alert.present("Your order for 3x vanilla cupcakes is on it's way!")
        assert alert.is_presented is True
        assert alert.title == "Thank you!"

        alert.dismiss()
        assert alert.is_presented is False
