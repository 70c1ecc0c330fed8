"""Order session models."""
from cupcake_corner.services.ordering.form import OrderForm
from cupcake_corner.services.view.controls import ConfirmationAlert


class OrderSession:
    """The form, its confirmation alert and submission bookkeeping for one screen."""

    def __init__(self, form: OrderForm | None = None):
        self.form = form or OrderForm()
        self.alert = ConfirmationAlert()
        self.revision = 0  # Bumped on every change; the view re-renders from it
        self.pending_submissions = 0
        self.form.subscribe(self.refresh)

    def refresh(self) -> None:
        """Mark the screen as changed."""
        self.revision += 1

    def show_confirmation(self, message: str) -> None:
        """Present the confirmation alert."""
        self.alert.present(message)
        self.refresh()

    def dismiss_confirmation(self) -> None:
        """Dismiss the confirmation alert."""
        self.alert.dismiss()
        self.refresh()

    def begin_submission(self) -> None:
        self.pending_submissions += 1

    def end_submission(self) -> None:
        self.pending_submissions = max(0, self.pending_submissions - 1)
