"""Order submission service."""
import logging
from typing import Optional

from fastapi import BackgroundTasks

from cupcake_corner.services.order_session.models import OrderSession
from cupcake_corner.services.ordering.client import OrderClient, confirmation_message

logger = logging.getLogger(__name__)


class OrderSubmissionService:
    """Places the session's current order and presents the confirmation."""

    def __init__(self, session: OrderSession, client: OrderClient):
        self.session = session
        self.client = client

    async def place_order(self) -> Optional[str]:
        """
        Submit the current order and wait for the echo.

        Never raises: failures are logged and leave the session untouched.

        Returns:
            The confirmation message, or None if the order did not go through
        """
        self.session.begin_submission()
        try:
            return await self._submit()
        finally:
            self.session.end_submission()

    def schedule_order(self, background_tasks: BackgroundTasks) -> None:
        """Queue the submission to run after the current response is sent."""
        self.session.begin_submission()
        background_tasks.add_task(self._run_scheduled)

    async def _run_scheduled(self) -> None:
        try:
            await self._submit()
        finally:
            self.session.end_submission()

    async def _submit(self) -> Optional[str]:
        try:
            order = self.session.form.to_order()
            decoded = await self.client.submit(order)
        except Exception as e:
            logger.error(
                f"[PLACE ORDER] Unexpected error submitting order - "
                f"Error: {type(e).__name__}: {str(e)}",
                exc_info=True,
            )
            return None

        if decoded is None:
            logger.info("[PLACE ORDER] Order did not go through; no confirmation shown")
            return None

        message = confirmation_message(decoded)
        self.session.show_confirmation(message)
        logger.info(f"[PLACE ORDER] {message}")
        return message
