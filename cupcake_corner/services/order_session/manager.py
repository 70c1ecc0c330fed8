"""Order session manager."""
import logging
from typing import Optional

from cupcake_corner.services.order_session.models import OrderSession

logger = logging.getLogger(__name__)

# Module-level session (persists across requests until the process restarts)
_session: Optional[OrderSession] = None


def get_session() -> OrderSession:
    """Get the order session, creating it with default values on first use."""
    global _session
    if _session is None:
        logger.info("[ORDER SESSION] Creating order session")
        _session = OrderSession()
    return _session


def reset_session() -> None:
    """Drop the current session; the next request starts a fresh form."""
    global _session
    _session = None
