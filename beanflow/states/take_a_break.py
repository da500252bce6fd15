"""
Take-a-break parser.

When the service decides the learner has done enough it renders a break
screen with a single form.  The session cannot continue from there, so
parsing the screen also closes it: the form's barrier is echoed back
with the ``close!`` event and a terminal record is returned.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Optional

from ..normalize.dom import Document
from ..normalize.forms import extract_form
from ..normalize.schema import BreakState

logger = logging.getLogger(__name__)

CLOSE_EVENT = "close!"

# (event, barrier) -> awaitable submission
CloseCallback = Callable[[str, Optional[str]], Awaitable[object]]


async def parse_take_a_break(document: Document, close: CloseCallback) -> BreakState:
    """Close the session from a break screen.

    Args:
        document: The parsed break screen.
        close: Coroutine function issuing the raw advance request; it
            receives the event name and the barrier token.

    Returns:
        The terminal `BreakState`.
    """
    form = document.select_one("form")
    barrier = extract_form(form).get("barrier") if form is not None else None
    if barrier is None:
        logger.warning("Break screen carried no barrier token")
    await close(CLOSE_EVENT, barrier)
    logger.info("Training session closed for a break")
    return BreakState()
