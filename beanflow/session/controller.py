"""
Training session controller.

A `TrainingSession` drives one server-side training session through
explicit round trips: the caller submits an advancement (usually the
fields of one of the navigators found in the previous state), the
session fetches the resulting user state, parses it and publishes the
record to listeners subscribed on its tag.  Nothing is cached between
round trips and nothing advances on its own; the caller decides every
next step.

Only one round trip may be in flight per session.  Starting another
while one is running raises `SessionBusyError` instead of interleaving
requests and corrupting the server-side navigation state.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Optional, Tuple

from ..errors import NavigatorNotFoundError, SessionBusyError
from ..normalize.dom import DEFAULT_FEATURES
from ..normalize.schema import StateRecord
from ..states.dispatch import STATE_TAGS, parse_user_state
from .events import EventEmitter, Listener
from .transport import DEFAULT_BASE_URL, AiohttpTransport, Transport
from .wire import build_advance_form, encode_form, time_on_page as encode_time_on_page

logger = logging.getLogger(__name__)

DEFAULT_TIME_ON_PAGE = 5


class TrainingSession:
    """Client for a single training session.

    Args:
        session_id: The training session id issued by the service.
        auth_token: The learner's auth token; it is handed to the
            default transport as a cookie.
        transport: Optional `Transport`; defaults to an
            `AiohttpTransport` owned by this session.
        base_url: Service origin.
        features: BeautifulSoup parser backend used on state markup.
    """

    def __init__(
        self,
        session_id: str,
        auth_token: str,
        *,
        transport: Optional[Transport] = None,
        base_url: str = DEFAULT_BASE_URL,
        features: str = DEFAULT_FEATURES,
    ) -> None:
        self.session_id = str(session_id)
        self.auth_token = auth_token
        self.base_url = base_url.rstrip("/")
        self.transport = transport or AiohttpTransport(auth_token, base_url=self.base_url)
        self.features = features
        self._events = EventEmitter(STATE_TAGS)
        self._busy = False

    async def __aenter__(self) -> "TrainingSession":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self.transport.close()

    @property
    def advance_url(self) -> str:
        return f"{self.base_url}/training_sessions/{self.session_id}/advance"

    @property
    def user_state_url(self) -> str:
        return f"{self.base_url}/training_sessions/{self.session_id}/user_state?xhr=_xhr"

    # Subscriptions

    def on(self, tag: str, listener: Listener) -> Listener:
        """Subscribe `listener` to records tagged `tag` (e.g. ``"quiz"``)."""
        return self._events.on(tag, listener)

    def once(self, tag: str, listener: Listener) -> Listener:
        return self._events.once(tag, listener)

    def off(self, tag: str, listener: Listener) -> None:
        self._events.off(tag, listener)

    # Round trips

    @contextmanager
    def _round_trip(self) -> Iterator[None]:
        if self._busy:
            raise SessionBusyError(f"Session {self.session_id} already has a request in flight")
        self._busy = True
        try:
            yield
        finally:
            self._busy = False

    async def advance(
        self, advancement: Mapping[str, Any], time_on_page: int = DEFAULT_TIME_ON_PAGE
    ) -> Tuple[str, StateRecord]:
        """Submit an advancement, then fetch and publish the next state.

        Args:
            advancement: Fields to submit; must include ``event`` and
                ``barrier``.  Navigator fields from the previous record
                can be passed directly.
            time_on_page: Seconds reported as spent on the current page.

        Returns:
            The ``(tag, record)`` that was emitted.
        """
        with self._round_trip():
            extra = dict(advancement)
            extra["time-on-page"] = encode_time_on_page(time_on_page)
            logger.info("Advancing session %s with event %s", self.session_id, advancement.get("event"))
            await self._post_advance(advancement.get("event"), advancement.get("barrier"), extra)
            return await self._refresh()

    async def advance_navigator(
        self, name: str, record: StateRecord, time_on_page: int = DEFAULT_TIME_ON_PAGE
    ) -> Tuple[str, StateRecord]:
        """Advance using the fields of navigator `name` from `record`."""
        nav = getattr(record, "nav", None) or {}
        if name not in nav:
            raise NavigatorNotFoundError(f"No navigator named {name!r}; available: {list(nav)}")
        return await self.advance(nav[name], time_on_page)

    async def refresh_state(self) -> Tuple[str, StateRecord]:
        """Fetch, parse and publish the current state without advancing."""
        with self._round_trip():
            return await self._refresh()

    async def _post_advance(
        self, event: Optional[str], barrier: Optional[str], extra: Optional[Mapping[str, Any]] = None
    ) -> str:
        form = build_advance_form(self.session_id, event, barrier, extra)
        return await self.transport.post_form(self.advance_url, encode_form(form))

    async def _refresh(self) -> Tuple[str, StateRecord]:
        body = await self.transport.get_text(self.user_state_url)
        tag, record = await parse_user_state(body, self._post_advance, features=self.features)
        logger.info("Session %s is in state %s", self.session_id, tag)
        self._events.emit(tag, record)
        return tag, record
