"""Synchronous, ordered observer used to publish parsed states."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable, DefaultDict, Iterable, List

logger = logging.getLogger(__name__)

Listener = Callable[[Any], None]


class EventEmitter:
    """Per-tag listener registry.

    Listeners run in subscription order on the emitting call stack; an
    exception from a listener propagates to whoever emitted.
    """

    def __init__(self, tags: Iterable[str]) -> None:
        self._tags = frozenset(tags)
        self._listeners: DefaultDict[str, List[Listener]] = defaultdict(list)

    def _check(self, tag: str) -> None:
        if tag not in self._tags:
            raise ValueError(f"Unknown event {tag!r}; expected one of {sorted(self._tags)}")

    def on(self, tag: str, listener: Listener) -> Listener:
        self._check(tag)
        self._listeners[tag].append(listener)
        return listener

    def once(self, tag: str, listener: Listener) -> Listener:
        def wrapper(payload: Any) -> None:
            self.off(tag, wrapper)
            listener(payload)

        wrapper.listener = listener  # type: ignore[attr-defined]
        return self.on(tag, wrapper)

    def off(self, tag: str, listener: Listener) -> None:
        self._check(tag)
        listeners = self._listeners[tag]
        for i, registered in enumerate(listeners):
            # a `once` wrapper is also removable by the listener it wraps
            if registered == listener or getattr(registered, "listener", None) == listener:
                del listeners[i]
                return

    def emit(self, tag: str, payload: Any) -> int:
        """Call every listener of `tag` with `payload`; return how many ran."""
        self._check(tag)
        # snapshot so `once` listeners can unsubscribe mid-dispatch
        listeners = list(self._listeners.get(tag, ()))
        logger.debug("Emitting %s to %d listener(s)", tag, len(listeners))
        for listener in listeners:
            listener(payload)
        return len(listeners)
