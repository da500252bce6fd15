"""
Exception types for beanflow.

Every failure surfaces to the caller of the public entry point
(`TrainingSession.advance`, `TrainingSession.refresh_state` or a
subscription callback).  Nothing here is retried or recovered from
internally.
"""

from __future__ import annotations

from typing import Optional


class BeanflowError(Exception):
    """Base class for all beanflow errors."""


class TransportError(BeanflowError):
    """Network or HTTP-level failure while talking to the service."""

    def __init__(self, message: str, *, status: Optional[int] = None, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.status = status
        self.url = url


class UnknownStateError(BeanflowError):
    """The session-state marker carried a value no parser handles."""

    def __init__(self, state: Optional[str]) -> None:
        super().__init__(f"Unknown state: {state}")
        self.state = state


class NavigatorNameError(BeanflowError):
    """A navigator form was found without a usable `name` attribute."""


class NavigatorNotFoundError(BeanflowError, KeyError):
    """A navigator name was requested that the current state does not offer."""

    def __str__(self) -> str:
        return Exception.__str__(self)


class SessionBusyError(BeanflowError):
    """An advancement was requested while another one is still in flight."""


class ConfigError(BeanflowError):
    """Configuration is missing a required value or cannot be read."""
