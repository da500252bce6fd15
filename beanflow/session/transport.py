"""
HTTP transport for a training session.

`Transport` is the seam between the session controller and the network:
the controller only ever posts a form body or fetches text.  The
default implementation, `AiohttpTransport`, keeps one aiohttp client
session with its own cookie jar seeded with the learner's auth token,
and never follows redirects.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import aiohttp
from yarl import URL

from ..errors import TransportError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://membean.com"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class Transport(ABC):
    """Cookie-bearing request/response channel for one session."""

    @abstractmethod
    async def post_form(self, url: str, body: str) -> str:
        """POST an already encoded form body and return the response text."""

    @abstractmethod
    async def get_text(self, url: str) -> str:
        """GET `url` and return the response text."""

    async def close(self) -> None:
        """Release any held connections."""


class AiohttpTransport(Transport):
    """aiohttp-backed transport.

    The cookie jar belongs to this transport alone; sessions never share
    one.  HTTP statuses of 400 and above, connection failures and
    timeouts are raised as `TransportError`.
    """

    def __init__(
        self,
        auth_token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
    ) -> None:
        self.auth_token = auth_token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            # the jar is private to this transport; allow IP hosts such as a local test server
            jar = aiohttp.CookieJar(unsafe=True)
            jar.update_cookies({"auth_token": self.auth_token}, URL(self.base_url))
            self._session = aiohttp.ClientSession(
                cookie_jar=jar,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            )
        return self._session

    async def _request(self, method: str, url: str, **kwargs: Any) -> str:
        session = await self._ensure_session()
        logger.info("Requesting %s", url)
        try:
            async with session.request(method, url, allow_redirects=False, **kwargs) as resp:
                if resp.status >= 400:
                    raise TransportError(
                        f"{method} {url} failed with HTTP {resp.status}",
                        status=resp.status,
                        url=url,
                    )
                # undecodable bytes are replaced rather than failing the round trip
                return await resp.text(errors="replace")
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(f"{method} {url} failed: {exc!r}", url=url) from exc

    async def post_form(self, url: str, body: str) -> str:
        return await self._request(
            "POST", url, data=body, headers={"Content-Type": FORM_CONTENT_TYPE}
        )

    async def get_text(self, url: str) -> str:
        return await self._request("GET", url)

    async def close(self) -> None:
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None
