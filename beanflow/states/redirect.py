"""Redirect responses: the service answers with JSON instead of markup."""

from __future__ import annotations

import json
from typing import Any

from ..normalize.schema import RedirectState


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def is_json(body: str) -> bool:
    try:
        json.loads(body, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        # nesting deeper than the decoder can follow is not treated as JSON
        return False
    return True


def parse_redirect(body: str) -> RedirectState:
    """Build a redirect record from a JSON body.

    The payload is trusted as-is; a body that is valid JSON but not an
    object yields a record without a URL.
    """
    payload = json.loads(body)
    url = payload.get("redirect_url") if isinstance(payload, dict) else None
    return RedirectState(url=url)
