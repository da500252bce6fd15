"""
Request body encoding for advancements.

The advance endpoint takes an ``application/x-www-form-urlencoded`` body
whose keys are written as-is and whose values are percent-encoded with
the same safe set as JavaScript's ``encodeURIComponent``.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

# Unreserved characters beyond alphanumerics and `_.-~`, which quote keeps anyway.
_SAFE = "!*'()"


def _form_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_form(data: Mapping[str, Any]) -> str:
    return "&".join(f"{key}={quote(_form_value(value), safe=_SAFE)}" for key, value in data.items())


def time_on_page(seconds: int) -> str:
    return json.dumps({"time": seconds}, separators=(",", ":"))


def build_advance_form(
    session_id: str,
    event: Optional[str],
    barrier: Optional[str],
    extra: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Assemble the ordered field mapping for one advance request.

    ``event``, ``barrier`` and ``id`` come first, followed by `extra`
    and the fixed ``it``/``more_ts`` pair.  A key that appears again
    keeps its first position but takes the later value.
    """
    form: Dict[str, Any] = {"event": event, "barrier": barrier, "id": session_id}
    form.update(extra or {})
    form.update({"it": 0, "more_ts": "ostentatious"})
    return form
