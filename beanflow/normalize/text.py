"""
Text normalisation helpers.

Navigator names and extracted copy arrive with a mix of typographic
dashes and quotes depending on which template rendered them.  `sanitize`
folds them onto their ASCII forms so navigator names can be compared
and used as dictionary keys reliably.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

_DASHES = "᠆‐‑‒–﹘﹣－"
_SINGLE_QUOTES = (
    "<>‘’‚‛‹›❛❜"
    "❮❯＇「」"
)
_DOUBLE_QUOTES = (
    "«»“”„‟❝❞⹂"
    "〝〞〟＂『』"
)

SPECIAL_CHARS: Mapping[str, str] = MappingProxyType(
    {
        **{ch: "-" for ch in _DASHES},
        **{ch: "'" for ch in _SINGLE_QUOTES},
        **{ch: '"' for ch in _DOUBLE_QUOTES},
    }
)

_TRANSLATION = str.maketrans(dict(SPECIAL_CHARS))
_WHITESPACE_RE = re.compile(r"\s+")


def sanitize(text: str) -> str:
    """Replace non-ASCII dash and quote variants with `-`, `'` or `"`."""
    return text.translate(_TRANSLATION)


def collapse_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space and trim the ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()
