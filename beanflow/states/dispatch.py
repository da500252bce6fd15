"""
User-state classification and dispatch.

A user-state body is either a JSON redirect or a markup document whose
``#session-state`` element names the training state in ``data-state``.
`parse_user_state` classifies the body, runs the matching parser and
returns ``(tag, record)``; the tag is the event name subscribers listen
on.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from ..errors import UnknownStateError
from ..normalize.dom import DEFAULT_FEATURES, Document
from ..normalize.schema import StateRecord
from .quiz import parse_quiz, parse_spell_test
from .redirect import is_json, parse_redirect
from .take_a_break import CloseCallback, parse_take_a_break
from .word_learn import WORD_STATES, parse_word_learn

logger = logging.getLogger(__name__)

REDIRECT = "redirect"
NEW_WORD = "new_word"
RESTUDY = "restudy"
QUIZ = "quiz"
SPELLTEST = "spelltest"
TAKE_A_BREAK = "take_a_break"

STATE_TAGS = (NEW_WORD, RESTUDY, QUIZ, SPELLTEST, TAKE_A_BREAK, REDIRECT)


def read_state_marker(document: Document) -> Optional[str]:
    """The ``data-state`` value of ``#session-state``, or None."""
    return document.attr_of("#session-state", "data-state")


async def parse_user_state(
    body: str, close: CloseCallback, *, features: str = DEFAULT_FEATURES
) -> Tuple[str, StateRecord]:
    """Classify a user-state body and parse it into a record.

    Args:
        body: Raw response text.
        close: Used by the break screen to close the session.
        features: BeautifulSoup parser backend.

    Returns:
        ``(tag, record)``.

    Raises:
        UnknownStateError: if the markup names a state no parser handles.
    """
    if is_json(body):
        return REDIRECT, parse_redirect(body)

    document = Document.parse(body, features)
    state = read_state_marker(document)
    logger.debug("Session state marker: %s", state)
    if state in WORD_STATES:
        return state, parse_word_learn(document, state)
    if state == QUIZ:
        return state, parse_quiz(document)
    if state == SPELLTEST:
        return state, parse_spell_test(document)
    if state == TAKE_A_BREAK:
        return state, await parse_take_a_break(document, close)
    raise UnknownStateError(state)
