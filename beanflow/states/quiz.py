"""
Quiz and spell test parsers.

Question content differs per question type (multiple choice from text or
from an image, fill in the blank) and is not extracted; both records
carry the navigation map and the pass/fail navigators the caller submits
to record an answer.  Quizzes additionally expose the session clock.
"""

from __future__ import annotations

from ..normalize.dom import Document
from ..normalize.forms import extract_navigation, extract_optional_navigator
from ..normalize.schema import AnswerNavigators, Clock, QuizState, SpellTestState

PASS_FORM = "form[name='Pass']"
FAIL_FORM = "form[name='Fail']"


def _answer_navigators(document: Document) -> AnswerNavigators:
    return AnswerNavigators(
        pass_=extract_optional_navigator(document, PASS_FORM),
        fail=extract_optional_navigator(document, FAIL_FORM),
    )


def _parse_clock(document: Document) -> Clock:
    stats = document.select_one("#training-clock-stats")
    values = [node.text().strip() for node in stats.children(".large")] if stats is not None else []
    # elapsed first, total second
    values += [None] * (2 - len(values))
    return Clock(elapsed=values[0], total=values[1])


def parse_quiz(document: Document) -> QuizState:
    return QuizState(
        nav=extract_navigation(document),
        clock=_parse_clock(document),
        answer=_answer_navigators(document),
    )


def parse_spell_test(document: Document) -> SpellTestState:
    return SpellTestState(
        nav=extract_navigation(document),
        answer=_answer_navigators(document),
    )
