"""
Word learn parser.

Both the ``new_word`` and ``restudy`` screens share one template: a
headword with its metadata, a context tab (example sentence, a small
cloze quiz, definitions), usage examples, a word-structure breakdown and
related words.  The only difference is the "I know this" flag form that
new words carry, exposed here as `ikt`.

Missing nodes produce empty strings, empty lists or None rather than
errors; the service omits whole tabs for some words.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from ..normalize.dom import Document
from ..normalize.forms import extract_navigation, extract_optional_navigator
from ..normalize.schema import (
    ClozeQuiz,
    RelatedWord,
    RelatedWords,
    UsageExample,
    WordContext,
    WordLearnState,
    WordPart,
    WordStructure,
)
from ..normalize.text import collapse_whitespace

logger = logging.getLogger(__name__)

WORD_STATES = ("new_word", "restudy")

_LEVEL_BREAK_RE = re.compile(r"\n+\s+")
_QUESTION_SEPARATOR = ": "
_EXAMPLE_ITEMS = "#examples > .content > ul > li"
_STRUCTURE_ROWS = (
    "#word-structure > .content > table > tbody > tr, "
    "#word-structure > .content > table > tr"
)
# Synonym lookups have always been issued without the class combinator, so
# they match an `idx<N>` element inside `.rw-defn` rather than `.rw-defn.idx<N>`.
_SYNONYM_DEFINITION = ".rw-defn idx{idx}"
_ANTONYM_DEFINITION = ".rw-defn.idx{idx}"


def _clean(document: Document, css: str) -> str:
    return collapse_whitespace(document.text(css))


def _cloze_question(document: Document) -> Optional[str]:
    raw = "".join(node.text_without("span") for node in document.select(".question"))
    segments = collapse_whitespace(raw).split(_QUESTION_SEPARATOR)
    return segments[1] if len(segments) > 1 else None


def _parse_context(document: Document) -> WordContext:
    quiz = ClozeQuiz(
        question=_cloze_question(document),
        answer=document.text(".answer").strip(),
        choices=[node.text().strip() for node in document.select(".choice")],
    )
    return WordContext(
        example_sentence=_clean(document, "#context-paragraph"),
        quiz=quiz,
        definition=_clean(document, ".def-text"),
        quick_look=_clean(document, ".one-word-tab-right"),
    )


def _parse_examples(document: Document) -> List[UsageExample]:
    examples = []
    for item in document.select(_EXAMPLE_ITEMS):
        attribution = "".join(node.text() for node in item.children(".attribution"))
        examples.append(
            UsageExample(
                text=collapse_whitespace(item.text_without(".attribution")),
                attribution=attribution.strip().replace("—", "").strip(),
            )
        )
    return examples


def _parse_word_structure(document: Document) -> WordStructure:
    parts = []
    for row in document.select(_STRUCTURE_ROWS):
        cells = row.children("td")
        parts.append(
            WordPart(
                part=cells[0].text().strip() if cells else "",
                meaning="".join(cell.text() for cell in row.select("td.meaning")).strip(),
            )
        )
    return WordStructure(
        definition=_clean(document, "#word-structure > .content > p"),
        parts=parts,
    )


def _parse_related(document: Document, container: str, definition_css: str) -> List[RelatedWord]:
    words = []
    for entry in document.select(f"#related-words > .content > {container}"):
        for element in entry.children():
            idx = element.data("idx")
            definition = _clean(document, definition_css.format(idx=idx)) if idx else ""
            words.append(
                RelatedWord(
                    word="".join(span.text() for span in element.select("span")).strip(),
                    definition=definition,
                )
            )
    return words


def parse_word_learn(document: Document, state: str) -> WordLearnState:
    """Parse a ``new_word`` or ``restudy`` screen.

    Args:
        document: The parsed user-state response.
        state: The state marker value; it is echoed into the record's
            ``type`` so callers can tell the two screens apart.

    Returns:
        A populated `WordLearnState`.
    """
    info = document.select_one("#misc-word-info")
    info_children = info.children() if info is not None else []
    part_of_speech = info_children[0].text().strip() if len(info_children) > 0 else ""
    level = info_children[1].text().strip() if len(info_children) > 1 else ""

    record = WordLearnState(
        type=state,
        nav=extract_navigation(document),
        part_of_speech=part_of_speech,
        level=_LEVEL_BREAK_RE.sub(" - ", level).strip(),
        word=document.text(".wordform").strip(),
        orthoepy=document.text("#orthoepy").strip(),
        audio_path=document.attr_of("#pronounce-sound", "path"),
        image_path=document.attr_of("#bk-img", "src"),
        context=_parse_context(document),
        examples=_parse_examples(document),
        word_structure=_parse_word_structure(document),
        related=RelatedWords(
            synonyms=_parse_related(document, ".related-syns", _SYNONYM_DEFINITION),
            antonyms=_parse_related(document, ".related-ants", _ANTONYM_DEFINITION),
        ),
    )
    if state == "new_word":
        record.ikt = extract_optional_navigator(document, "#word-flags > span > form")
    logger.debug("Parsed %s screen for %r", state, record.word)
    return record
