# normalize/schema.py
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Union

# Form field name -> value, exactly as serialized from the markup.
NavigatorFields = Dict[str, str]
# Sanitized navigator name -> fields, in document order.
NavigationMap = Dict[str, NavigatorFields]


def _dict_factory(items: List[tuple]) -> Dict[str, Any]:
    # `pass_` and friends are spelled without the trailing underscore on the wire
    return {key.rstrip("_"): value for key, value in items}


class _Record:
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self, dict_factory=_dict_factory)  # type: ignore[call-overload]


@dataclass
class ClozeQuiz(_Record):
    question: Optional[str]       # None when the prompt has no ": " separator
    answer: str
    choices: List[str] = field(default_factory=list)


@dataclass
class WordContext(_Record):
    example_sentence: str
    quiz: ClozeQuiz
    definition: str
    quick_look: str


@dataclass
class UsageExample(_Record):
    text: str
    attribution: str


@dataclass
class WordPart(_Record):
    part: str
    meaning: str


@dataclass
class WordStructure(_Record):
    definition: str
    parts: List[WordPart] = field(default_factory=list)


@dataclass
class RelatedWord(_Record):
    word: str
    definition: str


@dataclass
class RelatedWords(_Record):
    synonyms: List[RelatedWord] = field(default_factory=list)
    antonyms: List[RelatedWord] = field(default_factory=list)


@dataclass
class WordLearnState(_Record):
    type: str                     # 'new_word' | 'restudy'
    nav: NavigationMap
    part_of_speech: str
    level: str
    word: str
    orthoepy: str
    audio_path: Optional[str]
    image_path: Optional[str]
    context: WordContext
    examples: List[UsageExample]
    word_structure: WordStructure
    related: RelatedWords
    ikt: Optional[NavigatorFields] = None   # new_word only


@dataclass
class Clock(_Record):
    elapsed: Optional[str]
    total: Optional[str]


@dataclass
class AnswerNavigators(_Record):
    pass_: Optional[NavigatorFields]
    fail: Optional[NavigatorFields]


@dataclass
class QuizState(_Record):
    nav: NavigationMap
    clock: Clock
    answer: AnswerNavigators
    type: str = "quiz"


@dataclass
class SpellTestState(_Record):
    nav: NavigationMap
    answer: AnswerNavigators
    type: str = "spelltest"


@dataclass
class BreakState(_Record):
    type: str = "done"


@dataclass
class RedirectState(_Record):
    url: Optional[str]
    type: str = "redirect"


StateRecord = Union[WordLearnState, QuizState, SpellTestState, BreakState, RedirectState]
