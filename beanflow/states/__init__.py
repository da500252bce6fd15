"""
State parsers for beanflow.

One parser per training screen the service can render, plus the
dispatcher that reads the session-state marker and picks between them.
"""

from .dispatch import STATE_TAGS, parse_user_state  # noqa: F401
from .quiz import parse_quiz, parse_spell_test  # noqa: F401
from .redirect import parse_redirect  # noqa: F401
from .take_a_break import parse_take_a_break  # noqa: F401
from .word_learn import parse_word_learn  # noqa: F401
