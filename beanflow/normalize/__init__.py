"""
Normalization subsystem for beanflow.

This package turns raw response markup into plain Python data: text
clean-up helpers, a small DOM query layer over BeautifulSoup, form and
navigation extraction, and the dataclasses every state parser returns.
"""

from .text import SPECIAL_CHARS, collapse_whitespace, sanitize  # noqa: F401
from .dom import Document, Node  # noqa: F401
from .forms import extract_form, extract_navigation, extract_navigator  # noqa: F401
from .schema import NavigationMap, StateRecord  # noqa: F401
