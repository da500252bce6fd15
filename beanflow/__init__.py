"""
beanflow: a client for driving vocabulary training sessions.

The service renders each step of a training session as an HTML
fragment (or, when the session ends somewhere else, a small JSON
redirect).  This package submits the learner's decisions and turns the
fragments that come back into structured records:

1. **normalize** – Text clean-up, a small DOM query layer over
   BeautifulSoup, form/navigation extraction and the record dataclasses.
2. **states** – One parser per training screen (new word, restudy,
   quiz, spell test, take a break, redirect) and the dispatcher that
   reads the session-state marker.
3. **session** – The `TrainingSession` controller: form encoding, the
   aiohttp transport, and the observer that publishes every parsed
   record to subscribers of its tag.
4. **cli** – Command line entry point for one-off round trips.

Choosing what to answer is left to the caller; nothing here advances a
session on its own.
"""

from .errors import (  # noqa: F401
    BeanflowError,
    NavigatorNameError,
    NavigatorNotFoundError,
    SessionBusyError,
    TransportError,
    UnknownStateError,
)
from .session import TrainingSession  # noqa: F401

__version__ = "0.1.0"
