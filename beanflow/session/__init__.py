"""
Session subsystem for beanflow.

`TrainingSession` is the public entry point: it owns the transport,
encodes advancements, fetches user states and publishes parsed records
to subscribers.
"""

from .controller import DEFAULT_TIME_ON_PAGE, TrainingSession  # noqa: F401
from .events import EventEmitter  # noqa: F401
from .transport import AiohttpTransport, Transport  # noqa: F401
from .wire import build_advance_form, encode_form  # noqa: F401
