"""
Form and navigation extraction.

Every action the trainer offers is rendered as a small `<form>` whose
hidden inputs carry the fields the service expects back on the next
advancement.  This module turns those forms into plain dictionaries:

* `extract_form` serializes a form's successful controls the way a
  browser would submit them.
* `extract_navigator` pairs that mapping with the form's sanitized
  ``name``.
* `extract_navigation` collects every navigator in the ``#trainer-nav``
  container into a single mapping keyed by name.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

from ..errors import NavigatorNameError
from .dom import Document, Node
from .schema import NavigationMap, NavigatorFields
from .text import sanitize

logger = logging.getLogger(__name__)

NAVIGATION_CONTAINER = "#trainer-nav"
CONTROL_SELECTOR = "input, select, textarea"
_SKIPPED_INPUT_TYPES = {"submit", "button", "image", "reset", "file"}
_LINE_BREAK_RE = re.compile(r"\r?\n")


def _controls(element: Node) -> List[Node]:
    if element.tag == "form":
        return element.select(CONTROL_SELECTOR)
    if element.tag in ("input", "select", "textarea"):
        return [element]
    return []


def _is_successful(control: Node) -> bool:
    if not control.attr("name") or control.attr("disabled") is not None:
        return False
    if control.tag != "input":
        return True
    input_type = (control.attr("type") or "text").lower()
    if input_type in _SKIPPED_INPUT_TYPES:
        return False
    if input_type in ("checkbox", "radio"):
        return control.attr("checked") is not None
    return True


def _option_value(option: Node) -> str:
    value = option.attr("value")
    return value if value is not None else option.text()


def _control_values(control: Node) -> List[str]:
    if control.tag == "textarea":
        return [_LINE_BREAK_RE.sub("\r\n", control.text())]
    if control.tag == "select":
        options = control.select("option")
        selected = [o for o in options if o.attr("selected") is not None]
        if not selected and options and control.attr("multiple") is None:
            selected = options[:1]
        return [_option_value(o) for o in selected]
    value = control.attr("value")
    if value is None:
        input_type = (control.attr("type") or "").lower()
        value = "on" if input_type in ("checkbox", "radio") else ""
    return [_LINE_BREAK_RE.sub("\r\n", value)]


def extract_form(element: Node) -> NavigatorFields:
    """Serialize a form element into a flat ``{name: value}`` mapping.

    Args:
        element: A ``<form>`` (whose descendant controls are used) or a
            single form control.

    Returns:
        The successful controls keyed by name.  When a name occurs more
        than once the last value wins.
    """
    data: NavigatorFields = {}
    for control in _controls(element):
        if not _is_successful(control):
            continue
        for value in _control_values(control):
            data[control.attr("name")] = value
    return data


def extract_navigator(element: Node) -> Tuple[str, NavigatorFields]:
    """Return ``(sanitized name, fields)`` for a navigator form.

    Raises:
        NavigatorNameError: if the element has no ``name`` attribute.
    """
    name = element.attr("name")
    if not name:
        raise NavigatorNameError(f"Navigator <{element.tag}> has no name attribute")
    return sanitize(name), extract_form(element)


def extract_optional_navigator(document: Document, css: str) -> Optional[NavigatorFields]:
    """Fields of the navigator at `css`, or None when it is not on the page."""
    element = document.select_one(css)
    if element is None:
        logger.debug("No navigator matched %s", css)
        return None
    return extract_navigator(element)[1]


def extract_navigation(document: Document) -> NavigationMap:
    """Collect the navigators of the ``#trainer-nav`` container.

    Children are visited in document order; a later navigator with the
    same name replaces the earlier one's fields.  A missing or empty
    container yields an empty mapping.
    """
    container = document.select_one(NAVIGATION_CONTAINER)
    if container is None:
        return {}
    nav: NavigationMap = {}
    for child in container.children():
        name, fields = extract_navigator(child)
        nav[name] = fields
    return nav
