"""Errors and attribute helpers for reading netlist XML."""

from __future__ import annotations

import re
from xml.etree.ElementTree import Element

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class NetlistError(Exception):
    """Base error for netlist operations."""


class XmlFormatError(NetlistError):
    """Raised when a netlist XML document is malformed."""


def get_attribute(element: Element, attribute: str) -> str | None:
    """Return the attribute's text, or None when it is absent."""
    return element.get(attribute)


def get_int_attribute(element: Element, attribute: str) -> int:
    """Return the attribute parsed as a leading integer (0 if it has none)."""
    text = element.get(attribute)
    if text is None:
        raise XmlFormatError(
            f'"{attribute}" attribute missing in <{element.tag}> tag.'
        )
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0