"""Helpers for preparing text for draw.io XML attributes."""

from __future__ import annotations

import re
from typing import Union
from xml.sax.saxutils import escape, unescape

_ENTITIES = {'"': "&quot;", "'": "&apos;"}

# Characters outside the XML 1.0 ``Char`` production, which no reference can
# carry either.  Lone surrogates are left for the encoder to reject.
_FORBIDDEN_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")
_REVERSE_ENTITIES = {entity: char for char, entity in _ENTITIES.items()}

# XML parsers normalise raw whitespace inside attribute values to spaces, so
# multi-line labels must carry their line breaks as character references.
_WHITESPACE_REFERENCES = {"\r": "&#xd;", "\n": "&#xa;", "\t": "&#x9;"}


def escape_label(value: str) -> str:
    """Return ``value`` with the five XML metacharacters replaced.

    ``&``, ``<``, ``>``, ``"`` and ``'`` become their named entity references
    (``&amp;``, ``&lt;``, ``&gt;``, ``&quot;``, ``&apos;``).  Ampersands are
    replaced first so the result is escaped exactly once.  Control characters
    that XML 1.0 does not allow are dropped.
    """

    return escape(strip_forbidden(value), _ENTITIES)


def strip_forbidden(value: str) -> str:
    """Remove characters that cannot appear in an XML 1.0 document."""

    return _FORBIDDEN_CHARS.sub("", value)


def unescape_label(value: str) -> str:
    """Reverse :func:`escape_label`."""

    return unescape(value, _REVERSE_ENTITIES)


def encode_whitespace(value: str) -> str:
    """Replace line breaks and tabs with character references."""

    for char, reference in _WHITESPACE_REFERENCES.items():
        value = value.replace(char, reference)
    return value


def escape_attribute(value: str) -> str:
    """Return raw ``value`` ready to be placed between double quotes."""

    return encode_whitespace(escape_label(value))


def format_number(value: Union[int, float]) -> str:
    """Render a layout coordinate, dropping ``.0`` from integral values."""

    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


__all__ = [
    "encode_whitespace",
    "escape_attribute",
    "escape_label",
    "format_number",
    "strip_forbidden",
    "unescape_label",
]
