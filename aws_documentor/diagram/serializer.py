"""Rendering of :class:`Document` objects as draw.io XML text."""
from __future__ import annotations

from typing import List, Sequence, Tuple

from .models import Cell, Document, Geometry
from .xml_utils import encode_whitespace, escape_attribute, format_number

XML_PREAMBLE = '<?xml version="1.0" encoding="UTF-8"?>'
INDENT = "  "

Attribute = Tuple[str, str]


class DiagramRenderError(RuntimeError):
    """Raised when a document cannot be encoded as UTF-8 text."""


def _attributes(pairs: Sequence[Attribute]) -> str:
    return "".join(f' {name}="{value}"' for name, value in pairs)


def _element(name: str, pairs: Sequence[Attribute], depth: int, *, close: bool = True) -> str:
    suffix = " />" if close else ">"
    return f"{INDENT * depth}<{name}{_attributes(pairs)}{suffix}"


def _geometry_attributes(geometry: Geometry) -> List[Attribute]:
    return [
        ("x", format_number(geometry.x)),
        ("y", format_number(geometry.y)),
        ("width", format_number(geometry.width)),
        ("height", format_number(geometry.height)),
        ("as", "geometry"),
    ]


def _cell_attributes(cell: Cell) -> List[Attribute]:
    pairs: List[Attribute] = [("id", escape_attribute(cell.id))]
    if cell.value:
        # Labels are stored escaped; only line breaks still need encoding.
        pairs.append(("value", encode_whitespace(cell.value)))
    if cell.style:
        pairs.append(("style", escape_attribute(cell.style)))
    if cell.parent is not None:
        pairs.append(("parent", escape_attribute(cell.parent)))
    if cell.vertex:
        pairs.append(("vertex", "1"))
    if cell.edge:
        pairs.append(("edge", "1"))
    return pairs


def render_cell(cell: Cell, depth: int) -> List[str]:
    """Return the lines for one ``mxCell`` element."""

    pairs = _cell_attributes(cell)
    if cell.geometry is None:
        return [_element("mxCell", pairs, depth)]
    return [
        _element("mxCell", pairs, depth, close=False),
        _element("mxGeometry", _geometry_attributes(cell.geometry), depth + 1),
        f"{INDENT * depth}</mxCell>",
    ]


def render_document(document: Document) -> str:
    """Render ``document`` with its preamble and two-space indentation."""

    model = document.model
    lines: List[str] = [
        XML_PREAMBLE,
        _element(
            "mxfile",
            [
                ("host", escape_attribute(document.host)),
                ("version", escape_attribute(document.version)),
                ("type", escape_attribute(document.type)),
            ],
            0,
            close=False,
        ),
        _element(
            "diagram",
            [
                ("name", escape_attribute(document.name)),
                ("id", escape_attribute(document.diagram_id)),
            ],
            1,
            close=False,
        ),
        _element(
            "mxGraphModel",
            [
                ("grid", str(model.grid)),
                ("gridSize", str(model.grid_size)),
                ("page", str(model.page)),
                ("pageScale", format_number(model.page_scale)),
            ],
            2,
            close=False,
        ),
        f"{INDENT * 3}<root>",
    ]
    for cell in document.root_cells():
        lines.extend(render_cell(cell, 4))
    lines.extend(
        [
            f"{INDENT * 3}</root>",
            f"{INDENT * 2}</mxGraphModel>",
            f"{INDENT}</diagram>",
            "</mxfile>",
        ]
    )
    text = "\n".join(lines) + "\n"
    ensure_encodable(text)
    return text


def ensure_encodable(text: str, encoding: str = "utf-8") -> None:
    try:
        text.encode(encoding)
    except UnicodeError as exc:
        raise DiagramRenderError(f"Failed to encode diagram XML: {exc}") from exc


__all__ = [
    "DiagramRenderError",
    "XML_PREAMBLE",
    "ensure_encodable",
    "render_cell",
    "render_document",
]
