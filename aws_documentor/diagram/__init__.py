"""draw.io diagram package: layout, cell building and XML rendering."""

from __future__ import annotations

from .main import (
    DEFAULT_DIAGRAM_PATH,
    build_detail_document,
    build_overview_document,
    generate_vpc_detail_diagram,
    generate_vpc_diagram,
    write_diagram,
)
from .serializer import DiagramRenderError

__all__ = [
    "DEFAULT_DIAGRAM_PATH",
    "DiagramRenderError",
    "build_detail_document",
    "build_overview_document",
    "generate_vpc_detail_diagram",
    "generate_vpc_diagram",
    "write_diagram",
]
