"""Dataclasses describing a draw.io document."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

ROOT_CELL_ID = "0"
DEFAULT_PARENT_ID = "1"


@dataclass(frozen=True)
class Geometry:
    """Position and size of a cell relative to its parent's origin."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class Cell:
    """A shape, container or connector inside the graph model.

    ``value`` holds label text that has already been passed through
    :func:`~aws_documentor.diagram.xml_utils.escape_label`.
    """

    id: str
    value: str = ""
    style: str = ""
    parent: Optional[str] = DEFAULT_PARENT_ID
    vertex: bool = False
    edge: bool = False
    container: bool = False
    geometry: Optional[Geometry] = None


@dataclass(frozen=True)
class GraphModel:
    grid: int = 1
    grid_size: int = 10
    page: int = 1
    page_scale: float = 1


@dataclass
class Document:
    """The ``mxfile`` envelope around one diagram and its ordered cells."""

    name: str
    diagram_id: str
    cells: List[Cell] = field(default_factory=list)
    host: str = "app.diagrams.net"
    version: str = "21.0.0"
    type: str = "device"
    model: GraphModel = field(default_factory=GraphModel)

    def root_cells(self) -> List[Cell]:
        """Return the two reserved cells followed by every built cell."""

        return [
            Cell(id=ROOT_CELL_ID, parent=None),
            Cell(id=DEFAULT_PARENT_ID, parent=ROOT_CELL_ID),
            *self.cells,
        ]


__all__ = [
    "Cell",
    "DEFAULT_PARENT_ID",
    "Document",
    "Geometry",
    "GraphModel",
    "ROOT_CELL_ID",
]
