"""draw.io diagram generation for scanned VPC resources."""
from __future__ import annotations

from ..models import NetworkResources, VpcInfo
from .builder import (
    CellSequence,
    build_route_table_panels,
    build_security_group_panels,
    build_transit_gateway_region,
    build_vpc,
    resource_name,
)
from .ids import CellIdAllocator
from .index import index_network, route_tables_for_vpc, security_groups_for_vpc
from .layout import (
    FAN_OUT_MARGIN,
    ROUTE_TABLE_PANEL_Y,
    SECURITY_GROUP_PANEL_Y,
    VPC_ORIGIN_X,
    VPC_ORIGIN_Y,
    next_vpc_x,
    panel_column_x,
    stack_bottom,
)
from .models import Document
from .serializer import render_document

OVERVIEW_DIAGRAM_NAME = "AWS VPC Infrastructure"
OVERVIEW_DIAGRAM_ID = "vpc-diagram"
DETAIL_DIAGRAM_ID = "vpc-detail-diagram"
DEFAULT_DIAGRAM_PATH = "vpc-diagram.drawio"


def build_overview_document(resources: NetworkResources) -> Document:
    """Lay out every VPC side by side, followed by the transit gateway region."""

    sequence = CellSequence(CellIdAllocator())

    x = VPC_ORIGIN_X
    for vpc in resources.vpcs:
        index = index_network(vpc.vpc_id, resources)
        _, layout = build_vpc(sequence, vpc, index, x, VPC_ORIGIN_Y)
        x = next_vpc_x(layout.container)

    if resources.transit_gateways:
        build_transit_gateway_region(
            sequence,
            resources.transit_gateways,
            resources.transit_gateway_attachments,
            x + FAN_OUT_MARGIN,
            VPC_ORIGIN_Y,
        )

    return Document(
        name=OVERVIEW_DIAGRAM_NAME, diagram_id=OVERVIEW_DIAGRAM_ID, cells=sequence.cells
    )


def build_detail_document(vpc: VpcInfo, resources: NetworkResources) -> Document:
    """Lay out one VPC with route table and security group panels beside it."""

    sequence = CellSequence(CellIdAllocator())
    index = index_network(vpc.vpc_id, resources)
    _, layout = build_vpc(sequence, vpc, index, VPC_ORIGIN_X, VPC_ORIGIN_Y)

    panel_x = panel_column_x(layout.container)
    route_table_cells = build_route_table_panels(
        sequence,
        route_tables_for_vpc(resources.route_tables, vpc.vpc_id),
        panel_x,
        ROUTE_TABLE_PANEL_Y,
    )
    security_group_y = stack_bottom(
        (cell.geometry for cell in route_table_cells if cell.geometry),
        SECURITY_GROUP_PANEL_Y,
    )
    build_security_group_panels(
        sequence,
        security_groups_for_vpc(resources.security_groups, vpc.vpc_id),
        panel_x,
        security_group_y,
    )

    return Document(
        name=f"VPC Detail: {resource_name(vpc.tags, vpc.vpc_id)}",
        diagram_id=DETAIL_DIAGRAM_ID,
        cells=sequence.cells,
    )


def generate_vpc_diagram(resources: NetworkResources) -> str:
    """Return the rendered multi-VPC overview document."""

    return render_document(build_overview_document(resources))


def generate_vpc_detail_diagram(vpc_id: str, resources: NetworkResources) -> str:
    """Return the rendered detail document for ``vpc_id``.

    A VPC missing from ``resources`` is drawn from its identifier alone.
    """

    vpc = resources.find_vpc(vpc_id) or VpcInfo(vpc_id=vpc_id)
    return render_document(build_detail_document(vpc, resources))


def write_diagram(text: str, output_path: str) -> str:
    """Write rendered diagram ``text`` to ``output_path`` and return the path."""

    with open(output_path, "w", encoding="utf-8") as fh:
        fh.write(text)
    return output_path


__all__ = [
    "DEFAULT_DIAGRAM_PATH",
    "build_detail_document",
    "build_overview_document",
    "generate_vpc_detail_diagram",
    "generate_vpc_diagram",
    "write_diagram",
]
