"""Deterministic placement of VPC contents, gateways and info panels.

All coordinates are relative to the parent cell, matching draw.io's handling of
container children.  Sizes are derived from the content being placed so the
same inputs always produce the same geometry.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from ..models import SubnetInfo
from .index import NetworkIndex
from .models import Geometry

# VPC containers
VPC_ORIGIN_X = 50.0
VPC_ORIGIN_Y = 50.0
VPC_BASE_WIDTH = 250.0  # room for the internet gateway column
SUBNET_SLOT_WIDTH = 240.0
VPC_HEIGHT = 400.0
VPC_STRIDE = 1200.0
VPC_GAP = 50.0

# Children of a VPC
ICON_SIZE = 78.0
IGW_X = 20.0
IGW_TOP = 40.0
IGW_SPACING = 90.0
SUBNET_ROW_X = 150.0
PUBLIC_ROW_Y = 40.0
PRIVATE_ROW_Y = 220.0
SUBNET_WIDTH = 200.0
SUBNET_HEIGHT = 140.0
NAT_OFFSET_X = 40.0
NAT_OFFSET_Y = 50.0
NAT_SPACING = 90.0
SUBNET_PADDING = 12.0  # below the lowest NAT gateway
ROW_GAP = 40.0
VPC_PADDING = 40.0  # below the lowest child

# Transit gateway fan-out region
FAN_OUT_MARGIN = 100.0
TGW_SPACING = 150.0  # minimum distance between gateways
ATTACHMENT_OFFSET_X = 100.0
ATTACHMENT_SPACING = 100.0

# Info panels
PANEL_X = 1200.0
PANEL_MARGIN = 100.0
PANEL_GAP = 20.0
PANEL_LINE_HEIGHT = 15.0
PANEL_BASE_HEIGHT = 100.0
ROUTE_TABLE_PANEL_Y = 50.0
ROUTE_TABLE_PANEL_WIDTH = 300.0
SECURITY_GROUP_PANEL_Y = 400.0
SECURITY_GROUP_PANEL_WIDTH = 280.0


@dataclass(frozen=True)
class VpcLayout:
    """Placement of a VPC container and the direct children it holds."""

    container: Geometry
    internet_gateways: Tuple[Geometry, ...]
    public_subnets: Tuple[Geometry, ...]
    private_subnets: Tuple[Geometry, ...]


def vpc_container_width(public_count: int, private_count: int) -> float:
    return VPC_BASE_WIDTH + max(public_count, private_count) * SUBNET_SLOT_WIDTH


def internet_gateway_geometry(position: int) -> Geometry:
    return Geometry(IGW_X, IGW_TOP + position * IGW_SPACING, ICON_SIZE, ICON_SIZE)


def subnet_geometry(position: int, y: float, height: float = SUBNET_HEIGHT) -> Geometry:
    """Return the slot for the ``position``-th subnet of the row at ``y``."""

    return Geometry(
        SUBNET_ROW_X + position * SUBNET_SLOT_WIDTH, y, SUBNET_WIDTH, height
    )


def nat_gateway_geometry(position: int) -> Geometry:
    """NAT gateways stack downwards inside their subnet."""

    return Geometry(
        NAT_OFFSET_X, NAT_OFFSET_Y + position * NAT_SPACING, ICON_SIZE, ICON_SIZE
    )


def subnet_height(nat_count: int) -> float:
    """Return a subnet height tall enough for ``nat_count`` NAT gateways."""

    if not nat_count:
        return SUBNET_HEIGHT
    lowest = nat_gateway_geometry(nat_count - 1)
    return max(SUBNET_HEIGHT, lowest.bottom + SUBNET_PADDING)


def _subnet_row(
    index: NetworkIndex, subnets: Sequence[SubnetInfo], y: float
) -> Tuple[Geometry, ...]:
    return tuple(
        subnet_geometry(i, y, subnet_height(len(index.nat_gateways_in(subnet.subnet_id))))
        for i, subnet in enumerate(subnets)
    )


def layout_vpc(index: NetworkIndex, x: float, y: float) -> VpcLayout:
    """Place the gateway column and both subnet rows, sizing the container to fit."""

    width = vpc_container_width(len(index.public_subnets), len(index.private_subnets))
    internet_gateways = tuple(
        internet_gateway_geometry(i) for i in range(len(index.internet_gateways))
    )
    public_subnets = _subnet_row(index, index.public_subnets, PUBLIC_ROW_Y)
    public_bottom = max(
        (g.bottom for g in public_subnets), default=PUBLIC_ROW_Y + SUBNET_HEIGHT
    )
    private_subnets = _subnet_row(
        index, index.private_subnets, max(PRIVATE_ROW_Y, public_bottom + ROW_GAP)
    )

    children = internet_gateways + public_subnets + private_subnets
    height = max([VPC_HEIGHT] + [g.bottom + VPC_PADDING for g in children])
    return VpcLayout(
        container=Geometry(x, y, width, height),
        internet_gateways=internet_gateways,
        public_subnets=public_subnets,
        private_subnets=private_subnets,
    )


def next_vpc_x(container: Geometry) -> float:
    """Return the origin of the VPC placed to the right of ``container``."""

    return container.x + max(VPC_STRIDE, container.width + VPC_GAP)


def stack_transit_gateways(
    region_x: float, region_y: float, attachment_counts: Iterable[int]
) -> List[Geometry]:
    """Return one gateway slot per count, leaving room for each attachment stack."""

    placements: List[Geometry] = []
    offset = region_y
    for count in attachment_counts:
        placements.append(Geometry(region_x, offset, ICON_SIZE, ICON_SIZE))
        offset += max(TGW_SPACING, count * ATTACHMENT_SPACING)
    return placements


def attachment_geometry(gateway: Geometry, position: int) -> Geometry:
    """Attachments stack to the right of their transit gateway."""

    return Geometry(
        gateway.x + ATTACHMENT_OFFSET_X,
        gateway.y + position * ATTACHMENT_SPACING,
        ICON_SIZE,
        ICON_SIZE,
    )


def panel_height(entry_count: int) -> float:
    return PANEL_BASE_HEIGHT + entry_count * PANEL_LINE_HEIGHT


def stack_panels(
    x: float, y: float, width: float, entry_counts: Iterable[int]
) -> List[Geometry]:
    """Return one card per entry count, each below the previous one."""

    placements: List[Geometry] = []
    offset = y
    for count in entry_counts:
        height = panel_height(count)
        placements.append(Geometry(x, offset, width, height))
        offset += height + PANEL_GAP
    return placements


def panel_column_x(container: Geometry) -> float:
    """Info panels start at a fixed column unless the VPC reaches past it."""

    return max(PANEL_X, container.right + PANEL_MARGIN)


def stack_bottom(placements: Iterable[Geometry], default: float) -> float:
    """Return where the next stack may start below ``placements``."""

    bottom = default
    for geometry in placements:
        bottom = max(bottom, geometry.bottom + PANEL_GAP)
    return bottom


__all__ = [
    "VpcLayout",
    "attachment_geometry",
    "internet_gateway_geometry",
    "layout_vpc",
    "nat_gateway_geometry",
    "next_vpc_x",
    "panel_column_x",
    "panel_height",
    "stack_bottom",
    "stack_panels",
    "stack_transit_gateways",
    "subnet_geometry",
    "subnet_height",
    "vpc_container_width",
]
