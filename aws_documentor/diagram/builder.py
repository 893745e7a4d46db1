"""Conversion of placed resources into draw.io cells."""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..models import (
    InternetGatewayInfo,
    NatGatewayInfo,
    RouteTableInfo,
    SecurityGroupInfo,
    SubnetInfo,
    TransitGatewayAttachmentInfo,
    TransitGatewayInfo,
    VpcInfo,
)
from .ids import CellIdAllocator
from .index import NetworkIndex, attachments_for_transit_gateway
from .layout import (
    ROUTE_TABLE_PANEL_WIDTH,
    SECURITY_GROUP_PANEL_WIDTH,
    VpcLayout,
    attachment_geometry,
    layout_vpc,
    nat_gateway_geometry,
    stack_panels,
    stack_transit_gateways,
)
from .models import DEFAULT_PARENT_ID, Cell, Geometry
from .styles import StyleKey, style_for, subnet_style_key
from .xml_utils import escape_label


def resource_name(tags: Optional[Dict[str, str]], resource_id: str) -> str:
    """Return the ``Name`` tag when set, otherwise ``resource_id``."""

    name = (tags or {}).get("Name")
    if name:
        return name
    return resource_id


def vpc_label(vpc: VpcInfo) -> str:
    return f"VPC\n{resource_name(vpc.tags, vpc.vpc_id)}\n{vpc.cidr_block}"


def subnet_label(subnet: SubnetInfo) -> str:
    kind = "Public subnet" if subnet.is_public else "Private subnet"
    name = resource_name(subnet.tags, subnet.subnet_id)
    return f"{kind}\n{name}\n{subnet.cidr_block}\nAZ: {subnet.availability_zone}"


def internet_gateway_label(gateway: InternetGatewayInfo) -> str:
    return f"Internet Gateway\n{resource_name(gateway.tags, gateway.internet_gateway_id)}"


def nat_gateway_label(gateway: NatGatewayInfo) -> str:
    return f"NAT Gateway\n{resource_name(gateway.tags, gateway.nat_gateway_id)}"


def transit_gateway_label(gateway: TransitGatewayInfo) -> str:
    name = resource_name(gateway.tags, gateway.transit_gateway_id)
    return f"Transit Gateway\n{name}\nASN: {gateway.amazon_side_asn}"


def attachment_label(attachment: TransitGatewayAttachmentInfo) -> str:
    name = resource_name(attachment.tags, attachment.attachment_id)
    return f"TGW Attachment\n{name}\n{attachment.state}"


def route_lines(route_table: RouteTableInfo) -> List[str]:
    return [f"  {route.destination} → {route.target}" for route in route_table.routes]


def route_table_label(route_table: RouteTableInfo) -> str:
    main = " (Main)" if route_table.is_main else ""
    name = resource_name(route_table.tags, route_table.route_table_id)
    return "\n".join([f"Route Table{main}", name, *route_lines(route_table)])


def security_group_label(group: SecurityGroupInfo) -> str:
    name = resource_name(group.tags, group.group_id)
    return (
        f"Security Group\n{name}\n{group.group_name}\n"
        f"Ingress: {group.ingress_count} rules\nEgress: {group.egress_count} rules"
    )


class CellSequence:
    """Ordered cells of one document, appended parent-before-child.

    Top-level cells are parented at the default layer.  Children can only be
    added through the :class:`ContainerScope` returned when their container was
    appended, so every parent reference points at an earlier cell.
    """

    def __init__(self, allocator: Optional[CellIdAllocator] = None) -> None:
        self._allocator = allocator or CellIdAllocator()
        self._cells: List[Cell] = []

    def __iter__(self):
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    @property
    def cells(self) -> List[Cell]:
        return list(self._cells)

    def _append(
        self,
        label: str,
        style: StyleKey,
        geometry: Geometry,
        parent: str,
        container: bool,
    ) -> Cell:
        cell = Cell(
            id=self._allocator.next_id(),
            value=escape_label(label),
            style=style_for(style),
            parent=parent,
            vertex=True,
            container=container,
            geometry=geometry,
        )
        self._cells.append(cell)
        return cell

    def add_vertex(self, label: str, style: StyleKey, geometry: Geometry) -> Cell:
        return self._append(label, style, geometry, DEFAULT_PARENT_ID, False)

    def add_container(
        self, label: str, style: StyleKey, geometry: Geometry
    ) -> "ContainerScope":
        cell = self._append(label, style, geometry, DEFAULT_PARENT_ID, True)
        return ContainerScope(self, cell)


class ContainerScope:
    """Appends cells positioned inside an already emitted container."""

    def __init__(self, sequence: CellSequence, cell: Cell) -> None:
        self.sequence = sequence
        self.cell = cell

    @property
    def id(self) -> str:
        return self.cell.id

    def add_vertex(self, label: str, style: StyleKey, geometry: Geometry) -> Cell:
        return self.sequence._append(label, style, geometry, self.cell.id, False)

    def add_container(
        self, label: str, style: StyleKey, geometry: Geometry
    ) -> "ContainerScope":
        cell = self.sequence._append(label, style, geometry, self.cell.id, True)
        return ContainerScope(self.sequence, cell)


def _add_subnet_row(
    vpc_scope: ContainerScope,
    index: NetworkIndex,
    subnets: Sequence[SubnetInfo],
    placements: Sequence[Geometry],
) -> None:
    for subnet, geometry in zip(subnets, placements):
        subnet_scope = vpc_scope.add_container(
            subnet_label(subnet), subnet_style_key(subnet.is_public), geometry
        )
        for position, nat in enumerate(index.nat_gateways_in(subnet.subnet_id)):
            subnet_scope.add_vertex(
                nat_gateway_label(nat), StyleKey.NAT_GATEWAY, nat_gateway_geometry(position)
            )


def build_vpc(
    sequence: CellSequence, vpc: VpcInfo, index: NetworkIndex, x: float, y: float
) -> Tuple[ContainerScope, VpcLayout]:
    """Emit a VPC container with its gateways, subnets and NAT gateways."""

    layout = layout_vpc(index, x, y)
    vpc_scope = sequence.add_container(vpc_label(vpc), StyleKey.VPC, layout.container)

    for gateway, geometry in zip(index.internet_gateways, layout.internet_gateways):
        vpc_scope.add_vertex(
            internet_gateway_label(gateway), StyleKey.INTERNET_GATEWAY, geometry
        )

    _add_subnet_row(vpc_scope, index, index.public_subnets, layout.public_subnets)
    _add_subnet_row(vpc_scope, index, index.private_subnets, layout.private_subnets)
    return vpc_scope, layout


def build_transit_gateway_region(
    sequence: CellSequence,
    transit_gateways: Iterable[TransitGatewayInfo],
    attachments: Sequence[TransitGatewayAttachmentInfo],
    x: float,
    y: float,
) -> List[Cell]:
    """Emit transit gateways in a column with their attachments to the right."""

    gateways = [
        (gateway, attachments_for_transit_gateway(attachments, gateway.transit_gateway_id))
        for gateway in transit_gateways
    ]
    placements = stack_transit_gateways(x, y, (len(matching) for _, matching in gateways))

    cells: List[Cell] = []
    for (gateway, matching), gateway_geometry in zip(gateways, placements):
        cells.append(
            sequence.add_vertex(
                transit_gateway_label(gateway), StyleKey.TRANSIT_GATEWAY, gateway_geometry
            )
        )
        for attachment_position, attachment in enumerate(matching):
            cells.append(
                sequence.add_vertex(
                    attachment_label(attachment),
                    StyleKey.TRANSIT_GATEWAY_ATTACHMENT,
                    attachment_geometry(gateway_geometry, attachment_position),
                )
            )
    return cells


def build_route_table_panels(
    sequence: CellSequence, route_tables: Sequence[RouteTableInfo], x: float, y: float
) -> List[Cell]:
    placements = stack_panels(
        x, y, ROUTE_TABLE_PANEL_WIDTH, (len(rt.routes) for rt in route_tables)
    )
    return [
        sequence.add_vertex(route_table_label(rt), StyleKey.ROUTE_TABLE_PANEL, geometry)
        for rt, geometry in zip(route_tables, placements)
    ]


def build_security_group_panels(
    sequence: CellSequence, groups: Sequence[SecurityGroupInfo], x: float, y: float
) -> List[Cell]:
    # Security group cards show rule counts only, so no extra lines.
    placements = stack_panels(x, y, SECURITY_GROUP_PANEL_WIDTH, (0 for _ in groups))
    return [
        sequence.add_vertex(
            security_group_label(group), StyleKey.SECURITY_GROUP_PANEL, geometry
        )
        for group, geometry in zip(groups, placements)
    ]


__all__ = [
    "CellSequence",
    "ContainerScope",
    "attachment_label",
    "build_route_table_panels",
    "build_security_group_panels",
    "build_transit_gateway_region",
    "build_vpc",
    "internet_gateway_label",
    "nat_gateway_label",
    "resource_name",
    "route_table_label",
    "security_group_label",
    "subnet_label",
    "transit_gateway_label",
    "vpc_label",
]
