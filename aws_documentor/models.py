"""Data models for scanned AWS networking resources."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class VpcInfo:
    """Represents a single VPC."""

    vpc_id: str
    cidr_block: str = ""
    state: str = ""
    is_default: bool = False
    dhcp_options_id: str = ""
    instance_tenancy: str = ""
    tags: Dict[str, str] = field(default_factory=dict)
    associated_cidr_blocks: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SubnetInfo:
    """Represents a subnet and the VPC that contains it."""

    subnet_id: str
    vpc_id: str
    cidr_block: str = ""
    availability_zone: str = ""
    availability_zone_id: str = ""
    state: str = ""
    map_public_ip_on_launch: bool = False
    assign_ipv6_address_on_creation: bool = False
    default_for_az: bool = False
    tags: Dict[str, str] = field(default_factory=dict)

    @property
    def is_public(self) -> bool:
        """Instances launched here receive a public address."""

        return self.map_public_ip_on_launch


@dataclass(frozen=True)
class RouteInfo:
    """A single route table entry."""

    destination_cidr_block: str = ""
    destination_ipv6_cidr_block: str = ""
    gateway_id: str = ""
    instance_id: str = ""
    nat_gateway_id: str = ""
    network_interface_id: str = ""
    transit_gateway_id: str = ""
    vpc_peering_connection_id: str = ""
    state: str = ""
    origin: str = ""

    @property
    def destination(self) -> str:
        return self.destination_cidr_block or self.destination_ipv6_cidr_block

    @property
    def target(self) -> str:
        """Return the identifier traffic is sent to, ``local`` when none is set."""

        return (
            self.gateway_id
            or self.nat_gateway_id
            or self.transit_gateway_id
            or self.vpc_peering_connection_id
            or "local"
        )


@dataclass(frozen=True)
class RouteTableInfo:
    route_table_id: str
    vpc_id: str
    routes: Tuple[RouteInfo, ...] = ()
    subnet_ids: Tuple[str, ...] = ()
    is_main: bool = False
    tags: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class SecurityGroupRule:
    """One flattened ingress or egress permission."""

    is_egress: bool
    ip_protocol: str = ""
    from_port: int = 0
    to_port: int = 0
    cidr_block: str = ""
    ipv6_cidr_block: str = ""
    group_id: str = ""
    group_owner_id: str = ""
    prefix_list_id: str = ""
    description: str = ""


@dataclass(frozen=True)
class SecurityGroupInfo:
    group_id: str
    group_name: str = ""
    description: str = ""
    vpc_id: str = ""
    owner_id: str = ""
    rules: Tuple[SecurityGroupRule, ...] = ()
    tags: Dict[str, str] = field(default_factory=dict)

    @property
    def ingress_count(self) -> int:
        return sum(1 for rule in self.rules if not rule.is_egress)

    @property
    def egress_count(self) -> int:
        return sum(1 for rule in self.rules if rule.is_egress)


@dataclass(frozen=True)
class InternetGatewayInfo:
    internet_gateway_id: str
    state: str = ""
    vpc_id: str = ""
    tags: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class NatGatewayInfo:
    nat_gateway_id: str
    subnet_id: str = ""
    vpc_id: str = ""
    state: str = ""
    connectivity_type: str = ""
    private_ip: str = ""
    public_ip: str = ""
    allocation_id: str = ""
    network_interface_id: str = ""
    created_time: str = ""
    tags: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class TransitGatewayInfo:
    transit_gateway_id: str
    state: str = ""
    owner_id: str = ""
    description: str = ""
    creation_time: str = ""
    amazon_side_asn: int = 0
    default_route_table_id: str = ""
    propagation_route_table_id: str = ""
    auto_accept_shared_attachments: str = ""
    default_route_table_association: str = ""
    default_route_table_propagation: str = ""
    dns_support: str = ""
    multicast_support: str = ""
    tags: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class TransitGatewayAttachmentInfo:
    attachment_id: str
    transit_gateway_id: str
    resource_type: str = ""
    resource_id: str = ""
    resource_owner_id: str = ""
    state: str = ""
    association: Dict[str, str] = field(default_factory=dict)
    creation_time: str = ""
    tags: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class NetworkResources:
    """A snapshot of every resource collection used to draw a diagram."""

    vpcs: Tuple[VpcInfo, ...] = ()
    subnets: Tuple[SubnetInfo, ...] = ()
    route_tables: Tuple[RouteTableInfo, ...] = ()
    security_groups: Tuple[SecurityGroupInfo, ...] = ()
    internet_gateways: Tuple[InternetGatewayInfo, ...] = ()
    nat_gateways: Tuple[NatGatewayInfo, ...] = ()
    transit_gateways: Tuple[TransitGatewayInfo, ...] = ()
    transit_gateway_attachments: Tuple[TransitGatewayAttachmentInfo, ...] = ()

    def find_vpc(self, vpc_id: str) -> VpcInfo | None:
        return next((vpc for vpc in self.vpcs if vpc.vpc_id == vpc_id), None)


RESOURCE_COLLECTIONS: Tuple[Tuple[str, str], ...] = (
    ("vpcs", "VPCs"),
    ("subnets", "Subnets"),
    ("route_tables", "Route Tables"),
    ("security_groups", "Security Groups"),
    ("internet_gateways", "Internet Gateways"),
    ("nat_gateways", "NAT Gateways"),
    ("transit_gateways", "Transit Gateways"),
    ("transit_gateway_attachments", "Transit Gateway Attachments"),
)
"""Attribute names on :class:`NetworkResources` paired with display titles."""


RECORD_TYPES: Dict[str, type] = {
    "vpcs": VpcInfo,
    "subnets": SubnetInfo,
    "route_tables": RouteTableInfo,
    "security_groups": SecurityGroupInfo,
    "internet_gateways": InternetGatewayInfo,
    "nat_gateways": NatGatewayInfo,
    "transit_gateways": TransitGatewayInfo,
    "transit_gateway_attachments": TransitGatewayAttachmentInfo,
}
"""Record class stored in each :class:`NetworkResources` collection."""


__all__ = [
    "InternetGatewayInfo",
    "NatGatewayInfo",
    "NetworkResources",
    "RECORD_TYPES",
    "RESOURCE_COLLECTIONS",
    "RouteInfo",
    "RouteTableInfo",
    "SecurityGroupInfo",
    "SecurityGroupRule",
    "SubnetInfo",
    "TransitGatewayAttachmentInfo",
    "TransitGatewayInfo",
    "VpcInfo",
]
