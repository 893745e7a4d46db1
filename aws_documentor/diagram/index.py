"""Grouping of flat resource collections by owning VPC."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from ..models import (
    InternetGatewayInfo,
    NatGatewayInfo,
    NetworkResources,
    RouteTableInfo,
    SecurityGroupInfo,
    SubnetInfo,
    TransitGatewayAttachmentInfo,
)


@dataclass(frozen=True)
class NetworkIndex:
    """Resources that belong to a single VPC, in input order."""

    vpc_id: str
    public_subnets: Tuple[SubnetInfo, ...] = ()
    private_subnets: Tuple[SubnetInfo, ...] = ()
    internet_gateways: Tuple[InternetGatewayInfo, ...] = ()
    nat_gateways: Tuple[NatGatewayInfo, ...] = ()

    @property
    def subnets(self) -> Tuple[SubnetInfo, ...]:
        return self.public_subnets + self.private_subnets

    def nat_gateways_in(self, subnet_id: str) -> List[NatGatewayInfo]:
        return [nat for nat in self.nat_gateways if nat.subnet_id == subnet_id]


def split_subnets(subnets: Iterable[SubnetInfo]) -> Tuple[List[SubnetInfo], List[SubnetInfo]]:
    """Return ``(public, private)`` subnets based on public IP assignment."""

    public: List[SubnetInfo] = []
    private: List[SubnetInfo] = []
    for subnet in subnets:
        (public if subnet.is_public else private).append(subnet)
    return public, private


def index_network(vpc_id: str, resources: NetworkResources) -> NetworkIndex:
    subnets = [subnet for subnet in resources.subnets if subnet.vpc_id == vpc_id]
    public, private = split_subnets(subnets)
    return NetworkIndex(
        vpc_id=vpc_id,
        public_subnets=tuple(public),
        private_subnets=tuple(private),
        internet_gateways=tuple(
            igw for igw in resources.internet_gateways if igw.vpc_id == vpc_id
        ),
        nat_gateways=tuple(nat for nat in resources.nat_gateways if nat.vpc_id == vpc_id),
    )


def route_tables_for_vpc(
    route_tables: Iterable[RouteTableInfo], vpc_id: str
) -> List[RouteTableInfo]:
    return [route_table for route_table in route_tables if route_table.vpc_id == vpc_id]


def security_groups_for_vpc(
    security_groups: Iterable[SecurityGroupInfo], vpc_id: str
) -> List[SecurityGroupInfo]:
    return [group for group in security_groups if group.vpc_id == vpc_id]


def attachments_for_transit_gateway(
    attachments: Iterable[TransitGatewayAttachmentInfo], transit_gateway_id: str
) -> List[TransitGatewayAttachmentInfo]:
    return [
        attachment
        for attachment in attachments
        if attachment.transit_gateway_id == transit_gateway_id
    ]


__all__ = [
    "NetworkIndex",
    "attachments_for_transit_gateway",
    "index_network",
    "route_tables_for_vpc",
    "security_groups_for_vpc",
    "split_subnets",
]
