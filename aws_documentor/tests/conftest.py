"""Shared fixtures for the documentor tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


from aws_documentor.models import (  # noqa: E402
    InternetGatewayInfo,
    NatGatewayInfo,
    NetworkResources,
    RouteInfo,
    RouteTableInfo,
    SecurityGroupInfo,
    SecurityGroupRule,
    SubnetInfo,
    TransitGatewayAttachmentInfo,
    TransitGatewayInfo,
    VpcInfo,
)


def make_subnet(subnet_id: str, vpc_id: str = "vpc-1", *, public: bool, **kwargs) -> SubnetInfo:
    return SubnetInfo(
        subnet_id=subnet_id,
        vpc_id=vpc_id,
        cidr_block=kwargs.pop("cidr_block", "10.0.1.0/24"),
        availability_zone=kwargs.pop("availability_zone", "us-east-1a"),
        map_public_ip_on_launch=public,
        **kwargs,
    )


@pytest.fixture
def sample_resources() -> NetworkResources:
    """Two VPCs, one with gateways and panels, plus a transit gateway."""

    return NetworkResources(
        vpcs=(
            VpcInfo(vpc_id="vpc-1", cidr_block="10.0.0.0/16", tags={"Name": "prod-net"}),
            VpcInfo(vpc_id="vpc-2", cidr_block="10.1.0.0/16"),
        ),
        subnets=(
            make_subnet("subnet-pub-a", public=True, tags={"Name": "web-a"}),
            make_subnet("subnet-pub-b", public=True, availability_zone="us-east-1b"),
            make_subnet("subnet-priv-a", public=False, cidr_block="10.0.10.0/24"),
            make_subnet("subnet-other", "vpc-2", public=False, cidr_block="10.1.0.0/24"),
        ),
        route_tables=(
            RouteTableInfo(
                route_table_id="rtb-main",
                vpc_id="vpc-1",
                is_main=True,
                routes=(
                    RouteInfo(destination_cidr_block="10.0.0.0/16", gateway_id="local"),
                    RouteInfo(destination_cidr_block="0.0.0.0/0", gateway_id="igw-1"),
                ),
            ),
            RouteTableInfo(route_table_id="rtb-other", vpc_id="vpc-2"),
        ),
        security_groups=(
            SecurityGroupInfo(
                group_id="sg-1",
                group_name="web",
                vpc_id="vpc-1",
                rules=(
                    SecurityGroupRule(is_egress=False, ip_protocol="tcp", from_port=443, to_port=443),
                    SecurityGroupRule(is_egress=False, ip_protocol="tcp", from_port=80, to_port=80),
                    SecurityGroupRule(is_egress=True, ip_protocol="-1"),
                ),
            ),
            SecurityGroupInfo(group_id="sg-2", group_name="default", vpc_id="vpc-2"),
        ),
        internet_gateways=(InternetGatewayInfo(internet_gateway_id="igw-1", vpc_id="vpc-1"),),
        nat_gateways=(
            NatGatewayInfo(nat_gateway_id="nat-1", subnet_id="subnet-pub-a", vpc_id="vpc-1"),
        ),
        transit_gateways=(
            TransitGatewayInfo(transit_gateway_id="tgw-1", amazon_side_asn=64512),
        ),
        transit_gateway_attachments=(
            TransitGatewayAttachmentInfo(
                attachment_id="tgw-attach-1", transit_gateway_id="tgw-1", state="available"
            ),
        ),
    )


@pytest.fixture
def subnet_factory():
    return make_subnet
