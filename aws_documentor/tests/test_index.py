"""Tests for grouping resources by VPC."""

from __future__ import annotations

from aws_documentor.diagram.index import (
    attachments_for_transit_gateway,
    index_network,
    route_tables_for_vpc,
    security_groups_for_vpc,
)
from aws_documentor.models import NetworkResources


def test_index_network_partitions_subnets(sample_resources) -> None:
    index = index_network("vpc-1", sample_resources)

    assert [s.subnet_id for s in index.public_subnets] == ["subnet-pub-a", "subnet-pub-b"]
    assert [s.subnet_id for s in index.private_subnets] == ["subnet-priv-a"]
    assert [g.internet_gateway_id for g in index.internet_gateways] == ["igw-1"]
    assert [n.nat_gateway_id for n in index.nat_gateways_in("subnet-pub-a")] == ["nat-1"]
    assert index.nat_gateways_in("subnet-pub-b") == []


def test_unknown_vpc_yields_empty_index(sample_resources) -> None:
    index = index_network("vpc-missing", sample_resources)

    assert index.subnets == ()
    assert index.internet_gateways == ()
    assert index.nat_gateways == ()


def test_empty_resources_are_handled() -> None:
    assert index_network("vpc-1", NetworkResources()).subnets == ()


def test_panel_and_attachment_filters(sample_resources) -> None:
    assert [rt.route_table_id for rt in route_tables_for_vpc(sample_resources.route_tables, "vpc-2")] == [
        "rtb-other"
    ]
    assert [sg.group_id for sg in security_groups_for_vpc(sample_resources.security_groups, "vpc-1")] == [
        "sg-1"
    ]
    assert attachments_for_transit_gateway(sample_resources.transit_gateway_attachments, "tgw-9") == []
