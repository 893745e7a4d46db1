"""Retrieval of EC2 networking resources as typed records."""
from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple

import boto3
from botocore.client import BaseClient
from botocore.exceptions import ClientError, EndpointConnectionError

from ..models import RESOURCE_COLLECTIONS, NetworkResources
from .vpc import (
    describe_internet_gateways,
    describe_nat_gateways,
    describe_route_tables,
    describe_security_groups,
    describe_subnets,
    describe_transit_gateway_attachments,
    describe_transit_gateways,
    describe_vpcs,
)


Scanner = Callable[[BaseClient], Sequence[object]]

ProgressCallback = Callable[[str, Optional[Sequence[object]]], None]
"""Called with a collection title before a scan (``None``) and after it (records)."""


NETWORK_SCANS: Tuple[Tuple[str, Scanner], ...] = (
    ("vpcs", describe_vpcs),
    ("subnets", describe_subnets),
    ("route_tables", describe_route_tables),
    ("security_groups", describe_security_groups),
    ("internet_gateways", describe_internet_gateways),
    ("nat_gateways", describe_nat_gateways),
    ("transit_gateways", describe_transit_gateways),
    ("transit_gateway_attachments", describe_transit_gateway_attachments),
)


def collect_network_resources(
    session: boto3.session.Session,
    progress: Optional[ProgressCallback] = None,
) -> NetworkResources:
    """Scan every networking collection in the session's region."""

    titles = dict(RESOURCE_COLLECTIONS)
    ec2 = session.client("ec2")
    collected = {}
    for attribute, scanner in NETWORK_SCANS:
        title = titles[attribute]
        if progress:
            progress(title, None)
        try:
            records: List[object] = list(scanner(ec2))
        except (ClientError, EndpointConnectionError) as exc:
            raise RuntimeError(f"Failed to describe {title.lower()}: {exc}") from exc
        if progress:
            progress(title, records)
        collected[attribute] = tuple(records)
    return NetworkResources(**collected)


__all__ = [
    "NETWORK_SCANS",
    "ProgressCallback",
    "collect_network_resources",
    "describe_internet_gateways",
    "describe_nat_gateways",
    "describe_route_tables",
    "describe_security_groups",
    "describe_subnets",
    "describe_transit_gateway_attachments",
    "describe_transit_gateways",
    "describe_vpcs",
]
