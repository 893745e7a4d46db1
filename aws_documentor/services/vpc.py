"""Scanners that convert EC2 networking API responses into records."""
from __future__ import annotations

from typing import List

from botocore.client import BaseClient

from ..models import (
    InternetGatewayInfo,
    NatGatewayInfo,
    RouteInfo,
    RouteTableInfo,
    SecurityGroupInfo,
    SecurityGroupRule,
    SubnetInfo,
    TransitGatewayAttachmentInfo,
    TransitGatewayInfo,
    VpcInfo,
)
from ..utils import format_timestamp, safe_paginate, tags_to_dict


def describe_vpcs(ec2: BaseClient) -> List[VpcInfo]:
    """Return every VPC in the client's region."""

    vpcs: List[VpcInfo] = []
    for vpc in safe_paginate(ec2, "describe_vpcs", "Vpcs"):
        associated = tuple(
            association["CidrBlock"]
            for association in vpc.get("CidrBlockAssociationSet", [])
            if association.get("CidrBlock")
        )
        vpcs.append(
            VpcInfo(
                vpc_id=vpc["VpcId"],
                cidr_block=vpc.get("CidrBlock", ""),
                state=vpc.get("State", ""),
                is_default=bool(vpc.get("IsDefault", False)),
                dhcp_options_id=vpc.get("DhcpOptionsId", ""),
                instance_tenancy=vpc.get("InstanceTenancy", ""),
                tags=tags_to_dict(vpc.get("Tags")),
                associated_cidr_blocks=associated,
            )
        )
    return vpcs


def describe_subnets(ec2: BaseClient, vpc_id: str | None = None) -> List[SubnetInfo]:
    """Return subnets across all VPCs, or only those of ``vpc_id``."""

    kwargs = {}
    if vpc_id:
        kwargs["Filters"] = [{"Name": "vpc-id", "Values": [vpc_id]}]

    subnets: List[SubnetInfo] = []
    for subnet in safe_paginate(ec2, "describe_subnets", "Subnets", **kwargs):
        subnets.append(
            SubnetInfo(
                subnet_id=subnet["SubnetId"],
                vpc_id=subnet.get("VpcId", ""),
                cidr_block=subnet.get("CidrBlock", ""),
                availability_zone=subnet.get("AvailabilityZone", ""),
                availability_zone_id=subnet.get("AvailabilityZoneId", ""),
                state=subnet.get("State", ""),
                map_public_ip_on_launch=bool(subnet.get("MapPublicIpOnLaunch", False)),
                assign_ipv6_address_on_creation=bool(
                    subnet.get("AssignIpv6AddressOnCreation", False)
                ),
                default_for_az=bool(subnet.get("DefaultForAz", False)),
                tags=tags_to_dict(subnet.get("Tags")),
            )
        )
    return subnets


def _route_from_api(route: dict) -> RouteInfo:
    return RouteInfo(
        destination_cidr_block=route.get("DestinationCidrBlock", ""),
        destination_ipv6_cidr_block=route.get("DestinationIpv6CidrBlock", ""),
        gateway_id=route.get("GatewayId", ""),
        instance_id=route.get("InstanceId", ""),
        nat_gateway_id=route.get("NatGatewayId", ""),
        network_interface_id=route.get("NetworkInterfaceId", ""),
        transit_gateway_id=route.get("TransitGatewayId", ""),
        vpc_peering_connection_id=route.get("VpcPeeringConnectionId", ""),
        state=route.get("State", ""),
        origin=route.get("Origin", ""),
    )


def describe_route_tables(ec2: BaseClient) -> List[RouteTableInfo]:
    """Return route tables with their routes and subnet associations."""

    route_tables: List[RouteTableInfo] = []
    for route_table in safe_paginate(ec2, "describe_route_tables", "RouteTables"):
        is_main = False
        subnet_ids: List[str] = []
        for association in route_table.get("Associations", []):
            if association.get("Main"):
                is_main = True
            elif association.get("SubnetId"):
                subnet_ids.append(association["SubnetId"])

        route_tables.append(
            RouteTableInfo(
                route_table_id=route_table["RouteTableId"],
                vpc_id=route_table.get("VpcId", ""),
                routes=tuple(_route_from_api(route) for route in route_table.get("Routes", [])),
                subnet_ids=tuple(subnet_ids),
                is_main=is_main,
                tags=tags_to_dict(route_table.get("Tags")),
            )
        )
    return route_tables


def _flatten_permissions(permissions: List[dict], *, egress: bool) -> List[SecurityGroupRule]:
    """Expand each permission into one rule per source or destination."""

    rules: List[SecurityGroupRule] = []
    for permission in permissions:
        base = {
            "is_egress": egress,
            "ip_protocol": permission.get("IpProtocol", ""),
            "from_port": int(permission.get("FromPort", 0)),
            "to_port": int(permission.get("ToPort", 0)),
        }
        for ip_range in permission.get("IpRanges", []):
            rules.append(
                SecurityGroupRule(
                    cidr_block=ip_range.get("CidrIp", ""),
                    description=ip_range.get("Description", ""),
                    **base,
                )
            )
        for ip_range in permission.get("Ipv6Ranges", []):
            rules.append(
                SecurityGroupRule(
                    ipv6_cidr_block=ip_range.get("CidrIpv6", ""),
                    description=ip_range.get("Description", ""),
                    **base,
                )
            )
        for pair in permission.get("UserIdGroupPairs", []):
            rules.append(
                SecurityGroupRule(
                    group_id=pair.get("GroupId", ""),
                    group_owner_id=pair.get("UserId", ""),
                    description=pair.get("Description", ""),
                    **base,
                )
            )
        for prefix_list in permission.get("PrefixListIds", []):
            rules.append(
                SecurityGroupRule(
                    prefix_list_id=prefix_list.get("PrefixListId", ""),
                    description=prefix_list.get("Description", ""),
                    **base,
                )
            )
    return rules


def describe_security_groups(ec2: BaseClient) -> List[SecurityGroupInfo]:
    """Return security groups with ingress and egress rules flattened."""

    groups: List[SecurityGroupInfo] = []
    for group in safe_paginate(ec2, "describe_security_groups", "SecurityGroups"):
        rules = _flatten_permissions(group.get("IpPermissions", []), egress=False)
        rules.extend(_flatten_permissions(group.get("IpPermissionsEgress", []), egress=True))
        groups.append(
            SecurityGroupInfo(
                group_id=group["GroupId"],
                group_name=group.get("GroupName", ""),
                description=group.get("Description", ""),
                vpc_id=group.get("VpcId", ""),
                owner_id=group.get("OwnerId", ""),
                rules=tuple(rules),
                tags=tags_to_dict(group.get("Tags")),
            )
        )
    return groups


def describe_internet_gateways(ec2: BaseClient) -> List[InternetGatewayInfo]:
    """Return internet gateways; detached gateways report ``available``."""

    gateways: List[InternetGatewayInfo] = []
    for gateway in safe_paginate(ec2, "describe_internet_gateways", "InternetGateways"):
        attachments = gateway.get("Attachments", [])
        if attachments:
            # An internet gateway attaches to at most one VPC.
            state = attachments[0].get("State", "")
            vpc_id = attachments[0].get("VpcId", "")
        else:
            state = "available"
            vpc_id = ""
        gateways.append(
            InternetGatewayInfo(
                internet_gateway_id=gateway["InternetGatewayId"],
                state=state,
                vpc_id=vpc_id,
                tags=tags_to_dict(gateway.get("Tags")),
            )
        )
    return gateways


def describe_nat_gateways(ec2: BaseClient) -> List[NatGatewayInfo]:
    gateways: List[NatGatewayInfo] = []
    for gateway in safe_paginate(ec2, "describe_nat_gateways", "NatGateways"):
        addresses = {
            "network_interface_id": "",
            "private_ip": "",
            "public_ip": "",
            "allocation_id": "",
        }
        for address in gateway.get("NatGatewayAddresses", []):
            if address.get("NetworkInterfaceId"):
                addresses["network_interface_id"] = address["NetworkInterfaceId"]
            if address.get("PrivateIp"):
                addresses["private_ip"] = address["PrivateIp"]
            if address.get("PublicIp"):
                addresses["public_ip"] = address["PublicIp"]
            if address.get("AllocationId"):
                addresses["allocation_id"] = address["AllocationId"]

        gateways.append(
            NatGatewayInfo(
                nat_gateway_id=gateway["NatGatewayId"],
                subnet_id=gateway.get("SubnetId", ""),
                vpc_id=gateway.get("VpcId", ""),
                state=gateway.get("State", ""),
                connectivity_type=gateway.get("ConnectivityType", ""),
                created_time=format_timestamp(gateway.get("CreateTime")),
                tags=tags_to_dict(gateway.get("Tags")),
                **addresses,
            )
        )
    return gateways


def describe_transit_gateways(ec2: BaseClient) -> List[TransitGatewayInfo]:
    gateways: List[TransitGatewayInfo] = []
    for gateway in safe_paginate(ec2, "describe_transit_gateways", "TransitGateways"):
        options = gateway.get("Options", {})
        gateways.append(
            TransitGatewayInfo(
                transit_gateway_id=gateway["TransitGatewayId"],
                state=gateway.get("State", ""),
                owner_id=gateway.get("OwnerId", ""),
                description=gateway.get("Description", ""),
                creation_time=format_timestamp(gateway.get("CreationTime")),
                amazon_side_asn=int(options.get("AmazonSideAsn", 0)),
                default_route_table_id=options.get("AssociationDefaultRouteTableId", ""),
                propagation_route_table_id=options.get("PropagationDefaultRouteTableId", ""),
                auto_accept_shared_attachments=options.get("AutoAcceptSharedAttachments", ""),
                default_route_table_association=options.get("DefaultRouteTableAssociation", ""),
                default_route_table_propagation=options.get("DefaultRouteTablePropagation", ""),
                dns_support=options.get("DnsSupport", ""),
                multicast_support=options.get("MulticastSupport", ""),
                tags=tags_to_dict(gateway.get("Tags")),
            )
        )
    return gateways


def describe_transit_gateway_attachments(ec2: BaseClient) -> List[TransitGatewayAttachmentInfo]:
    attachments: List[TransitGatewayAttachmentInfo] = []
    for attachment in safe_paginate(
        ec2, "describe_transit_gateway_attachments", "TransitGatewayAttachments"
    ):
        association = {}
        if attachment.get("Association"):
            association = {
                "route_table_id": attachment["Association"].get("TransitGatewayRouteTableId", ""),
                "state": attachment["Association"].get("State", ""),
            }
        attachments.append(
            TransitGatewayAttachmentInfo(
                attachment_id=attachment["TransitGatewayAttachmentId"],
                transit_gateway_id=attachment.get("TransitGatewayId", ""),
                resource_type=attachment.get("ResourceType", ""),
                resource_id=attachment.get("ResourceId", ""),
                resource_owner_id=attachment.get("ResourceOwnerId", ""),
                state=attachment.get("State", ""),
                association=association,
                creation_time=format_timestamp(attachment.get("CreationTime")),
                tags=tags_to_dict(attachment.get("Tags")),
            )
        )
    return attachments


__all__ = [
    "describe_internet_gateways",
    "describe_nat_gateways",
    "describe_route_tables",
    "describe_security_groups",
    "describe_subnets",
    "describe_transit_gateway_attachments",
    "describe_transit_gateways",
    "describe_vpcs",
]
