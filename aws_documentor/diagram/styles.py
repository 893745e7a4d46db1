"""draw.io style strings keyed by the kind of shape being drawn."""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

_GROUP_POINTS = (
    "points=[[0,0],[0.25,0],[0.5,0],[0.75,0],[1,0],[1,0.25],[1,0.5],[1,0.75],"
    "[1,1],[0.75,1],[0.5,1],[0.25,1],[0,1],[0,0.75],[0,0.5],[0,0.25]];"
)
_GROUP_BASE = (
    _GROUP_POINTS
    + "outlineConnect=0;gradientColor=none;html=1;whiteSpace=wrap;fontSize=12;"
    "fontStyle=0;container=1;pointerEvents=0;collapsible=0;recursiveResize=0;"
    "shape=mxgraph.aws4.group;"
)
_ICON_BASE = (
    "sketch=0;outlineConnect=0;fontColor=#232F3E;gradientColor=none;"
    "fillColor=#8C4FFF;strokeColor=none;dashed=0;verticalLabelPosition=bottom;"
    "verticalAlign=top;align=center;html=1;fontSize=12;fontStyle=0;aspect=fixed;"
    "pointerEvents=1;"
)
_CARD_BASE = (
    "rounded=1;whiteSpace=wrap;html=1;fontSize=9;align=left;verticalAlign=top;"
    "spacingLeft=5;spacingTop=5;"
)


class StyleKey(str, Enum):
    VPC = "vpc"
    PUBLIC_SUBNET = "public_subnet"
    PRIVATE_SUBNET = "private_subnet"
    INTERNET_GATEWAY = "internet_gateway"
    NAT_GATEWAY = "nat_gateway"
    TRANSIT_GATEWAY = "transit_gateway"
    TRANSIT_GATEWAY_ATTACHMENT = "transit_gateway_attachment"
    ROUTE_TABLE_PANEL = "route_table_panel"
    SECURITY_GROUP_PANEL = "security_group_panel"


_STYLES = {
    StyleKey.VPC: _GROUP_BASE
    + "grIcon=mxgraph.aws4.group_vpc2;strokeColor=#8C4FFF;fillColor=none;"
    "verticalAlign=top;align=left;spacingLeft=30;fontColor=#AAB7B8;dashed=0;",
    StyleKey.PUBLIC_SUBNET: _GROUP_BASE
    + "grIcon=mxgraph.aws4.group_security_group;grStroke=0;strokeColor=#7AA116;"
    "fillColor=#F2F6E8;verticalAlign=top;align=left;spacingLeft=30;"
    "fontColor=#248814;dashed=0;",
    StyleKey.PRIVATE_SUBNET: _GROUP_BASE
    + "grIcon=mxgraph.aws4.group_security_group;grStroke=0;strokeColor=#00A4A6;"
    "fillColor=#E6F6F7;verticalAlign=top;align=left;spacingLeft=30;"
    "fontColor=#147EBA;dashed=0;",
    StyleKey.INTERNET_GATEWAY: _ICON_BASE + "shape=mxgraph.aws4.internet_gateway;",
    StyleKey.NAT_GATEWAY: _ICON_BASE + "shape=mxgraph.aws4.nat_gateway;",
    StyleKey.TRANSIT_GATEWAY: _ICON_BASE + "shape=mxgraph.aws4.transit_gateway;",
    StyleKey.TRANSIT_GATEWAY_ATTACHMENT: _ICON_BASE
    + "shape=mxgraph.aws4.transit_gateway_attachment;",
    StyleKey.ROUTE_TABLE_PANEL: _CARD_BASE + "fillColor=#f5f5f5;strokeColor=#666666;",
    StyleKey.SECURITY_GROUP_PANEL: _CARD_BASE + "fillColor=#fff2cc;strokeColor=#d6b656;",
}

STYLES: Mapping[StyleKey, str] = MappingProxyType(_STYLES)
"""Read-only mapping of every :class:`StyleKey` to its style string."""


def style_for(key: StyleKey) -> str:
    return STYLES[key]


def subnet_style_key(public: bool) -> StyleKey:
    return StyleKey.PUBLIC_SUBNET if public else StyleKey.PRIVATE_SUBNET


__all__ = ["STYLES", "StyleKey", "style_for", "subnet_style_key"]
