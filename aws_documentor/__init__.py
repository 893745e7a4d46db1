"""Document AWS VPC networking as draw.io diagrams."""

from __future__ import annotations

from .core import export_inventory_to_excel, print_summary, resources_to_dict
from .diagram import generate_vpc_detail_diagram, generate_vpc_diagram, write_diagram
from .models import NetworkResources
from .services import collect_network_resources

__all__ = [
    "NetworkResources",
    "collect_network_resources",
    "export_inventory_to_excel",
    "generate_vpc_detail_diagram",
    "generate_vpc_diagram",
    "print_summary",
    "resources_to_dict",
    "write_diagram",
]
