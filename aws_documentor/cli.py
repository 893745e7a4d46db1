"""Command line interface for the AWS network documentor."""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

import boto3

from .core import (
    export_inventory_to_excel,
    export_resources_to_json,
    print_records,
    print_summary,
)
from .diagram import (
    DEFAULT_DIAGRAM_PATH,
    generate_vpc_detail_diagram,
    generate_vpc_diagram,
    write_diagram,
)
from .services import collect_network_resources


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Return parsed command line arguments."""

    parser = argparse.ArgumentParser(
        description="Document AWS VPC networking and render draw.io diagrams."
    )
    parser.add_argument("--profile", help="AWS CLI profile to use", default=None)
    parser.add_argument(
        "--region",
        help="AWS region to scan (uses the default configuration when omitted)",
        default=None,
    )
    parser.add_argument(
        "--json",
        dest="print_json",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Print every scanned record as JSON to stdout (default: on)",
    )
    parser.add_argument(
        "--json-path", dest="json_path", help="Optional path to export all scanned records as JSON"
    )
    parser.add_argument(
        "--diagram",
        dest="diagram_path",
        nargs="?",
        const=DEFAULT_DIAGRAM_PATH,
        default=None,
        help=f"Write a draw.io overview diagram (default path: {DEFAULT_DIAGRAM_PATH})",
    )
    parser.add_argument(
        "--vpc", dest="vpc_id", help="VPC identifier used for --detail-diagram", default=None
    )
    parser.add_argument(
        "--detail-diagram",
        dest="detail_diagram_path",
        help="Write a draw.io detail diagram for --vpc including route tables and security groups",
    )
    parser.add_argument(
        "--inventory-excel",
        dest="inventory_excel_path",
        help="Optional path to export the scanned inventory as an Excel workbook (.xlsx)",
    )
    return parser.parse_args(argv)


def _progress_printer(print_json: bool):
    def report(title: str, records: Optional[Sequence[object]]) -> None:
        if records is None:
            print(f"\nScanning {title}...")
        else:
            print_records(title, records, as_json=print_json)

    return report


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point used by ``python -m aws_documentor``."""

    args = parse_args(argv)

    if args.detail_diagram_path and not args.vpc_id:
        print("Error: --detail-diagram requires --vpc.", file=sys.stderr)
        return 1

    session = boto3.Session(profile_name=args.profile, region_name=args.region)
    if args.region:
        print(f"Scanning AWS region: {args.region}")
    else:
        print(f"Scanning AWS region: {session.region_name} (from default config)")

    try:
        resources = collect_network_resources(
            session, progress=_progress_printer(args.print_json)
        )
    except RuntimeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print("\nVPC infrastructure scan complete!")
    print_summary(resources)

    if args.json_path:
        export_resources_to_json(resources, args.json_path)
        print(f"Scanned records exported to {args.json_path}")

    if args.inventory_excel_path:
        try:
            path = export_inventory_to_excel(resources, args.inventory_excel_path)
        except RuntimeError as exc:
            print(f"Failed to export inventory Excel report: {exc}", file=sys.stderr)
        else:
            print(f"Inventory Excel report written to {path}")

    if args.diagram_path:
        print("\nGenerating draw.io diagram...")
        try:
            path = write_diagram(generate_vpc_diagram(resources), args.diagram_path)
        except (RuntimeError, OSError) as exc:
            print(f"Error: Failed to generate diagram: {exc}", file=sys.stderr)
            return 1
        print(f"Diagram saved to: {path}")
        print("You can open this file in draw.io (https://app.diagrams.net)")

    if args.detail_diagram_path:
        if resources.find_vpc(args.vpc_id) is None:
            print(f"Error: VPC '{args.vpc_id}' was not found in the scan.", file=sys.stderr)
            return 1
        try:
            path = write_diagram(
                generate_vpc_detail_diagram(args.vpc_id, resources),
                args.detail_diagram_path,
            )
        except (RuntimeError, OSError) as exc:
            print(f"Error: Failed to generate detail diagram: {exc}", file=sys.stderr)
            return 1
        print(f"Detail diagram saved to: {path}")

    return 0


__all__ = ["main", "parse_args"]
