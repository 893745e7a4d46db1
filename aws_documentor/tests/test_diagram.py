"""End-to-end tests for draw.io document generation."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from aws_documentor.diagram import (
    DiagramRenderError,
    build_detail_document,
    build_overview_document,
    generate_vpc_detail_diagram,
    generate_vpc_diagram,
    write_diagram,
)
from aws_documentor.diagram.models import Cell, Document
from aws_documentor.diagram.serializer import XML_PREAMBLE, render_document
from aws_documentor.models import (
    NatGatewayInfo,
    NetworkResources,
    TransitGatewayAttachmentInfo,
    TransitGatewayInfo,
    VpcInfo,
)


def _parse(text: str) -> ET.Element:
    return ET.fromstring(text.encode("utf-8"))


def _cells(text: str) -> list:
    return _parse(text).findall("./diagram/mxGraphModel/root/mxCell")


def test_output_is_deterministic(sample_resources) -> None:
    assert generate_vpc_diagram(sample_resources) == generate_vpc_diagram(sample_resources)
    assert generate_vpc_detail_diagram("vpc-1", sample_resources) == generate_vpc_detail_diagram(
        "vpc-1", sample_resources
    )


def test_document_envelope(sample_resources) -> None:
    text = generate_vpc_diagram(sample_resources)

    assert text.startswith(XML_PREAMBLE + "\n")
    root = _parse(text)
    assert root.tag == "mxfile"
    assert root.attrib == {"host": "app.diagrams.net", "version": "21.0.0", "type": "device"}
    diagrams = root.findall("diagram")
    assert len(diagrams) == 1
    assert diagrams[0].attrib == {"name": "AWS VPC Infrastructure", "id": "vpc-diagram"}
    model = diagrams[0].find("mxGraphModel")
    assert model.attrib == {"grid": "1", "gridSize": "10", "page": "1", "pageScale": "1"}
    cells = _cells(text)
    assert cells[0].attrib == {"id": "0"}
    assert cells[1].attrib == {"id": "1", "parent": "0"}
    assert "\n  <diagram " in text
    assert "\n        <mxCell id=\"0\" />" in text


def test_identifiers_are_unique_and_parents_precede_children(sample_resources) -> None:
    for text in (
        generate_vpc_diagram(sample_resources),
        generate_vpc_detail_diagram("vpc-1", sample_resources),
    ):
        seen = set()
        for cell in _cells(text):
            parent = cell.get("parent")
            if parent is not None:
                assert parent in seen
            assert cell.get("id") not in seen
            seen.add(cell.get("id"))
        built = [cell.get("id") for cell in _cells(text)[2:]]
        assert not {"0", "1"} & set(built)


def test_geometry_elements(sample_resources) -> None:
    vpc_cell = _cells(generate_vpc_diagram(sample_resources))[2]
    geometry = vpc_cell.find("mxGeometry")

    assert vpc_cell.get("vertex") == "1"
    assert vpc_cell.get("edge") is None
    assert geometry.attrib == {"x": "50", "y": "50", "width": "730", "height": "400", "as": "geometry"}


def test_labels_are_escaped_once_and_keep_line_breaks() -> None:
    resources = NetworkResources(
        vpcs=(VpcInfo(vpc_id="vpc-1", cidr_block="10.0.0.0/16", tags={"Name": "R&D <\"lab\"> 'x'"}),)
    )

    text = generate_vpc_diagram(resources)

    assert "R&amp;D &lt;&quot;lab&quot;&gt; &apos;x&apos;" in text
    assert "&amp;amp;" not in text
    assert _cells(text)[2].get("value") == "VPC\nR&D <\"lab\"> 'x'\n10.0.0.0/16"


def test_control_characters_in_tags_still_give_well_formed_xml() -> None:
    """Characters XML 1.0 cannot carry are dropped from labels and names."""

    resources = NetworkResources(
        vpcs=(VpcInfo(vpc_id="vpc-1", tags={"Name": "lab\x01net\x0b\x00"}),)
    )

    overview = generate_vpc_diagram(resources)
    detail = generate_vpc_detail_diagram("vpc-1", resources)

    assert _cells(overview)[2].get("value") == "VPC\nlabnet\n"
    assert _parse(detail).find("./diagram").get("name") == "VPC Detail: labnet"


def test_fallback_naming() -> None:
    unnamed = generate_vpc_diagram(NetworkResources(vpcs=(VpcInfo(vpc_id="vpc-0abc"),)))
    named = generate_vpc_diagram(
        NetworkResources(vpcs=(VpcInfo(vpc_id="vpc-0abc", tags={"Name": "prod-net"}),))
    )

    assert "vpc-0abc" in _cells(unnamed)[2].get("value")
    assert "prod-net" in _cells(named)[2].get("value")
    assert "vpc-0abc" not in named


def test_empty_network_yields_single_minimum_container() -> None:
    document = build_overview_document(NetworkResources(vpcs=(VpcInfo(vpc_id="vpc-1"),)))

    assert len(document.cells) == 1
    assert len(document.root_cells()) == 3
    container = document.cells[0]
    assert container.container
    assert container.geometry.width == 250
    assert container.geometry.height == 400


def test_mixed_subnets_scenario(subnet_factory) -> None:
    resources = NetworkResources(
        vpcs=(VpcInfo(vpc_id="vpc-1"),),
        subnets=(
            subnet_factory("pub-1", public=True),
            subnet_factory("priv-1", public=False),
            subnet_factory("pub-2", public=True),
            subnet_factory("pub-3", public=True),
        ),
    )

    cells = build_overview_document(resources).cells

    assert len(cells) == 5
    container, subnets = cells[0], cells[1:]
    assert container.geometry.width == 250 + 3 * 240
    public = [c for c in subnets if c.value.startswith("Public subnet")]
    private = [c for c in subnets if c.value.startswith("Private subnet")]
    assert [c.value.split("\n")[1] for c in public] == ["pub-1", "pub-2", "pub-3"]
    assert [c.geometry.x for c in public] == sorted(c.geometry.x for c in public)
    assert len({c.geometry.y for c in public}) == 1
    assert len(private) == 1
    assert private[0].geometry.y > public[0].geometry.y
    assert all(c.parent == container.id for c in subnets)


def test_nat_gateway_parent_is_subnet_cell(subnet_factory) -> None:
    resources = NetworkResources(
        vpcs=(VpcInfo(vpc_id="vpc-1"),),
        subnets=(subnet_factory("subnet-a", public=True), subnet_factory("subnet-b", public=True)),
        nat_gateways=(NatGatewayInfo(nat_gateway_id="nat-1", subnet_id="subnet-b", vpc_id="vpc-1"),),
    )

    cells = build_overview_document(resources).cells

    vpc_cell = cells[0]
    subnet_b = next(c for c in cells if "\nsubnet-b\n" in c.value)
    nat = next(c for c in cells if c.value.startswith("NAT Gateway"))
    assert nat.parent == subnet_b.id
    assert nat.parent != vpc_cell.id
    assert cells.index(subnet_b) < cells.index(nat)


def test_transit_gateway_fan_out() -> None:
    resources = NetworkResources(
        vpcs=(VpcInfo(vpc_id="vpc-1"),),
        transit_gateways=(
            TransitGatewayInfo(transit_gateway_id="tgw-1"),
            TransitGatewayInfo(transit_gateway_id="tgw-2"),
        ),
        transit_gateway_attachments=(
            TransitGatewayAttachmentInfo(attachment_id="att-1", transit_gateway_id="tgw-2"),
            TransitGatewayAttachmentInfo(attachment_id="att-x", transit_gateway_id="tgw-9"),
            TransitGatewayAttachmentInfo(attachment_id="att-2", transit_gateway_id="tgw-2"),
        ),
    )

    cells = build_overview_document(resources).cells[1:]

    gateways = [c for c in cells if c.value.startswith("Transit Gateway")]
    attachments = [c for c in cells if c.value.startswith("TGW Attachment")]
    assert len(gateways) == 2
    assert len(attachments) == 2
    assert all(c.parent == "1" for c in gateways + attachments)
    second = gateways[1]
    assert all(c.geometry.x > second.geometry.x for c in attachments)
    assert [c.value.split("\n")[1] for c in attachments] == ["att-1", "att-2"]
    vpc = build_overview_document(resources).cells[0]
    assert all(c.geometry.x > vpc.geometry.right for c in gateways)


def test_attachment_stacks_do_not_overlap_next_gateway() -> None:
    resources = NetworkResources(
        transit_gateways=(
            TransitGatewayInfo(transit_gateway_id="tgw-1"),
            TransitGatewayInfo(transit_gateway_id="tgw-2"),
        ),
        transit_gateway_attachments=tuple(
            TransitGatewayAttachmentInfo(attachment_id=f"att-{tgw}-{i}", transit_gateway_id=tgw)
            for tgw in ("tgw-1", "tgw-2")
            for i in range(3)
        ),
    )

    cells = build_overview_document(resources).cells

    second_gateway = [c for c in cells if c.value.startswith("Transit Gateway")][1]
    first_stack = [c for c in cells if "\natt-tgw-1-" in c.value]
    second_stack = [c for c in cells if "\natt-tgw-2-" in c.value]
    assert len(first_stack) == len(second_stack) == 3
    assert max(c.geometry.bottom for c in first_stack) < second_gateway.geometry.y
    assert max(c.geometry.bottom for c in first_stack) < min(c.geometry.y for c in second_stack)


def test_vpcs_are_laid_out_left_to_right(sample_resources) -> None:
    cells = build_overview_document(sample_resources).cells
    vpcs = [c for c in cells if c.value.startswith("VPC\n")]

    assert [c.geometry.x for c in vpcs] == [50, 1250]
    assert {c.geometry.y for c in vpcs} == {50}


def test_detail_document_adds_panels_for_selected_vpc(sample_resources) -> None:
    document = build_detail_document(sample_resources.vpcs[0], sample_resources)

    assert document.name == "VPC Detail: prod-net"
    assert document.diagram_id == "vpc-detail-diagram"
    panels = [c for c in document.cells if c.value.startswith(("Route Table", "Security Group"))]
    assert [c.value.split("\n")[1] for c in panels] == ["rtb-main", "sg-1"]
    route_panel, group_panel = panels
    assert route_panel.geometry.x == group_panel.geometry.x == 1200
    assert route_panel.geometry.height == 130
    assert group_panel.geometry.y >= route_panel.geometry.bottom
    assert all(c.parent == "1" for c in panels)


def test_detail_for_unknown_vpc_draws_bare_container(sample_resources) -> None:
    text = generate_vpc_detail_diagram("vpc-unknown", sample_resources)

    cells = _cells(text)
    assert len(cells) == 3
    assert cells[2].get("value") == "VPC\nvpc-unknown\n"


def test_render_fails_on_unencodable_text() -> None:
    document = Document(
        name="bad \udc80 name",
        diagram_id="vpc-diagram",
        cells=[Cell(id="cell-2", value="x")],
    )

    with pytest.raises(DiagramRenderError):
        render_document(document)


def test_write_diagram(tmp_path, sample_resources) -> None:
    target = tmp_path / "out.drawio"

    path = write_diagram(generate_vpc_diagram(sample_resources), str(target))

    assert path == str(target)
    assert target.read_text(encoding="utf-8").startswith(XML_PREAMBLE)
