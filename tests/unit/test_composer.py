"""Unit tests for resume document composition."""

import pytest

from folio.contexts.resume.composer import BlockNode, PositionNode, SectionNode, compose
from folio.contexts.resume.exceptions import (
    DuplicateIntroError,
    EmptyHeadingError,
    InvalidEntryError,
    OrphanEntryError,
)
from folio.contexts.resume.schema import (
    BulletList,
    Intro,
    Paragraph,
    Position,
    RawBlock,
    Section,
)


def sample_specs():
    return [
        Section("Skills", [RawBlock("Problem-solving"), RawBlock("Software Architecture")]),
        Section("Languages", [RawBlock("Polish", detail="Native"), RawBlock("English", detail="B2")]),
        Section(
            "Experience",
            [
                Position(
                    "Dev And Deliver, Cracow - Software Engineer",
                    time_range="June 2021 - December 2023",
                    body=[Paragraph("Built microservices."), BulletList(["GraphQL API", "Code reviews"])],
                ),
            ],
        ),
    ]


@pytest.mark.unit
def test_single_section_with_raw_block():
    """Test the minimal Skills section composes to one section with one block."""
    tree = compose([Section("Skills", [RawBlock("Problem-solving")])])

    assert len(tree.sections) == 1
    section = tree.sections[0]
    assert isinstance(section, SectionNode)
    assert section.heading == "Skills"
    assert len(section.children) == 1
    assert section.children[0] == BlockNode(kind="raw", text="Problem-solving")


@pytest.mark.unit
def test_position_heading_one_level_below_section():
    tree = compose(sample_specs())
    experience = tree.sections[2]
    position = experience.children[0]

    assert isinstance(position, PositionNode)
    assert position.level == experience.level + 1
    assert position.time_range == "June 2021 - December 2023"
    assert [child.kind for child in position.children] == ["paragraph", "list"]
    assert position.children[1].items == ("GraphQL API", "Code reviews")


@pytest.mark.unit
def test_order_is_preserved_without_sorting():
    specs = [Section("Zeta", [RawBlock("b"), RawBlock("a"), RawBlock("b")]), Section("Alpha", [])]
    tree = compose(specs)

    assert [section.heading for section in tree.sections] == ["Zeta", "Alpha"]
    assert [child.text for child in tree.sections[0].children] == ["b", "a", "b"]


@pytest.mark.unit
def test_compose_is_deterministic():
    assert compose(sample_specs(), intro=Intro("Tomasz Kisiel", "Software Engineer")) == compose(
        sample_specs(), intro=Intro("Tomasz Kisiel", "Software Engineer")
    )


@pytest.mark.unit
def test_position_without_section_is_orphan():
    with pytest.raises(OrphanEntryError) as exc_info:
        compose([Section("Skills", []), Position("Dev And Deliver")])
    assert exc_info.value.path == "specs[1]"


@pytest.mark.unit
def test_raw_block_without_section_is_orphan():
    with pytest.raises(OrphanEntryError):
        compose([RawBlock("Problem-solving")])


@pytest.mark.unit
def test_intro_from_specs_or_keyword():
    tree = compose([Intro("Tomasz Kisiel", "Software Engineer"), Section("Skills", [])])
    assert tree.intro.name == "Tomasz Kisiel"
    assert tree.intro.role == "Software Engineer"

    with pytest.raises(DuplicateIntroError):
        compose([Intro("A", "B")], intro=Intro("C", "D"))


@pytest.mark.unit
def test_nested_section_rejected():
    with pytest.raises(InvalidEntryError):
        compose([Section("Outer", [Section("Inner", [])])])


@pytest.mark.unit
def test_raw_block_inside_position_body_rejected():
    with pytest.raises(InvalidEntryError):
        compose([Section("Experience", [Position("Job", body=[RawBlock("x")])])])


@pytest.mark.unit
@pytest.mark.parametrize(
    "specs",
    [
        [Section("", [])],
        [Section("Experience", [Position("  ")])],
    ],
)
def test_empty_heading_rejected(specs):
    with pytest.raises(EmptyHeadingError):
        compose(specs)


@pytest.mark.unit
def test_outline_and_table_of_contents():
    tree = compose(sample_specs())

    assert tree.outline() == [
        (1, "Skills"),
        (1, "Languages"),
        (1, "Experience"),
        (2, "Dev And Deliver, Cracow - Software Engineer"),
    ]
    assert "  - Dev And Deliver, Cracow - Software Engineer" in tree.table_of_contents
    assert compose([]).table_of_contents == "No sections found."


@pytest.mark.unit
def test_to_dict_plain_data():
    data = compose(sample_specs(), intro=Intro("Tomasz Kisiel", "Software Engineer")).to_dict()

    assert data["intro"] == {"kind": "intro", "name": "Tomasz Kisiel", "role": "Software Engineer"}
    assert data["sections"][1]["children"][0] == {"kind": "raw", "text": "Polish", "detail": "Native"}
    position = data["sections"][2]["children"][0]
    assert position["kind"] == "position"
    assert position["level"] == 2
    assert position["children"][1] == {"kind": "list", "items": ["GraphQL API", "Code reviews"]}
