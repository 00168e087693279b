"""Integration tests for loading and composing resume content from YAML."""

import pytest

from folio.contexts.resume.composer import PositionNode
from folio.contexts.resume.exceptions import InvalidContentStructureError, OrphanEntryError
from folio.contexts.resume.loader import build_resume, load_resume, specs_from_dict
from folio.contexts.resume.schema import BulletList, Position, RawBlock, Section


@pytest.mark.integration
def test_load_resume_specs(content_dir):
    content = load_resume(content_dir / "resume.yaml")

    assert content.intro.name == "Tomasz Kisiel"
    assert content.specs[0] == Section("Skills", [RawBlock("Problem-solving"), RawBlock("Software Architecture")])
    assert content.specs[1].entries[0] == RawBlock("Polish", detail="Native")

    position = content.specs[2].entries[0]
    assert isinstance(position, Position)
    assert position.time_range == "June 2021 - December 2023"
    assert position.body[1] == BulletList(["GraphQL API", "Code reviews"])


@pytest.mark.integration
def test_build_resume_tree(content_dir):
    _, tree = build_resume(content_dir / "resume.yaml")

    assert [section.heading for section in tree.sections] == ["Skills", "Languages", "Experience"]
    position = tree.sections[2].children[0]
    assert isinstance(position, PositionNode)
    assert position.level == 2


@pytest.mark.integration
def test_top_level_position_is_reported_as_orphan(tmp_path):
    path = tmp_path / "resume.yaml"
    path.write_text(
        "resume:\n"
        "  sections:\n"
        "    - heading: Skills\n"
        "      entries: [Problem-solving]\n"
        "    - heading: Dev And Deliver\n"
        "      time_range: 2021 - 2023\n",
        encoding="utf-8",
    )

    with pytest.raises(OrphanEntryError):
        build_resume(path)


@pytest.mark.integration
def test_invalid_structure():
    with pytest.raises(InvalidContentStructureError):
        specs_from_dict({"cv": {}})

    with pytest.raises(InvalidContentStructureError):
        specs_from_dict({"resume": {"sections": [{"heading": "Skills", "entries": [{"unknown": 1}]}]}})


@pytest.mark.integration
@pytest.mark.parametrize(
    "data",
    [
        {"resume": ["Skills"]},
        {"resume": {"intro": "Tomasz Kisiel"}},
        {"resume": {"sections": {"heading": "Skills"}}},
    ],
)
def test_wrong_shapes_are_content_errors(data):
    with pytest.raises(InvalidContentStructureError):
        specs_from_dict(data)


@pytest.mark.integration
def test_unreadable_yaml_is_content_error(tmp_path):
    path = tmp_path / "resume.yaml"
    path.write_text("resume:\n  sections: [\n", encoding="utf-8")

    with pytest.raises(InvalidContentStructureError):
        load_resume(path)


@pytest.mark.integration
def test_missing_resume_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_resume(tmp_path / "resume.yaml")
