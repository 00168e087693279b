"""
Resume content loading.

Reads the resume YAML file and turns it into schema specs for the composer.

Expected structure:

    resume:
      intro:
        name: Tomasz Kisiel
        role: Software Engineer
      sections:
        - heading: Skills
          entries:
            - text: Problem-solving
        - heading: Languages
          entries:
            - {text: Polish, detail: Native}
        - heading: Experience
          entries:
            - heading: Dev And Deliver, Cracow - Software Engineer
              time_range: June 2021 - December 2023
              body:
                - paragraph: Played a pivotal role ...
                - list: [..., ...]

A top-level item shaped like a Position (no 'entries') is passed through as a
Position so that composition reports it as an orphan.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from folio.contexts.resume.composer import DocumentTree, Spec, compose
from folio.contexts.resume.exceptions import InvalidContentStructureError
from folio.contexts.resume.logger import log_compose_result, log_load_start
from folio.contexts.resume.schema import (
    BulletList,
    ContentBlock,
    Intro,
    Paragraph,
    Position,
    RawBlock,
    Section,
    SectionEntry,
)


@dataclass
class ResumeContent:
    """
    Resume specs loaded from a content file.

    Attributes:
        intro: Name/role header, if present
        specs: Top-level specs in file order
        source_path: File the content came from
    """

    intro: Optional[Intro] = None
    specs: List[Spec] = field(default_factory=list)
    source_path: Optional[str] = None


def _require_text(data: Dict[str, Any], key: str, where: str) -> str:
    value = data.get(key)
    if value is None:
        raise InvalidContentStructureError(f"Missing '{key}' in {where}")
    return str(value)


def _parse_block(data: Any, where: str) -> ContentBlock:
    if isinstance(data, str):
        return Paragraph(text=data)
    if not isinstance(data, dict):
        raise InvalidContentStructureError(f"Expected a mapping in {where}, got {type(data).__name__}")
    if "paragraph" in data:
        return Paragraph(text=_require_text(data, "paragraph", where))
    if "list" in data:
        items = data["list"]
        if not isinstance(items, list):
            raise InvalidContentStructureError(f"'list' must be a sequence in {where}")
        return BulletList(items=tuple(str(item) for item in items))
    raise InvalidContentStructureError(f"Unknown block shape in {where}: keys {sorted(data)}")


def _parse_position(data: Dict[str, Any], where: str) -> Position:
    body = data.get("body") or []
    if not isinstance(body, list):
        raise InvalidContentStructureError(f"'body' must be a sequence in {where}")

    time_range = data.get("time_range")
    return Position(
        heading=_require_text(data, "heading", where),
        time_range=str(time_range) if time_range is not None else None,
        body=tuple(_parse_block(block, f"{where}.body[{i}]") for i, block in enumerate(body)),
    )


def _parse_entry(data: Any, where: str) -> SectionEntry:
    if isinstance(data, str):
        return RawBlock(text=data)
    if not isinstance(data, dict):
        raise InvalidContentStructureError(f"Expected a mapping in {where}, got {type(data).__name__}")

    if "heading" in data:
        return _parse_position(data, where)
    if "text" in data:
        detail = data.get("detail")
        return RawBlock(text=_require_text(data, "text", where), detail=str(detail) if detail is not None else None)
    return _parse_block(data, where)


def _parse_top_level(data: Any, where: str) -> Union[Spec, Section]:
    if isinstance(data, dict) and "entries" in data:
        entries = data["entries"] or []
        if not isinstance(entries, list):
            raise InvalidContentStructureError(f"'entries' must be a sequence in {where}")
        return Section(
            heading=_require_text(data, "heading", where),
            entries=tuple(_parse_entry(entry, f"{where}.entries[{i}]") for i, entry in enumerate(entries)),
        )
    # Anything else is passed through; compose() rejects it as an orphan
    return _parse_entry(data, where)


def specs_from_dict(data: Dict[str, Any]) -> ResumeContent:
    """
    Convert resume content (already loaded as plain data) into schema specs.

    Args:
        data: Dict with a top-level 'resume' key

    Returns:
        ResumeContent with intro and specs

    Raises:
        InvalidContentStructureError: If required keys are missing or an entry
            has no recognizable shape
    """
    if not isinstance(data, dict) or "resume" not in data:
        raise InvalidContentStructureError("Invalid resume content: missing 'resume' key")

    resume = data["resume"] or {}
    if not isinstance(resume, dict):
        raise InvalidContentStructureError("'resume' must be a mapping with 'intro' and 'sections'")

    intro = None
    if resume.get("intro") is not None:
        intro_data = resume["intro"]
        if not isinstance(intro_data, dict):
            raise InvalidContentStructureError("'resume.intro' must be a mapping with 'name' and 'role'")
        intro = Intro(
            name=_require_text(intro_data, "name", "resume.intro"),
            role=str(intro_data.get("role", "")),
        )

    sections = resume.get("sections") or []
    if not isinstance(sections, list):
        raise InvalidContentStructureError("'resume.sections' must be a sequence")

    specs = [_parse_top_level(item, f"resume.sections[{i}]") for i, item in enumerate(sections)]
    return ResumeContent(intro=intro, specs=specs)


def load_resume(resume_path: Path) -> ResumeContent:
    """
    Load resume content from a YAML file.

    Raises:
        FileNotFoundError: If resume_path does not exist
        InvalidContentStructureError: If the file is not valid YAML or the
            content is malformed
    """
    resume_path = Path(resume_path)
    if not resume_path.exists():
        raise FileNotFoundError(f"Resume content file not found: {resume_path}")

    try:
        data = OmegaConf.to_container(OmegaConf.load(resume_path), resolve=True)
    except (yaml.YAMLError, OmegaConfBaseException) as e:
        raise InvalidContentStructureError(f"Cannot read {resume_path}: {e}") from e
    content = specs_from_dict(data)
    content.source_path = str(resume_path)
    return content


def build_resume(resume_path: Path) -> Tuple[ResumeContent, DocumentTree]:
    """
    Load resume content and compose it into a DocumentTree.

    Returns:
        (content, tree)

    Raises:
        FileNotFoundError, InvalidContentStructureError, ComposeError
    """
    start = time.time()
    log_load_start(Path(resume_path))
    content = load_resume(resume_path)
    tree = compose(content.specs, intro=content.intro)
    log_compose_result(tree, time.time() - start)
    return content, tree
