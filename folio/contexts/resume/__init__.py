"""
Resume Context

Responsibilities:
- Defines the resume content schema (sections, positions, blocks, intro)
- Composes specs into a render-ready document tree with fixed heading levels
- Loads resume content from YAML

Owns: Resume structure and composition rules
Never: Reorders authored content or renders markup
"""

from folio.contexts.resume.composer import (
    BlockNode,
    DocumentTree,
    IntroNode,
    PositionNode,
    SectionNode,
    compose,
)
from folio.contexts.resume.exceptions import (
    ComposeError,
    DuplicateIntroError,
    EmptyHeadingError,
    InvalidContentStructureError,
    InvalidEntryError,
    OrphanEntryError,
)
from folio.contexts.resume.loader import ResumeContent, build_resume, load_resume, specs_from_dict
from folio.contexts.resume.schema import BulletList, Intro, Paragraph, Position, RawBlock, Section

__all__ = [
    # Schema
    "Section",
    "Position",
    "RawBlock",
    "Paragraph",
    "BulletList",
    "Intro",
    # Composition
    "compose",
    "DocumentTree",
    "IntroNode",
    "SectionNode",
    "PositionNode",
    "BlockNode",
    # Loading
    "ResumeContent",
    "load_resume",
    "build_resume",
    "specs_from_dict",
    # Errors
    "ComposeError",
    "OrphanEntryError",
    "DuplicateIntroError",
    "InvalidEntryError",
    "EmptyHeadingError",
    "InvalidContentStructureError",
]
