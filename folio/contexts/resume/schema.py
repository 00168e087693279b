"""
Resume Content Schema

Defines data classes for the resume specs the page layer supplies: sections,
positions within them, standalone content blocks, and the name/role intro.
These are plain data contracts; composition rules live in composer.py.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Paragraph:
    """
    Paragraph of free-form text.

    Attributes:
        text: Paragraph text
    """

    text: str


@dataclass(frozen=True)
class BulletList:
    """
    Bulleted list of short items.

    Attributes:
        items: List items in display order
    """

    items: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True)
class RawBlock:
    """
    Standalone line within a section (e.g., a skill, or a language with its level).

    Attributes:
        text: Main text (e.g., "Problem-solving", "Polish")
        detail: Optional secondary text shown alongside (e.g., "Native")
    """

    text: str
    detail: Optional[str] = None


ContentBlock = Union[Paragraph, BulletList]


@dataclass(frozen=True)
class Position:
    """
    Entry within a section (job, degree, project, award).

    Attributes:
        heading: Entry heading (e.g., "Dev And Deliver, Cracow - Software Engineer")
        time_range: Optional free-form time range (e.g., "June 2021 - December 2023")
        body: Paragraphs and lists, in display order
    """

    heading: str
    time_range: Optional[str] = None
    body: Tuple[ContentBlock, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "body", tuple(self.body))


SectionEntry = Union[Position, RawBlock, Paragraph, BulletList]


@dataclass(frozen=True)
class Section:
    """
    Top-level grouping of the resume (e.g., "Experience", "Education", "Skills").

    Attributes:
        heading: Section heading
        entries: Positions and content blocks, in authored order
    """

    heading: str
    entries: Tuple[SectionEntry, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "entries", tuple(self.entries))


@dataclass(frozen=True)
class Intro:
    """
    Name/role header of the resume.

    Attributes:
        name: Full name
        role: Professional role (e.g., "Software Engineer")
    """

    name: str
    role: str
