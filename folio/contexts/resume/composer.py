"""
Resume document composition.

Turns an ordered list of resume specs (Sections owning Positions and content
blocks, plus an optional Intro) into a render-ready DocumentTree. Order is
authorial intent: nothing is sorted, merged, or deduplicated.

Heading levels are fixed by ownership. Sections sit at SECTION_LEVEL and every
Position heading sits exactly one level below the Section that owns it, so a
Position can only enter the tree through a Section.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple, Union

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

SECTION_LEVEL = 1
POSITION_LEVEL = SECTION_LEVEL + 1

Spec = Union[Section, Intro, Position, RawBlock, Paragraph, BulletList]


# =============================================================================
# TREE NODES
# =============================================================================


@dataclass(frozen=True)
class IntroNode:
    name: str
    role: str

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "intro", "name": self.name, "role": self.role}


@dataclass(frozen=True)
class BlockNode:
    """
    Leaf content node.

    Attributes:
        kind: "paragraph", "list" or "raw"
        text: Paragraph or raw line text (empty for lists)
        items: List items (empty unless kind == "list")
        detail: Secondary text of a raw line, if any
    """

    kind: str
    text: str = ""
    items: Tuple[str, ...] = ()
    detail: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"kind": self.kind}
        if self.kind == "list":
            data["items"] = list(self.items)
        else:
            data["text"] = self.text
        if self.detail is not None:
            data["detail"] = self.detail
        return data


@dataclass(frozen=True)
class PositionNode:
    heading: str
    level: int
    time_range: Optional[str] = None
    children: Tuple[BlockNode, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "position",
            "heading": self.heading,
            "level": self.level,
            "time_range": self.time_range,
            "children": [child.to_dict() for child in self.children],
        }


@dataclass(frozen=True)
class SectionNode:
    heading: str
    level: int
    children: Tuple[Union[PositionNode, BlockNode], ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "section",
            "heading": self.heading,
            "level": self.level,
            "children": [child.to_dict() for child in self.children],
        }


Node = Union[IntroNode, SectionNode, PositionNode, BlockNode]


@dataclass(frozen=True)
class DocumentTree:
    """
    Composed resume document.

    Attributes:
        intro: Name/role header, if supplied
        sections: Section nodes in authored order
    """

    intro: Optional[IntroNode] = None
    sections: Tuple[SectionNode, ...] = ()

    def walk(self) -> Iterator[Node]:
        """Yield every node depth-first in document order."""
        if self.intro is not None:
            yield self.intro
        for section in self.sections:
            yield section
            for child in section.children:
                yield child
                if isinstance(child, PositionNode):
                    yield from child.children

    def outline(self) -> List[Tuple[int, str]]:
        """(level, heading) pairs for every section and position, in order."""
        return [
            (node.level, node.heading)
            for node in self.walk()
            if isinstance(node, (SectionNode, PositionNode))
        ]

    @property
    def table_of_contents(self) -> str:
        """
        Get formatted table of contents showing all headings.

        Returns:
            One heading per line, indented by level
        """
        entries = self.outline()
        if not entries:
            return "No sections found."
        return "\n".join(f"{'  ' * (level - SECTION_LEVEL)}- {heading}" for level, heading in entries)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data representation for the rendering shell (JSON-serializable)."""
        return {
            "intro": self.intro.to_dict() if self.intro else None,
            "sections": [section.to_dict() for section in self.sections],
        }


# =============================================================================
# COMPOSITION
# =============================================================================


def _compose_block(block: Union[Paragraph, BulletList, RawBlock]) -> BlockNode:
    if isinstance(block, Paragraph):
        return BlockNode(kind="paragraph", text=block.text)
    if isinstance(block, BulletList):
        return BlockNode(kind="list", items=tuple(block.items))
    return BlockNode(kind="raw", text=block.text, detail=block.detail)


def _compose_position(position: Position, owner_level: int, path: str) -> PositionNode:
    if not position.heading or not position.heading.strip():
        raise EmptyHeadingError("Position", path=path)

    children = []
    for index, block in enumerate(position.body):
        if not isinstance(block, (Paragraph, BulletList)):
            raise InvalidEntryError(block, "a Position body", path=f"{path}.body[{index}]")
        children.append(_compose_block(block))

    return PositionNode(
        heading=position.heading,
        level=owner_level + 1,
        time_range=position.time_range,
        children=tuple(children),
    )


def _compose_section(section: Section, path: str) -> SectionNode:
    if not section.heading or not section.heading.strip():
        raise EmptyHeadingError("Section", path=path)

    children: List[Union[PositionNode, BlockNode]] = []
    for index, entry in enumerate(section.entries):
        entry_path = f"{path}.entries[{index}]"
        if isinstance(entry, Position):
            children.append(_compose_position(entry, SECTION_LEVEL, entry_path))
        elif isinstance(entry, (RawBlock, Paragraph, BulletList)):
            children.append(_compose_block(entry))
        else:
            raise InvalidEntryError(entry, "a Section", path=entry_path)

    return SectionNode(heading=section.heading, level=SECTION_LEVEL, children=tuple(children))


def compose(specs: Sequence[Spec], intro: Optional[Intro] = None) -> DocumentTree:
    """
    Compose resume specs into a DocumentTree.

    Args:
        specs: Sections in authored order. A single Intro may also appear here.
        intro: Optional Intro (alternative to listing it in specs)

    Returns:
        DocumentTree with one SectionNode per Section, children in given order

    Raises:
        OrphanEntryError: A Position or content block appears outside any Section
        DuplicateIntroError: More than one Intro is supplied
        InvalidEntryError: A spec appears where its kind is not allowed
        EmptyHeadingError: A Section or Position has an empty heading

    Example:
        >>> tree = compose([Section("Skills", [RawBlock("Problem-solving")])])
        >>> tree.sections[0].children[0].text
        'Problem-solving'
    """
    intro_node = IntroNode(name=intro.name, role=intro.role) if intro is not None else None
    sections = []

    for index, spec in enumerate(specs):
        path = f"specs[{index}]"
        if isinstance(spec, Section):
            sections.append(_compose_section(spec, path))
        elif isinstance(spec, Intro):
            if intro_node is not None:
                raise DuplicateIntroError(path=path)
            intro_node = IntroNode(name=spec.name, role=spec.role)
        elif isinstance(spec, (Position, RawBlock, Paragraph, BulletList)):
            raise OrphanEntryError(spec, path=path)
        else:
            raise InvalidEntryError(spec, "a document", path=path)

    return DocumentTree(intro=intro_node, sections=tuple(sections))
