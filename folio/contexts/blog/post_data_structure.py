"""
Post Data Structures

Defines the normalized blog post record and the tagged value types used for
metadata block fields. Posts are built once by the metadata parser and never
mutated afterwards.
"""

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class ScalarValue:
    """
    Single metadata value: string, number, boolean, or None.

    Date literals stay strings at this level; the date decoder interprets them.
    """

    value: Union[str, int, float, bool, None]

    def to_python(self) -> Any:
        return self.value


@dataclass(frozen=True)
class ListValue:
    """Ordered list of metadata values (dash items or inline [a, b])."""

    items: Tuple["MetadataValue", ...] = ()

    def to_python(self) -> Any:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True)
class ObjectValue:
    """Nested block of field/value pairs (e.g. image.path and image.caption)."""

    fields: Mapping[str, "MetadataValue"] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def to_python(self) -> Any:
        return {key: value.to_python() for key, value in self.fields.items()}


MetadataValue = Union[ScalarValue, ListValue, ObjectValue]


@dataclass(frozen=True)
class ImageRef:
    """
    Reference to a post's header image.

    Attributes:
        path: Asset path as written in the metadata block
        caption: Caption text (empty when not given)
        extra: Other image sub-fields (e.g. alt), kept as tagged values
    """

    path: str
    caption: str = ""
    extra: Mapping[str, "MetadataValue"] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    def to_dict(self) -> Dict[str, Any]:
        data = {"path": self.path, "caption": self.caption}
        data.update({key: value.to_python() for key, value in self.extra.items()})
        return data


@dataclass(frozen=True)
class Post:
    """
    Normalized blog post.

    Attributes:
        id: Unique identifier within a collection (file stem or date+slug)
        title: Post title
        date: Publication timestamp (aware, UTC)
        categories: Category names (deduplicated)
        tags: Tag names (deduplicated)
        image: Optional header image reference
        body: Raw body text after the metadata block, for downstream rendering
        extra: Unrecognized metadata fields, kept as tagged values
        source: Where the post came from (e.g. file path), if known
    """

    id: str
    title: str
    date: datetime
    categories: FrozenSet[str] = frozenset()
    tags: FrozenSet[str] = frozenset()
    image: Optional[ImageRef] = None
    body: str = ""
    extra: Mapping[str, MetadataValue] = field(default_factory=dict)
    source: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "categories", frozenset(self.categories))
        object.__setattr__(self, "tags", frozenset(self.tags))
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    @property
    def slug(self) -> str:
        """Route-friendly identifier (same as id)."""
        return self.id

    def to_dict(self, include_body: bool = True) -> Dict[str, Any]:
        """
        Plain-data representation for the rendering shell (JSON-serializable).

        Categories and tags are emitted sorted so output is reproducible.
        """
        data = {
            "id": self.id,
            "title": self.title,
            "date": self.date.isoformat(),
            "categories": sorted(self.categories),
            "tags": sorted(self.tags),
            "image": self.image.to_dict() if self.image else None,
            "extra": {key: value.to_python() for key, value in self.extra.items()},
        }
        if include_body:
            data["body"] = self.body
        return data
