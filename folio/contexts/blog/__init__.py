"""
Blog Context

Responsibilities:
- Parses post documents (metadata block + body) into normalized Post records
- Holds posts in a queryable collection (newest first, by category, by tag)
- Loads a posts directory for a build

Owns: Post metadata grammar, post identity and ordering
Never: Renders markup or decides routing
"""

from folio.contexts.blog.exceptions import (
    CollectionError,
    CollectionSealedError,
    ContentBuildError,
    DuplicateIdError,
    InvalidDateError,
    MalformedMetadataError,
    MissingDelimiterError,
    MissingRequiredFieldError,
    ParseError,
)
from folio.contexts.blog.loader import load_posts
from folio.contexts.blog.metadata_parser import format_metadata_block, format_post, parse_post
from folio.contexts.blog.post_collection import PostCollection
from folio.contexts.blog.post_data_structure import (
    ImageRef,
    ListValue,
    ObjectValue,
    Post,
    ScalarValue,
)

__all__ = [
    # Parsing
    "parse_post",
    "format_metadata_block",
    "format_post",
    # Data structures
    "Post",
    "ImageRef",
    "ScalarValue",
    "ListValue",
    "ObjectValue",
    "PostCollection",
    # Loading
    "load_posts",
    # Errors
    "ParseError",
    "MissingDelimiterError",
    "InvalidDateError",
    "MissingRequiredFieldError",
    "MalformedMetadataError",
    "CollectionError",
    "DuplicateIdError",
    "CollectionSealedError",
    "ContentBuildError",
]
