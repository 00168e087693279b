"""Exceptions for the blog context: metadata parsing, collection, and loading."""

from pathlib import Path
from typing import List, Optional, Tuple


class ParseError(Exception):
    """
    Base exception for post documents that cannot be turned into a Post.

    Attributes:
        message: Error description
        source: Identifier of the offending document (file stem or path), if known
    """

    def __init__(self, message: str, source: Optional[str] = None):
        self.message = message
        self.source = source

        if source:
            super().__init__(f"{source}: {message}")
        else:
            super().__init__(message)


class MissingDelimiterError(ParseError):
    """Raised when a document does not open (or close) its metadata block with '---'."""

    def __init__(self, message: str = "Document does not start with a '---' metadata block", source: Optional[str] = None):
        super().__init__(message, source=source)


class InvalidDateError(ParseError):
    """
    Raised when the date field does not parse to a point in time.

    Attributes:
        value: The raw date value found in the metadata block
    """

    def __init__(self, value, source: Optional[str] = None):
        self.value = value
        super().__init__(f"Invalid date value: {value!r}", source=source)


class MissingRequiredFieldError(ParseError):
    """
    Raised when a mandatory metadata field (title or date) is absent.

    Attributes:
        field: Name of the missing field
    """

    def __init__(self, field: str, source: Optional[str] = None):
        self.field = field
        super().__init__(f"Missing required field: '{field}'", source=source)


class MalformedMetadataError(ParseError):
    """
    Raised when the metadata block breaks the field/value grammar, or a known
    field has the wrong shape (e.g. a list where a title is expected).

    Attributes:
        line_number: 1-indexed line within the document, if applicable
        field: Field name involved, if applicable
    """

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        field: Optional[str] = None,
        source: Optional[str] = None,
    ):
        self.detail = message
        self.line_number = line_number
        self.field = field

        parts = [message]
        if field:
            parts.append(f"(field '{field}')")
        if line_number is not None:
            parts.append(f"at line {line_number}")

        super().__init__(" ".join(parts), source=source)


class CollectionError(Exception):
    """Base exception for PostCollection misuse."""

    pass


class DuplicateIdError(CollectionError):
    """
    Raised when a post id is added twice.

    Ids are derived from the source, so a duplicate is a content authoring error.

    Attributes:
        post_id: The duplicated id
    """

    def __init__(self, post_id: str):
        self.post_id = post_id
        super().__init__(f"Duplicate post id: '{post_id}'")


class CollectionSealedError(CollectionError):
    """Raised when adding to a collection after it has been sealed."""

    def __init__(self, post_id: str):
        self.post_id = post_id
        super().__init__(f"Cannot add '{post_id}': collection is sealed")


class ContentBuildError(Exception):
    """
    Raised by the blog loader when one or more posts fail to load.

    Attributes:
        failures: List of (path, error) pairs for every failing document
    """

    def __init__(self, failures: List[Tuple[Path, Exception]]):
        self.failures = failures

        lines = [f"Failed to load {len(failures)} post(s):"]
        for path, error in failures:
            lines.append(f"  - {Path(path).name}: {error}")

        super().__init__("\n".join(lines))
