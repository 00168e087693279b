"""Exceptions for the resume context: document composition and content structure."""

from typing import Optional


class ComposeError(Exception):
    """
    Base exception for resume specs that cannot be composed into a document.

    Attributes:
        message: Error description
        path: Location of the offending spec (e.g., "specs[2].entries[0]")
    """

    def __init__(self, message: str, path: Optional[str] = None):
        self.message = message
        self.path = path

        if path:
            super().__init__(f"{message} (at {path})")
        else:
            super().__init__(message)


class OrphanEntryError(ComposeError):
    """Raised when a Position or content block is supplied without an owning Section."""

    def __init__(self, entry, path: Optional[str] = None):
        self.entry = entry
        super().__init__(f"{type(entry).__name__} has no owning Section", path=path)


class DuplicateIntroError(ComposeError):
    """Raised when more than one Intro is supplied for a document."""

    def __init__(self, path: Optional[str] = None):
        super().__init__("A document has at most one Intro", path=path)


class InvalidEntryError(ComposeError):
    """
    Raised when a spec appears where its kind is not allowed
    (e.g. a Section inside a Section, a Position inside a Position body).
    """

    def __init__(self, entry, container: str, path: Optional[str] = None):
        self.entry = entry
        self.container = container
        super().__init__(f"{type(entry).__name__} is not allowed inside {container}", path=path)


class EmptyHeadingError(ComposeError):
    """Raised when a Section or Position heading is empty."""

    def __init__(self, kind: str, path: Optional[str] = None):
        self.kind = kind
        super().__init__(f"{kind} heading must not be empty", path=path)


class InvalidContentStructureError(ValueError):
    """
    Exception raised when resume content YAML is invalid or missing required keys.

    Raised by the resume loader when the file doesn't conform to the expected
    content schema (missing 'resume' key, entries of no known shape, etc.).
    """

    pass
