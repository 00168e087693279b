"""
Post metadata parsing for the Blog context.

Splits a raw post document into its '---' delimited metadata block and body,
loads the block as YAML into tagged values (scalar, list, nested object), and
decodes the known fields into a Post. Unknown fields are kept as tagged values
in Post.extra.

Example document:

    ---
    title: "Part 1: Setting up"
    date: 2024-05-25
    categories: [Software Engineering, Web Development]
    tags:
      - CouchDB
      - Keycloak
    image:
      path: /posts/part-1/cover.png
      caption: Architecture overview
    ---
    Body text...
"""

from datetime import date as calendar_date
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Tuple

import yaml

from folio.contexts.blog.exceptions import (
    InvalidDateError,
    MalformedMetadataError,
    MissingDelimiterError,
    MissingRequiredFieldError,
)
from folio.contexts.blog.post_data_structure import (
    ImageRef,
    ListValue,
    MetadataValue,
    ObjectValue,
    Post,
    ScalarValue,
)
from folio.utils.text_processing import slugify
from folio.utils.timestamp import format_date, parse_timestamp

DELIMITER = "---"
REQUIRED_FIELDS = ("title", "date")
IMAGE_FIELDS = ("path", "caption")
TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


# =============================================================================
# YAML LOADER / DUMPER
# =============================================================================


class RepeatedFieldError(yaml.constructor.ConstructorError):
    """A mapping in the metadata block names the same field twice."""

    def __init__(self, field: str, context_mark, problem_mark):
        self.field = field
        super().__init__(
            "while reading the metadata block", context_mark, f"found repeated field '{field}'", problem_mark
        )


class MetadataLoader(yaml.SafeLoader):
    """
    Safe YAML loader for post metadata blocks.

    Repeated fields are errors instead of last-one-wins, and timestamps are left
    as strings so the date decoder sees exactly what was written.
    """

    def construct_mapping(self, node, deep=False):
        seen = set()
        for key_node, _ in node.value:
            if not isinstance(key_node, yaml.ScalarNode):
                continue
            if key_node.value in seen:
                raise RepeatedFieldError(key_node.value, node.start_mark, key_node.start_mark)
            seen.add(key_node.value)
        return super().construct_mapping(node, deep=deep)


class MetadataDumper(yaml.SafeDumper):
    """Safe YAML dumper that writes date strings unquoted."""


for _cls in (MetadataLoader, MetadataDumper):
    _cls.yaml_implicit_resolvers = {
        first: [(tag, regexp) for tag, regexp in resolvers if tag != TIMESTAMP_TAG]
        for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
    }


# =============================================================================
# DOCUMENT SPLITTING
# =============================================================================


def split_document(raw: str, source: Optional[str] = None) -> Tuple[List[str], str, int]:
    """
    Split a post document into metadata block lines and body.

    Args:
        raw: Full document text
        source: Document identifier for error messages

    Returns:
        (block_lines, body, first_line_number) where first_line_number is the
        1-indexed document line of block_lines[0]

    Raises:
        MissingDelimiterError: If the document does not open with '---' or the
            block is never closed
    """
    text = raw.lstrip("\ufeff")
    lines = text.split("\n")

    if not lines or lines[0].rstrip() != DELIMITER:
        raise MissingDelimiterError(source=source)

    for index in range(1, len(lines)):
        if lines[index].rstrip() == DELIMITER:
            block = [line.rstrip("\r") for line in lines[1:index]]
            body = "\n".join(lines[index + 1 :])
            return block, body, 2

    raise MissingDelimiterError("Metadata block is not closed by a '---' line", source=source)


# =============================================================================
# BLOCK READING (YAML -> tagged values)
# =============================================================================


def to_metadata_value(data: Any) -> MetadataValue:
    """Wrap loaded YAML data in tagged values, recursively."""
    if isinstance(data, dict):
        return ObjectValue({str(key): to_metadata_value(value) for key, value in data.items()})
    if isinstance(data, (list, tuple, set)):
        return ListValue(tuple(to_metadata_value(item) for item in data))
    if isinstance(data, (calendar_date, datetime)):
        # Explicit !!timestamp tags still construct dates
        return ScalarValue(data.isoformat())
    return ScalarValue(data)


def parse_metadata_block(block: List[str], first_line_number: int = 1) -> Dict[str, MetadataValue]:
    """
    Load metadata block lines into a mapping of field name to tagged value.

    Args:
        block: Lines between the opening and closing delimiters
        first_line_number: Document line number of block[0], for error messages

    Returns:
        Dict of field name to ScalarValue, ListValue or ObjectValue, in block order

    Raises:
        MalformedMetadataError: If the block is not valid YAML, is not a set of
            fields, or repeats a field
    """
    try:
        data = yaml.load("\n".join(block) + "\n", Loader=MetadataLoader)
    except yaml.MarkedYAMLError as e:
        mark = e.problem_mark or e.context_mark
        raise MalformedMetadataError(
            e.problem or str(e),
            line_number=first_line_number + mark.line if mark is not None else None,
            field=getattr(e, "field", None),
        ) from e
    except yaml.YAMLError as e:
        raise MalformedMetadataError(str(e)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MalformedMetadataError("Expected 'field: value' lines", line_number=first_line_number)

    return {str(key): to_metadata_value(value) for key, value in data.items()}


# =============================================================================
# FIELD DECODING (tagged values -> Post fields)
# =============================================================================


def _decode_text(name: str, value: MetadataValue, source: Optional[str]) -> str:
    if not isinstance(value, ScalarValue) or value.value is None or isinstance(value.value, bool):
        raise MalformedMetadataError("Expected a single text value", field=name, source=source)
    text = str(value.value).strip()
    if not text:
        raise MissingRequiredFieldError(name, source=source)
    return text


def decode_title(value: MetadataValue, source: Optional[str] = None) -> str:
    return _decode_text("title", value, source)


def decode_date(value: MetadataValue, source: Optional[str] = None) -> datetime:
    """Decode the date field into an aware UTC datetime."""
    if not isinstance(value, ScalarValue) or not isinstance(value.value, str):
        raw = value.to_python()
        if raw is None:
            raise MissingRequiredFieldError("date", source=source)
        raise InvalidDateError(raw, source=source)

    parsed = parse_timestamp(value.value)
    if parsed is None:
        raise InvalidDateError(value.value, source=source)
    return parsed


def _decode_name_set(name: str, value: MetadataValue, source: Optional[str]) -> frozenset:
    if isinstance(value, ScalarValue):
        items = [] if value.value is None else [value]
    elif isinstance(value, ListValue):
        items = list(value.items)
    else:
        raise MalformedMetadataError("Expected a list of names", field=name, source=source)

    names = set()
    for item in items:
        if not isinstance(item, ScalarValue):
            raise MalformedMetadataError("List items must be plain names", field=name, source=source)
        if item.value is None:
            continue
        text = str(item.value).strip()
        if text:
            names.add(text)
    return frozenset(names)


def decode_categories(value: MetadataValue, source: Optional[str] = None) -> frozenset:
    return _decode_name_set("categories", value, source)


def decode_tags(value: MetadataValue, source: Optional[str] = None) -> frozenset:
    return _decode_name_set("tags", value, source)


def decode_image(value: MetadataValue, source: Optional[str] = None) -> Optional[ImageRef]:
    """
    Decode the image field.

    Accepts a nested object with 'path' (required) and 'caption', or a bare
    scalar taken as the path. Other sub-fields (e.g. 'alt') are kept on
    ImageRef.extra.
    """
    if isinstance(value, ScalarValue):
        if value.value is None:
            return None
        return ImageRef(path=_decode_text("image.path", value, source))

    if not isinstance(value, ObjectValue):
        raise MalformedMetadataError("Expected 'path' and 'caption' fields", field="image", source=source)

    if "path" not in value.fields:
        raise MissingRequiredFieldError("image.path", source=source)

    path = _decode_text("image.path", value.fields["path"], source)
    caption_value = value.fields.get("caption", ScalarValue(None))
    if not isinstance(caption_value, ScalarValue):
        raise MalformedMetadataError("Expected a single text value", field="image.caption", source=source)
    caption = "" if caption_value.value is None else str(caption_value.value)

    extra = {key: field_value for key, field_value in value.fields.items() if key not in IMAGE_FIELDS}
    return ImageRef(path=path, caption=caption, extra=extra)


def _fold_dotted_image_fields(
    fields: Dict[str, MetadataValue], source: Optional[str]
) -> Dict[str, MetadataValue]:
    """Fold flat image.path / image.caption fields into a nested image object."""
    dotted = {key: value for key, value in fields.items() if key.startswith("image.")}
    if not dotted:
        return fields
    if "image" in fields:
        raise MalformedMetadataError(
            "Use either a nested image block or image.* fields, not both", field="image", source=source
        )

    folded = {key: value for key, value in fields.items() if key not in dotted}
    folded["image"] = ObjectValue({key[len("image.") :]: value for key, value in dotted.items()})
    return folded


FIELD_DECODERS: Dict[str, Callable[[MetadataValue, Optional[str]], object]] = {
    "title": decode_title,
    "date": decode_date,
    "categories": decode_categories,
    "tags": decode_tags,
    "image": decode_image,
}


# =============================================================================
# PUBLIC API
# =============================================================================


def derive_post_id(title: str, date: datetime) -> str:
    """Derive a post id from its date and title (e.g. '2024-05-25-part-1')."""
    slug = slugify(title)
    prefix = date.strftime("%Y-%m-%d")
    return f"{prefix}-{slug}" if slug else prefix


def parse_post(raw: str, source_id: Optional[str] = None, source: Optional[str] = None) -> Post:
    """
    Parse a raw post document into a Post.

    Args:
        raw: Document text (metadata block followed by body)
        source_id: Identifier to use as the post id (e.g. file stem). When
            omitted, the id is derived from date and title.
        source: Where the document came from (e.g. file path), kept on the Post

    Returns:
        Normalized Post

    Raises:
        MissingDelimiterError: Document does not open with a metadata block
        MalformedMetadataError: Metadata block is not valid YAML fields, or a
            known field has the wrong shape
        MissingRequiredFieldError: title or date is absent
        InvalidDateError: date does not parse to a point in time
    """
    label = source or source_id
    block, body, first_line_number = split_document(raw, source=label)

    try:
        fields = parse_metadata_block(block, first_line_number)
    except MalformedMetadataError as e:
        raise MalformedMetadataError(e.detail, line_number=e.line_number, field=e.field, source=label) from e

    fields = _fold_dotted_image_fields(fields, label)

    for name in REQUIRED_FIELDS:
        if name not in fields:
            raise MissingRequiredFieldError(name, source=label)

    decoded = {
        name: FIELD_DECODERS[name](value, label)
        for name, value in fields.items()
        if name in FIELD_DECODERS
    }
    extra = {name: value for name, value in fields.items() if name not in FIELD_DECODERS}

    title = decoded["title"]
    date = decoded["date"]
    post_id = source_id if source_id else derive_post_id(title, date)

    return Post(
        id=post_id,
        title=title,
        date=date,
        categories=decoded.get("categories", frozenset()),
        tags=decoded.get("tags", frozenset()),
        image=decoded.get("image"),
        body=body,
        extra=extra,
        source=source,
    )


# =============================================================================
# RE-SERIALIZATION
# =============================================================================


def format_metadata_block(post: Post) -> str:
    """
    Serialize a Post's normalized fields back into a metadata block.

    Categories and tags are written sorted. The result, followed by the body,
    parses back into a Post with equal structured fields.

    Returns:
        Metadata block text including both '---' delimiter lines
    """
    data: Dict[str, Any] = {"title": post.title, "date": format_date(post.date)}

    if post.categories:
        data["categories"] = sorted(post.categories)
    if post.tags:
        data["tags"] = sorted(post.tags)
    if post.image:
        image = {"path": post.image.path}
        if post.image.caption:
            image["caption"] = post.image.caption
        image.update({key: value.to_python() for key, value in post.image.extra.items()})
        data["image"] = image

    data.update({key: value.to_python() for key, value in post.extra.items()})

    dumped = yaml.dump(data, Dumper=MetadataDumper, sort_keys=False, allow_unicode=True, default_flow_style=False)
    return f"{DELIMITER}\n{dumped}{DELIMITER}\n"


def format_post(post: Post) -> str:
    """Serialize a Post as a full document (metadata block plus body)."""
    return format_metadata_block(post) + post.body
