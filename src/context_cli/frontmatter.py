"""YAML frontmatter detection and decoding for markdown content."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from context_cli.errors import FrontmatterDecodeError

logger = logging.getLogger(__name__)

# A ``---`` line at offset 0, an optional body, then a closing ``---`` line.
FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?:(?P<body>.*?)\r?\n)?---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL,
)


def _stringify_keys(value: Any) -> Any:
    # YAML allows non-string keys (dates, ints); JSON output does not.
    if isinstance(value, dict):
        return {str(k): _stringify_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_stringify_keys(v) for v in value]
    return value


class Frontmatter(BaseModel):
    """Typed view of a frontmatter block.

    Recognized keys are validated strictly against their declared type.
    Everything else lands in ``other`` with its values untouched and its
    keys as strings.
    """

    model_config = ConfigDict(
        strict=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    title: str | None = None
    aliases: list[str] | None = None
    tags: list[str] | None = None
    description: str | None = None
    subject: str | None = None
    category: str | None = None
    name: str | None = None
    excerpt: str | None = None
    image: str | None = None
    icon: str | None = None
    layout: str | None = None
    requires_auth: bool | None = None
    other: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def recognized_keys(cls) -> dict[str, str]:
        """Map each key accepted in decoded data to its field name.

        Only the wire names (camelCase aliases) count; ``requires_auth`` in
        YAML is an unrecognized key.
        """
        return {
            info.alias or field_name: field_name
            for field_name, info in cls.model_fields.items()
            if field_name != "other"
        }

    @classmethod
    def from_mapping(cls, data: Mapping[Any, Any]) -> Frontmatter:
        """Build a ``Frontmatter`` from decoded key/value data.

        Raises:
            FrontmatterDecodeError: If a recognized key has the wrong type.
        """
        recognized = cls.recognized_keys()
        fields: dict[str, Any] = {}
        other: dict[str, Any] = {}
        for key, value in data.items():
            if key in recognized:
                fields[recognized[key]] = value
            else:
                other[str(key)] = _stringify_keys(value)

        try:
            return cls.model_validate({**fields, "other": other})
        except ValidationError as exc:
            raise FrontmatterDecodeError(f"Invalid frontmatter field: {exc}") from exc

    def to_dict(self) -> dict[str, Any]:
        """Serialize set fields with unrecognized keys flattened alongside.

        Recognized keys are emitted once, from their typed fields.
        """
        data: dict[str, Any] = self.model_dump(by_alias=True, exclude_none=True, exclude={"other"})
        for key, value in self.other.items():
            data.setdefault(key, value)
        return data

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), default=str)


def has_frontmatter(raw: str, pattern: re.Pattern[str] = FRONTMATTER_PATTERN) -> bool:
    """Return ``True`` if *raw* starts with a delimited frontmatter block."""
    return pattern.match(raw) is not None


def exclude_frontmatter(raw: str, pattern: re.Pattern[str] = FRONTMATTER_PATTERN) -> str:
    """Return *raw* without its frontmatter block.

    Text after the closing delimiter line is kept verbatim, including any
    leading blank lines. Content without frontmatter is returned unchanged.
    """
    match = pattern.match(raw)
    if match is None:
        return raw
    return raw[match.end() :]


def parse_frontmatter(raw: str, pattern: re.Pattern[str] = FRONTMATTER_PATTERN) -> Frontmatter:
    """Decode the frontmatter block at the start of *raw*.

    Raises:
        FrontmatterDecodeError: If there is no block, the block is not valid
            YAML, it is not a mapping, or a recognized key is mistyped.
    """
    match = pattern.match(raw)
    if match is None:
        raise FrontmatterDecodeError("Content does not start with a frontmatter block")

    block = match.group("body") or ""
    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as exc:
        raise FrontmatterDecodeError(f"Frontmatter is not valid YAML: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontmatterDecodeError(
            f"Frontmatter must be a mapping, got {type(data).__name__}"
        )

    frontmatter = Frontmatter.from_mapping(data)
    logger.debug("Decoded frontmatter %s", frontmatter)
    return frontmatter
