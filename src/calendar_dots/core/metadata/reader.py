"""Parse the host's cached note metadata into domain models."""

import re
from typing import Any

from calendar_dots.models.note import Heading, ParsedOutline, Section

_TAG_SPLIT = re.compile(r"[,\s]+")


def _line_range(entry: Any) -> tuple[int, int]:
    try:
        position = entry["position"]
        return int(position["start"]["line"]), int(position["end"]["line"])
    except (KeyError, TypeError) as e:
        msg = f"Metadata entry has no usable position: {entry!r}"
        raise ValueError(msg) from e


def _field(entry: Any, key: str) -> Any:
    try:
        return entry[key]
    except (KeyError, TypeError) as e:
        msg = f"Metadata entry has no {key!r}: {entry!r}"
        raise ValueError(msg) from e


def _normalize_tag(tag: str) -> str:
    return tag if tag.startswith("#") else f"#{tag}"


def parse_frontmatter_tags(frontmatter: dict[str, Any] | None) -> tuple[str, ...]:
    """Extract tags from the ``tags``/``tag`` front-matter keys.

    Values may be a list or a comma/space separated string. Every tag is
    returned with a leading ``#``; empty entries are dropped.
    """
    if not frontmatter:
        return ()

    result: list[str] = []
    for key in ("tags", "tag"):
        value = frontmatter.get(key)
        if value is None:
            continue
        if isinstance(value, str):
            raw = _TAG_SPLIT.split(value)
        elif isinstance(value, list):
            raw = [str(v) for v in value if v is not None]
        else:
            raw = [str(value)]
        result.extend(_normalize_tag(t.strip()) for t in raw if t.strip())
    return tuple(result)


def parse_cached_metadata(data: dict[str, Any] | None) -> ParsedOutline | None:
    """Convert a cached-metadata dict into a ParsedOutline.

    Args:
        data: Raw metadata with optional ``headings``, ``sections``, ``tags``
            and ``frontmatter`` keys. None means the note is not indexed.

    Returns:
        The outline, or None when there is no metadata.

    Raises:
        ValueError: If a heading, section or tag entry is not a mapping or
            lacks its text, type, tag or line position.
    """
    if data is None:
        return None

    headings: list[Heading] = []
    for raw in data.get("headings") or []:
        start, end = _line_range(raw)
        headings.append(Heading(text=_field(raw, "heading"), start_line=start, end_line=end))

    sections: list[Section] = []
    for raw in data.get("sections") or []:
        start, end = _line_range(raw)
        sections.append(Section(kind=_field(raw, "type"), start_line=start, end_line=end))

    inline_tags = tuple(
        tag for tag in (_field(raw, "tag") for raw in data.get("tags") or []) if tag
    )

    return ParsedOutline(
        headings=tuple(headings),
        sections=tuple(sections),
        inline_tags=inline_tags,
        frontmatter_tags=parse_frontmatter_tags(data.get("frontmatter")),
    )


def get_all_tags(outline: ParsedOutline | None) -> frozenset[str]:
    """Return front-matter and inline tags of a note together."""
    if outline is None:
        return frozenset()
    return frozenset(outline.frontmatter_tags) | frozenset(outline.inline_tags)
