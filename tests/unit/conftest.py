"""Shared test fixtures."""

from typing import Any

import pytest

from calendar_dots.core.metadata.reader import parse_cached_metadata
from calendar_dots.models.note import ParsedOutline


def _pos(start: int, end: int | None = None) -> dict[str, Any]:
    return {
        "start": {"line": start, "col": 0, "offset": 0},
        "end": {"line": start if end is None else end, "col": 0, "offset": 0},
    }


# A daily note laid out as:
#   0-2  front matter
#   3    # Log
#   4-5  paragraph
#   6    ## Thoughts
#   7    list
#   8    ## Tasks
#   9-10 list (with an inline #idea tag)
DAILY_NOTE_METADATA: dict[str, Any] = {
    "frontmatter": {"tags": "journal, daily", "position": _pos(0, 2)},
    "headings": [
        {"heading": "Log", "level": 1, "position": _pos(3)},
        {"heading": "Thoughts", "level": 2, "position": _pos(6)},
        {"heading": "Tasks", "level": 2, "position": _pos(8)},
    ],
    "sections": [
        {"type": "yaml", "position": _pos(0, 2)},
        {"type": "heading", "position": _pos(3)},
        {"type": "paragraph", "position": _pos(4, 5)},
        {"type": "heading", "position": _pos(6)},
        {"type": "list", "position": _pos(7)},
        {"type": "heading", "position": _pos(8)},
        {"type": "list", "position": _pos(9, 10)},
    ],
    "tags": [{"tag": "#idea", "position": _pos(10)}],
}


@pytest.fixture
def daily_metadata() -> dict[str, Any]:
    """Raw cached metadata for a populated daily note."""
    return DAILY_NOTE_METADATA


@pytest.fixture
def daily_outline() -> ParsedOutline:
    """Parsed outline of the populated daily note."""
    outline = parse_cached_metadata(DAILY_NOTE_METADATA)
    assert outline is not None
    return outline
