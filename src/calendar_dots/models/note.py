"""Domain models for notes, outlines and dots."""

from dataclasses import dataclass
from typing import Any, Literal

HEADING_SECTION = "heading"

MarkerKind = Literal["idea", "thought"]


@dataclass(frozen=True)
class Note:
    """A daily or weekly note, identified by its vault path."""

    path: str


@dataclass(frozen=True)
class Heading:
    """A heading in a parsed note, with its line range."""

    text: str
    start_line: int
    end_line: int


@dataclass(frozen=True)
class Section:
    """A top-level block of a parsed note.

    ``kind`` is ``"heading"`` for heading blocks; anything else
    (``paragraph``, ``list``, ``code``, ...) counts as content.
    """

    kind: str
    start_line: int
    end_line: int

    @property
    def is_heading(self) -> bool:
        return self.kind == HEADING_SECTION


@dataclass(frozen=True)
class ParsedOutline:
    """Heading and section structure of a note, in document order."""

    headings: tuple[Heading, ...] = ()
    sections: tuple[Section, ...] = ()
    inline_tags: tuple[str, ...] = ()
    frontmatter_tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class SolidDot:
    """A filled dot standing for a slice of the note's word count."""

    color: str = "default"
    filled: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {"color": self.color, "isFilled": self.filled}


@dataclass(frozen=True)
class MarkerDot:
    """An unfilled dot carrying a semantic class name."""

    marker: MarkerKind

    def to_dict(self) -> dict[str, Any]:
        return {"className": self.marker}


Dot = SolidDot | MarkerDot


@dataclass(frozen=True)
class DayMetadata:
    """Everything the calendar shows for one day or week."""

    dots: tuple[Dot, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the dict shape the calendar view consumes."""
        return {"dots": [dot.to_dict() for dot in self.dots]}
