"""Configuration constants and settings for calendar dots."""

import math
from dataclasses import dataclass
from typing import Any

# Upper bound on solid (word count) dots for a single note.
NUM_MAX_DOTS: int = 5

DEFAULT_WORDS_PER_DOT: int = 250
DEFAULT_IDEA_TAG: str = "#idea"
DEFAULT_THOUGHTS_HEADING: str = "Thoughts"


@dataclass(frozen=True)
class Settings:
    """Snapshot of the user settings that drive dot rendering."""

    words_per_dot: float = DEFAULT_WORDS_PER_DOT
    idea_tag: str = DEFAULT_IDEA_TAG
    thoughts_heading: str = DEFAULT_THOUGHTS_HEADING

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Settings":
        """Build settings from the plugin's camelCase settings dict.

        Missing keys fall back to defaults, unknown keys are ignored.

        Raises:
            ValueError: If a known key holds a value of the wrong type, or
                wordsPerDot is NaN or infinite.
        """
        words_per_dot = data.get("wordsPerDot", DEFAULT_WORDS_PER_DOT)
        # bool is an int subclass but never a meaningful divisor
        if isinstance(words_per_dot, bool) or not isinstance(words_per_dot, int | float):
            msg = f"wordsPerDot must be a number, got {words_per_dot!r}"
            raise ValueError(msg)
        if not math.isfinite(words_per_dot):
            msg = f"wordsPerDot must be finite, got {words_per_dot!r}"
            raise ValueError(msg)

        idea_tag = data.get("ideaTag", DEFAULT_IDEA_TAG)
        if not isinstance(idea_tag, str):
            msg = f"ideaTag must be a string, got {idea_tag!r}"
            raise ValueError(msg)

        thoughts_heading = data.get("thoughtsHeading", DEFAULT_THOUGHTS_HEADING)
        if not isinstance(thoughts_heading, str):
            msg = f"thoughtsHeading must be a string, got {thoughts_heading!r}"
            raise ValueError(msg)

        return cls(
            words_per_dot=words_per_dot,
            idea_tag=idea_tag,
            thoughts_heading=thoughts_heading,
        )
