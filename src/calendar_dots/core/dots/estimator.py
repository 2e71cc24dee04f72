"""Map note length to a bounded number of solid dots."""

import math
from collections.abc import Callable

from calendar_dots.config import NUM_MAX_DOTS
from calendar_dots.core.text.word_count import get_word_count


def estimate_dot_count(
    text: str | None,
    words_per_dot: float,
    *,
    word_counter: Callable[[str], int] = get_word_count,
) -> int:
    """Return how many solid dots a note of this text deserves.

    Any non-empty text yields at least one dot so that an existing note is
    visually distinct from a missing one; the count is capped at
    ``NUM_MAX_DOTS``.

    Args:
        text: Full note text; None or empty means no dots.
        words_per_dot: Words represented by each dot; non-positive or
            non-finite values disable dots.
        word_counter: Counts words in the text.

    Returns:
        Integer in ``[0, NUM_MAX_DOTS]``.
    """
    if not text or not math.isfinite(words_per_dot) or words_per_dot <= 0:
        return 0

    raw_dots = math.floor(word_counter(text) / words_per_dot)
    return max(1, min(raw_dots, NUM_MAX_DOTS))
