"""Assemble the dots shown for a single note."""

from collections.abc import Callable

from loguru import logger

from calendar_dots.config import Settings
from calendar_dots.core.dots.estimator import estimate_dot_count
from calendar_dots.core.outline.sections import heading_section_has_content
from calendar_dots.core.outline.tags import has_tag
from calendar_dots.core.text.word_count import get_word_count
from calendar_dots.models.note import Dot, MarkerDot, Note, ParsedOutline, SolidDot
from calendar_dots.protocols import VaultProtocol


async def _resolve_metadata(
    vault: VaultProtocol, note: Note
) -> tuple[ParsedOutline | None, frozenset[str]]:
    """Fetch outline and tags once for the whole assembly.

    Metadata failures degrade to "no outline, no tags" so that the solid
    dots still render.
    """
    try:
        outline = await vault.get_parsed_outline(note)
        if outline is None:
            return None, frozenset()
        return outline, await vault.get_tags(outline)
    except Exception:
        logger.opt(exception=True).warning(
            "Metadata unavailable for {}, skipping marker dots", note.path
        )
        return None, frozenset()


async def assemble_dots(
    note: Note | None,
    vault: VaultProtocol,
    settings: Settings,
    *,
    word_counter: Callable[[str], int] = get_word_count,
) -> tuple[Dot, ...]:
    """Build the ordered dots for a note.

    Order is ``[idea?] [thought?] [solid...]``.

    Args:
        note: The note to summarize; None yields no dots.
        vault: Source of note text and metadata.
        settings: Settings snapshot for this render.
        word_counter: Counts words in the note text.

    Returns:
        Tuple of dots, markers first.
    """
    if note is None:
        return ()

    text = await vault.read_note_text(note)
    num_solid = estimate_dot_count(text, settings.words_per_dot, word_counter=word_counter)
    dots: list[Dot] = [SolidDot() for _ in range(num_solid)]

    outline, tags = await _resolve_metadata(vault, note)

    if heading_section_has_content(outline, settings.thoughts_heading):
        dots.insert(0, MarkerDot("thought"))

    if has_tag(tags, settings.idea_tag):
        dots.insert(0, MarkerDot("idea"))

    logger.debug(
        "{}: {} solid dots, markers {}",
        note.path,
        num_solid,
        [d.marker for d in dots if isinstance(d, MarkerDot)],
    )
    return tuple(dots)
