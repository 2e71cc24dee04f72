"""Detect whether a heading's section has any body content."""

from calendar_dots.models.note import ParsedOutline


def heading_section_has_content(outline: ParsedOutline | None, heading_name: str) -> bool:
    """Check for non-heading content under the named heading.

    The body of a heading runs from the line after it up to the next heading
    (or, when the heading is the last one, up to the start of the last
    section in the document).

    Args:
        outline: Parsed note structure, or None when not indexed.
        heading_name: Exact, case-sensitive heading text. Only the first
            matching heading is considered.

    Returns:
        True if at least one non-heading section starts inside the body.
    """
    if outline is None or not heading_name:
        return False

    target = next((h for h in outline.headings if h.text == heading_name), None)
    if target is None:
        return False

    after_line = target.end_line
    next_heading = next((h for h in outline.headings if h.start_line > after_line), None)

    trailing = [s for s in outline.sections if s.start_line > after_line]
    if not trailing:
        return False
    last_section = trailing[-1]

    limit = next_heading.start_line if next_heading is not None else last_section.start_line

    return any(not s.is_heading and s.start_line <= limit for s in trailing)
