"""In-memory lookup of daily and weekly notes by date."""

from datetime import date, datetime, time, timedelta

from loguru import logger

from calendar_dots.models.note import Note
from calendar_dots.protocols import NotePeriod

_UID_PREFIX: dict[str, str] = {"daily": "day", "weekly": "week"}


def get_date_uid(day: date, period: NotePeriod, *, week_start: int = 0) -> str:
    """Build the lookup key for the note covering ``day``.

    Weekly keys use the first day of the week; ``week_start`` follows
    ``date.weekday()`` numbering (0 = Monday, 6 = Sunday).
    """
    if period not in _UID_PREFIX:
        msg = f"Unknown note period: {period!r}"
        raise ValueError(msg)
    if period == "weekly":
        day = day - timedelta(days=(day.weekday() - week_start) % 7)
    return f"{_UID_PREFIX[period]}-{datetime.combine(day, time()).isoformat()}"


class NoteIndex:
    """Daily and weekly notes keyed by date UID."""

    def __init__(self, *, week_start: int = 0) -> None:
        if not 0 <= week_start <= 6:
            msg = f"week_start must be between 0 and 6, got {week_start!r}"
            raise ValueError(msg)
        self.week_start = week_start
        self._notes: dict[str, Note] = {}

    def __len__(self) -> int:
        return len(self._notes)

    def add(self, note: Note, day: date, period: NotePeriod) -> None:
        """Register ``note`` as the note for ``day`` (or its week)."""
        uid = get_date_uid(day, period, week_start=self.week_start)
        previous = self._notes.get(uid)
        if previous is not None and previous != note:
            logger.debug("Replacing {} with {} for {}", previous.path, note.path, uid)
        self._notes[uid] = note

    async def resolve_note(self, day: date, period: NotePeriod) -> Note | None:
        """Return the note registered for ``day``, or None."""
        return self._notes.get(get_date_uid(day, period, week_start=self.week_start))
