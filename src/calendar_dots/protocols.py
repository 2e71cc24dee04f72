"""Protocols for the host collaborators that feed dot assembly."""

from datetime import date
from typing import Literal, Protocol, runtime_checkable

from calendar_dots.config import Settings
from calendar_dots.models.note import Note, ParsedOutline

NotePeriod = Literal["daily", "weekly"]


@runtime_checkable
class NoteIndexProtocol(Protocol):
    """Protocol for date-indexed note lookup."""

    async def resolve_note(self, day: date, period: NotePeriod) -> Note | None:
        """Return the note for the day (or the week containing it), if any."""
        ...


@runtime_checkable
class VaultProtocol(Protocol):
    """Protocol for reading note text and indexed metadata."""

    async def read_note_text(self, note: Note) -> str:
        """Return the full text of a note."""
        ...

    async def get_parsed_outline(self, note: Note) -> ParsedOutline | None:
        """Return the note's outline, or None if it is not indexed yet."""
        ...

    async def get_tags(self, outline: ParsedOutline) -> frozenset[str]:
        """Return every tag discoverable in the outline's metadata."""
        ...


@runtime_checkable
class SettingsProviderProtocol(Protocol):
    """Protocol for reading the current settings snapshot."""

    def get_settings(self) -> Settings:
        """Return the settings in effect right now."""
        ...
