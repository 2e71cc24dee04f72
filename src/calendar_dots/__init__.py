"""Word-count and marker dots for calendar notes."""

from calendar_dots.config import Settings
from calendar_dots.core.dots.assembler import assemble_dots
from calendar_dots.core.notes.index import NoteIndex
from calendar_dots.models.note import DayMetadata, Dot, MarkerDot, Note, ParsedOutline, SolidDot
from calendar_dots.protocols import NoteIndexProtocol, SettingsProviderProtocol, VaultProtocol
from calendar_dots.sources.word_count import WordCountSource

__all__ = [
    "DayMetadata",
    "Dot",
    "MarkerDot",
    "Note",
    "NoteIndex",
    "NoteIndexProtocol",
    "ParsedOutline",
    "Settings",
    "SettingsProviderProtocol",
    "SolidDot",
    "VaultProtocol",
    "WordCountSource",
    "assemble_dots",
]
