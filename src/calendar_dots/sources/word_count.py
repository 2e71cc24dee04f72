"""Calendar source that decorates days and weeks with word-count dots."""

from collections.abc import Callable
from datetime import date

from loguru import logger

from calendar_dots.core.dots.assembler import assemble_dots
from calendar_dots.core.text.word_count import get_word_count
from calendar_dots.models.note import DayMetadata, Dot
from calendar_dots.protocols import (
    NoteIndexProtocol,
    NotePeriod,
    SettingsProviderProtocol,
    VaultProtocol,
)


class WordCountSource:
    """Provides dots for the calendar's daily and weekly cells.

    Settings are read once per request, and only when a note exists.
    """

    def __init__(
        self,
        index: NoteIndexProtocol,
        vault: VaultProtocol,
        settings_provider: SettingsProviderProtocol,
        *,
        word_counter: Callable[[str], int] = get_word_count,
    ) -> None:
        self._index = index
        self._vault = vault
        self._settings_provider = settings_provider
        self._word_counter = word_counter

    async def _dots_for(self, day: date, period: NotePeriod) -> tuple[Dot, ...]:
        note = await self._index.resolve_note(day, period)
        if note is None:
            logger.debug("No {} note for {}", period, day.isoformat())
            return ()
        settings = self._settings_provider.get_settings()
        return await assemble_dots(note, self._vault, settings, word_counter=self._word_counter)

    async def get_daily_dots(self, day: date) -> tuple[Dot, ...]:
        """Dots for the daily note of ``day``."""
        return await self._dots_for(day, "daily")

    async def get_weekly_dots(self, day: date) -> tuple[Dot, ...]:
        """Dots for the weekly note of the week containing ``day``."""
        return await self._dots_for(day, "weekly")

    async def get_daily_metadata(self, day: date) -> DayMetadata:
        return DayMetadata(dots=await self.get_daily_dots(day))

    async def get_weekly_metadata(self, day: date) -> DayMetadata:
        return DayMetadata(dots=await self.get_weekly_dots(day))
