"""Tests for date-indexed note lookup."""

from datetime import date

import pytest

from calendar_dots.core.notes.index import NoteIndex, get_date_uid
from calendar_dots.models.note import Note
from calendar_dots.protocols import NoteIndexProtocol


def test_daily_uid_uses_midnight_of_the_day() -> None:
    assert get_date_uid(date(2024, 1, 17), "daily") == "day-2024-01-17T00:00:00"


def test_weekly_uid_uses_start_of_week() -> None:
    # 2024-01-17 is a Wednesday
    assert get_date_uid(date(2024, 1, 17), "weekly") == "week-2024-01-15T00:00:00"
    assert get_date_uid(date(2024, 1, 17), "weekly", week_start=6) == "week-2024-01-14T00:00:00"


def test_unknown_period_is_rejected() -> None:
    with pytest.raises(ValueError, match="period"):
        get_date_uid(date(2024, 1, 17), "monthly")  # type: ignore[arg-type]


def test_invalid_week_start_is_rejected() -> None:
    with pytest.raises(ValueError, match="week_start"):
        NoteIndex(week_start=7)


def test_index_satisfies_protocol() -> None:
    assert isinstance(NoteIndex(), NoteIndexProtocol)


@pytest.mark.asyncio
async def test_resolve_daily_and_weekly_notes() -> None:
    index = NoteIndex()
    daily = Note(path="daily/2024-01-17.md")
    weekly = Note(path="weekly/2024-W03.md")
    index.add(daily, date(2024, 1, 17), "daily")
    index.add(weekly, date(2024, 1, 15), "weekly")

    assert len(index) == 2
    assert await index.resolve_note(date(2024, 1, 17), "daily") == daily
    assert await index.resolve_note(date(2024, 1, 18), "daily") is None
    # Any day of the week finds the weekly note
    assert await index.resolve_note(date(2024, 1, 21), "weekly") == weekly
    assert await index.resolve_note(date(2024, 1, 22), "weekly") is None


@pytest.mark.asyncio
async def test_adding_twice_replaces_the_note() -> None:
    index = NoteIndex()
    index.add(Note(path="old.md"), date(2024, 1, 17), "daily")
    index.add(Note(path="new.md"), date(2024, 1, 17), "daily")

    assert len(index) == 1
    assert await index.resolve_note(date(2024, 1, 17), "daily") == Note(path="new.md")
