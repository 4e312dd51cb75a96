from __future__ import annotations

from datetime import datetime

from assessment_reports.domain.entities.student_response import parse_timestamp

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_date(value: datetime) -> str:
    """16th December 2021"""
    return f"{ordinal(value.day)} {MONTH_NAMES[value.month - 1]} {value.year}"


def format_datetime(value: datetime) -> str:
    """16th December 2021 10:46 AM"""
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{format_date(value)} {hour}:{value.minute:02d} {meridiem}"


def display_date(raw: str | None, with_time: bool = False) -> str:
    """Render a dataset timestamp for reports; unparsable input is shown as stored."""
    parsed = parse_timestamp(raw)
    if parsed is None:
        return (raw or "").strip()
    return format_datetime(parsed) if with_time else format_date(parsed)
