"""Display helpers for timestamps."""

from datetime import datetime


def format_date(value: str | datetime | None) -> str:
    """
    Format a timestamp as e.g. "Oct 19, 2026, 02:30 PM".

    Returns "Unknown date" for empty input and "Invalid date" when the value
    cannot be parsed as an ISO-8601 timestamp.
    """
    if not value:
        return "Unknown date"

    if isinstance(value, datetime):
        moment = value
    else:
        try:
            moment = datetime.fromisoformat(value)
        except (TypeError, ValueError):
            return "Invalid date"

    return f"{moment:%b} {moment.day}, {moment:%Y}, {moment:%I:%M %p}"
