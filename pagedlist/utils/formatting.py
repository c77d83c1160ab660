"""Text formatting utilities."""

from typing import Optional

from pagedlist.domain import CountdownSnapshot, ListState, Record

EMPTY_MESSAGE = "No one here :)"


def format_record(record: Record) -> str:
    return f"{record.display_name} ({record.id})"


def format_retry_label(countdown: Optional[CountdownSnapshot]) -> str:
    if countdown is None or countdown.enabled:
        return "RETRY"
    return f"RETRY ({countdown.remaining_seconds})"


def format_refresh_label(
    countdown: Optional[CountdownSnapshot], updating: bool = False
) -> str:
    if updating:
        return "UPDATING..."
    if countdown is None or countdown.enabled:
        return "REFRESH"
    seconds = countdown.remaining_seconds
    unit = "second" if seconds == 1 else "seconds"
    return f"Wait {seconds} {unit} to retry"


def format_status(state: ListState) -> str:
    count = len(state.records)
    noun = "record" if count == 1 else "records"
    if state.has_more:
        return f"Showing {count} {noun}, more available"
    return f"Showing {count} {noun}"
