"""Utility functions."""

from .formatting import (
    format_record,
    format_refresh_label,
    format_retry_label,
    format_status,
)

__all__ = [
    "format_record",
    "format_refresh_label",
    "format_retry_label",
    "format_status",
]
