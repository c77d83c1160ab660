"""UI components."""

from .empty_state import EmptyStateView
from .error_banner import ErrorBanner

__all__ = ["EmptyStateView", "ErrorBanner"]
