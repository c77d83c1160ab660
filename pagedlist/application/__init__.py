"""Application components."""

from .list_app import ListApp

__all__ = ["ListApp"]
