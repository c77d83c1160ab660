"""Configuration management."""

from .paths import AppPaths
from .settings import AppSettings, LoaderSettings, SourceSettings, WindowSettings

__all__ = [
    "AppPaths",
    "AppSettings",
    "LoaderSettings",
    "SourceSettings",
    "WindowSettings",
]
