"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from tests.fakes import FakePageFetcher, FakeScheduler, ManualFetchRunner


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def fetcher() -> FakePageFetcher:
    return FakePageFetcher()


@pytest.fixture
def runner() -> ManualFetchRunner:
    return ManualFetchRunner()


@pytest.fixture
def make_store(fetcher, runner, scheduler):
    from pagedlist.managers.list_store import PaginatedListStore

    def factory(**kwargs) -> PaginatedListStore:
        return PaginatedListStore(fetcher, runner, scheduler, **kwargs)

    return factory


@pytest.fixture
def store(make_store):
    return make_store()


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yml"


@pytest.fixture
def gtk():
    gi = pytest.importorskip("gi")
    try:
        gi.require_version("Gtk", "4.0")
    except ValueError:
        pytest.skip("GTK 4 is not available")
    Gtk = pytest.importorskip("gi.repository.Gtk")
    if not Gtk.init_check():
        pytest.skip("No display available")
    return Gtk


@pytest.fixture
def adw(gtk):
    gi = pytest.importorskip("gi")
    try:
        gi.require_version("Adw", "1")
    except ValueError:
        pytest.skip("libadwaita is not available")
    Adw = pytest.importorskip("gi.repository.Adw")
    Adw.init()
    return Adw
