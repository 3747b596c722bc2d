"""Shared pytest fixtures and configuration."""

import os
import time
from pathlib import Path

from pytest import fixture

from laraview import ViewService
from laraview.support import Config
from laraview.support.facades import Facade

VIEWS_DIR = Path(__file__).parent / "views"


@fixture(autouse=True)
def reset_state():
    """Drop runtime config overrides and the facade container after each test."""
    yield
    Config.clear_runtime_overrides()
    Config.reload()
    Facade.clear_app()


@fixture
def views_dir() -> Path:
    """Directory holding the fixture views."""
    return VIEWS_DIR


@fixture
def cache_dir(tmp_path) -> Path:
    """Empty directory for compiled views."""
    path = tmp_path / "cache"
    path.mkdir()
    return path


@fixture
def blade(cache_dir) -> ViewService:
    """View service over the fixture views."""
    return ViewService(str(VIEWS_DIR), str(cache_dir))


@fixture
def make_view(tmp_path):
    """Write a view source below a temporary views directory.

    The source is backdated so a fresh compile is never considered stale.
    """
    root = tmp_path / "views"
    root.mkdir(exist_ok=True)

    def _make(name: str, contents: str) -> Path:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(contents, encoding="utf-8")
        past = time.time() - 60
        os.utime(path, (past, past))
        return path

    _make.root = root
    return _make

