"""Unit tests for cursorview.__version__."""

from __future__ import annotations

import importlib
import importlib.metadata

import pytest

import cursorview


@pytest.fixture()
def reload_package(monkeypatch: pytest.MonkeyPatch):
    """Re-execute cursorview/__init__.py, restoring the real module afterwards."""
    yield lambda: importlib.reload(cursorview)
    monkeypatch.undo()
    importlib.reload(cursorview)


def test_version_is_a_non_empty_string() -> None:
    assert isinstance(cursorview.__version__, str)
    assert cursorview.__version__


def test_version_read_from_distribution_metadata(
    monkeypatch: pytest.MonkeyPatch, reload_package
) -> None:
    monkeypatch.setattr(importlib.metadata, "version", lambda name: f"9.9.9+{name}")

    module = reload_package()

    assert module.__version__ == "9.9.9+cursorview"


def test_uninstalled_checkout_falls_back_with_warning(
    monkeypatch: pytest.MonkeyPatch, reload_package
) -> None:
    def _not_installed(name: str) -> str:
        raise importlib.metadata.PackageNotFoundError(name)

    monkeypatch.setattr(importlib.metadata, "version", _not_installed)

    with pytest.warns(RuntimeWarning, match="cursorview is not installed"):
        module = reload_package()

    assert module.__version__ == cursorview.FALLBACK_VERSION
