# tests/conftest.py

from __future__ import annotations

import importlib
from collections.abc import Callable, Iterator
from types import ModuleType

import pytest

import theme

COLOR_ENV = ("NO_COLOR", "FORCE_COLOR", "COLORTERM")


@pytest.fixture()
def reload_theme(monkeypatch: pytest.MonkeyPatch) -> Iterator[Callable[..., ModuleType]]:
    """
    Re-import theme under a given colour environment.

    Colour detection happens at import time, so each call clears the colour
    variables, applies ``env`` and reloads. The original module state is
    restored afterwards.
    """

    def _reload(**env: str) -> ModuleType:
        for key in COLOR_ENV:
            monkeypatch.delenv(key, raising=False)
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(theme)

    yield _reload
    monkeypatch.undo()
    importlib.reload(theme)
