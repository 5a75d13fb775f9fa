"""Global test configuration and shared fixtures."""

from __future__ import annotations

import logging
import typing as t

import pytest

from stepsweep.config import MAX_WORKERS_ENV


@pytest.fixture(autouse=True)
def isolate_stepsweep_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> t.Generator[None, None, None]:
    """Keep worker overrides and CLI log handlers from leaking between tests."""
    monkeypatch.delenv(MAX_WORKERS_ENV, raising=False)
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
