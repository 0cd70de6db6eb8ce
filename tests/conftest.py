"""Shared pytest fixtures and configuration for the typed-input test suite.

Guidelines
----------
* No real terminal interaction in any test.
* stdin is replaced with in-memory streams; stdout/stderr via ``capsys``.
* Core tests pass explicit sources and sinks and never touch ``sys``.
"""

from __future__ import annotations

import io
import sys
from collections.abc import Callable

import pytest


@pytest.fixture
def feed_stdin(monkeypatch: pytest.MonkeyPatch) -> Callable[[str], io.StringIO]:
    """Return a helper that replaces ``sys.stdin`` with the given text."""

    def _feed(text: str) -> io.StringIO:
        stream = io.StringIO(text)
        monkeypatch.setattr(sys, "stdin", stream)
        return stream

    return _feed
