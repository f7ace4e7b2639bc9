from __future__ import annotations

import logging

import pytest

from botkit.common.logging import setup_logging


def test_setup_logging_level(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    setup_logging("debug")
    assert calls["level"] == logging.DEBUG
    assert calls["format"] == "%(asctime)s %(levelname)s %(name)s: %(message)s"


def test_setup_logging_unknown_level_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    setup_logging("chatty")
    assert calls["level"] == logging.INFO
