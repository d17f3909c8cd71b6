from __future__ import annotations

import logging

import pytest

from common.logging import DEFAULT_FORMAT, resolve_level, setup_default_logging


@pytest.mark.parametrize(
    "value, expected",
    [("INFO", logging.INFO), ("debug", logging.DEBUG), (" warning ", logging.WARNING), ("nope", logging.INFO), (10, 10)],
)
def test_resolve_level(value, expected) -> None:
    assert resolve_level(value) == expected


def test_setup_is_noop_when_root_has_handlers(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    root = logging.getLogger()
    handler = logging.NullHandler()
    root.addHandler(handler)
    try:
        setup_default_logging("DEBUG")
    finally:
        root.removeHandler(handler)
    assert calls == []


def test_setup_configures_root_once(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    root = logging.getLogger()
    saved = root.handlers[:]
    root.handlers = []
    try:
        setup_default_logging("debug")
    finally:
        root.handlers = saved
    assert calls == [{"level": logging.DEBUG, "format": DEFAULT_FORMAT}]
