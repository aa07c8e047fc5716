from __future__ import annotations

from typing import Any

import pytest

from stayhub.observability import sentry
from stayhub.settings import Settings


def test_disabled_without_dsn(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, Any]] = []
    monkeypatch.setattr(sentry.sentry_sdk, "init", lambda **kw: calls.append(kw))

    assert sentry.init_sentry(Settings(env="test", sentry_dsn=None)) is False
    assert sentry.init_sentry(Settings(env="test", sentry_dsn="   ")) is False
    assert calls == []


def test_enabled_with_dsn(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, Any]] = []
    monkeypatch.setattr(sentry.sentry_sdk, "init", lambda **kw: calls.append(kw))

    settings = Settings(
        env="prod",
        sentry_dsn="https://public@sentry.example.com/1",
        sentry_traces_sample_rate=0.25,
    )
    assert sentry.init_sentry(settings) is True

    (kwargs,) = calls
    assert kwargs["dsn"] == "https://public@sentry.example.com/1"
    assert kwargs["environment"] == "prod"
    assert kwargs["traces_sample_rate"] == 0.25
    assert kwargs["send_default_pii"] is False
