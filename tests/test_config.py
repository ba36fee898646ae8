from __future__ import annotations

from dataclasses import replace

from soulcheck.app.config import parse_webhook_urls, settings


def test_parse_webhook_urls() -> None:
    assert parse_webhook_urls(" https://a.example/hook , ,https://b.example/hook,") == [
        "https://a.example/hook",
        "https://b.example/hook",
    ]
    assert parse_webhook_urls("") == []
    assert parse_webhook_urls(None) == []


def test_settings_webhook_urls() -> None:
    s = replace(settings, WEBHOOK_URLS="https://a.example, https://b.example")
    assert s.webhook_urls == ["https://a.example", "https://b.example"]
