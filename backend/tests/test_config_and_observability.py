from __future__ import annotations

from receipt_points.core import config as cfg
from receipt_points.core import observability
from receipt_points.core.config import Settings


def test_defaults_match_historical_behaviour(monkeypatch):
    for name in ("PORT", "HOST", "ENVIRONMENT", "SENTRY_DSN"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.PORT == 8080
    assert settings.HOST == "0.0.0.0"
    assert settings.SENTRY_DSN is None
    assert settings.is_development


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("ENVIRONMENT", "production")
    settings = Settings(_env_file=None)
    assert settings.PORT == 9090
    assert not settings.is_development


def test_sentry_is_noop_without_dsn(monkeypatch):
    monkeypatch.setattr(cfg.settings, "SENTRY_DSN", None)
    assert observability.init_sentry("test") is False
    # Helpers must not raise when Sentry is disabled
    observability.sentry_set_tags({"path": "/receipts/process"})
    observability.sentry_breadcrumb("receipts", "noop")
    observability.sentry_capture(RuntimeError("boom"))


def test_before_send_scrubs_headers_and_body():
    event = {
        "request": {
            "method": "POST",
            "headers": {"Authorization": "Bearer x", "Cookie": "a=b", "Accept": "application/json"},
            "data": {"retailer": "Target"},
        }
    }
    scrubbed = observability._before_send(event)
    assert scrubbed["request"]["headers"] == {"Accept": "application/json"}
    assert "data" not in scrubbed["request"]
    assert scrubbed["request"]["method"] == "POST"
