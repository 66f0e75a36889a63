"""Tests for the telemetry switch in common.tracing."""

from fastapi import FastAPI

from common import tracing


def test_disabled_telemetry_leaves_app_untouched(monkeypatch):
    monkeypatch.setenv("OTEL_ENABLED", "false")
    app = FastAPI()
    tracing.setup_telemetry(app)
    assert not getattr(app, "_is_instrumented_by_opentelemetry", False)


def test_telemetry_enabled_by_default(monkeypatch):
    monkeypatch.delenv("OTEL_ENABLED", raising=False)
    assert tracing.telemetry_enabled()
