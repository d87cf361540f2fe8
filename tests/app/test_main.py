"""Tests for the application factory and the serve entry point."""

from unittest.mock import patch

from fastapi import FastAPI

from app.main import create_app, serve


def test_create_app_registers_routes():
    app = create_app(testing=True)
    paths = {route.path for route in app.routes}
    assert {"/health", "/webhooks/sunshine", "/conversations", "/customers"} <= paths


def test_serve_uses_configured_host_and_port(monkeypatch):
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9123")
    with patch("app.main.uvicorn.run") as run, patch("app.main.LoggingConfig"):
        serve()

    run.assert_called_once()
    assert isinstance(run.call_args.args[0], FastAPI)
    assert run.call_args.kwargs == {"host": "127.0.0.1", "port": 9123}
