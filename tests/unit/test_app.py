"""Unit tests for the FastAPI app factory and CLI wiring."""

from fastapi import FastAPI

from mcp_local_llm import __version__, create_app
from mcp_local_llm.__main__ import build_parser, build_settings
from mcp_local_llm.mcp_server import SERVER_VERSION


def test_create_app_with_settings(test_settings):
    """Test that create_app accepts custom settings."""
    app = create_app(settings=test_settings)

    assert isinstance(app, FastAPI)
    assert app.state.settings is test_settings


def test_create_app_metadata(test_app):
    """Test that app has correct metadata."""
    assert test_app.title == "mcp-local-llm"
    assert test_app.version == "1.0.1"


def test_create_app_routes(test_app):
    """Test that health and tool routes are registered."""
    routes = [route.path for route in test_app.routes]  # type: ignore[attr-defined]

    assert "/api/v1/health" in routes
    assert "/api/v1/tools" in routes
    assert "/api/v1/tools/{name}" in routes
    assert "/api/v1/status" in routes


def test_create_app_has_cors_middleware(test_app):
    """Test that CORS middleware is configured."""
    middleware_classes = [m.cls.__name__ for m in test_app.user_middleware]  # type: ignore[attr-defined]
    assert "CORSMiddleware" in middleware_classes


def test_version_constants_agree(test_app):
    """Test that the package, app and MCP server report the same version."""
    assert __version__ == test_app.version == SERVER_VERSION


def test_cli_overrides_settings(monkeypatch):
    """Test that CLI flags override environment settings."""
    monkeypatch.setenv("LOCAL_LLM_MODEL", "from-env")

    args = build_parser().parse_args(
        ["--http", "--port", "9000", "--model", "llama3.2:latest", "--log-level", "DEBUG"]
    )
    settings = build_settings(args)

    assert args.http is True
    assert settings.port == 9000
    assert settings.model == "llama3.2:latest"
    assert settings.log_level == "DEBUG"


def test_cli_defaults_to_environment(monkeypatch):
    """Test that unset flags leave environment settings alone."""
    monkeypatch.setenv("LOCAL_LLM_MODEL", "from-env")

    args = build_parser().parse_args([])
    settings = build_settings(args)

    assert args.http is False
    assert settings.model == "from-env"
