"""Integration tests for the application factory and entry point."""

import pytest

from metasearch.__main__ import parse_args
from metasearch.api.app import create_app
from metasearch.config.settings import Settings
from metasearch.engines.registry import EngineRegistry
from metasearch.utils.exceptions import ConfigurationError


class TestCreateApp:
    """Tests for create_app."""

    def test_default_registry(self):
        """Test the built-in engines are registered when no registry is given."""
        app = create_app(settings=Settings(_env_file=None, ENVIRONMENT="test", static_dir=None))

        assert app.state.search_service.registry.names == ["Baidu", "Bing", "Google", "Wx"]
        assert app.state.http_client is not None

    def test_loads_settings_and_configures_logging(
        self,
        monkeypatch: pytest.MonkeyPatch,
        test_settings: Settings,
        fake_registry: EngineRegistry,
    ):
        """Test the factory sets up logging when it loads settings itself."""
        configured: list[Settings] = []
        monkeypatch.setattr("metasearch.api.app.get_settings", lambda: test_settings)
        monkeypatch.setattr("metasearch.api.app.setup_logging", configured.append)

        app = create_app(registry=fake_registry)

        assert configured == [test_settings]
        assert app.state.settings is test_settings

    def test_explicit_settings_leave_logging_alone(
        self,
        monkeypatch: pytest.MonkeyPatch,
        test_settings: Settings,
        fake_registry: EngineRegistry,
    ):
        """Test callers passing settings keep their own logging setup."""
        configured: list[Settings] = []
        monkeypatch.setattr("metasearch.api.app.setup_logging", configured.append)

        create_app(settings=test_settings, registry=fake_registry)

        assert configured == []

    def test_invalid_configuration_rejected(self, fake_registry: EngineRegistry):
        """Test startup fails on an invalid configuration."""
        settings = Settings(_env_file=None, static_dir=None, default_engines=["Yahoo"])

        with pytest.raises(ConfigurationError, match="Yahoo"):
            create_app(settings=settings, registry=fake_registry)

    def test_docs_only_in_debug(self, fake_registry: EngineRegistry, test_settings: Settings):
        """Test API docs are exposed only in debug mode."""
        assert create_app(settings=test_settings, registry=fake_registry).docs_url == "/docs"

        quiet = test_settings.model_copy(update={"DEBUG": False})
        assert create_app(settings=quiet, registry=fake_registry).docs_url is None


class TestParseArgs:
    """Tests for command-line parsing."""

    def test_defaults_defer_to_settings(self):
        """Test unset options stay None so settings apply."""
        args = parse_args([])

        assert args.host is None
        assert args.port is None
        assert args.log_level is None

    def test_overrides(self):
        """Test options are parsed."""
        args = parse_args(["--host", "127.0.0.1", "--port", "9000", "--log-level", "DEBUG"])

        assert (args.host, args.port, args.log_level) == ("127.0.0.1", 9000, "DEBUG")
