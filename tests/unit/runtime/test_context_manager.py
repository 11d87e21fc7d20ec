"""Unit tests for the application context."""

import pytest

from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.context import (
    AppContext,
    get_config,
    get_context,
    set_config,
    with_context,
)


class TestContextManager:
    def test_default_context_available(self):
        context = get_context()
        config = get_config()

        assert isinstance(context, AppContext)
        assert isinstance(config, ConfigData)
        assert context.config is config

    def test_with_context_override_single_level(self):
        original_config = get_config()
        original_url = original_config.database.url

        override = ConfigData()
        override.database.url = "sqlite://"

        with with_context(override):
            assert get_config().database.url == "sqlite://"
            assert get_config() is not original_config

        assert get_config().database.url == original_url
        assert get_config() is original_config

    def test_unset_fields_are_inherited(self):
        original_config = get_config()

        override = ConfigData()
        override.app.port = 9100

        with with_context(override):
            config = get_config()
            assert config.app.port == 9100
            assert config.app.host == original_config.app.host
            assert config.logging == original_config.logging

    def test_nested_overrides(self):
        original_port = get_config().app.port
        original_level = get_config().logging.level

        level1 = ConfigData()
        level1.app.port = 8001
        level2 = ConfigData()
        level2.logging.level = "DEBUG"

        with with_context(level1):
            with with_context(level2):
                assert get_config().app.port == 8001
                assert get_config().logging.level == "DEBUG"
            assert get_config().logging.level == original_level
            assert get_config().app.port == 8001

        assert get_config().app.port == original_port

    def test_none_override_keeps_config(self):
        original_config = get_config()

        with with_context(None):
            assert get_config() is original_config

    def test_rejects_other_types(self):
        with pytest.raises(ValueError, match="config_override must be ConfigData"):
            with with_context({"app": {"port": 1}}):  # type: ignore[arg-type]
                pass

    def test_set_config_replaces_configuration(self):
        original_config = get_config()
        replacement = ConfigData()
        replacement.app.host = "replaced"

        try:
            set_config(replacement)
            assert get_config() is replacement
        finally:
            set_config(original_config)

        assert get_config() is original_config
