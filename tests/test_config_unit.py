"""Unit tests for configuration management."""

import os
from unittest.mock import patch

import pytest

from atom2rss.config import DEFAULT_INDENT, Config, FetchConfig, OutputConfig


class TestConfigUnit:
    """Unit tests for Config class."""

    def test_defaults_when_no_env_vars(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config()

            assert config.get_fetch_config() == FetchConfig()
            assert config.get_output_config() == OutputConfig()
            assert config.log_level == "INFO"

    def test_fetch_config_from_env(self):
        env = {
            "FETCH_TIMEOUT": "5",
            "FETCH_PROXY_TEMPLATE": " https://proxy.example/raw?url={url} ",
        }
        with patch.dict(os.environ, env, clear=True):
            fetch_config = Config().get_fetch_config()

        assert fetch_config.timeout == 5
        assert fetch_config.proxy_template == "https://proxy.example/raw?url={url}"

    @pytest.mark.parametrize("timeout", ["abc", "0", "-3"])
    def test_invalid_timeout_raises(self, timeout):
        with patch.dict(os.environ, {"FETCH_TIMEOUT": timeout}, clear=True):
            with pytest.raises(ValueError):
                Config().get_fetch_config()

    def test_output_config_from_env(self):
        env = {
            "OUTPUT_TIMEZONE": "Europe/Rome",
            "OUTPUT_INDENT": "2",
            "OUTPUT_XML_DECLARATION": "true",
        }
        with patch.dict(os.environ, env, clear=True):
            output_config = Config().get_output_config()

        assert output_config == OutputConfig(
            timezone="Europe/Rome", indent="  ", xml_declaration=True
        )

    def test_literal_indent_kept(self):
        with patch.dict(os.environ, {"OUTPUT_INDENT": "\t"}, clear=True):
            assert Config().get_output_config().indent == "\t"

    def test_unknown_timezone_raises(self):
        with patch.dict(os.environ, {"OUTPUT_TIMEZONE": "Mars/Olympus"}, clear=True):
            with pytest.raises(ValueError):
                Config().get_output_config()

    def test_default_indent_is_four_spaces(self):
        assert DEFAULT_INDENT == "    "

    def test_log_level_from_env(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "DEBUG"}, clear=True):
            assert Config().log_level == "DEBUG"

    def test_handler_configures_logging_from_config(self):
        import importlib

        import atom2rss.handler as handler_module

        with (
            patch.dict(os.environ, {"LOG_LEVEL": "WARNING"}, clear=True),
            patch("atom2rss.logging_config.setup_structured_logging") as mock_setup,
        ):
            importlib.reload(handler_module)

        mock_setup.assert_called_once_with("WARNING")
        importlib.reload(handler_module)
