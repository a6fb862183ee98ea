"""Tests for environment-driven configuration."""

import pytest

from rpncalc.config import Config
from rpncalc.exceptions import ConfigurationError


class TestConfig:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("RPNCALC_MAX_EXPRESSION_LENGTH", raising=False)
        monkeypatch.delenv("RPNCALC_MCP_PORT", raising=False)
        assert Config.get_max_expression_length() == 10000
        assert Config.get_mcp_port() == 8020

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("RPNCALC_WEB_PORT", "9000")
        monkeypatch.setenv("RPNCALC_WEB_HOST", "127.0.0.1")
        assert Config.get_web_port() == 9000
        assert Config.get_web_host() == "127.0.0.1"

    def test_invalid_integer(self, monkeypatch):
        monkeypatch.setenv("RPNCALC_MAX_EXPRESSION_LENGTH", "lots")
        with pytest.raises(ConfigurationError, match="must be an integer"):
            Config.get_max_expression_length()

    def test_non_positive_limit(self, monkeypatch):
        monkeypatch.setenv("RPNCALC_MAX_EXPRESSION_LENGTH", "0")
        with pytest.raises(ConfigurationError, match="must be positive"):
            Config.get_max_expression_length()

    def test_test_mode_takes_precedence(self, monkeypatch):
        monkeypatch.setenv("RPNCALC_MCP_PORT", "9100")
        Config.set_test_mode(mcp_port=9200)
        assert Config.get_mcp_port() == 9200

        Config.clear_test_mode()
        assert Config.get_mcp_port() == 9100

    def test_unknown_test_mode_key(self):
        with pytest.raises(ConfigurationError, match="Unknown configuration keys"):
            Config.set_test_mode(colour="blue")
