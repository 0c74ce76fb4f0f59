"""Tests for wc_tools/session.py — configure, env fallback, atomic replace."""

import logging

import pytest
from pydantic import ValidationError

from wc_tools.errors import MissingCredentials, SessionNotConfigured
from wc_tools.session import Session, SessionState, build_base_url


# ---------------------------------------------------------------------------
# build_base_url
# ---------------------------------------------------------------------------

class TestBuildBaseUrl:

    def test_appends_rest_root(self):
        assert build_base_url("https://shop.example.com") == "https://shop.example.com/wp-json/wc/v3"

    def test_strips_one_trailing_slash(self):
        assert build_base_url("https://shop.example.com/") == "https://shop.example.com/wp-json/wc/v3"

    def test_strips_only_one_slash(self):
        assert build_base_url("https://shop.example.com//") == "https://shop.example.com//wp-json/wc/v3"

    def test_keeps_subdirectory_installs(self):
        assert build_base_url("https://example.com/store/") == "https://example.com/store/wp-json/wc/v3"


# ---------------------------------------------------------------------------
# Session.configure
# ---------------------------------------------------------------------------

class TestConfigure:

    def test_explicit_arguments(self):
        s = Session()
        state = s.configure(site_url="https://a.example", consumer_key="ck", consumer_secret="cs")

        assert state.base_url == "https://a.example/wp-json/wc/v3"
        assert state.auth == ("ck", "cs")
        assert state.headers == {"Content-Type": "application/json"}
        assert s.state is state

    def test_reads_environment(self, mock_env_vars):
        s = Session()
        state = s.configure()

        assert state.base_url == "https://shop.example.com/wp-json/wc/v3"
        assert state.consumer_key == "ck_test_123"
        assert state.consumer_secret == "cs_test_secret_456"

    def test_arguments_override_environment(self, mock_env_vars):
        s = Session()
        state = s.configure(site_url="https://other.example", consumer_key="ck_other")

        assert state.base_url == "https://other.example/wp-json/wc/v3"
        assert state.consumer_key == "ck_other"
        assert state.consumer_secret == "cs_test_secret_456"

    @pytest.mark.parametrize("missing", ["site_url", "consumer_key", "consumer_secret"])
    def test_any_missing_value_raises(self, missing):
        values = {"site_url": "https://a.example", "consumer_key": "ck", "consumer_secret": "cs"}
        values[missing] = None
        s = Session()

        with pytest.raises(MissingCredentials) as exc_info:
            s.configure(**values)

        msg = str(exc_info.value)
        assert "WORDPRESS_SITE_URL" in msg
        assert "WOOCOMMERCE_CONSUMER_KEY" in msg
        assert "WOOCOMMERCE_CONSUMER_SECRET" in msg
        assert not s.is_configured

    def test_failed_configure_keeps_previous_state(self):
        s = Session()
        first = s.configure(site_url="https://a.example", consumer_key="ck", consumer_secret="cs")

        with pytest.raises(MissingCredentials):
            s.configure(site_url="https://b.example", consumer_key="", consumer_secret="")

        assert s.state is first

    def test_second_configure_replaces_first(self):
        s = Session()
        s.configure(site_url="https://a.example", consumer_key="ck_a", consumer_secret="cs_a")
        s.configure(site_url="https://b.example/", consumer_key="ck_b", consumer_secret="cs_b")

        assert s.state.base_url == "https://b.example/wp-json/wc/v3"
        assert s.state.auth == ("ck_b", "cs_b")

    def test_secret_is_not_logged(self, caplog):
        s = Session()
        with caplog.at_level(logging.DEBUG, logger="wc_mcp"):
            s.configure(site_url="https://a.example", consumer_key="ck", consumer_secret="very-secret")

        assert "very-secret" not in caplog.text
        assert "https://a.example/wp-json/wc/v3" in caplog.text


# ---------------------------------------------------------------------------
# State access
# ---------------------------------------------------------------------------

class TestState:

    def test_unconfigured_state_raises(self):
        with pytest.raises(SessionNotConfigured, match="call authenticate first"):
            Session().state

    def test_clear(self, session):
        assert session.is_configured
        session.clear()
        assert not session.is_configured

    def test_state_is_frozen(self, session):
        with pytest.raises(ValidationError):
            session.state.base_url = "https://evil.example"

    def test_secret_hidden_from_repr(self):
        state = SessionState(base_url="https://a.example/wp-json/wc/v3", consumer_key="ck", consumer_secret="hush")
        assert "hush" not in repr(state)
