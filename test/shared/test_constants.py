"""Tests for wc_shared/constants.py — env var names, API root, messages."""

from wc_shared.constants import (
    AUTH_CONFIGURED_MESSAGE,
    CREDENTIAL_ENV_VARS,
    DEFAULT_CONTEXT,
    DEFAULT_PAGE,
    DEFAULT_PER_PAGE,
    JSON_HEADERS,
    REST_API_PATH,
    SESSION_NOT_CONFIGURED_MESSAGE,
)


def test_credential_env_vars_order():
    assert CREDENTIAL_ENV_VARS == (
        "WORDPRESS_SITE_URL",
        "WOOCOMMERCE_CONSUMER_KEY",
        "WOOCOMMERCE_CONSUMER_SECRET",
    )


def test_rest_api_path_is_wc_v3():
    assert REST_API_PATH == "/wp-json/wc/v3"


def test_json_headers_content_type():
    assert JSON_HEADERS == {"Content-Type": "application/json"}


def test_pagination_defaults():
    assert DEFAULT_PAGE == 1
    assert DEFAULT_PER_PAGE == 10
    assert DEFAULT_CONTEXT == "view"


def test_messages_are_nonempty_strings():
    for msg in [AUTH_CONFIGURED_MESSAGE, SESSION_NOT_CONFIGURED_MESSAGE]:
        assert isinstance(msg, str)
        assert msg


def test_session_message_tells_caller_what_to_do():
    assert "authenticate" in SESSION_NOT_CONFIGURED_MESSAGE
