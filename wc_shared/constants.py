"""Shared constants for the WooCommerce MCP server."""

# Environment variables read by the authenticate tool
ENV_SITE_URL = "WORDPRESS_SITE_URL"
ENV_CONSUMER_KEY = "WOOCOMMERCE_CONSUMER_KEY"
ENV_CONSUMER_SECRET = "WOOCOMMERCE_CONSUMER_SECRET"

CREDENTIAL_ENV_VARS = (ENV_SITE_URL, ENV_CONSUMER_KEY, ENV_CONSUMER_SECRET)

# WooCommerce REST API v3 root, appended to the site URL
REST_API_PATH = "/wp-json/wc/v3"

JSON_HEADERS = {"Content-Type": "application/json"}

# Default pagination used by families that declare one
DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10
DEFAULT_CONTEXT = "view"

# Messages
AUTH_CONFIGURED_MESSAGE = "Authentication configured"
SESSION_NOT_CONFIGURED_MESSAGE = "call authenticate first"
