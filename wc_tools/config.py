"""Shared configuration for WooCommerce MCP tools."""

import os
from pathlib import Path

from dotenv import load_dotenv

from wc_shared.constants import CREDENTIAL_ENV_VARS
from wc_shared.logging_setup import parse_level, setup_logger

load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parent.parent

API_TIMEOUT = float(os.getenv("WOOCOMMERCE_TIMEOUT", "15"))

LOG_DIR = Path(os.getenv("WC_MCP_LOG_DIR", str(PROJECT_ROOT / "logs")))
LOG_LEVEL = parse_level(os.getenv("WC_MCP_LOG_LEVEL", "INFO"))
LOGGER_NAME = "wc_mcp"

logger = setup_logger(LOGGER_NAME, LOG_DIR, "wc_mcp.log", level=LOG_LEVEL)


def read_credential_env() -> dict[str, str]:
    """Current values of the credential env vars (empty string when unset).

    Read at call time, never at import, so the authenticate tool always
    sees the live environment.
    """
    return {name: os.getenv(name, "") for name in CREDENTIAL_ENV_VARS}
