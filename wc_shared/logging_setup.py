"""Standardized logging setup for the WooCommerce MCP server."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


def setup_logger(
    name: str,
    log_dir: Path,
    log_filename: str,
    level: int = logging.INFO,
    max_bytes: int = 5_000_000,
    backup_count: int = 3,
) -> logging.Logger:
    """Create a logger with stderr + rotating file handlers.

    The console handler writes to stderr because stdout carries the
    stdio MCP protocol stream.

    Args:
        name: Logger name (e.g. "wc_mcp")
        log_dir: Directory for log files (created if not exists)
        log_filename: Log file name (e.g. "wc_mcp.log")
        level: Logging level
        max_bytes: Max size per log file before rotation
        backup_count: Number of backup files to keep

    Returns:
        Configured logger instance
    """
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        formatter = logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        file_handler = RotatingFileHandler(
            log_dir / log_filename,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def parse_level(value: str, default: int = logging.INFO) -> int:
    """Map a level name such as "debug" to its logging constant."""
    level = logging.getLevelName(value.strip().upper()) if value else default
    return level if isinstance(level, int) else default
