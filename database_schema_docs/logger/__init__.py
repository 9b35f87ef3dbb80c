"""Centralized logging configuration for the database schema docs exporter.

This module provides a configured logger instance that can be imported and used
throughout the application. Progress messages go to stdout and warnings or
errors go to stderr, both through a queue handler, using settings from
logging_config.json.

Usage:
    from database_schema_docs.logger import logger

    logger.info("Fetching table details...")
    logger.error("Error: %s", message)
"""

from .logger import logger, setup_logger

__all__ = ["logger", "setup_logger"]
