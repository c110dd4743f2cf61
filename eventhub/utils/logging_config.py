"""Logging configuration for the application."""

import logging
import os
import sys

def setup_logging(level: str = None):
    """Configure logging for the application.

    Args:
        level: Root log level name. Falls back to LOG_LEVEL, then INFO.
    """
    level_name = (level or os.environ.get('LOG_LEVEL', 'INFO')).upper()
    log_level = getattr(logging, level_name, None)
    if not isinstance(log_level, int):
        raise ValueError(f"Invalid log level: {level_name}")

    # Create a formatter
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Create a console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    # Configure the root logger, replacing a handler from an earlier call
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in list(root_logger.handlers):
        if getattr(handler, '_eventhub_handler', False):
            root_logger.removeHandler(handler)
    console_handler._eventhub_handler = True
    root_logger.addHandler(console_handler)

    # Configure specific loggers
    loggers = [
        'eventhub.store.core',
        'eventhub.store.operations',
        'eventhub.query.engine',
    ]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(log_level)
        # Don't add handler here since it's already handled by root logger
