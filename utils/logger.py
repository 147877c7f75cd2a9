"""
Logging utility for the example render launcher.
Provides consistent logging format across all modules with modular file outputs.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from config import LOG_DIR, LOG_LEVEL

# Module-to-logfile mapping for organized debugging
MODULE_LOG_MAPPING = {
    "__main__": "main.log",
    "main": "main.log",
    "launcher": "launcher.log",
}

# Loggers that have already been configured (avoid duplicate handlers)
_configured_loggers = set()

def _ensure_log_directory():
    """Create log directory if it doesn't exist."""
    Path(LOG_DIR).mkdir(parents=True, exist_ok=True)

def _get_log_file_for_module(module_name: str) -> str:
    """
    Determine which log file a module should write to.

    Args:
        module_name: The module's __name__ value

    Returns:
        Log filename (not full path)
    """
    if module_name in MODULE_LOG_MAPPING:
        return MODULE_LOG_MAPPING[module_name]

    # Prefix match (e.g., launcher.runner -> launcher.log)
    for prefix, log_file in MODULE_LOG_MAPPING.items():
        if module_name.startswith(prefix):
            return log_file

    return "main.log"

def setup_logger(name: str) -> logging.Logger:
    """
    Set up a logger with modular file outputs and consistent formatting.

    Each module logs to:
    1. Its specific log file (e.g., launcher.log)
    2. The combined all.log file
    3. Console on stderr, at LOG_LEVEL

    Standard output is left alone: it belongs to the launcher's own output
    (e.g. the --list listing).

    Args:
        name: Name of the logger, typically __name__ of the module

    Returns:
        logging.Logger: Configured logger instance with modular handlers
    """
    logger = logging.getLogger(name)

    if name in _configured_loggers:
        return logger

    _configured_loggers.add(name)
    logger.setLevel(logging.DEBUG)  # Capture all levels, handlers will filter
    logger.propagate = False

    _ensure_log_directory()

    formatter = logging.Formatter(
        '%(asctime)s [%(name)s] %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, LOG_LEVEL.upper(), logging.INFO))
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # Module-specific file handler - DEBUG level for detailed troubleshooting
    module_file_path = os.path.join(LOG_DIR, _get_log_file_for_module(name))
    module_file_handler = RotatingFileHandler(
        module_file_path,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    module_file_handler.setLevel(logging.DEBUG)
    module_file_handler.setFormatter(formatter)
    logger.addHandler(module_file_handler)

    all_log_path = os.path.join(LOG_DIR, "all.log")
    all_file_handler = RotatingFileHandler(
        all_log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding='utf-8'
    )
    all_file_handler.setLevel(logging.DEBUG)
    all_file_handler.setFormatter(formatter)
    logger.addHandler(all_file_handler)

    return logger
