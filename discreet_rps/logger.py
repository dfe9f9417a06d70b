"""
Logging setup for the simulator.

Engine modules log through children of the "discreet_rps" logger; only the
driver attaches handlers, once, from the `logging` section of the config.
"""
import logging
import sys
from pathlib import Path
from typing import Any, Dict

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger_from_config(config: Dict[str, Any], name: str = "discreet_rps") -> logging.Logger:
    """
    Configure the package logger.

    Args:
        config: Dict with optional 'level' (DEBUG, INFO, ...; unknown names
            mean INFO) and 'file' (extra log file path) keys
        name: Logger name

    Returns:
        logging.Logger: Configured logger
    """
    level = getattr(logging, str(config.get('level') or 'INFO').upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        formatter = logging.Formatter(LOG_FORMAT)
        handlers = [logging.StreamHandler(sys.stdout)]
        log_file = config.get('file')
        if log_file:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
        for handler in handlers:
            handler.setFormatter(formatter)
            logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)
    return logger
