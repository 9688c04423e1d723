"""
Logging utility for the application.
"""

import logging
import os
from datetime import datetime

LOGGER_NAME = 'SigmaFit'


def setup_logger(log_dir=None, log_level=logging.INFO):
    """
    Set up the application logger.

    Warnings and errors always go to the console. A timestamped log file
    receiving every record at `log_level` is added when `log_dir` is given.

    Parameters
    ----------
    log_dir : str, optional
        Directory to store log files. No file is written if None.
    log_level : int
        Logging level (logging.DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns
    -------
    logger : logging.Logger
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(max(log_level, logging.WARNING))
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logger.addHandler(console_handler)

    if log_dir:
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)

        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        log_file = os.path.join(log_dir, f'sigma_fit_{timestamp}.log')

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

        logger.info("=" * 60)
        logger.info("Sigma Fit started")
        logger.info(f"Log file: {log_file}")
        logger.info("=" * 60)

    return logger


# Global logger instance
_logger = None


def get_logger():
    """Get or create the global logger instance."""
    global _logger
    if _logger is None:
        _logger = setup_logger()
    return _logger


def configure(log_dir=None, log_level=logging.INFO):
    """Replace the global logger configuration."""
    global _logger
    _logger = setup_logger(log_dir=log_dir, log_level=log_level)
    return _logger


def log_error(message, exception=None):
    """
    Log an error message with optional exception details.

    Parameters
    ----------
    message : str
        Error message
    exception : Exception, optional
        Exception object to log
    """
    logger = get_logger()
    if exception:
        logger.error(f"{message}: {str(exception)}", exc_info=exception)
    else:
        logger.error(message)


def log_warning(message):
    """Log a warning message."""
    get_logger().warning(message)


def log_info(message):
    """Log an info message."""
    get_logger().info(message)


def log_debug(message):
    """Log a debug message."""
    get_logger().debug(message)
