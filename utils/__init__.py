"""Utilities package. """

from .logger import configure, get_logger, log_error, log_warning, log_info, log_debug, setup_logger

__all__ = [
    'configure',
    'get_logger',
    'log_error',
    'log_warning',
    'log_info',
    'log_debug',
    'setup_logger',
]
