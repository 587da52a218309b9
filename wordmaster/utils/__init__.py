"""Utils module."""

from .parsing import TextParser
from .logger import setup_logger, get_logger

__all__ = [
    'TextParser',
    'setup_logger',
    'get_logger',
]
