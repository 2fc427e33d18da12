"""Shared helpers: integer coercion, DataFrame checks and logging setup."""

from .coerce import as_integer
from .frames import validate_columns
from .logging import JsonFormatter, configure_logging

__all__ = [
    'as_integer',
    'validate_columns',
    'JsonFormatter',
    'configure_logging',
]
