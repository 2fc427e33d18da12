"""
FARS - Fatality Analysis Reporting System crash summaries

A small Python package for loading yearly FARS accident files, counting
fatal crashes by year and month, and mapping crash locations for a state,
using the Functional Core, Imperative Shell architecture.

Structure:
- data/     : Imperative Shell (file location, reading)
- analysis/ : Functional Core (pure DataFrame transformations)
- plotting/ : (plotting functions)
- reports/  : (orchestration, CSV/HTML output)
"""

from .data import (
    FarsFileNotFoundError,
    InvalidYearWarning,
    YearResult,
    available_years,
    fars_read,
    fars_read_years,
    fars_summarize_years,
    make_filename,
)
from .analysis import InvalidStateError
from .plotting import BaseMap
from .reports import fars_map_state, generate_reports

__version__ = "0.1.0"

__all__ = [
    'FarsFileNotFoundError',
    'InvalidYearWarning',
    'InvalidStateError',
    'YearResult',
    'BaseMap',
    'available_years',
    'fars_read',
    'fars_read_years',
    'fars_summarize_years',
    'fars_map_state',
    'generate_reports',
    'make_filename',
]
