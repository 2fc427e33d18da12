"""
FARS Data Package (Imperative Shell)

This package handles file location and reading for the FARS accident
datasets.

Modules:
- datasets: Filename convention, data directory resolution, year discovery
- reader:   Single-file reader and the per-year record-set loader
- summary:  Month x year crash-count summaries over several years
"""

from .datasets import (
    DATA_DIR_ENV,
    make_filename,
    resolve_data_dir,
    dataset_path,
    available_years,
)

from .reader import (
    FarsFileNotFoundError,
    InvalidYearWarning,
    YearResult,
    fars_read,
    fars_read_years,
)

from .summary import fars_summarize_years

__all__ = [
    # Datasets
    'DATA_DIR_ENV',
    'make_filename',
    'resolve_data_dir',
    'dataset_path',
    'available_years',
    # Reader
    'FarsFileNotFoundError',
    'InvalidYearWarning',
    'YearResult',
    'fars_read',
    'fars_read_years',
    # Summary
    'fars_summarize_years',
]
