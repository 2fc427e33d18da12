"""
FARS Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept DataFrames and return transformed data.

Modules:
- summary:   Year tagging and the month x year crash-count pivot
- locations: State validation/filtering and coordinate sentinel handling
"""

from .summary import (
    MONTHS,
    project_year,
    summarize_counts,
)

from .locations import (
    InvalidStateError,
    state_name,
    validate_state,
    filter_state,
    mask_coordinate_sentinels,
    coordinate_bounds,
)

__all__ = [
    # Summary
    'MONTHS',
    'project_year',
    'summarize_counts',
    # Locations
    'InvalidStateError',
    'state_name',
    'validate_state',
    'filter_state',
    'mask_coordinate_sentinels',
    'coordinate_bounds',
]
