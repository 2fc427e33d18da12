"""
FARS Crash Count Summaries (Functional Core)

Pure functions only. No I/O, no side effects beyond logging.
Input/output is DataFrames.

Package Location: src/fars/analysis/summary.py

Counting Rule:
    Every accident row counts as one fatal crash.  Rows are tagged with the
    year that was *requested* (not the file's own ``YEAR`` column), then
    counted once in a single ``groupby(["year", "MONTH"])``.  Because counting
    happens at exactly one point, the pivoted table cannot contain duplicate
    (year, month) cells.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

import pandas as pd

from ..utils.coerce import as_integer

log = logging.getLogger(__name__)

MONTHS: List[int] = list(range(1, 13))

# Column layout of a year-tagged record set.
RECORD_SET_COLUMNS: List[str] = ['MONTH', 'year']


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def project_year(df: pd.DataFrame, year) -> pd.DataFrame:
    """
    Tag every accident row with *year* and keep only ``MONTH`` and ``year``.

    Args:
        df: Raw accident DataFrame; must contain a ``MONTH`` column.
        year: Requested year; coerced to ``int``.

    Returns:
        New DataFrame with exactly the columns ``[MONTH, year]``.

    Raises:
        KeyError: If ``MONTH`` is missing.
        ValueError, TypeError: If *year* cannot be coerced to an integer.
    """
    year = as_integer(year)
    if 'MONTH' not in df.columns:
        raise KeyError("accident data has no MONTH column")
    return df.assign(year=year)[RECORD_SET_COLUMNS].reset_index(drop=True)


def summarize_counts(record_sets: Iterable[pd.DataFrame]) -> pd.DataFrame:
    """
    Count crashes per (year, month) and pivot years into columns.

    Args:
        record_sets: Year-tagged record sets as produced by
            :func:`project_year`.  ``None`` entries are skipped.

    Returns:
        DataFrame indexed by ``MONTH`` (exactly 1..12), one ``int64`` column
        per distinct year (ascending, column index named ``year``).  Months
        without crashes are 0.  With no record sets the table has 12 rows and
        no columns.
    """
    frames = [f for f in record_sets if f is not None]
    if not frames:
        return _empty_summary()

    combined = pd.concat(
        [f[RECORD_SET_COLUMNS] for f in frames], ignore_index=True
    )
    combined['MONTH'] = pd.to_numeric(combined['MONTH'], errors='coerce')

    out_of_range = ~combined['MONTH'].isin(MONTHS)
    if out_of_range.any():
        log.warning(
            "Dropping %d rows with MONTH outside 1-12", int(out_of_range.sum()),
            extra={"dropped_rows": int(out_of_range.sum())},
        )
        combined = combined.loc[~out_of_range].copy()

    if combined.empty:
        return _empty_summary()

    combined['MONTH'] = combined['MONTH'].astype(int)
    counts = combined.groupby(['year', 'MONTH']).size().rename('n').reset_index()

    table = counts.pivot(index='MONTH', columns='year', values='n')
    table = table.reindex(index=MONTHS).fillna(0).astype('int64')
    table.index.name = 'MONTH'
    table.columns.name = 'year'
    return table


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _empty_summary() -> pd.DataFrame:
    return pd.DataFrame(
        index=pd.Index(MONTHS, name='MONTH'),
        columns=pd.Index([], name='year', dtype='int64'),
    )
