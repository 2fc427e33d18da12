"""
FARS Summary Engine (Imperative Shell)

Loads the requested years through the reader and hands the record sets to
the pure counting logic in ``src/fars/analysis/summary.py``.

Package Location: src/fars/data/summary.py
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Union

import pandas as pd

from ..analysis.summary import summarize_counts
from .reader import fars_read_years

log = logging.getLogger(__name__)


def fars_summarize_years(
    years: Iterable[Any],
    data_dir: Optional[Union[str, Path]] = None,
) -> pd.DataFrame:
    """
    Count fatal crashes by month for each requested year.

    Years that cannot be loaded produce an ``InvalidYearWarning`` (see
    :func:`~fars.data.reader.fars_read_years`) and get no column.

    Args:
        years: Years to summarize.
        data_dir: Directory holding the accident files.

    Returns:
        DataFrame indexed by ``MONTH`` (1..12) with one integer count column
        per loaded year.  If no year loads, the table has no columns.
    """
    results = fars_read_years(years, data_dir=data_dir, stacklevel=3)
    present = [r.records for r in results if not r.absent]

    log.info(
        "Summarizing %d of %d requested years", len(present), len(results),
        extra={
            "loaded_years": [r.year for r in results if not r.absent],
            "absent_years": [r.year for r in results if r.absent],
        },
    )
    return summarize_counts(present)
