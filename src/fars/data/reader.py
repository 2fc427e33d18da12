"""
FARS Data Reader (Imperative Shell)

Reads accident files from disk and assembles per-year record sets for the
functional core in ``src/fars/analysis/summary.py``.

Package Location: src/fars/data/reader.py

Per-year isolation:
    ``fars_read_years`` returns one :class:`YearResult` per requested year,
    in request order.  A year that cannot be loaded is not dropped: it is
    returned with ``records=None`` and the reason in ``error``, and an
    :class:`InvalidYearWarning` naming the year is issued.  Only
    data-related failures (``OSError``, ``EOFError`` from a truncated or
    empty ``.bz2`` file, ``ValueError``, ``KeyError``, ``TypeError``) are
    downgraded this way; anything else propagates.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

import pandas as pd

from ..analysis.summary import project_year
from .datasets import dataset_path

log = logging.getLogger(__name__)

# Failures that mean "this year's data is not usable"
_YEAR_ERRORS = (OSError, EOFError, ValueError, KeyError, TypeError)


class FarsFileNotFoundError(FileNotFoundError):
    """Raised when an accident file does not exist."""
    pass


class InvalidYearWarning(UserWarning):
    """Issued when one year of a multi-year read could not be loaded."""
    pass


@dataclass(frozen=True, eq=False)
class YearResult:
    """Outcome of loading one requested year.

    Attributes:
        year: The year as requested by the caller.
        records: ``[MONTH, year]`` record set, or ``None`` when absent.
        error: Why the year is absent; ``None`` when present.
    """

    year: Any
    records: Optional[pd.DataFrame] = None
    error: Optional[str] = None

    @property
    def absent(self) -> bool:
        return self.records is None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def fars_read(filename: Union[str, Path]) -> pd.DataFrame:
    """
    Read one FARS accident file into a DataFrame.

    Compression is inferred from the file suffix (``.bz2`` for the standard
    files).  The whole file is parsed in one pass so pandas does not emit
    mixed-dtype warnings.

    Args:
        filename: Path to the accident file.

    Returns:
        DataFrame with one row per fatal crash.

    Raises:
        FarsFileNotFoundError: If *filename* does not exist.  The message
            contains the path exactly as given.
    """
    if not Path(filename).exists():
        raise FarsFileNotFoundError(f"file '{filename}' does not exist")

    df = pd.read_csv(filename, low_memory=False)
    log.debug(
        "Read %d rows from %s", len(df), filename,
        extra={"path": str(filename), "rows": len(df)},
    )
    return df


def fars_read_years(
    years: Iterable[Any],
    data_dir: Optional[Union[str, Path]] = None,
    stacklevel: int = 2,
) -> List[YearResult]:
    """
    Load the ``MONTH``/``year`` record set for each requested year.

    Args:
        years: Years to read (any integer-coercible values).  A single
            year is treated as a one-element list.
        data_dir: Directory holding the accident files.  ``None`` uses
            ``FARS_DATA_DIR`` or the packaged sample data.
        stacklevel: Passed to ``warnings.warn`` so the warning points at
            the caller's code; wrappers add one per extra frame.

    Returns:
        One :class:`YearResult` per input year, in input order.  Failed
        years are present with ``absent == True``.

    Warns:
        InvalidYearWarning: Once per year that could not be loaded, with the
            message ``"invalid year: <year>"``.
    """
    results: List[YearResult] = []
    for year in _as_year_list(years):
        try:
            raw = fars_read(dataset_path(year, data_dir))
            records = project_year(raw, year)
        except _YEAR_ERRORS as exc:
            log.warning(
                "invalid year: %s (%s)", year, exc,
                extra={"year": str(year), "error": str(exc)},
            )
            warnings.warn(f"invalid year: {year}", InvalidYearWarning,
                          stacklevel=stacklevel)
            results.append(YearResult(year=year, error=str(exc)))
            continue
        results.append(YearResult(year=year, records=records))
    return results


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _as_year_list(years: Any) -> List[Any]:
    """Accept a single year as well as any iterable of years."""
    if isinstance(years, (str, bytes)) or not hasattr(years, '__iter__'):
        return [years]
    return list(years)
