"""
FARS Crash Locations (Functional Core)

Pure functions only. No I/O, no side effects.
Input/output is DataFrames and plain tuples.

Package Location: src/fars/analysis/locations.py

Coordinate Sentinel Rule:
    FARS encodes unknown positions with out-of-range values (e.g.
    ``LATITUDE = 99.9999``, ``LONGITUD = 999.9999``).  Any ``LONGITUD`` above
    900 or ``LATITUDE`` above 90 is replaced with NaN so the point is
    excluded from plotting and from the map extent.  The two columns are
    masked independently: a row with a valid latitude and a sentinel
    longitude keeps its latitude.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from ..utils.coerce import as_integer
from ..utils.frames import validate_columns

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

LONGITUDE_SENTINEL: float = 900.0
LATITUDE_SENTINEL: float = 90.0

COORDINATE_COLUMNS: List[str] = ['LONGITUD', 'LATITUDE']

# FARS state codes (FIPS-based, plus 43 Puerto Rico and 52 Virgin Islands).
_STATE_NAMES: Dict[int, str] = {
    1: 'Alabama',         2: 'Alaska',          4: 'Arizona',
    5: 'Arkansas',        6: 'California',      8: 'Colorado',
    9: 'Connecticut',    10: 'Delaware',       11: 'District of Columbia',
    12: 'Florida',       13: 'Georgia',        15: 'Hawaii',
    16: 'Idaho',         17: 'Illinois',       18: 'Indiana',
    19: 'Iowa',          20: 'Kansas',         21: 'Kentucky',
    22: 'Louisiana',     23: 'Maine',          24: 'Maryland',
    25: 'Massachusetts', 26: 'Michigan',       27: 'Minnesota',
    28: 'Mississippi',   29: 'Missouri',       30: 'Montana',
    31: 'Nebraska',      32: 'Nevada',         33: 'New Hampshire',
    34: 'New Jersey',    35: 'New Mexico',     36: 'New York',
    37: 'North Carolina', 38: 'North Dakota',  39: 'Ohio',
    40: 'Oklahoma',      41: 'Oregon',         42: 'Pennsylvania',
    43: 'Puerto Rico',   44: 'Rhode Island',   45: 'South Carolina',
    46: 'South Dakota',  47: 'Tennessee',      48: 'Texas',
    49: 'Utah',          50: 'Vermont',        51: 'Virginia',
    52: 'Virgin Islands', 53: 'Washington',    54: 'West Virginia',
    55: 'Wisconsin',     56: 'Wyoming',
}


class InvalidStateError(ValueError):
    """Raised when a state number is not present in the accident data."""
    pass


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def state_name(state_num: int) -> str:
    """Human-readable name for a FARS state code (``'State 99'`` if unknown)."""
    return _STATE_NAMES.get(int(state_num), f'State {int(state_num)}')


def validate_state(df: pd.DataFrame, state_num) -> int:
    """
    Coerce *state_num* and check it against the states present in *df*.

    Args:
        df: Accident DataFrame with a ``STATE`` column.
        state_num: Requested state code (any integer-coercible value).

    Returns:
        The state code as ``int``.

    Raises:
        InvalidStateError: If *state_num* is not integer-coercible or does
            not occur in ``df['STATE']``.
        ValueError: If ``STATE`` is missing from *df*.
    """
    validate_columns(df, required=['STATE'], name='accident data')
    try:
        state = as_integer(state_num)
    except (TypeError, ValueError) as exc:
        raise InvalidStateError(f"invalid STATE number: {state_num}") from exc

    present = pd.to_numeric(df['STATE'], errors='coerce').dropna().astype(int)
    if state not in set(present.unique().tolist()):
        raise InvalidStateError(f"invalid STATE number: {state}")
    return state


def filter_state(df: pd.DataFrame, state_num: int) -> pd.DataFrame:
    """Return a copy of the rows of *df* whose ``STATE`` equals *state_num*."""
    validate_columns(df, required=['STATE'], name='accident data')
    states = pd.to_numeric(df['STATE'], errors='coerce')
    return df.loc[states == int(state_num)].copy()


def mask_coordinate_sentinels(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace out-of-range coordinate sentinels with NaN.

    Args:
        df: DataFrame with ``LONGITUD`` and ``LATITUDE`` columns.

    Returns:
        Copy of *df* with both columns as float, sentinels set to NaN.
    """
    validate_columns(df, required=COORDINATE_COLUMNS, name='accident data')
    out = df.copy()
    lon = pd.to_numeric(out['LONGITUD'], errors='coerce').astype(float)
    lat = pd.to_numeric(out['LATITUDE'], errors='coerce').astype(float)
    out['LONGITUD'] = lon.where(lon <= LONGITUDE_SENTINEL, np.nan)
    out['LATITUDE'] = lat.where(lat <= LATITUDE_SENTINEL, np.nan)
    return out


def coordinate_bounds(
    df: pd.DataFrame,
) -> Optional[Tuple[Tuple[float, float], Tuple[float, float]]]:
    """
    Longitude and latitude ranges of the valid coordinates in *df*.

    NaNs are ignored, matching ``range(..., na.rm = TRUE)`` semantics.

    Returns:
        ``((lon_min, lon_max), (lat_min, lat_max))``, or ``None`` if either
        column has no valid value.
    """
    validate_columns(df, required=COORDINATE_COLUMNS, name='accident data')
    lon = df['LONGITUD'].dropna()
    lat = df['LATITUDE'].dropna()
    if lon.empty or lat.empty:
        return None
    return (
        (float(lon.min()), float(lon.max())),
        (float(lat.min()), float(lat.max())),
    )

