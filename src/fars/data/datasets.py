"""
FARS Dataset Location (Imperative Shell)

Maps years to accident file names and resolves the directory those files
live in.

Package Location: src/fars/data/datasets.py

Data directory resolution order (evaluated at call time, never at import):

1. An explicit ``data_dir`` argument.
2. The ``FARS_DATA_DIR`` environment variable.
3. The sample datasets shipped in ``fars/extdata`` (2013–2015).
"""

import os
import re
from pathlib import Path
from typing import List, Optional, Union

from ..utils.coerce import as_integer

FILENAME_TEMPLATE = "accident_{year}.csv.bz2"
DATA_DIR_ENV = "FARS_DATA_DIR"

_FILENAME_RE = re.compile(r"^accident_(\d{4})\.csv\.bz2$")
_PACKAGED_DATA_DIR = Path(__file__).resolve().parent.parent / "extdata"

PathLike = Union[str, Path]


def make_filename(year) -> str:
    """Build the conventional FARS accident file name for *year*.

    The year is coerced to an integer first, so ``2015.7`` and ``"2015"``
    both give ``accident_2015.csv.bz2``.

    Raises:
        ValueError, TypeError: If *year* cannot be coerced to an integer.
    """
    return FILENAME_TEMPLATE.format(year=as_integer(year))


def resolve_data_dir(data_dir: Optional[PathLike] = None) -> Path:
    """Return the directory to read accident files from.

    Args:
        data_dir: Explicit directory.  Takes precedence over the
            ``FARS_DATA_DIR`` environment variable and the packaged data.

    Returns:
        Directory path.  Existence is not checked here; a missing file is
        reported by the reader with its full path.
    """
    if data_dir is not None:
        return Path(data_dir)
    env_dir = os.environ.get(DATA_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return _PACKAGED_DATA_DIR


def dataset_path(year, data_dir: Optional[PathLike] = None) -> Path:
    """Full path of the accident file for *year* inside the data directory."""
    return resolve_data_dir(data_dir) / make_filename(year)


def available_years(data_dir: Optional[PathLike] = None) -> List[int]:
    """
    List the years that have an accident file in the data directory.

    Only names matching ``accident_<yyyy>.csv.bz2`` exactly are counted.

    Args:
        data_dir: Directory to scan (see :func:`resolve_data_dir`).

    Returns:
        Sorted list of years.  Empty if the directory does not exist.
    """
    directory = resolve_data_dir(data_dir)
    if not directory.is_dir():
        return []

    years: List[int] = []
    for path in directory.iterdir():
        match = _FILENAME_RE.match(path.name)
        if match and path.is_file():
            years.append(int(match.group(1)))
    return sorted(years)
