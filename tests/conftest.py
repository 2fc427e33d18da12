from pathlib import Path

import pandas as pd
import pytest

from fars.data.datasets import DATA_DIR_ENV

# 2013: Iowa (19) and Texas (48), with every kind of coordinate sentinel.
ACCIDENTS_2013 = pd.DataFrame({
    'STATE':    [19,    19,    19,        48,      48,    19,    48],
    'ST_CASE':  [190001, 190002, 190003,  480001,  480002, 190004, 480003],
    'DAY':      [3,     17,    9,         1,       30,    22,    25],
    'MONTH':    [1,     1,     2,         3,       3,     3,     12],
    'YEAR':     [2013] * 7,
    'LATITUDE': [42.0,  41.5,  41.9,      99.9999, 31.0,  42.5,  30.0],
    'LONGITUD': [-93.5, -93.1, 999.9999,  -97.0,   -98.0, -94.0, -99.0],
    'FATALS':   [1,     2,     1,         1,       1,     3,     1],
})

# 2014: Iowa (19) and California (6); no Texas rows.
ACCIDENTS_2014 = pd.DataFrame({
    'STATE':    [19,    6,      6,      19],
    'ST_CASE':  [190001, 60001, 60002,  190002],
    'DAY':      [5,     11,     12,     4],
    'MONTH':    [1,     5,      5,      7],
    'YEAR':     [2014] * 4,
    'LATITUDE': [41.6,  34.0,   37.7,   43.1],
    'LONGITUD': [-91.5, -118.2, -122.4, -95.9],
    'FATALS':   [1,     1,      2,      1],
})


def write_accidents(directory: Path, year: int, df: pd.DataFrame) -> Path:
    path = directory / f"accident_{year}.csv.bz2"
    df.to_csv(path, index=False, compression='bz2')
    return path


@pytest.fixture(autouse=True)
def _no_data_dir_env(monkeypatch):
    monkeypatch.delenv(DATA_DIR_ENV, raising=False)


@pytest.fixture
def data_dir(tmp_path):
    directory = tmp_path / "fars_data"
    directory.mkdir()
    write_accidents(directory, 2013, ACCIDENTS_2013)
    write_accidents(directory, 2014, ACCIDENTS_2014)
    return directory
