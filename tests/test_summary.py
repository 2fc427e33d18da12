import logging

import pandas as pd
import pytest

from fars.analysis.summary import MONTHS, project_year, summarize_counts
from fars.data.datasets import dataset_path
from fars.data.reader import InvalidYearWarning, fars_read
from fars.data.summary import fars_summarize_years

from conftest import ACCIDENTS_2013, ACCIDENTS_2014


# ---------------------------------------------------------------------------
# Functional core
# ---------------------------------------------------------------------------

def test_project_year_keeps_month_and_year():
    projected = project_year(ACCIDENTS_2013, "2013")
    assert list(projected.columns) == ['MONTH', 'year']
    assert projected['MONTH'].tolist() == ACCIDENTS_2013['MONTH'].tolist()
    assert set(projected['year']) == {2013}
    assert 'year' not in ACCIDENTS_2013.columns


def test_project_year_requires_month():
    with pytest.raises(KeyError):
        project_year(ACCIDENTS_2013.drop(columns=['MONTH']), 2013)


def test_summarize_counts_pivots_years_into_columns():
    table = summarize_counts([
        project_year(ACCIDENTS_2014, 2014),
        project_year(ACCIDENTS_2013, 2013),
    ])

    assert table.index.tolist() == MONTHS
    assert table.index.name == 'MONTH'
    assert table.columns.tolist() == [2013, 2014]
    assert table[2013].tolist() == [2, 1, 3, 0, 0, 0, 0, 0, 0, 0, 0, 1]
    assert table[2014].tolist() == [1, 0, 0, 0, 2, 0, 1, 0, 0, 0, 0, 0]
    assert all(pd.api.types.is_integer_dtype(t) for t in table.dtypes)


def test_summarize_counts_skips_none_entries():
    table = summarize_counts([None, project_year(ACCIDENTS_2014, 2014), None])
    assert table.columns.tolist() == [2014]
    assert table[2014].sum() == len(ACCIDENTS_2014)


def test_summarize_counts_with_nothing_is_twelve_empty_rows():
    table = summarize_counts([])
    assert table.shape == (12, 0)
    assert table.index.tolist() == MONTHS


def test_summarize_counts_drops_unknown_months(caplog):
    records = pd.DataFrame({'MONTH': [1, 1, 99, 0], 'year': [2015] * 4})
    with caplog.at_level(logging.WARNING, logger="fars"):
        table = summarize_counts([records])

    assert table.shape == (12, 1)
    assert table[2015].sum() == 2
    assert "Dropping 2 rows" in caplog.text


# ---------------------------------------------------------------------------
# Imperative shell
# ---------------------------------------------------------------------------

def test_fars_summarize_years_returns_month_by_year_counts(data_dir):
    table = fars_summarize_years([2013, 2014], data_dir=data_dir)

    assert isinstance(table, pd.DataFrame)
    assert table.shape == (12, 2)
    assert table.columns.tolist() == [2013, 2014]
    assert (table >= 0).all().all()
    assert table[2013].sum() == len(ACCIDENTS_2013)
    assert table[2014].sum() == len(ACCIDENTS_2014)


def test_fars_summarize_years_leaves_out_absent_years(data_dir):
    with pytest.warns(InvalidYearWarning, match="invalid year: 2000"):
        table = fars_summarize_years([2000, 2014], data_dir=data_dir)
    assert table.columns.tolist() == [2014]


def test_fars_summarize_years_all_absent(data_dir):
    with pytest.warns(InvalidYearWarning):
        table = fars_summarize_years([1990, 1991], data_dir=data_dir)
    assert table.shape == (12, 0)


def test_fars_summarize_years_packaged_totals_match_files():
    table = fars_summarize_years([2013, 2014])

    assert table.shape == (12, 2)
    for year in (2013, 2014):
        assert table[year].sum() == len(fars_read(dataset_path(year)))


def test_fars_summarize_years_skips_truncated_bz2(data_dir):
    path = data_dir / "accident_2017.csv.bz2"
    ACCIDENTS_2013.to_csv(path, index=False, compression='bz2')
    data = path.read_bytes()
    path.write_bytes(data[:len(data) // 2])

    with pytest.warns(InvalidYearWarning, match="invalid year: 2017"):
        table = fars_summarize_years([2013, 2017, 2014], data_dir=data_dir)
    assert table.columns.tolist() == [2013, 2014]


def test_fars_summarize_years_warning_points_at_caller(data_dir):
    with pytest.warns(InvalidYearWarning) as record:
        fars_summarize_years([2000], data_dir=data_dir)
    year_warnings = [w for w in record if issubclass(w.category, InvalidYearWarning)]
    assert year_warnings[0].filename == __file__
