"""
FARS Report Generator (Imperative Shell)

Thin orchestration layer: resolves years to accident files, calls the reader
to fetch DataFrames, calls the functional core and plotting functions to
build tables and figures, and writes CSV/HTML.

Package Location: src/fars/reports/generators.py

Usage::

    from pathlib import Path
    from fars.reports.generators import ReportGenerator

    gen = ReportGenerator(output_dir=Path("reports"))
    gen.generate(years=[2013, 2014, 2015], states=[19, 48])
    # Writes:
    #   reports/summary_2013-2015.csv
    #   reports/state_19_2013.html ... reports/state_48_2015.html
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import plotly.graph_objects as go

from ..analysis.locations import (
    filter_state,
    mask_coordinate_sentinels,
    validate_state,
)
from ..data.datasets import dataset_path
from ..data.reader import fars_read
from ..data.summary import fars_summarize_years
from ..plotting.state_map import BaseMap, plot_state_map
from ..utils.coerce import as_integer

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def fars_map_state(
    state_num: Any,
    year: Any,
    data_dir: Optional[PathLike] = None,
    base_map: Optional[BaseMap] = None,
    show: bool = True,
) -> Optional[go.Figure]:
    """
    Map the fatal crashes of one state in one year.

    Crashes with ``LONGITUD > 900`` or ``LATITUDE > 90`` (FARS codes for an
    unknown position) are not drawn.

    Args:
        state_num: FARS state code, e.g. ``19`` for Iowa.
        year: Data year.
        data_dir: Directory holding the accident files.
        base_map: Geographic background; defaults to ``BaseMap()``.
        show: Display the figure with ``fig.show()``.

    Returns:
        The figure, or ``None`` when the state has no crashes to plot.

    Raises:
        FarsFileNotFoundError: If the year's accident file does not exist.
        InvalidStateError: If *state_num* does not occur in that year's data.
    """
    data = fars_read(dataset_path(year, data_dir))
    state = validate_state(data, state_num)

    data_sub = filter_state(data, state)
    if data_sub.empty:
        log.info(
            "no accidents to plot",
            extra={"state": state, "year": str(year)},
        )
        return None

    data_sub = mask_coordinate_sentinels(data_sub)
    fig = plot_state_map(data_sub, state, as_integer(year), base_map=base_map)

    if show:
        fig.show()
    return fig


class ReportGenerator:
    """
    Generates and saves FARS summary tables and state crash maps.

    Responsibilities
    ----------------
    - Delegate file access to ``fars.data``.
    - Call the functional core and pure plotting functions.
    - Write the summary as CSV and each map as a standalone HTML file.

    Args:
        output_dir: Directory for report output.  Created on first write.
        data_dir: Directory holding the accident files.
        base_map: Geographic background for every map.
    """

    def __init__(
        self,
        output_dir: PathLike,
        data_dir: Optional[PathLike] = None,
        base_map: Optional[BaseMap] = None,
    ) -> None:
        self.output_dir = Path(output_dir)
        self.data_dir = data_dir
        self.base_map = base_map

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def write_summary(self, years: Iterable[Any]) -> Path:
        """
        Summarize *years* and save the month x year table as CSV.

        Args:
            years: Years to summarize.  Years that fail to load are warned
                about and left out of the table.

        Returns:
            Path of the written ``summary_<earliest>-<latest>.csv``.
        """
        years = list(years)
        table = fars_summarize_years(years, data_dir=self.data_dir)

        self.output_dir.mkdir(parents=True, exist_ok=True)
        out_path = self.output_dir / f"summary_{_year_span(years)}.csv"
        table.to_csv(out_path)
        log.info("Summary saved → %s", out_path, extra={"path": str(out_path)})
        return out_path

    def write_state_map(self, state_num: Any, year: Any) -> Optional[Path]:
        """
        Build one state map and save it as HTML.

        Returns:
            Path of the written ``state_<n>_<year>.html``, or ``None`` when
            there was nothing to plot.
        """
        fig = fars_map_state(
            state_num,
            year,
            data_dir=self.data_dir,
            base_map=self.base_map,
            show=False,
        )
        if fig is None:
            return None

        self.output_dir.mkdir(parents=True, exist_ok=True)
        out_path = (
            self.output_dir
            / f"state_{as_integer(state_num)}_{as_integer(year)}.html"
        )
        fig.write_html(str(out_path))
        log.info("Map saved → %s", out_path, extra={"path": str(out_path)})
        return out_path

    def generate(
        self,
        years: Iterable[Any],
        states: Iterable[Any] = (),
    ) -> Dict[str, List[Path]]:
        """
        Write the summary for *years* and a map for every (state, year).

        Errors in individual maps are logged so that one failure (missing
        year, state absent from a year) does not prevent the others from
        being saved.

        Args:
            years: Years to report on.
            states: FARS state codes to map for each year.

        Returns:
            ``{"summary": [csv_path], "maps": [html_path, ...]}``.
        """
        years = list(years)
        written: Dict[str, List[Path]] = {
            "summary": [self.write_summary(years)],
            "maps": [],
        }

        for state_num in states:
            for year in years:
                try:
                    out_path = self.write_state_map(state_num, year)
                except (OSError, ValueError) as exc:
                    log.error(
                        "Map for state %s, %s FAILED: %s", state_num, year, exc,
                        extra={"state": str(state_num), "year": str(year)},
                    )
                    continue
                if out_path is not None:
                    written["maps"].append(out_path)
        return written


# ---------------------------------------------------------------------------
# Module-level helpers
# ---------------------------------------------------------------------------

def _year_span(years: List[Any]) -> str:
    """
    ``'2013-2015'`` for several years, ``'2015'`` for one, ``'none'`` for none.

    Years are coerced to integers and the span runs from the earliest to the
    latest; values that are not years at all are left out of the name.
    """
    numbers = []
    for year in years:
        try:
            numbers.append(as_integer(year))
        except (TypeError, ValueError):
            continue
    if not numbers:
        return 'none'
    first, last = min(numbers), max(numbers)
    return str(first) if first == last else f"{first}-{last}"


# ---------------------------------------------------------------------------
# Convenience entry-point
# ---------------------------------------------------------------------------

def generate_reports(
    output_dir: PathLike,
    years: Iterable[Any],
    states: Iterable[Any] = (),
    data_dir: Optional[PathLike] = None,
    base_map: Optional[BaseMap] = None,
) -> Dict[str, List[Path]]:
    """
    Convenience function: create a ``ReportGenerator`` and run it once.

    Example::

        from fars.reports.generators import generate_reports

        generate_reports("reports", years=range(2013, 2016), states=[19])
    """
    gen = ReportGenerator(output_dir=output_dir, data_dir=data_dir, base_map=base_map)
    return gen.generate(years, states)
