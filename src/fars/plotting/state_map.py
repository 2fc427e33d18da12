"""
FARS State Crash Map (Functional Core)

Pure function – no file I/O, no side effects.
Input: state-filtered accident DataFrame (sentinels already masked) +
``BaseMap``.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Base map:
    The geographic background is passed in as a :class:`BaseMap` instead of
    being looked up from global state.  By default it uses plotly's built-in
    Natural Earth outlines with US state borders (``showsubunits``).  Callers
    that need exact state boundaries supply them as a GeoJSON
    ``FeatureCollection`` in ``BaseMap.boundaries``; each Polygon /
    MultiPolygon ring is drawn as an outline trace beneath the crash points.

Extent:
    The geo axes are fitted to the valid coordinates of the crashes plus
    ``BaseMap.padding`` degrees.  Rows with a NaN longitude or latitude are
    not drawn and do not affect the extent.  If no valid coordinate remains
    the map keeps the scope's default extent.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd
import plotly.graph_objects as go

from ..analysis.locations import (
    COORDINATE_COLUMNS,
    coordinate_bounds,
    state_name,
)
from ..utils.frames import validate_columns

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_POINT_STYLE: Dict[str, Any] = {
    'color': 'black',
    'size': 4,
    'symbol': 'circle',
}

# Optional columns surfaced in the hover text when present.
_HOVER_COLUMNS: Tuple[str, ...] = ('ST_CASE', 'MONTH', 'DAY', 'FATALS')


@dataclass(frozen=True)
class BaseMap:
    """Geographic background for :func:`plot_state_map`.

    Attributes:
        scope: plotly geo scope (``'usa'``, ``'north america'``, ...).
        projection: plotly geo projection type.
        show_subunits: Draw the built-in state borders.
        land_color: Fill colour for land.
        border_color: Line colour for built-in and supplied boundaries.
        boundaries: Optional GeoJSON ``FeatureCollection`` of state
            outlines drawn on top of the built-in map.
        padding: Degrees added on every side of the data extent.
    """

    scope: str = 'north america'
    projection: str = 'mercator'
    show_subunits: bool = True
    land_color: str = 'rgb(243, 243, 243)'
    border_color: str = 'rgb(120, 120, 120)'
    boundaries: Optional[Dict[str, Any]] = None
    padding: float = 0.25


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_map(
    df_state: pd.DataFrame,
    state_num: int,
    year: int,
    base_map: Optional[BaseMap] = None,
) -> go.Figure:
    """
    Build a scatter map of crash locations for one state and year.

    Args:
        df_state: Accident rows for a single state with columns::

            LONGITUD : float, NaN where unknown
            LATITUDE : float, NaN where unknown

            ``ST_CASE``, ``MONTH``, ``DAY`` and ``FATALS`` are shown in the
            hover text when present.
        state_num: FARS state code, used in the title.
        year: Data year, used in the title.
        base_map: Background configuration.  Defaults to ``BaseMap()``.

    Returns:
        ``plotly.graph_objects.Figure`` ready for ``fig.show()`` or
        ``fig.write_html()``.

    Raises:
        ValueError: If ``df_state`` is missing ``LONGITUD`` or ``LATITUDE``.
    """
    base_map = base_map or BaseMap()
    validate_columns(df_state, required=COORDINATE_COLUMNS, name='df_state')

    points = df_state.dropna(subset=COORDINATE_COLUMNS)
    title = f"{state_name(state_num)} ({int(state_num)}) – {int(year)} fatal crashes"

    fig = go.Figure()

    if base_map.boundaries:
        lons, lats = _boundary_lines(base_map.boundaries)
        fig.add_trace(go.Scattergeo(
            lon=lons,
            lat=lats,
            mode='lines',
            line=dict(color=base_map.border_color, width=1),
            name='Boundaries',
            showlegend=False,
            hoverinfo='skip',
        ))

    hover_cols = [c for c in _HOVER_COLUMNS if c in points.columns]
    fig.add_trace(go.Scattergeo(
        lon=points['LONGITUD'],
        lat=points['LATITUDE'],
        mode='markers',
        marker=dict(**_POINT_STYLE),
        name='Fatal crash',
        showlegend=False,
        customdata=points[hover_cols].to_numpy() if hover_cols else None,
        hovertemplate=_hover_template(hover_cols),
    ))

    geo: Dict[str, Any] = dict(
        scope=base_map.scope,
        projection_type=base_map.projection,
        showland=True,
        landcolor=base_map.land_color,
        showsubunits=base_map.show_subunits,
        subunitcolor=base_map.border_color,
        showcountries=True,
        countrycolor=base_map.border_color,
    )
    bounds = coordinate_bounds(points)
    if bounds is not None:
        (lon_min, lon_max), (lat_min, lat_max) = bounds
        pad = base_map.padding
        geo['lonaxis_range'] = [lon_min - pad, lon_max + pad]
        geo['lataxis_range'] = [lat_min - pad, lat_max + pad]

    fig.update_geos(**geo)
    fig.update_layout(
        title=title,
        margin=dict(l=10, r=10, t=50, b=10),
        template='plotly_white',
    )
    return fig


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _hover_template(columns: List[str]) -> str:
    lines = ["Lon: %{lon:.4f}", "Lat: %{lat:.4f}"]
    lines += [f"{col}: %{{customdata[{i}]}}" for i, col in enumerate(columns)]
    return "<br>".join(lines) + "<extra></extra>"


def _boundary_lines(
    boundaries: Dict[str, Any],
) -> Tuple[List[Optional[float]], List[Optional[float]]]:
    """
    Flatten GeoJSON polygon rings into one lon/lat line list.

    Rings are separated by ``None`` so plotly draws them as disconnected
    segments within a single trace.  Non-polygon geometries are ignored.

    Args:
        boundaries: GeoJSON ``FeatureCollection``, ``Feature`` or bare
            geometry dict.

    Returns:
        ``(lons, lats)`` lists of equal length.
    """
    if boundaries.get('type') == 'FeatureCollection':
        geometries = [f.get('geometry') or {} for f in boundaries.get('features', [])]
    elif boundaries.get('type') == 'Feature':
        geometries = [boundaries.get('geometry') or {}]
    else:
        geometries = [boundaries]

    lons: List[Optional[float]] = []
    lats: List[Optional[float]] = []
    for geom in geometries:
        if geom.get('type') == 'Polygon':
            polygons = [geom.get('coordinates', [])]
        elif geom.get('type') == 'MultiPolygon':
            polygons = geom.get('coordinates', [])
        else:
            continue
        for polygon in polygons:
            for ring in polygon:
                for lon, lat, *_ in ring:
                    lons.append(lon)
                    lats.append(lat)
                lons.append(None)
                lats.append(None)
    return lons, lats
