import numpy as np
import pandas as pd
import plotly.graph_objects as go
import pytest

from fars.analysis.locations import filter_state, mask_coordinate_sentinels
from fars.plotting.state_map import BaseMap, plot_state_map

from conftest import ACCIDENTS_2013

SQUARE = {
    'type': 'FeatureCollection',
    'features': [
        {
            'type': 'Feature',
            'properties': {'name': 'Square'},
            'geometry': {
                'type': 'Polygon',
                'coordinates': [[[-96, 40], [-90, 40], [-90, 44], [-96, 44], [-96, 40]]],
            },
        },
        {
            'type': 'Feature',
            'properties': {'name': 'Islands'},
            'geometry': {
                'type': 'MultiPolygon',
                'coordinates': [
                    [[[-91, 41], [-90, 41], [-90, 42], [-91, 41]]],
                    [[[-95, 43], [-94, 43], [-94, 44], [-95, 43]]],
                ],
            },
        },
        {
            'type': 'Feature',
            'properties': {'name': 'Capital'},
            'geometry': {'type': 'Point', 'coordinates': [-93.6, 41.6]},
        },
    ],
}


@pytest.fixture
def iowa_2013():
    return mask_coordinate_sentinels(filter_state(ACCIDENTS_2013, 19))


def test_plot_state_map_draws_valid_points_only(iowa_2013):
    fig = plot_state_map(iowa_2013, 19, 2013)

    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 1
    points = fig.data[0]
    assert points.type == 'scattergeo'
    assert list(points.lon) == pytest.approx([-93.5, -93.1, -94.0])
    assert list(points.lat) == pytest.approx([42.0, 41.5, 42.5])


def test_plot_state_map_fits_extent_to_data(iowa_2013):
    fig = plot_state_map(iowa_2013, 19, 2013, base_map=BaseMap(padding=0.5))

    assert list(fig.layout.geo.lonaxis.range) == pytest.approx([-94.5, -92.6])
    assert list(fig.layout.geo.lataxis.range) == pytest.approx([41.0, 43.0])
    assert fig.layout.geo.showsubunits is True


def test_plot_state_map_title_names_state_and_year(iowa_2013):
    fig = plot_state_map(iowa_2013, 19, 2013)
    assert 'Iowa (19)' in fig.layout.title.text
    assert '2013' in fig.layout.title.text


def test_plot_state_map_hover_includes_case_number(iowa_2013):
    fig = plot_state_map(iowa_2013, 19, 2013)
    assert 'ST_CASE' in fig.data[0].hovertemplate
    assert fig.data[0].customdata[0][0] == 190001


def test_plot_state_map_draws_supplied_boundaries(iowa_2013):
    fig = plot_state_map(iowa_2013, 19, 2013, base_map=BaseMap(boundaries=SQUARE))

    assert len(fig.data) == 2
    outline = fig.data[0]
    assert outline.mode == 'lines'
    # one ring for the polygon and one per island, each ended by a break
    assert list(outline.lon).count(None) == 3
    assert len(outline.lon) == 5 + 4 + 4 + 3


def test_plot_state_map_without_valid_coordinates_keeps_default_extent():
    df = pd.DataFrame({'LONGITUD': [np.nan], 'LATITUDE': [np.nan]})
    fig = plot_state_map(df, 19, 2013)

    assert len(fig.data[0].lon) == 0
    assert fig.layout.geo.lonaxis.range is None


def test_plot_state_map_requires_coordinates():
    with pytest.raises(ValueError, match="LATITUDE"):
        plot_state_map(pd.DataFrame({'LONGITUD': [-93.0]}), 19, 2013)
