"""
FARS Plotting Package (Functional Core)

Pure plotting functions only – no file I/O, no side effects.
Every public function accepts DataFrames and returns a
``plotly.graph_objects.Figure``.

Modules:
    state_map: Crash-location scatter map for one state and year, drawn
               over an injected ``BaseMap``.
"""

from .state_map import BaseMap, plot_state_map

__all__ = [
    'BaseMap',
    'plot_state_map',
]
