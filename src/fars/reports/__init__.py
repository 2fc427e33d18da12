"""
FARS Reports Package (Imperative Shell)

Orchestrates data fetching, plot generation, and file output.
No analysis logic lives here; this package calls the functional core
(src/fars/analysis/) and plotting (src/fars/plotting/) via the data
package (src/fars/data/).

Modules:
    generators: fars_map_state, the ReportGenerator class and the
                generate_reports() convenience function.
"""

from .generators import (
    fars_map_state,
    ReportGenerator,
    generate_reports,
)

__all__ = [
    'fars_map_state',
    'ReportGenerator',
    'generate_reports',
]
