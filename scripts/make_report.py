"""
Build a FARS summary table and state crash maps from the sample data.

Requires the package to be installed (``pip install -e .``).
Set ``FARS_DATA_DIR`` to point at a directory of full FARS accident files
instead of the packaged 2013–2015 samples.
"""

from pathlib import Path

from fars.data import available_years
from fars.reports.generators import ReportGenerator
from fars.utils.logging import configure_logging

# --- 1. SETTINGS -----------------------------------------------------------
STATES = [19, 48]          # Iowa, Texas
OUTPUT_DIR = Path("reports")


def run_report():
    configure_logging("INFO")

    years = available_years()
    if not years:
        print("Error: no accident_<year>.csv.bz2 files found")
        return

    print(f"--- Step 1: Summary for {years[0]}-{years[-1]} ---")
    gen = ReportGenerator(OUTPUT_DIR)
    written = gen.generate(years, STATES)

    print("\n--- Step 2: Output ---")
    for path in written["summary"] + written["maps"]:
        print(f"  {path.resolve()}")


if __name__ == "__main__":
    run_report()
