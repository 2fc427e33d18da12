"""Shared DataFrame checks."""

from typing import List

import pandas as pd


def validate_columns(df: pd.DataFrame, required: List[str], name: str = 'df') -> None:
    """
    Raise ValueError if any required columns are absent.

    Args:
        df: DataFrame to check.
        required: List of column names that must be present.
        name: How the DataFrame is referred to in the message.

    Raises:
        ValueError: Listing the missing columns.
    """
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(
            f"{name} is missing required columns: {missing}"
        )
