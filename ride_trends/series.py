"""
Monthly time series built from the gap-filled monthly table.

A series is a pandas Series on a monthly PeriodIndex; statsmodels reads the
seasonal period (12) from that frequency.
"""

import pandas as pd

from .config import METRIC_COLUMNS
from .errors import SchemaError, SeriesError

FREQUENCY = 12


def build_series(monthly, column):
    """Wrap one column of the monthly table as a monthly period series."""
    if column not in monthly.columns:
        raise SchemaError(f"Unknown monthly column: {column!r}", missing=[column])
    if monthly.empty:
        raise SeriesError("Cannot build a series from an empty monthly table")

    periods = pd.DatetimeIndex(pd.to_datetime(monthly["month"])).to_period("M")
    expected = pd.period_range(start=periods[0], periods=len(periods), freq="M")
    if not periods.equals(expected):
        position = int((periods != expected).argmax())
        raise SeriesError(
            f"Monthly table must be sorted and contiguous; expected {expected[position]} "
            f"at row {position}, found {periods[position]} (run fill_month_gaps first)"
        )

    return pd.Series(monthly[column].to_numpy(), index=expected, name=column)


def build_all_series(monthly, columns=None):
    """Build a series for every metric column, keyed by column name."""
    columns = columns or [c for c in METRIC_COLUMNS if c in monthly.columns]
    return {column: build_series(monthly, column) for column in columns}


def series_start(series):
    """(year, month) of the first period."""
    first = series.index[0]
    return first.year, first.month
