"""
Cycling activity trends: cleaning, monthly aggregation and time series
preparation for a table of recorded rides.
"""

from .config import CleaningConfig, METRIC_COLUMNS
from .errors import (
    PipelineError,
    SchemaError,
    GapFillError,
    SeriesError,
    ForecastError,
)
from .schema import ACTIVITY_SCHEMA, load_activities, validate_schema
from .cleaning import filter_activities, exclusion_counts
from .features import add_calendar_features
from .aggregation import aggregate_monthly, fill_month_gaps
from .series import FREQUENCY, build_series, build_all_series, series_start

__version__ = "0.1.0"

__all__ = [
    "CleaningConfig",
    "METRIC_COLUMNS",
    "PipelineError",
    "SchemaError",
    "GapFillError",
    "SeriesError",
    "ForecastError",
    "ACTIVITY_SCHEMA",
    "load_activities",
    "validate_schema",
    "filter_activities",
    "exclusion_counts",
    "add_calendar_features",
    "aggregate_monthly",
    "fill_month_gaps",
    "FREQUENCY",
    "build_series",
    "build_all_series",
    "series_start",
]
