"""Calendar fields derived from an activity's start time."""

import logging

import pandas as pd

from .errors import SchemaError

logger = logging.getLogger(__name__)

CALENDAR_COLUMNS = ["year", "month", "weekday", "hour"]


def add_calendar_features(frame):
    """
    Return a copy of `frame` with year, month, weekday and hour columns.

    weekday follows ISO numbering (Monday=1 ... Sunday=7). Rows whose
    start_time is missing or unparseable keep their place with missing
    calendar fields.
    """
    if "start_time" not in frame.columns:
        raise SchemaError("Missing expected column: start_time", missing=["start_time"])

    data = frame.copy()
    start = pd.to_datetime(data["start_time"], errors="coerce")

    data["year"] = start.dt.year.astype("Int64")
    data["month"] = start.dt.month.astype("Int64")
    data["weekday"] = (start.dt.dayofweek + 1).astype("Int64")
    data["hour"] = start.dt.hour.astype("Int64")

    unknown = int(start.isna().sum())
    if unknown:
        logger.warning("%d of %d activities have no usable start_time; calendar fields left missing", unknown, len(data))
    return data
