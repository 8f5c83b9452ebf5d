"""
Activity table schema and loader.

The input is a CSV export with one row per recorded activity. Columns are
validated once here so that later stages can index them without checks.
"""

import logging
import os

import pandas as pd

from .errors import SchemaError

logger = logging.getLogger(__name__)

# Column name -> expected dtype after loading
ACTIVITY_SCHEMA = {
    "activityType": "category",
    "start_time": "datetime64[ns]",
    "duration": "float64",
    "distance": "float64",
    "avgSpeed": "float64",
    "maxSpeed": "float64",
    "elevationGain": "float64",
    "avgHr": "float64",
    "avgPower": "float64",
    "max20MinPower": "float64",
    "avgBikeCadence": "float64",
    "calories": "float64",
}

NUMERIC_COLUMNS = [c for c, t in ACTIVITY_SCHEMA.items() if t == "float64"]


def validate_schema(frame, source=None):
    """Raise SchemaError if any schema column is missing from `frame`."""
    missing = [c for c in ACTIVITY_SCHEMA if c not in frame.columns]
    if missing:
        where = f" in {source}" if source else ""
        raise SchemaError(
            f"Missing expected column(s){where}: {', '.join(missing)}",
            missing=missing,
            source=source,
        )


def coerce_types(frame):
    """Return a copy of `frame` with schema columns cast to their dtypes.

    Values that cannot be parsed become missing. The count per column is
    logged; rows are never dropped here.
    """
    data = frame.copy()

    for column in NUMERIC_COLUMNS:
        before = data[column].notna().sum()
        data[column] = pd.to_numeric(data[column], errors="coerce").astype("float64")
        lost = int(before - data[column].notna().sum())
        if lost:
            logger.warning("%d value(s) in %r are not numeric and were set to missing", lost, column)

    before = data["start_time"].notna().sum()
    data["start_time"] = pd.to_datetime(data["start_time"], errors="coerce")
    lost = int(before - data["start_time"].notna().sum())
    if lost:
        logger.warning("%d start_time value(s) could not be parsed", lost)

    data["activityType"] = data["activityType"].astype("category")
    return data


def load_activities(path):
    """
    Load the activity table from a CSV file.

    Parameters
    ----------
    path : str
        Location of the CSV export.

    Returns
    -------
    pd.DataFrame
        One row per activity, schema columns typed per ACTIVITY_SCHEMA.
    """
    frame = pd.read_csv(path)
    validate_schema(frame, source=os.path.basename(path))
    frame = coerce_types(frame)
    logger.info("Loaded %d activities from %s", len(frame), path)
    return frame
