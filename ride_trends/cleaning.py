"""
Row selection for the activity table.

Keeps rides of one activity type whose metrics fall inside the thresholds of
a CleaningConfig, drops known duplicates and repeated start times.
"""

import logging

import pandas as pd

from .config import CleaningConfig

logger = logging.getLogger(__name__)


def _predicates(frame, config):
    """Boolean masks, one per rule, True where the row is kept."""
    return {
        "activity_type": frame["activityType"].astype(object) == config.activity_type,
        "duration": frame["duration"] > config.min_duration,
        "avg_speed": frame["avgSpeed"] > config.min_avg_speed,
        "max_speed": frame["maxSpeed"] <= config.max_max_speed,
        "elevation_gain": frame["elevationGain"] < config.max_elevation_gain,
        "known_duplicate": pd.Series(~frame.index.isin(list(config.known_duplicates)), index=frame.index),
    }


def exclusion_counts(frame, config=None):
    """
    Count how many rows each rule rejects on its own.

    A row can fail more than one rule, so the counts do not add up to the
    number of removed rows. Missing values fail the numeric rules.
    """
    config = config or CleaningConfig()
    masks = _predicates(frame, config)
    counts = {name: int((~mask).sum()) for name, mask in masks.items()}

    kept = pd.Series(True, index=frame.index)
    for mask in masks.values():
        kept &= mask
    counts["duplicate_start_time"] = int(
        frame.loc[kept, "start_time"].dropna().duplicated(keep="first").sum()
    )
    return pd.Series(counts, name="excluded")


def filter_activities(frame, config=None):
    """
    Return the rows of `frame` that satisfy every cleaning rule.

    Rows whose start_time repeats an earlier surviving row are removed, the
    first occurrence is kept. Applying the filter to its own output returns
    the same frame.
    """
    config = config or CleaningConfig()
    masks = _predicates(frame, config)

    kept = pd.Series(True, index=frame.index)
    for mask in masks.values():
        kept &= mask
    result = frame.loc[kept]

    repeated = result["start_time"].notna() & result["start_time"].duplicated(keep="first")
    result = result.loc[~repeated]

    if logger.isEnabledFor(logging.INFO):
        counts = exclusion_counts(frame, config)
        logger.info(
            "Kept %d of %d activities (rejected per rule: %s)",
            len(result),
            len(frame),
            ", ".join(f"{k}={v}" for k, v in counts.items() if v),
        )
    return result
