"""
Configuration for the ride trends pipeline: cleaning thresholds and
project paths.
"""

import os
from dataclasses import dataclass

# Project layout
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DATA_DIR = os.path.join(PROJECT_ROOT, "data")
OUTPUT_DIR = os.path.join(PROJECT_ROOT, "output")
FIGURES_DIR = os.path.join(OUTPUT_DIR, "figures")
TABLES_DIR = os.path.join(OUTPUT_DIR, "tables")
MODELS_DIR = os.path.join(OUTPUT_DIR, "models")
DEFAULT_DATA_FILE = os.path.join(DATA_DIR, "activities.csv")

# Metric columns of the monthly table, in output order
METRIC_COLUMNS = [
    "duration_total",
    "endurance",
    "distance_total",
    "avg_speed",
    "max_speed",
    "power",
]


@dataclass(frozen=True)
class CleaningConfig:
    """Row selection thresholds for the activity filter.

    The numeric limits come from visual inspection of one dataset; they are
    kept here so another export can be cleaned without touching code.
    `known_duplicates` holds index labels of rows to drop unconditionally.
    """

    activity_type: str = "cycling"
    min_duration: float = 10
    min_avg_speed: float = 5
    max_max_speed: float = 120
    max_elevation_gain: float = 3000
    known_duplicates: tuple = ()
