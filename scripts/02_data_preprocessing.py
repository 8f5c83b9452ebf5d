# ============================================================================
# Script 02: Data Preprocessing for Time Series Models
# Cycling Activity Trends
# ============================================================================

import logging
import os
import pickle
import sys

from ride_trends import (
    CleaningConfig,
    FREQUENCY,
    add_calendar_features,
    aggregate_monthly,
    build_all_series,
    fill_month_gaps,
    filter_activities,
    load_activities,
    series_start,
)
from ride_trends.config import DEFAULT_DATA_FILE, MODELS_DIR, TABLES_DIR

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

os.makedirs(MODELS_DIR, exist_ok=True)
os.makedirs(TABLES_DIR, exist_ok=True)

# Load data
data_file = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_DATA_FILE
activities = load_activities(data_file)

# ============================================================================
# Clean and derive calendar fields
# ============================================================================

config = CleaningConfig()
rides = add_calendar_features(filter_activities(activities, config))

print("=== CLEANED RIDES ===")
print(f"Activities loaded: {len(activities)}")
print(f"Rides kept: {len(rides)}")
print(f"Date range: {rides['start_time'].min()} to {rides['start_time'].max()}")

# ============================================================================
# Monthly aggregate
# ============================================================================

monthly_observed = aggregate_monthly(rides)
monthly = fill_month_gaps(monthly_observed)

print("\n=== MONTHLY AGGREGATE ===")
print(f"Months with rides: {len(monthly_observed)}")
print(f"Months after gap filling: {len(monthly)}")
print(monthly.round(2).to_string(index=False))

monthly.to_csv(os.path.join(TABLES_DIR, "02_monthly_aggregate.csv"), index=False)

# ============================================================================
# Time series objects
# ============================================================================

series = build_all_series(monthly)
start_year, start_month = series_start(next(iter(series.values())))

print("\n=== TIME SERIES ===")
print(f"Frequency: {FREQUENCY} periods/year")
print(f"Start: {start_year}-{start_month:02d}")
print("Series:", list(series))

# ============================================================================
# Save preprocessed data
# ============================================================================

preprocessed_data = {
    'config': config,
    'rides': rides,
    'monthly_observed': monthly_observed,
    'monthly': monthly,
    'series': series,
}

with open(os.path.join(MODELS_DIR, "preprocessed_data.pkl"), 'wb') as f:
    pickle.dump(preprocessed_data, f)

print("\n\nPreprocessing complete! Data saved to output/models/preprocessed_data.pkl")
