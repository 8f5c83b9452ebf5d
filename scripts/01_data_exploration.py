# ============================================================================
# Script 01: Data Exploration
# Cycling Activity Trends
# ============================================================================

import logging
import os
import sys

import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt
import seaborn as sns

from ride_trends import (
    CleaningConfig,
    add_calendar_features,
    exclusion_counts,
    filter_activities,
    load_activities,
)
from ride_trends.config import DEFAULT_DATA_FILE, FIGURES_DIR

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

# Set style
sns.set_style("whitegrid")
plt.rcParams['figure.figsize'] = (10, 6)

os.makedirs(FIGURES_DIR, exist_ok=True)

# Load data
data_file = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_DATA_FILE
activities = load_activities(data_file)

print("=== DATA EXPLORATION ===\n")
print("Raw activities:")
print(activities.describe())
print("\nActivity types:")
print(activities['activityType'].value_counts())

# ============================================================================
# Cleaning
# ============================================================================

config = CleaningConfig()
print("\n\n=== ROWS REJECTED PER RULE ===")
print(exclusion_counts(activities, config))

rides = add_calendar_features(filter_activities(activities, config))
print(f"\nRides kept: {len(rides)} of {len(activities)}")
print(rides[['duration', 'distance', 'avgSpeed', 'maxSpeed', 'elevationGain']].describe())

# ============================================================================
# Correlation between ride metrics
# ============================================================================

numeric_vars = ["duration", "distance", "avgSpeed", "maxSpeed", "elevationGain",
                "avgHr", "avgPower", "max20MinPower", "avgBikeCadence", "calories"]
cor_matrix = rides[numeric_vars].corr()
print("\n\n=== CORRELATION MATRIX ===")
print(cor_matrix.round(3))

plt.figure(figsize=(10, 8))
sns.heatmap(cor_matrix, annot=True, fmt=".2f", cmap="coolwarm", vmin=-1, vmax=1, square=True)
plt.title("Correlation Between Ride Metrics")
plt.tight_layout()
plt.savefig(os.path.join(FIGURES_DIR, "01_correlation.png"), dpi=300)
plt.close()

# ============================================================================
# When do rides happen?
# ============================================================================

weekday_labels = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
month_labels = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
                "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

for field, labels, title in [
    ("hour", [str(h) for h in range(24)], "Rides by Hour of Day"),
    ("weekday", weekday_labels, "Rides by Day of Week"),
    ("month", month_labels, "Rides by Month"),
]:
    counts = rides[field].value_counts().reindex(range(len(labels)) if field == "hour"
                                                 else range(1, len(labels) + 1), fill_value=0)
    plt.figure(figsize=(10, 6))
    sns.barplot(x=labels, y=counts.values, color='steelblue')
    plt.title(title)
    plt.xlabel(field.capitalize())
    plt.ylabel("Number of rides")
    plt.tight_layout()
    plt.savefig(os.path.join(FIGURES_DIR, f"01_rides_by_{field}.png"), dpi=300)
    plt.close()

# Distance by year
plt.figure(figsize=(8, 6))
sns.boxplot(data=rides.dropna(subset=['year']).astype({'year': int}), x='year', y='distance', color='lightsteelblue')
plt.title("Ride Distance by Year")
plt.xlabel("Year")
plt.ylabel("Distance")
plt.tight_layout()
plt.savefig(os.path.join(FIGURES_DIR, "01_distance_by_year.png"), dpi=300)
plt.close()

# Group statistics by weekday
print("\n\n=== GROUP STATISTICS BY WEEKDAY ===")
weekday_stats = rides.groupby('weekday')['duration'].agg([
    ('n', 'count'),
    ('mean_duration', 'mean'),
    ('sd_duration', 'std'),
    ('max_duration', 'max')
]).reset_index()
print(weekday_stats)

print("\n\nExploration complete! Figures saved to output/figures/")
