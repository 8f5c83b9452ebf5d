# ============================================================================
# Master Script: Run Complete Ride Trends Analysis
# Cycling Activity Trends
# ============================================================================
#
# This script runs the complete analysis pipeline:
# 1. Data exploration
# 2. Data preprocessing (clean, aggregate, fill months, build series)
# 3. Decomposition and stationarity
# 4. Baseline and ARIMA forecasting
#
# Usage: python scripts/00_run_all.py [path/to/activities.csv]
# ============================================================================

import time
import subprocess
import sys
import os

STEPS = [
    "01_data_exploration.py",
    "02_data_preprocessing.py",
    "03_decomposition.py",
    "04_forecasting.py",
]


def run_script(script_dir, script_name, step_num, total_steps, extra_args):
    """Run a Python script and report its output."""
    print(f"[{step_num}/{total_steps}] Running {script_name}...")
    script_path = os.path.join(script_dir, script_name)
    try:
        result = subprocess.run(
            [sys.executable, script_path] + extra_args,
            cwd=script_dir,
            check=True,
            capture_output=True,
            text=True
        )
    except subprocess.CalledProcessError as e:
        print(f"✗ Error in {script_name}")
        if e.stderr:
            print(e.stderr)
        if e.stdout:
            print(e.stdout)
        return False
    print("✓ Complete\n")
    if result.stdout:
        print(result.stdout)
    return True


if __name__ == "__main__":
    print("=" * 40)
    print("CYCLING ACTIVITY TRENDS")
    print("Complete Pipeline Execution")
    print("=" * 40 + "\n")

    start_time = time.time()

    script_dir = os.path.dirname(os.path.abspath(__file__))
    extra_args = sys.argv[1:2]

    for i, name in enumerate(STEPS, start=1):
        if not run_script(script_dir, name, i, len(STEPS), extra_args):
            sys.exit(1)

    elapsed = (time.time() - start_time) / 60

    print("=" * 40)
    print("ANALYSIS COMPLETE!")
    print("=" * 40)
    print(f"Total time: {elapsed:.2f} minutes")
    print("\nOutput files:")
    print("  - Figures: output/figures/")
    print("  - Tables: output/tables/")
    print("  - Models: output/models/")
    print("\nNext steps:")
    print("  1. Check the monthly table (output/tables/02_monthly_aggregate.csv)")
    print("  2. Review stationarity tests (output/tables/03_stationarity.csv)")
    print("  3. Compare forecast accuracy (output/tables/04_forecast_accuracy.csv)")
    print("=" * 40)
