# ============================================================================
# Script 03: Decomposition and Stationarity
# Cycling Activity Trends
# ============================================================================

import logging
import os
import pickle

import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

from ride_trends.config import FIGURES_DIR, MODELS_DIR, TABLES_DIR
from ride_trends.errors import ForecastError
from ride_trends.forecasting import decompose, estimate_differences, stationarity_tests

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

sns.set_style("whitegrid")
plt.rcParams['figure.figsize'] = (10, 6)

os.makedirs(FIGURES_DIR, exist_ok=True)
os.makedirs(TABLES_DIR, exist_ok=True)

# Load preprocessed data
with open(os.path.join(MODELS_DIR, "preprocessed_data.pkl"), 'rb') as f:
    preprocessed_data = pickle.load(f)

series = preprocessed_data['series']

print("=== DECOMPOSITION ===\n")

# ============================================================================
# Trend / seasonal / residual components
# ============================================================================

for name, s in series.items():
    try:
        components = decompose(s)
    except ForecastError as e:
        print(f"Skipping decomposition of {name}: {e}")
        continue

    fig = components.plot()
    fig.set_size_inches(10, 8)
    fig.suptitle(f"Monthly {name}: additive decomposition", y=1.02)
    fig.tight_layout()
    fig.savefig(os.path.join(FIGURES_DIR, f"03_decomposition_{name}.png"), dpi=300, bbox_inches='tight')
    plt.close(fig)

    seasonal = components.seasonal.iloc[:12]
    print(f"{name}: seasonal component by month")
    print(pd.Series(seasonal.values, index=seasonal.index.month).round(2).to_string())
    print()

# ============================================================================
# Stationarity tests
# ============================================================================

print("\n=== STATIONARITY TESTS ===")

rows = []
for name, s in series.items():
    if len(s) < 8:
        print(f"Skipping stationarity tests for {name}: only {len(s)} months")
        continue
    result = stationarity_tests(s)
    result['Series'] = name
    result['Differences'] = estimate_differences(s)
    rows.append(result)

stationarity = pd.DataFrame(rows)
if not stationarity.empty:
    stationarity = stationarity[['Series', 'adf_statistic', 'adf_p_value', 'kpss_statistic',
                                 'kpss_p_value', 'is_stationary', 'Differences']]
print(stationarity.round(4).to_string(index=False))

stationarity.to_csv(os.path.join(TABLES_DIR, "03_stationarity.csv"), index=False)

print("\n\nDecomposition complete! Figures and tables saved to output/")
