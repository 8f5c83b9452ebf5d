# ============================================================================
# Script 04: Baseline and ARIMA Forecasts
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
from ride_trends.forecasting import (
    drift_forecast,
    fit_auto_arima,
    forecast_accuracy,
    naive_forecast,
    residual_diagnostics,
    seasonal_naive_forecast,
    train_test_split,
)

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

sns.set_style("whitegrid")
plt.rcParams['figure.figsize'] = (12, 6)

os.makedirs(FIGURES_DIR, exist_ok=True)
os.makedirs(TABLES_DIR, exist_ok=True)

# Series to forecast and hold-out length (months)
TARGETS = ['duration_total', 'distance_total', 'endurance']
TEST_SIZE = 12

# Load preprocessed data
with open(os.path.join(MODELS_DIR, "preprocessed_data.pkl"), 'rb') as f:
    preprocessed_data = pickle.load(f)

series = preprocessed_data['series']

print("=== FORECASTING ===\n")

accuracy_rows = []
diagnostics_rows = []
fitted_models = {}

for name in TARGETS:
    s = series[name]
    if len(s) < TEST_SIZE + 12:
        print(f"Skipping {name}: {len(s)} months is too short for a {TEST_SIZE}-month hold-out")
        continue

    train, test = train_test_split(s, TEST_SIZE)
    print(f"{name}: training on {train.index[0]} to {train.index[-1]}, testing on {len(test)} months")

    # ========================================================================
    # Baselines and ARIMA
    # ========================================================================

    forecasts = {
        'Naive': naive_forecast(train, TEST_SIZE),
        'Seasonal naive': seasonal_naive_forecast(train, TEST_SIZE),
        'Drift': drift_forecast(train, TEST_SIZE),
    }

    selection = fit_auto_arima(train)
    forecasts[f"ARIMA{selection.order}"] = selection.forecast(TEST_SIZE)
    fitted_models[name] = {'order': selection.order, 'aicc': selection.aicc}

    diagnostics = residual_diagnostics(selection.results)
    diagnostics.update({'Series': name, 'Order': str(selection.order), 'AICc': selection.aicc})
    diagnostics_rows.append(diagnostics)

    for method, predicted in forecasts.items():
        scores = forecast_accuracy(test, predicted)
        scores.update({'Series': name, 'Method': method})
        accuracy_rows.append(scores)

    # ========================================================================
    # Forecast figure
    # ========================================================================

    plt.figure(figsize=(12, 6))
    plt.plot(s.index.to_timestamp(), s.values, color='black', linewidth=1.5, label='Observed')
    for method, predicted in forecasts.items():
        plt.plot(predicted.index.to_timestamp(), predicted.values, linewidth=1.5, label=method)
    plt.axvline(test.index[0].to_timestamp(), linestyle='--', color='gray')
    plt.title(f"Monthly {name}: forecasts over the last {TEST_SIZE} months")
    plt.xlabel("Month")
    plt.ylabel(name)
    plt.legend()
    plt.tight_layout()
    plt.savefig(os.path.join(FIGURES_DIR, f"04_forecast_{name}.png"), dpi=300)
    plt.close()

# ============================================================================
# Tables
# ============================================================================

accuracy = pd.DataFrame(accuracy_rows)
diagnostics_table = pd.DataFrame(diagnostics_rows)

print("\n\n=== FORECAST ACCURACY (hold-out) ===")
if not accuracy.empty:
    accuracy = accuracy[['Series', 'Method', 'RMSE', 'MAE', 'MAPE']]
    print(accuracy.round(2).to_string(index=False))

    best = accuracy.loc[accuracy.groupby('Series')['RMSE'].idxmin()]
    print("\nBest method per series (lowest RMSE):")
    print(best[['Series', 'Method', 'RMSE']].round(2).to_string(index=False))

print("\n\n=== ARIMA RESIDUAL DIAGNOSTICS ===")
print(diagnostics_table.round(4).to_string(index=False))

accuracy.to_csv(os.path.join(TABLES_DIR, "04_forecast_accuracy.csv"), index=False)
diagnostics_table.to_csv(os.path.join(TABLES_DIR, "04_arima_diagnostics.csv"), index=False)

with open(os.path.join(MODELS_DIR, "arima_selection.pkl"), 'wb') as f:
    pickle.dump(fitted_models, f)

print("\n\nForecasting complete! Results saved to output/")
