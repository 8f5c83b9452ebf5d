"""
Decomposition and forecasting of monthly series.

Thin wrappers around statsmodels, scipy and scikit-learn; model internals are
left to those libraries. All functions take a monthly PeriodIndex series as
produced by ride_trends.series.build_series.
"""

import logging
import warnings
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import numpy as np
import pandas as pd
from scipy import stats
from sklearn.metrics import mean_absolute_error, mean_squared_error
from statsmodels.stats.diagnostic import acorr_ljungbox
from statsmodels.tsa.arima.model import ARIMA
from statsmodels.tsa.seasonal import seasonal_decompose
from statsmodels.tsa.stattools import adfuller, kpss

from .errors import ForecastError
from .series import FREQUENCY

logger = logging.getLogger(__name__)


@dataclass
class ArimaSelection:
    """Best ARIMA fit found by fit_auto_arima."""

    order: Tuple[int, int, int]
    aicc: float
    results: Any
    candidates: int

    def forecast(self, horizon: int) -> pd.Series:
        predicted = self.results.get_forecast(steps=horizon).predicted_mean
        return predicted.rename("arima")


# ============================================================================
# Decomposition and stationarity
# ============================================================================

def decompose(series: pd.Series, model: str = "additive"):
    """Classical trend / seasonal / residual decomposition with period 12."""
    values = series.dropna()
    if len(values) < 2 * FREQUENCY:
        raise ForecastError(
            f"Decomposition of {series.name!r} needs at least {2 * FREQUENCY} months, got {len(values)}"
        )
    return seasonal_decompose(values.to_timestamp(), model=model, period=FREQUENCY)


def stationarity_tests(series: pd.Series, alpha: float = 0.05) -> Dict[str, Any]:
    """
    Run ADF (null: unit root) and KPSS (null: stationary) tests.

    The series is called stationary when ADF rejects its null and KPSS does
    not reject its own.
    """
    values = series.dropna().to_numpy()
    adf_stat, adf_p = adfuller(values, autolag="AIC")[:2]
    with warnings.catch_warnings():
        # kpss warns when the statistic is outside its p-value table
        warnings.simplefilter("ignore")
        kpss_stat, kpss_p = kpss(values, regression="c", nlags="auto")[:2]

    return {
        "adf_statistic": float(adf_stat),
        "adf_p_value": float(adf_p),
        "kpss_statistic": float(kpss_stat),
        "kpss_p_value": float(kpss_p),
        "is_stationary": bool(adf_p < alpha and kpss_p >= alpha),
    }


def estimate_differences(series: pd.Series, max_d: int = 2, alpha: float = 0.05) -> int:
    """Smallest number of first differences after which KPSS accepts stationarity."""
    values = series.dropna()
    d = 0
    while d < max_d and len(values) > 3:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            p_value = kpss(values.to_numpy(), regression="c", nlags="auto")[1]
        if p_value >= alpha:
            break
        values = values.diff().dropna()
        d += 1
    return d


# ============================================================================
# Baseline forecasts
# ============================================================================

def train_test_split(series: pd.Series, test_size: int) -> Tuple[pd.Series, pd.Series]:
    """Split off the last `test_size` periods as a hold-out window."""
    if not 0 < test_size < len(series):
        raise ForecastError(f"test_size must be between 1 and {len(series) - 1}, got {test_size}")
    return series.iloc[:-test_size], series.iloc[-test_size:]


def _future_index(series, horizon):
    return pd.period_range(start=series.index[-1] + 1, periods=horizon, freq="M")


def naive_forecast(series: pd.Series, horizon: int) -> pd.Series:
    """Repeat the last observation."""
    return pd.Series(float(series.iloc[-1]), index=_future_index(series, horizon), name="naive")


def seasonal_naive_forecast(series: pd.Series, horizon: int, season: int = FREQUENCY) -> pd.Series:
    """Repeat the value observed in the same month of the last season."""
    if len(series) < season:
        raise ForecastError(f"Seasonal naive forecast needs at least {season} observations, got {len(series)}")
    last_season = series.iloc[-season:].to_numpy()
    values = [last_season[h % season] for h in range(horizon)]
    return pd.Series(values, index=_future_index(series, horizon), name="seasonal_naive", dtype="float64")


def drift_forecast(series: pd.Series, horizon: int) -> pd.Series:
    """Extend the line through the first and last observations."""
    if len(series) < 2:
        raise ForecastError("Drift forecast needs at least 2 observations")
    first, last = float(series.iloc[0]), float(series.iloc[-1])
    slope = (last - first) / (len(series) - 1)
    values = last + slope * np.arange(1, horizon + 1)
    return pd.Series(values, index=_future_index(series, horizon), name="drift")


# ============================================================================
# ARIMA
# ============================================================================

def fit_auto_arima(
    series: pd.Series,
    max_p: int = 3,
    max_q: int = 3,
    max_d: int = 2,
    d: Optional[int] = None,
) -> ArimaSelection:
    """
    Select an ARIMA(p, d, q) order by minimum AICc.

    d is estimated with KPSS unless given; p and q are searched over
    0..max_p and 0..max_q. Orders that fail to fit are skipped.
    """
    if d is None:
        d = estimate_differences(series, max_d=max_d)

    best = None
    tried = 0
    for p in range(max_p + 1):
        for q in range(max_q + 1):
            tried += 1
            try:
                with warnings.catch_warnings():
                    warnings.simplefilter("ignore")
                    results = ARIMA(series, order=(p, d, q)).fit()
            except (ValueError, np.linalg.LinAlgError) as e:
                logger.debug("ARIMA(%d,%d,%d) failed: %s", p, d, q, e)
                continue
            aicc = float(results.aicc)
            if not np.isfinite(aicc):
                continue
            if best is None or aicc < best.aicc:
                best = ArimaSelection(order=(p, d, q), aicc=aicc, results=results, candidates=0)

    if best is None:
        raise ForecastError(f"No ARIMA order could be fitted to {series.name!r}")
    best.candidates = tried
    logger.info("Selected ARIMA%s for %r (AICc %.2f)", best.order, series.name, best.aicc)
    return best


def residual_diagnostics(results, lags: Optional[int] = None) -> Dict[str, float]:
    """Ljung-Box autocorrelation and Jarque-Bera normality of model residuals."""
    # skip the burn-in window; for d >= 1 its residuals are raw levels
    resid = pd.Series(np.asarray(results.resid)[results.loglikelihood_burn:]).dropna()
    lags = lags or max(1, min(10, len(resid) // 5))
    lb = acorr_ljungbox(resid, lags=[lags], return_df=True)
    jb_stat, jb_p = stats.jarque_bera(resid)
    return {
        "ljung_box_lags": int(lags),
        "ljung_box_statistic": float(lb["lb_stat"].iloc[0]),
        "ljung_box_p_value": float(lb["lb_pvalue"].iloc[0]),
        "jarque_bera_statistic": float(jb_stat),
        "jarque_bera_p_value": float(jb_p),
    }


# ============================================================================
# Accuracy
# ============================================================================

def forecast_accuracy(actual: pd.Series, predicted: pd.Series) -> Dict[str, float]:
    """RMSE, MAE and MAPE (percent) over the periods both series cover."""
    predicted = predicted.reindex(actual.index)
    mask = actual.notna() & predicted.notna()
    if not mask.any():
        raise ForecastError("Actual and predicted series share no periods")
    actual, predicted = actual[mask], predicted[mask]

    nonzero = actual != 0
    if nonzero.any():
        mape = float(np.mean(np.abs((actual[nonzero] - predicted[nonzero]) / actual[nonzero])) * 100)
    else:
        mape = float("nan")

    return {
        "RMSE": float(np.sqrt(mean_squared_error(actual, predicted))),
        "MAE": float(mean_absolute_error(actual, predicted)),
        "MAPE": mape,
    }
