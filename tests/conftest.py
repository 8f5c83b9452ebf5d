"""Shared fixtures: small synthetic activity tables."""

import numpy as np
import pandas as pd
import pytest

from ride_trends.schema import coerce_types


def make_ride(start_time, **overrides):
    """One valid cycling activity; keyword arguments replace fields."""
    ride = {
        "activityType": "cycling",
        "start_time": start_time,
        "duration": 60.0,
        "distance": 25.0,
        "avgSpeed": 25.0,
        "maxSpeed": 50.0,
        "elevationGain": 300.0,
        "avgHr": 140.0,
        "avgPower": 180.0,
        "max20MinPower": 220.0,
        "avgBikeCadence": 85.0,
        "calories": 700.0,
    }
    ride.update(overrides)
    return ride


@pytest.fixture
def raw_activities():
    """Mix of valid rides, rule violations and a repeated start time."""
    rows = [
        make_ride("2016-11-01 14:52:50"),
        make_ride("2016-11-03 08:00:00", duration=45.0),
        make_ride("2016-11-05 09:00:00", activityType="running"),
        make_ride("2016-11-06 09:00:00", duration=8.0),
        make_ride("2016-11-07 09:00:00", avgSpeed=4.0),
        make_ride("2016-11-08 09:00:00", maxSpeed=130.0),
        make_ride("2016-11-09 09:00:00", elevationGain=3500.0),
        make_ride("2016-11-10 09:00:00", duration=np.nan),
        make_ride("2016-12-01 10:00:00", maxSpeed=120.0),
        make_ride("2016-12-01 10:00:00", distance=99.0),
        make_ride("2017-01-15 18:30:00"),
    ]
    return coerce_types(pd.DataFrame(rows))


@pytest.fixture
def rides_2012():
    """Rides in January, February and April 2012; March has none."""
    rows = [
        make_ride("2012-01-05 10:00:00", duration=30.0, distance=10.0, avgSpeed=20.0),
        make_ride("2012-01-20 10:00:00", duration=50.0, distance=20.0, avgSpeed=22.0),
        make_ride("2012-02-10 10:00:00", duration=60.0, distance=30.0, avgSpeed=24.0),
        make_ride("2012-04-02 10:00:00", duration=120.0, distance=60.0, avgSpeed=28.0),
    ]
    return coerce_types(pd.DataFrame(rows))


@pytest.fixture
def seasonal_series():
    """Five years of a monthly series with trend and yearly season."""
    periods = pd.period_range("2015-01", periods=60, freq="M")
    t = np.arange(60)
    rng = np.random.default_rng(42)
    values = 1000 + 5 * t + 300 * np.sin(2 * np.pi * t / 12) + rng.normal(0, 20, 60)
    return pd.Series(values, index=periods, name="duration_total")
