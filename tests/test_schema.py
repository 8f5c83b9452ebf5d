"""Tests for loading and validating the activity table."""

import logging

import pandas as pd
import pytest

from ride_trends.errors import SchemaError
from ride_trends.schema import ACTIVITY_SCHEMA, load_activities, validate_schema

from conftest import make_ride


class TestValidateSchema:
    """Tests for validate_schema."""

    def test_complete_frame_passes(self):
        frame = pd.DataFrame([make_ride("2016-11-01 14:52:50")])
        validate_schema(frame)

    def test_missing_columns_are_named(self):
        frame = pd.DataFrame([make_ride("2016-11-01 14:52:50")]).drop(columns=["avgPower", "calories"])
        with pytest.raises(SchemaError) as excinfo:
            validate_schema(frame, source="rides.csv")
        assert excinfo.value.missing == ["avgPower", "calories"]
        assert excinfo.value.source == "rides.csv"
        assert "avgPower" in str(excinfo.value)


class TestLoadActivities:
    """Tests for load_activities."""

    def test_types_follow_schema(self, tmp_path):
        path = tmp_path / "activities.csv"
        pd.DataFrame([make_ride("2016-11-01 14:52:50"), make_ride("2016-11-02 07:00:00")]).to_csv(path, index=False)

        frame = load_activities(str(path))

        assert len(frame) == 2
        assert isinstance(frame["activityType"].dtype, pd.CategoricalDtype)
        assert pd.api.types.is_datetime64_any_dtype(frame["start_time"])
        for column, dtype in ACTIVITY_SCHEMA.items():
            if dtype == "float64":
                assert frame[column].dtype == "float64"

    def test_missing_column_fails_before_cleaning(self, tmp_path):
        path = tmp_path / "activities.csv"
        pd.DataFrame([make_ride("2016-11-01 14:52:50")]).drop(columns=["start_time"]).to_csv(path, index=False)

        with pytest.raises(SchemaError) as excinfo:
            load_activities(str(path))
        assert excinfo.value.missing == ["start_time"]
        assert excinfo.value.source == "activities.csv"

    def test_bad_values_become_missing_and_are_counted(self, tmp_path, caplog):
        path = tmp_path / "activities.csv"
        rows = [
            make_ride("2016-11-01 14:52:50", duration="abc"),
            make_ride("not a date"),
        ]
        pd.DataFrame(rows).to_csv(path, index=False)

        with caplog.at_level(logging.WARNING, logger="ride_trends.schema"):
            frame = load_activities(str(path))

        assert len(frame) == 2
        assert frame["duration"].isna().sum() == 1
        assert frame["start_time"].isna().sum() == 1
        assert "'duration'" in caplog.text
        assert "start_time" in caplog.text

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_activities(str(tmp_path / "nope.csv"))
