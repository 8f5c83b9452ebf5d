"""Tests for calendar field derivation."""

import logging

import pandas as pd
import pytest

from ride_trends.errors import SchemaError
from ride_trends.features import CALENDAR_COLUMNS, add_calendar_features


class TestAddCalendarFeatures:
    """Tests for add_calendar_features."""

    def test_known_timestamp(self):
        frame = pd.DataFrame({"start_time": pd.to_datetime(["2016-11-01 14:52:50"])})
        result = add_calendar_features(frame)
        row = result.iloc[0]
        assert row["year"] == 2016
        assert row["month"] == 11
        assert row["weekday"] == 2  # Tuesday
        assert row["hour"] == 14

    def test_weekday_runs_monday_to_sunday(self):
        # 2016-10-31 is a Monday
        days = pd.date_range("2016-10-31", periods=7, freq="D")
        result = add_calendar_features(pd.DataFrame({"start_time": days}))
        assert list(result["weekday"]) == [1, 2, 3, 4, 5, 6, 7]

    def test_does_not_modify_input(self):
        frame = pd.DataFrame({"start_time": pd.to_datetime(["2016-11-01 14:52:50"]), "duration": [60.0]})
        add_calendar_features(frame)
        assert list(frame.columns) == ["start_time", "duration"]

    def test_existing_columns_untouched(self, raw_activities):
        result = add_calendar_features(raw_activities)
        pd.testing.assert_frame_equal(result[raw_activities.columns], raw_activities)
        assert list(result.columns[-4:]) == CALENDAR_COLUMNS

    def test_missing_timestamp_keeps_row(self, caplog):
        frame = pd.DataFrame({"start_time": ["2016-11-01 14:52:50", None, "garbage"]})
        with caplog.at_level(logging.WARNING, logger="ride_trends.features"):
            result = add_calendar_features(frame)

        assert len(result) == 3
        for column in CALENDAR_COLUMNS:
            assert result[column].isna().tolist() == [False, True, True]
        assert "2 of 3 activities" in caplog.text

    def test_absent_column(self):
        with pytest.raises(SchemaError):
            add_calendar_features(pd.DataFrame({"duration": [10.0]}))
