import logging

import pytest

from presets import (
    ASSET_PRESETS,
    INFLATION_PRESETS,
    MONTHS_BY_RANGE,
    AssetType,
    InflationType,
    TimeRange,
    asset_params,
    inflation_params,
    months_for,
)


def test_tables_cover_every_selection():
    assert set(ASSET_PRESETS) == set(AssetType)
    assert set(INFLATION_PRESETS) == set(InflationType)
    assert set(MONTHS_BY_RANGE) == set(TimeRange)


def test_months_for_each_range():
    assert [months_for(r) for r in TimeRange] == [12, 36, 60, 120, 240]


def test_lookup_by_display_string():
    assert asset_params("Gold (INR)") == ASSET_PRESETS[AssetType.GOLD]
    assert inflation_params("WPI (Wholesale)") == INFLATION_PRESETS[InflationType.WPI]
    assert months_for("10Y") == 120


def test_unknown_selections_fall_back(caplog):
    with caplog.at_level(logging.WARNING):
        assert asset_params("Bitcoin") == ASSET_PRESETS[AssetType.FD]
        assert inflation_params("Housing") == INFLATION_PRESETS[InflationType.CPI_COMBINED]
        assert months_for("7Y") == 60
    assert "Bitcoin" in caplog.text
    assert "Housing" in caplog.text


def test_zero_month_range_rejected():
    with pytest.raises(ValueError):
        months_for(TimeRange.Y1, table={TimeRange.Y1: 0})
