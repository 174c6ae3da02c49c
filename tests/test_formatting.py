import pytest

from formatting import format_axis_tick, format_inr, format_pct, group_indian


@pytest.mark.parametrize("value,expected", [
    (15_000_000, "1.5Cr"),
    (10_000_000, "1.0Cr"),
    (250_000, "2.5L"),
    (100_000, "1.0L"),
    (5_400, "5k"),
    (999, "999"),
])
def test_axis_ticks(value, expected):
    assert format_axis_tick(value) == expected


@pytest.mark.parametrize("n,expected", [
    (999, "999"),
    (1_000, "1,000"),
    (100_000, "1,00,000"),
    (12_345_678, "1,23,45,678"),
    (-137_009, "-1,37,009"),
])
def test_indian_grouping(n, expected):
    assert group_indian(n) == expected


def test_format_inr_rounds():
    assert format_inr(102_380.6) == "₹1,02,381"


def test_format_pct_signs():
    assert format_pct(2.38) == "+2.4%"
    assert format_pct(-3.21) == "-3.2%"
    assert format_pct(0.0) == "0.0%"
