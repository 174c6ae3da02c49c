# Calibration presets. Nominal long-run estimates for Indian asset classes
# (roughly 2013-2023) and the inflation baskets they are measured against.
# Vol = annualized standard deviation. Illustrative, not forecasts.
import logging
from dataclasses import dataclass
from enum import Enum

from config import DEFAULTS

logger = logging.getLogger(__name__)


class AssetType(str, Enum):
    NIFTY_50 = "Nifty 50"
    SENSEX = "Sensex"
    GOLD = "Gold (INR)"
    FD = "Fixed Deposit"
    PPF = "PPF"
    MEDIAN_SALARY = "Median IT Salary"
    CASH = "Cash (Keeping under mattress)"


class InflationType(str, Enum):
    CPI_COMBINED = "CPI (All India Combined)"
    CPI_FOOD = "CPI (Food & Beverages)"
    CPI_FUEL = "CPI (Fuel & Light)"
    WPI = "WPI (Wholesale)"
    LIFESTYLE_METRO = "Metro Lifestyle Index (Est.)"


class TimeRange(str, Enum):
    Y1 = "1Y"
    Y3 = "3Y"
    Y5 = "5Y"
    Y10 = "10Y"
    MAX = "Max (20Y)"


@dataclass(frozen=True)
class AssetParams:
    mean: float
    vol: float


@dataclass(frozen=True)
class InflationParams:
    base_rate: float
    vol: float


MONTHS_BY_RANGE = {
    TimeRange.Y1: 12,
    TimeRange.Y3: 36,
    TimeRange.Y5: 60,
    TimeRange.Y10: 120,
    TimeRange.MAX: 240,
}

ASSET_PRESETS = {
    AssetType.NIFTY_50: AssetParams(mean=0.12, vol=0.15),
    AssetType.SENSEX: AssetParams(mean=0.125, vol=0.15),
    AssetType.GOLD: AssetParams(mean=0.09, vol=0.12),
    AssetType.FD: AssetParams(mean=0.065, vol=0.002),
    AssetType.PPF: AssetParams(mean=0.071, vol=0.0),
    AssetType.MEDIAN_SALARY: AssetParams(mean=0.08, vol=0.01),
    AssetType.CASH: AssetParams(mean=0.0, vol=0.0),
}

INFLATION_PRESETS = {
    InflationType.CPI_COMBINED: InflationParams(base_rate=0.06, vol=0.005),
    InflationType.CPI_FOOD: InflationParams(base_rate=0.07, vol=0.015),
    InflationType.CPI_FUEL: InflationParams(base_rate=0.05, vol=0.02),
    InflationType.WPI: InflationParams(base_rate=0.04, vol=0.01),
    InflationType.LIFESTYLE_METRO: InflationParams(base_rate=0.10, vol=0.008),
}

DEFAULT_ASSET = AssetType.FD
DEFAULT_INFLATION = InflationType.CPI_COMBINED


def as_member(enum_cls, key):
    # Accept members or their display strings; None for anything else
    if isinstance(key, enum_cls):
        return key
    try:
        return enum_cls(key)
    except ValueError:
        return None


def resolve_asset(asset) -> AssetType:
    member = as_member(AssetType, asset)
    if member not in ASSET_PRESETS:
        logger.warning("Unknown asset %r, falling back to %s", asset, DEFAULT_ASSET.value)
        member = DEFAULT_ASSET
    return member


def resolve_inflation(inflation) -> InflationType:
    member = as_member(InflationType, inflation)
    if member not in INFLATION_PRESETS:
        logger.warning("Unknown inflation index %r, falling back to %s", inflation, DEFAULT_INFLATION.value)
        member = DEFAULT_INFLATION
    return member


def asset_params(asset) -> AssetParams:
    """Drift/vol row for an asset class. Unknown keys get the FD row."""
    return ASSET_PRESETS[resolve_asset(asset)]


def inflation_params(inflation) -> InflationParams:
    """Base rate/vol row for an inflation index. Unknown keys get headline CPI."""
    return INFLATION_PRESETS[resolve_inflation(inflation)]


def months_for(time_range, table: dict = None) -> int:
    """
    Month count for a time range; unmapped ranges get DEFAULTS["default_months"].
    A zero or negative count would leave CAGR undefined, so it is rejected here.
    """
    table = MONTHS_BY_RANGE if table is None else table
    months = table.get(as_member(TimeRange, time_range))
    if months is None:
        logger.warning("Unknown time range %r, using %d months", time_range, DEFAULTS["default_months"])
        months = DEFAULTS["default_months"]
    if months <= 0:
        raise ValueError(f"Time range {time_range!r} maps to {months} months; need at least 1")
    return int(months)
