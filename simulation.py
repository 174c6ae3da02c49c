import logging
import math
from dataclasses import asdict, dataclass, field
from datetime import date
from typing import List, Optional

import pandas as pd
from dateutil.relativedelta import relativedelta

from config import DEFAULTS
from presets import (
    ASSET_PRESETS,
    INFLATION_PRESETS,
    AssetParams,
    AssetType,
    InflationParams,
    as_member,
    months_for,
    resolve_asset,
    resolve_inflation,
)
from sampling import RandomSource

logger = logging.getLogger(__name__)


@dataclass
class SimConfig:
    asset: str = DEFAULTS["asset"]
    inflation: str = DEFAULTS["inflation"]
    time_range: str = DEFAULTS["time_range"]
    base_nominal: float = DEFAULTS["base_nominal"]
    base_index: float = DEFAULTS["base_index"]
    inflation_floor: float = DEFAULTS["inflation_floor"]    # min monthly inflation
    salary_hike_jitter: float = DEFAULTS["salary_hike_jitter"]
    seed: Optional[int] = DEFAULTS["seed"]
    asset_params: Optional[AssetParams] = None              # overrides the preset row
    inflation_params: Optional[InflationParams] = None


@dataclass
class DataPoint:
    date: str               # "Jan 23"
    nominal_value: int      # ₹, face value
    real_value: int         # ₹, in month-0 purchasing power
    inflation_index: float  # base 100 at month 0


@dataclass
class SeriesSummary:
    total_nominal_return: float
    total_real_return: float
    cagr_nominal: float
    cagr_real: float


@dataclass
class ChartData:
    series: List[DataPoint] = field(default_factory=list)
    summary: Optional[SeriesSummary] = None

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame([asdict(p) for p in self.series],
                            columns=["date", "nominal_value", "real_value", "inflation_index"])


def monthly_rate(annual: float) -> float:
    # Geometric, so twelve months compound back to the annual rate
    return (1 + annual) ** (1 / 12.0) - 1


# ---------- Asset steps (one month, i >= 1) ----------
def _salary_step(nominal, i, params, cfg, source):
    # Flat between appraisals, one hike every 12 months
    if i % 12 == 0:
        jitter = cfg.salary_hike_jitter
        return nominal * (1 + params.mean + source.uniform(-jitter, jitter))
    return nominal


def _fixed_income_step(nominal, i, params, cfg, source):
    return nominal * (1 + monthly_rate(params.mean))


def _market_step(nominal, i, params, cfg, source):
    return max(0.0, nominal * (1 + monthly_rate(params.mean) + source.normal() * params.vol))


ASSET_STEPS = {
    AssetType.MEDIAN_SALARY: _salary_step,
    AssetType.FD: _fixed_income_step,
    AssetType.PPF: _fixed_income_step,
    AssetType.CASH: _fixed_income_step,
}


def _inflation_step(index, params, cfg, source):
    period = max(cfg.inflation_floor, monthly_rate(params.base_rate) + source.normal() * params.vol)
    return index * (1 + period)


def month_labels(months: int, today: Optional[date] = None) -> List[str]:
    """Labels for months 0..months, ending at the current month."""
    today = today or date.today()
    start = today.replace(day=1) - relativedelta(months=months)
    return [(start + relativedelta(months=i)).strftime("%b %y") for i in range(months + 1)]


def _growth_pct(start: float, end: float) -> float:
    return (end - start) / start * 100.0


def _cagr_pct(start: float, end: float, years: float) -> float:
    return ((end / start) ** (1.0 / years) - 1) * 100.0


def summarize(series: List[DataPoint], months: int) -> SeriesSummary:
    """
    Total return and CAGR from the first and last points of a series.
    Raises ValueError rather than handing NaN/inf to the chart.
    """
    if months <= 0:
        raise ValueError(f"Need a positive month count for CAGR, got {months}")
    if not series:
        raise ValueError("Cannot summarize an empty series")
    first, last = series[0], series[-1]
    if first.nominal_value <= 0 or first.real_value <= 0:
        raise ValueError(
            f"Start values must be positive (nominal={first.nominal_value}, real={first.real_value})"
        )
    years = months / 12.0
    summary = SeriesSummary(
        total_nominal_return=_growth_pct(first.nominal_value, last.nominal_value),
        total_real_return=_growth_pct(first.real_value, last.real_value),
        cagr_nominal=_cagr_pct(first.nominal_value, last.nominal_value, years),
        cagr_real=_cagr_pct(first.real_value, last.real_value, years),
    )
    if not all(math.isfinite(v) for v in asdict(summary).values()):
        raise ValueError(f"Non-finite summary: {summary}")
    return summary


def run_series(cfg: SimConfig, source=None, today: Optional[date] = None) -> ChartData:
    """
    Simulate one nominal/inflation path for the configured asset and index.

    `source` needs normal() and uniform(low, high); defaults to RandomSource(cfg.seed).
    Month 0 is the starting point (base_nominal, base_index); months 1..M step both legs.
    """
    asset = resolve_asset(cfg.asset)
    inflation = resolve_inflation(cfg.inflation)
    a_params = cfg.asset_params or ASSET_PRESETS[asset]
    i_params = cfg.inflation_params or INFLATION_PRESETS[inflation]
    months = months_for(cfg.time_range)
    source = source if source is not None else RandomSource(cfg.seed)
    # Unmapped assets keep the FD row but move like a market asset
    step = ASSET_STEPS.get(as_member(AssetType, cfg.asset), _market_step)

    labels = month_labels(months, today)
    nominal = float(cfg.base_nominal)
    index = float(cfg.base_index)
    series = []
    for i in range(months + 1):
        if i > 0:
            index = _inflation_step(index, i_params, cfg, source)
            nominal = step(nominal, i, a_params, cfg, source)
        real = nominal / (index / cfg.base_index)
        series.append(DataPoint(
            date=labels[i],
            nominal_value=round(nominal),
            real_value=round(real),
            inflation_index=round(index, 2),
        ))

    summary = summarize(series, months)
    logger.debug("Generated %d months of %s vs %s: nominal %+.1f%%, real %+.1f%%",
                 months, asset.value, inflation.value,
                 summary.total_nominal_return, summary.total_real_return)
    return ChartData(series=series, summary=summary)


def generate_chart_data(asset, inflation, time_range, source=None, today: Optional[date] = None) -> ChartData:
    return run_series(SimConfig(asset=asset, inflation=inflation, time_range=time_range),
                      source=source, today=today)
