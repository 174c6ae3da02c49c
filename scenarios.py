from dataclasses import asdict, replace

import pandas as pd

from presets import resolve_asset
from simulation import SimConfig, run_series


def clone_cfg(cfg: SimConfig, **overrides):
    return replace(cfg, **overrides)


def compare_assets(assets, inflation, time_range, seed=None) -> pd.DataFrame:
    """
    Run every asset against the same inflation index and window.
    returns: one row per asset with the four summary columns (percent)
    """
    base = SimConfig(inflation=inflation, time_range=time_range, seed=seed)
    rows = []
    for asset in assets:
        data = run_series(clone_cfg(base, asset=asset))
        rows.append({"asset": resolve_asset(asset).value, **asdict(data.summary)})
    return pd.DataFrame(rows, columns=["asset", "total_nominal_return", "total_real_return",
                                       "cagr_nominal", "cagr_real"])
