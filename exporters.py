# exporters.py
import json
from dataclasses import asdict

from simulation import ChartData, SimConfig


def export_series(data: ChartData) -> tuple[str, bytes]:
    df = data.to_frame()
    return "series.csv", df.to_csv(index=False).encode()


def export_run(cfg: SimConfig, data: ChartData) -> tuple[str, bytes]:
    """
    Configuration plus headline numbers, so a run can be described later.
    Selections are str enums, so they serialize as their display values.
    """
    blob = json.dumps(
        {"config": asdict(cfg), "summary": asdict(data.summary), "months": len(data.series) - 1},
        indent=2,
    )
    return "run.json", blob.encode()
