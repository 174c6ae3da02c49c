import numpy as np
import plotly.graph_objects as go

from formatting import format_axis_tick, format_inr
from simulation import ChartData

NOMINAL_NAME = "Nominal Value (On Paper)"
REAL_NAME = "Real Value (Purchasing Power)"


def _axis_ticks(lo: float, hi: float, n: int = 5):
    vals = np.linspace(lo, hi, n)
    return list(vals), [format_axis_tick(v) for v in vals]


def chart_figure(data: ChartData, title: str = "") -> go.Figure:
    df = data.to_frame()
    lo = float(df[["nominal_value", "real_value"]].min().min()) * 0.9
    hi = float(df[["nominal_value", "real_value"]].max().max()) * 1.1

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=df["date"], y=df["nominal_value"], mode="lines", name=NOMINAL_NAME,
        line=dict(color="#2563eb", width=3),
        customdata=[format_inr(v) for v in df["nominal_value"]],
        hovertemplate="%{customdata}<extra>" + NOMINAL_NAME + "</extra>",
    ))
    # Dashed so the two lines differ without relying on colour
    fig.add_trace(go.Scatter(
        x=df["date"], y=df["real_value"], mode="lines", name=REAL_NAME,
        line=dict(color="#d97706", width=3, dash="dash"),
        customdata=[format_inr(v) for v in df["real_value"]],
        hovertemplate="%{customdata}<extra>" + REAL_NAME + "</extra>",
    ))
    tickvals, ticktext = _axis_ticks(lo, hi)
    fig.update_layout(
        title=title, xaxis_title="Month", yaxis_title="₹",
        yaxis=dict(range=[lo, hi], tickvals=tickvals, ticktext=ticktext),
        hovermode="x unified", margin=dict(l=30, r=20, t=60, b=30),
        legend=dict(orientation="h", yanchor="bottom", y=1.02),
    )
    return fig
