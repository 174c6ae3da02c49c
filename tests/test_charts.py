from charts import NOMINAL_NAME, REAL_NAME, chart_figure
from presets import AssetType, InflationType, TimeRange
from simulation import generate_chart_data


def test_chart_has_nominal_and_real_lines(zero_source):
    data = generate_chart_data(AssetType.FD, InflationType.CPI_COMBINED, TimeRange.Y5, source=zero_source)
    fig = chart_figure(data, "FD vs CPI")

    names = [t.name for t in fig.data]
    assert names == [NOMINAL_NAME, REAL_NAME]
    assert fig.data[1].line.dash == "dash"
    assert len(fig.data[0].x) == 61

    lo, hi = fig.layout.yaxis.range
    assert lo == 100_000 * 0.9
    assert hi == 137_009 * 1.1
    assert fig.layout.yaxis.ticktext[0] == "90k"
