# app.py
import logging

import streamlit as st

from charts import chart_figure
from config import APP_NAME, DATA_SOURCES, DEFAULTS
from exporters import export_run, export_series
from formatting import format_inr, format_pct
from presets import AssetType, InflationType, TimeRange
from scenarios import compare_assets
from simulation import SimConfig, run_series
from ui import header, helptext, info_card, kpi_card

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# ------------- Page setup -------------
st.set_page_config(page_title=APP_NAME, page_icon="₹", layout="wide")
header(APP_NAME, "See how inflation quietly eats into your savings, salary and investments.")

with st.expander("How this app works (30 seconds)"):
    st.write("""
**Plain English version:**
- We start you with **₹1 lakh** in the asset you pick.
- Each month the asset grows (or wobbles) and prices rise by the inflation index you pick.
- **Real value** is what that money buys in start-date rupees.
- The numbers are simulated from long-run averages, so every run is a slightly different story.
    """)

# ------------- Controls -------------
assets = [a.value for a in AssetType]
inflations = [i.value for i in InflationType]
ranges = [r.value for r in TimeRange]

c1, c2, c3 = st.columns(3)
asset = c1.selectbox("Asset class", assets, index=assets.index(DEFAULTS["asset"]))
inflation = c2.selectbox("Adjusted for", inflations, index=inflations.index(DEFAULTS["inflation"]))
time_range = c3.radio("Time range", ranges, index=ranges.index(DEFAULTS["time_range"]), horizontal=True)

seed = st.sidebar.number_input(
    "Random seed (-1 = random)", min_value=-1, value=-1, step=1,
    help="Set a seed to replay the same simulated path.",
)
cfg = SimConfig(asset=asset, inflation=inflation, time_range=time_range,
                seed=None if seed == -1 else int(seed))
data = run_series(cfg)
s = data.summary
last = data.series[-1]

# ------------- Summary -------------
k = st.columns(4)
kpi_card(k[0], "Total nominal return", format_pct(s.total_nominal_return),
         f"CAGR {format_pct(s.cagr_nominal)}")
kpi_card(k[1], "Total real return", format_pct(s.total_real_return),
         f"CAGR {format_pct(s.cagr_real)}")
kpi_card(k[2], "Value on paper today", format_inr(last.nominal_value))
kpi_card(k[3], "What it actually buys", format_inr(last.real_value), "in start-date rupees")

st.plotly_chart(chart_figure(data, f"{asset} vs {inflation}"), use_container_width=True)
helptext("The dashed line is purchasing power. When it sits below ₹1 lakh, inflation has won.")

# ------------- Explainers -------------
cards = st.columns(3)
info_card(cards[0], "What is CPI?",
          "The Consumer Price Index measures the price change of a common basket of goods "
          "(food, fuel, clothing) for the average Indian household. It is the official inflation "
          "rate reported by MOSPI.")
info_card(cards[1], "Why do I feel poorer?",
          "Official CPI underweights lifestyle inflation. Private schooling, metro rent and "
          "healthcare rise much faster (10-12%) than the price of rice or wheat (6%).")
info_card(cards[2], "Real return math",
          "Real return ≈ nominal return - inflation. A 7% FD with 6% inflation grows your real "
          "wealth by roughly 1%.")

# ------------- Compare -------------
st.markdown("### Side by side")
picked = st.multiselect("Assets to compare", assets, default=DEFAULTS["compare_assets"])
if picked:
    table = compare_assets(picked, inflation, time_range, seed=cfg.seed)
    st.dataframe(
        table.set_index("asset").apply(lambda col: col.map(format_pct)),
        use_container_width=True,
    )

# ------------- Data sources -------------
with st.expander("Methodology & data sources"):
    st.write("Parameters are calibrated to roughly ten years of Indian market history; "
             "values shown are simulated, not live quotes.")
    for src in DATA_SOURCES:
        st.markdown(f"- **[{src['name']}]({src['url']})** ({src['category']}): {src['description']}")

# ------------- Export -------------
name_csv, data_csv = export_series(data)
st.download_button("⬇️ Download series (CSV)", data_csv, file_name=name_csv, mime="text/csv")
name_run, data_run = export_run(cfg, data)
st.download_button("⬇️ Download run (JSON)", data_run, file_name=name_run, mime="application/json")

st.markdown("---")
st.caption("Educational illustration only. Simulated data, not investment advice.")
