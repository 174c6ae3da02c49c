APP_NAME = "RupeeReality: What Inflation Does to Your Money"

# Simulation defaults (all rates fractional, per year unless noted)
DEFAULTS = {
    # Starting point
    "base_nominal": 100_000,          # ₹1 lakh
    "base_index": 100.0,              # inflation index at month 0

    # Calibration knobs
    "inflation_floor": -0.01,         # worst monthly deflation allowed
    "salary_hike_jitter": 0.02,       # hike = mean ± this, uniform
    "default_months": 60,             # used for an unmapped time range

    # Page defaults
    "asset": "Nifty 50",
    "inflation": "CPI (All India Combined)",
    "time_range": "5Y",
    "compare_assets": ["Nifty 50", "Gold (INR)", "Fixed Deposit", "Cash (Keeping under mattress)"],

    # Sims
    "seed": None,                     # None = fresh draw every run
}

DATA_SOURCES = [
    {
        "name": "Ministry of Statistics (MOSPI)",
        "category": "Inflation",
        "url": "https://cpi.mospi.gov.in/",
        "description": "Consumer Price Index (CPI) data for India. The 'CPI Combined' (All India) "
                       "figures calibrate the headline inflation index.",
    },
    {
        "name": "National Stock Exchange (NSE)",
        "category": "Equities",
        "url": "https://www.nseindia.com/",
        "description": "Nifty 50 and other equity indices. The simulation approximates the Total "
                       "Return Index, which includes reinvested dividends.",
    },
    {
        "name": "Reserve Bank of India (RBI)",
        "category": "Interest Rates",
        "url": "https://www.rbi.org.in/",
        "description": "Historical repo and aggregate deposit rates, the benchmark for the Fixed "
                       "Deposit simulation.",
    },
    {
        "name": "India Bullion & Jewellers Assoc. (IBJA)",
        "category": "Commodities",
        "url": "https://ibja.co/",
        "description": "Daily gold rates (999 purity) in INR, the standard for domestic gold prices.",
    },
    {
        "name": "Labour Bureau",
        "category": "Inflation",
        "url": "http://labourbureau.gov.in/",
        "description": "CPI for Industrial Workers (CPI-IW), used for Dearness Allowance calculations.",
    },
]
