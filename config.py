"""Centralized configuration for the Equity Screener & Portfolio Analytics."""

import os
from dotenv import load_dotenv

load_dotenv()

# ── Screening universe ─────────────────────────────────────────────
TICKERS = [
    "AAPL", "MSFT", "GOOGL", "AMZN", "NVDA",
    "TSLA", "META", "BRK-B", "UNH", "JNJ",
]
DATA_PERIOD = "1y"                  # 1 year of daily bars

# ── Technical indicators ───────────────────────────────────────────
SMA_SHORT_PERIOD = 20
SMA_LONG_PERIOD = 50
RSI_PERIOD = 14
RSI_OVERSOLD = 30
RSI_OVERBOUGHT = 70
MACD_FAST = 12
MACD_SLOW = 26
MACD_SIGNAL = 9

# RSI of a window with neither gains nor losses
RSI_FLAT_VALUE = 50.0

# ── Screening defaults ─────────────────────────────────────────────
MAX_PE = 25.0
MAX_PB = 5.0
MIN_ROE = 0.10                      # 10%
MIN_ROI = 0.08                      # 8%
MAX_DEBT_TO_EQUITY = 150.0          # percent, as yfinance reports it
MAX_PEG = 2.0
MIN_EPS = 1.0
MIN_SECTORS = 4
MAX_PORTFOLIO_SIZE = 10

# ── Efficient frontier ─────────────────────────────────────────────
EF_NUM_POINTS = 50
FRONTIER_WINDOW = 252               # most recent trading days per asset

# ── Monte Carlo defaults ───────────────────────────────────────────
DEFAULT_NUM_SIMULATIONS = 10_000
DEFAULT_VAR_CONFIDENCE = 0.95       # 95%
ZERO_VOL_TOLERANCE = 1e-12
TRADING_DAYS_PER_YEAR = 252

_seed = os.getenv("RANDOM_SEED", "")
RANDOM_SEED = int(_seed) if _seed.strip() else None

# ── Logging ────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_JSON = os.getenv("LOG_JSON", "false").lower() == "true"
