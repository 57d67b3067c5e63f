"""Stock data fetching: daily closes and fundamental ratios via yfinance."""

import pandas as pd
import yfinance as yf

from config import TICKERS, DATA_PERIOD
from .log import get_logger

logger = get_logger(__name__)

# yfinance ``info`` key for each fundamental field
FUNDAMENTAL_FIELDS = {
    "name": "shortName",
    "sector": "sector",
    "price": "regularMarketPrice",
    "pe": "trailingPE",
    "pb": "priceToBook",
    "eps": "trailingEps",
    "roe": "returnOnEquity",
    "roi": "returnOnAssets",
    "debt_to_equity": "debtToEquity",
    "peg": "trailingPegRatio",
    "volume": "regularMarketVolume",
    "market_cap": "marketCap",
}


def fetch_price_history(
    tickers: list[str] = TICKERS,
    period: str = DATA_PERIOD,
) -> pd.DataFrame:
    """Download daily close prices for *tickers* over *period* via yfinance.

    Handles both old (<=0.2.x) and new (>=1.x) yfinance column formats.
    Columns follow the requested ticker order; tickers with no data at all
    are dropped. Raises RuntimeError if the download yields no data.
    """
    df = yf.download(tickers, period=period, progress=False)

    if df.empty:
        raise RuntimeError(
            "yfinance returned no data. Check the network connection "
            "and that the tickers are valid."
        )

    # yfinance >=1.x returns MultiIndex ('Price', 'Ticker')
    if isinstance(df.columns, pd.MultiIndex):
        df = df["Close"]
    elif "Close" in df.columns:
        df = df[["Close"]].rename(columns={"Close": tickers[0]})

    if hasattr(df.columns, "name"):
        df.columns.name = None

    available = [t for t in tickers if t in df.columns]
    missing = [t for t in tickers if t not in available]
    if missing:
        logger.warning("No price history returned", tickers=missing)

    return df[available].dropna(axis=1, how="all")


def price_series(prices: pd.DataFrame, ticker: str) -> pd.Series:
    """Date-indexed closes for *ticker* with missing bars removed."""
    return prices[ticker].dropna().astype(float)


def fetch_fundamentals(ticker: str) -> dict:
    """Return the fundamental fields of *ticker* from ``yfinance.Ticker.info``.

    Values are passed through as reported; fields yfinance does not provide
    are ``None``.
    """
    info = yf.Ticker(ticker).info or {}
    fundamentals = {field: info.get(key) for field, key in FUNDAMENTAL_FIELDS.items()}
    fundamentals["symbol"] = ticker
    if fundamentals["peg"] is None:
        fundamentals["peg"] = info.get("pegRatio")
    return fundamentals
