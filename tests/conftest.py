"""Pytest configuration and shared fixtures."""

from types import SimpleNamespace

import numpy as np
import pytest


@pytest.fixture
def ten_day_prices() -> list[float]:
    """Ten daily closes with a known 5-day SMA."""
    return [100, 102, 101, 105, 110, 108, 107, 112, 115, 113]


@pytest.fixture
def price_walk():
    """Factory for a positive random-walk close series."""
    def _walk(n_days: int = 120, seed: int = 7, start: float = 100.0) -> list[float]:
        rng = np.random.default_rng(seed)
        steps = rng.normal(0.0005, 0.015, n_days - 1)
        return (start * np.cumprod(np.concatenate([[1.0], 1 + steps]))).tolist()
    return _walk


@pytest.fixture
def asset_returns():
    """Factory for *n_assets* equal-length daily return series."""
    def _returns(n_assets: int = 3, n_days: int = 300, seed: int = 11) -> list[list[float]]:
        rng = np.random.default_rng(seed)
        matrix = rng.normal(0.0004, 0.012, (n_days, n_assets))
        return [matrix[:, j].tolist() for j in range(n_assets)]
    return _returns


@pytest.fixture
def make_stock():
    """Factory for a minimal stock record carrying symbol and fundamentals."""
    def _stock(symbol: str, sector: str, **fundamentals) -> SimpleNamespace:
        base = {
            "pe": 15.0,
            "pb": 3.0,
            "roe": 0.20,
            "roi": 0.10,
            "debt_to_equity": 50.0,
            "peg": 1.2,
            "eps": 4.0,
            "sector": sector,
        }
        base.update(fundamentals)
        return SimpleNamespace(symbol=symbol, fundamentals=base)
    return _stock
