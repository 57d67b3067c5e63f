"""Per-symbol technical analysis and the portfolio report over a selection."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

import pandas as pd

import config as cfg
from .errors import AnalyticsError
from .indicators import daily_returns, latest, macd, rsi, sma
from .log import get_logger
from .monte_carlo import MonteCarloSample, run_monte_carlo, summarize_simulation
from .optimizer import FrontierPoint, find_max_sharpe, sample_efficient_frontier
from .signals import technical_signals

logger = get_logger(__name__)


@dataclass(frozen=True)
class StockAnalysis:
    """Latest indicator values plus the full history of one symbol."""

    symbol: str
    fundamentals: dict
    sma20: float
    sma50: float
    rsi: float
    macd: float
    macd_signal: float
    daily_returns: tuple[float, ...]
    prices: tuple[float, ...]
    dates: tuple | None = None

    @property
    def signals(self) -> list[str]:
        return technical_signals(
            self.prices[-1], self.sma20, self.sma50, self.rsi, self.macd, self.macd_signal
        )


@dataclass(frozen=True)
class PortfolioReport:
    symbols: tuple[str, ...]
    frontier: list[FrontierPoint] = field(default_factory=list)
    max_sharpe: FrontierPoint | None = None
    weights: dict[str, float] = field(default_factory=dict)
    simulation: list[MonteCarloSample] = field(default_factory=list)
    summary: dict = field(default_factory=dict)


def analyze_symbol(
    symbol: str,
    prices: Sequence[float],
    fundamentals: Mapping | None = None,
) -> StockAnalysis:
    """Compute the latest SMA20/SMA50/RSI/MACD values and daily returns.

    Raises an ``AnalyticsError`` subclass when the history is too short or
    contains a zero price. A date-indexed ``pd.Series`` keeps its dates so
    the history can later be aligned with other symbols.
    """
    dates = tuple(prices.index) if isinstance(prices, pd.Series) else None
    prices = tuple(float(p) for p in prices)
    macd_result = macd(prices, cfg.MACD_FAST, cfg.MACD_SLOW, cfg.MACD_SIGNAL)

    return StockAnalysis(
        symbol=symbol,
        fundamentals=dict(fundamentals or {}),
        sma20=latest(sma(prices, cfg.SMA_SHORT_PERIOD)),
        sma50=latest(sma(prices, cfg.SMA_LONG_PERIOD)),
        rsi=latest(rsi(prices, cfg.RSI_PERIOD)),
        macd=latest(macd_result.macd_line),
        macd_signal=latest(macd_result.signal_line),
        daily_returns=tuple(daily_returns(prices)),
        prices=prices,
        dates=dates,
    )


def analyze_universe(
    price_map: Mapping[str, Sequence[float]],
    fundamentals_map: Mapping[str, Mapping] | None = None,
) -> list[StockAnalysis]:
    """Analyze every symbol in *price_map*, omitting the ones that fail."""
    fundamentals_map = fundamentals_map or {}
    results = []

    for symbol, prices in price_map.items():
        try:
            results.append(analyze_symbol(symbol, prices, fundamentals_map.get(symbol)))
        except AnalyticsError as exc:
            logger.warning(
                "Symbol omitted from analysis",
                symbol=symbol,
                error=type(exc).__name__,
                reason=exc.message,
            )

    logger.info("Universe analyzed", requested=len(price_map), analyzed=len(results))
    return results


def align_returns(selected: Sequence[StockAnalysis]) -> list[list[float]]:
    """Daily returns of every selected symbol over the dates they all share.

    Closes are joined on date and any row missing a close is dropped, so a
    gap in one history removes that day for every symbol. Histories without
    dates fall back to their most recent common length.
    """
    if any(s.dates is None for s in selected):
        common = min(len(s.daily_returns) for s in selected)
        return [list(s.daily_returns[len(s.daily_returns) - common:]) for s in selected]

    closes = pd.concat(
        [pd.Series(s.prices, index=list(s.dates)) for s in selected], axis=1
    ).dropna()
    longest = max(len(s.prices) for s in selected)
    if len(closes) < longest:
        logger.info("Histories aligned on common dates", common_days=len(closes), longest=longest)
    return [daily_returns(closes.iloc[:, i].tolist()) for i in range(len(selected))]


def build_portfolio_report(
    selected: Sequence[StockAnalysis],
    num_points: int = cfg.EF_NUM_POINTS,
    num_sims: int = cfg.DEFAULT_NUM_SIMULATIONS,
    window: int = cfg.FRONTIER_WINDOW,
    seed: int | None = cfg.RANDOM_SEED,
) -> PortfolioReport:
    """Sample the frontier, pick the Max Sharpe weights and simulate the cloud.

    Return series are aligned on their common dates first (see
    ``align_returns``); the frontier window shrinks to the aligned length
    when the history is shorter.
    """
    symbols = tuple(s.symbol for s in selected)
    if not selected:
        return PortfolioReport(symbols=symbols)

    aligned = align_returns(selected)
    common = len(aligned[0])
    if common < window:
        logger.info("Frontier window shortened", requested=window, available=common)
        window = common

    frontier = sample_efficient_frontier(aligned, num_points=num_points, window=window, seed=seed)
    best = find_max_sharpe(frontier)
    weights = best.weights.by_symbol(symbols) if best is not None else {}

    simulation = run_monte_carlo(aligned, num_sims=num_sims, seed=seed)

    logger.info(
        "Portfolio report built",
        symbols=list(symbols),
        max_sharpe=best.sharpe_ratio if best is not None else None,
        num_sims=len(simulation),
    )
    return PortfolioReport(
        symbols=symbols,
        frontier=frontier,
        max_sharpe=best,
        weights=weights,
        simulation=simulation,
        summary=summarize_simulation(simulation),
    )
