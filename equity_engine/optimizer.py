"""Efficient frontier approximation by random weight sampling, and Max Sharpe."""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from config import EF_NUM_POINTS, FRONTIER_WINDOW, RANDOM_SEED
from .covariance import stack_returns
from .log import get_logger
from .risk import WeightVector, calc_portfolio_metrics

logger = get_logger(__name__)


@dataclass(frozen=True)
class FrontierPoint:
    risk: float
    expected_return: float
    sharpe_ratio: float
    weights: WeightVector


def sample_efficient_frontier(
    asset_returns: Sequence[Sequence[float]],
    num_points: int = EF_NUM_POINTS,
    window: int = FRONTIER_WINDOW,
    seed: int | None = RANDOM_SEED,
) -> list[FrontierPoint]:
    """Score *num_points* random portfolios and return them sorted by risk.

    *asset_returns* holds one daily return series per asset in a fixed
    caller-defined order; each is cut to its most recent *window* returns.
    An empty asset list yields an empty frontier.
    """
    if len(asset_returns) == 0:
        return []

    returns = stack_returns(asset_returns, window=window)
    n_assets = returns.shape[1]
    rng = np.random.default_rng(seed)

    points = []
    for _ in range(num_points):
        weights = WeightVector.random(n_assets, rng)
        metrics = calc_portfolio_metrics(weights, returns)
        points.append(
            FrontierPoint(
                risk=metrics["volatility"],
                expected_return=metrics["return"],
                sharpe_ratio=metrics["sharpe_ratio"],
                weights=weights,
            )
        )

    logger.debug("Frontier sampled", n_assets=n_assets, num_points=num_points, window=window)
    return sorted(points, key=lambda p: p.risk)


def find_max_sharpe(points: Sequence[FrontierPoint]) -> FrontierPoint | None:
    """Return the point with the highest Sharpe ratio, or ``None`` if empty.

    Ties keep the earliest point.
    """
    if len(points) == 0:
        return None

    best = points[0]
    for point in points[1:]:
        if point.sharpe_ratio > best.sharpe_ratio:
            best = point
    return best
