"""Monte Carlo portfolio simulation, fully vectorized with numpy."""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from config import DEFAULT_NUM_SIMULATIONS, RANDOM_SEED, TRADING_DAYS_PER_YEAR
from .covariance import estimate_covariance, stack_returns
from .log import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class MonteCarloSample:
    expected_return: float
    volatility: float


def random_weight_matrix(
    num_sims: int,
    n_assets: int,
    rng: np.random.Generator,
) -> np.ndarray:
    """Draw *num_sims* rows of uniform(0, 1) weights, each row normalized to 1."""
    raw = rng.random((num_sims, n_assets))
    return raw / raw.sum(axis=1, keepdims=True)


def run_monte_carlo(
    asset_returns: Sequence[Sequence[float]],
    num_sims: int = DEFAULT_NUM_SIMULATIONS,
    seed: int | None = RANDOM_SEED,
) -> list[MonteCarloSample]:
    """Run *num_sims* random-weight portfolio simulations.

    *asset_returns* holds one equal-length daily return series per asset.
    Returns one unsorted sample per trial with the annualized expected return
    and volatility of that trial's weights.
    """
    if len(asset_returns) == 0:
        return []

    returns = stack_returns(asset_returns)
    mean_returns, cov_matrix = estimate_covariance(returns)
    n_assets = len(mean_returns)

    rng = np.random.default_rng(seed)
    weights = random_weight_matrix(num_sims, n_assets, rng)

    # Portfolio expected returns: w @ mu  (vectorized)
    port_returns = weights @ mean_returns * TRADING_DAYS_PER_YEAR

    # Portfolio variances via einsum: w @ Sigma @ w^T per row
    port_variances = np.einsum("ij,jk,ik->i", weights, cov_matrix, weights)
    port_vols = np.sqrt(np.maximum(port_variances, 0.0) * TRADING_DAYS_PER_YEAR)

    logger.debug("Monte Carlo finished", n_assets=n_assets, num_sims=num_sims)
    return [
        MonteCarloSample(expected_return=float(r), volatility=float(v))
        for r, v in zip(port_returns, port_vols)
    ]


def summarize_simulation(samples: Sequence[MonteCarloSample]) -> dict:
    """Distribution statistics of a Monte Carlo cloud.

    Returns dict with mean/min/max and 5th/50th/95th percentiles for both
    return and volatility; an empty cloud gives an empty dict.
    """
    if len(samples) == 0:
        return {}

    rets = np.array([s.expected_return for s in samples])
    vols = np.array([s.volatility for s in samples])

    summary = {}
    for name, values in (("return", rets), ("volatility", vols)):
        p5, p50, p95 = np.percentile(values, [5, 50, 95])
        summary[name] = {
            "mean": float(values.mean()),
            "min": float(values.min()),
            "max": float(values.max()),
            "p5": float(p5),
            "p50": float(p50),
            "p95": float(p95),
        }
    summary["num_samples"] = len(samples)
    return summary
