"""Portfolio risk metrics and the normalized weight vector."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import numpy as np
from scipy.stats import norm

from config import DEFAULT_VAR_CONFIDENCE, TRADING_DAYS_PER_YEAR, ZERO_VOL_TOLERANCE
from .errors import AlignmentError, DegenerateInputError, InsufficientDataError


@dataclass(frozen=True)
class WeightVector:
    """Non-negative portfolio weights, one per asset, summing to 1.0.

    Raw values are normalized by their sum on construction, so any
    ``WeightVector`` already satisfies the sum-to-one invariant.
    """

    values: tuple[float, ...]

    def __post_init__(self):
        raw = np.asarray(self.values, dtype=float)
        if raw.ndim != 1:
            raise DegenerateInputError("Weights must be a flat sequence")
        if np.any(raw < 0) or not np.all(np.isfinite(raw)):
            raise DegenerateInputError(
                "Weights must be finite and non-negative",
                context={"weights": raw.tolist()},
            )
        total = raw.sum()
        if total <= 0:
            raise DegenerateInputError("Weights sum to zero and cannot be normalized")
        object.__setattr__(self, "values", tuple((raw / total).tolist()))

    @classmethod
    def random(cls, n_assets: int, rng: np.random.Generator | None = None) -> "WeightVector":
        """Draw *n_assets* independent uniform(0, 1) values and normalize them."""
        rng = rng if rng is not None else np.random.default_rng()
        return cls(tuple(rng.random(n_assets)))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)

    def __getitem__(self, index: int) -> float:
        return self.values[index]

    def as_array(self) -> np.ndarray:
        return np.array(self.values)

    def by_symbol(self, symbols: Sequence[str]) -> dict[str, float]:
        """Map each symbol to its weight; *symbols* follows the asset order."""
        if len(symbols) != len(self.values):
            raise AlignmentError(
                "Symbol count does not match weight count",
                expected=len(self.values),
                actual=len(symbols),
            )
        return dict(zip(symbols, self.values))


def calc_portfolio_metrics(
    weights: WeightVector | Sequence[float],
    returns,
    var_confidence: float = DEFAULT_VAR_CONFIDENCE,
) -> dict:
    """Compute annualized portfolio metrics from a (days x assets) return matrix.

    Returns dict with: return, volatility, sharpe_ratio, var.

    Volatility uses the population variance (denominator N) of the daily
    portfolio returns; below ``ZERO_VOL_TOLERANCE`` it counts as 0. Sharpe
    assumes a zero risk-free rate and is 0.0 when volatility is 0. VaR is
    parametric daily VaR expressed as a positive fraction.
    """
    weights = np.asarray(tuple(weights), dtype=float)
    returns = np.asarray(returns, dtype=float)

    if returns.ndim != 2 or returns.shape[1] != len(weights):
        raise AlignmentError(
            "Weight count does not match the number of assets",
            expected=returns.shape[-1] if returns.ndim == 2 else None,
            actual=len(weights),
        )

    if returns.shape[0] == 0:
        raise InsufficientDataError(
            "Portfolio metrics need at least one day of returns",
            required_count=1,
            available_count=0,
        )

    # Per-day portfolio returns: R @ w
    port_daily = returns @ weights
    mean_return = float(port_daily.mean())
    variance = float(np.mean((port_daily - mean_return) ** 2))

    volatility = float(np.sqrt(variance * TRADING_DAYS_PER_YEAR))
    if volatility < ZERO_VOL_TOLERANCE:
        # rounding residue of a constant return series
        variance, volatility = 0.0, 0.0
    annual_return = mean_return * TRADING_DAYS_PER_YEAR
    sharpe = annual_return / volatility if volatility > 0 else 0.0

    # Parametric daily VaR
    z = norm.ppf(var_confidence)
    var = -(mean_return - z * np.sqrt(variance))  # positive number = loss

    return {
        "return": annual_return,
        "volatility": volatility,
        "sharpe_ratio": sharpe,
        "var": float(var),
    }
