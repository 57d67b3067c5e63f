"""Sample mean and covariance of per-asset daily returns."""

from collections.abc import Sequence

import numpy as np

from .errors import AlignmentError, InsufficientDataError


def stack_returns(
    series: Sequence[Sequence[float]],
    window: int | None = None,
) -> np.ndarray:
    """Stack per-asset return series into a (days x assets) matrix.

    With *window*, every series is first cut to its most recent *window*
    values. Series must otherwise already share one length.
    """
    if window is not None:
        short = [len(s) for s in series if len(s) < window]
        if short:
            raise InsufficientDataError(
                f"Return window of {window} days exceeds available history",
                required_count=window,
                available_count=min(short),
            )
        series = [s[len(s) - window:] for s in series]

    lengths = {len(s) for s in series}
    if len(lengths) > 1:
        raise AlignmentError(
            f"Return series have unequal lengths: {sorted(lengths)}",
            expected=min(lengths),
            actual=max(lengths),
        )

    if not series:
        return np.empty((0, 0))
    return np.column_stack([np.asarray(s, dtype=float) for s in series])


def estimate_covariance(returns) -> tuple[np.ndarray, np.ndarray]:
    """Return (mean_returns, cov_matrix) of a (days x assets) return matrix.

    The covariance uses the Bessel-corrected N-1 denominator. Only the upper
    triangle is computed; the lower one is its mirror, so the matrix is
    exactly symmetric.
    """
    matrix = np.asarray(returns, dtype=float)
    if matrix.ndim != 2 or matrix.size == 0:
        raise InsufficientDataError("Covariance needs a non-empty days x assets matrix")

    n_days, n_assets = matrix.shape
    if n_days < 2:
        raise InsufficientDataError(
            f"Sample covariance needs at least 2 days, got {n_days}",
            required_count=2,
            available_count=n_days,
        )

    mean_returns = matrix.mean(axis=0)
    centered = matrix - mean_returns

    cov_matrix = np.empty((n_assets, n_assets))
    for i in range(n_assets):
        for j in range(i, n_assets):
            value = centered[:, i] @ centered[:, j] / (n_days - 1)
            cov_matrix[i, j] = value
            cov_matrix[j, i] = value

    return mean_returns, cov_matrix


def correlation_matrix(cov_matrix: np.ndarray) -> np.ndarray:
    """Correlation matrix from a covariance matrix.

    Assets with zero variance get zero correlation with everything else and
    1.0 on the diagonal.
    """
    cov_matrix = np.asarray(cov_matrix, dtype=float)
    vols = np.sqrt(np.diag(cov_matrix))
    vols_safe = np.where(vols > 0, vols, 1.0)
    corr = cov_matrix / np.outer(vols_safe, vols_safe)
    corr[vols == 0, :] = 0.0
    corr[:, vols == 0] = 0.0
    corr = np.clip(corr, -1, 1)
    np.fill_diagonal(corr, 1.0)
    return corr
