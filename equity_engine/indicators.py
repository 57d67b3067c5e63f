"""Technical indicators over a daily close series: SMA, EMA, RSI, MACD and returns.

Every indicator returns a list aligned with its input where ``None`` marks a
position whose lookback window is not yet satisfied.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from config import (
    MACD_FAST,
    MACD_SIGNAL,
    MACD_SLOW,
    RSI_FLAT_VALUE,
    RSI_PERIOD,
)
from .errors import DegenerateInputError, InsufficientDataError

IndicatorSeries = list[float | None]


@dataclass(frozen=True)
class MACDResult:
    """MACD line plus its signal line.

    The signal line is an EMA over the MACD line with its ``None`` entries
    removed, so ``signal_line[j]`` belongs to price index ``signal_offset + j``.
    """

    macd_line: IndicatorSeries
    signal_line: IndicatorSeries
    signal_offset: int

    def aligned_signal(self) -> IndicatorSeries:
        """Signal line re-indexed onto the price timeline."""
        return [None] * self.signal_offset + list(self.signal_line)


def _check_window(prices: Sequence[float], period: int, required: int, name: str) -> None:
    if period < 1:
        raise ValueError(f"{name} period must be positive, got {period}")
    if len(prices) < required:
        raise InsufficientDataError(
            f"{name}({period}) needs {required} prices, got {len(prices)}",
            required_count=required,
            available_count=len(prices),
        )


def sma(prices: Sequence[float], period: int) -> IndicatorSeries:
    """Simple moving average of the trailing *period* closes."""
    _check_window(prices, period, period, "SMA")

    result: IndicatorSeries = [None] * (period - 1)
    for i in range(period - 1, len(prices)):
        window = prices[i - period + 1:i + 1]
        result.append(sum(window) / period)
    return result


def ema(prices: Sequence[float], period: int) -> IndicatorSeries:
    """Exponential moving average seeded with the SMA of the first *period* closes.

    Each value depends on its predecessor, so this is a strict left-to-right
    scan.
    """
    _check_window(prices, period, period, "EMA")

    multiplier = 2 / (period + 1)
    result: IndicatorSeries = [None] * (period - 1)

    prev = sum(prices[0:period]) / period
    result.append(prev)
    for price in prices[period:]:
        prev = (price - prev) * multiplier + prev
        result.append(prev)
    return result


def _rsi_value(avg_gain: float, avg_loss: float) -> float:
    if avg_loss == 0:
        # RS -> infinity saturates at 100; a flat window has no direction
        return 100.0 if avg_gain > 0 else RSI_FLAT_VALUE
    rs = avg_gain / avg_loss
    return 100 - 100 / (1 + rs)


def rsi(prices: Sequence[float], period: int = RSI_PERIOD) -> IndicatorSeries:
    """Relative Strength Index from simple (not Wilder) averages of gains/losses.

    The result has one entry per day-over-day difference, i.e.
    ``len(prices) - 1`` entries. Entry *k* covers the move from ``prices[k]``
    to ``prices[k + 1]`` and averages the trailing *period* differences ending
    there.
    """
    _check_window(prices, period, period + 1, "RSI")

    gains: list[float] = []
    losses: list[float] = []
    result: IndicatorSeries = []

    for i in range(1, len(prices)):
        difference = prices[i] - prices[i - 1]
        gains.append(max(difference, 0.0))
        losses.append(max(-difference, 0.0))

        if i < period:
            result.append(None)
            continue

        avg_gain = sum(gains[i - period:i]) / period
        avg_loss = sum(losses[i - period:i]) / period
        result.append(_rsi_value(avg_gain, avg_loss))

    return result


def macd(
    prices: Sequence[float],
    fast_period: int = MACD_FAST,
    slow_period: int = MACD_SLOW,
    signal_period: int = MACD_SIGNAL,
) -> MACDResult:
    """MACD line (fast EMA - slow EMA) and the EMA signal line over it."""
    ema_fast = ema(prices, fast_period)
    ema_slow = ema(prices, slow_period)

    macd_line: IndicatorSeries = [
        fast - slow if fast is not None and slow is not None else None
        for fast, slow in zip(ema_fast, ema_slow)
    ]

    compacted = [value for value in macd_line if value is not None]
    if len(compacted) < signal_period:
        raise InsufficientDataError(
            f"MACD signal({signal_period}) needs {signal_period} MACD values, "
            f"got {len(compacted)}",
            required_count=signal_period,
            available_count=len(compacted),
        )
    signal_line = ema(compacted, signal_period)
    offset = len(macd_line) - len(compacted)

    return MACDResult(macd_line=macd_line, signal_line=signal_line, signal_offset=offset)


def daily_returns(prices: Sequence[float]) -> list[float]:
    """Simple day-over-day returns; the first day has no baseline and is 0."""
    if len(prices) == 0:
        raise InsufficientDataError(
            "Daily returns need at least one price",
            required_count=1,
            available_count=0,
        )

    returns = [0.0]
    for i in range(1, len(prices)):
        previous = prices[i - 1]
        if previous == 0:
            raise DegenerateInputError(
                f"Zero price at index {i - 1} leaves the return undefined",
                index=i - 1,
            )
        returns.append((prices[i] - previous) / previous)
    return returns


def latest(series: Sequence[float | None]) -> float | None:
    """Last value of *series*, or ``None`` for an empty series."""
    if len(series) == 0:
        return None
    return series[-1]
