"""Buy/sell labels from the latest moving-average, RSI and MACD values."""

from config import RSI_OVERBOUGHT, RSI_OVERSOLD


def technical_signals(
    price: float | None,
    sma20: float | None,
    sma50: float | None,
    rsi: float | None,
    macd: float | None,
    macd_signal: float | None,
) -> list[str]:
    """Return the triggered signal labels, e.g. ``["MA Buy", "MACD Sell"]``.

    A rule whose inputs are missing is skipped.
    """
    signals = []

    if None not in (price, sma20, sma50):
        if price > sma20 and sma20 > sma50:
            signals.append("MA Buy")
        elif price < sma20 and sma20 < sma50:
            signals.append("MA Sell")

    if rsi is not None:
        if rsi < RSI_OVERSOLD:
            signals.append("RSI Buy")
        elif rsi > RSI_OVERBOUGHT:
            signals.append("RSI Sell")

    if macd is not None and macd_signal is not None:
        if macd > macd_signal:
            signals.append("MACD Buy")
        elif macd < macd_signal:
            signals.append("MACD Sell")

    return signals
