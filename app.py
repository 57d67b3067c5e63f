"""Equity Screener & Portfolio Analytics: command-line entry point."""

import config as cfg
from equity_engine.analysis import analyze_universe, build_portfolio_report
from equity_engine.data import fetch_fundamentals, fetch_price_history, price_series
from equity_engine.log import configure_logging, get_logger
from equity_engine.screener import ScreeningCriteria, screen_stocks, select_diversified

logger = get_logger("app")


def load_fundamentals(tickers: list[str]) -> dict[str, dict]:
    """Fetch fundamentals per ticker; a ticker whose lookup fails is skipped."""
    fundamentals = {}
    for ticker in tickers:
        try:
            fundamentals[ticker] = fetch_fundamentals(ticker)
        except Exception as exc:
            logger.warning("Fundamentals unavailable", symbol=ticker, error=str(exc))
    return fundamentals


def main(tickers: list[str] = cfg.TICKERS) -> None:
    configure_logging(level=cfg.LOG_LEVEL, format_json=cfg.LOG_JSON)

    prices = fetch_price_history(tickers, cfg.DATA_PERIOD)
    fundamentals = load_fundamentals(list(prices.columns))
    price_map = {t: price_series(prices, t) for t in fundamentals}

    analyses = analyze_universe(price_map, fundamentals)
    for stock in analyses:
        logger.info(
            "Technical snapshot",
            symbol=stock.symbol,
            sma20=round(stock.sma20, 2),
            sma50=round(stock.sma50, 2),
            rsi=round(stock.rsi, 1),
            macd=round(stock.macd, 3),
            macd_signal=round(stock.macd_signal, 3),
            signals=stock.signals,
        )

    selected = select_diversified(screen_stocks(analyses, ScreeningCriteria()))
    report = build_portfolio_report(selected)

    if report.max_sharpe is None:
        logger.info("No diversified selection passed the screen")
        return

    logger.info(
        "Max Sharpe portfolio",
        weights={s: round(w, 4) for s, w in report.weights.items()},
        expected_return=round(report.max_sharpe.expected_return, 4),
        volatility=round(report.max_sharpe.risk, 4),
        sharpe_ratio=round(report.max_sharpe.sharpe_ratio, 3),
    )
    logger.info("Monte Carlo summary", **report.summary)


if __name__ == "__main__":
    main()
