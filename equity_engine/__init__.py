"""Equity analytics engine: indicators, covariance, frontier sampling, Monte Carlo."""

from .errors import AnalyticsError, InsufficientDataError, DegenerateInputError, AlignmentError
from .indicators import sma, ema, rsi, macd, daily_returns, latest, MACDResult
from .covariance import stack_returns, estimate_covariance, correlation_matrix
from .risk import WeightVector, calc_portfolio_metrics
from .optimizer import FrontierPoint, sample_efficient_frontier, find_max_sharpe
from .monte_carlo import MonteCarloSample, run_monte_carlo, summarize_simulation
from .screener import ScreeningCriteria, screen_stocks, select_diversified
from .signals import technical_signals
from .analysis import StockAnalysis, PortfolioReport, analyze_symbol, analyze_universe, align_returns, build_portfolio_report
