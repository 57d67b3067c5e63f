"""Fundamental screening and sector-diversified stock selection."""

from collections.abc import Sequence
from dataclasses import dataclass

import config as cfg
from .log import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ScreeningCriteria:
    max_pe: float = cfg.MAX_PE
    max_pb: float = cfg.MAX_PB
    min_roe: float = cfg.MIN_ROE
    min_roi: float = cfg.MIN_ROI
    max_debt_to_equity: float = cfg.MAX_DEBT_TO_EQUITY
    max_peg: float = cfg.MAX_PEG
    min_eps: float = cfg.MIN_EPS


def _at_most(value, limit) -> bool:
    return value is not None and value <= limit


def _at_least(value, limit) -> bool:
    return value is not None and value >= limit


def passes_criteria(fundamentals: dict, criteria: ScreeningCriteria) -> bool:
    """True when every threshold holds; a missing field fails its check."""
    return (
        _at_most(fundamentals.get("pe"), criteria.max_pe)
        and _at_most(fundamentals.get("pb"), criteria.max_pb)
        and _at_least(fundamentals.get("roe"), criteria.min_roe)
        and _at_least(fundamentals.get("roi"), criteria.min_roi)
        and _at_most(fundamentals.get("debt_to_equity"), criteria.max_debt_to_equity)
        and _at_most(fundamentals.get("peg"), criteria.max_peg)
        and _at_least(fundamentals.get("eps"), criteria.min_eps)
    )


def screen_stocks(stocks: Sequence, criteria: ScreeningCriteria | None = None) -> list:
    """Keep the stocks whose ``fundamentals`` pass *criteria*, in input order."""
    criteria = criteria or ScreeningCriteria()
    passed = [s for s in stocks if passes_criteria(s.fundamentals, criteria)]
    logger.info("Screening finished", screened=len(stocks), passed=len(passed))
    return passed


def _quality(stock) -> float:
    return (stock.fundamentals.get("roe") or 0.0) + (stock.fundamentals.get("roi") or 0.0)


def select_diversified(
    stocks: Sequence,
    min_sectors: int = cfg.MIN_SECTORS,
    max_count: int = cfg.MAX_PORTFOLIO_SIZE,
) -> list:
    """Pick up to *max_count* stocks spanning at least *min_sectors* sectors.

    One stock is taken from each of the first *min_sectors* sectors (in
    first-seen order); remaining slots go to the other stocks ranked by
    ROE + ROI. Fewer than *min_sectors* sectors selects nothing.
    """
    sectors: list[str] = []
    for stock in stocks:
        sector = stock.fundamentals.get("sector") or ""
        if sector not in sectors:
            sectors.append(sector)

    if len(sectors) < min_sectors:
        logger.info("Too few sectors for a diversified selection",
                    sectors=len(sectors), required=min_sectors)
        return []

    selected = []
    for sector in sectors[:min_sectors]:
        selected.append(next(s for s in stocks if (s.fundamentals.get("sector") or "") == sector))

    chosen = {s.symbol for s in selected}
    remaining = sorted(
        (s for s in stocks if s.symbol not in chosen),
        key=_quality,
        reverse=True,
    )
    selected.extend(remaining[:max(max_count - len(selected), 0)])

    return selected[:max_count]
