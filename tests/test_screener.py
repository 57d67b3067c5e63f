"""Tests for fundamental screening and diversified selection"""

from equity_engine.screener import (
    ScreeningCriteria,
    passes_criteria,
    screen_stocks,
    select_diversified,
)


class TestPassesCriteria:
    def test_default_criteria(self, make_stock):
        assert passes_criteria(make_stock("AAA", "Tech").fundamentals, ScreeningCriteria())

    def test_threshold_is_inclusive(self, make_stock):
        stock = make_stock("AAA", "Tech", pe=25.0, roe=0.10)
        assert passes_criteria(stock.fundamentals, ScreeningCriteria())

    def test_each_threshold_rejects(self, make_stock):
        failing = [
            {"pe": 40.0},
            {"pb": 9.0},
            {"roe": 0.05},
            {"roi": 0.01},
            {"debt_to_equity": 250.0},
            {"peg": 3.0},
            {"eps": 0.2},
        ]
        for override in failing:
            stock = make_stock("AAA", "Tech", **override)
            assert not passes_criteria(stock.fundamentals, ScreeningCriteria()), override

    def test_missing_field_fails(self, make_stock):
        stock = make_stock("AAA", "Tech", peg=None)
        assert not passes_criteria(stock.fundamentals, ScreeningCriteria())

    def test_custom_criteria(self, make_stock):
        stock = make_stock("AAA", "Tech", pe=40.0)
        assert passes_criteria(stock.fundamentals, ScreeningCriteria(max_pe=50.0))


def test_screen_stocks_keeps_order(make_stock):
    stocks = [
        make_stock("AAA", "Tech"),
        make_stock("BBB", "Energy", pe=80.0),
        make_stock("CCC", "Health"),
    ]
    assert [s.symbol for s in screen_stocks(stocks)] == ["AAA", "CCC"]


class TestSelectDiversified:
    def test_too_few_sectors(self, make_stock):
        stocks = [make_stock(f"S{i}", ["Tech", "Energy", "Health"][i % 3]) for i in range(9)]
        assert select_diversified(stocks) == []

    def test_one_per_sector_then_quality(self, make_stock):
        stocks = [
            make_stock("T1", "Tech", roe=0.11, roi=0.08),
            make_stock("T2", "Tech", roe=0.50, roi=0.30),
            make_stock("E1", "Energy", roe=0.12, roi=0.09),
            make_stock("H1", "Health", roe=0.13, roi=0.09),
            make_stock("F1", "Finance", roe=0.14, roi=0.09),
            make_stock("U1", "Utilities", roe=0.40, roi=0.20),
            make_stock("H2", "Health", roe=0.15, roi=0.10),
        ]
        selected = [s.symbol for s in select_diversified(stocks, min_sectors=4, max_count=6)]
        assert selected == ["T1", "E1", "H1", "F1", "T2", "U1"]

    def test_max_count(self, make_stock):
        sectors = ["Tech", "Energy", "Health", "Finance", "Utilities"]
        stocks = [make_stock(f"S{i}", sectors[i % 5]) for i in range(15)]
        selected = select_diversified(stocks)
        assert len(selected) == 10
        assert len({s.fundamentals["sector"] for s in selected}) >= 4


def test_debt_to_equity_uses_reported_percent_scale(make_stock):
    # yfinance reports a 0.45 debt/equity ratio as 45.0
    assert passes_criteria(make_stock("AAA", "Tech", debt_to_equity=45.0).fundamentals,
                           ScreeningCriteria())
    assert passes_criteria(make_stock("AAPL", "Tech", debt_to_equity=150.0).fundamentals,
                           ScreeningCriteria())
    assert not passes_criteria(make_stock("LEV", "Tech", debt_to_equity=151.0).fundamentals,
                               ScreeningCriteria())
