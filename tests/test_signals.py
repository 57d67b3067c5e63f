"""Tests for technical signal labels"""

from equity_engine.signals import technical_signals


def test_all_buy():
    assert technical_signals(110, 105, 100, 25, 1.5, 1.0) == ["MA Buy", "RSI Buy", "MACD Buy"]


def test_all_sell():
    assert technical_signals(90, 95, 100, 75, 0.5, 1.0) == ["MA Sell", "RSI Sell", "MACD Sell"]


def test_neutral():
    # mixed MA ordering, mid-range RSI, MACD equal to its signal
    assert technical_signals(100, 105, 100, 50, 1.0, 1.0) == []


def test_missing_inputs_skip_rules():
    assert technical_signals(110, None, 100, None, 2.0, 1.0) == ["MACD Buy"]
