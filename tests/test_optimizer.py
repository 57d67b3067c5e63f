"""Tests for efficient frontier sampling and Max Sharpe selection"""

import pytest

from equity_engine.errors import InsufficientDataError
from equity_engine.optimizer import FrontierPoint, find_max_sharpe, sample_efficient_frontier
from equity_engine.risk import WeightVector


def _point(sharpe: float, risk: float = 0.2, tag: float = 1.0) -> FrontierPoint:
    return FrontierPoint(
        risk=risk,
        expected_return=sharpe * risk,
        sharpe_ratio=sharpe,
        weights=WeightVector((tag, 1.0)),
    )


class TestSampleEfficientFrontier:
    def test_default_point_count(self, asset_returns):
        points = sample_efficient_frontier(asset_returns(n_assets=3), seed=1)
        assert len(points) == 50

    def test_sorted_by_risk(self, asset_returns):
        points = sample_efficient_frontier(asset_returns(n_assets=4), num_points=80, seed=2)
        risks = [p.risk for p in points]
        assert risks == sorted(risks)

    def test_weights_are_valid(self, asset_returns):
        points = sample_efficient_frontier(asset_returns(n_assets=5), seed=3)
        for point in points:
            assert len(point.weights) == 5
            assert abs(sum(point.weights) - 1.0) <= 1e-9
            assert all(w >= 0 for w in point.weights)
            assert point.risk >= 0

    def test_seed_is_reproducible(self, asset_returns):
        series = asset_returns(n_assets=3)
        assert sample_efficient_frontier(series, seed=9) == sample_efficient_frontier(series, seed=9)

    def test_uses_most_recent_window(self, asset_returns):
        series = asset_returns(n_assets=2, n_days=300)
        recent = [s[-252:] for s in series]
        assert sample_efficient_frontier(series, seed=4) == sample_efficient_frontier(recent, seed=4)

    def test_no_assets(self):
        assert sample_efficient_frontier([]) == []

    def test_short_history(self, asset_returns):
        with pytest.raises(InsufficientDataError):
            sample_efficient_frontier(asset_returns(n_assets=2, n_days=100), window=252)

    def test_single_asset(self, asset_returns):
        points = sample_efficient_frontier(asset_returns(n_assets=1), num_points=5, seed=0)
        assert {p.weights.values for p in points} == {(1.0,)}
        assert len({p.risk for p in points}) == 1

    def test_constant_series_do_not_inflate_sharpe(self):
        constant = [[0.001] * 260, [0.002] * 260]
        points = sample_efficient_frontier(constant, num_points=10, seed=0)
        assert all(p.risk == 0.0 and p.sharpe_ratio == 0.0 for p in points)
        assert find_max_sharpe(points) is points[0]


class TestFindMaxSharpe:
    def test_empty(self):
        assert find_max_sharpe([]) is None

    def test_picks_highest(self):
        points = [_point(0.5), _point(1.4), _point(0.9)]
        assert find_max_sharpe(points) is points[1]

    def test_tie_keeps_earliest(self):
        first, second = _point(1.2, tag=1.0), _point(1.2, tag=2.0)
        assert find_max_sharpe([_point(0.1), first, second]) is first

    def test_on_sampled_frontier(self, asset_returns):
        points = sample_efficient_frontier(asset_returns(n_assets=3), seed=6)
        best = find_max_sharpe(points)
        assert best.sharpe_ratio == max(p.sharpe_ratio for p in points)
