"""Tests for sample_stats.py: moments, range checks and KS fits on real streams."""

import pytest

from enums import Distribution
from generator import Generator
from sample_stats import compute_sample_statistics, count_out_of_range, lag_correlation


def _params(mean=0.0, std_dev=1.0, uniform_low=0.0, uniform_high=1.0):
    return dict(mean=mean, std_dev=std_dev, uniform_low=uniform_low, uniform_high=uniform_high)


class TestLagCorrelation:
    def test_alternating_series(self):
        assert lag_correlation([1.0, -1.0] * 10) == pytest.approx(-1.0)

    def test_linear_series(self):
        assert lag_correlation(list(range(20))) == pytest.approx(1.0)

    def test_constant_series(self):
        assert lag_correlation([2.0] * 10) is None

    def test_too_short(self):
        assert lag_correlation([0.1, 0.2]) is None

    def test_generator_stream_uncorrelated(self):
        samples = Generator(1).generate_uniform_sequence(10000)
        assert abs(lag_correlation(samples)) < 0.05


class TestCountOutOfRange:
    def test_inside(self):
        assert count_out_of_range([0.0, 0.5, 1.0], 0.0, 1.0) == 0

    def test_outside(self):
        assert count_out_of_range([-0.5, 0.5, 1.5], 0.0, 1.0) == 2

    def test_inverted_bounds(self):
        assert count_out_of_range([2.0, 5.0, 11.0], 10.0, 0.0) == 1

    def test_tolerance(self):
        assert count_out_of_range([1.0 + 1e-12], 0.0, 1.0) == 0


class TestComputeSampleStatistics:
    def test_uniform_stream(self):
        samples = Generator(1).generate_uniform_sequence(10000)
        stats = compute_sample_statistics(samples, Distribution.UNIFORM, _params())
        assert stats.count == 10000
        assert stats.mean == pytest.approx(0.5, abs=0.02)
        assert 0.0 < stats.min < stats.max < 1.0
        assert stats.out_of_range == 0
        assert stats.ks_statistic < 0.02
        assert stats.ks_pvalue > 0.01

    def test_scaled_uniform_stream(self):
        params = _params(uniform_low=100.0, uniform_high=200.0)
        samples = Generator(5, **params).generate_uniform_sequence(10000)
        stats = compute_sample_statistics(samples, Distribution.UNIFORM, params)
        assert stats.out_of_range == 0
        assert stats.mean == pytest.approx(150.0, abs=2.0)

    def test_normal_stream(self):
        samples = Generator(1).generate_normal_sequence(10000)
        stats = compute_sample_statistics(samples, Distribution.NORMAL, _params())
        assert stats.mean == pytest.approx(0.0, abs=0.05)
        assert stats.std == pytest.approx(1.0, abs=0.05)
        assert stats.out_of_range == 0
        assert stats.ks_statistic < 0.05

    def test_zero_std_dev_skips_ks(self):
        params = _params(mean=3.0, std_dev=0.0)
        samples = Generator(2, **params).generate_normal_sequence(100)
        stats = compute_sample_statistics(samples, Distribution.NORMAL, params)
        assert stats.mean == 3.0
        assert stats.std == 0.0
        assert stats.ks_statistic is None
        assert stats.ks_pvalue is None
        assert stats.lag1_correlation is None

    def test_inverted_uniform_skips_ks(self):
        params = _params(uniform_low=1.0, uniform_high=0.0)
        samples = Generator(2, **params).generate_uniform_sequence(100)
        stats = compute_sample_statistics(samples, Distribution.UNIFORM, params)
        assert stats.ks_statistic is None
        assert stats.out_of_range == 0

    def test_empty(self):
        stats = compute_sample_statistics([], Distribution.UNIFORM, _params())
        assert stats.count == 0
        assert stats.ks_statistic is None
