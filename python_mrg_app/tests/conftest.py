"""Shared fixtures for MRG generator tests."""

import os
import sys
import pytest

# Ensure python_mrg_app is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


@pytest.fixture
def seed_one_generator():
    """Generator seeded with key 1 and default distribution parameters."""
    from generator import Generator
    return Generator(1)


@pytest.fixture
def fixed_generator():
    """Generator with key 5, mean 10, std dev 2 and uniform range [100, 200]."""
    from generator import Generator
    return Generator(5, 10.0, 2.0, 100.0, 200.0)


@pytest.fixture
def sample_sampling_result():
    """A synthetic SamplingResult for testing visualization and export."""
    from results import SamplingResult, SamplingConfig, SeedStreamResult, SampleStatistics

    config = SamplingConfig(
        distribution='uniform',
        count=6,
        mean=0.0, std_dev=1.0,
        uniform_low=0.0, uniform_high=1.0,
        seed_keys=[1, 2],
        threads=1,
        timestamp='2026-01-01T00:00:00',
    )

    streams = [
        SeedStreamResult(
            seed_key=1,
            distribution='uniform',
            statistics=SampleStatistics(
                count=6, mean=0.45, std=0.28, min=0.05, max=0.91,
                out_of_range=0, ks_statistic=0.12, ks_pvalue=0.98,
                lag1_correlation=-0.1,
            ),
            step_count=6,
            samples=[0.21, 0.05, 0.77, 0.91, 0.33, 0.43],
        ),
        SeedStreamResult(
            seed_key=2,
            distribution='uniform',
            statistics=SampleStatistics(
                count=6, mean=0.52, std=0.25, min=0.12, max=0.88,
                out_of_range=0, ks_statistic=0.15, ks_pvalue=0.95,
                lag1_correlation=0.05,
            ),
            step_count=6,
            samples=[0.12, 0.66, 0.88, 0.40, 0.51, 0.55],
        ),
    ]

    return SamplingResult(
        config=config,
        streams=streams,
        wall_clock_seconds=0.25,
    )
