"""Sample diagnostics: moments, range checks and goodness-of-fit tests."""

import numpy as np
from scipy import stats

from enums import Distribution
from results import SampleStatistics

RANGE_TOLERANCE = 1e-9


def lag_correlation(samples, lag=1):
    """Pearson correlation between the series and itself shifted by `lag`.

    Returns None when the series is too short or constant.
    """
    x = np.asarray(samples, dtype=np.float64)
    if lag < 1 or x.size <= lag + 1:
        return None
    head = x[:-lag]
    tail = x[lag:]
    if np.std(head) == 0.0 or np.std(tail) == 0.0:
        return None
    return float(np.corrcoef(head, tail)[0, 1])


def count_out_of_range(samples, low, high, tol=RANGE_TOLERANCE):
    """Number of samples outside the closed interval spanned by low and high."""
    x = np.asarray(samples, dtype=np.float64)
    lo, hi = min(low, high), max(low, high)
    return int(np.count_nonzero((x < lo - tol) | (x > hi + tol)))


def _reference_distribution(distribution, params):
    """Frozen scipy distribution the samples should follow, or None if degenerate."""
    if distribution == Distribution.UNIFORM:
        width = params['uniform_high'] - params['uniform_low']
        if width <= 0:
            return None
        return stats.uniform(loc=params['uniform_low'], scale=width)

    if params['std_dev'] <= 0:
        return None
    return stats.norm(loc=params['mean'], scale=params['std_dev'])


def compute_sample_statistics(samples, distribution, params):
    """Summarize a sample stream.

    Args:
        samples: sequence of floats drawn from a Generator
        distribution: Distribution enum the samples were drawn from
        params: dict with mean, std_dev, uniform_low, uniform_high

    Returns:
        SampleStatistics
    """
    x = np.asarray(samples, dtype=np.float64)
    if x.size == 0:
        return SampleStatistics(count=0, mean=0.0, std=0.0, min=0.0, max=0.0)

    out_of_range = 0
    if distribution == Distribution.UNIFORM:
        out_of_range = count_out_of_range(x, params['uniform_low'], params['uniform_high'])

    ks_statistic = None
    ks_pvalue = None
    reference = _reference_distribution(distribution, params)
    if reference is not None and x.size > 1:
        ks = stats.kstest(x, reference.cdf)
        ks_statistic = float(ks.statistic)
        ks_pvalue = float(ks.pvalue)

    return SampleStatistics(
        count=int(x.size),
        mean=float(np.mean(x)),
        std=float(np.std(x)),
        min=float(np.min(x)),
        max=float(np.max(x)),
        out_of_range=out_of_range,
        ks_statistic=ks_statistic,
        ks_pvalue=ks_pvalue,
        lag1_correlation=lag_correlation(x, lag=1),
    )
