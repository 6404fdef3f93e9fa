"""Visualization module for MRG sampling results using matplotlib."""

import os

import numpy as np
from scipy import stats

try:
    import matplotlib
    matplotlib.use('Agg')  # Non-interactive backend by default
    import matplotlib.pyplot as plt
    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False

from results import SamplingResult

METRICS = ('mean', 'std', 'ks_statistic', 'lag1_correlation')


class SamplePlotter:
    """Generates standard diagnostic plots from SamplingResult data."""

    def __init__(self, result: SamplingResult):
        if not HAS_MATPLOTLIB:
            raise ImportError(
                "matplotlib is required for visualization. "
                "Install with: pip install matplotlib"
            )
        self.result = result

    def _get_samples(self, stream_index):
        if not self.result.streams:
            return np.array([])
        return np.asarray(self.result.streams[stream_index].samples, dtype=np.float64)

    def _reference_pdf(self, xs):
        """Theoretical density over xs, or None for degenerate parameters."""
        config = self.result.config
        if config.distribution == 'normal':
            if config.std_dev <= 0:
                return None
            return stats.norm.pdf(xs, loc=config.mean, scale=config.std_dev)
        width = config.uniform_high - config.uniform_low
        if width <= 0:
            return None
        return stats.uniform.pdf(xs, loc=config.uniform_low, scale=width)

    def plot_histogram(self, stream_index=0, ax=None, save_path=None, bins=50):
        """Sample histogram with the theoretical density overlaid."""
        samples = self._get_samples(stream_index)
        if samples.size == 0:
            return ax

        own_fig = ax is None
        if own_fig:
            fig, ax = plt.subplots(figsize=(8, 6))

        seed_key = self.result.streams[stream_index].seed_key
        ax.hist(samples, bins=bins, density=True, alpha=0.6, label=f"key={seed_key}")

        xs = np.linspace(samples.min(), samples.max(), 200)
        pdf = self._reference_pdf(xs)
        if pdf is not None:
            ax.plot(xs, pdf, 'r-', linewidth=1.5, label='theoretical')

        ax.set_xlabel('Value')
        ax.set_ylabel('Density')
        ax.set_title(f'{self.result.config.distribution.capitalize()} histogram')
        ax.grid(True, alpha=0.3)
        ax.legend()

        if save_path and own_fig:
            fig.savefig(save_path, dpi=150, bbox_inches='tight')

        return ax

    def plot_sequence(self, stream_index=0, ax=None, save_path=None, limit=500):
        """Trace of the first `limit` samples in draw order."""
        samples = self._get_samples(stream_index)[:limit]
        if samples.size == 0:
            return ax

        own_fig = ax is None
        if own_fig:
            fig, ax = plt.subplots(figsize=(10, 4))

        ax.plot(np.arange(1, samples.size + 1), samples, '-', linewidth=0.7)
        ax.set_xlabel('Draw')
        ax.set_ylabel('Value')
        ax.set_title('Sample sequence')
        ax.grid(True, alpha=0.3)

        if save_path and own_fig:
            fig.savefig(save_path, dpi=150, bbox_inches='tight')

        return ax

    def plot_lag_scatter(self, stream_index=0, ax=None, save_path=None):
        """Successive pairs (x[i], x[i+1]); lattice structure shows up here."""
        samples = self._get_samples(stream_index)
        if samples.size < 2:
            return ax

        own_fig = ax is None
        if own_fig:
            fig, ax = plt.subplots(figsize=(7, 7))

        ax.plot(samples[:-1], samples[1:], '.', markersize=2, alpha=0.5)
        ax.set_xlabel('x[i]')
        ax.set_ylabel('x[i+1]')
        ax.set_title('Lag-1 scatter')
        ax.grid(True, alpha=0.3)

        if save_path and own_fig:
            fig.savefig(save_path, dpi=150, bbox_inches='tight')

        return ax

    def plot_metric_by_seed(self, metric='mean', ax=None, save_path=None, label=None):
        """Per-stream statistic against seed key."""
        points = [
            (s.seed_key, getattr(s.statistics, metric))
            for s in self.result.streams
            if getattr(s.statistics, metric) is not None
        ]
        if not points:
            return ax

        own_fig = ax is None
        if own_fig:
            fig, ax = plt.subplots(figsize=(8, 6))

        keys, values = zip(*points)
        ax.plot(keys, values, 'o-', label=label or self.result.config.distribution, markersize=5)
        ax.set_xlabel('Seed key')
        ax.set_ylabel(metric)
        ax.set_title(f'{metric} by seed key')
        ax.grid(True, alpha=0.3)
        ax.legend()

        if save_path and own_fig:
            fig.savefig(save_path, dpi=150, bbox_inches='tight')

        return ax

    def plot_combined_dashboard(self, save_dir=None):
        """2x2 subplot grid: histogram, sequence, lag scatter, mean by seed."""
        fig, axes = plt.subplots(2, 2, figsize=(14, 10))
        config = self.result.config
        if config.distribution == 'normal':
            params = f'mean={config.mean}, std_dev={config.std_dev}'
        else:
            params = f'[{config.uniform_low}, {config.uniform_high}]'
        fig.suptitle(
            f'MRG sampling: {config.distribution} {params} '
            f'(n={config.count}, streams={len(self.result.streams)})',
            fontsize=13
        )

        self.plot_histogram(ax=axes[0, 0])
        self.plot_sequence(ax=axes[0, 1])
        self.plot_lag_scatter(ax=axes[1, 0])
        self.plot_metric_by_seed('mean', ax=axes[1, 1])

        fig.tight_layout(rect=[0, 0, 1, 0.95])

        if save_dir:
            os.makedirs(save_dir, exist_ok=True)
            fig.savefig(
                os.path.join(save_dir, 'dashboard.png'),
                dpi=150, bbox_inches='tight'
            )

        return fig

    @staticmethod
    def plot_comparison(results, metric='mean', save_path=None):
        """Overlay a per-seed metric from multiple SamplingResult objects.

        Args:
            results: list of SamplingResult
            metric: one of METRICS
            save_path: optional path to save the figure
        """
        if not HAS_MATPLOTLIB:
            raise ImportError("matplotlib is required for visualization.")
        if metric not in METRICS:
            raise ValueError(f"Unknown metric {metric!r}, expected one of {METRICS}")

        fig, ax = plt.subplots(figsize=(10, 7))

        for r in results:
            plotter = SamplePlotter(r)
            label = f"{r.config.distribution} (n={r.config.count}, {r.config.timestamp})"
            plotter.plot_metric_by_seed(metric, ax=ax, label=label)

        if save_path:
            fig.savefig(save_path, dpi=150, bbox_inches='tight')

        return fig
