#!/usr/bin/env python3
"""Standalone script for plotting previously saved MRG sampling results.

Usage:
    python plot_results.py result1.json result2.json --metric mean --output comparison.png
    python plot_results.py result.json --dashboard --output-dir ./plots
"""

import sys
import os
import argparse

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from results import SamplingResult


def main():
    parser = argparse.ArgumentParser(
        description='Plot MRG sampling results from JSON files'
    )
    parser.add_argument('files', nargs='+', help='JSON result files to plot')
    parser.add_argument('--metric', type=str,
                        choices=['mean', 'std', 'ks_statistic', 'lag1_correlation'],
                        default='mean', help='Metric to plot for comparison (default: mean)')
    parser.add_argument('--dashboard', action='store_true',
                        help='Show combined dashboard for each result file')
    parser.add_argument('--output', type=str, default=None,
                        help='Save comparison plot to file')
    parser.add_argument('--output-dir', type=str, default=None,
                        help='Save dashboard plots to directory')
    parser.add_argument('--no-show', action='store_true',
                        help='Do not show interactive plots')

    args = parser.parse_args()

    import matplotlib.pyplot as plt
    from visualization import SamplePlotter

    results = []
    for filepath in args.files:
        if not os.path.exists(filepath):
            print(f"Warning: file not found: {filepath}")
            continue
        results.append(SamplingResult.from_json(filepath))

    if not results:
        print("Error: no valid result files loaded")
        sys.exit(1)

    if args.dashboard:
        for i, r in enumerate(results):
            save_dir = None
            if args.output_dir:
                save_dir = os.path.join(args.output_dir, f'result_{i}')
            SamplePlotter(r).plot_combined_dashboard(save_dir=save_dir)

    SamplePlotter.plot_comparison(results, metric=args.metric, save_path=args.output)

    if not args.no_show:
        plt.show()


if __name__ == '__main__':
    main()
