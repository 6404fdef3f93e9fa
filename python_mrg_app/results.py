"""Structured result data model for MRG sampling runs with JSON/CSV export."""

import json
import csv
from dataclasses import dataclass, field, asdict
from typing import List, Optional


@dataclass
class SampleStatistics:
    """Descriptive statistics and goodness-of-fit for one sample stream."""
    count: int
    mean: float
    std: float
    min: float
    max: float
    out_of_range: int = 0
    # None when the distribution parameters are degenerate
    ks_statistic: Optional[float] = None
    ks_pvalue: Optional[float] = None
    lag1_correlation: Optional[float] = None


@dataclass
class SeedStreamResult:
    """Samples drawn from one generator instance."""
    seed_key: int
    distribution: str
    statistics: SampleStatistics
    step_count: int
    samples: List[float] = field(default_factory=list)


@dataclass
class SamplingConfig:
    """Captures all parameters of a sampling run."""
    distribution: str
    count: int
    mean: float
    std_dev: float
    uniform_low: float
    uniform_high: float
    seed_keys: List[int]
    threads: int
    timestamp: str


@dataclass
class SamplingResult:
    """Complete sampling result container."""
    config: SamplingConfig
    streams: List[SeedStreamResult]
    wall_clock_seconds: float

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        return asdict(self)

    def to_json(self, filepath: str) -> None:
        """Export results to a JSON file."""
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    def to_csv(self, filepath: str) -> None:
        """Export per-stream statistics to a CSV file."""
        if not self.streams:
            return
        stat_fields = [
            'count', 'mean', 'std', 'min', 'max', 'out_of_range',
            'ks_statistic', 'ks_pvalue', 'lag1_correlation'
        ]
        fieldnames = ['seed_key', 'distribution', 'step_count'] + stat_fields
        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for stream in self.streams:
                row = {
                    'seed_key': stream.seed_key,
                    'distribution': stream.distribution,
                    'step_count': stream.step_count,
                }
                row.update({k: getattr(stream.statistics, k) for k in stat_fields})
                writer.writerow(row)

    @classmethod
    def from_json(cls, filepath: str) -> 'SamplingResult':
        """Load results from a JSON file."""
        with open(filepath, 'r', encoding='utf-8') as f:
            d = json.load(f)

        config = SamplingConfig(**d['config'])

        streams = []
        for s in d['streams']:
            stats = SampleStatistics(**s['statistics'])
            streams.append(SeedStreamResult(
                seed_key=s['seed_key'],
                distribution=s['distribution'],
                statistics=stats,
                step_count=s['step_count'],
                samples=s.get('samples', []),
            ))

        return cls(
            config=config,
            streams=streams,
            wall_clock_seconds=d['wall_clock_seconds'],
        )
