#!/usr/bin/env python3
"""Benchmark suite for PySkip comparing against a bisect-maintained list."""

import argparse
import bisect
import json
import random
import time
from pathlib import Path
from typing import Dict, List

import numpy as np
import plotly.graph_objects as go
from tqdm import tqdm

from pyskip import SkipList

OPERATIONS = ("add", "find", "remove")


class Metrics:
    def __init__(self):
        self.latencies: Dict[str, List[float]] = {op: [] for op in OPERATIONS}
        self.heights: List[int] = []

    def to_dict(self) -> Dict:
        report: Dict = {
            op: {
                "p50": np.percentile(lat, 50),
                "p95": np.percentile(lat, 95),
                "p99": np.percentile(lat, 99),
            }
            for op, lat in self.latencies.items()
        }
        if self.heights:
            report["max_height"] = max(self.heights)
        return report

    def plot_latencies(self, title: str, output_path: Path):
        fig = go.Figure()

        for op, lat in self.latencies.items():
            fig.add_trace(go.Box(
                y=lat,
                name=f"{op} latency",
                boxpoints="outliers"
            ))

        fig.update_layout(
            title=title,
            yaxis_title="Latency (µs)",
            boxmode="group"
        )

        fig.write_html(output_path)


class BenchmarkSuite:
    def __init__(self, num_entries: int, seed: int):
        self.num_entries = num_entries
        self.seed = seed
        rng = random.Random(seed)
        self._values = [rng.randrange(num_entries) for _ in range(num_entries)]
        self._lookups = rng.sample(self._values, len(self._values))

    def run_skiplist_benchmark(self) -> Metrics:
        metrics = Metrics()
        sl: SkipList[int] = SkipList(rng=random.Random(self.seed))

        for value in tqdm(self._values, desc="SkipList add"):
            start = time.perf_counter()
            sl.add(value)
            metrics.latencies["add"].append((time.perf_counter() - start) * 1e6)
        metrics.heights.append(sl.height)

        for value in tqdm(self._lookups, desc="SkipList find"):
            start = time.perf_counter()
            sl.find(value)
            metrics.latencies["find"].append((time.perf_counter() - start) * 1e6)

        for value in tqdm(self._lookups, desc="SkipList remove"):
            start = time.perf_counter()
            sl.remove(value)
            metrics.latencies["remove"].append((time.perf_counter() - start) * 1e6)
        metrics.heights.append(sl.height)

        return metrics

    def run_bisect_benchmark(self) -> Metrics:
        metrics = Metrics()
        items: List[int] = []

        for value in tqdm(self._values, desc="bisect add"):
            start = time.perf_counter()
            bisect.insort_left(items, value)
            metrics.latencies["add"].append((time.perf_counter() - start) * 1e6)

        for value in tqdm(self._lookups, desc="bisect find"):
            start = time.perf_counter()
            i = bisect.bisect_left(items, value)
            _ = i < len(items) and items[i] == value
            metrics.latencies["find"].append((time.perf_counter() - start) * 1e6)

        for value in tqdm(self._lookups, desc="bisect remove"):
            start = time.perf_counter()
            del items[bisect.bisect_left(items, value)]
            metrics.latencies["remove"].append((time.perf_counter() - start) * 1e6)

        return metrics


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--size", type=int, default=100000, help="Number of values")
    parser.add_argument("--seed", type=int, default=0, help="Seed for values and levels")
    parser.add_argument("--output", type=Path, default=Path("benchmark_results"), help="Output directory")
    args = parser.parse_args()

    args.output.mkdir(parents=True, exist_ok=True)

    suite = BenchmarkSuite(args.size, args.seed)
    skiplist_metrics = suite.run_skiplist_benchmark()
    bisect_metrics = suite.run_bisect_benchmark()

    skiplist_metrics.plot_latencies(
        "PySkip Latency Distribution",
        args.output / "pyskip_latencies.html"
    )
    bisect_metrics.plot_latencies(
        "bisect Latency Distribution",
        args.output / "bisect_latencies.html"
    )

    with open(args.output / "metrics.json", "w") as f:
        json.dump({
            "pyskip": skiplist_metrics.to_dict(),
            "bisect": bisect_metrics.to_dict(),
        }, f, indent=2, default=float)


if __name__ == "__main__":
    main()
