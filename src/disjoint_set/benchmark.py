"""Chunked union workload for timing the disjoint-set store."""

from __future__ import annotations

import math
import statistics
import time
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from tqdm import tqdm

from .structures import DisjointSetStore


@dataclass
class BenchmarkConfig:
    """Configuration parameters for :func:run_benchmark."""

    elements: int = 100_000
    chunk_size: int = 500
    repeat: int = 1
    use_tqdm: bool | None = None
    verbose: bool = True

    def __post_init__(self) -> None:
        if self.elements < 0:
            raise ValueError("elements must be non-negative")
        if self.chunk_size < 1:
            raise ValueError("chunk_size must be at least 1")
        if self.repeat < 1:
            raise ValueError("repeat must be at least 1")


@dataclass
class BenchmarkStats:
    """Summary metrics for a benchmark run."""

    elements: int
    unions: int
    class_count: int
    best_seconds: float
    mean_seconds: float


def build_chunked_store(
    elements: int,
    chunk_size: int,
    progress: bool = False,
) -> Tuple[DisjointSetStore[int], int]:
    """Insert `0..elements-1` and union each chunk onto its first element.

    Returns the store and the number of union calls made.
    """

    store: DisjointSetStore[int] = DisjointSetStore()
    for value in range(elements):
        store.insert(value)

    heads: Iterable[int] = range(0, elements, chunk_size)
    if progress:
        heads = tqdm(heads, total=math.ceil(elements / chunk_size), desc="   Chunks", unit="chunk")

    union_calls = 0
    for head in heads:
        for member in range(head, min(head + chunk_size, elements)):
            store.union(head, member)
            union_calls += 1
    return store, union_calls


def run_benchmark(config: BenchmarkConfig | None = None) -> BenchmarkStats:
    """Build the chunked store `config.repeat` times and report timings."""

    config = config or BenchmarkConfig()
    verbose = config.verbose
    progress = config.use_tqdm if config.use_tqdm is not None else True

    if verbose:
        print("--- Disjoint-Set Benchmark Started ---")
        print(
            f"\n1. Building {config.elements} elements in chunks of {config.chunk_size} "
            f"({config.repeat} run(s))..."
        )

    timings: List[float] = []
    store: DisjointSetStore[int] = DisjointSetStore()
    union_calls = 0
    for run in range(1, config.repeat + 1):
        t0 = time.perf_counter()
        store, union_calls = build_chunked_store(config.elements, config.chunk_size, progress=progress)
        elapsed = time.perf_counter() - t0
        timings.append(elapsed)
        if verbose:
            print(f"   Run {run}: {elapsed:.4f}s")

    t0 = time.perf_counter()
    if verbose:
        print("2. Verifying class structure...")
    class_count = len({store.find(value) for value in range(config.elements)})
    expected = math.ceil(config.elements / config.chunk_size)
    if class_count != expected:
        raise RuntimeError(f"expected {expected} classes, found {class_count}")
    if verbose:
        print(f"   Found {class_count} classes. Done in {time.perf_counter() - t0:.2f}s")

    stats = BenchmarkStats(
        elements=config.elements,
        unions=union_calls,
        class_count=class_count,
        best_seconds=min(timings),
        mean_seconds=statistics.fmean(timings),
    )

    if verbose:
        print("\n--- Results Summary ---")
        print(f"   - Union calls per run: {stats.unions}")
        print(f"   - Best run: {stats.best_seconds:.4f}s")
        print(f"   - Mean run: {stats.mean_seconds:.4f}s")

    return stats


__all__ = ["BenchmarkConfig", "BenchmarkStats", "build_chunked_store", "run_benchmark"]
