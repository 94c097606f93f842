"""Disjoint-set library initialization."""

from .structures import ClassNode, DisjointSetStore, SupportsOrderedHash
from .benchmark import BenchmarkConfig, BenchmarkStats, build_chunked_store, run_benchmark
from .runner import LabelConfig, LabelResult, label_file, label_pairs

__all__ = [
    "ClassNode",
    "DisjointSetStore",
    "SupportsOrderedHash",
    "BenchmarkConfig",
    "BenchmarkStats",
    "build_chunked_store",
    "run_benchmark",
    "LabelConfig",
    "LabelResult",
    "label_file",
    "label_pairs",
]
