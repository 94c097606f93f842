"""Command line entry point for the disjoint-set library."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .benchmark import BenchmarkConfig, run_benchmark
from .runner import LabelConfig, label_file


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Group elements into equivalence classes with union-find.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    label = subparsers.add_parser("label", help="Label each row of an edge list with its class representative")
    label.add_argument("input", type=Path, help="Path to the input CSV or Excel file of element pairs")
    label.add_argument("output", type=Path, help="Path where the labelled rows will be written")
    label.add_argument("--left-column", default="left", help="Column holding the first element (default: left)")
    label.add_argument("--right-column", default="right", help="Column holding the second element (default: right)")
    label.add_argument(
        "--label-column",
        default="representative",
        help="Column to write the representative into (default: representative)",
    )
    label.add_argument("--quiet", action="store_true", help="Suppress progress output")

    bench = subparsers.add_parser("bench", help="Time the chunked union workload")
    bench.add_argument("--elements", type=int, default=100_000, help="Number of integers to insert")
    bench.add_argument("--chunk-size", type=int, default=500, help="Elements merged into each class")
    bench.add_argument("--repeat", type=int, default=1, help="Number of timed runs")
    bench.add_argument("--disable-tqdm", action="store_true", help="Disable progress bars")
    bench.add_argument("--quiet", action="store_true", help="Suppress progress output")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    if args.command == "bench":
        try:
            config = BenchmarkConfig(
                elements=args.elements,
                chunk_size=args.chunk_size,
                repeat=args.repeat,
                use_tqdm=not args.disable_tqdm,
                verbose=not args.quiet,
            )
        except ValueError as exc:
            print(f"ERROR: {exc}")
            return 1
        run_benchmark(config)
        return 0

    label_config = LabelConfig(
        left_column=args.left_column,
        right_column=args.right_column,
        label_column=args.label_column,
        verbose=not args.quiet,
    )
    if label_file(args.input, args.output, label_config) is None:
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
