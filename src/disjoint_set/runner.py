"""Helpers for labelling an edge list with class representatives."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pandas as pd

from .structures import DisjointSetStore


@dataclass
class LabelConfig:
    """Configuration parameters for :func:label_pairs."""

    left_column: str = "left"
    right_column: str = "right"
    label_column: str = "representative"
    verbose: bool = True


@dataclass
class LabelResult:
    """Result bundle returned by :func:label_pairs."""

    dataframe: pd.DataFrame
    store: DisjointSetStore[str]
    rows: int
    elements: int
    merges: int


def label_pairs(dataframe: pd.DataFrame, config: Optional[LabelConfig] = None) -> LabelResult:
    """Union every (left, right) row of `dataframe` and tag rows with their representative."""

    config = config or LabelConfig()
    for column in (config.left_column, config.right_column):
        if column not in dataframe.columns:
            raise KeyError(f"Column '{column}' not found in dataframe")

    verbose = config.verbose
    t0 = time.time()
    if verbose:
        print("1. Registering elements and merging pairs...")

    df = dataframe.copy()
    for column in (config.left_column, config.right_column):
        df[column] = df[column].fillna("").astype(str).str.strip()

    store: DisjointSetStore[str] = DisjointSetStore()
    merges = 0
    for left, right in zip(df[config.left_column], df[config.right_column]):
        for value in (left, right):
            if value and value not in store:
                store.insert(value)
        if not left or not right or store.connected(left, right):
            continue
        store.union(left, right)
        merges += 1

    if verbose:
        print(f"   Registered {len(store)} elements, {merges} merges. Done in {time.time() - t0:.2f}s")

    t0 = time.time()
    if verbose:
        print("2. Assigning representatives...")
    df[config.label_column] = [
        store.find(left) if left else store.find(right)
        for left, right in zip(df[config.left_column], df[config.right_column])
    ]
    if verbose:
        print(f"   Done in {time.time() - t0:.2f}s")

    return LabelResult(dataframe=df, store=store, rows=len(df), elements=len(store), merges=merges)


def label_file(
    input_path: str | Path,
    output_path: str | Path,
    config: Optional[LabelConfig] = None,
) -> LabelResult | None:
    """Run the full workflow on `input_path` and write the labelled rows."""

    input_path = Path(input_path)
    output_path = Path(output_path)

    try:
        dataframe = _load_dataframe(input_path)
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{input_path}'.")
        return None
    except ValueError:
        print(f"ERROR: Unsupported file format for '{input_path}'. Please provide a CSV or Excel file.")
        return None

    config = config or LabelConfig()
    try:
        result = label_pairs(dataframe, config)
    except KeyError as exc:
        print(f"ERROR: {exc.args[0]} (input '{input_path}').")
        return None

    try:
        _save_dataframe(result.dataframe, output_path)
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return None
    if config.verbose:
        print(f"\n   Processing complete. Results saved to '{output_path}'")
    return result


def _load_dataframe(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path, dtype=str)
    if suffix in {".xls", ".xlsx"}:
        return pd.read_excel(path, dtype=str)
    raise ValueError("unsupported format")


def _save_dataframe(dataframe: pd.DataFrame, path: Path) -> None:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        dataframe.to_csv(path, index=False)
        return
    if suffix in {".xls", ".xlsx"}:
        dataframe.to_excel(path, index=False)
        return
    raise ValueError(f"Unsupported output file format: '{suffix}'")
