from __future__ import annotations

from pathlib import Path
from typing import Iterable

import matplotlib.pyplot as plt
import pandas as pd


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> None:
    if show:
        plt.show()
    else:
        _ensure_dir(outdir)
        fig.savefig(outdir / filename, dpi=200, bbox_inches="tight")
        plt.close(fig)


def plot_histograms(df: pd.DataFrame, outdir: Path, cols: Iterable[str], *, show: bool) -> list[str]:
    written = []
    for c in cols:
        if c not in df.columns or not pd.api.types.is_numeric_dtype(df[c]):
            continue
        fig = plt.figure()
        plt.hist(df[c].dropna(), bins=30)
        plt.title(f"Histogram: {c}")
        plt.xlabel(c)
        plt.ylabel("moves")
        _finish(fig, outdir, f"hist_{c}.png", show=show)
        written.append(f"hist_{c}.png")
    return written


def plot_nodes_vs_time(df: pd.DataFrame, outdir: Path, *, show: bool) -> str | None:
    if "nodes" not in df.columns or "time_ms" not in df.columns:
        return None

    fig = plt.figure()
    if "depth" in df.columns:
        for depth, group in df.groupby("depth"):
            plt.scatter(group["nodes"], group["time_ms"], alpha=0.6, label=f"d{int(depth)}")
        plt.legend()
    else:
        plt.scatter(df["nodes"], df["time_ms"], alpha=0.6)
    plt.title("time vs nodes per move")
    plt.xlabel("nodes")
    plt.ylabel("time_ms")
    _finish(fig, outdir, "scatter_time_vs_nodes.png", show=show)
    return "scatter_time_vs_nodes.png"


def plot_depth_bar(summary: pd.DataFrame, outdir: Path, metric: str, *, show: bool) -> str | None:
    if "depth" not in summary.columns or metric not in summary.columns:
        return None

    fig = plt.figure(figsize=(8, 4))
    plt.bar(summary["depth"].astype(int).astype(str), summary[metric].astype(float))
    plt.title(f"{metric} by search depth")
    plt.xlabel("depth")
    plt.ylabel(metric)
    _finish(fig, outdir, f"bar_{metric}_by_depth.png", show=show)
    return f"bar_{metric}_by_depth.png"
