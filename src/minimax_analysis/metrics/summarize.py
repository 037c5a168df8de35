from __future__ import annotations

import pandas as pd


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def with_rates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Add derived per-move columns:
      tt_hit_rate    = tt_hits / (tt_hits + evaluations)
      nodes_per_ms   = nodes / time_ms
    """
    out = df.copy()
    if {"tt_hits", "evaluations"} <= set(out.columns):
        lookups = out["tt_hits"] + out["evaluations"]
        out["tt_hit_rate"] = (out["tt_hits"] / lookups.where(lookups > 0)).fillna(0.0)
    if {"nodes", "time_ms"} <= set(out.columns):
        out["nodes_per_ms"] = out["nodes"] / out["time_ms"].clip(lower=1)
    return out


def per_depth_summary(df: pd.DataFrame) -> pd.DataFrame:
    _require_cols(df, ["depth", "nodes", "time_ms"])
    rated = with_rates(df)

    agg = {"moves": ("nodes", "size"), "avg_nodes": ("nodes", "mean"), "avg_ms": ("time_ms", "mean")}
    if "evaluations" in rated.columns:
        agg["avg_evaluations"] = ("evaluations", "mean")
    if "tt_hit_rate" in rated.columns:
        agg["avg_tt_hit_rate"] = ("tt_hit_rate", "mean")
    if "nodes_per_ms" in rated.columns:
        agg["avg_nodes_per_ms"] = ("nodes_per_ms", "mean")

    return rated.groupby("depth").agg(**agg).reset_index().sort_values("depth")


def per_game_summary(df: pd.DataFrame) -> pd.DataFrame:
    _require_cols(df, ["game", "nodes", "time_ms"])
    return (
        df.groupby("game")
        .agg(moves=("nodes", "size"), nodes=("nodes", "sum"), time_ms=("time_ms", "sum"))
        .reset_index()
    )


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    return num.describe(percentiles=[0.05, 0.5, 0.95]).T
