from __future__ import annotations

import argparse
from pathlib import Path

from minimax.config import RESULTS_DIR, RESULTS_PATTERN

from ..io.load_stats import LoadSpec, load_latest_from_dir, load_stats
from ..metrics.summarize import numeric_summary, per_depth_summary, per_game_summary, with_rates
from ..plots.chart import plot_depth_bar, plot_histograms, plot_nodes_vs_time

DEFAULT_HIST_COLS = ["nodes", "evaluations", "tt_hits", "time_ms", "tt_hit_rate"]


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Analyze minimax self-play search statistics.")
    ap.add_argument("--csv", type=str, default=None, help="Path to a self-play CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default=RESULTS_DIR, help="Directory containing selfplay_*.csv")
    ap.add_argument("--pattern", type=str, default=RESULTS_PATTERN, help="Glob pattern for selecting latest file")

    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Print tables only")
    ap.add_argument("--metric", type=str, default="avg_nodes", help="Per-depth column for the bar chart")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = load_latest_from_dir(Path(args.results_dir), pattern=args.pattern)

    df = with_rates(load_stats(LoadSpec(csv_path=csv_path)))

    print(f"\nLoaded: {csv_path}")
    print(f"Moves: {len(df):,}  Cols: {len(df.columns)}")

    by_depth = per_depth_summary(df)
    print("\n=== Per depth ===")
    print(by_depth.to_string(index=False))

    if "game" in df.columns:
        print("\n=== Per game ===")
        print(per_game_summary(df).to_string(index=False))

    desc = numeric_summary(df)
    if not desc.empty:
        print("\n=== Numeric summary ===")
        print(desc.to_string())

    if args.no_plots:
        return 0

    outdir = Path(args.outdir)
    plot_histograms(df, outdir, DEFAULT_HIST_COLS, show=args.show)
    plot_nodes_vs_time(df, outdir, show=args.show)
    plot_depth_bar(by_depth, outdir, args.metric, show=args.show)

    if not args.show:
        print(f"\nSaved figures to: {outdir.resolve()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
