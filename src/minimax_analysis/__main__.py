from __future__ import annotations

import sys

from .cli.analyze_stats import main as analyze_main


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    if not argv or argv[0].startswith("-"):
        return analyze_main(argv)

    cmd, rest = argv[0].lower(), argv[1:]
    if cmd in {"analyze", "analysis"}:
        return analyze_main(rest)

    print("Usage:")
    print("  python -m minimax_analysis [analyze] [--csv ...] [--outdir figures]")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
