from .chart import (
    plot_depth_bar,
    plot_histograms,
    plot_nodes_vs_time,
)

__all__ = [
    "plot_depth_bar",
    "plot_histograms",
    "plot_nodes_vs_time",
]
