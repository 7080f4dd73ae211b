__all__ = [
    "flatten_columns",
    "make_time_series_plot",
    "make_summary_plot",
    "run_labels",
]

from .staker_plot import (
    flatten_columns,
    make_summary_plot,
    make_time_series_plot,
    run_labels,
)
