"""
Metrics recorded during simulations, and the results container.
"""

__all__ = [
    "init_metrics",
    "make_results",
    "metrics",
    "SimResults",
    "StateLog",
]

from pandas import concat

from . import metrics
from .results import SimResults
from .state_log import StateLog


def init_metrics(metric_classes, **kwargs):
    """
    Instantiates each metric class with the keyword arguments.

    Returns
    -------
    List[Metric]
    """
    return [Metric(**kwargs) for Metric in metric_classes]


def make_results(data_per_run, data_per_trade, summary_data, state_data, metrics):
    """
    Combines the per-run outputs of a pipeline into a :class:`SimResults`.

    Parameters
    ----------
    data_per_run : List[DataFrame]
        Parameters of each run.
    data_per_trade : List[DataFrame]
        Metric time series of each run.
    summary_data : List[DataFrame]
        Metric summaries of each run.
    state_data : List[DataFrame]
        Logged state of each run.
    metrics : List[Metric]
        Metrics the data was computed with.

    Returns
    -------
    :class:`SimResults`
    """
    runs = range(len(data_per_run))
    return SimResults(
        data_per_run=concat(data_per_run, ignore_index=True),
        data_per_trade=concat(data_per_trade, keys=runs, names=["run", "timestamp"]),
        summary_data=concat(summary_data, ignore_index=True),
        state_data=concat(state_data, keys=runs, names=["run", "timestamp"]),
        plot_config={type(m).__name__: m.config["plot"] for m in metrics},
    )
