"""
Module to house the `StateLog`, a generic class to record the changing state of
the vault during simulations.
"""
from pandas import DataFrame, concat

from feisim.pool import SimStakerInstance

from .staker_state import get_staker_state


class StateLog:
    """
    Logger that records simulation/vault state throughout each simulation run and
    computes metrics at the end of each run.
    """

    __slots__ = [
        "metrics",
        "sim_staker",
        "state_per_run",
        "state_per_step",
    ]

    def __init__(self, sim_staker: SimStakerInstance, metrics, parameters=None):
        self.sim_staker = sim_staker
        self.metrics = metrics
        self.state_per_run = dict(parameters or {})
        self.state_per_step = []

    def update(self, time_sample, **kwargs):
        """Records vault state and any keyword arguments provided."""
        self.state_per_step.append(
            {
                "price_sample": time_sample,
                "state_data": get_staker_state(self.sim_staker),
                **kwargs,
            }
        )

    def get_logs(self):
        """Returns the accumulated log data."""
        df = DataFrame(self.state_per_step)

        # curvesim metrics index their output by the "price_sample" timestamps
        times = [state["price_sample"].timestamp for state in self.state_per_step]
        state_per_step = {col: DataFrame(df[col].to_list(), index=times) for col in df}

        return {
            "sim_parameters": DataFrame(self.state_per_run, index=[0]),
            **state_per_step,
        }

    def compute_metrics(self):
        """Computes metrics from the accumulated log data."""
        state_logs = self.get_logs()
        metric_data = [metric.compute(state_logs) for metric in self.metrics]
        data_per_step, summary_data = tuple(zip(*metric_data))  # transpose tuple list

        return (
            state_logs["sim_parameters"],
            concat(data_per_step, axis=1),
            concat(summary_data, axis=1),
            state_logs["state_data"],
        )
