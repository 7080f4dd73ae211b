from altair import vconcat
from curvesim.logging import get_logger

from feisim.plot import flatten_columns, make_summary_plot, make_time_series_plot

logger = get_logger(__name__)


class SimResults:
    """
    Results container with methods to plot or return metrics as DataFrames.
    """

    __slots__ = [
        "data_per_run",
        "data_per_trade",
        "summary_data",
        "state_data",
        "plot_config",
    ]

    def __init__(
        self,
        data_per_run,
        data_per_trade,
        summary_data,
        state_data,
        plot_config,
    ):
        """
        Parameters
        ----------
        data_per_run : DataFrame
            Parameters of each run, one row per run.
        data_per_trade : DataFrame
            Metric time series, indexed by (run, timestamp).
        summary_data : DataFrame
            Metric summaries, one row per run.
        state_data : DataFrame
            Logged vault state, indexed by (run, timestamp).
        plot_config : dict
            Plot configuration of each metric, by metric name.
        """
        self.data_per_run = data_per_run
        self.data_per_trade = data_per_trade
        self.summary_data = summary_data
        self.state_data = state_data
        self.plot_config = plot_config

    def summary(self, full=False):
        """
        Returns the summary statistics of each run.

        Parameters
        ----------
        full : bool, default=False
            If true, the run parameters are prepended.

        Returns
        -------
        pandas.DataFrame
        """
        summary = self.summary_data.copy()
        summary.columns = flatten_columns(summary.columns)
        if full:
            return self.data_per_run.join(summary)
        return summary

    def data(self, full=False):
        """
        Returns the metric time series of each run.

        Parameters
        ----------
        full : bool, default=False
            If true, the logged vault state is appended.
        """
        if full:
            return self.data_per_trade.join(self.state_data, rsuffix="_state")
        return self.data_per_trade

    def plot(self, summary=True, data=True, save_as=None):
        """
        Returns and optionally saves a plot of the results data.

        Parameters
        ----------
        summary : bool, default=True
            If true, includes summary data in the plot.

        data : bool, default=True
            If true, includes timeseries data in the plot.

        save_as : str, optional
            Path to save plot output to. Typically an .html file. See
            `Altair docs <https://altair-viz.github.io/user_guide/saving_charts.html>`_
            for additional options.

        Returns
        -------
        altair.VConcatChart

        """
        charts = []
        for config in self.plot_config.values():
            if data:
                for metric, params in config["metrics"].items():
                    charts.append(
                        make_time_series_plot(
                            self.data_per_trade,
                            self.data_per_run,
                            metric,
                            title=params.get("title"),
                            resample=params.get("resample"),
                        )
                    )
        if summary:
            for column in self.summary().columns:
                charts.append(
                    make_summary_plot(self.summary_data, self.data_per_run, column)
                )

        page = vconcat(*charts)
        if save_as:
            logger.info("Saving plot to %s", save_as)
            page.save(save_as)
        return page
