import altair as alt
from pandas import DataFrame, concat


def run_labels(data_per_run):
    """Label of each run, from its parameters."""
    return [
        ", ".join(f"{key}={value}" for key, value in row.items())
        for row in data_per_run.to_dict("records")
    ]


def flatten_columns(columns):
    return [
        "_".join(str(c) for c in col) if isinstance(col, tuple) else str(col)
        for col in columns
    ]


def make_time_series_plot(data_per_trade, data_per_run, metric, title=None, resample=None):
    """
    Line chart of one metric over time, one line per run.

    Parameters
    ----------
    data_per_trade : DataFrame
        Metrics indexed by (run, timestamp).
    data_per_run : DataFrame
        Parameters of each run.
    metric : str
        Column to plot.
    resample : str, optional
        Pandas aggregation used to resample the series daily.
    """
    labels = run_labels(data_per_run)
    frames = []
    for run, group in data_per_trade[metric].groupby(level="run"):
        series = group.droplevel("run")
        if resample:
            series = series.resample("1D").agg(resample)
        frames.append(
            DataFrame(
                {"timestamp": series.index, "value": series.values, "run": labels[run]}
            )
        )
    source = concat(frames, ignore_index=True)

    return (
        alt.Chart(source)
        .mark_line()
        .encode(
            alt.X("timestamp:T").title("Time"),
            alt.Y("value:Q").scale(zero=False).title(title or metric),
            alt.Color("run:N").title("Parameters"),
        )
        .properties(title=title or metric)
    )


def make_summary_plot(summary_data, data_per_run, metric, title=None):
    """
    Point chart of one summary statistic per run.
    """
    summary = summary_data.copy()
    summary.columns = flatten_columns(summary.columns)
    source = DataFrame(
        {"run": run_labels(data_per_run), "value": summary[metric].values}
    )
    return (
        alt.Chart(source)
        .mark_line(point=True)
        .encode(
            alt.X("run:N").title("Parameters"),
            alt.Y("value:Q").title(title or metric),
        )
        .properties(title=title or metric)
    )
