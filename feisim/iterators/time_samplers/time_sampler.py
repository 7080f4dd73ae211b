from datetime import datetime, timezone

import pandas as pd
from curvesim.logging import get_logger
from curvesim.utils import dataclass

logger = get_logger(__name__)


@dataclass(slots=True)
class TimeSample:
    """
    Attributes
    -----------
    timestamp : pandas.Timestamp
        Current simulation time.
    """

    timestamp: pd.Timestamp


class TimeSampler:
    """
    An iterator over a regular time grid, the clock of a simulation run.
    """

    def __init__(self, *, days=7, interval=60 * 60, end=None):
        """
        Parameters
        ----------
        days: int, defaults to 7
            Length of the simulated period.

        interval: int, defaults to 3600
            Seconds between two samples.

        end: int, optional
            End timestamp in Unix time, defaults to the start of the current
            hour in UTC.
        """
        if days <= 0 or interval <= 0:
            raise ValueError("days and interval must be positive")

        if end is None:
            end = datetime.now(timezone.utc).replace(minute=0, second=0, microsecond=0)
            end = pd.Timestamp(end)
        else:
            end = pd.Timestamp(end, unit="s", tz="UTC")

        self.interval = interval
        self.timestamps = pd.date_range(
            end=end, periods=days * 86400 // interval + 1, freq=pd.Timedelta(seconds=interval)
        )
        logger.debug(
            "Time grid from %s to %s, %d samples",
            self.timestamps[0],
            self.timestamps[-1],
            len(self.timestamps),
        )

    def __iter__(self):
        """
        Yields
        -------
        :class:`TimeSample`
        """
        for timestamp in self.timestamps:
            yield TimeSample(timestamp)

    def __len__(self):
        return len(self.timestamps)
