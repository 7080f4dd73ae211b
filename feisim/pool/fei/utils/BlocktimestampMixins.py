from time import time


def _get_unix_timestamp():
    """Get the timestamp in Unix time."""
    return int(time())


def _to_timestamp(timestamp):
    if isinstance(timestamp, float):
        timestamp = int(timestamp)
    if not isinstance(timestamp, int):
        timestamp = int(timestamp.timestamp())  # unix timestamp in seconds
    return timestamp


class BlocktimestampMixins:
    def __init__(self, **kwargs):
        self._block_timestamp = _get_unix_timestamp()

    @property
    def block_timestamp(self) -> int:
        return self._block_timestamp

    def _increment_timestamp(self, timestamp=None, timedelta=None, blocks=1):
        """Update the internal clock used to mimic the block timestamp."""
        if timestamp:
            self._block_timestamp = _to_timestamp(timestamp)
            return
        if timedelta:
            self._block_timestamp += timedelta
            return

        self._block_timestamp += 12 * blocks

    def prepare_for_run(self, timestamps):
        """
        Sets init _block_timestamp attribute to current sim time.

        Parameters
        ----------
        timestamps : pandas.DatetimeIndex
            The time grid of the simulation run.
        """
        self._increment_timestamp(timestamp=timestamps[0])

    def prepare_for_step(self, timestamp):
        """
        Updates the _block_timestamp attribute to current sim time.

        Parameters
        ----------
        timestamp : datetime.datetime
            The current timestamp in the simulation.
        """
        self._increment_timestamp(timestamp=_to_timestamp(timestamp))
