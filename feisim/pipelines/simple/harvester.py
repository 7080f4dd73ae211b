from curvesim.logging import get_logger

from ...templates import Harvester

logger = get_logger(__name__)


class IntervalHarvester(Harvester):
    """
    Harvests once at least `harvest_interval` seconds passed since the last
    harvest (or the first sample).
    """

    def __init__(self, staker, harvest_interval, address="harvester"):
        super().__init__(staker, address)
        self.harvest_interval = harvest_interval
        self.last_harvest = None

    def should_harvest(self, timestamp):
        ts = int(timestamp.timestamp())
        if self.last_harvest is None:
            self.last_harvest = ts
            return False
        if ts - self.last_harvest < self.harvest_interval:
            return False
        self.last_harvest = ts
        return True
