from curvesim.logging import get_logger

from ...metrics.state_log import StateLog
from ...templates.Strategy import Strategy
from ..common import DEFAULT_PARAMS
from .harvester import IntervalHarvester

logger = get_logger(__name__)


class SimpleStrategy(Strategy):  # pylint: disable=too-few-public-methods
    """
    Class Attributes
    ----------------
    harvester_class : :class:`~feisim.pipelines.simple.harvester.IntervalHarvester`
        Class for creating harvester instances.
    state_log_class : :class:`~feisim.metrics.state_log.StateLog`
        Class for creating state logger instances.
    """

    harvester_class = IntervalHarvester
    state_log_class = StateLog

    def __init__(self, metrics, deposits, harvest_interval=None):
        super().__init__(metrics, deposits)
        self.harvest_interval = harvest_interval or DEFAULT_PARAMS["harvest_interval"][0]

    def _make_harvester(self, staker, parameters):
        interval = parameters.get("harvest_interval", self.harvest_interval)
        return self.harvester_class(staker, interval)
