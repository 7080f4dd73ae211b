from abc import ABC, abstractmethod

from curvesim.logging import get_logger

logger = get_logger(__name__)


class Harvester(ABC):
    """
    Keeper calling `harvest` on a compounding staker during a simulation.
    """

    def __init__(self, staker, address="harvester"):
        """
        Parameters
        ----------
        staker : :class:`~feisim.pool.fei.staking.CompoundingStaker`
            Vault to harvest.
        address : str
            Caller of `harvest`.
        """
        self.staker = staker
        self.address = address

    @abstractmethod
    def should_harvest(self, timestamp):
        """Whether to harvest at `timestamp`."""
        raise NotImplementedError

    def process_time_sample(self, timestamp):
        """
        Harvests if due at `timestamp`.

        Returns
        -------
        dict
            "reward": TRIBE pending before the harvest,
            "harvested": LP tokens added to the stake.
        """
        if not self.should_harvest(timestamp):
            return {"reward": 0.0, "harvested": 0.0}

        reward = self.staker.pending_reward()
        harvested = self.staker.harvest(self.address)
        if harvested == 0:
            logger.warning("[%s] harvest at %s added nothing", self.staker.symbol, timestamp)
        return {"reward": reward / 1e18, "harvested": harvested / 1e18}
