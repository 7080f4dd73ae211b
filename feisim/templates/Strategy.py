from abc import ABC

from curvesim.logging import get_logger

from feisim.pool import SimStakerInstance
from feisim.pool.fei.conf import LP_PROVIDER

logger = get_logger(__name__)


class Strategy(ABC):
    """
    A Strategy defines what happens during each step of a simulation: the
    depositors enter the vault at the start, then an injected `Harvester`
    compounds the rewards and the injected `StateLog` records the vault.

    Class Attributes
    ----------------
    harvester_class : :class:`~feisim.templates.Harvester`
        Class for creating harvester instances.
    state_log_class : :class:`~feisim.metrics.state_log.StateLog`
        Class for creating state logger instances.

    Attributes
    ----------
    metrics : List[Metric]
        A list of metrics used to evaluate the performance of the strategy.
    deposits : dict
        LP tokens deposited at the start of the run, by depositor.
    """

    # These classes should be injected in child classes
    # to create the desired behavior.
    harvester_class = None
    state_log_class = None

    def __init__(self, metrics, deposits):
        self.metrics = metrics
        self.deposits = deposits

    def __call__(self, sim_staker: SimStakerInstance, parameters, time_sampler):
        """
        Runs the vault over the time grid.

        Parameters
        ----------
        sim_staker : :class:`~feisim.pool.SimStakerInstance`
            The contracts of this run.

        parameters : dict
            Current parameters from the param_sampler.

        time_sampler : iterable
            Iterable returning a `TimeSample` for each timestep.

        Returns
        -------
        metrics : tuple of lists

        """
        # pylint: disable=not-callable
        staker = sim_staker.staker
        harvester = self._make_harvester(staker, parameters)
        state_log = self.state_log_class(sim_staker, self.metrics, parameters=parameters)

        logger.info("[%s] Simulating with %s", staker.symbol, parameters)

        sim_staker.prepare_for_run(time_sampler.timestamps)
        self._deposit(sim_staker)

        for sample in time_sampler:
            sim_staker.prepare_for_step(sample.timestamp)
            harvest_data = harvester.process_time_sample(sample.timestamp)
            state_log.update(time_sample=sample, harvest_data=harvest_data)

        return state_log.compute_metrics()

    def _make_harvester(self, staker, parameters):
        return self.harvester_class(staker)

    def _deposit(self, sim_staker):
        pair, staker = sim_staker.pair, sim_staker.staker
        for depositor, amount in self.deposits.items():
            pair.transfer(LP_PROVIDER, depositor, amount)
            pair.approve(depositor, staker.address, amount)
            staker.deposit(depositor, amount)
