"""
Implements the simple compounding pipeline: depositors enter the vault at
the start of the run, and a keeper harvests at a fixed interval.
"""
from curvesim.logging import get_logger

from feisim.iterators.params_samplers import ParameterizedStakerIterator
from feisim.iterators.time_samplers import TimeSampler
from feisim.metrics import init_metrics, make_results
from feisim.metrics.results import SimResults
from feisim.pipelines import run_pipeline
from feisim.pipelines.common import (
    DEFAULT_DEPOSITS,
    DEFAULT_FIXED_PARAMS,
    DEFAULT_METRICS,
    DEFAULT_PARAMS,
    TEST_PARAMS,
)
from feisim.pipelines.simple.strategy import SimpleStrategy

logger = get_logger(__name__)


def pipeline(
    config=None,
    *,
    variable_params=None,
    fixed_params=None,
    deposits=None,
    test=False,
    days=7,
    interval=60 * 60,
    end_ts=None,
    ncpu=1,
) -> SimResults:
    """
    Runs the compounding staker over a grid of parameters.

    Parameters
    ----------
    config : :class:`~feisim.pool.fei.config.StakerConfig`, optional
        Contract addresses, mainnet addresses by default.

    variable_params : dict, defaults to a range of harvest intervals
        Parameters to vary across simulations: "window", "reward",
        "router", "harvest_interval".

        Example
        --------
        >>> variable_params = {"harvest_interval": [3600, 86400]}

    fixed_params : dict, optional
        Parameters set for all simulations.

        Example
        --------
        >>> fixed_params = {"window": 7 * 86400, "reward": 10**24}

    deposits : dict, optional
        LP tokens deposited at the start, by depositor.

    test : bool, optional
        Overrides variable_params to use two test values.

    days : int, default=7
        Length of the simulated period.

    interval : int, default=3600
        Seconds between two timesteps.

    end_ts : int, optional
        End timestamp in Unix time.

    ncpu : int, default=1
        Number of cores to use.

    Returns
    -------
    :class:`~feisim.metrics.results.SimResults`

    """
    if test:
        variable_params = TEST_PARAMS
    variable_params = variable_params or DEFAULT_PARAMS
    fixed_params = {
        key: value
        for key, value in {**DEFAULT_FIXED_PARAMS, **(fixed_params or {})}.items()
        if key not in variable_params
    }
    deposits = deposits or DEFAULT_DEPOSITS

    time_sampler = TimeSampler(days=days, interval=interval, end=end_ts)
    param_sampler = ParameterizedStakerIterator(
        config,
        variable_params=variable_params,
        fixed_params=fixed_params,
        start_ts=time_sampler.timestamps[0],
    )
    logger.info("Simulating %d parameter sets over %d days", len(param_sampler), days)

    _metrics = init_metrics(DEFAULT_METRICS)
    strategy = SimpleStrategy(_metrics, deposits)

    output = run_pipeline(param_sampler, time_sampler, strategy, ncpu=ncpu)

    return make_results(*output, _metrics)
