"""
A simulation runs a compounding staker over a reward period, with a keeper
harvesting at a fixed interval.

The :mod:`simulation pipeline framework <feisim.pipelines>` allows the
user to build custom strategies for simulation.

Most users will want to use the `autosim` function, which compares harvest
intervals, reward windows and reward amounts through the
:func:`simple pipeline <feisim.pipelines.simple.pipeline>`.
"""
from curvesim.logging import get_logger

from feisim.iterators.params_samplers import STAKER_PARAMS, STRATEGY_PARAMS
from feisim.pipelines.simple import pipeline

logger = get_logger(__name__)


def autosim(config=None, **kwargs):
    """
    The autosim() function simulates the compounding staker with a range of
    parameters and runs one simulation per combination.

    Parameters
    ----------
    config: StakerConfig, optional
        Contract addresses, see :meth:`StakerConfig.from_env` and
        :meth:`StakerConfig.from_address_book`.

    window: int or iterable of int, optional
        Reward period of the staking rewards, in seconds.

    reward: int or iterable of int, optional
        TRIBE notified to the staking rewards at the start.

    harvest_interval: int or iterable of int, optional
        Seconds between two harvests.

    router: str or iterable of str, optional
        "uniswap" or "mock".

    test: bool, default=False
        Overrides variable_params to use two test values.

    days: int, default=7
        Number of days to simulate.

    interval: int, default=3600
        Seconds between two timesteps.

    ncpu : int, default=1
        Number of cores to use.

    Returns
    -------
    :class:`~feisim.metrics.results.SimResults`
    """
    variable_params, rest_of_params = _parse_arguments(**kwargs)

    return pipeline(
        config,
        variable_params=variable_params,
        **rest_of_params,
    )


def _parse_arguments(**kwargs):
    input_args = STAKER_PARAMS + STRATEGY_PARAMS

    variable_params = {}
    rest_of_params = {}

    for key, val in kwargs.items():
        if key in input_args:
            if isinstance(val, (int, str)):
                val = [val]
            if key == "router":
                if not all(isinstance(v, str) for v in val):
                    raise TypeError(f"Argument {key} must be a str or iterable of str")
            elif not all(isinstance(v, int) for v in val):
                raise TypeError(f"Argument {key} must be an int or iterable of ints")
            variable_params[key] = list(val)
        else:
            rest_of_params[key] = val

    return variable_params, rest_of_params
