from itertools import product

from curvesim.exceptions import ParameterSamplerError
from curvesim.logging import get_logger

from feisim.pool import get_sim_staker

logger = get_logger(__name__)

# passed to `get_sim_staker`
STAKER_PARAMS = ("window", "reward", "router", "reserves", "liquidity", "mock_liquidity")
# read by the strategy
STRATEGY_PARAMS = ("harvest_interval",)


class ParameterizedStakerIterator:
    """
    Parameter sampler building a fresh compounding staker for every
    combination of the variable parameters.
    """

    def __init__(
        self,
        config=None,
        variable_params=None,
        fixed_params=None,
        start_ts=None,
    ):
        """
        Parameters
        ----------
        config : :class:`feisim.pool.fei.config.StakerConfig`, optional
            Contract addresses used for every staker.

        variable_params : dict
            Parameters to vary across simulations.
            Keys: parameter names, Values: iterable of values

        fixed_params : dict, optional
            Parameters set for all simulations.

        start_ts : int, optional
            Start of the reward period, in Unix time.
        """
        variable_params = variable_params or {}
        fixed_params = fixed_params or {}
        self._validate_params(variable_params)
        self._validate_params(fixed_params)

        self.config = config
        self.fixed_params = fixed_params
        self.start_ts = start_ts
        self.parameter_sequence = self.make_parameter_sequence(variable_params)

    @staticmethod
    def _validate_params(params):
        unknown = set(params) - set(STAKER_PARAMS) - set(STRATEGY_PARAMS)
        if unknown:
            raise ParameterSamplerError(
                f"Unknown parameters for the compounding staker: {sorted(unknown)}"
            )

    def __iter__(self):
        """
        Yields
        -------
        sim_staker : :class:`~feisim.pool.SimStakerInstance`
            A staker built with the current parameters.

        params : dict
            The variable and fixed parameters of this iteration.
        """
        for variable in self.parameter_sequence:
            params = {**self.fixed_params, **variable}
            staker_kwargs = {k: v for k, v in params.items() if k in STAKER_PARAMS}
            sim_staker = get_sim_staker(
                self.config, start_ts=self.start_ts, **staker_kwargs
            )
            yield sim_staker, params

    def __len__(self):
        return len(self.parameter_sequence)

    def make_parameter_sequence(self, variable_params):
        """
        Returns a list of dicts for each possible combination of the input parameters.

        Parameters
        ----------
        variable_params: dict
            Keys: parameter names, Values: iterable of values

        Returns
        -------
        List(dict)
            A list of dicts defining the parameters for each iteration.
        """
        if not variable_params:
            return [{}]

        keys, values = zip(*variable_params.items())
        return [dict(zip(keys, vals)) for vals in product(*values)]
