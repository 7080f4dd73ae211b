__all__ = [
    "ParameterizedStakerIterator",
    "STAKER_PARAMS",
    "STRATEGY_PARAMS",
]

from .staker_params_iterator import (
    STAKER_PARAMS,
    STRATEGY_PARAMS,
    ParameterizedStakerIterator,
)
