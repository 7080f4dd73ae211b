__all__ = [
    "UniswapV2Pair",
    "SwapRouter",
    "UniswapV2Router",
    "MockRouter",
    "MINIMUM_LIQUIDITY",
]

from .pair import UniswapV2Pair, MINIMUM_LIQUIDITY
from .router import SwapRouter, UniswapV2Router, MockRouter
