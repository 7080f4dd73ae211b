__all__ = [
    "Core",
    "CoreRef",
    "Fei",
    "Tribe",
    "WETH",
    "UniswapV2Pair",
    "SwapRouter",
    "UniswapV2Router",
    "MockRouter",
    "FeiStakingRewards",
    "CompoundingStaker",
    "LendingPool",
    "AavePCVDeposit",
    "PriceOracle",
    "EthReserveStabilizer",
    "StakerConfig",
    "load_address_book",
]

from .core import Core, CoreRef
from .fei import Fei, Tribe, WETH
from .uniswap import UniswapV2Pair, SwapRouter, UniswapV2Router, MockRouter
from .staking import FeiStakingRewards, CompoundingStaker
from .pcv import LendingPool, AavePCVDeposit
from .oracle import PriceOracle
from .stabilizer import EthReserveStabilizer
from .config import StakerConfig, load_address_book
