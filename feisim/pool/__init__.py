from copy import deepcopy
from typing import List

from curvesim.logging import get_logger

from feisim.pool.fei.conf import (
    FEI_TRIBE_PAIR_CONF,
    GOVERNOR_ADDRESS,
    LP_PROVIDER,
    MOCK_ROUTER_CONF,
    STAKING_REWARDS_CONF,
)
from feisim.pool.fei.config import StakerConfig
from feisim.pool.fei.core import Core
from feisim.pool.fei.fei import Fei, Tribe
from feisim.pool.fei.staking import CompoundingStaker, FeiStakingRewards
from feisim.pool.fei.uniswap import MockRouter, SwapRouter, UniswapV2Pair, UniswapV2Router
from feisim.pool.fei.utils import BlocktimestampMixins

__all__ = [
    "get_sim_staker",
    "SimStakerInstance",
    "get",
]

logger = get_logger(__name__)

ROUTERS = ("uniswap", "mock")


class SimStakerInstance:
    def __init__(
        self,
        core: Core,
        fei: Fei,
        tribe: Tribe,
        pair: UniswapV2Pair,
        router: SwapRouter,
        staking_rewards: FeiStakingRewards,
        staker: CompoundingStaker,
        config: StakerConfig,
    ):
        self.core = core
        self.fei = fei
        self.tribe = tribe
        self.pair = pair
        self.router = router
        self.staking_rewards = staking_rewards
        self.staker = staker
        self.config = config

    def __iter__(self):
        return iter((
            self.core,
            self.fei,
            self.tribe,
            self.pair,
            self.router,
            self.staking_rewards,
            self.staker,
        ))

    def copy(self):
        # one deepcopy keeps the references between contracts
        return deepcopy(self)

    def contract_addresses(self):
        """Addresses of the contracts, by name."""
        return {
            "core": self.core.address,
            "fei": self.fei.address,
            "tribe": self.tribe.address,
            "pair": self.pair.address,
            "router": self.router.address,
            "staking_rewards": self.staking_rewards.address,
            "staker": self.staker.address,
            "owner": self.staker.owner(),
        }

    @property
    def time_aware_contracts(self) -> List[BlocktimestampMixins]:
        return [c for c in self if isinstance(c, BlocktimestampMixins)]

    def _increment_timestamp(self, timestamp=None, timedelta=None, blocks=1):
        for contract in self.time_aware_contracts:
            contract._increment_timestamp(
                timestamp=timestamp, timedelta=timedelta, blocks=blocks
            )

    def prepare_for_run(self, timestamps):
        for contract in self.time_aware_contracts:
            contract.prepare_for_run(timestamps)

    def prepare_for_step(self, timestamp):
        for contract in self.time_aware_contracts:
            contract.prepare_for_step(timestamp)


def get_sim_staker(
    config: StakerConfig = None,
    *,
    router="uniswap",
    window=STAKING_REWARDS_CONF["window"],
    reward=STAKING_REWARDS_CONF["reward"],
    reserves=None,
    liquidity=FEI_TRIBE_PAIR_CONF["liquidity"],
    mock_liquidity=MOCK_ROUTER_CONF["liquidity"],
    governor=GOVERNOR_ADDRESS,
    start_ts=None,
):
    """
    Factory function wiring a compounding staker to freshly created Fei core,
    FEI/TRIBE pair, router and staking rewards, at the addresses of `config`.

    Parameters
    ----------
    config : StakerConfig, optional
        Contract addresses, mainnet addresses by default.

    router : "uniswap" | "mock", default="uniswap"
        "uniswap": rewards are swapped and added as liquidity to the pair,
        "mock": every harvest adds `mock_liquidity` LP tokens.

    window : int
        Reward period of the staking rewards, in seconds.

    reward : int
        TRIBE rewards notified at `start_ts`, 0 to skip.

    reserves : List[int], optional
        FEI and TRIBE reserves of the pair.

    liquidity : int
        LP tokens minted to `LP_PROVIDER`.

    start_ts : int, optional
        Posix timestamp the reward period starts at, now by default.

    Returns
    -------
    :class:`feisim.pool.SimStakerInstance`

    Examples
    --------
    >>> import feisim
    >>> sim = feisim.pool.get(router="mock", window=100)
    """
    if router not in ROUTERS:
        raise ValueError("router must be one of %s, got %r" % (ROUTERS, router))
    if config is None:
        config = StakerConfig()
    if reserves is None:
        reserves = FEI_TRIBE_PAIR_CONF["reserves"]

    core = Core(governor)
    fei = core.fei()
    tribe = core.tribe()
    fei.address = config.fei
    tribe.address = config.tribe

    pair = UniswapV2Pair(fei, tribe, address=config.pair)
    core.grantMinter(governor, governor)
    fei.mint(governor, pair.address, reserves[0])
    core.allocateTribe(governor, pair.address, reserves[1])
    pair.sync()
    pair.mintAmount(LP_PROVIDER, liquidity)

    if router == "mock":
        swap_router = MockRouter(pair, address=config.router, liquidity=mock_liquidity)
    else:
        swap_router = UniswapV2Router(pair, address=config.router)

    staking_rewards = FeiStakingRewards(
        governor, tribe, pair, window, address=config.staking_rewards
    )
    if start_ts is not None:
        staking_rewards._increment_timestamp(timestamp=start_ts)

    staker = CompoundingStaker(
        fei, tribe, pair, swap_router, staking_rewards, config.owner
    )

    if reward > 0:
        core.allocateTribe(governor, staking_rewards.address, reward)
        staking_rewards.notifyRewardAmount(governor, reward)

    logger.info(
        "Compounding staker ready: %s router, %d reward over %ds",
        router,
        reward,
        window,
    )
    return SimStakerInstance(
        core, fei, tribe, pair, swap_router, staking_rewards, staker, config
    )


get = get_sim_staker
