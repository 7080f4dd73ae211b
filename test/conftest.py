import pytest

from feisim.pool import SimStakerInstance
from feisim.pool.fei.conf import GOVERNOR_ADDRESS, LP_PROVIDER, M, e18
from feisim.pool.fei.core import Core
from feisim.pool.fei.staking import CompoundingStaker, FeiStakingRewards
from feisim.pool.fei.uniswap import MockRouter, UniswapV2Pair, UniswapV2Router

USER = "user_address"
SECOND_USER = "second_user_address"
GOVERNOR = GOVERNOR_ADDRESS
MINTER = "minter_address"
PCV_CONTROLLER = "pcv_controller_address"
GUARDIAN = "guardian_address"

# 200M FEI / 250M TRIBE with 335M liquidity
PAIR_RESERVES = [200 * M * e18, 250 * M * e18]
PAIR_LIQUIDITY = 335 * M * e18

WINDOW = 100
REWARD = 200 * M * e18

USER_LP = 1000 * e18
SECOND_USER_LP = 4000 * e18


def create_core():
    core = Core(GOVERNOR)
    core.grantMinter(GOVERNOR, MINTER)
    core.grantPCVController(GOVERNOR, PCV_CONTROLLER)
    core.grantGuardian(GOVERNOR, GUARDIAN)
    return core


def create_staker(router="mock", window=WINDOW, reward=REWARD):
    """
    Vault over a funded FEI/TRIBE pair, with `REWARD` TRIBE notified to the
    staking rewards and LP tokens minted to the two users.
    """
    core = create_core()
    fei = core.fei()
    tribe = core.tribe()

    pair = UniswapV2Pair(fei, tribe)
    fei.mint(MINTER, pair.address, PAIR_RESERVES[0])
    core.allocateTribe(GOVERNOR, pair.address, PAIR_RESERVES[1])
    pair.sync()
    pair.mintAmount(LP_PROVIDER, PAIR_LIQUIDITY)

    if router == "mock":
        swap_router = MockRouter(pair)
    else:
        swap_router = UniswapV2Router(pair)

    rewards = FeiStakingRewards(GOVERNOR, tribe, pair, window)
    staker = CompoundingStaker(fei, tribe, pair, swap_router, rewards, USER)

    pair.mintAmount(USER, USER_LP)
    pair.mintAmount(SECOND_USER, SECOND_USER_LP)

    core.allocateTribe(GOVERNOR, rewards.address, reward)
    rewards.notifyRewardAmount(GOVERNOR, reward)

    return SimStakerInstance(
        core, fei, tribe, pair, swap_router, rewards, staker, config=None
    )


def deposit(sim_staker, user, amount):
    sim_staker.pair.approve(user, sim_staker.staker.address, amount)
    return sim_staker.staker.deposit(user, amount)


def increase_time(sim_staker, seconds=1):
    sim_staker._increment_timestamp(timedelta=seconds)


@pytest.fixture(scope="function")
def core():
    return create_core()


@pytest.fixture(scope="function")
def sim_staker():
    return create_staker()


@pytest.fixture(scope="function")
def uniswap_sim_staker():
    return create_staker(router="uniswap")


@pytest.fixture(scope="function")
def staker(sim_staker):
    return sim_staker.staker


@pytest.fixture(scope="function")
def pair(sim_staker):
    return sim_staker.pair


@pytest.fixture(scope="function")
def rewards(sim_staker):
    return sim_staker.staking_rewards


@pytest.fixture(scope="function")
def fei(sim_staker):
    return sim_staker.fei


@pytest.fixture(scope="function")
def tribe(sim_staker):
    return sim_staker.tribe
