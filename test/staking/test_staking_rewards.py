import pytest

from feisim.exceptions import (
    AuthorizationError,
    InsufficientBalanceError,
    InvalidAmountError,
)
from feisim.pool.fei.conf import e18
from feisim.pool.fei.staking import FeiStakingRewards
from test.conftest import GOVERNOR, REWARD, SECOND_USER, USER, WINDOW, create_staker


def _stake(rewards, pair, user, amount):
    pair.approve(user, rewards.address, amount)
    rewards.stake(user, amount)


def test_notify_reward_amount(rewards):
    assert rewards.rewardRate == REWARD // WINDOW
    assert rewards.periodFinish == rewards.block_timestamp + WINDOW
    assert rewards.getRewardForDuration() == REWARD


def test_notify_reward_amount_not_distribution(rewards):
    with pytest.raises(AuthorizationError):
        rewards.notifyRewardAmount(USER, 1)


def test_notify_reward_too_high(sim_staker):
    rewards = sim_staker.staking_rewards
    rate = rewards.rewardRate
    with pytest.raises(InvalidAmountError, match="Provided reward too high"):
        rewards.notifyRewardAmount(GOVERNOR, REWARD)
    assert rewards.rewardRate == rate


def test_earned_pro_rata(rewards, pair):
    _stake(rewards, pair, USER, 1000 * e18)
    _stake(rewards, pair, SECOND_USER, 4000 * e18)
    rewards._increment_timestamp(timedelta=10)

    assert rewards.earned(USER) == 10 * rewards.rewardRate // 5
    assert rewards.earned(SECOND_USER) == 10 * rewards.rewardRate * 4 // 5


def test_rewards_stop_at_period_finish(rewards, pair):
    _stake(rewards, pair, USER, 1000 * e18)
    rewards._increment_timestamp(timedelta=WINDOW * 3)
    assert rewards.lastTimeRewardApplicable() == rewards.periodFinish
    assert rewards.earned(USER) == REWARD


def test_get_reward(rewards, pair, tribe):
    _stake(rewards, pair, USER, 1000 * e18)
    rewards._increment_timestamp(timedelta=1)

    paid = rewards.getReward(USER)
    assert paid == rewards.rewardRate
    assert tribe.balanceOf[USER] == paid
    assert rewards.earned(USER) == 0
    assert rewards.getReward(USER) == 0


def test_stake_zero(rewards):
    with pytest.raises(InvalidAmountError, match="Cannot stake 0"):
        rewards.stake(USER, 0)


def test_stake_without_allowance(rewards, pair):
    with pytest.raises(InsufficientBalanceError):
        rewards.stake(USER, 1000 * e18)
    assert rewards.totalSupply == 0
    assert rewards.balanceOf[USER] == 0


def test_withdraw(rewards, pair):
    _stake(rewards, pair, USER, 1000 * e18)
    rewards.withdraw(USER, 400 * e18)
    assert rewards.balanceOf[USER] == 600 * e18
    assert rewards.totalSupply == 600 * e18
    assert pair.balanceOf[USER] == 400 * e18

    with pytest.raises(InvalidAmountError, match="Cannot withdraw 0"):
        rewards.withdraw(USER, 0)
    with pytest.raises(InsufficientBalanceError):
        rewards.withdraw(USER, 601 * e18)


def test_exit(rewards, pair, tribe):
    _stake(rewards, pair, USER, 1000 * e18)
    rewards._increment_timestamp(timedelta=2)
    paid = rewards.exit(USER)
    assert paid == 2 * rewards.rewardRate
    assert tribe.balanceOf[USER] == paid
    assert pair.balanceOf[USER] == 1000 * e18
    assert rewards.totalSupply == 0


def test_notify_rolls_over_leftover(sim_staker):
    rewards, core = sim_staker.staking_rewards, sim_staker.core
    rate = rewards.rewardRate
    rewards._increment_timestamp(timedelta=WINDOW // 2)

    core.allocateTribe(GOVERNOR, rewards.address, REWARD)
    rewards.notifyRewardAmount(GOVERNOR, REWARD)
    assert rewards.rewardRate == (REWARD + rate * (WINDOW // 2)) // WINDOW


def test_set_rewards_duration():
    sim_staker = create_staker(reward=0)
    rewards = sim_staker.staking_rewards
    rewards._increment_timestamp(timedelta=WINDOW + 1)
    rewards.setRewardsDuration(GOVERNOR, 1000)
    assert rewards.rewardsDuration == 1000

    with pytest.raises(AuthorizationError):
        rewards.setRewardsDuration(USER, 10)


def test_set_rewards_duration_during_period(rewards):
    with pytest.raises(InvalidAmountError):
        rewards.setRewardsDuration(GOVERNOR, 1000)


def test_default_address(pair, tribe):
    rewards = FeiStakingRewards(GOVERNOR, tribe, pair)
    assert rewards.address == "%s_staking_rewards" % pair.symbol
    assert rewards.rewardsDuration == WINDOW
