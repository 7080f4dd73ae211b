"""
Mainly a module to house the `FeiStakingRewards`, the reward pool in which the
compounding staker keeps its LP tokens.
"""
from collections import defaultdict

from curvesim.logging import get_logger
from curvesim.pool.snapshot import SnapshotMixin

from feisim.exceptions import (
    AuthorizationError,
    InsufficientBalanceError,
    InvalidAmountError,
)
from feisim.pool.snapshot import CompositeSnapshot, atomic
from ..conf import STAKING_REWARDS_CONF
from ..utils import ERC20, BlocktimestampMixins

logger = get_logger(__name__)

PRECISION = 10**18


class FeiStakingRewards(BlocktimestampMixins, SnapshotMixin):
    """
    Synthetix StakingRewards implementation in Python.

    `rewardsToken` is emitted at a constant rate over a window of
    `rewardsDuration` seconds, pro rata to the staked `stakingToken`.
    """

    snapshot_class = CompositeSnapshot
    snapshot_attrs = (
        "rewardRate",
        "periodFinish",
        "lastUpdateTime",
        "rewardPerTokenStored",
        "userRewardPerTokenPaid",
        "rewards",
        "rewardsDuration",
        "totalSupply",
        "balanceOf",
    )

    def __init__(
        self,
        rewardsDistribution: str,
        rewardsToken: ERC20,
        stakingToken: ERC20,
        rewardsDuration: int = STAKING_REWARDS_CONF["window"],
        address: str = None,
    ):
        """
        Parameters
        ----------
        rewardsDistribution : str
            Address allowed to notify new rewards
        rewardsToken : ERC20
            Token paid out as reward (TRIBE)
        stakingToken : ERC20
            Token staked (FEI/TRIBE LP)
        rewardsDuration : int
            Length of a reward period in seconds
        address : str
            Address of the contract
        """
        super().__init__()
        self.address = (
            address
            if address is not None
            else "%s_staking_rewards" % stakingToken.symbol
        )
        self.rewardsDistribution = rewardsDistribution
        self.rewardsToken = rewardsToken
        self.stakingToken = stakingToken
        self.rewardsDuration = rewardsDuration

        self.rewardRate = 0
        self.periodFinish = 0
        self.lastUpdateTime = 0
        self.rewardPerTokenStored = 0
        self.userRewardPerTokenPaid = defaultdict(int)
        self.rewards = defaultdict(int)

        self.totalSupply = 0
        self.balanceOf = defaultdict(int)

    def snapshot_dependencies(self):
        return [self.rewardsToken, self.stakingToken]

    def lastTimeRewardApplicable(self) -> int:
        return min(self.block_timestamp, self.periodFinish)

    def rewardPerToken(self) -> int:
        """
        Accumulated reward per staked token, 1e18 fixed point.
        """
        if self.totalSupply == 0:
            return self.rewardPerTokenStored
        return self.rewardPerTokenStored + (
            (self.lastTimeRewardApplicable() - self.lastUpdateTime)
            * self.rewardRate
            * PRECISION
            // self.totalSupply
        )

    def earned(self, account: str) -> int:
        """
        Rewards claimable by `account` at the current block timestamp.

        Parameters
        ----------
        account : str
            Staker address

        Returns
        -------
        int
            Amount of reward tokens
        """
        return (
            self.balanceOf[account]
            * (self.rewardPerToken() - self.userRewardPerTokenPaid[account])
            // PRECISION
            + self.rewards[account]
        )

    def getRewardForDuration(self) -> int:
        return self.rewardRate * self.rewardsDuration

    def _update_reward(self, account: str = None):
        self.rewardPerTokenStored = self.rewardPerToken()
        self.lastUpdateTime = self.lastTimeRewardApplicable()
        if account is not None:
            self.rewards[account] = self.earned(account)
            self.userRewardPerTokenPaid[account] = self.rewardPerTokenStored

    @atomic
    def stake(self, _sender: str, amount: int):
        """
        Stake `amount` staking tokens of the caller, who must have approved
        this contract.
        """
        if amount <= 0:
            raise InvalidAmountError("Cannot stake 0")
        self._update_reward(_sender)
        self.totalSupply += amount
        self.balanceOf[_sender] += amount
        self.stakingToken.transferFrom(
            _sender, self.address, amount, _spender=self.address
        )
        logger.debug("[%s] %s staked %d", self.stakingToken.symbol, _sender, amount)

    @atomic
    def withdraw(self, _sender: str, amount: int):
        """Unstake `amount` staking tokens back to the caller."""
        if amount <= 0:
            raise InvalidAmountError("Cannot withdraw 0")
        if self.balanceOf[_sender] < amount:
            raise InsufficientBalanceError("StakingRewards: withdraw amount exceeds stake")
        self._update_reward(_sender)
        self.totalSupply -= amount
        self.balanceOf[_sender] -= amount
        self.stakingToken.transfer(self.address, _sender, amount)
        logger.debug("[%s] %s withdrew %d", self.stakingToken.symbol, _sender, amount)

    @atomic
    def getReward(self, _sender: str) -> int:
        """
        Pay out the caller's accrued rewards.

        Returns
        -------
        int
            Amount of reward tokens paid
        """
        self._update_reward(_sender)
        reward = self.rewards[_sender]
        if reward > 0:
            self.rewards[_sender] = 0
            self.rewardsToken.transfer(self.address, _sender, reward)
            logger.debug(
                "[%s] %s claimed %d", self.rewardsToken.symbol, _sender, reward
            )
        return reward

    @atomic
    def exit(self, _sender: str) -> int:
        self.withdraw(_sender, self.balanceOf[_sender])
        return self.getReward(_sender)

    @atomic
    def notifyRewardAmount(self, _sender: str, reward: int):
        """
        Start a new reward period of `reward` tokens, rolling over what is
        left of the current one.

        Parameters
        ----------
        _sender : str
            Caller, must be `rewardsDistribution`
        reward : int
            Amount of reward tokens, already sent to this contract
        """
        if _sender != self.rewardsDistribution:
            raise AuthorizationError("Caller is not RewardsDistribution contract")
        self._update_reward()

        now = self.block_timestamp
        if now >= self.periodFinish:
            self.rewardRate = reward // self.rewardsDuration
        else:
            remaining = self.periodFinish - now
            leftover = remaining * self.rewardRate
            self.rewardRate = (reward + leftover) // self.rewardsDuration

        # the contract must hold enough tokens to pay the whole period
        balance = self.rewardsToken.balanceOf[self.address]
        if self.rewardRate > balance // self.rewardsDuration:
            raise InvalidAmountError("Provided reward too high")

        self.lastUpdateTime = now
        self.periodFinish = now + self.rewardsDuration
        logger.debug(
            "[%s] reward %d until %d", self.stakingToken.symbol, reward, self.periodFinish
        )

    def setRewardsDuration(self, _sender: str, rewardsDuration: int):
        if _sender != self.rewardsDistribution:
            raise AuthorizationError("Caller is not RewardsDistribution contract")
        if self.block_timestamp <= self.periodFinish:
            raise InvalidAmountError(
                "Previous rewards period must be complete before changing the "
                "duration for the new period"
            )
        if rewardsDuration <= 0:
            raise InvalidAmountError("Reward duration must be positive")
        self.rewardsDuration = rewardsDuration
