"""
Mainly a module to house the `CompoundingStaker`, a vault that stakes
FEI/TRIBE LP tokens and reinvests the TRIBE rewards into more LP tokens.

Depositors hold shares of the vault; the value of a share only grows, as
harvests add LP tokens to the stake without minting shares.
"""
from curvesim.logging import get_logger

from feisim.exceptions import (
    AuthorizationError,
    ConfigurationError,
    InsufficientBalanceError,
    InvalidAmountError,
)
from feisim.pool.snapshot import CompositeSnapshot, atomic
from ..uniswap import SwapRouter, UniswapV2Pair
from ..utils import ERC20, MAX_UINT256
from .staking_rewards import FeiStakingRewards

logger = get_logger(__name__)

PRECISION = 10**18


class CompoundingStaker(ERC20):
    """
    Compounding staker implementation in Python.

    The vault is itself an ERC20: `balanceOf` and `totalSupply` are the
    depositors' shares.
    """

    snapshot_class = CompositeSnapshot
    snapshot_attrs = ERC20.snapshot_attrs + ("_owner",)

    def __init__(
        self,
        fei: ERC20,
        tribe: ERC20,
        pair: UniswapV2Pair,
        router: SwapRouter,
        staking_rewards: FeiStakingRewards,
        owner: str,
        address: str = "compounding_staker",
        name: str = "Compounding FEI/TRIBE LP",
        symbol: str = "cFEI-TRIBE",
    ):
        """
        Parameters
        ----------
        fei : ERC20
            FEI token
        tribe : ERC20
            TRIBE token, paid out by `staking_rewards`
        pair : UniswapV2Pair
            FEI/TRIBE pair, whose LP token is deposited
        router : SwapRouter
            Router turning TRIBE rewards into LP tokens
        staking_rewards : FeiStakingRewards
            Reward pool the LP tokens are staked in
        owner : str
            Address allowed to sweep tokens out of the vault
        address : str
            Address of the vault
        """
        ERC20.__init__(self, address, name, symbol, pair.decimals)
        self.fei = fei
        self.tribe = tribe
        self.pair = pair
        self.router = router
        self.staking_rewards = staking_rewards
        self._owner = owner

        self.pair.approve(self.address, staking_rewards.address, MAX_UINT256)
        self.fei.approve(self.address, router.address, MAX_UINT256)
        self.tribe.approve(self.address, router.address, MAX_UINT256)

    def snapshot_dependencies(self):
        return [self.pair, self.fei, self.tribe, self.staking_rewards, self.router]

    def owner(self) -> str:
        return self._owner

    def _only_owner(self, _sender: str):
        if _sender != self._owner:
            raise AuthorizationError("Ownable: caller is not the owner.")

    def transferOwnership(self, _sender: str, new_owner: str):
        self._only_owner(_sender)
        if not new_owner:
            raise ConfigurationError("Ownable: new owner is the zero address")
        logger.debug("[%s] ownership %s -> %s", self.symbol, self._owner, new_owner)
        self._owner = new_owner

    def staked(self) -> int:
        """LP tokens staked by the vault, read from the reward pool."""
        return self.staking_rewards.balanceOf[self.address]

    def exchange_rate(self) -> int:
        """LP tokens per share, 1e18 fixed point."""
        if self.totalSupply == 0:
            return PRECISION
        return self.staked() * PRECISION // self.totalSupply

    def balance_of_underlying(self, user: str) -> int:
        """LP tokens `user` would receive for all their shares."""
        if self.totalSupply == 0:
            return 0
        return self.balanceOf[user] * self.staked() // self.totalSupply

    def pending_reward(self) -> int:
        return self.staking_rewards.earned(self.address)

    @atomic
    def deposit(self, _sender: str, amount: int) -> int:
        """
        Deposit LP tokens for shares, at the exchange rate before the deposit.

        Parameters
        ----------
        _sender : str
            Depositor, who must have approved the vault for `amount`
        amount : int
            Amount of LP tokens

        Returns
        -------
        int
            Amount of shares minted
        """
        if amount <= 0:
            raise InvalidAmountError("CompoundingStaker: amount must be positive")

        staked_before = self.staked()
        if self.totalSupply == 0:
            shares = amount
        else:
            shares = amount * self.totalSupply // staked_before
        if shares == 0:
            raise InvalidAmountError("CompoundingStaker: deposit mints no shares")

        self.pair.transferFrom(_sender, self.address, amount, _spender=self.address)
        self._mint(_sender, shares)
        self.staking_rewards.stake(self.address, amount)

        logger.debug(
            "[%s] %s deposited %d for %d shares", self.symbol, _sender, amount, shares
        )
        return shares

    @atomic
    def withdraw(self, _sender: str, shares: int) -> int:
        """
        Redeem shares for LP tokens at the current exchange rate.

        Parameters
        ----------
        _sender : str
            Share holder
        shares : int
            Amount of shares to burn

        Returns
        -------
        int
            Amount of LP tokens sent to `_sender`
        """
        if shares <= 0:
            raise InvalidAmountError("CompoundingStaker: amount must be positive")
        if self.balanceOf[_sender] < shares:
            raise InsufficientBalanceError(
                "CompoundingStaker: withdraw amount exceeds balance"
            )

        owed = shares * self.staked() // self.totalSupply
        if owed == 0:
            raise InvalidAmountError("CompoundingStaker: withdraw returns nothing")

        self._burn(_sender, shares)
        self.staking_rewards.withdraw(self.address, owed)
        self.pair.transfer(self.address, _sender, owed)

        logger.debug(
            "[%s] %s withdrew %d shares for %d", self.symbol, _sender, shares, owed
        )
        return owed

    @atomic
    def harvest(self, _sender: str = None) -> int:
        """
        Claim the TRIBE rewards, swap half of them to FEI, add FEI/TRIBE
        liquidity and stake the LP tokens received. Anyone can call it.

        Parameters
        ----------
        _sender : str, optional
            Caller, only used for logging

        Returns
        -------
        int
            Amount of LP tokens added to the stake, 0 when nothing was pending
        """
        if self.pending_reward() == 0:
            logger.debug("[%s] nothing to harvest", self.symbol)
            return 0

        self.staking_rewards.getReward(self.address)

        half = self.tribe.balanceOf[self.address] // 2
        if half > 0:
            self.router.swapExactTokensForTokens(
                self.address, half, 0, [self.tribe, self.fei], self.address
            )
        self.router.addLiquidity(
            self.address,
            self.fei,
            self.tribe,
            self.fei.balanceOf[self.address],
            self.tribe.balanceOf[self.address],
            0,
            0,
            self.address,
        )

        liquidity = self.pair.balanceOf[self.address]
        if liquidity > 0:
            self.staking_rewards.stake(self.address, liquidity)

        logger.debug(
            "[%s] %s harvested, staked %d LP (total %d)",
            self.symbol,
            _sender,
            liquidity,
            self.staked(),
        )
        return liquidity

    @atomic
    def withdrawERC20(self, _sender: str, token: ERC20, amount: int):
        """
        Send `amount` of `token` held by the vault to the owner.

        Parameters
        ----------
        _sender : str
            Caller, must be the owner
        token : ERC20
            Token to sweep
        amount : int
            Amount to send
        """
        self._only_owner(_sender)
        token.transfer(self.address, self._owner, amount)
        logger.debug("[%s] swept %d %s", self.symbol, amount, token.symbol)
