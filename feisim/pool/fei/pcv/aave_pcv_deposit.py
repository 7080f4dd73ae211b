"""
PCV deposit lending its token on Aave.
"""
from curvesim.logging import get_logger

from feisim.pool.snapshot import CompositeSnapshot, atomic
from ..core import Core, CoreRef
from ..utils import ERC20
from .lending_pool import LendingPool

logger = get_logger(__name__)


class AavePCVDeposit(CoreRef):
    """
    Holds protocol controlled value as aTokens of an Aave lending pool.
    """

    snapshot_class = CompositeSnapshot

    def __init__(
        self,
        core: Core,
        lendingPool: LendingPool,
        token: ERC20,
        aToken: ERC20 = None,
        address: str = "aave_pcv_deposit",
    ):
        """
        Parameters
        ----------
        core : Core
            Fei core, used for access control
        lendingPool : LendingPool
            Pool the token is lent to
        token : ERC20
            Token held by the deposit
        aToken : ERC20, optional
            aToken of `token`, the pool's aToken by default
        address : str
            Address of the deposit
        """
        super().__init__(core)
        self.address = address
        self.lendingPool = lendingPool
        self.token = token
        self.aToken = aToken if aToken is not None else lendingPool.aToken

    def snapshot_dependencies(self):
        return [self.lendingPool, self.token, self.aToken]

    @atomic
    def deposit(self) -> int:
        """
        Lend the whole token balance held by the deposit.

        Returns
        -------
        int
            Amount deposited
        """
        self._when_not_paused()
        amount = self.token.balanceOf[self.address]
        if amount == 0:
            return 0
        self.token.approve(self.address, self.lendingPool.address, amount)
        self.lendingPool.deposit(self.address, self.token, amount, self.address)
        logger.debug("[AavePCVDeposit] deposited %d %s", amount, self.token.symbol)
        return amount

    def balance(self) -> int:
        """Underlying balance, the aToken balance of the deposit."""
        return self.aToken.balanceOf[self.address]

    @atomic
    def withdraw(self, _sender: str, to: str, amount: int):
        """
        Withdraw `amount` of token from the lending pool to `to`.

        Parameters
        ----------
        _sender : str
            Caller, must be a PCV controller
        to : str
            Address receiving the token
        amount : int
            Amount of token
        """
        self._only_pcv_controller(_sender)
        self.lendingPool.withdraw(self.address, self.token, amount, to)
        logger.debug("[AavePCVDeposit] withdrew %d %s to %s", amount, self.token.symbol, to)

    @atomic
    def withdrawERC20(self, _sender: str, token: ERC20, to: str, amount: int):
        """Send any token held by the deposit; PCV controller only."""
        self._only_pcv_controller(_sender)
        token.transfer(self.address, to, amount)
