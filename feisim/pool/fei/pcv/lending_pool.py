"""
Aave lending pool issuing aTokens 1:1 for the deposited asset.
"""
from curvesim.logging import get_logger
from curvesim.pool.snapshot import SnapshotMixin

from feisim.exceptions import InsufficientBalanceError, InvalidAmountError
from feisim.pool.snapshot import CompositeSnapshot, atomic
from ..utils import ERC20

logger = get_logger(__name__)


class AToken(ERC20):
    """Interest bearing token; only the lending pool mints and burns it."""


class LendingPool(SnapshotMixin):
    """Lending pool for a single reserve, without interest accrual."""

    snapshot_class = CompositeSnapshot
    snapshot_attrs = ()

    def __init__(
        self,
        asset: ERC20,
        address: str = "lending_pool",
        aToken: AToken = None,
    ):
        """
        Parameters
        ----------
        asset : ERC20
            Reserve asset accepted by the pool
        address : str
            Address of the pool
        aToken : AToken, optional
            Token issued for deposits, created from the asset if not given
        """
        self.address = address
        self.asset = asset
        self.aToken = (
            aToken
            if aToken is not None
            else AToken(
                "a%s_address" % asset.symbol,
                "Aave interest bearing %s" % asset.symbol,
                "a%s" % asset.symbol,
                asset.decimals,
            )
        )

    def snapshot_dependencies(self):
        return [self.asset, self.aToken]

    def _check_asset(self, asset: ERC20):
        if asset is not self.asset:
            raise InvalidAmountError("LendingPool: unknown reserve %s" % asset.symbol)

    @atomic
    def deposit(self, _sender: str, asset: ERC20, amount: int, onBehalfOf: str):
        """
        Pull `amount` of `asset` from the caller and mint aTokens to
        `onBehalfOf`.
        """
        self._check_asset(asset)
        if amount <= 0:
            raise InvalidAmountError("LendingPool: invalid amount")
        asset.transferFrom(_sender, self.address, amount, _spender=self.address)
        self.aToken._mint(onBehalfOf, amount)
        logger.debug("[LendingPool] %s deposited %d %s", _sender, amount, asset.symbol)

    @atomic
    def withdraw(self, _sender: str, asset: ERC20, amount: int, to: str) -> int:
        """
        Burn `amount` aTokens of the caller and send the asset to `to`.

        Returns
        -------
        int
            Amount withdrawn
        """
        self._check_asset(asset)
        if self.aToken.balanceOf[_sender] < amount:
            raise InsufficientBalanceError("LendingPool: not enough available user balance")
        self.aToken._burn(_sender, amount)
        asset.transfer(self.address, to, amount)
        logger.debug("[LendingPool] %s withdrew %d %s", _sender, amount, asset.symbol)
        return amount
