"""
Mainly a module to house the `EthReserveStabilizer`, which buys FEI back
with ETH reserves at a fixed fraction of a dollar.
"""
from curvesim.logging import get_logger

from feisim.exceptions import InsufficientBalanceError, InvalidAmountError, OracleError
from feisim.pool.snapshot import CompositeSnapshot, atomic
from ..conf import RESERVE_STABILIZER_CONF
from ..core import Core, CoreRef
from ..fei import WETH
from ..oracle import PriceOracle
from ..utils import ERC20

logger = get_logger(__name__)

BP_GRANULARITY = 10000
PRECISION = 10**18


class EthReserveStabilizer(CoreRef):
    """
    Burns FEI in exchange for ETH priced by the oracle, paying
    `usdPerFeiBasisPoints` / 10000 USD per FEI.
    """

    snapshot_class = CompositeSnapshot
    snapshot_attrs = CoreRef.snapshot_attrs + ("usdPerFeiBasisPoints",)

    def __init__(
        self,
        core: Core,
        oracle: PriceOracle,
        backup_oracle: PriceOracle,
        ether: ERC20,
        weth: WETH,
        usd_per_fei_bp: int = RESERVE_STABILIZER_CONF["usd_per_fei_bp"],
        address: str = "eth_reserve_stabilizer",
    ):
        """
        Parameters
        ----------
        core : Core
            Fei core, used for access control and the FEI token
        oracle : PriceOracle
            USD per ETH oracle
        backup_oracle : PriceOracle
            Oracle read when `oracle` is invalid
        ether : ERC20
            Native ether ledger
        weth : WETH
            Wrapped ether, unwrapped by `deposit`
        usd_per_fei_bp : int
            USD paid per FEI, in basis points
        address : str
            Address of the stabilizer
        """
        super().__init__(core)
        self.address = address
        self.oracle = oracle
        self.backupOracle = backup_oracle
        self.ETHER = ether
        self.WETH = weth
        self.usdPerFeiBasisPoints = 0
        self._set_usd_per_fei_rate(usd_per_fei_bp)

    def snapshot_dependencies(self):
        return [self.fei(), self.ETHER, self.WETH]

    def _set_usd_per_fei_rate(self, usd_per_fei_bp: int):
        if usd_per_fei_bp > BP_GRANULARITY:
            raise InvalidAmountError("ReserveStabilizer: Exceeds bp granularity")
        self.usdPerFeiBasisPoints = usd_per_fei_bp

    def setUsdPerFeiRate(self, _sender: str, usd_per_fei_bp: int):
        """Set the USD paid per FEI in basis points; governor only."""
        self._only_governor(_sender)
        self._set_usd_per_fei_rate(usd_per_fei_bp)
        logger.debug("[EthReserveStabilizer] usd per fei set to %d bp", usd_per_fei_bp)

    def setOracle(self, _sender: str, oracle: PriceOracle):
        self._only_governor(_sender)
        self.oracle = oracle

    def setBackupOracle(self, _sender: str, backup_oracle: PriceOracle):
        self._only_governor(_sender)
        self.backupOracle = backup_oracle

    def readOracle(self) -> int:
        """
        USD per ETH from the oracle, falling back to the backup oracle.

        Returns
        -------
        int
            Price in 1e18 fixed point
        """
        price, valid = self.oracle.read()
        if not valid and self.backupOracle is not None:
            price, valid = self.backupOracle.read()
        if not valid:
            raise OracleError("OracleRef: oracle invalid")
        return price

    def getAmountOut(self, amountFeiIn: int) -> int:
        """
        ETH paid for `amountFeiIn` FEI.

        Parameters
        ----------
        amountFeiIn : int
            Amount of FEI

        Returns
        -------
        int
            Amount of ETH
        """
        usd_amount = amountFeiIn * self.usdPerFeiBasisPoints // BP_GRANULARITY
        return usd_amount * PRECISION // self.readOracle()

    @atomic
    def exchangeFei(self, _sender: str, amountFeiIn: int) -> int:
        """
        Burn FEI of the caller for ETH.

        Parameters
        ----------
        _sender : str
            Caller, whose FEI is burned
        amountFeiIn : int
            Amount of FEI

        Returns
        -------
        int
            Amount of ETH sent to the caller
        """
        self._when_not_paused()
        self.fei().burnFrom(self.address, _sender, amountFeiIn)

        amount_out = self.getAmountOut(amountFeiIn)
        if self.balance() < amount_out:
            raise InsufficientBalanceError("ReserveStabilizer: not enough ETH")
        self.ETHER.transfer(self.address, _sender, amount_out)

        logger.debug(
            "[EthReserveStabilizer] %s exchanged %d FEI for %d ETH",
            _sender,
            amountFeiIn,
            amount_out,
        )
        return amount_out

    @atomic
    def deposit(self):
        """Unwrap the WETH held by the stabilizer into ETH."""
        amount = self.WETH.balanceOf[self.address]
        if amount > 0:
            self.WETH.withdraw(self.address, amount)

    def balance(self) -> int:
        """ETH held by the stabilizer."""
        return self.ETHER.balanceOf[self.address]

    @atomic
    def withdraw(self, _sender: str, to: str, amount: int):
        """
        Send ETH reserves to `to`; PCV controller only.
        """
        self._only_pcv_controller(_sender)
        if self.balance() < amount:
            raise InsufficientBalanceError("ReserveStabilizer: not enough ETH")
        self.ETHER.transfer(self.address, to, amount)
