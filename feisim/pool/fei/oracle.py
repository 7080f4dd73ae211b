"""
Price oracle reporting USD per ETH.
"""
from typing import Tuple

from curvesim.logging import get_logger

logger = get_logger(__name__)

PRECISION = 10**18


class PriceOracle:
    """
    Oracle with a settable price and validity flag. Prices are read as
    1e18 fixed point.
    """

    def __init__(self, exchange_rate: int, address: str = "oracle_address"):
        """
        Parameters
        ----------
        exchange_rate : int
            USD per ETH
        address : str
            Address of the oracle
        """
        self.address = address
        self.valid = True
        self.setExchangeRate(exchange_rate)

    def read(self) -> Tuple[int, bool]:
        """
        Returns
        -------
        (int, bool)
            Price in 1e18 fixed point, and whether it can be used
        """
        return self.price, self.valid

    def setExchangeRate(self, exchange_rate: int):
        self.price = exchange_rate * PRECISION
        logger.debug("[%s] price set to %s", self.address, exchange_rate)

    def setValid(self, valid: bool):
        self.valid = valid
