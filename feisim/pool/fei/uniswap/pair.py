"""
Mainly a module to house the `UniswapV2Pair`, a constant-product pair whose
LP token is the base asset of the compounding staker.
"""
from math import isqrt
from typing import Tuple

from curvesim.logging import get_logger

from feisim.exceptions import InsufficientBalanceError, InvalidAmountError
from feisim.pool.snapshot import CompositeSnapshot, atomic
from ..conf import FEI_TRIBE_PAIR_CONF
from ..utils import ERC20

logger = get_logger(__name__)

MINIMUM_LIQUIDITY = 10**3
DEAD_ADDRESS = "0x0000000000000000000000000000000000000000"


class UniswapV2Pair(ERC20):
    """Uniswap V2 pair implementation in Python."""

    snapshot_class = CompositeSnapshot
    snapshot_attrs = ERC20.snapshot_attrs + ("reserve0", "reserve1")

    def __init__(
        self,
        token0: ERC20,
        token1: ERC20,
        address: str = None,
        name: str = FEI_TRIBE_PAIR_CONF["name"],
        symbol: str = FEI_TRIBE_PAIR_CONF["symbol"],
    ):
        """
        Parameters
        ----------
        token0 : ERC20
            First token of the pair
        token1 : ERC20
            Second token of the pair
        address : str
            Address of pair
        name : str
            Name of the LP token
        symbol : str
            Symbol of the LP token
        """
        ERC20.__init__(
            self,
            address
            if address is not None
            else "%s/%s_pair" % (token0.symbol, token1.symbol),
            name,
            symbol,
            18,
        )
        self.token0 = token0
        self.token1 = token1
        self.reserve0 = 0
        self.reserve1 = 0

    def snapshot_dependencies(self):
        return [self.token0, self.token1]

    def tokens(self) -> Tuple[ERC20, ERC20]:
        return self.token0, self.token1

    def getReserves(self) -> Tuple[int, int]:
        return self.reserve0, self.reserve1

    def reserve_of(self, token: ERC20) -> int:
        if token is self.token0:
            return self.reserve0
        if token is self.token1:
            return self.reserve1
        raise InvalidAmountError("UniswapV2: INVALID_TOKEN %s" % token.symbol)

    def _update(self):
        self.reserve0 = self.token0.balanceOf[self.address]
        self.reserve1 = self.token1.balanceOf[self.address]

    def mintAmount(self, _to: str, _value: int):
        """Mint LP tokens without backing, for fixtures."""
        self._mint(_to, _value)

    @atomic
    def mint(self, _to: str) -> int:
        """
        Mint LP tokens for the tokens sent to the pair since the last update.

        Parameters
        ----------
        _to : str
            Address receiving the LP tokens

        Returns
        -------
        int
            Amount of LP tokens minted
        """
        balance0 = self.token0.balanceOf[self.address]
        balance1 = self.token1.balanceOf[self.address]
        amount0 = balance0 - self.reserve0
        amount1 = balance1 - self.reserve1

        total_supply = self.totalSupply
        if total_supply == 0:
            liquidity = isqrt(amount0 * amount1) - MINIMUM_LIQUIDITY
            self._mint(DEAD_ADDRESS, MINIMUM_LIQUIDITY)
        else:
            liquidity = min(
                amount0 * total_supply // self.reserve0,
                amount1 * total_supply // self.reserve1,
            )
        if liquidity <= 0:
            raise InvalidAmountError("UniswapV2: INSUFFICIENT_LIQUIDITY_MINTED")

        self._mint(_to, liquidity)
        self._update()
        return liquidity

    @atomic
    def burn(self, _to: str) -> Tuple[int, int]:
        """
        Burn the LP tokens held by the pair and send out the underlying.

        Parameters
        ----------
        _to : str
            Address receiving token0 and token1

        Returns
        -------
        (int, int)
            Amounts of token0 and token1 sent
        """
        balance0 = self.token0.balanceOf[self.address]
        balance1 = self.token1.balanceOf[self.address]
        liquidity = self.balanceOf[self.address]

        amount0 = liquidity * balance0 // self.totalSupply
        amount1 = liquidity * balance1 // self.totalSupply
        if amount0 <= 0 or amount1 <= 0:
            raise InvalidAmountError("UniswapV2: INSUFFICIENT_LIQUIDITY_BURNED")

        self._burn(self.address, liquidity)
        self.token0.transfer(self.address, _to, amount0)
        self.token1.transfer(self.address, _to, amount1)
        self._update()
        return amount0, amount1

    @atomic
    def swap(self, amount0Out: int, amount1Out: int, _to: str):
        """
        Send out tokens, then check the constant product (net of the 0.3% fee)
        against the tokens received.

        Parameters
        ----------
        amount0Out : int
            Amount of token0 to send
        amount1Out : int
            Amount of token1 to send
        _to : str
            Address receiving the output
        """
        if amount0Out <= 0 and amount1Out <= 0:
            raise InvalidAmountError("UniswapV2: INSUFFICIENT_OUTPUT_AMOUNT")
        reserve0, reserve1 = self.reserve0, self.reserve1
        if amount0Out >= reserve0 or amount1Out >= reserve1:
            raise InsufficientBalanceError("UniswapV2: INSUFFICIENT_LIQUIDITY")

        if amount0Out > 0:
            self.token0.transfer(self.address, _to, amount0Out)
        if amount1Out > 0:
            self.token1.transfer(self.address, _to, amount1Out)

        balance0 = self.token0.balanceOf[self.address]
        balance1 = self.token1.balanceOf[self.address]
        amount0In = max(balance0 - (reserve0 - amount0Out), 0)
        amount1In = max(balance1 - (reserve1 - amount1Out), 0)
        if amount0In <= 0 and amount1In <= 0:
            raise InvalidAmountError("UniswapV2: INSUFFICIENT_INPUT_AMOUNT")

        balance0_adjusted = balance0 * 1000 - amount0In * 3
        balance1_adjusted = balance1 * 1000 - amount1In * 3
        if balance0_adjusted * balance1_adjusted < reserve0 * reserve1 * 1000**2:
            raise InvalidAmountError("UniswapV2: K")

        self._update()
        logger.debug(
            "[%s] swap in (%d, %d) out (%d, %d)",
            self.symbol,
            amount0In,
            amount1In,
            amount0Out,
            amount1Out,
        )

    def sync(self):
        """Force reserves to match balances."""
        self._update()

    def price(self, token: ERC20) -> float:
        """Spot price of `token` in units of the other token."""
        if token is self.token0:
            return self.reserve1 / self.reserve0
        return self.reserve0 / self.reserve1
