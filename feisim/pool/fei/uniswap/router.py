"""
Routers exchanging reward tokens for pair liquidity.

The compounding staker only relies on the `SwapRouter` interface, so the way
rewards become liquidity is decided by whichever router it is given.
"""
from abc import ABC, abstractmethod
from typing import List, Tuple

from curvesim.logging import get_logger
from curvesim.pool.snapshot import SnapshotMixin

from feisim.exceptions import InsufficientBalanceError, InvalidAmountError
from feisim.pool.snapshot import CompositeSnapshot, atomic
from ..conf import MOCK_ROUTER_CONF
from ..utils import ERC20
from .pair import UniswapV2Pair

logger = get_logger(__name__)


class SwapRouter(ABC, SnapshotMixin):
    """
    Interface of the router used by the compounding staker.

    Tokens are pulled from `_sender` with `transferFrom`, so the caller must
    approve the router first.
    """

    snapshot_class = CompositeSnapshot
    snapshot_attrs = ()

    def __init__(self, pair: UniswapV2Pair, address: str = None):
        self.pair = pair
        self.address = address if address is not None else "%s_router" % pair.address

    def snapshot_dependencies(self):
        return [self.pair]

    @abstractmethod
    def swapExactTokensForTokens(
        self,
        _sender: str,
        amountIn: int,
        amountOutMin: int,
        path: List[ERC20],
        to: str,
    ) -> List[int]:
        """
        Swap exactly `amountIn` of `path[0]` for `path[-1]`.

        Returns
        -------
        List[int]
            Amounts along the path
        """
        raise NotImplementedError

    @abstractmethod
    def addLiquidity(
        self,
        _sender: str,
        tokenA: ERC20,
        tokenB: ERC20,
        amountADesired: int,
        amountBDesired: int,
        amountAMin: int,
        amountBMin: int,
        to: str,
    ) -> Tuple[int, int, int]:
        """
        Add liquidity to the pair.

        Returns
        -------
        (int, int, int)
            (amountA used, amountB used, liquidity minted to `to`)
        """
        raise NotImplementedError


class UniswapV2Router(SwapRouter):
    """Router02 over a single constant-product pair."""

    def _check_path(self, path: List[ERC20]):
        tokens = self.pair.tokens()
        if len(path) != 2 or path[0] is path[1] or any(t not in tokens for t in path):
            raise InvalidAmountError("UniswapV2Router: INVALID_PATH")

    @staticmethod
    def quote(amountA: int, reserveA: int, reserveB: int) -> int:
        if amountA <= 0:
            raise InvalidAmountError("UniswapV2Library: INSUFFICIENT_AMOUNT")
        if reserveA <= 0 or reserveB <= 0:
            raise InsufficientBalanceError("UniswapV2Library: INSUFFICIENT_LIQUIDITY")
        return amountA * reserveB // reserveA

    @staticmethod
    def getAmountOut(amountIn: int, reserveIn: int, reserveOut: int) -> int:
        """
        Output amount for `amountIn`, net of the 0.3% fee.

        Parameters
        ----------
        amountIn : int
            Input amount
        reserveIn : int
            Reserve of the input token
        reserveOut : int
            Reserve of the output token

        Returns
        -------
        int
            Output amount
        """
        if amountIn <= 0:
            raise InvalidAmountError("UniswapV2Library: INSUFFICIENT_INPUT_AMOUNT")
        if reserveIn <= 0 or reserveOut <= 0:
            raise InsufficientBalanceError("UniswapV2Library: INSUFFICIENT_LIQUIDITY")
        amount_in_with_fee = amountIn * 997
        numerator = amount_in_with_fee * reserveOut
        denominator = reserveIn * 1000 + amount_in_with_fee
        return numerator // denominator

    @staticmethod
    def getAmountIn(amountOut: int, reserveIn: int, reserveOut: int) -> int:
        if amountOut <= 0:
            raise InvalidAmountError("UniswapV2Library: INSUFFICIENT_OUTPUT_AMOUNT")
        if reserveIn <= 0 or reserveOut <= amountOut:
            raise InsufficientBalanceError("UniswapV2Library: INSUFFICIENT_LIQUIDITY")
        numerator = reserveIn * amountOut * 1000
        denominator = (reserveOut - amountOut) * 997
        return numerator // denominator + 1

    def getAmountsOut(self, amountIn: int, path: List[ERC20]) -> List[int]:
        self._check_path(path)
        reserve_in = self.pair.reserve_of(path[0])
        reserve_out = self.pair.reserve_of(path[1])
        return [amountIn, self.getAmountOut(amountIn, reserve_in, reserve_out)]

    @atomic
    def swapExactTokensForTokens(
        self,
        _sender: str,
        amountIn: int,
        amountOutMin: int,
        path: List[ERC20],
        to: str,
    ) -> List[int]:
        amounts = self.getAmountsOut(amountIn, path)
        if amounts[-1] < amountOutMin:
            raise InvalidAmountError("UniswapV2Router: INSUFFICIENT_OUTPUT_AMOUNT")

        token_in, token_out = path
        token_in.transferFrom(_sender, self.pair.address, amountIn, _spender=self.address)
        if token_out is self.pair.token0:
            self.pair.swap(amounts[-1], 0, to)
        else:
            self.pair.swap(0, amounts[-1], to)
        return amounts

    def _add_liquidity(
        self,
        tokenA: ERC20,
        tokenB: ERC20,
        amountADesired: int,
        amountBDesired: int,
        amountAMin: int,
        amountBMin: int,
    ) -> Tuple[int, int]:
        reserve_a = self.pair.reserve_of(tokenA)
        reserve_b = self.pair.reserve_of(tokenB)
        if reserve_a == 0 and reserve_b == 0:
            return amountADesired, amountBDesired

        amount_b_optimal = self.quote(amountADesired, reserve_a, reserve_b)
        if amount_b_optimal <= amountBDesired:
            if amount_b_optimal < amountBMin:
                raise InvalidAmountError("UniswapV2Router: INSUFFICIENT_B_AMOUNT")
            return amountADesired, amount_b_optimal

        amount_a_optimal = self.quote(amountBDesired, reserve_b, reserve_a)
        if amount_a_optimal > amountADesired:
            raise InvalidAmountError("UniswapV2Router: INSUFFICIENT_A_AMOUNT")
        if amount_a_optimal < amountAMin:
            raise InvalidAmountError("UniswapV2Router: INSUFFICIENT_A_AMOUNT")
        return amount_a_optimal, amountBDesired

    @atomic
    def addLiquidity(
        self,
        _sender: str,
        tokenA: ERC20,
        tokenB: ERC20,
        amountADesired: int,
        amountBDesired: int,
        amountAMin: int,
        amountBMin: int,
        to: str,
    ) -> Tuple[int, int, int]:
        self._check_path([tokenA, tokenB])
        amount_a, amount_b = self._add_liquidity(
            tokenA, tokenB, amountADesired, amountBDesired, amountAMin, amountBMin
        )
        tokenA.transferFrom(_sender, self.pair.address, amount_a, _spender=self.address)
        tokenB.transferFrom(_sender, self.pair.address, amount_b, _spender=self.address)
        liquidity = self.pair.mint(to)
        logger.debug(
            "[%s] %s added %d %s + %d %s for %d LP",
            self.pair.symbol,
            _sender,
            amount_a,
            tokenA.symbol,
            amount_b,
            tokenB.symbol,
            liquidity,
        )
        return amount_a, amount_b, liquidity

    @atomic
    def removeLiquidity(
        self,
        _sender: str,
        tokenA: ERC20,
        tokenB: ERC20,
        liquidity: int,
        amountAMin: int,
        amountBMin: int,
        to: str,
    ) -> Tuple[int, int]:
        """
        Burn `liquidity` LP tokens of the caller for the underlying tokens.

        Returns
        -------
        (int, int)
            Amounts of tokenA and tokenB received
        """
        self._check_path([tokenA, tokenB])
        self.pair.transferFrom(_sender, self.pair.address, liquidity, _spender=self.address)
        amount0, amount1 = self.pair.burn(to)
        amount_a, amount_b = (
            (amount0, amount1) if tokenA is self.pair.token0 else (amount1, amount0)
        )
        if amount_a < amountAMin:
            raise InvalidAmountError("UniswapV2Router: INSUFFICIENT_A_AMOUNT")
        if amount_b < amountBMin:
            raise InvalidAmountError("UniswapV2Router: INSUFFICIENT_B_AMOUNT")
        return amount_a, amount_b


class MockRouter(SwapRouter):
    """
    Router whose swaps move nothing and whose `addLiquidity` mints a fixed
    amount of LP tokens to the receiver, whatever the amounts passed.
    """

    def __init__(
        self,
        pair: UniswapV2Pair,
        address: str = None,
        liquidity: int = MOCK_ROUTER_CONF["liquidity"],
    ):
        super().__init__(pair, address)
        self.LIQUIDITY = liquidity

    def swapExactTokensForTokens(
        self,
        _sender: str,
        amountIn: int,
        amountOutMin: int,
        path: List[ERC20],
        to: str,
    ) -> List[int]:
        return [amountIn, 0]

    def addLiquidity(
        self,
        _sender: str,
        tokenA: ERC20,
        tokenB: ERC20,
        amountADesired: int,
        amountBDesired: int,
        amountAMin: int,
        amountBMin: int,
        to: str,
    ) -> Tuple[int, int, int]:
        self.pair.mintAmount(to, self.LIQUIDITY)
        return 0, 0, self.LIQUIDITY
