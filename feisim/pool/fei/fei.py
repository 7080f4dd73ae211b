"""
Fei protocol tokens: FEI stablecoin, TRIBE governance token and WETH.
"""
from curvesim.logging import get_logger

from feisim.exceptions import AuthorizationError, InsufficientBalanceError
from .conf import FEI_TOKEN_CONF, TRIBE_TOKEN_CONF, WETH_TOKEN_CONF
from .utils import ERC20, MintableERC20

logger = get_logger(__name__)

TRIBE_TOTAL_SUPPLY = 10**9 * 10**18


class Fei(ERC20):
    """FEI stablecoin; minting and burning are gated by the Core roles."""

    def __init__(
        self,
        core,
        address: str = FEI_TOKEN_CONF["address"],
        name: str = FEI_TOKEN_CONF["name"],
        symbol: str = FEI_TOKEN_CONF["symbol"],
        decimals: int = FEI_TOKEN_CONF["decimals"],
    ):
        ERC20.__init__(self, address, name, symbol, decimals)
        self.core = core

    def mint(self, _sender: str, _to: str, _value: int):
        """
        Mint FEI

        Parameters
        ----------
        _sender : str
            Caller, must hold the minter role
        _to : str
            Address receiving the FEI
        _value : int
            mint amount
        """
        if not self.core.isMinter(_sender):
            raise AuthorizationError("CoreRef: Caller is not a minter")
        self._mint(_to, _value)
        logger.debug("[FEI] %s minted %d to %s", _sender, _value, _to)

    def burn(self, _sender: str, _value: int):
        """Burn FEI from the caller's own balance."""
        self._burn(_sender, _value)

    def burnFrom(self, _sender: str, _from: str, _value: int):
        """
        Burn FEI from an account

        Parameters
        ----------
        _sender : str
            Caller, must hold the burner role
        _from : str
            Address whose FEI is burned
        _value : int
            burn amount
        """
        if not self.core.isBurner(_sender):
            raise AuthorizationError("CoreRef: Caller is not a burner")
        self._burn(_from, _value)


class Tribe(ERC20):
    """TRIBE; the whole supply is minted to the Core treasury."""

    def __init__(
        self,
        treasury: str,
        address: str = TRIBE_TOKEN_CONF["address"],
        name: str = TRIBE_TOKEN_CONF["name"],
        symbol: str = TRIBE_TOKEN_CONF["symbol"],
        decimals: int = TRIBE_TOKEN_CONF["decimals"],
    ):
        ERC20.__init__(self, address, name, symbol, decimals)
        self._mint(treasury, TRIBE_TOTAL_SUPPLY)


class WETH(MintableERC20):
    """Wrapped ether over a native ether ledger."""

    def __init__(
        self,
        ether: ERC20,
        address: str = WETH_TOKEN_CONF["address"],
        name: str = WETH_TOKEN_CONF["name"],
        symbol: str = WETH_TOKEN_CONF["symbol"],
        decimals: int = WETH_TOKEN_CONF["decimals"],
    ):
        MintableERC20.__init__(self, address, name, symbol, decimals)
        self.ETHER = ether

    def deposit(self, _sender: str, _value: int):
        """Wrap `_value` ether of the caller."""
        self.ETHER.transfer(_sender, self.address, _value)
        self._mint(_sender, _value)

    def withdraw(self, _sender: str, _value: int):
        """Unwrap `_value` WETH of the caller."""
        if self.balanceOf[_sender] < _value:
            raise InsufficientBalanceError("WETH: insufficient balance")
        if self.ETHER.balanceOf[self.address] < _value:
            raise InsufficientBalanceError("WETH: insufficient ether backing")
        self._burn(_sender, _value)
        self.ETHER.transfer(self.address, _sender, _value)
