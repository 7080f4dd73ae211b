"""
ERC20 token
"""
from collections import defaultdict

from curvesim.pool.snapshot import SnapshotMixin

from feisim.exceptions import InsufficientBalanceError, InvalidAmountError
from feisim.pool.snapshot import ContractSnapshot

MAX_UINT256 = 2**256 - 1


def _allowances():
    return defaultdict(int)


class ERC20(SnapshotMixin):
    __slots__ = (
        "address",
        "name",
        "symbol",
        "decimals",
        "balanceOf",
        "totalSupply",
        "allowance",
    )

    snapshot_class = ContractSnapshot
    snapshot_attrs = ("balanceOf", "totalSupply", "allowance")

    def __init__(
        self,
        address: str,
        name: str,
        symbol: str,
        decimals: int = 18,
    ):
        self.address = address
        self.name = name
        self.symbol = symbol
        self.decimals = decimals
        self.balanceOf = defaultdict(int)
        self.totalSupply = 0
        # owner => spender => amount
        self.allowance = defaultdict(_allowances)

    def __repr__(self):
        return "%s(%s)" % (type(self).__name__, self.symbol)

    def _check_amount(self, _value: int):
        if _value < 0:
            raise InvalidAmountError("ERC20: negative amount")

    def _transfer(self, _from: str, _to: str, _value: int):
        self._check_amount(_value)
        if self.balanceOf[_from] < _value:
            raise InsufficientBalanceError("ERC20: transfer amount exceeds balance")
        self.balanceOf[_from] -= _value
        self.balanceOf[_to] += _value

    def transfer(self, _from: str, _to: str, _value: int) -> bool:
        """
        ERC20 transfer

        Parameters
        ----------
        _from : str
            Address of from user (the caller)
        _to : str
            Address of to user
        _value : int
            transfer amount

        Returns
        -------
        bool
            wether transfering is success or not
        """
        self._transfer(_from, _to, _value)
        return True

    def approve(self, _owner: str, _spender: str, _value: int) -> bool:
        """
        ERC20 approve

        Parameters
        ----------
        _owner : str
            Address of token owner (the caller)
        _spender : str
            Address allowed to spend owner's tokens
        _value : int
            allowance amount, MAX_UINT256 for an infinite allowance
        """
        self._check_amount(_value)
        self.allowance[_owner][_spender] = _value
        return True

    def transferFrom(
        self, _from: str, _to: str, _value: int, _spender: str = None
    ) -> bool:
        """
        ERC20 transferFrom

        Parameters
        ----------
        _from : str
            Address of from user
        _to : str
            Address of to user
        _value : int
            transfer amount
        _spender : str, optional
            Address spending the allowance (the caller), defaults to `_to`

        Returns
        -------
        bool
            wether transfering is success or not
        """
        spender = _to if _spender is None else _spender
        allowed = self.allowance[_from][spender]
        if allowed < _value:
            raise InsufficientBalanceError("ERC20: transfer amount exceeds allowance")
        self._transfer(_from, _to, _value)
        if allowed != MAX_UINT256:
            self.allowance[_from][spender] = allowed - _value
        return True

    def _mint(self, _to: str, _value: int):
        self._check_amount(_value)
        self.balanceOf[_to] += _value
        self.totalSupply += _value

    def _burn(self, _from: str, _value: int):
        self._check_amount(_value)
        if self.balanceOf[_from] < _value:
            raise InsufficientBalanceError("ERC20: burn amount exceeds balance")
        self.balanceOf[_from] -= _value
        self.totalSupply -= _value


class MintableERC20(ERC20):
    """ERC20 with unrestricted mint and burn, for test and sim fixtures."""

    def mint(self, _to: str, _value: int):
        """
        ERC20 mint

        Parameters
        ----------
        _to : str
            Address of to user
        _value : int
            mint amount
        """
        self._mint(_to, _value)

    def burnFrom(self, _from: str, _value: int):
        """
        ERC20 burn

        Parameters
        ----------
        _from : str
            Address of burned user
        _value : int
            burn amount
        """
        self._burn(_from, _value)
