__all__ = [
    "_get_unix_timestamp",
    "BlocktimestampMixins",
    "ERC20",
    "MintableERC20",
    "MAX_UINT256",
]

from .ERC20 import ERC20, MintableERC20, MAX_UINT256
from .BlocktimestampMixins import _get_unix_timestamp, BlocktimestampMixins
