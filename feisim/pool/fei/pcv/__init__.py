__all__ = ["AToken", "LendingPool", "AavePCVDeposit"]

from .lending_pool import AToken, LendingPool
from .aave_pcv_deposit import AavePCVDeposit
