__all__ = ["FeiStakingRewards", "CompoundingStaker"]

from .staking_rewards import FeiStakingRewards
from .compounding_staker import CompoundingStaker
