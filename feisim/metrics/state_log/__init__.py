"""
StateLog object that records the vault state throughout each simulation run and
computes metrics at the end of each run.
"""

__all__ = ["StateLog", "get_staker_state"]

from .staker_state import get_staker_state
from .state_log import StateLog
