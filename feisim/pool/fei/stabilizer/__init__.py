__all__ = ["EthReserveStabilizer", "BP_GRANULARITY"]

from .eth_reserve_stabilizer import EthReserveStabilizer, BP_GRANULARITY
