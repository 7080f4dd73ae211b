__all__ = ["Strategy", "Harvester"]

from .Harvester import Harvester
from .Strategy import Strategy
