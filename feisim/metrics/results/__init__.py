__all__ = ["SimResults"]

from .sim_results import SimResults
