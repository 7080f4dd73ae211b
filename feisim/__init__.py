"""Package to simulate the Fei compounding staker."""
__all__ = ["autosim", "__version__"]

from .sim import autosim
from .version import __version__
