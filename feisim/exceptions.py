"""
Exceptions raised by the simulated Fei contracts.

Each one aborts the whole operation: contracts restore their pre-call state
before the exception propagates. Messages carry the revert strings of the
on-chain contracts where one exists.
"""
from curvesim.exceptions import CurvesimException


class FeisimError(CurvesimException):
    """Base exception class"""


class AuthorizationError(FeisimError):
    """Caller lacks the role or ownership an operation requires."""


class InsufficientBalanceError(FeisimError):
    """Balance, allowance or reserve too low for the requested amount."""


class InvalidAmountError(FeisimError, ValueError):
    """Amount is zero, negative or out of the allowed range."""


class PausedError(FeisimError):
    """Operation attempted on a paused contract."""


class OracleError(FeisimError):
    """No valid price available from the oracles."""


class ConfigurationError(FeisimError, ValueError):
    """Malformed deployment configuration or address book."""
