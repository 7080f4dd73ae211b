"""
Deployment configuration of the compounding staker: the addresses of the
contracts it is wired to.

A `StakerConfig` is resolved once (defaults, an address book file or the
`MAINNET_*` environment variables) and handed to the factory.
"""
import json
import os
from dataclasses import asdict, dataclass, fields

from curvesim.logging import get_logger
from eth_utils import is_address, to_checksum_address

from feisim.exceptions import ConfigurationError
from .conf import ADDRESS_BOOK_KEYS, MAINNET_ADDRESSES, MAINNET_ENV_KEYS

logger = get_logger(__name__)


def load_address_book(path):
    """
    Read an address book file.

    Parameters
    ----------
    path : str
        JSON file of `{name: {"address": ..., "artifact": ...}}` entries;
        plain `{name: address}` entries are accepted too.

    Returns
    -------
    dict
        `{name: address}`
    """
    try:
        with open(path) as openfile:
            book = json.load(openfile)
    except (OSError, ValueError) as e:
        raise ConfigurationError("Cannot read address book %s: %s" % (path, e)) from e

    if not isinstance(book, dict):
        raise ConfigurationError("Address book %s is not a JSON object" % path)

    addresses = {}
    for name, entry in book.items():
        if isinstance(entry, dict):
            if "address" not in entry:
                raise ConfigurationError("Address book entry %s has no address" % name)
            addresses[name] = entry["address"]
        else:
            addresses[name] = entry
    return addresses


def _checksum(name, address):
    # mixed case is not required to carry a valid checksum
    if not isinstance(address, str) or not is_address(address.lower()):
        raise ConfigurationError("Invalid address for %s: %r" % (name, address))
    return to_checksum_address(address.lower())


@dataclass(frozen=True)
class StakerConfig:
    """
    Attributes
    -----------
    fei : str
        FEI token address.
    tribe : str
        TRIBE token address.
    pair : str
        FEI/TRIBE Uniswap V2 pair address.
    router : str
        Uniswap V2 router address.
    staking_rewards : str
        FeiStakingRewards address.
    owner : str
        Owner of the compounding staker.
    """

    fei: str = MAINNET_ADDRESSES["fei"]
    tribe: str = MAINNET_ADDRESSES["tribe"]
    pair: str = MAINNET_ADDRESSES["pair"]
    router: str = MAINNET_ADDRESSES["router"]
    staking_rewards: str = MAINNET_ADDRESSES["staking_rewards"]
    owner: str = MAINNET_ADDRESSES["owner"]

    def __post_init__(self):
        for field in fields(self):
            address = _checksum(field.name, getattr(self, field.name))
            object.__setattr__(self, field.name, address)

    def to_dict(self):
        return asdict(self)

    @classmethod
    def _from_lookup(cls, lookup, keys, source):
        kwargs = {}
        for field in fields(cls):
            key = keys[field.name]
            if key in lookup and lookup[key]:
                kwargs[field.name] = lookup[key]
            else:
                logger.warning(
                    "%s missing from %s, using %s", key, source, field.default
                )
        return cls(**kwargs)

    @classmethod
    def from_address_book(cls, path):
        """
        Build a config from an address book file, see `load_address_book`.
        Entries missing from the book keep their mainnet default.
        """
        return cls._from_lookup(load_address_book(path), ADDRESS_BOOK_KEYS, path)

    @classmethod
    def from_env(cls, environ=None):
        """
        Build a config from the `MAINNET_*` environment variables.

        Parameters
        ----------
        environ : Mapping, optional
            Variables to read, `os.environ` by default.
        """
        environ = os.environ if environ is None else environ
        return cls._from_lookup(environ, MAINNET_ENV_KEYS, "environment")
