"""
Fei Core: role registry and treasury, plus the `CoreRef` base used by
contracts that check roles against it.
"""
from collections import defaultdict

from curvesim.logging import get_logger
from curvesim.pool.snapshot import SnapshotMixin

from feisim.exceptions import AuthorizationError, PausedError
from feisim.pool.snapshot import ContractSnapshot
from .fei import Fei, Tribe

logger = get_logger(__name__)

GOVERN_ROLE = "GOVERN_ROLE"
MINTER_ROLE = "MINTER_ROLE"
BURNER_ROLE = "BURNER_ROLE"
PCV_CONTROLLER_ROLE = "PCV_CONTROLLER_ROLE"
GUARDIAN_ROLE = "GUARDIAN_ROLE"

ROLES = (GOVERN_ROLE, MINTER_ROLE, BURNER_ROLE, PCV_CONTROLLER_ROLE, GUARDIAN_ROLE)


class Core(SnapshotMixin):
    """
    Access control for the protocol, and holder of the TRIBE treasury.
    """

    snapshot_class = ContractSnapshot
    snapshot_attrs = ("roles",)

    def __init__(self, governor: str, address: str = "core_address"):
        """
        Parameters
        ----------
        governor : str
            Address granted the governor role
        address : str
            Address of the core contract
        """
        self.address = address
        self.roles = defaultdict(set)
        self.roles[GOVERN_ROLE].add(governor)

        self.FEI = Fei(core=self)
        self.TRIBE = Tribe(treasury=self.address)

    def fei(self) -> Fei:
        return self.FEI

    def tribe(self) -> Tribe:
        return self.TRIBE

    def hasRole(self, role: str, account: str) -> bool:
        return account in self.roles[role]

    def _only_governor(self, _sender: str):
        if not self.isGovernor(_sender):
            raise AuthorizationError("Permissions: Caller is not a governor")

    def grantRole(self, _sender: str, role: str, account: str):
        """
        Grant `role` to `account`

        Parameters
        ----------
        _sender : str
            Caller, must be a governor
        role : str
            One of `ROLES`
        account : str
            Address receiving the role
        """
        self._only_governor(_sender)
        assert role in ROLES, "unknown role"
        self.roles[role].add(account)
        logger.debug("[Core] %s granted %s to %s", _sender, role, account)

    def revokeRole(self, _sender: str, role: str, account: str):
        """Revoke `role` from `account`; governor only."""
        self._only_governor(_sender)
        self.roles[role].discard(account)

    def grantGovernor(self, _sender: str, governor: str):
        self.grantRole(_sender, GOVERN_ROLE, governor)

    def grantMinter(self, _sender: str, minter: str):
        self.grantRole(_sender, MINTER_ROLE, minter)

    def grantBurner(self, _sender: str, burner: str):
        self.grantRole(_sender, BURNER_ROLE, burner)

    def grantPCVController(self, _sender: str, pcv_controller: str):
        self.grantRole(_sender, PCV_CONTROLLER_ROLE, pcv_controller)

    def grantGuardian(self, _sender: str, guardian: str):
        self.grantRole(_sender, GUARDIAN_ROLE, guardian)

    def revokeMinter(self, _sender: str, minter: str):
        self.revokeRole(_sender, MINTER_ROLE, minter)

    def revokeBurner(self, _sender: str, burner: str):
        self.revokeRole(_sender, BURNER_ROLE, burner)

    def revokePCVController(self, _sender: str, pcv_controller: str):
        self.revokeRole(_sender, PCV_CONTROLLER_ROLE, pcv_controller)

    def isGovernor(self, account: str) -> bool:
        return self.hasRole(GOVERN_ROLE, account)

    def isMinter(self, account: str) -> bool:
        return self.hasRole(MINTER_ROLE, account)

    def isBurner(self, account: str) -> bool:
        return self.hasRole(BURNER_ROLE, account)

    def isPCVController(self, account: str) -> bool:
        return self.hasRole(PCV_CONTROLLER_ROLE, account)

    def isGuardian(self, account: str) -> bool:
        return self.hasRole(GUARDIAN_ROLE, account)

    def allocateTribe(self, _sender: str, to: str, amount: int):
        """
        Send TRIBE from the treasury

        Parameters
        ----------
        _sender : str
            Caller, must be a governor
        to : str
            Address receiving TRIBE
        amount : int
            Amount of TRIBE
        """
        self._only_governor(_sender)
        self.TRIBE.transfer(self.address, to, amount)


class CoreRef(SnapshotMixin):
    """
    Base for contracts that reference `Core` for access control and can be
    paused by a guardian or governor.
    """

    snapshot_class = ContractSnapshot
    snapshot_attrs = ("paused",)

    def __init__(self, core: Core):
        self.CORE = core
        self.paused = False

    def core(self) -> Core:
        return self.CORE

    def fei(self) -> Fei:
        return self.CORE.FEI

    def tribe(self) -> Tribe:
        return self.CORE.TRIBE

    def _only_governor(self, _sender: str):
        if not self.CORE.isGovernor(_sender):
            raise AuthorizationError("CoreRef: Caller is not a governor")

    def _only_pcv_controller(self, _sender: str):
        if not self.CORE.isPCVController(_sender):
            raise AuthorizationError("CoreRef: Caller is not a PCV controller")

    def _only_guardian_or_governor(self, _sender: str):
        if not (self.CORE.isGovernor(_sender) or self.CORE.isGuardian(_sender)):
            raise AuthorizationError("CoreRef: Caller is not a guardian or governor")

    def _when_not_paused(self):
        if self.paused:
            raise PausedError("Pausable: paused")

    def pause(self, _sender: str):
        """Pause the contract; guardian or governor only."""
        self._only_guardian_or_governor(_sender)
        self.paused = True

    def unpause(self, _sender: str):
        """Unpause the contract; guardian or governor only."""
        self._only_guardian_or_governor(_sender)
        self.paused = False
