"""
Snapshots of contract state, used to make every contract call atomic.

A call that raises leaves no partial effect behind: `atomic` takes a snapshot
of the contract (and the collaborators its snapshot class covers) on entry and
restores it before re-raising.
"""
from copy import deepcopy
from functools import wraps

from curvesim.pool.snapshot import Snapshot


class ContractSnapshot(Snapshot):
    """Snapshot that copies the attributes listed in `contract.snapshot_attrs`."""

    def __init__(self, state):
        self.state = state

    @classmethod
    def create(cls, contract):
        state = {
            name: deepcopy(getattr(contract, name)) for name in contract.snapshot_attrs
        }
        return cls(state)

    def restore(self, contract):
        for name, value in self.state.items():
            setattr(contract, name, deepcopy(value))


class CompositeSnapshot(ContractSnapshot):
    """
    Snapshot of a contract together with the contracts it calls into.

    The collaborators are listed by `contract.snapshot_dependencies()` and are
    restored alongside the contract itself.
    """

    def __init__(self, state, dependency_snapshots):
        super().__init__(state)
        self.dependency_snapshots = dependency_snapshots

    @classmethod
    def create(cls, contract):
        state = ContractSnapshot.create(contract).state
        dependency_snapshots = [
            (dependency, dependency.get_snapshot())
            for dependency in _unique(contract.snapshot_dependencies())
        ]
        return cls(state, dependency_snapshots)

    def restore(self, contract):
        super().restore(contract)
        for dependency, snapshot in self.dependency_snapshots:
            dependency.revert_to_snapshot(snapshot)


def _unique(contracts):
    seen = set()
    result = []
    for contract in contracts:
        if contract is None or id(contract) in seen:
            continue
        seen.add(id(contract))
        result.append(contract)
    return result


def atomic(method):
    """
    Decorator for contract methods: restore the contract's snapshot if the
    call raises, then re-raise.
    """

    @wraps(method)
    def wrapper(self, *args, **kwargs):
        snapshot = self.get_snapshot()
        try:
            return method(self, *args, **kwargs)
        except Exception:
            self.revert_to_snapshot(snapshot)
            raise

    return wrapper
