import pytest
from hypothesis import HealthCheck, settings
from hypothesis import assume, given
from hypothesis import strategies as st
from hypothesis.stateful import (
    RuleBasedStateMachine,
    initialize,
    invariant,
    rule,
    run_state_machine_as_test,
)

from feisim.exceptions import (
    FeisimError,
    InsufficientBalanceError,
    InvalidAmountError,
)
from feisim.pool.fei.conf import e18
from test.conftest import create_staker, deposit, increase_time

ACCOUNTS = ["account_%d" % i for i in range(4)]
ACCOUNT_LP = 10**6 * e18


def fund_accounts(sim_staker):
    for account in ACCOUNTS:
        sim_staker.pair.mintAmount(account, ACCOUNT_LP)


def vault_state(sim_staker):
    staker, pair, rewards = sim_staker.staker, sim_staker.pair, sim_staker.staking_rewards
    return (
        dict(staker.balanceOf),
        staker.totalSupply,
        dict(pair.balanceOf),
        dict(rewards.balanceOf),
        rewards.totalSupply,
        staker.staked(),
    )


class StatefulVault(RuleBasedStateMachine):
    account = st.sampled_from(ACCOUNTS)
    amount = st.integers(min_value=1, max_value=10**4 * e18)
    frac = st.integers(min_value=1, max_value=10**18)
    dt = st.integers(min_value=1, max_value=50)

    def __init__(self):
        super().__init__()
        self.rate = None

    @initialize(router=st.sampled_from(["mock", "uniswap"]))
    def setup(self, router):
        self.sim_staker = create_staker(router=router)
        self.staker = self.sim_staker.staker
        fund_accounts(self.sim_staker)

    def _check_rate(self):
        if self.staker.totalSupply == 0:
            self.rate = None
            return
        rate = self.staker.exchange_rate()
        if self.rate is not None:
            assert rate >= self.rate
        self.rate = rate

    @rule(account=account, amount=amount)
    def deposit(self, account, amount):
        staker = self.staker
        if staker.totalSupply and amount * staker.totalSupply < staker.staked():
            with pytest.raises(InvalidAmountError):
                deposit(self.sim_staker, account, amount)
            return
        shares = deposit(self.sim_staker, account, amount)
        assert shares > 0
        self._check_rate()

    @rule(account=account, frac=frac)
    def withdraw(self, account, frac):
        shares = self.staker.balanceOf[account] * frac // 10**18
        if shares == 0:
            return
        lp_before = self.sim_staker.pair.balanceOf[account]
        expected = shares * self.staker.staked() // self.staker.totalSupply
        owed = self.staker.withdraw(account, shares)
        assert owed == expected
        assert self.sim_staker.pair.balanceOf[account] == lp_before + owed
        self._check_rate()

    @rule(dt=dt)
    def harvest(self, dt):
        increase_time(self.sim_staker, dt)
        staked_before = self.staker.staked()
        supply_before = self.staker.totalSupply
        added = self.staker.harvest()
        assert added >= 0
        assert self.staker.staked() == staked_before + added
        assert self.staker.totalSupply == supply_before
        self._check_rate()

    @invariant()
    def shares_add_up(self):
        assert sum(self.staker.balanceOf.values()) == self.staker.totalSupply

    @invariant()
    def stake_backs_shares(self):
        staker = self.staker
        assert staker.staked() >= staker.totalSupply
        assert sum(staker.staking_rewards.balanceOf.values()) == staker.staked()
        if staker.totalSupply == 0:
            assert staker.staked() == 0


def test_stateful_vault():
    run_state_machine_as_test(
        StatefulVault,
        settings=settings(
            max_examples=20,
            stateful_step_count=20,
            deadline=None,
            suppress_health_check=[HealthCheck.too_slow],
        ),
    )


@given(
    first=st.integers(min_value=1, max_value=10**4 * e18),
    amount=st.integers(min_value=1, max_value=10**4 * e18),
    harvests=st.integers(min_value=0, max_value=3),
)
@settings(deadline=None, max_examples=50)
def test_deposit_withdraw_round_trip(first, amount, harvests):
    sim_staker = create_staker()
    fund_accounts(sim_staker)
    staker = sim_staker.staker
    deposit(sim_staker, ACCOUNTS[0], first)
    for _ in range(harvests):
        increase_time(sim_staker, 1)
        staker.harvest()

    staked_before, supply_before = staker.staked(), staker.totalSupply
    assume(amount * supply_before >= staked_before)
    shares = deposit(sim_staker, ACCOUNTS[1], amount)
    owed = staker.withdraw(ACCOUNTS[1], shares)

    assert owed <= amount
    assert amount - owed <= staked_before // supply_before + 2
    assert sim_staker.pair.balanceOf[ACCOUNTS[1]] == ACCOUNT_LP - amount + owed


@given(
    amounts=st.lists(
        st.integers(min_value=e18, max_value=10**4 * e18), min_size=2, max_size=4
    ),
    harvests=st.integers(min_value=1, max_value=5),
)
@settings(deadline=None, max_examples=30)
def test_harvest_value_is_pro_rata(amounts, harvests):
    sim_staker = create_staker()
    fund_accounts(sim_staker)
    staker = sim_staker.staker
    for account, amount in zip(ACCOUNTS, amounts):
        deposit(sim_staker, account, amount)

    for _ in range(harvests):
        increase_time(sim_staker, 1)
        staker.harvest()

    staked, supply = staker.staked(), staker.totalSupply
    assert staked == sum(amounts) + harvests * sim_staker.router.LIQUIDITY
    for account, amount in zip(ACCOUNTS, amounts):
        value = staker.balance_of_underlying(account)
        assert value == staker.balanceOf[account] * staked // supply
        assert value >= amount - 1


@given(
    amount=st.integers(min_value=1, max_value=10**4 * e18),
    extra=st.integers(min_value=1, max_value=10**4 * e18),
)
@settings(deadline=None, max_examples=30)
def test_failed_withdraw_leaves_state_unchanged(amount, extra):
    sim_staker = create_staker()
    fund_accounts(sim_staker)
    deposit(sim_staker, ACCOUNTS[0], amount)
    increase_time(sim_staker, 1)
    sim_staker.staker.harvest()

    before = vault_state(sim_staker)
    shares = sim_staker.staker.balanceOf[ACCOUNTS[0]]
    with pytest.raises(InsufficientBalanceError):
        sim_staker.staker.withdraw(ACCOUNTS[0], shares + extra)
    assert vault_state(sim_staker) == before


@given(amount=st.integers(min_value=ACCOUNT_LP + 1, max_value=2 * ACCOUNT_LP))
@settings(deadline=None, max_examples=20)
def test_failed_deposit_leaves_state_unchanged(amount):
    sim_staker = create_staker()
    fund_accounts(sim_staker)
    deposit(sim_staker, ACCOUNTS[1], e18)

    before = vault_state(sim_staker)
    with pytest.raises(FeisimError):
        deposit(sim_staker, ACCOUNTS[0], amount)
    after = vault_state(sim_staker)
    assert after == before


@given(
    first=st.integers(min_value=e18, max_value=10**4 * e18),
    amount_a=st.integers(min_value=e18, max_value=10**4 * e18),
    amount_b=st.integers(min_value=e18, max_value=10**4 * e18),
    harvests=st.integers(min_value=1, max_value=5),
    router=st.sampled_from(["mock", "uniswap"]),
)
@settings(deadline=None, max_examples=30)
def test_shares_proportional_after_harvests(first, amount_a, amount_b, harvests, router):
    sim_staker = create_staker(router=router)
    fund_accounts(sim_staker)
    staker = sim_staker.staker
    deposit(sim_staker, ACCOUNTS[0], first)
    for _ in range(harvests):
        increase_time(sim_staker, 1)
        staker.harvest()
    assert staker.exchange_rate() > 10**18

    shares_a = deposit(sim_staker, ACCOUNTS[1], amount_a)
    shares_b = deposit(sim_staker, ACCOUNTS[2], amount_b)
    assert abs(shares_a * amount_b - shares_b * amount_a) <= max(amount_a, amount_b)
