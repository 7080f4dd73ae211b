import pytest

from feisim.exceptions import (
    AuthorizationError,
    InsufficientBalanceError,
    InvalidAmountError,
)
from feisim.pool.fei.conf import e18
from test.conftest import (
    MINTER,
    SECOND_USER,
    USER,
    create_staker,
    deposit,
    increase_time,
)


def test_owner(staker):
    assert staker.owner() == USER


def test_staked_without_harvest(sim_staker, staker):
    assert staker.staked() == 0
    deposit(sim_staker, USER, 1000 * e18)
    assert staker.staked() == 1000 * e18


def test_staked_after_harvest(sim_staker, staker):
    assert staker.staked() == 0
    deposit(sim_staker, USER, 1000 * e18)
    increase_time(sim_staker, 1)
    staker.harvest(USER)
    assert staker.staked() == 1000000000000000010000


def test_withdraw_erc20_as_owner(sim_staker, staker, fei):
    fei.mint(MINTER, staker.address, 12345)
    assert fei.balanceOf[USER] == 0
    staker.withdrawERC20(USER, fei, 12345)
    assert fei.balanceOf[USER] == 12345
    assert fei.balanceOf[staker.address] == 0


def test_withdraw_erc20_as_anyone(sim_staker, staker, fei):
    fei.mint(MINTER, staker.address, 12345)
    with pytest.raises(AuthorizationError, match="Ownable: caller is not the owner."):
        staker.withdrawERC20("anyone", fei, 12345)
    assert fei.balanceOf[staker.address] == 12345


def test_transfer_ownership(staker, fei):
    staker.transferOwnership(USER, SECOND_USER)
    assert staker.owner() == SECOND_USER
    with pytest.raises(AuthorizationError):
        staker.withdrawERC20(USER, fei, 0)


def test_deposit_one_depositor(sim_staker, staker, pair, rewards):
    assert pair.balanceOf[USER] == 1000 * e18
    assert staker.balanceOf[USER] == 0
    deposit(sim_staker, USER, 1000 * e18)
    assert rewards.balanceOf[staker.address] == 1000 * e18
    assert staker.balanceOf[USER] == 1000 * e18
    assert pair.balanceOf[USER] == 0


def test_deposit_two_depositors_before_harvest(sim_staker, staker, pair, rewards):
    deposit(sim_staker, USER, 1000 * e18)
    deposit(sim_staker, SECOND_USER, 4000 * e18)
    assert rewards.balanceOf[staker.address] == 5000 * e18
    assert staker.balanceOf[SECOND_USER] == 4000 * e18
    assert pair.balanceOf[SECOND_USER] == 0


def test_deposit_two_depositors_after_harvest(sim_staker, staker, pair, rewards):
    deposit(sim_staker, USER, 1000 * e18)
    increase_time(sim_staker, 1)
    staker.harvest(USER)

    deposit(sim_staker, SECOND_USER, 4000 * e18)
    assert rewards.balanceOf[staker.address] == 5000000000000000010000
    assert staker.balanceOf[SECOND_USER] == 3999999999999999960000
    assert pair.balanceOf[SECOND_USER] == 0


def test_deposit_requires_allowance(staker, pair):
    with pytest.raises(InsufficientBalanceError, match="allowance"):
        staker.deposit(USER, 1000 * e18)
    assert staker.totalSupply == 0
    assert pair.balanceOf[USER] == 1000 * e18


def test_deposit_zero(staker):
    with pytest.raises(InvalidAmountError):
        staker.deposit(USER, 0)


def test_deposit_more_than_balance(sim_staker, staker, pair):
    pair.approve(USER, staker.address, 2000 * e18)
    with pytest.raises(InsufficientBalanceError):
        staker.deposit(USER, 2000 * e18)
    assert staker.balanceOf[USER] == 0
    assert staker.totalSupply == 0
    assert staker.staked() == 0
    assert pair.allowance[USER][staker.address] == 2000 * e18


def test_withdraw_one_depositor_no_harvest(sim_staker, staker, pair, rewards):
    deposit(sim_staker, USER, 1000 * e18)
    staker.withdraw(USER, 1000 * e18)
    assert staker.balanceOf[USER] == 0
    assert pair.balanceOf[USER] == 1000 * e18
    assert rewards.balanceOf[staker.address] == 0


def test_withdraw_partial_after_harvest(sim_staker, staker, pair, rewards):
    deposit(sim_staker, USER, 1000 * e18)
    increase_time(sim_staker, 1)
    staker.harvest(USER)

    owed = staker.withdraw(USER, 500 * e18)
    assert owed == 500000000000000005000
    assert staker.balanceOf[USER] == 500 * e18
    assert pair.balanceOf[USER] == 500000000000000005000
    assert rewards.balanceOf[staker.address] == 500000000000000005000


def test_withdraw_two_depositors_before_harvest(sim_staker, staker, pair, rewards):
    deposit(sim_staker, USER, 1000 * e18)
    deposit(sim_staker, SECOND_USER, 4000 * e18)

    staker.withdraw(USER, 1000 * e18)
    assert staker.balanceOf[USER] == 0
    assert pair.balanceOf[USER] == 1000 * e18
    assert rewards.balanceOf[staker.address] == 4000 * e18

    staker.withdraw(SECOND_USER, 4000 * e18)
    assert staker.balanceOf[SECOND_USER] == 0
    assert pair.balanceOf[SECOND_USER] == 4000 * e18
    assert rewards.balanceOf[staker.address] == 0


def test_withdraw_two_depositors_after_harvest(sim_staker, staker, pair, rewards):
    deposit(sim_staker, USER, 1000 * e18)
    increase_time(sim_staker, 1)
    staker.harvest(USER)
    deposit(sim_staker, SECOND_USER, 4000 * e18)

    staker.withdraw(USER, 1000 * e18)
    assert staker.balanceOf[USER] == 0
    assert pair.balanceOf[USER] == 1000000000000000010000
    assert rewards.balanceOf[staker.address] == 4000 * e18

    staker.withdraw(SECOND_USER, 3999999999999999960000)
    assert staker.balanceOf[SECOND_USER] == 0
    assert pair.balanceOf[SECOND_USER] == 4000 * e18
    assert rewards.balanceOf[staker.address] == 0


def test_withdraw_more_than_shares(sim_staker, staker, pair):
    deposit(sim_staker, USER, 1000 * e18)
    with pytest.raises(InsufficientBalanceError):
        staker.withdraw(USER, 1000 * e18 + 1)
    assert staker.balanceOf[USER] == 1000 * e18
    assert staker.staked() == 1000 * e18
    assert pair.balanceOf[USER] == 0


def test_withdraw_zero(sim_staker, staker):
    deposit(sim_staker, USER, 1000 * e18)
    with pytest.raises(InvalidAmountError):
        staker.withdraw(USER, 0)


def test_withdraw_without_shares(staker):
    with pytest.raises(InsufficientBalanceError):
        staker.withdraw(SECOND_USER, 1)


def test_harvest_compounds_lp_tokens(sim_staker, staker):
    deposit(sim_staker, USER, 1000 * e18)
    increase_time(sim_staker, 1)
    assert staker.harvest(USER) == 10000
    assert staker.staked() == 1000000000000000010000
    increase_time(sim_staker, 1)
    staker.harvest(USER)
    assert staker.staked() == 1000000000000000020000
    assert staker.totalSupply == 1000 * e18


def test_harvest_is_permissionless(sim_staker, staker):
    deposit(sim_staker, USER, 1000 * e18)
    increase_time(sim_staker, 1)
    staker.harvest("keeper_address")
    assert staker.staked() == 1000000000000000010000


def test_harvest_without_reward_is_noop(sim_staker, staker, tribe):
    assert staker.harvest() == 0
    deposit(sim_staker, USER, 1000 * e18)
    # no time passed since the deposit
    assert staker.harvest() == 0
    assert staker.staked() == 1000 * e18
    assert tribe.balanceOf[staker.address] == 0


def test_harvest_claims_rewards(sim_staker, staker, rewards, tribe):
    deposit(sim_staker, USER, 1000 * e18)
    increase_time(sim_staker, 1)
    pending = staker.pending_reward()
    assert pending == rewards.rewardRate
    staker.harvest()
    assert staker.pending_reward() == 0
    # the mock router leaves the TRIBE in the vault
    assert tribe.balanceOf[staker.address] == pending


def test_complete_scenario():
    sim_staker = create_staker()
    staker, pair = sim_staker.staker, sim_staker.pair

    # first depositor
    deposit(sim_staker, USER, 1000 * e18)
    assert staker.balanceOf[USER] == 1000 * e18
    assert pair.balanceOf[USER] == 0
    assert staker.totalSupply == 1000 * e18
    assert staker.staked() == 1000 * e18

    increase_time(sim_staker, 1)
    staker.harvest(USER)
    staker.withdraw(USER, 1000 * e18)
    # every harvest adds 10000 LP tokens through the mock router
    assert pair.balanceOf[USER] == 1000000000000000010000

    # second depositor and first depositor deposit again
    deposit(sim_staker, USER, 1000 * e18)
    deposit(sim_staker, SECOND_USER, 4000 * e18)
    increase_time(sim_staker, 1)
    staker.harvest(USER)
    staker.withdraw(USER, 1000 * e18)
    staker.withdraw(SECOND_USER, 4000 * e18)
    assert pair.balanceOf[USER] == 1000000000000000012000
    assert pair.balanceOf[SECOND_USER] == 4000000000000000008000

    # asynchronous deposits
    deposit(sim_staker, USER, 1000 * e18)
    assert staker.staked() == 1000 * e18
    increase_time(sim_staker, 1)
    staker.harvest(USER)
    deposit(sim_staker, SECOND_USER, 4000 * e18)
    assert staker.staked() == 5000000000000000010000
    increase_time(sim_staker, 1)
    staker.harvest(USER)
    assert staker.staked() == 5000000000000000020000

    staker.withdraw(USER, 1000 * e18)
    staker.withdraw(SECOND_USER, 3999999999999999960000)
    assert pair.balanceOf[USER] == 1000000000000000024000
    assert pair.balanceOf[SECOND_USER] == 4000000000000000016000
    assert staker.staked() == 0
    assert staker.totalSupply == 0


def test_exchange_rate_and_underlying(sim_staker, staker):
    assert staker.exchange_rate() == 10**18
    assert staker.balance_of_underlying(USER) == 0
    deposit(sim_staker, USER, 1000 * e18)
    increase_time(sim_staker, 1)
    staker.harvest()
    assert staker.exchange_rate() == 10**18 + 10
    assert staker.balance_of_underlying(USER) == 1000000000000000010000


def test_shares_are_transferable(sim_staker, staker, pair):
    deposit(sim_staker, USER, 1000 * e18)
    staker.transfer(USER, SECOND_USER, 400 * e18)
    assert staker.balanceOf[USER] == 600 * e18
    assert staker.balanceOf[SECOND_USER] == 400 * e18
    assert staker.totalSupply == 1000 * e18

    staker.withdraw(SECOND_USER, 400 * e18)
    assert pair.balanceOf[SECOND_USER] == 4400 * e18


def test_harvest_through_uniswap_router(uniswap_sim_staker):
    sim_staker = uniswap_sim_staker
    staker, pair, tribe = sim_staker.staker, sim_staker.pair, sim_staker.tribe
    deposit(sim_staker, USER, 1000 * e18)
    increase_time(sim_staker, 1)

    reserves_before = pair.getReserves()
    supply_before = pair.totalSupply
    added = staker.harvest(USER)

    assert added > 0
    assert staker.staked() == 1000 * e18 + added
    assert staker.totalSupply == 1000 * e18
    assert pair.totalSupply == supply_before + added
    assert pair.reserve1 > reserves_before[1]
    assert pair.balanceOf[staker.address] == 0
    # at most rounding dust of TRIBE is left behind
    assert tribe.balanceOf[staker.address] < 10**18
