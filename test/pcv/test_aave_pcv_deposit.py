import pytest

from feisim.exceptions import AuthorizationError, InsufficientBalanceError, PausedError
from feisim.pool.fei.pcv import AavePCVDeposit, LendingPool
from feisim.pool.fei.utils import MintableERC20
from test.conftest import GOVERNOR, GUARDIAN, PCV_CONTROLLER, USER

DEPOSIT_AMOUNT = 100


@pytest.fixture(scope="function")
def token():
    return MintableERC20("token_address", "Token", "TKN")


@pytest.fixture(scope="function")
def lending_pool(token):
    return LendingPool(token)


@pytest.fixture(scope="function")
def pcv_deposit(core, lending_pool, token):
    pcv_deposit = AavePCVDeposit(core, lending_pool, token)
    token.mint(pcv_deposit.address, DEPOSIT_AMOUNT)
    pcv_deposit.deposit()
    return pcv_deposit


def test_deposit(pcv_deposit, lending_pool, token):
    assert pcv_deposit.balance() == DEPOSIT_AMOUNT
    assert pcv_deposit.aToken is lending_pool.aToken
    assert token.balanceOf[lending_pool.address] == DEPOSIT_AMOUNT
    assert token.balanceOf[pcv_deposit.address] == 0


def test_deposit_empty(pcv_deposit):
    assert pcv_deposit.deposit() == 0
    assert pcv_deposit.balance() == DEPOSIT_AMOUNT


def test_deposit_when_paused(pcv_deposit, token):
    pcv_deposit.pause(GOVERNOR)
    token.mint(pcv_deposit.address, DEPOSIT_AMOUNT)
    with pytest.raises(PausedError):
        pcv_deposit.deposit()
    assert token.balanceOf[pcv_deposit.address] == DEPOSIT_AMOUNT

    pcv_deposit.unpause(GUARDIAN)
    assert pcv_deposit.deposit() == DEPOSIT_AMOUNT
    assert pcv_deposit.balance() == 2 * DEPOSIT_AMOUNT


def test_withdraw_pcv_controller(pcv_deposit, token):
    pcv_deposit.withdraw(PCV_CONTROLLER, USER, DEPOSIT_AMOUNT)
    assert token.balanceOf[USER] == DEPOSIT_AMOUNT
    assert pcv_deposit.balance() == 0


def test_withdraw_non_pcv_controller(pcv_deposit, token):
    with pytest.raises(AuthorizationError, match="PCV controller"):
        pcv_deposit.withdraw(USER, USER, DEPOSIT_AMOUNT)
    assert pcv_deposit.balance() == DEPOSIT_AMOUNT


def test_withdraw_too_much(pcv_deposit, token):
    with pytest.raises(InsufficientBalanceError):
        pcv_deposit.withdraw(PCV_CONTROLLER, USER, DEPOSIT_AMOUNT + 1)
    assert token.balanceOf[USER] == 0


def test_withdraw_erc20(pcv_deposit, lending_pool):
    a_token = lending_pool.aToken
    pcv_deposit.withdrawERC20(PCV_CONTROLLER, a_token, USER, DEPOSIT_AMOUNT)
    assert a_token.balanceOf[USER] == DEPOSIT_AMOUNT
    assert pcv_deposit.balance() == 0

    with pytest.raises(AuthorizationError):
        pcv_deposit.withdrawERC20(USER, a_token, USER, 1)


def test_lending_pool_unknown_asset(lending_pool):
    other = MintableERC20("other_address", "Other", "OTH")
    with pytest.raises(ValueError):
        lending_pool.deposit(USER, other, 1, USER)
