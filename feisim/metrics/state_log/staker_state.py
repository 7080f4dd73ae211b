def get_staker_state(sim_staker):
    """
    Returns the vault state, with token amounts as floats in units of 1e18.
    """
    staker = sim_staker.staker
    pair = sim_staker.pair
    reserve0, reserve1 = pair.getReserves()

    state = {
        "staked": staker.staked() / 1e18,
        "total_supply": staker.totalSupply / 1e18,
        "exchange_rate": staker.exchange_rate() / 1e18,
        "pending_reward": staker.pending_reward() / 1e18,
        "reserve0": reserve0 / 1e18,
        "reserve1": reserve1 / 1e18,
        "lp_supply": pair.totalSupply / 1e18,
    }
    for depositor, shares in staker.balanceOf.items():
        if shares == 0:
            continue
        state["value_" + depositor] = staker.balance_of_underlying(depositor) / 1e18
    return state
