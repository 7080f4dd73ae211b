__all__ = [
    "FEI_TOKEN_CONF",
    "TRIBE_TOKEN_CONF",
    "WETH_TOKEN_CONF",
    "ETHER_CONF",
    "FEI_TRIBE_PAIR_CONF",
    "STAKING_REWARDS_CONF",
    "MOCK_ROUTER_CONF",
    "RESERVE_STABILIZER_CONF",
    "MAINNET_ADDRESSES",
    "MAINNET_ENV_KEYS",
    "ADDRESS_BOOK_KEYS",
    "GOVERNOR_ADDRESS",
    "LP_PROVIDER",
]

M = 10**6
e18 = 10**18

FEI_TOKEN_CONF = {
    "address": "0x956F47F50A910163D8BF957Cf5846D573E7f87CA",
    "name": "Fei USD",
    "symbol": "FEI",
    "decimals": 18,
}

TRIBE_TOKEN_CONF = {
    "address": "0xc7283b66Eb1EB5FB86327f08e1B5816b0720212B",
    "name": "Tribe",
    "symbol": "TRIBE",
    "decimals": 18,
}

WETH_TOKEN_CONF = {
    "address": "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
    "name": "Wrapped Ether",
    "symbol": "WETH",
    "decimals": 18,
}

# native ether is kept as a ledger with the ERC20 interface
ETHER_CONF = {
    "address": "ETH",
    "name": "Ether",
    "symbol": "ETH",
    "decimals": 18,
}

# 200M FEI / 250M TRIBE with 335M liquidity
FEI_TRIBE_PAIR_CONF = {
    "name": "Uniswap V2",
    "symbol": "UNI-V2",
    "reserves": [200 * M * e18, 250 * M * e18],
    "liquidity": 335 * M * e18,
}

STAKING_REWARDS_CONF = {
    "window": 100,
    "reward": 200 * M * e18,
}

# addLiquidity on the mock router mints a fixed amount of LP tokens
MOCK_ROUTER_CONF = {
    "liquidity": 10000,
}

RESERVE_STABILIZER_CONF = {
    "usd_per_fei_bp": 9000,
}

MAINNET_ADDRESSES = {
    "fei": FEI_TOKEN_CONF["address"],
    "tribe": TRIBE_TOKEN_CONF["address"],
    "pair": "0x9928e4046d7c6513326cCeA028cD3e7a91c7590A",
    "router": "0x7a250d5630B4cF539739dF2C5dAcb4c659F2488D",
    "staking_rewards": "0x18305DaAe09Ea2F4D51fAa33318be5978D251aBd",
    "owner": "0x6ef71cA9cD708883E129559F5edBFb9d9D5C6148",  # eswak.eth
}

# deployment environment variables, by StakerConfig field
MAINNET_ENV_KEYS = {
    "fei": "MAINNET_FEI",
    "tribe": "MAINNET_TRIBE",
    "pair": "MAINNET_FEI_TRIBE_PAIR",
    "router": "MAINNET_UNISWAP_ROUTER",
    "staking_rewards": "MAINNET_FEI_STAKING_REWARDS",
    "owner": "MAINNET_COMPOUNDING_STAKER_OWNER",
}

# address book entries, by StakerConfig field
ADDRESS_BOOK_KEYS = {
    "fei": "fei",
    "tribe": "tribe",
    "pair": "feiTribePair",
    "router": "uniswapRouter",
    "staking_rewards": "feiStakingRewards",
    "owner": "compoundingStakerOwner",
}

GOVERNOR_ADDRESS = "GOVERNOR"
LP_PROVIDER = "LP_PROVIDER"
