from feisim.metrics import metrics as StakerMetrics
from feisim.pool.fei.conf import M, e18

DEFAULT_METRICS = [
    StakerMetrics.ExchangeRate,
    StakerMetrics.StakedValue,
]

DAY = 24 * 60 * 60

DEFAULT_PARAMS = {
    "harvest_interval": [6 * 60 * 60, DAY, 3 * DAY],
}

DEFAULT_FIXED_PARAMS = {
    "window": 7 * DAY,
    "reward": 1 * M * e18,
}

TEST_PARAMS = {
    "harvest_interval": [DAY, 2 * DAY],
}

DEFAULT_DEPOSITS = {
    "depositor_0": 1000 * e18,
    "depositor_1": 4000 * e18,
}
