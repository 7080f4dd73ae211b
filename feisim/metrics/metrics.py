"""
Specific metric classes for compounding staker simulations.
"""

__all__ = [
    "ExchangeRate",
    "StakedValue",
]

from altair import Axis, Scale
from numpy import exp, log, timedelta64
from pandas import DataFrame

from curvesim.metrics.base import Metric
from curvesim.utils import cache


class ExchangeRate(Metric):
    """
    Records the LP tokens per vault share, and its annualized growth.
    """

    @property
    @cache
    def config(self):
        return {
            "functions": {
                "metrics": self.get_exchange_rate,
                "summary": {
                    "exchange_rate": {
                        "annualized_returns": self.compute_annualized_returns
                    }
                },
            },
            "plot": {
                "metrics": {
                    "exchange_rate": {
                        "title": "LP Tokens per Share",
                        "style": "time_series",
                        "resample": "last",
                        "encoding": {"y": {"scale": Scale(zero=False)}},
                    },
                },
                "summary": {
                    "exchange_rate": {
                        "title": "Annualized Returns",
                        "style": "point_line",
                        "encoding": {"y": {"axis": Axis(format="%")}},
                    },
                },
            },
        }

    def get_exchange_rate(self, **kwargs):
        """
        Computes the exchange rate for each timestamp in an individual run.
        """
        state_data = kwargs["state_data"]
        results = DataFrame(
            {"exchange_rate": state_data["exchange_rate"]},
            index=state_data.index,
        )
        return results.astype("float64")

    def compute_annualized_returns(self, data):
        """Computes annualized returns from a series of exchange rates."""
        year_multipliers = timedelta64(365, "D") / data.index.to_series().diff()
        log_returns = log(data).diff()  # pylint: disable=no-member
        return exp((log_returns * year_multipliers).mean()) - 1


class StakedValue(Metric):
    """
    Records the LP tokens staked by the vault and the outstanding shares.
    """

    @property
    @cache
    def config(self):
        return {
            "functions": {
                "metrics": self.get_staked_value,
                "summary": {
                    "staked": "max",
                    "total_supply": "max",
                    "harvested": "sum",
                },
            },
            "plot": {
                "metrics": {
                    "staked": {
                        "title": "Staked LP Tokens",
                        "style": "time_series",
                        "resample": "last",
                    },
                    "total_supply": {
                        "title": "Vault Shares",
                        "style": "time_series",
                        "resample": "last",
                    },
                    "harvested": {
                        "title": "Harvested LP Tokens",
                        "style": "time_series",
                        "resample": "sum",
                    },
                },
                "summary": {
                    "staked": {
                        "title": "Staked LP Tokens (max)",
                        "style": "point_line",
                    },
                    "total_supply": {
                        "title": "Vault Shares (max)",
                        "style": "point_line",
                    },
                    "harvested": {
                        "title": "Harvested LP Tokens (total)",
                        "style": "point_line",
                    },
                },
            },
        }

    def get_staked_value(self, **kwargs):
        """
        Computes staked LP tokens, shares and harvests for each timestamp.
        """
        state_data = kwargs["state_data"]
        harvest_data = kwargs["harvest_data"]
        results = DataFrame(
            {
                "staked": state_data["staked"],
                "total_supply": state_data["total_supply"],
                "harvested": harvest_data["harvested"],
            },
            index=state_data.index,
        )
        return results.astype("float64")
