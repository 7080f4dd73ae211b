__all__ = ["TimeSample", "TimeSampler"]

from .time_sampler import TimeSample, TimeSampler
