"""
Tools for implementing and running simulation pipelines.

A pipeline builds a parameter sampler, a time sampler and a strategy, then
hands them to `run_pipeline`.
"""
from multiprocessing import Pool

from curvesim.logging import get_logger

logger = get_logger(__name__)


def run_pipeline(param_sampler, time_sampler, strategy, ncpu=1):
    """
    Core function for running pipelines.

    Parameters
    ----------
    param_sampler : iterable
        An iterator that returns a (sim_staker, parameters) tuple per run.

    time_sampler : iterable
        The time grid shared by all runs.

    strategy: callable
        A function dictating what happens at each timestep.

    ncpu : int, default=1
        Number of cores to use.

    Returns
    -------
    tuple
        Per-run outputs of `strategy`, transposed.
    """
    if ncpu > 1:
        args = [(sim_staker, params, time_sampler) for sim_staker, params in param_sampler]
        logger.info("Running %d simulations on %d cores", len(args), ncpu)
        with Pool(ncpu) as clust:
            results = clust.starmap(strategy, args)
            clust.close()
            clust.join()
    else:
        results = []
        for sim_staker, params in param_sampler:
            results.append(strategy(sim_staker, params, time_sampler))

    return tuple(zip(*results))
