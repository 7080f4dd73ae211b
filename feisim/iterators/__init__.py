"""
Iterators used to feed parameters and timestamps to simulation runs.
"""
