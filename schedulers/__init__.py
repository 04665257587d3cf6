"""
CPU Scheduling Algorithms
"""

from .round_robin import RoundRobinScheduler, simulate, DEFAULT_TIME_QUANTUM

__all__ = [
    'RoundRobinScheduler',
    'simulate',
    'DEFAULT_TIME_QUANTUM'
]
