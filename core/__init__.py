"""
Core modules for Round Robin Scheduler Simulator
"""

from .process import Process, ProcessState, InvalidWorkloadError, create_process_copy
from .scheduler_base import (BaseScheduler, SchedulerStats, IntervalKind, TimelineInterval,
                             ProcessRecord, SimulationResult, CONTEXT_SWITCH_OVERHEAD)

__all__ = [
    'Process',
    'ProcessState',
    'InvalidWorkloadError',
    'create_process_copy',
    'BaseScheduler',
    'SchedulerStats',
    'IntervalKind',
    'TimelineInterval',
    'ProcessRecord',
    'SimulationResult',
    'CONTEXT_SWITCH_OVERHEAD'
]
