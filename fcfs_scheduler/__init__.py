"""
FCFS scheduler package.

Computes First-Come First-Served execution timelines and waiting/turnaround
statistics for batches of jobs, with a small command-line front end.
"""

from .errors import (
    BatchLockedError,
    DuplicateJobError,
    EmptyBatchError,
    InvalidJobError,
    SchedulerError,
    WorkloadError,
)
from .models import Job, ScheduledJob, ScheduledSlice, ScheduleResult
from .scheduler import schedule

__all__ = [
    "BatchLockedError",
    "DuplicateJobError",
    "EmptyBatchError",
    "InvalidJobError",
    "Job",
    "ScheduledJob",
    "ScheduledSlice",
    "ScheduleResult",
    "SchedulerError",
    "WorkloadError",
    "schedule",
]
