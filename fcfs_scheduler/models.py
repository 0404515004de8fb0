from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .errors import InvalidJobError


@dataclass(frozen=True)
class Job:
    job_id: str
    arrival_time: int
    burst_time: int

    def __post_init__(self) -> None:
        if self.burst_time <= 0:
            raise InvalidJobError(self.job_id, "Burst time must be positive")


@dataclass(frozen=True)
class ScheduledJob:
    """
    A job together with the timing the scheduler assigned to it.
    """

    job_id: str
    arrival_time: int
    burst_time: int
    start_time: int
    end_time: int
    waiting_time: int
    turnaround_time: int


@dataclass(frozen=True)
class ScheduledSlice:
    """
    One contiguous stretch of the timeline. ``job_id`` is None for idle ticks.
    """

    job_id: Optional[str]
    start_time: int
    end_time: int

    @property
    def idle(self) -> bool:
        return self.job_id is None

    @property
    def duration(self) -> int:
        return self.end_time - self.start_time


@dataclass
class SystemMetrics:
    makespan: int
    cpu_busy_time: int
    idle_time: int
    throughput: float
    cpu_utilization: float


@dataclass
class ScheduleResult:
    jobs: List[ScheduledJob] = field(default_factory=list)
    order: List[ScheduledJob] = field(default_factory=list)
    timeline: List[ScheduledSlice] = field(default_factory=list)
    avg_waiting_time: float = 0.0
    avg_turnaround_time: float = 0.0

    def by_id(self, job_id: str) -> ScheduledJob:
        for job in self.jobs:
            if job.job_id == job_id:
                return job
        raise KeyError(job_id)
