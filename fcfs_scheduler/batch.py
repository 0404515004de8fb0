from __future__ import annotations

import logging
from typing import List, Optional

from .errors import BatchLockedError, EmptyBatchError
from .models import Job, ScheduleResult
from .scheduler import schedule
from .workload_io import validate_entry

logger = logging.getLogger(__name__)


class JobBatch:
    """
    The job list a user builds up between runs.

    In realistic mode no jobs may be added once the batch has been run, the
    way a real print queue cannot accept jobs retroactively. In dynamic mode
    jobs can be added at any time and, when a schedule is already on screen,
    it is recomputed immediately. Access is not synchronized; callers use a
    single thread or their own lock.
    """

    def __init__(self, realistic: bool = True, jobs: Optional[List[Job]] = None) -> None:
        self.realistic = realistic
        self.started = False
        self.result: Optional[ScheduleResult] = None
        self._jobs: List[Job] = []
        for job in jobs or []:
            self.add(job.job_id, job.arrival_time, job.burst_time)

    @property
    def jobs(self) -> List[Job]:
        return list(self._jobs)

    @property
    def locked(self) -> bool:
        return self.realistic and self.started

    def __len__(self) -> int:
        return len(self._jobs)

    def exists(self, job_id: str) -> bool:
        return any(job.job_id.lower() == job_id.strip().lower() for job in self._jobs)

    def add(self, job_id: str, arrival_time: int, burst_time: int) -> Job:
        if self.locked:
            raise BatchLockedError()

        job = validate_entry(job_id, arrival_time, burst_time, [j.job_id for j in self._jobs])
        self._jobs.append(job)
        logger.debug("Added job %s (arrival=%d, burst=%d)", job.job_id, arrival_time, burst_time)

        if self.result is not None:
            self.run()
        return job

    def run(self) -> ScheduleResult:
        if not self._jobs:
            raise EmptyBatchError()

        self.started = True
        self.result = schedule(self._jobs)
        logger.info(
            "Scheduled %d jobs: avg waiting %.2f, avg turnaround %.2f",
            len(self._jobs),
            self.result.avg_waiting_time,
            self.result.avg_turnaround_time,
        )
        return self.result

    def clear(self) -> None:
        self._jobs.clear()
        self.result = None
        self.started = False
        logger.debug("Batch cleared")
