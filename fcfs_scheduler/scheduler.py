from __future__ import annotations

from typing import List, Optional, Sequence

from .errors import EmptyBatchError, InvalidJobError
from .models import Job, ScheduledJob, ScheduledSlice, ScheduleResult


def validate_jobs(jobs: Sequence[Job]) -> None:
    """
    Reject the whole batch before anything is scheduled.
    """
    if not jobs:
        raise EmptyBatchError()

    for job in jobs:
        if job.burst_time <= 0:
            raise InvalidJobError(job.job_id, "Burst time must be positive")
        if job.arrival_time < 0:
            raise InvalidJobError(job.job_id, "Arrival time cannot be negative")


def schedule(jobs: Sequence[Job]) -> ScheduleResult:
    """
    First-Come First-Serve (non-preemptive) scheduling.

    Jobs run in order of arrival; jobs arriving on the same tick keep the
    order in which they were given. The input jobs are left untouched and a
    ``ScheduleResult`` with one ``ScheduledJob`` per input is returned, both in
    the caller's order (``jobs``) and in execution order (``order``).
    """
    validate_jobs(jobs)

    # sorted() is stable, so equal arrivals keep their input order.
    indexed = sorted(enumerate(jobs), key=lambda item: item[1].arrival_time)

    clock = 0
    enriched: List[Optional[ScheduledJob]] = [None] * len(jobs)
    order: List[ScheduledJob] = []
    timeline: List[ScheduledSlice] = []
    total_waiting = 0
    total_turnaround = 0

    for index, job in indexed:
        if clock < job.arrival_time:
            timeline.append(ScheduledSlice(job_id=None, start_time=clock, end_time=job.arrival_time))
            clock = job.arrival_time

        start_time = clock
        end_time = start_time + job.burst_time
        turnaround_time = end_time - job.arrival_time
        waiting_time = turnaround_time - job.burst_time

        scheduled = ScheduledJob(
            job_id=job.job_id,
            arrival_time=job.arrival_time,
            burst_time=job.burst_time,
            start_time=start_time,
            end_time=end_time,
            waiting_time=waiting_time,
            turnaround_time=turnaround_time,
        )
        enriched[index] = scheduled
        order.append(scheduled)
        timeline.append(ScheduledSlice(job_id=job.job_id, start_time=start_time, end_time=end_time))

        total_waiting += waiting_time
        total_turnaround += turnaround_time
        clock = end_time

    n = len(jobs)
    return ScheduleResult(
        jobs=[job for job in enriched if job is not None],
        order=order,
        timeline=timeline,
        avg_waiting_time=total_waiting / n,
        avg_turnaround_time=total_turnaround / n,
    )
