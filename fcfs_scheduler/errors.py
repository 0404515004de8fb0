from __future__ import annotations

from typing import Optional


class SchedulerError(Exception):
    """
    Base class for every error raised by the scheduler package.
    """


class InvalidJobError(SchedulerError, ValueError):
    """
    A job breaks a validity rule (non-positive burst, negative arrival).
    """

    def __init__(self, job_id: Optional[str], reason: str) -> None:
        self.job_id = job_id
        self.reason = reason
        if job_id:
            super().__init__(f"Job '{job_id}': {reason}")
        else:
            super().__init__(reason)


class DuplicateJobError(InvalidJobError):
    def __init__(self, job_id: str) -> None:
        super().__init__(job_id, "Job ID already exists")


class EmptyBatchError(SchedulerError, ValueError):
    def __init__(self, message: str = "No jobs to schedule") -> None:
        super().__init__(message)


class BatchLockedError(SchedulerError):
    """
    Raised when jobs are added to a realistic-mode batch after it has run.
    """

    def __init__(self) -> None:
        super().__init__(
            "In a realistic scenario you cannot add jobs once simulation has started. "
            "Disable realistic mode to add jobs during runtime."
        )


class WorkloadError(SchedulerError, ValueError):
    """
    A workload file could not be read or one of its entries is invalid.
    """

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        self.line = line
        if line is not None:
            message = f"entry {line}: {message}"
        super().__init__(message)
