from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Mapping

from .errors import DuplicateJobError, InvalidJobError, WorkloadError
from .models import Job, ScheduleResult

logger = logging.getLogger(__name__)

_ID_KEYS = ("id", "job_id", "pid")
_ARRIVAL_KEYS = ("arrival_time", "arrival")
_BURST_KEYS = ("burst_time", "burst")


def validate_entry(job_id: str, arrival_time: int, burst_time: int, existing: Iterable[str] = ()) -> Job:
    """
    Apply the input rules for a single job and build it.

    ``existing`` holds the ids already accepted; ids are compared without
    regard to case.
    """
    job_id = job_id.strip()
    if not job_id:
        raise InvalidJobError(None, "Job ID cannot be empty")
    if burst_time <= 0:
        raise InvalidJobError(job_id, "Burst time must be positive")
    if arrival_time < 0:
        raise InvalidJobError(job_id, "Arrival time cannot be negative")
    if any(other.lower() == job_id.lower() for other in existing):
        raise DuplicateJobError(job_id)

    return Job(job_id=job_id, arrival_time=arrival_time, burst_time=burst_time)


def load_workload(path: str | Path) -> List[Job]:
    """
    Load a workload from a JSON or CSV file into a list of Job objects.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        entries = _read_json(path)
    elif suffix == ".csv":
        entries = _read_csv(path)
    else:
        raise WorkloadError(f"Unsupported workload format: {suffix} (use .json or .csv)")

    jobs: List[Job] = []
    for line, entry in enumerate(entries, start=1):
        try:
            job = _job_from_mapping(entry, [j.job_id for j in jobs], line)
        except InvalidJobError as exc:
            raise WorkloadError(str(exc), line=line) from exc
        jobs.append(job)

    logger.info("Loaded %d jobs from %s", len(jobs), path)
    return jobs


def dump_result(result: ScheduleResult, path: str | Path) -> None:
    """
    Write the scheduled jobs and both averages to a JSON file.
    """
    payload = {
        "jobs": [
            {
                "id": job.job_id,
                "arrival_time": job.arrival_time,
                "burst_time": job.burst_time,
                "start_time": job.start_time,
                "end_time": job.end_time,
                "waiting_time": job.waiting_time,
                "turnaround_time": job.turnaround_time,
            }
            for job in result.jobs
        ],
        "avg_waiting_time": result.avg_waiting_time,
        "avg_turnaround_time": result.avg_turnaround_time,
    }
    path = Path(path)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
    logger.info("Wrote schedule for %d jobs to %s", len(result.jobs), path)


def _read_json(path: Path) -> List[Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as exc:
        raise WorkloadError(f"Invalid JSON in {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise WorkloadError(f"not UTF-8 text in {path}: {exc}") from exc

    if not isinstance(raw, list):
        raise WorkloadError("JSON workload must be a list of job objects")
    return raw


def _read_csv(path: Path) -> List[Any]:
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            return list(csv.DictReader(f))
    except UnicodeDecodeError as exc:
        raise WorkloadError(f"not UTF-8 text in {path}: {exc}") from exc
    except csv.Error as exc:
        raise WorkloadError(f"Invalid CSV in {path}: {exc}") from exc


def _pick(mapping: Mapping[str, Any], keys: Iterable[str]) -> Any:
    for key in keys:
        if key in mapping and mapping[key] not in (None, ""):
            return mapping[key]
    raise KeyError(keys)


def _to_int(value: Any) -> int:
    # JSON booleans and fractional numbers are not tick counts.
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValueError(f"not an integer: {value!r}")
    return int(value)


def _job_from_mapping(mapping: Any, existing: List[str], line: int) -> Job:
    if not isinstance(mapping, Mapping):
        raise WorkloadError(f"Invalid job entry: {mapping!r}", line=line)

    try:
        job_id = str(_pick(mapping, _ID_KEYS))
        arrival_time = _to_int(_pick(mapping, _ARRIVAL_KEYS))
        burst_time = _to_int(_pick(mapping, _BURST_KEYS))
    except (KeyError, TypeError, ValueError) as exc:
        raise WorkloadError(f"Invalid job entry: {dict(mapping)!r}", line=line) from exc

    return validate_entry(job_id, arrival_time, burst_time, existing)
