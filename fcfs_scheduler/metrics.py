from __future__ import annotations

from .models import ScheduleResult, SystemMetrics


def compute_system_metrics(result: ScheduleResult) -> SystemMetrics:
    """
    Compute makespan, idle time, throughput and CPU utilization from the
    timeline of a finished schedule.
    """
    if not result.timeline:
        return SystemMetrics(makespan=0, cpu_busy_time=0, idle_time=0, throughput=0.0, cpu_utilization=0.0)

    makespan = max(slice_.end_time for slice_ in result.timeline)
    cpu_busy_time = sum(slice_.duration for slice_ in result.timeline if not slice_.idle)
    idle_time = sum(slice_.duration for slice_ in result.timeline if slice_.idle)

    throughput = len(result.jobs) / makespan if makespan > 0 else 0.0
    cpu_utilization = cpu_busy_time / makespan if makespan > 0 else 0.0

    return SystemMetrics(
        makespan=makespan,
        cpu_busy_time=cpu_busy_time,
        idle_time=idle_time,
        throughput=throughput,
        cpu_utilization=cpu_utilization,
    )
