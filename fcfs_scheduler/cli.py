from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path
from typing import Callable, Optional

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .batch import JobBatch
from .config import get_settings
from .errors import SchedulerError
from .gantt import build_rich_gantt
from .metrics import compute_system_metrics
from .models import ScheduleResult
from .workload_io import dump_result, load_workload

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="fcfs-scheduler",
        description="First-Come First-Served scheduling of job batches.",
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        type=str.upper,
        choices=LOG_LEVELS,
        help=f"Logging level (default: {settings.LOG_LEVEL}).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Schedule the jobs in a workload file.")
    run_parser.add_argument(
        "--workload",
        "-w",
        required=True,
        help="Path to JSON or CSV workload file.",
    )
    run_parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Write the computed schedule to this JSON file.",
    )
    run_parser.add_argument(
        "--step",
        action="store_true",
        help="Show a simple time-stepped simulation in the terminal.",
    )
    run_parser.add_argument(
        "--step-delay",
        type=float,
        default=settings.STEP_DELAY,
        help=f"Seconds to wait between steps when --step is used (default: {settings.STEP_DELAY}).",
    )

    validate_parser = subparsers.add_parser("validate", help="Check a workload file without scheduling it.")
    validate_parser.add_argument(
        "--workload",
        "-w",
        required=True,
        help="Path to JSON or CSV workload file.",
    )

    menu_parser = subparsers.add_parser("menu", help="Build a batch interactively and schedule it.")
    menu_parser.add_argument(
        "--dynamic",
        action="store_true",
        default=not settings.REALISTIC_MODE,
        help="Start in dynamic mode (jobs may be added after the first run).",
    )

    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
        force=True,
    )


def _print_result(result: ScheduleResult, console: Console) -> None:
    panel, time_marks = build_rich_gantt(result.timeline)
    console.print(panel)
    if time_marks:
        console.print(time_marks)

    console.print()

    headers = ["Job ID", "Arrival", "Burst", "Start", "End", "Waiting", "Turnaround"]

    job_table = Table(title="Scheduled jobs", box=box.SIMPLE_HEAVY)
    for h in headers:
        justify = "center" if h == "Job ID" else "right"
        job_table.add_column(h, justify=justify)

    for job in result.order:
        job_table.add_row(
            escape(job.job_id),
            str(job.arrival_time),
            str(job.burst_time),
            str(job.start_time),
            str(job.end_time),
            str(job.waiting_time),
            str(job.turnaround_time),
        )

    console.print(job_table)
    console.print()

    system = compute_system_metrics(result)

    sys_table = Table(title="Summary", box=box.SIMPLE_HEAVY)
    sys_table.add_column("Metric")
    sys_table.add_column("Value", justify="right")

    sys_table.add_row("Average Waiting Time", f"{result.avg_waiting_time:.2f}")
    sys_table.add_row("Average Turnaround Time", f"{result.avg_turnaround_time:.2f}")
    sys_table.add_row("Makespan", str(system.makespan))
    sys_table.add_row("Idle time", str(system.idle_time))
    sys_table.add_row("Throughput (jobs/tick)", f"{system.throughput:.3f}")
    sys_table.add_row("CPU utilization", f"{system.cpu_utilization*100:.1f}%")

    console.print(sys_table)


def _animate_result(result: ScheduleResult, delay: float, console: Console) -> None:
    """
    Simple time-stepped textual simulation using the computed schedule.
    """
    makespan = max(s.end_time for s in result.timeline)
    console.print(f"[bold]Simulating FCFS[/bold] (duration {makespan} ticks)")
    console.print("[dim]Press Ctrl+C to skip animation.[/dim]")

    for t in range(makespan):
        running = None
        bar = ""
        for sl in result.timeline:
            if not sl.idle and sl.start_time <= t < sl.end_time:
                running = escape(sl.job_id)
                bar = f"[green]{'█' * (t - sl.start_time + 1)}[/green]"
                break
        msg = f"t={t:2d}: " + (running or "[dim]idle[/dim]")
        console.print(msg + (" " + bar if bar else ""), highlight=False)
        time.sleep(delay)


def _prompt_int(prompt: str, read: Callable[[str], str]) -> int:
    return int(read(prompt).strip())


def _interactive_menu(batch: JobBatch, console: Console, read: Callable[[str], str] = input) -> None:
    while True:
        mode = "Realistic" if batch.realistic else "Dynamic"
        console.print("\n[bold cyan]FCFS Scheduler[/bold cyan] [dim](q to quit)[/dim]")
        console.print(f"[bold]Mode:[/bold] [green]{mode}[/green]   [bold]Jobs:[/bold] {len(batch)}")
        console.print("  [yellow]1[/yellow]. Add job")
        console.print("  [yellow]2[/yellow]. Run FCFS")
        console.print("  [yellow]3[/yellow]. Clear all")
        console.print("  [yellow]4[/yellow]. Toggle realistic/dynamic mode")

        choice = read("Choice [1-4 or q]: ").strip().lower()
        if choice in {"q", "quit", "exit"}:
            return

        try:
            if choice == "1":
                job_id = read("Job ID: ")
                try:
                    arrival = _prompt_int("Arrival time: ", read)
                    burst = _prompt_int("Burst time: ", read)
                except ValueError:
                    console.print("[red]Please enter valid numbers[/red]")
                    continue
                batch.add(job_id, arrival, burst)
                if batch.result is not None:
                    _print_result(batch.result, console)
            elif choice == "2":
                _print_result(batch.run(), console)
            elif choice == "3":
                batch.clear()
                console.print("[yellow]All jobs cleared.[/yellow]")
            elif choice == "4":
                batch.realistic = not batch.realistic
            else:
                console.print("[red]Invalid selection.[/red]")
        except SchedulerError as exc:
            console.print(f"[red]{escape(str(exc))}[/red]")


def main(argv: Optional[list[str]] = None, console: Optional[Console] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    console = console or Console()

    try:
        if args.command == "run":
            batch = JobBatch(realistic=False, jobs=load_workload(Path(args.workload)))
            result = batch.run()
            if args.step:
                try:
                    _animate_result(result, delay=args.step_delay, console=console)
                except KeyboardInterrupt:
                    console.print("[yellow]Animation skipped.[/yellow]")
            _print_result(result, console)
            if args.output:
                dump_result(result, args.output)
            return 0

        if args.command == "validate":
            jobs = load_workload(Path(args.workload))
            console.print(f"[green]{len(jobs)} valid jobs in {args.workload}[/green]")
            return 0

        if args.command == "menu":
            _interactive_menu(JobBatch(realistic=not args.dynamic), console)
            return 0
    except (SchedulerError, OSError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        return 1

    parser.error(f"Unknown command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
