"""Greeting lines printed from a team of worker threads."""

from __future__ import annotations

import argparse
import os
import socket
import sys
import threading
from collections.abc import Callable, Sequence


def _check_count(num_threads: int) -> None:
    if num_threads < 0:
        raise ValueError(f"number of threads must not be negative, got {num_threads}")


def _run_team(num_threads: int, greet: Callable[[int], str]) -> list[str]:
    """Start ``num_threads`` threads, each adding ``greet(tid)``; return lines in arrival order."""
    _check_count(num_threads)
    lines: list[str] = []
    lock = threading.Lock()

    def work(tid: int) -> None:
        line = greet(tid)
        with lock:
            lines.append(line)

    team = [threading.Thread(target=work, args=(tid,)) for tid in range(num_threads)]
    for thread in team:
        thread.start()
    for thread in team:
        thread.join()
    return lines


def thread_hello_lines(num_threads: int) -> list[str]:
    """Create threads one by one; each says hello after its creation is announced."""
    _check_count(num_threads)
    lines: list[str] = []
    lock = threading.Lock()

    def hello(tid: int) -> None:
        with lock:
            lines.append(f"Hello, thread #{tid}!")

    threads = []
    for tid in range(num_threads):
        with lock:
            lines.append(f"In main: creating thread {tid}")
        thread = threading.Thread(target=hello, args=(tid,))
        thread.start()
        threads.append(thread)
    for thread in threads:
        thread.join()
    return lines


def team_hello_lines(num_threads: int) -> list[str]:
    """Each thread of a team reports its index and the team size."""
    return _run_team(
        num_threads, lambda tid: f"Hello: thread {tid:2d}/{num_threads:2d}"
    )


def hybrid_hello_lines(hostname: str, rank: int, ranks: int, num_threads: int) -> list[str]:
    """Each thread of one rank reports the host, the rank and its thread index."""
    if not 0 <= rank < ranks:
        raise ValueError(f"rank must lie in [0, {ranks}), got {rank}")
    return _run_team(
        num_threads,
        lambda tid: (
            f"Hello {hostname}: rank {rank:2d}/{ranks:2d}, "
            f"thread {tid:2d}/{num_threads:2d}"
        ),
    )


def _cpu_count() -> int:
    try:
        return len(os.sched_getaffinity(0))
    except AttributeError:
        return os.cpu_count() or 1


def main(argv: Sequence[str] | None = None) -> int:
    """Print greetings from a thread team."""
    parser = argparse.ArgumentParser(prog="pixelcircle-hello")
    sub = parser.add_subparsers(dest="mode", required=True)
    created = sub.add_parser("pthread", help="create threads one at a time")
    created.add_argument("num_threads", type=int)
    for name in ("omp", "hybrid"):
        team = sub.add_parser(name, help=f"{name} style thread team")
        team.add_argument("--threads", type=int, default=None)
    args = parser.parse_args(argv)

    try:
        if args.mode == "pthread":
            lines = thread_hello_lines(args.num_threads)
        elif args.mode == "omp":
            lines = team_hello_lines(args.threads or _cpu_count())
        else:
            lines = hybrid_hello_lines(
                socket.gethostname(), 0, 1, args.threads or _cpu_count()
            )
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())