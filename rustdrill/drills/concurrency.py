"""Worked answers to the shared-data and thread exercises."""

from __future__ import annotations

import queue
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterable


def offset_sums(numbers: Iterable[int] | None = None, workers: int = 8) -> list[int]:
    """Sum every workers-th number per offset, one thread per offset."""
    shared = tuple(range(100) if numbers is None else numbers)

    def summed(offset: int) -> int:
        return sum(n for n in shared if n % workers == offset)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(summed, range(workers)))


def timed_sleepers(count: int = 10, delay: float = 0.25) -> list[int]:
    """Run sleeping threads and return each one's elapsed milliseconds."""

    def sleeper(_: int) -> int:
        start = time.monotonic()
        time.sleep(delay)
        return int((time.monotonic() - start) * 1000)

    with ThreadPoolExecutor(max_workers=max(count, 1)) as pool:
        return list(pool.map(sleeper, range(count)))


@dataclass
class JobStatus:
    """A counter of completed jobs guarded by a lock."""

    jobs_completed: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)


def run_jobs(count: int = 10, delay: float = 0.25) -> JobStatus:
    """Run jobs in threads that each increment a shared status."""
    status = JobStatus()

    def job() -> None:
        time.sleep(delay)
        with status.lock:
            status.jobs_completed += 1

    threads = [threading.Thread(target=job) for _ in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return status


@dataclass
class Queue:
    """Values to send, split into two halves."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])


_CLOSED = object()


def send_tx(q: Queue, tx: queue.Queue, delay: float = 1.0) -> list[threading.Thread]:
    """Send both halves from two threads; close the channel when both finish."""

    def sender(values: list[int]) -> None:
        for value in values:
            print(f"sending {value}")
            tx.put(value)
            time.sleep(delay)

    senders = [
        threading.Thread(target=sender, args=(q.first_half,)),
        threading.Thread(target=sender, args=(q.second_half,)),
    ]

    def closer() -> None:
        for thread in senders:
            thread.join()
        tx.put(_CLOSED)

    threads = [*senders, threading.Thread(target=closer)]
    for thread in threads:
        thread.start()
    return threads


def receive_all(q: Queue | None = None, delay: float = 1.0) -> list[int]:
    """Receive every value sent by send_tx until the channel closes."""
    q = Queue() if q is None else q
    channel: queue.Queue = queue.Queue()
    send_tx(q, channel, delay)
    received = []
    while (value := channel.get()) is not _CLOSED:
        print(f"Got: {value}")
        received.append(value)
    return received