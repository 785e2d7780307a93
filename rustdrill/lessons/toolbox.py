"""A variadic printer, a module's private recipe, re-exported snacks, time and a threaded job counter."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field

FRUIT = "Pear"
VEGGIE = "Cucumber"


def my_macro(*args) -> str:
    """Print a fixed line, or a line about the single value given."""
    if not args:
        line = "Check out my macro!"
    elif len(args) == 1:
        line = f"Look at this other macro: {args[0]}"
    else:
        raise TypeError(f"my_macro takes at most one value, got {len(args)}")
    print(line)
    return line


def _get_secret_recipe() -> str:
    return "Ginger"


def make_sausage() -> str:
    _get_secret_recipe()
    print("sausage!")
    return "sausage!"


def favorite_snacks() -> str:
    return f"favorite snacks: {FRUIT} and {VEGGIE}"


def seconds_since_epoch() -> int:
    """Whole seconds since 1970-01-01 00:00:00 UTC."""
    now = time.time()
    if now < 0:
        raise RuntimeError("SystemTime before UNIX EPOCH!")
    return int(now)


@dataclass
class JobStatus:
    """A count of completed jobs, safe to update from several threads."""

    jobs_completed: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def complete_job(self) -> None:
        with self._lock:
            self.jobs_completed += 1


def run_jobs(jobs: int = 10, job_delay: float = 0.25, poll_delay: float = 0.5) -> JobStatus:
    """Complete jobs on a worker thread while this thread waits for all of them."""
    status = JobStatus()

    def work() -> None:
        for _ in range(jobs):
            time.sleep(job_delay)
            status.complete_job()

    worker = threading.Thread(target=work, daemon=True)
    worker.start()
    while status.jobs_completed < jobs:
        print("waiting... ")
        time.sleep(poll_delay)
    worker.join()
    return status