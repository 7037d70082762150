from contextlib import contextmanager
from typing import Iterator, Optional
import time

from async_flow.logs import LogSink, log as default_log


class Stopwatch:
    seconds: Optional[float] = None


@contextmanager
def timer(log: Optional[LogSink] = None) -> Iterator[Stopwatch]:
    """
    Usage:
        >>> with timer() as stopwatch:
        ...     # example: simulate a long-running operation
        ...     await asyncio.sleep(1)
        ...
        elapsed time: 1.00 seconds
        >>> stopwatch.seconds
        1.0012...

    """
    stopwatch = Stopwatch()
    start_time = time.perf_counter()
    try:
        yield stopwatch
    finally:
        stopwatch.seconds = time.perf_counter() - start_time
        (log or default_log)(f"elapsed time: {stopwatch.seconds:.2f} seconds")
