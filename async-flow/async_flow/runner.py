"""
Running asynchronous tasks one-at-a-time or all-at-once.

A task is a zero-argument callable returning an awaitable, so the runner
decides *when* it starts: calling `fetch(1)` directly would only create a
coroutine, and nothing in its body runs until it is awaited or scheduled.

    >>> runner = AsyncRunner()
    >>> await runner.run_sequential([get_one, get_one])
    Success(value=[1, 1])

Failures never escape the runner as exceptions, they come back as `Failure`.
Call `.unwrap()` to re-raise one.
"""

import asyncio
from typing import Any, Awaitable, Callable, Iterable, List, Optional, Tuple

from async_flow.errors import AggregateFailure
from async_flow.logs import LogSink, log as default_log
from async_flow.outcome import Failure, Outcome, Success

AsyncTask = Callable[[], Awaitable[Any]]


async def settle(task: AsyncTask) -> Outcome:
    """
    Invoke a task and wait for it to settle.

    A task raising before it returns an awaitable (a plain function failing
    instead of handing back a coroutine) and one raising after its first
    suspension end up in the same Failure. Cancellation is not an Exception
    and goes through untouched.
    """
    try:
        value = await task()
    except Exception as error:
        return Failure(error=error)
    return Success(value=value)


class AsyncRunner:
    def __init__(self, log: Optional[LogSink] = None):
        self._log = log or default_log

    async def run(self, task: AsyncTask) -> Outcome:
        outcome = await settle(task)
        if not outcome.ok:
            self._log(f"task failed: {outcome.error!r}")
        return outcome

    async def run_sequential(self, tasks: Iterable[AsyncTask]) -> Outcome:
        # each await suspends the whole pipeline, so the next task
        # is not even created until the previous one settled
        values = []
        for index, task in enumerate(tasks):
            self._log(f"awaiting task {index}")
            outcome = await settle(task)
            if not outcome.ok:
                self._log(f"task {index} failed: {outcome.error!r}")
                return outcome
            values.append(outcome.value)
        return Success(value=values)

    async def run_concurrent(self, tasks: Iterable[AsyncTask]) -> Outcome:
        launched = self._launch(tasks)

        first_failure: Optional[Tuple[int, Failure]] = None
        # as_completed hands results back in completion order, which decides
        # what "first" failure means; the rest are still awaited, never cancelled
        for next_settled in asyncio.as_completed(launched):
            index, outcome = await next_settled
            if not outcome.ok:
                self._log(f"task {index} failed: {outcome.error!r}")
                if first_failure is None:
                    first_failure = index, outcome

        if first_failure is not None:
            index, failure = first_failure
            return Failure(error=AggregateFailure(failure.error, index))

        return Success(value=[task.result()[1].value for task in launched])

    async def run_concurrent_settled(self, tasks: Iterable[AsyncTask]) -> List[Outcome]:
        launched = self._launch(tasks)
        settled = await asyncio.gather(*launched)
        return [outcome for _, outcome in settled]

    def _launch(self, tasks: Iterable[AsyncTask]) -> List["asyncio.Task[Tuple[int, Outcome]]"]:
        # create_task only schedules: no task body runs before every task is
        # launched and the caller suspends, and they start in input order
        launched = []
        for index, task in enumerate(tasks):
            self._log(f"launching task {index}")
            launched.append(asyncio.create_task(_settle_at(index, task)))
        return launched


async def _settle_at(index: int, task: AsyncTask) -> Tuple[int, Outcome]:
    return index, await settle(task)
