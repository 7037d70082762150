from async_flow.logs import log, setup_logging
from async_flow.runner import AsyncRunner
from async_flow.settings import Settings
from async_flow.task import delayed_value
from async_flow.timeit import timer

import asyncio
import functools

from loguru import logger


async def main(settings: Settings):
    # Await blocks the coroutine until the awaited one finishes,
    # so awaiting three one-second tasks in a row takes three seconds
    def tasks():
        return [
            functools.partial(
                delayed_value,
                task_number=task_number,
                value=value,
                time_to_execute_in_seconds=settings.delay_seconds,
            )
            for task_number, value in enumerate([2, 3, 4])
        ]

    # runner bookkeeping only shows up with ASYNC_FLOW_LOG_LEVEL=DEBUG
    runner = AsyncRunner(log=logger.debug)

    with timer():
        outcome = await runner.run_sequential(tasks())
        log(f"{outcome.unwrap()}")
        # > processed task with task_number=0 value=2 behavior=normal-sleep
        # > processed task with task_number=1 value=3 behavior=normal-sleep
        # > processed task with task_number=2 value=4 behavior=normal-sleep
        # > [2, 3, 4]

    # > elapsed time: 3.00 seconds

    # If they don't depend on each other, start them all and wait once
    with timer():
        outcome = await runner.run_concurrent(tasks())
        log(f"{outcome.unwrap()}")
        # > [2, 3, 4]

    # > elapsed time: 1.00 seconds


if __name__ == "__main__":
    settings = Settings.from_env()
    setup_logging(settings.log_level)

    coroutine = main(settings)
    asyncio.run(coroutine)
