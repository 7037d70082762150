from async_flow.logs import log, setup_logging
from async_flow.errors import TaskFailure
from async_flow.runner import AsyncRunner, settle
from async_flow.settings import Settings
from async_flow.task import get_one

import asyncio


async def try_every_await():
    # With multiple awaits, catching each failure gets ugly...
    for _ in range(3):
        try:
            await get_one(success=False)
        except TaskFailure as e:
            log(f"{e}")


async def catch_once():
    one = await get_one(success=False)
    # never reached, the first failure ends the coroutine
    two = await get_one(success=False)
    three = await get_one(success=False)
    return [one, two, three]


async def main(settings: Settings):
    outcome = await settle(get_one)
    log(f"{outcome.unwrap()}")
    # > 1

    try_every_await_coro = try_every_await()
    await try_every_await_coro
    # > Failure
    # > Failure
    # > Failure

    # There's a better way: handle everything once, at the caller
    try:
        await catch_once()
    except TaskFailure as e:
        log(f"{e}")
    # > Failure

    # The runner does the same, and hands the failure back as a value
    runner = AsyncRunner()
    outcome = await runner.run_sequential(
        [
            get_one,
            lambda: get_one(success=False),
            get_one,
        ]
    )
    # > awaiting task 0
    # > awaiting task 1
    # > task 1 failed: TaskFailure('Failure')
    log(f"{outcome.ok=!r} {outcome.error}")
    # > outcome.ok=False Failure


if __name__ == "__main__":
    settings = Settings.from_env()
    setup_logging(settings.log_level)

    coroutine = main(settings)
    asyncio.run(coroutine)
