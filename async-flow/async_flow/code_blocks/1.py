# An asynchronous function is defined with "async def".
# Calling it does not run the body: it turns into a "coroutine",
# and whatever it returns only becomes available once it's awaited.
from async_flow.logs import log, setup_logging
from async_flow.settings import Settings
from async_flow.task import get_one

import asyncio


async def do_something():
    # Do something asynchronous
    ...


async def return_await():
    # Don't need to do this: awaiting just to return the value adds nothing
    return await get_one()


def return_directly():
    # Do this instead, the caller awaits the coroutine anyway.
    # If you don't need await, you don't need an async function.
    return get_one()


async def main(settings: Settings):
    coroutine = do_something()
    log(f"{type(coroutine).__name__}")
    # > coroutine
    # Never leave a coroutine un-awaited, asyncio warns about it
    await coroutine

    one = await get_one()
    log(f"{one}")
    # > 1

    log(f"{await return_await()}")
    # > 1
    log(f"{await return_directly()}")
    # > 1


if __name__ == "__main__":
    settings = Settings.from_env()
    setup_logging(settings.log_level)

    coroutine = main(settings)
    asyncio.run(coroutine)
