# Aggregating concurrent lookups.
#
# run_concurrent fails everything when one lookup fails,
# run_concurrent_settled reports every lookup, failed or not.
from async_flow.inventory import FruitBasket
from async_flow.logs import log, setup_logging
from async_flow.runner import AsyncRunner
from async_flow.settings import Settings
from async_flow.timeit import timer

import asyncio


async def main(settings: Settings):
    basket = FruitBasket.default()
    runner = AsyncRunner()

    with timer():
        outcome = await runner.run_concurrent(
            basket.lookup_task(fruit, settings.delay_seconds)
            for fruit in settings.fruits_to_get
        )
        # > launching task 0
        # > launching task 1
        # > launching task 2
        log(f"{outcome.unwrap()}")
        # > [27, 0, 14]

    # > elapsed time: 1.00 seconds

    # we force a failure and everything else fails
    fruits = [*settings.fruits_to_get, "kiwi"]

    outcome = await runner.run_concurrent(
        basket.lookup_task(fruit, settings.delay_seconds) for fruit in fruits
    )
    # > launching task 0
    # > ...
    # > task 3 failed: MissingFruitFailure("no 'kiwi' in the basket")
    if not outcome.ok:
        log(f"{outcome.error}")
    # > task 3 failed: no 'kiwi' in the basket

    outcomes = await runner.run_concurrent_settled(
        basket.lookup_task(fruit, settings.delay_seconds) for fruit in fruits
    )
    for fruit, outcome in zip(fruits, outcomes):
        status = "fulfilled" if outcome.ok else "rejected"
        detail = outcome.value if outcome.ok else outcome.error
        log(f"{fruit}: {status} {detail}")
    # > apple: fulfilled 27
    # > grape: fulfilled 0
    # > pear: fulfilled 14
    # > kiwi: rejected no 'kiwi' in the basket


if __name__ == "__main__":
    settings = Settings.from_env()
    setup_logging(settings.log_level)

    coroutine = main(settings)
    asyncio.run(coroutine)
