# Awaiting inside loops.
#
# "for" and "while" loops live inside the coroutine,
# so every await pauses the loop itself: the iterations run in series.
# Callback-style iteration is another story, see *fire_and_forget_loop*.
from async_flow.inventory import FruitBasket
from async_flow.logs import log, setup_logging
from async_flow.settings import Settings

import asyncio


async def for_loop(basket: FruitBasket, settings: Settings):
    log("Start")
    for fruit in settings.fruits_to_get:
        num_fruit = await basket.get_num_fruit_delayed(fruit, settings.delay_seconds)
        log(f"{num_fruit}")
    log("End")


async def while_loop(basket: FruitBasket, settings: Settings):
    log("Start")
    fruit_pointer = 0
    while fruit_pointer < len(settings.fruits_to_get):
        num_fruit = await basket.get_num_fruit_delayed(
            settings.fruits_to_get[fruit_pointer], settings.delay_seconds
        )
        log(f"{num_fruit}")
        fruit_pointer += 1
    log("End")


async def map_loop(basket: FruitBasket, settings: Settings):
    # A comprehension over coroutine functions gives a list of coroutines,
    # nothing is awaited until they're gathered
    async def plus_hundred(fruit):
        num_fruit = await basket.get_num_fruit_delayed(fruit, settings.delay_seconds)
        return num_fruit + 100

    log("Start")
    coroutines = [plus_hundred(fruit) for fruit in settings.fruits_to_get]
    resolved_num_fruits = await asyncio.gather(*coroutines)
    log(f"{resolved_num_fruits}")
    log("End")


async def fire_and_forget_loop(basket: FruitBasket, settings: Settings):
    # Don't do this.
    # Each item is launched and nobody waits for it:
    # the loop is over and "End" is logged before any value arrives.
    async def log_num_fruit(fruit):
        num_fruit = await basket.get_num_fruit_delayed(fruit, settings.delay_seconds)
        log(f"{num_fruit}")

    log("Start")
    launched = [
        asyncio.create_task(log_num_fruit(fruit)) for fruit in settings.fruits_to_get
    ]
    log("End")
    return launched


async def main(settings: Settings):
    basket = FruitBasket.default()

    await for_loop(basket, settings)
    # > Start
    # > 27
    # > 0
    # > 14
    # > End
    # takes 3 seconds, one per fruit

    await while_loop(basket, settings)
    # same output and timing as for_loop

    await map_loop(basket, settings)
    # > Start
    # > [127, 100, 114]
    # > End
    # takes 1 second

    launched = await fire_and_forget_loop(basket, settings)
    # > Start
    # > End
    # asyncio.run cancels whatever is still pending when main returns,
    # so hold on to the tasks to see the values at all
    await asyncio.wait(launched)
    # > 27
    # > 0
    # > 14


if __name__ == "__main__":
    settings = Settings.from_env()
    setup_logging(settings.log_level)

    coroutine = main(settings)
    asyncio.run(coroutine)
