import asyncio
from typing import Any, Optional

import pydantic

from async_flow.errors import TaskFailure
from async_flow.logs import LogSink, log as default_log


@pydantic.validate_call
async def delay(time_to_execute_in_seconds: pydantic.NonNegativeFloat) -> None:
    await asyncio.sleep(time_to_execute_in_seconds)


@pydantic.validate_call
async def delayed_value(
    task_number: pydantic.NonNegativeInt,
    value: Any,
    time_to_execute_in_seconds: pydantic.NonNegativeFloat,
    log: Optional[LogSink] = None,
) -> Any:
    await delay(time_to_execute_in_seconds)
    (log or default_log)(
        f"processed task with {task_number=!r} {value=!r} behavior=normal-sleep"
    )
    return value


@pydantic.validate_call
async def failing_task(
    task_number: pydantic.NonNegativeInt,
    time_to_execute_in_seconds: pydantic.NonNegativeFloat,
    message: str = "Failure",
    log: Optional[LogSink] = None,
) -> None:
    """
    Raises:
        TaskFailure: Always raised once the delay is over.
    """
    await delay(time_to_execute_in_seconds)
    (log or default_log)(
        f"processed task with {task_number=!r} {message=!r} behavior=raise"
    )
    raise TaskFailure(message)


async def get_one(success: bool = True) -> int:
    if success:
        return 1
    raise TaskFailure("Failure")
