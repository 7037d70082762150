import functools
from types import MappingProxyType
from typing import Dict, Mapping

import pydantic

from async_flow.errors import MissingFruitFailure
from async_flow.runner import AsyncTask
from async_flow.task import delay

DEFAULT_COUNTS = {"apple": 27, "grape": 0, "pear": 14}


class FruitBasket(pydantic.BaseModel):
    """
    A read-only fruit count table, pretending to live on a remote server.

    Usage:
        >>> basket = FruitBasket.default()
        >>> await basket.get_num_fruit_delayed("apple", time_to_execute_in_seconds=1)
        27

    """

    model_config = pydantic.ConfigDict(frozen=True)

    counts: Mapping[str, pydantic.NonNegativeInt]

    @pydantic.field_validator("counts", mode="after")
    @classmethod
    def _read_only(cls, counts: Mapping[str, int]) -> Mapping[str, int]:
        return MappingProxyType(dict(counts))

    @pydantic.field_serializer("counts")
    def _plain_dict(self, counts: Mapping[str, int]) -> Dict[str, int]:
        return dict(counts)

    @classmethod
    def default(cls) -> "FruitBasket":
        return cls(counts=DEFAULT_COUNTS)

    def get_num_fruit(self, fruit: str) -> int:
        try:
            return self.counts[fruit]
        except KeyError:
            raise MissingFruitFailure(fruit) from None

    async def get_num_fruit_delayed(
        self, fruit: str, time_to_execute_in_seconds: float = 1.0
    ) -> int:
        await delay(time_to_execute_in_seconds)
        return self.get_num_fruit(fruit)

    def lookup_task(self, fruit: str, time_to_execute_in_seconds: float = 1.0) -> AsyncTask:
        return functools.partial(
            self.get_num_fruit_delayed, fruit, time_to_execute_in_seconds
        )
