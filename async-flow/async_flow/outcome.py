from typing import Generic, NoReturn, TypeVar, Union

import pydantic

T = TypeVar("T")


class Success(pydantic.BaseModel, Generic[T]):
    model_config = pydantic.ConfigDict(frozen=True)

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


class Failure(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True, arbitrary_types_allowed=True)

    error: Exception

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        # not handling a failure means passing it up to your own caller
        raise self.error


# Pending is never observable from outside: an outcome exists only once a task settled
Outcome = Union[Success, Failure]
