class TaskFailure(Exception):
    """A task explicitly signaled failure."""

    def __init__(self, message: str = "Failure"):
        super().__init__(message)
        self.message = message


class AggregateFailure(TaskFailure):
    """
    At least one task of a concurrent run failed.

    Carries the first failure in completion order (not input order)
    and the input index of the task that produced it.
    """

    def __init__(self, error: Exception, index: int):
        super().__init__(f"task {index} failed: {error}")
        self.error = error
        self.index = index
        self.__cause__ = error


class MissingFruitFailure(TaskFailure):
    def __init__(self, fruit: str):
        super().__init__(f"no {fruit!r} in the basket")
        self.fruit = fruit
