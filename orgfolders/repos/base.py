from typing import Callable, Generic, TypeVar

from pydantic import BaseModel

ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepo(Generic[ModelType]):
    """Read-only repository over an immutable snapshot of records."""

    def __init__(self, model: type[ModelType]) -> None:
        self._model = model

    def all(self) -> tuple[ModelType, ...]:
        """Get every record in source order."""
        return self._load()

    def filter(self, predicate: Callable[[ModelType], bool]) -> list[ModelType]:
        """Get the records matching a predicate, preserving source order."""
        return [record for record in self.all() if predicate(record)]

    def _load(self) -> tuple[ModelType, ...]:
        raise NotImplementedError
