"""Base repository for the in-memory registries."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, TypeVar

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType]):
    """
    Append-only registry that assigns sequential ids.

    The next id is ``base + len(registry)``, so ids stay unique without any
    counter shared between registries. There is no delete operation.
    """

    def __init__(self, base: int, key: Callable[[ModelType], int]):
        self._base = base
        self._key = key
        self._items: list[ModelType] = []

    def next_id(self) -> int:
        return self._base + len(self._items)

    def add(self, instance: ModelType) -> ModelType:
        """Appends an instance whose id must be the one handed out by next_id()."""
        if self._key(instance) != self.next_id():
            raise ValueError(
                f"Expected id {self.next_id()}, got {self._key(instance)}."
            )
        self._items.append(instance)
        return instance

    def get(self, pk: int) -> ModelType | None:
        """Get an instance by its id."""
        for item in self._items:
            if self._key(item) == pk:
                return item
        return None

    def all(self) -> list[ModelType]:
        """Get a snapshot of all instances in insertion order."""
        return list(self._items)

    def filter(self, predicate: Callable[[ModelType], bool]) -> list[ModelType]:
        return [item for item in self._items if predicate(item)]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ModelType]:
        return iter(self.all())
