"""Observable list and its read-only live view."""

from collections.abc import Callable, Iterable, Iterator, MutableSequence, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, Literal, TypeVar, overload

T = TypeVar("T")

ChangeKind = Literal["added", "removed", "replaced", "reset"]


@dataclass(frozen=True)
class ListChange(Generic[T]):
    """A single mutation applied to an ObservableList."""

    kind: ChangeKind
    index: int
    removed: tuple[T, ...] = field(default_factory=tuple)
    added: tuple[T, ...] = field(default_factory=tuple)


Listener = Callable[[ListChange[Any]], None]


class ObservableList(MutableSequence[T]):
    """A list that notifies listeners after every mutation."""

    def __init__(self, items: Iterable[T] | None = None):
        self._items: list[T] = list(items) if items is not None else []
        self._listeners: list[Listener] = []

    def add_listener(self, listener: Listener) -> None:
        """Subscribe to change notifications.

        Listeners run in subscription order after the mutation has been
        applied. An exception raised by a listener propagates to the caller
        that made the change; the mutation stays applied and the remaining
        listeners are not called for that change.
        """
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        """Unsubscribe a listener. Unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _fire(self, change: ListChange[T]) -> None:
        for listener in list(self._listeners):
            listener(change)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index, value):
        if isinstance(index, slice):
            raise TypeError("slice assignment is not supported; use set_all")
        old = self._items[index]
        self._items[index] = value
        position = index if index >= 0 else len(self._items) + index
        self._fire(ListChange("replaced", position, removed=(old,), added=(value,)))

    def __delitem__(self, index):
        if isinstance(index, slice):
            raise TypeError("slice deletion is not supported; use set_all")
        position = index if index >= 0 else len(self._items) + index
        old = self._items.pop(index)
        self._fire(ListChange("removed", position, removed=(old,)))

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, index: int, value: T) -> None:
        position = max(0, min(index if index >= 0 else len(self._items) + index, len(self._items)))
        self._items.insert(position, value)
        self._fire(ListChange("added", position, added=(value,)))

    def set_all(self, items: Iterable[T]) -> None:
        """Replace the whole contents in one step."""
        new_items = list(items)
        old = tuple(self._items)
        self._items = new_items
        self._fire(ListChange("reset", 0, removed=old, added=tuple(new_items)))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (ObservableList, UnmodifiableObservableList)):
            return list(self) == list(other)
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._items!r})"


class UnmodifiableObservableList(Sequence[T]):
    """Read-only live projection of an ObservableList.

    Reads always reflect the source's current contents. There are no
    mutating methods; item assignment and deletion raise TypeError.
    """

    __slots__ = ("_source",)

    def __init__(self, source: ObservableList[T]):
        self._source = source

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index):
        return self._source[index]

    def __len__(self) -> int:
        return len(self._source)

    def __iter__(self) -> Iterator[T]:
        return iter(self._source)

    def add_listener(self, listener: Listener) -> None:
        """Subscribe to changes of the underlying list.

        See ObservableList.add_listener for how listener errors are handled.
        """
        self._source.add_listener(listener)

    def remove_listener(self, listener: Listener) -> None:
        """Unsubscribe a listener from the underlying list."""
        self._source.remove_listener(listener)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (ObservableList, UnmodifiableObservableList)):
            return list(self) == list(other)
        if isinstance(other, list):
            return list(self) == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self)!r})"
