"""Generic list that enforces uniqueness between its elements."""

from collections.abc import Iterator, Sequence
from typing import Any, Generic, Protocol, TypeVar

from patientbook.models.exceptions import DuplicateEntityError, EntityNotFoundError
from patientbook.models.observable import ObservableList, UnmodifiableObservableList
from patientbook.utils.collections import require_all_non_null, require_non_null
from patientbook.utils.logging import get_logger

logger = get_logger(__name__)


class Identifiable(Protocol):
    """Entities that can tell whether another entity has the same identity."""

    def is_same(self, other: Any) -> bool:
        """Return True if other has the same identity as this entity."""
        ...


T = TypeVar("T", bound=Identifiable)


class UniqueObjectList(Generic[T]):
    """A list of entities that does not allow nulls or identity duplicates.

    Adding and replacing compare elements with ``is_same`` so that no two
    elements ever share an identity. Removal and the target lookup of
    ``set_object`` use ``==`` so that only an element with exactly the same
    fields is matched.
    """

    def __init__(self) -> None:
        self._internal_list: ObservableList[T] = ObservableList()
        self._internal_unmodifiable_list: UnmodifiableObservableList[T] = UnmodifiableObservableList(
            self._internal_list
        )

    def contains(self, to_check: T) -> bool:
        """Return True if the list contains an entity with the same identity."""
        require_non_null(to_check, "to_check")
        return any(to_check.is_same(item) for item in self._internal_list)

    def add(self, to_add: T) -> None:
        """Append an entity. It must not already exist in the list."""
        require_non_null(to_add, "to_add")
        if self.contains(to_add):
            logger.warning(f"Rejected duplicate add: {to_add!r}")
            raise DuplicateEntityError()

        self._internal_list.append(to_add)
        logger.debug(f"Added {to_add!r}, size now {len(self._internal_list)}")

    def set_object(self, target: T, edited: T) -> None:
        """Replace target with edited, keeping its position.

        target must exist in the list. The identity of edited must not be the
        same as another existing entity in the list.
        """
        require_all_non_null(target, edited)

        try:
            index = self._internal_list.index(target)
        except ValueError:
            logger.warning(f"Cannot replace missing entity: {target!r}")
            raise EntityNotFoundError() from None

        if not target.is_same(edited) and self.contains(edited):
            logger.warning(f"Rejected edit introducing duplicate: {edited!r}")
            raise DuplicateEntityError()

        self._internal_list[index] = edited
        logger.debug(f"Replaced entity at index {index} with {edited!r}")

    def remove(self, to_remove: T) -> None:
        """Remove the first element equal to to_remove. It must exist in the list."""
        require_non_null(to_remove, "to_remove")

        try:
            self._internal_list.remove(to_remove)
        except ValueError:
            logger.warning(f"Cannot remove missing entity: {to_remove!r}")
            raise EntityNotFoundError() from None

        logger.debug(f"Removed {to_remove!r}, size now {len(self._internal_list)}")

    def set_objects(self, objects: Sequence[T]) -> None:
        """Replace the contents of this list with objects, which must be unique."""
        require_non_null(objects, "objects")
        objects = list(objects)
        require_all_non_null(*objects)

        if not self.objects_are_unique(objects):
            logger.warning(f"Rejected bulk replace of {len(objects)} entities containing duplicates")
            raise DuplicateEntityError()

        self._internal_list.set_all(objects)
        logger.debug(f"Replaced contents with {len(objects)} entities")

    def as_unmodifiable_view(self) -> UnmodifiableObservableList[T]:
        """Return the live read-only view of this list."""
        return self._internal_unmodifiable_list

    @staticmethod
    def objects_are_unique(objects: Sequence[T]) -> bool:
        """Return True if no two entities in objects share an identity."""
        for i in range(len(objects) - 1):
            for j in range(i + 1, len(objects)):
                if objects[i].is_same(objects[j]):
                    return False
        return True

    def __iter__(self) -> Iterator[T]:
        return iter(self._internal_list)

    def __len__(self) -> int:
        return len(self._internal_list)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, UniqueObjectList) or type(other) is not type(self):
            return False
        return list(self._internal_list) == list(other._internal_list)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._internal_list)!r})"
