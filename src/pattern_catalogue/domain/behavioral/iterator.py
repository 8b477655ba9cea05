"""Iterator pattern - a forward-only cursor over a collection snapshot."""
from typing import Any, Iterable, List, Sequence, Tuple

from pattern_catalogue.domain.exceptions import OutOfRangeError


class Iterator:
    """
    One-shot cursor over a snapshot of a sequence.

    The snapshot is taken when the iterator is created, so later changes to
    the source collection are not visible. The cursor only moves forward and
    cannot be restarted.
    """

    def __init__(self, collection: Sequence[Any]):
        self.collection: Tuple[Any, ...] = tuple(collection)
        self.index = 0

    def has_next(self) -> bool:
        return self.index < len(self.collection)

    def next(self) -> Any:
        """
        Return the element under the cursor and advance.

        Raises:
            OutOfRangeError: If the cursor is already at the end
        """
        if not self.has_next():
            raise OutOfRangeError(
                "No more elements", position=self.index, size=len(self.collection)
            )
        item = self.collection[self.index]
        self.index += 1
        return item

    def __iter__(self) -> "Iterator":
        return self

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        return self.next()


class Collection:
    """Growable list of items that hands out iterators."""

    def __init__(self, items: Iterable[Any] = ()):
        self.items: List[Any] = list(items)

    def add(self, item: Any) -> None:
        self.items.append(item)

    def get_iterator(self) -> Iterator:
        return Iterator(self.items)

    def __len__(self) -> int:
        return len(self.items)
