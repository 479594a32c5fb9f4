"""
Queryable collection classes for fluent, composable queries.

A lightweight, read-only wrapper over in-memory records that allows chaining
filters the way the query service and its tests compose them.
"""

from typing import TypeVar, Generic, Callable, List, Dict, Optional, Any, Tuple
from collections.abc import Iterable

T = TypeVar('T')


class QueryableCollection(Generic[T]):
    """
    A chainable, immutable collection for filtering in-memory data.

    Every operation returns a new collection; the wrapped items are held in
    a tuple so a collection can be shared between concurrent readers.

    Examples:
        # Basic filtering
        collection.filter(lambda s: s.center.altitude > 1000).all()

        # Attribute matching
        collection.where(category='CTR').count()

        # Chaining
        collection.where(category='TMA').order_by(lambda s: s.id).take(10).all()
    """

    def __init__(self, items: Iterable[T]):
        """
        Initialize a queryable collection.

        Args:
            items: Iterable of items to wrap
        """
        self._items: Tuple[T, ...] = tuple(items)

    def filter(self, predicate: Callable[[T], bool]) -> 'QueryableCollection[T]':
        """
        Filter items using a predicate function.

        Args:
            predicate: Function that takes an item and returns True to include it

        Returns:
            New collection with filtered items
        """
        return self.__class__(item for item in self._items if predicate(item))

    def where(self, **kwargs) -> 'QueryableCollection[T]':
        """
        Filter items using attribute matching. All conditions must match.

        Examples:
            shapes.where(id='airspace_12')
            shapes.where(shape_kind=ShapeKind.OVAL, category='FIR')
        """
        def matches(item: T) -> bool:
            return all(
                getattr(item, key, None) == value
                for key, value in kwargs.items()
            )
        return self.filter(matches)

    def first(self) -> Optional[T]:
        """Return the first item or None if collection is empty."""
        return self._items[0] if self._items else None

    def all(self) -> List[T]:
        """Return all items as a new list."""
        return list(self._items)

    def count(self) -> int:
        return len(self._items)

    def exists(self) -> bool:
        return len(self._items) > 0

    def group_by(self, key_func: Callable[[T], str]) -> Dict[str, List[T]]:
        """
        Group items by a key function.

        Args:
            key_func: Function that returns a grouping key for each item

        Returns:
            Dictionary mapping keys to lists of items, in first-seen order
        """
        result: Dict[str, List[T]] = {}
        for item in self._items:
            result.setdefault(key_func(item), []).append(item)
        return result

    def order_by(self, key_func: Callable[[T], Any], reverse: bool = False) -> 'QueryableCollection[T]':
        return self.__class__(sorted(self._items, key=key_func, reverse=reverse))

    def take(self, n: int) -> 'QueryableCollection[T]':
        return self.__class__(self._items[:n])

    def to_dict(self, key_func: Callable[[T], str]) -> Dict[str, T]:
        """
        Convert to dictionary using key function.

        Raises:
            ValueError: If two items produce the same key
        """
        result = {}
        for item in self._items:
            key = key_func(item)
            if key in result:
                raise ValueError(f"Duplicate key: {key}")
            result[key] = item
        return result

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self.__class__(self._items[index])
        return self._items[index]

    def __bool__(self):
        return len(self._items) > 0

    def __repr__(self):
        class_name = self.__class__.__name__
        count = len(self._items)
        if count == 0:
            return f"{class_name}([])"

        preview_items = []
        for item in self._items[:3]:
            if hasattr(item, 'id'):
                preview_items.append(repr(item.id))
            else:
                preview_items.append(f"<{type(item).__name__}>")
        if count > 3:
            preview_items.append('...')

        return f"{class_name}([{', '.join(preview_items)}], count={count})"
