"""Fixed-capacity circular queue holding lookahead tokens.

Thread Safety:
LookaheadBuffer instances belong to a single Parser. Not safe to share.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from toybox.errors import BufferEmptyError, BufferFullError

E = TypeVar("E")


class LookaheadBuffer(Generic[E]):
    """A basic circular queue.

    Elements are addressed by their distance from the oldest one: get(0)
    is the element take() would remove next.

    Usage:
        >>> buffer = LookaheadBuffer(2)
        >>> buffer.put("a")
        >>> buffer.put("b")
        >>> buffer.get(1)
        'b'
        >>> buffer.take()
        'a'
        >>> buffer.size
        1

    """

    __slots__ = ("_data", "_first", "_size")

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            msg = f"Capacity must be at least 1, got {capacity}"
            raise ValueError(msg)
        self._data: list[Any] = [None] * capacity
        self._first = 0
        self._size = 0

    def get(self, index: int) -> E:
        """Return the element `index` positions from the oldest.

        Raises:
            BufferEmptyError: If index is outside [0, size)
        """
        if 0 <= index < self._size:
            return self._data[(self._first + index) % len(self._data)]
        msg = f"No element at offset {index} (size {self._size})"
        raise BufferEmptyError(msg)

    def peek(self) -> E:
        return self.get(0)

    def put(self, element: E) -> None:
        """Append an element behind the newest one.

        Raises:
            BufferFullError: If the buffer already holds capacity elements
        """
        if self.is_full():
            msg = f"Full queue (capacity {len(self._data)})"
            raise BufferFullError(msg)
        self._data[(self._first + self._size) % len(self._data)] = element
        self._size += 1

    def take(self) -> E:
        """Remove and return the oldest element.

        Raises:
            BufferEmptyError: If the buffer is empty
        """
        if self.is_empty():
            msg = "Empty queue"
            raise BufferEmptyError(msg)
        element = self._data[self._first]
        self._data[self._first] = None
        self._first = (self._first + 1) % len(self._data)
        self._size -= 1
        return element

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == len(self._data)

    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        items = [self.get(i) for i in range(self._size)]
        return f"LookaheadBuffer({items!r}, capacity={len(self._data)})"


__all__ = ["LookaheadBuffer"]
