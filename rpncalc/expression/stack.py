"""Minimal LIFO stack used by the converter and the evaluator."""

from typing import Generic, List, TypeVar

T = TypeVar("T")


class StackUnderflowError(IndexError):
    """Raised when popping or peeking an empty stack."""
    pass


class Stack(Generic[T]):
    """Last-in first-out sequence. Instances are local to a single call."""

    def __init__(self) -> None:
        self._items: List[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        if not self._items:
            raise StackUnderflowError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> T:
        if not self._items:
            raise StackUnderflowError("peek at empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)
