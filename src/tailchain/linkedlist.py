"""Singly- and doubly-linked lists with a cached tail handle."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import IO, Generic

from tailchain.arena import Node, NodeArena
from tailchain.errors import InvariantViolationError, StaleNodeError
from tailchain.types import ListKind, NodeIndex, T


class _LinkedListBase(ABC, Generic[T]):
    """
    State and positional logic shared by both list variants.

    The chain is rooted at ``_first`` and followed through ``next`` handles.
    ``_last`` is a cache of the final handle and never owns anything: every
    operation that changes which node is last, or releases it, rewrites
    ``_last`` before returning.

    Not thread-safe. Callers sharing a list between threads must hold one
    exclusive lock per list around every call.
    """

    def __init__(self, values: Iterable[T] | None = None) -> None:
        self._arena: NodeArena[T] = NodeArena()
        self._first: NodeIndex | None = None
        self._last: NodeIndex | None = None
        self._count = 0
        if values is not None:
            for value in values:
                self.append(value)

    @abstractmethod
    def append(self, value: T) -> None:
        ...

    @abstractmethod
    def prepend(self, value: T) -> None:
        ...

    @abstractmethod
    def pop(self) -> T | None:
        ...

    @abstractmethod
    def pop_first(self) -> T | None:
        ...

    @abstractmethod
    def reverse(self) -> None:
        ...

    @abstractmethod
    def _splice_in(self, before: NodeIndex, value: T) -> None:
        """Link a new node directly after ``before``, which is not the tail."""
        ...

    @abstractmethod
    def _splice_out(self, before: NodeIndex) -> T:
        """Unlink and release the node directly after ``before``."""
        ...

    def _check_links(self, handle: NodeIndex, node: Node[T], previous: NodeIndex | None) -> None:
        """Variant-specific per-node invariant check."""

    def __len__(self) -> int:
        """Return the number of elements. O(1)."""
        return self._count

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._count > 0

    def __repr__(self) -> str:
        values = ", ".join(repr(node.value) for node in self._nodes())
        return f"{type(self).__name__}([{values}])"

    def _nodes(self) -> Iterator[Node[T]]:
        handle = self._first
        while handle is not None:
            node = self._arena[handle]
            yield node
            handle = node.next

    def _in_range(self, index: int) -> bool:
        return 0 <= index < self._count

    def _index_of(self, index: int) -> NodeIndex:
        """Walk from the first node to position ``index``. Caller checks bounds."""
        handle = self._first
        for _ in range(index):
            assert handle is not None
            handle = self._arena[handle].next
        assert handle is not None
        return handle

    def first(self) -> T | None:
        """Return the first value without removing it. O(1)."""
        if self._first is None:
            return None
        return self._arena[self._first].value

    def last(self) -> T | None:
        """Return the last value without removing it. O(1)."""
        if self._last is None:
            return None
        return self._arena[self._last].value

    def get(self, index: int) -> T | None:
        """Return the value at ``index``, or None when out of range. O(n)."""
        if not self._in_range(index):
            return None
        return self._arena[self._index_of(index)].value

    def set(self, index: int, value: T) -> T | None:
        """
        Replace the value at ``index``. O(n).

        Returns:
            The previous value, or None if ``index`` is out of range (in which
            case nothing changes).
        """
        if not self._in_range(index):
            return None
        node = self._arena[self._index_of(index)]
        old = node.value
        node.value = value
        return old

    def insert(self, index: int, value: T) -> None:
        """
        Insert ``value`` so that it ends up at position ``index``. O(n).

        ``index == len(self)`` appends. A negative index or one past the end
        is ignored.
        """
        if index < 0 or index > self._count:
            return
        if index == 0:
            self.prepend(value)
        elif index == self._count:
            self.append(value)
        else:
            self._splice_in(self._index_of(index - 1), value)

    def remove(self, index: int) -> None:
        """
        Remove the element at ``index``. O(n).

        A negative index or ``index >= len(self)`` is ignored. Use get() first
        if the removed value is needed.
        """
        if not self._in_range(index):
            return
        if index == 0:
            self.pop_first()
        else:
            self._splice_out(self._index_of(index - 1))

    def clear(self) -> None:
        """Release every node, first to last, without recursion."""
        while self._first is not None:
            self.pop_first()
        self._arena.clear()

    def render(self) -> str:
        """Return the values in order followed by a terminal marker."""
        parts = [f"{node.value!r} -> " for node in self._nodes()]
        return "".join(parts) + "None"

    def print(self, file: IO[str] | None = None) -> None:
        """Write render() to ``file`` (stdout by default)."""
        print(self.render(), file=file)

    def check_invariants(self) -> None:
        """
        Walk the whole chain and verify the tail cache, count and links.

        Raises:
            InvariantViolationError: If any structural invariant does not hold
        """
        if (self._first is None) != (self._last is None):
            raise InvariantViolationError(
                f"first={self._first!r} and last={self._last!r} disagree on emptiness"
            )
        if (self._first is None) != (self._count == 0):
            raise InvariantViolationError(
                f"first={self._first!r} but count={self._count}"
            )

        walked = 0
        previous: NodeIndex | None = None
        handle = self._first
        while handle is not None:
            if walked > self._count:
                raise InvariantViolationError(f"Chain is longer than count={self._count}")
            try:
                node = self._arena[handle]
            except StaleNodeError as exc:
                raise InvariantViolationError(f"Chain reaches released node {handle}") from exc
            self._check_links(handle, node, previous)
            walked += 1
            previous = handle
            handle = node.next

        if walked != self._count:
            raise InvariantViolationError(f"Walked {walked} nodes but count={self._count}")
        if previous != self._last:
            raise InvariantViolationError(
                f"Tail cache points at {self._last!r}, chain ends at {previous!r}"
            )
        if len(self._arena) != self._count:
            raise InvariantViolationError(
                f"Arena holds {len(self._arena)} live nodes but count={self._count}"
            )


class SinglyLinkedList(_LinkedListBase[T]):
    """Singly-linked list. O(1) append, prepend and pop_first; O(n) pop."""

    def append(self, value: T) -> None:
        """Add ``value`` at the end. O(1)."""
        handle = self._arena.allocate(value)
        if self._last is None:
            self._first = handle
        else:
            self._arena[self._last].next = handle
        self._last = handle
        self._count += 1

    def prepend(self, value: T) -> None:
        """Add ``value`` at the front. O(1)."""
        handle = self._arena.allocate(value)
        self._arena[handle].next = self._first
        if self._first is None:
            self._last = handle
        self._first = handle
        self._count += 1

    def pop(self) -> T | None:
        """Remove and return the last value, or None if empty. O(n)."""
        if self._last is None:
            return None
        target = self._last
        if self._count == 1:
            self._first = None
            self._last = None
        else:
            before = self._index_of(self._count - 2)
            self._arena[before].next = None
            self._last = before
        self._count -= 1
        return self._arena.release(target)

    def pop_first(self) -> T | None:
        """Remove and return the first value, or None if empty. O(1)."""
        if self._first is None:
            return None
        target = self._first
        self._first = self._arena[target].next
        if self._first is None:
            self._last = None
        self._count -= 1
        return self._arena.release(target)

    def reverse(self) -> None:
        """Reverse the chain in place. O(n)."""
        accumulated: NodeIndex | None = None
        handle = self._first
        while handle is not None:
            node = self._arena[handle]
            following = node.next
            node.next = accumulated
            accumulated = handle
            handle = following
        self._first, self._last = accumulated, self._first

    def _splice_in(self, before: NodeIndex, value: T) -> None:
        handle = self._arena.allocate(value)
        previous = self._arena[before]
        self._arena[handle].next = previous.next
        previous.next = handle
        self._count += 1

    def _splice_out(self, before: NodeIndex) -> T:
        previous = self._arena[before]
        target = previous.next
        assert target is not None
        previous.next = self._arena[target].next
        if target == self._last:
            self._last = before
        self._count -= 1
        return self._arena.release(target)

    def _check_links(self, handle: NodeIndex, node: Node[T], previous: NodeIndex | None) -> None:
        if node.prev is not None:
            raise InvariantViolationError(f"Singly-linked node {handle} has a back link")


class DoublyLinkedList(_LinkedListBase[T]):
    """
    Doubly-linked list.

    Every node also keeps the handle of its predecessor, so pop is O(1) and
    positional access walks from whichever end is closer.
    """

    def append(self, value: T) -> None:
        """Add ``value`` at the end. O(1)."""
        handle = self._arena.allocate(value)
        if self._last is None:
            self._first = handle
        else:
            self._arena[self._last].next = handle
            self._arena[handle].prev = self._last
        self._last = handle
        self._count += 1

    def prepend(self, value: T) -> None:
        """Add ``value`` at the front. O(1)."""
        handle = self._arena.allocate(value)
        if self._first is None:
            self._last = handle
        else:
            self._arena[handle].next = self._first
            self._arena[self._first].prev = handle
        self._first = handle
        self._count += 1

    def pop(self) -> T | None:
        """Remove and return the last value, or None if empty. O(1)."""
        if self._last is None:
            return None
        target = self._last
        before = self._arena[target].prev
        if before is None:
            self._first = None
        else:
            self._arena[before].next = None
        self._last = before
        self._count -= 1
        return self._arena.release(target)

    def pop_first(self) -> T | None:
        """Remove and return the first value, or None if empty. O(1)."""
        if self._first is None:
            return None
        target = self._first
        self._first = self._arena[target].next
        if self._first is None:
            self._last = None
        else:
            self._arena[self._first].prev = None
        self._count -= 1
        return self._arena.release(target)

    def reverse(self) -> None:
        """Reverse the chain in place, swapping both link directions. O(n)."""
        accumulated: NodeIndex | None = None
        handle = self._first
        while handle is not None:
            node = self._arena[handle]
            following = node.next
            node.next = accumulated
            node.prev = following
            accumulated = handle
            handle = following
        self._first, self._last = accumulated, self._first

    def _index_of(self, index: int) -> NodeIndex:
        if index <= self._count // 2:
            return super()._index_of(index)
        handle = self._last
        for _ in range(self._count - 1 - index):
            assert handle is not None
            handle = self._arena[handle].prev
        assert handle is not None
        return handle

    def _splice_in(self, before: NodeIndex, value: T) -> None:
        handle = self._arena.allocate(value)
        previous = self._arena[before]
        following = previous.next
        assert following is not None
        node = self._arena[handle]
        node.next = following
        node.prev = before
        previous.next = handle
        self._arena[following].prev = handle
        self._count += 1

    def _splice_out(self, before: NodeIndex) -> T:
        previous = self._arena[before]
        target = previous.next
        assert target is not None
        following = self._arena[target].next
        previous.next = following
        if following is None:
            self._last = before
        else:
            self._arena[following].prev = before
        self._count -= 1
        return self._arena.release(target)

    def _check_links(self, handle: NodeIndex, node: Node[T], previous: NodeIndex | None) -> None:
        if node.prev != previous:
            raise InvariantViolationError(
                f"Node {handle} has back link {node.prev!r}, expected {previous!r}"
            )


def new_list(
    kind: ListKind = "singly",
    values: Iterable[T] | None = None,
) -> SinglyLinkedList[T] | DoublyLinkedList[T]:
    """
    Build an empty (or pre-filled) list of the requested variant.

    Args:
        kind: "singly" or "doubly"
        values: Optional initial values, appended in order

    Raises:
        ValueError: If kind is not a known variant
    """
    if kind == "singly":
        return SinglyLinkedList(values)
    if kind == "doubly":
        return DoublyLinkedList(values)
    raise ValueError(f"Unknown list kind: {kind!r}")
