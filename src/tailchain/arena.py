"""Index-addressed node storage backing a single list."""

from typing import Generic

from tailchain.errors import StaleNodeError
from tailchain.types import NodeIndex, T


class Node(Generic[T]):
    """A node in the chain. Links are arena indexes, not object references."""

    __slots__ = ("value", "next", "prev")

    def __init__(self, value: T) -> None:
        self.value = value
        self.next: NodeIndex | None = None
        self.prev: NodeIndex | None = None


class NodeArena(Generic[T]):
    """
    Owns every node of one list.

    Nodes are addressed by stable integer handles. A released handle is
    recycled through a free list, so any code still holding it must have
    cleared it in the same step it released the node.
    """

    __slots__ = ("_slots", "_free", "_live")

    def __init__(self) -> None:
        self._slots: list[Node[T] | None] = []
        self._free: list[NodeIndex] = []
        self._live = 0

    def allocate(self, value: T) -> NodeIndex:
        """Store a new unlinked node and return its handle. O(1)."""
        node = Node(value)
        if self._free:
            index = self._free.pop()
            self._slots[index] = node
        else:
            index = len(self._slots)
            self._slots.append(node)
        self._live += 1
        return index

    def release(self, index: NodeIndex) -> T:
        """Drop the node at index and return its value. O(1)."""
        node = self[index]
        self._live -= 1
        if self._live == 0:
            # No handle can be live, so drop the slot table entirely
            self._slots.clear()
            self._free.clear()
        else:
            self._slots[index] = None
            self._free.append(index)
        node.next = None
        node.prev = None
        return node.value

    def __getitem__(self, index: NodeIndex) -> Node[T]:
        if index < 0 or index >= len(self._slots):
            raise StaleNodeError(f"Unknown node handle: {index}")
        node = self._slots[index]
        if node is None:
            raise StaleNodeError(f"Node handle {index} was already released")
        return node

    def __len__(self) -> int:
        """Return the number of live nodes."""
        return self._live

    @property
    def capacity(self) -> int:
        """Number of slots ever allocated, live or free."""
        return len(self._slots)

    def clear(self) -> None:
        """Forget every slot. Handles issued before this call become stale."""
        self._slots.clear()
        self._free.clear()
        self._live = 0
