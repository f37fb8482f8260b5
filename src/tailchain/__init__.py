"""tailchain - Singly- and doubly-linked lists with O(1) append via a cached tail."""

from tailchain.arena import Node, NodeArena
from tailchain.errors import (
    InvariantViolationError,
    StaleNodeError,
    TailChainError,
)
from tailchain.linkedlist import DoublyLinkedList, SinglyLinkedList, new_list
from tailchain.types import ListKind, NodeIndex

__version__ = "0.0.1"

__all__ = [
    "SinglyLinkedList",
    "DoublyLinkedList",
    "new_list",
    "Node",
    "NodeArena",
    "TailChainError",
    "StaleNodeError",
    "InvariantViolationError",
    "ListKind",
    "NodeIndex",
]
