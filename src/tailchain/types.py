"""Type definitions for tailchain."""

from typing import Literal, TypeAlias, TypeVar

# Element type stored in a list
T = TypeVar("T")

# Slot handle into a NodeArena
NodeIndex: TypeAlias = int

# Which list variant to build
ListKind: TypeAlias = Literal["singly", "doubly"]
