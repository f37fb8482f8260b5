"""Exception classes for tailchain."""


class TailChainError(Exception):
    """Base exception for all tailchain errors."""


class StaleNodeError(TailChainError):
    """Raised when a released or unknown node handle is dereferenced or released."""


class InvariantViolationError(TailChainError):
    """Raised by check_invariants() when the chain, tail cache or count disagree."""
