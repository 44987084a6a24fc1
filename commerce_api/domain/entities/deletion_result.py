"""Outcome of a delete operation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DeletionResult:
    """Delete operations report absence through this result instead of raising.

    ``deleted`` is False when nothing matched; ``message`` is suitable for
    returning to the caller verbatim.
    """

    deleted: bool
    message: str
