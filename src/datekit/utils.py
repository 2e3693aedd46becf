"""Common utility functions for datekit."""

from typing import Sequence, TypeVar

T = TypeVar("T")


def element_at(sequence: Sequence[T], index: int) -> T | None:
    """Get sequence[index] if 0 <= index < len(sequence), else None.

    Negative indexes are out of bounds rather than counting from the end.
    """
    if 0 <= index < len(sequence):
        return sequence[index]
    return None
