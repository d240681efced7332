from __future__ import annotations

from collections.abc import Sized

INVALID_LIST_SIZE = "invalid list size"


class InvalidInputError(ValueError):
    """Raised when a sorter is handed an empty sequence."""

    def __init__(self, message: str = INVALID_LIST_SIZE, *, length: int | None = None) -> None:
        super().__init__(message)
        self.length = length


def check_size(a: Sized) -> int:
    n = len(a)
    if n < 1:
        raise InvalidInputError(length=n)
    return n
