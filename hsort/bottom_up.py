"""
Bottom-up merge sort with a single scratch buffer.

The top-down variant in ``hsort.sorters`` splits the list into a tree of
blocks before merging back up. This one skips the split entirely: it starts
from runs of length 1 and merges neighbouring runs pass by pass, doubling
the run length each time, until one run covers the whole list.

Terms used below:

- a *stack* is a sorted run of ``stack_size`` items;
- a *block* is two neighbouring stacks being merged, ``2 * stack_size``
  items, except that the last block of a pass may be cut short by the end
  of the list.
"""

from __future__ import annotations

from collections.abc import MutableSequence

from hsort.errors import check_size


def _merge_block(
    a: MutableSequence[int],
    tmp: list[int],
    index: int,
    stack_size: int,
    block_size: int,
) -> None:
    left = index
    left_len = stack_size

    right = index + stack_size
    right_len = block_size - stack_size

    for j in range(block_size):
        if left_len == 0:
            tmp[j:block_size] = a[right:right + right_len]
            break
        if right_len == 0:
            tmp[j:block_size] = a[left:left + left_len]
            break

        # ties go to the right stack
        if a[left] < a[right]:
            tmp[j] = a[left]
            left += 1
            left_len -= 1
        else:
            tmp[j] = a[right]
            right += 1
            right_len -= 1

    for k in range(block_size):
        a[index + k] = tmp[k]


def merge_int_optimized(a: MutableSequence[int]) -> None:
    """
    Sort *a* ascending in place.

    Raises
    ------
    InvalidInputError
        If *a* is empty. Nothing is written in that case.
    """
    n = check_size(a)

    tmp = [0] * n

    stack_size = 1
    while stack_size < n:
        block_size = stack_size * 2
        # One more block than fits fully: the last one may be short or empty.
        num_blocks = n // block_size + 1

        for i in range(num_blocks):
            index = block_size * i
            size = block_size
            if i == num_blocks - 1:
                size = n - index
                if size <= stack_size:
                    # nothing on the right, already sorted by the last pass
                    break

            _merge_block(a, tmp, index, stack_size, size)

        stack_size *= 2
