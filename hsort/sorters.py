from __future__ import annotations

from collections.abc import MutableSequence
from typing import Callable

from hsort.bottom_up import merge_int_optimized
from hsort.errors import check_size

Sorter = Callable[[MutableSequence[int]], None]

# 75% fill keeps the chains short
HASH_TABLE_FILL = 1.33


def insertion_int(arr: MutableSequence[int]) -> None:
    check_size(arr)

    for i in range(1, len(arr)):
        x = arr[i]
        j = i - 1
        while j >= 0 and arr[j] > x:
            arr[j + 1] = arr[j]
            j -= 1
        arr[j + 1] = x


def selection_int(arr: MutableSequence[int]) -> None:
    n = check_size(arr)

    for i in range(n):
        pos = i
        for j in range(i + 1, n):
            if arr[j] < arr[pos]:
                pos = j
        arr[i], arr[pos] = arr[pos], arr[i]


def merge_int(arr: MutableSequence[int]) -> None:
    """
    Top-down merge sort without recursion.

    Blocks are ``(index, length, merge)`` triples on an explicit stack. An
    unsplit block goes back on the stack flagged for merging, followed by
    its two halves; by the time the flagged block is popped again both
    halves are sorted and get merged through ``tmp``.
    """
    n = check_size(arr)

    tmp = [0] * n
    stack = [(0, n, False)]
    stack_append = stack.append
    stack_pop = stack.pop

    while stack:
        index, length, merge = stack_pop()

        l = index
        l_len = length // 2
        r = index + l_len
        r_len = length - l_len

        if not merge:
            stack_append((index, length, True))
            if l_len > 1:
                stack_append((l, l_len, False))
            if r_len > 1:
                stack_append((r, r_len, False))
            continue

        for k in range(length):
            if l_len == 0:
                tmp[k] = arr[r]
                r += 1
            elif r_len == 0:
                tmp[k] = arr[l]
                l += 1
            elif arr[l] < arr[r]:
                tmp[k] = arr[l]
                l += 1
                l_len -= 1
            else:
                tmp[k] = arr[r]
                r += 1
                r_len -= 1

        for k in range(length):
            arr[index + k] = tmp[k]


def hash_int(arr: MutableSequence[int]) -> None:
    """
    Bucket sort through a chained hash table keyed on ``value % size``.

    Runs in time linear in the input length *and* in the value range
    (``max - min``), so it only pays off for narrow ranges.
    """
    n = check_size(arr)

    size = int(n * HASH_TABLE_FILL)

    low = high = arr[0]
    table: list[list[int]] = [[] for _ in range(size)]
    for x in arr:
        if x < low:
            low = x
        elif x > high:
            high = x
        table[x % size].append(x)

    idx = 0
    for v in range(low, high + 1):
        for x in table[v % size]:
            if x == v:
                arr[idx] = x
                idx += 1


SORTERS: dict[str, Sorter] = {
    "insertion": insertion_int,
    "selection": selection_int,
    "merge": merge_int,
    "merge_optimized": merge_int_optimized,
    "hash": hash_int,
}

# O(n^2) in the input length
QUADRATIC = ("insertion", "selection")


def get_sorter(name: str) -> Sorter:
    try:
        return SORTERS[name]
    except KeyError:
        raise KeyError(f"unknown sorter {name!r}, expected one of: {', '.join(SORTERS)}") from None
