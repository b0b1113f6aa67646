"""Compact a disk map and compute the filesystem checksum."""

from typing import NamedTuple

_DIGITS = "0123456789"


def _digit(char: str | None) -> int:
    if char is None:
        raise ValueError("disk map ended unexpectedly")
    if char not in _DIGITS or len(char) != 1:
        raise ValueError(f"not a digit: {char!r}")
    return int(char)


def _block_sum(start: int, length: int, file_id: int) -> int:
    return sum(position * file_id for position in range(start, start + length))


def part1(inp: str) -> int:
    """Checksum after moving file blocks one at a time into the leftmost gaps."""
    length = len(inp)
    back_id = (length - 1) // 2
    back_counter = 0
    from_back = reversed(inp)
    if length % 2 == 0:
        next(from_back, None)

    checksum = 0
    position = 0
    leftover = 0

    for index, char in enumerate(inp.strip()):
        back_index = length - back_counter - 1
        if back_index < index:
            break
        if back_index == index:
            if leftover > 0:
                checksum += _block_sum(position, leftover, back_id)
            break
        size = _digit(char)
        if index % 2 == 0:
            checksum += _block_sum(position, size, index // 2)
            position += size
            continue
        free = size
        while free > 0:
            if length - back_counter - 1 <= index:
                break
            file_size = leftover if leftover > 0 else _digit(next(from_back, None))
            if file_size > free:
                checksum += _block_sum(position, free, back_id)
                position += free
                leftover = file_size - free
                free = 0
            else:
                checksum += _block_sum(position, file_size, back_id)
                position += file_size
                back_counter += 2
                leftover = 0
                free -= file_size
                back_id -= 1
                next(from_back, None)
    return checksum


class _Span(NamedTuple):
    size: int
    free: bool
    file_id: int


def part2(inp: str) -> int:
    """Checksum after moving whole files into the leftmost gap that fits them."""
    length = len(inp)
    back_id = (length - 1) // 2
    back_index = length - 1
    if length % 2 == 0:
        back_index -= 1

    digits = inp.strip()
    sizes = [_digit(char) for char in digits]
    spans = [
        _Span(size, index % 2 == 1, index // 2 if index % 2 == 0 else -1)
        for index, size in enumerate(sizes)
    ]

    for index in range(back_index, -1, -1):
        if index % 2:
            continue
        file_size = sizes[index]
        target = None
        own = None
        for i, span in enumerate(spans):
            if span.file_id == back_id:
                own = i
                break
            if span.free and span.size >= file_size and target is None:
                target = i
        if target is not None:
            if own is None:
                raise ValueError(f"file {back_id} not found on the disk")
            spans[own] = _Span(file_size, True, -1)
            gap = spans[target].size
            spans[target] = _Span(file_size, False, back_id)
            if gap - file_size > 0:
                spans.insert(target + 1, _Span(gap - file_size, True, -1))
        back_id -= 1

    checksum = 0
    position = 0
    for span in spans:
        if not span.free:
            checksum += _block_sum(position, span.size, span.file_id)
        position += span.size
    return checksum