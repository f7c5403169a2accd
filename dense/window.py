"""
Window extraction: circular_shift() slides a fixed-size window over an array,
split() tiles it. Windows never hang over an edge; a window that does not fit
is never produced.

    >>> from dense.arr import V
    >>> [w.tolist() for w in circular_shift(V([1, 2, 3, 4, 5]), 3)]
    [[1, 2, 3], [2, 3, 4], [3, 4, 5]]
    >>> [w.tolist() for w in split(V([1, 2, 3, 4, 5, 6]), 2)]
    [[1, 2], [3, 4], [5, 6]]
"""
import itertools
import numbers
from typing import Generator, Sequence

from dense.arr import AXIS_NAMES, DenseArray, copy_block
from dense.checks import check_not_none, check_range
from dense.errors import InvalidRangeError

def _per_axis(value: int|Sequence[int], rank: int, name: str) -> list[int]:
    """
    Broadcast a scalar to every axis, or check a per-axis list has one entry
    per axis.
    """
    if isinstance(value, numbers.Integral):
        return [int(value)]*rank
    value = list(value)
    if len(value) != rank:
        raise InvalidRangeError(name, len(value), rank, rank)
    return value

def circular_shift(source: DenseArray, size: int|Sequence[int], step: int|Sequence[int] = 1) -> Generator[DenseArray, None, None]:
    """
    Lazily yield every size-shaped window of source, advancing by step along
    each axis. The leading axis varies slowest.

    Sizes and steps must each lie in [1, axis length]. They are checked on the
    call itself, before the first window is requested.
    """
    check_not_none(source, 'source')
    check_not_none(size, 'size')
    check_not_none(step, 'step')

    names = AXIS_NAMES[source.rank]
    sizes = _per_axis(size, source.rank, 'size')
    steps = _per_axis(step, source.rank, 'step')

    for name, n, length in zip(names, sizes, source.shape):
        check_range(n, 1, length, name)
    for name, n, length in zip(names, steps, source.shape):
        check_range(n, 1, length, f'{name}_step')

    return _windows(source, sizes, steps)

def split(source: DenseArray, size: int|Sequence[int]) -> Generator[DenseArray, None, None]:
    """
    Non-overlapping tiling: each window starts where the previous one ended.
    """
    return circular_shift(source, size, size)

def _windows(source: DenseArray, sizes: list[int], steps: list[int]) -> Generator[DenseArray, None, None]:
    starts = [range(0, length-n+1, s) for length, n, s in zip(source.shape, sizes, steps)]
    for origin in itertools.product(*starts):
        window = DenseArray.blank(sizes, source.dtype)
        copy_block(source.data, source.shape, origin,
                   window.data, sizes, [0]*source.rank,
                   sizes)
        yield window
