"""
Rectangular region copy.

    >>> from dense.arr import DenseArray
    >>> m = DenseArray.blank([3, 4], int)
    >>> replace(m, DenseArray([2, 2], [1, 2, 3, 4]), [1, 2])
    >>> m.tolist()
    [[0, 0, 0, 0], [0, 0, 1, 2], [0, 0, 3, 4]]
    >>> extract(m, [1, 2], [2, 2]).tolist()
    [[1, 2], [3, 4]]
"""
from typing import Sequence

import numpy as np

from dense.arr import AXIS_NAMES, DenseArray, copy_block
from dense.checks import check_not_none, check_range
from dense.errors import InvalidRangeError, UnsupportedElementTypeError

def _names(rank: int, suffix: str) -> list[str]:
    if rank == 1:
        return [suffix]
    return [f'{name}_{suffix}' for name in AXIS_NAMES[rank]]

def _check_count(values: Sequence[int], rank: int, name: str) -> list[int]:
    values = list(values)
    if len(values) != rank:
        raise InvalidRangeError(name, len(values), rank, rank)
    return values

def replace(dest: DenseArray, new_section: DenseArray, offsets: Sequence[int]) -> None:
    """
    Overwrite the block of dest starting at offsets with new_section. This is
    the only transform that mutates its argument. The section's items must
    fit dest's element type without loss: ints may go into a float array,
    floats may not go into an int array.
    """
    check_not_none(dest, 'dest')
    check_not_none(new_section, 'new_section')
    check_not_none(offsets, 'offsets')
    if new_section.rank != dest.rank:
        raise InvalidRangeError('new_section', new_section.rank, dest.rank, dest.rank)
    if not np.can_cast(new_section.dtype, dest.dtype, 'safe'):
        raise UnsupportedElementTypeError('replace', new_section.dtype, f"items that fit {dest.dtype}")

    offsets = _check_count(offsets, dest.rank, 'offsets')
    for name, off, length, section in zip(_names(dest.rank, 'offset'), offsets, dest.shape, new_section.shape):
        check_range(off, 0, length - section, name)

    copy_block(new_section.data, new_section.shape, [0]*dest.rank,
               dest.data, dest.shape, offsets,
               new_section.shape)

def extract(source: DenseArray, offsets: Sequence[int], lengths: Sequence[int]) -> DenseArray:
    """
    Copy the lengths-shaped block of source starting at offsets into a new
    array.
    """
    check_not_none(source, 'source')
    check_not_none(offsets, 'offsets')
    check_not_none(lengths, 'lengths')

    offsets = _check_count(offsets, source.rank, 'offsets')
    lengths = _check_count(lengths, source.rank, 'lengths')
    for name, n, length in zip(_names(source.rank, 'length'), lengths, source.shape):
        check_range(n, 1, length, name)
    for name, off, n, length in zip(_names(source.rank, 'offset'), offsets, lengths, source.shape):
        check_range(off, 0, length - n, name)

    result = DenseArray.blank(lengths, source.dtype)
    copy_block(source.data, source.shape, offsets,
               result.data, lengths, [0]*source.rank,
               lengths)
    return result
