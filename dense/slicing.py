"""
Slice and Fuse.

slice_array() breaks a rank-n array into its rank n-1 major cells along the
leading axis; fuse() stacks such cells back up. Both work on fixed-width
element types only, as each cell is moved with a single block copy.

    >>> from dense.arr import DenseArray
    >>> m = DenseArray([2, 3], [1, 2, 3, 4, 5, 6])
    >>> [c.tolist() for c in slice_array(m)]
    [[1, 2, 3], [4, 5, 6]]
    >>> fuse(slice_array(m)) == m
    True
"""
import math
from typing import Generator, Iterable

import numpy as np

from dense.arr import MAX_RANK, DenseArray, copy_block
from dense.checks import check_fixed_width, check_not_none, check_rank
from dense.errors import InvalidRangeError, NullArgumentError

def slice_array(source: DenseArray) -> Generator[DenseArray, None, None]:
    """
    Lazily yield the major cells of source: rows of a matrix, sheets of a
    rank-3 array, cubes of a rank-4 array.

    Arguments are checked on the call itself; only the copying is deferred.
    """
    check_not_none(source, 'source')
    check_rank(source, range(2, MAX_RANK+1))
    check_fixed_width(source, 'slice_array')
    return source.major_cells()

def fuse(source: Iterable[DenseArray]) -> DenseArray:
    """
    Stack a sequence of equal-rank arrays into one array of rank + 1.

    The extent of each trailing axis is the largest seen across all items, so
    ragged input is accepted: an item smaller than the largest leaves the rest
    of its row at the default value.
    """
    check_not_none(source, 'source')
    items = list(source)
    if not items:
        raise NullArgumentError('source')

    for item in items:
        check_not_none(item, 'source')

    rank = items[0].rank
    check_rank(items[0], range(1, MAX_RANK))
    for item in items:
        if item.rank != rank:
            raise InvalidRangeError('source.rank', item.rank, rank, rank)
        check_fixed_width(item, 'fuse')

    cell_shape = [max(dims) for dims in zip(*(item.shape for item in items))]
    dtype = np.result_type(*(item.dtype for item in items))
    return _stack(items, cell_shape, dtype)

def _fuse_any(items: Iterable[DenseArray]) -> DenseArray:
    """
    fuse() without the checks or the element type restriction. Used by resize,
    which also runs on object arrays.
    """
    items = list(items)
    cell_shape = [max(dims) for dims in zip(*(item.shape for item in items))]
    dtype = np.result_type(*(item.dtype for item in items))
    return _stack(items, cell_shape, dtype)

def _stack(items: list[DenseArray], cell_shape: list[int], dtype: np.dtype) -> DenseArray:
    result = DenseArray.blank([len(items)]+cell_shape, dtype)
    cell_size = math.prod(cell_shape)
    for i, item in enumerate(items):
        if item.shape == cell_shape: # Whole cell in one block
            result.data[i*cell_size:(i+1)*cell_size] = item.data
        else:
            copy_block(item.data, [1]+item.shape, [0]*(item.rank+1),
                       result.data, result.shape, [i]+[0]*item.rank,
                       [1]+item.shape)
    return result
