"""
Conversion between dense arrays and jagged nested lists.

to_jagged() turns an array into nested lists, by default trimming the
trailing default cells each list would carry:

    >>> from dense.arr import DenseArray
    >>> to_jagged(DenseArray([3, 3], [1, 0, 0, 2, 3, 0, 0, 0, 0]))
    [[1], [2, 3], []]

from_jagged() goes the other way, padding short lists with the default:

    >>> from_jagged([[1], [2, 3], []]).tolist()
    [[1, 0], [2, 3], [0, 0]]
"""
import logging
from typing import Any, Optional, Sequence

from bitarray import bitarray
import numpy as np

from dense.arr import AXIS_NAMES, MAX_RANK, DenseArray, decode
from dense.checks import check_not_none, check_range
from dense.errors import InvalidRangeError

logger = logging.getLogger(__name__)

def _is_list(node: Any) -> bool:
    return isinstance(node, (list, tuple))

def _keep(mask: bitarray) -> int:
    """
    Length of the prefix that ends at the last set bit.

    >>> _keep(bitarray('0110100'))
    5
    >>> _keep(bitarray('000'))
    0
    """
    hits = list(mask.search(bitarray([True])))
    return hits[-1] + 1 if hits else 0

def to_jagged(source: DenseArray, trim: bool = True) -> list:
    """
    Nested lists, one level per axis. With trim, every innermost list drops
    its trailing run of default values and every intermediate list drops its
    trailing run of children that hold nothing but defaults. The outermost
    list of a rank 2 or higher array keeps all its entries. Defaults in the
    interior are never removed.
    """
    check_not_none(source, 'source')
    nested = source.tolist()
    if not trim:
        return nested

    default = source.default
    if source.rank == 1:
        return _trim(nested, 1, default)
    return [_trim(cell, source.rank-1, default) for cell in nested]

def _trim(node: list, depth: int, default: Any) -> list:
    if depth == 1:
        mask = bitarray([v != default for v in node])
        return node[:_keep(mask)]

    children = [_trim(child, depth-1, default) for child in node]
    mask = bitarray([len(child) > 0 for child in children])
    return children[:_keep(mask)]

def from_jagged(source: Sequence, shape: Optional[Sequence[int]] = None, dtype: Any = None) -> DenseArray:
    """
    Build a dense array from nested lists. Without a shape, the rank is the
    nesting depth and each extent is the longest list seen at that depth; a
    None child counts as an empty list. A given shape crops longer lists and
    pads shorter ones. Cells no list reaches hold the default value.
    """
    check_not_none(source, 'source')

    if shape is None:
        depth = _depth(source)
        if depth > MAX_RANK:
            raise InvalidRangeError('source.rank', depth, 1, MAX_RANK)
        extents = [0]*depth
        _measure(source, 0, extents)
        for name, n in zip(AXIS_NAMES[depth], extents):
            check_range(n, 1, None, name)
        shape = extents
    else:
        shape = list(shape)
        check_range(len(shape), 1, MAX_RANK, 'shape')
        for name, n in zip(AXIS_NAMES[len(shape)], shape):
            check_range(n, 1, None, name)
        depth = len(shape)
        nesting = _depth(source)
        if nesting > depth:
            raise InvalidRangeError('shape', depth, nesting, MAX_RANK)

    if dtype is None:
        leaves: list = []
        _leaves(source, 0, depth, leaves)
        dtype = np.asarray(leaves).dtype if leaves else np.dtype(float)

    logger.debug("from_jagged: depth %d, shape %s, dtype %s", depth, shape, dtype)

    result = DenseArray.blank(shape, dtype)
    _fill(source, 0, [], result)
    return result

def _depth(node: Any) -> int:
    """
    Nesting depth, taken along the deepest branch.

    >>> _depth([[1, 2], None, [3]])
    2
    >>> _depth([])
    1
    """
    inner = [_depth(child) for child in node if _is_list(child)]
    return 1 + max(inner, default=0)

def _measure(node: Sequence, level: int, extents: list[int]) -> None:
    extents[level] = max(extents[level], len(node))
    if level + 1 == len(extents):
        return
    for child in node:
        if _is_list(child):
            _measure(child, level+1, extents)

def _leaves(node: Sequence, level: int, depth: int, out: list) -> None:
    for child in node:
        if child is None:
            continue
        if level + 1 == depth:
            out.append(child)
        elif _is_list(child):
            _leaves(child, level+1, depth, out)

def _fill(node: Sequence, level: int, prefix: list[int], result: DenseArray) -> None:
    last = level + 1 == result.rank
    for i, child in enumerate(node[:result.shape[level]]):
        if child is None:
            continue
        if last:
            result.data[decode(result.shape, prefix+[i])] = child
        elif _is_list(child):
            _fill(child, level+1, prefix+[i], result)

if __name__ == "__main__":
    import doctest
    doctest.testmod()
