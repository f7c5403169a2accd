"""
Trend-preserving resize.

A vector grows by linear interpolation between neighbouring cells, and shrinks
by box downsampling: each output cell is the area-weighted mean of the source
cells it covers, so peaks and slopes survive where naive decimation would
alias them.

    >>> from dense.arr import V
    >>> resize(V([0.0, 10.0]), 3).tolist()
    [0.0, 5.0, 10.0]
    >>> resize(V([0.0, 2.0, 4.0, 6.0, 8.0, 10.0]), 3).tolist()
    [1.0, 5.0, 9.0]

Float arrays use native arithmetic. Any other element type resizes through a
NumericOps bundle supplying add, subtract, scale-by-a-real and
divide-by-a-real. With REAL_OPS the generic path gives the same numbers as the
float path: both accumulate in the same order.

Higher ranks resize one axis at a time. The array is sliced down to vectors,
each vector is resized, the pieces are fused back, and a rotation brings the
next axis into the innermost position.
"""
from dataclasses import dataclass
from fractions import Fraction
import logging
import numbers
import operator
from typing import Any, Callable, Optional, Sequence

from dense.arr import AXIS_NAMES, DenseArray
from dense.checks import check_not_none, check_range
from dense.errors import InvalidRangeError
from dense.rotate import RotateAxis, rotate
from dense.slicing import _fuse_any

logger = logging.getLogger(__name__)

# Positions this close to a cell boundary count as on the boundary
CLOSE_TOLERANCE = 1e-6

@dataclass(frozen=True)
class NumericOps:
    add: Callable[[Any, Any], Any]          # x + y
    subtract: Callable[[Any, Any], Any]     # x - y
    scale: Callable[[Any, float], Any]      # x * real
    divide: Callable[[Any, float], Any]     # x / real

REAL_OPS = NumericOps(operator.add, operator.sub, operator.mul, operator.truediv)

# Exact rational arithmetic; the real weights are converted without rounding.
FRACTION_OPS = NumericOps(
    operator.add,
    operator.sub,
    lambda x, w: x * Fraction(w),
    lambda x, w: x / Fraction(w),
)

def _is_close(a: float, b: float) -> bool:
    return a + CLOSE_TOLERANCE > b and a - CLOSE_TOLERANCE < b

def _close_cell(pos: float) -> Optional[int]:
    """
    The source cell pos sits on, if any.
    """
    nearest = round(pos)
    return nearest if _is_close(pos, nearest) else None

def resize(source: DenseArray, size: int|Sequence[int], ops: Optional[NumericOps] = None) -> DenseArray:
    """
    Resize source to the given per-axis size; a rank 1 array takes a plain int.

    Float arrays need no ops. For any other element type, or to force the
    generic path, pass a NumericOps.
    """
    check_not_none(source, 'source')
    check_not_none(size, 'size')

    if isinstance(size, numbers.Integral):
        sizes = [int(size)]
    else:
        sizes = list(size)
    if len(sizes) != source.rank:
        raise InvalidRangeError('size', len(sizes), source.rank, source.rank)

    names = ('new_size',) if source.rank == 1 else AXIS_NAMES[source.rank]
    for name, n in zip(names, sizes):
        check_range(n, 1, None, name)

    if ops is None and source.dtype.kind != 'f':
        check_not_none(ops, 'ops')

    if ops is None:
        def line(v: DenseArray, new_size: int) -> DenseArray:
            return DenseArray([new_size], _resize_float(v.data.tolist(), new_size), source.dtype)
    else:
        keep = source.dtype if source.dtype.kind == 'O' else None
        def line(v: DenseArray, new_size: int) -> DenseArray:
            return DenseArray([new_size], _resize_generic(v.data.tolist(), new_size, ops), keep)

    logger.debug("resize %s -> %s (%s path)", source.shape, sizes, 'float' if ops is None else 'generic')
    return _resize(source, sizes, line)

def _resize(source: DenseArray, sizes: list[int], line: Callable) -> DenseArray:
    if source.shape == sizes:
        return source.copy()

    if source.rank == 1:
        return line(source, sizes[0])

    if source.rank == 2:
        y, x = sizes
        result = _map_lines(source, x, line)
        result = rotate(result, 270)
        result = _map_lines(result, y, line)
        return rotate(result, 90)

    if source.rank == 3:
        z = sizes[0]
        result = _fuse_any(_resize(sheet, sizes[1:], line) for sheet in source.major_cells())
        result = rotate(result, -90, RotateAxis.Y)
        result = _map_lines(result, z, line)
        return rotate(result, 90, RotateAxis.Y)

    a = sizes[0]
    result = _fuse_any(_resize(cube, sizes[1:], line) for cube in source.major_cells())
    result = rotate(result, 90, RotateAxis.Y)
    result = _map_lines(result, a, line)
    return rotate(result, -90, RotateAxis.Y)

def _map_lines(source: DenseArray, new_size: int, line: Callable) -> DenseArray:
    """
    Resize every innermost row of source to new_size.
    """
    if source.rank == 1:
        return line(source, new_size)
    return _fuse_any(_map_lines(cell, new_size, line) for cell in source.major_cells())

def _resize_float(values: list[float], new_size: int) -> list[float]:
    size = len(values)
    if new_size == size:
        return list(values)

    out = [0.0]*new_size
    if size < new_size: # Expand
        bound = size - 1
        new_bound = new_size - 1
        for x in range(new_size):
            pos = x * bound / new_bound
            cell = _close_cell(pos)
            if cell is not None:
                out[x] = values[cell]
            else:
                left = int(pos)
                out[x] = values[left] + (values[left+1] - values[left]) * (pos - left)
    else:               # Shrink
        ratio = size / new_size
        for x in range(new_size):
            start1 = ratio * x
            end1 = start1 + ratio
            start = int(start1)
            end = int(end1)
            acc = 0.0

            if not _is_close(start1, start):
                acc += values[start] * (1 - (start1 - start))
                start += 1

            if not _is_close(end1, end) and end < size:
                acc += values[end] * (end1 - end)

            for i in range(start, end):
                acc += values[i]

            out[x] = acc / ratio

    return out

def _resize_generic(values: list, new_size: int, ops: NumericOps) -> list:
    size = len(values)
    if new_size == size:
        return list(values)

    def plus(acc: Any, v: Any) -> Any:
        return v if acc is None else ops.add(acc, v)

    out: list = [None]*new_size
    if size < new_size: # Expand
        bound = size - 1
        new_bound = new_size - 1
        for x in range(new_size):
            pos = x * bound / new_bound
            cell = _close_cell(pos)
            if cell is not None:
                out[x] = values[cell]
            else:
                left = int(pos)
                out[x] = ops.add(values[left], ops.scale(ops.subtract(values[left+1], values[left]), pos - left))
    else:               # Shrink
        ratio = size / new_size
        for x in range(new_size):
            start1 = ratio * x
            end1 = start1 + ratio
            start = int(start1)
            end = int(end1)
            acc = None

            if not _is_close(start1, start):
                acc = plus(acc, ops.scale(values[start], 1 - (start1 - start)))
                start += 1

            if not _is_close(end1, end) and end < size:
                acc = plus(acc, ops.scale(values[end], end1 - end))

            for i in range(start, end):
                acc = plus(acc, values[i])

            out[x] = ops.divide(acc, ratio)

    return out

if __name__ == "__main__":
    import doctest
    doctest.testmod()
