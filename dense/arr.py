import itertools
import math
from typing import Any, Callable, Generator, Iterable, Iterator, Optional, Sequence

import numpy as np

from dense.checks import check_not_none, check_range
from dense.errors import InvalidRangeError

MAX_RANK = 4

# Axis names, outermost first. These are also the parameter names used in
# range errors, e.g. 'y', 'x_step', 'z_offset'.
AXIS_NAMES = {
    1: ('x',),
    2: ('y', 'x'),
    3: ('z', 'y', 'x'),
    4: ('a', 'z', 'y', 'x'),
}

def strides(shape: Sequence[int]) -> list[int]:
    """
    Row-major strides: the last axis varies fastest.

    >>> strides([2, 3, 4])
    [12, 4, 1]
    """
    r = [1]*len(shape)
    for i in range(len(shape)-2, -1, -1):
        r[i] = r[i+1] * shape[i+1]
    return r

def default_value(dtype: Any) -> Any:
    """
    The value a freshly allocated cell holds: zero for fixed-width types,
    empty for strings, None for everything else.
    """
    dtype = np.dtype(dtype)
    if dtype.kind in "biufc":
        return np.zeros((), dtype=dtype).item()
    if dtype.kind == "U":
        return ""
    if dtype.kind == "S":
        return b""
    return None

def _scalar(v: Any) -> Any:
    return v.item() if isinstance(v, np.generic) else v

class DenseArray:
    """
    A DenseArray has an integer-valued shape vector of rank 1 to 4 and a flat,
    row-major data buffer holding bound = prod(shape) items. The element at
    coords (i0, ..., ir-1) lives at offset sum(ik * stride_k).

    The buffer is a one-dimensional numpy array; its dtype is the element type.
    """
    def __init__(self, shape: Sequence[int], data: Any, dtype: Any = None) -> None:
        shape = list(shape)
        check_range(len(shape), 1, MAX_RANK, 'shape')
        for name, dim in zip(AXIS_NAMES[len(shape)], shape):
            check_range(dim, 1, None, name)

        buf = np.asarray(data, dtype=dtype).reshape(-1)
        bound = math.prod(shape)
        if buf.size != bound:
            raise InvalidRangeError('data', buf.size, bound, bound)

        self.shape = shape
        self.rank = len(shape)
        self.bound = bound
        self.data = buf

    @classmethod
    def blank(cls, shape: Sequence[int], dtype: Any = float) -> 'DenseArray':
        """
        New array of the given shape with every cell at the dtype's default.
        """
        dtype = np.dtype(dtype)
        return cls(shape, np.full(math.prod(shape), default_value(dtype), dtype=dtype))

    @property
    def dtype(self) -> np.dtype:
        return self.data.dtype

    @property
    def strides(self) -> list[int]:
        return strides(self.shape)

    @property
    def default(self) -> Any:
        return default_value(self.dtype)

    def get(self, coords: Sequence[int]|int) -> Any:
        """
        Get item at coords.
        """
        if isinstance(coords, int):
            coords = [coords]
        if len(coords) != self.rank:
            raise IndexError(f"expected {self.rank} coordinates, got {len(coords)}")
        return _scalar(self.data[_ravel_index(self.shape, coords)])

    def __getitem__(self, coords: Sequence[int]|int) -> Any:
        return self.get(coords)

    def __iter__(self) -> Iterator:
        """
        Flat, row-major iteration over the items.
        """
        return iter(self.data.tolist())

    def __len__(self) -> int:
        return self.shape[0]

    def tolist(self) -> list:
        return self.data.reshape(self.shape).tolist()

    def copy(self) -> 'DenseArray':
        return DenseArray(self.shape[:], self.data.copy())

    def major_cells(self) -> Generator['DenseArray', None, None]:
        """
        Generator. An array's major cells are the cells along the leading axis,
        each copied out of the buffer in one go. Works for any element type.
        """
        if self.rank < 2:
            raise InvalidRangeError('source.rank', self.rank, 2, MAX_RANK)

        size = math.prod(self.shape[1:])
        for i in range(self.shape[0]):
            yield DenseArray(self.shape[1:], self.data[i*size:(i+1)*size].copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DenseArray):
            return NotImplemented
        return match(self, other)

    __hash__ = None # type: ignore

    def __repr__(self) -> str:
        return str(self)

    def __str__(self) -> str:
        if self.rank == 1:
            return f"V({self.shape}, {self.data.tolist()})"
        return f"A({self.shape}, {self.data.tolist()})"

# Convenience pseudo-constructor
def V(data: Sequence, dtype: Any = None) -> DenseArray:
    return DenseArray([len(data)], data, dtype)

def coords(shape: Sequence[int]) -> Generator[list[int], None, None]:
    """
    Generator. Step through the space defined by the shape, generating
    each coordinate vector in turn.

    >>> list(coords([2, 3]))
    [[0, 0], [0, 1], [0, 2], [1, 0], [1, 1], [1, 2]]
    >>> list(coords([]))
    [[]]
    """
    for c in itertools.product(*(range(n) for n in shape)):
        yield list(c)

def decode(shape: Sequence[int], coords: Sequence[int]) -> int:
    """
    Offset into the flat buffer of the item at coords.

    >>> decode([2, 3, 4], [1, 2, 3])
    23
    """
    return sum(c*s for c, s in zip(coords, strides(shape)))

def copy_block(src: np.ndarray, src_shape: Sequence[int], src_origin: Sequence[int],
               dst: np.ndarray, dst_shape: Sequence[int], dst_origin: Sequence[int],
               extent: Sequence[int]) -> None:
    """
    Copy an extent-shaped block from the flat buffer src into the flat buffer
    dst. Origins are per-axis offsets into the respective shapes. Each innermost
    row is one slice assignment; the outer axes are walked with coords().

    All four shapes must have the same rank, and the block must fit inside both
    buffers. Callers validate that.
    """
    sst = strides(src_shape)
    dst_st = strides(dst_shape)
    row = extent[-1]

    src_base = sum(o*s for o, s in zip(src_origin, sst))
    dst_base = sum(o*s for o, s in zip(dst_origin, dst_st))

    for c in coords(extent[:-1]):
        so = src_base + sum(ci*si for ci, si in zip(c, sst))
        do = dst_base + sum(ci*di for ci, di in zip(c, dst_st))
        dst[do:do+row] = src[so:so+row]

def from_sequence(values: Iterable, shape: Sequence[int], dtype: Any = None) -> DenseArray:
    """
    Lay out a flat sequence as an array of the given shape. Surplus items are
    dropped; missing items leave their cells at the default value.

    >>> from_sequence(range(5), [2, 3]).tolist()
    [[0, 1, 2], [3, 4, 0]]
    """
    check_not_none(values, 'values')
    shape = list(shape)
    check_range(len(shape), 1, MAX_RANK, 'shape')
    for name, dim in zip(AXIS_NAMES[len(shape)], shape):
        check_range(dim, 1, None, name)

    bound = math.prod(shape)
    items = list(itertools.islice(values, bound))
    if dtype is None:
        dtype = np.asarray(items).dtype if items else np.dtype(float)

    result = DenseArray.blank(shape, dtype)
    if items:
        result.data[:len(items)] = np.asarray(items, dtype=result.dtype)
    return result

def match(a: DenseArray, w: DenseArray) -> bool:
    """
    Exact equality: same shape, and equal items in the same positions.
    """
    if a.shape != w.shape:
        return False
    return bool(np.array_equal(a.data, w.data))

def array_equals(a: DenseArray, w: DenseArray, comparer: Optional[Callable[[Any, Any], bool]] = None) -> bool:
    """
    Shape-and-item equality through an optional comparer, e.g. a DoubleComparer
    to ignore floating point noise. Without a comparer, items compare with ==.
    """
    check_not_none(a, 'source')
    check_not_none(w, 'other')

    if a.shape != w.shape:
        return False

    if comparer is None:
        return match(a, w)

    return all(comparer(x, y) for x, y in zip(a, w))

# Private helpers
def _ravel_index(shape: Sequence[int], coords: Sequence[int]) -> int:
    if any(not 0 <= c < n for c, n in zip(coords, shape)):
        raise IndexError(f"coordinates {list(coords)} out of bounds for shape {list(shape)}")
    return decode(shape, coords)

if __name__ == "__main__":
    import doctest
    doctest.testmod()
