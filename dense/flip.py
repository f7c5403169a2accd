"""
Reflections. Only a vector is reversed directly; every other flip is built
from slice_array(), fuse() and rotate():

    X  - reverse every row
    Y  - rotate a quarter turn, flip X, rotate back
    Z  - the same about the Y axis of a rank 3 array
    A  - reverse the order of the cubes of a rank 4 array

Flags combine, e.g. FlipAxis.X | FlipAxis.Z.
"""
from enum import Flag
from typing import Union

from dense.arr import DenseArray
from dense.checks import check_fixed_width, check_not_none, check_rank
from dense.errors import InvalidAxisError
from dense.rotate import RotateAxis, rotate
from dense.slicing import fuse, slice_array

class FlipAxis(Flag):
    NONE = 0
    X = 1
    Y = 2
    XY = 3
    Z = 4
    XZ = 5
    YZ = 6
    XYZ = 7
    A = 8

# Largest valid flag value per rank
_MAX_FLAG = {1: 1, 2: 3, 3: 7, 4: 15}

def flip(source: DenseArray, axis: Union[FlipAxis, int] = FlipAxis.X) -> DenseArray:
    """
    Reflect source along the flagged axes and return the result as a new array.

    >>> from dense.arr import DenseArray
    >>> flip(DenseArray([2, 3], [1, 2, 3, 4, 5, 6]), FlipAxis.Y).tolist()
    [[4, 5, 6], [1, 2, 3]]
    """
    check_not_none(source, 'source')
    check_rank(source, (1, 2, 3, 4))
    check_not_none(axis, 'axis')

    value = axis.value if isinstance(axis, FlipAxis) else axis
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _MAX_FLAG[source.rank]:
        raise InvalidAxisError(axis, source.rank)
    axis = FlipAxis(value)

    if source.rank > 1:
        check_fixed_width(source, 'flip')

    if source.rank == 1:
        return _reverse(source) if FlipAxis.X in axis else source.copy()

    if source.rank == 4:
        return _flip4(source, axis)

    result = source
    if FlipAxis.X in axis:
        result = fuse(flip(cell, FlipAxis.X) for cell in slice_array(result))
    if FlipAxis.Y in axis:
        if source.rank == 2:
            result = rotate(flip(rotate(result, 90), FlipAxis.X), -90)
        else:
            result = rotate(flip(rotate(result, 90, RotateAxis.Z), FlipAxis.X), -90, RotateAxis.Z)
    if FlipAxis.Z in axis:
        result = rotate(flip(rotate(result, 90, RotateAxis.Y), FlipAxis.X), -90, RotateAxis.Y)

    return source.copy() if result is source else result

def _flip4(source: DenseArray, axis: FlipAxis) -> DenseArray:
    inner = axis & FlipAxis.XYZ
    result = source
    if inner:
        result = fuse(flip(cube, inner) for cube in slice_array(result))
    if FlipAxis.A in axis:
        result = fuse(reversed(list(slice_array(result))))

    return source.copy() if result is source else result

def _reverse(source: DenseArray) -> DenseArray:
    return DenseArray(source.shape[:], source.data[::-1].copy())
