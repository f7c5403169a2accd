"""
Quarter-turn rotations of rank 2, 3 and 4 arrays.

Every rotation is a permutation of the source axes where some axes are also
read backwards. The tables below spell out, for each (angle, axis) pair, the
destination coordinate vector in terms of the source coordinates; a leading
minus means that axis is reversed (its index runs from the axis bound down).

Rank 2 has a single rotation plane:

    >>> from dense.arr import DenseArray
    >>> rotate(DenseArray([2, 3], [1, 2, 3, 4, 5, 6]), 90).tolist()
    [[4, 1], [5, 2], [6, 3]]

Rank 3 rotates about X, Y or Z with a 360 degree period. Rank 4 rotates about
X, Y, Z or A, and its tables have a 540 degree period: 90 and 450 are
distinct, as are 180 and 360.
"""
from enum import Enum
import logging
import numbers
from typing import Optional

import numpy as np

from dense.arr import DenseArray, coords, decode
from dense.checks import check_not_none, check_rank
from dense.errors import InvalidAngleError, InvalidAxisError

logger = logging.getLogger(__name__)

class RotateAxis(Enum):
    NONE=0
    X=1
    Y=2
    Z=3
    A=4

Table = list[tuple[int, bool]]

def _table(layout: str, letters: str) -> Table:
    """
    Parse a destination layout such as "y -z x" against the source axis letters
    "zyx" into (source axis, reversed) pairs.

    >>> _table("y -z x", "zyx")
    [(1, False), (0, True), (2, False)]
    """
    table = []
    for term in layout.split():
        table.append((letters.index(term.lstrip('-')), term.startswith('-')))
    return table

_RANK2 = {
    90:  _table("x -y", "yx"),
    180: _table("-y -x", "yx"),
    270: _table("-x y", "yx"),
}

_RANK3 = {
    (90, RotateAxis.X):  _table("y -z x", "zyx"),
    (90, RotateAxis.Y):  _table("-x y z", "zyx"),
    (90, RotateAxis.Z):  _table("z x -y", "zyx"),
    (180, RotateAxis.X): _table("-z -y x", "zyx"),
    (180, RotateAxis.Y): _table("-z y -x", "zyx"),
    (180, RotateAxis.Z): _table("z -y -x", "zyx"),
    (270, RotateAxis.X): _table("-y z x", "zyx"),
    (270, RotateAxis.Y): _table("x y -z", "zyx"),
    (270, RotateAxis.Z): _table("z -x y", "zyx"),
}

_RANK4 = {
    (90, RotateAxis.X):  _table("z y -a x", "azyx"),
    (90, RotateAxis.Y):  _table("z x y -a", "azyx"),
    (90, RotateAxis.Z):  _table("y z x -a", "azyx"),
    (90, RotateAxis.A):  _table("a y x -z", "azyx"),
    (180, RotateAxis.X): _table("y -a -z x", "azyx"),
    (180, RotateAxis.Y): _table("x -a y -z", "azyx"),
    (180, RotateAxis.Z): _table("x z -a -y", "azyx"),
    (180, RotateAxis.A): _table("a x -z -y", "azyx"),
    (270, RotateAxis.X): _table("-a -z -y x", "azyx"),
    (270, RotateAxis.Y): _table("-a -z y -x", "azyx"),
    (270, RotateAxis.Z): _table("-a z -y -x", "azyx"),
    (270, RotateAxis.A): _table("a -z -y -x", "azyx"),
    (360, RotateAxis.X): _table("-z -y a x", "azyx"),
    (360, RotateAxis.Y): _table("-z -x y a", "azyx"),
    (360, RotateAxis.Z): _table("-y z -x a", "azyx"),
    (360, RotateAxis.A): _table("a -y -x z", "azyx"),
    (450, RotateAxis.X): _table("-y a z x", "azyx"),
    (450, RotateAxis.Y): _table("-x a y z", "azyx"),
    (450, RotateAxis.Z): _table("-x z a y", "azyx"),
    (450, RotateAxis.A): _table("a -x z y", "azyx"),
}

_VALID_AXES = {
    2: (None, RotateAxis.NONE),
    3: (None, RotateAxis.NONE, RotateAxis.X, RotateAxis.Y, RotateAxis.Z),
    4: (None, RotateAxis.NONE, RotateAxis.X, RotateAxis.Y, RotateAxis.Z, RotateAxis.A),
}

_PERIOD = {2: 360, 3: 360, 4: 540}

def rotate(source: DenseArray, angle: int, axis: Optional[RotateAxis] = None) -> DenseArray:
    """
    Rotate source by angle degrees, a multiple of 90, about axis. Rank 2
    arrays take no axis. A zero angle, or RotateAxis.NONE, returns a copy.

    Negative angles are normalised with Python's modulo, so -90 is 270 for
    ranks 2 and 3, and 450 for rank 4.
    """
    check_not_none(source, 'source')
    check_rank(source, (2, 3, 4))
    if axis not in _VALID_AXES[source.rank]:
        raise InvalidAxisError(axis, source.rank)
    if isinstance(angle, bool) or not isinstance(angle, numbers.Integral) or angle % 90:
        raise InvalidAngleError(angle)

    angle = int(angle) % _PERIOD[source.rank]

    if angle == 0 or (source.rank > 2 and axis in (None, RotateAxis.NONE)):
        return source.copy()

    if source.rank == 2:
        table = _RANK2[angle]
    elif source.rank == 3:
        table = _RANK3[(angle, axis)]
    else:
        table = _RANK4[(angle, axis)]

    logger.debug("rotate rank %d by %d about %s", source.rank, angle, axis)
    return _permute(source, table)

def _permute(source: DenseArray, table: Table) -> DenseArray:
    """
    Move every item to its destination coordinates as given by table. The
    destination shape takes the length of whichever source axis lands in each
    position.
    """
    new_shape = [source.shape[ax] for ax, _ in table]
    bounds = [n-1 for n in source.shape]
    newdata = np.empty(source.bound, dtype=source.dtype)
    for idx, cvec in enumerate(coords(source.shape)):
        dest = [bounds[ax]-cvec[ax] if rev else cvec[ax] for ax, rev in table]
        newdata[decode(new_shape, dest)] = source.data[idx]

    return DenseArray(new_shape, newdata)

if __name__ == "__main__":
    import doctest
    doctest.testmod()
