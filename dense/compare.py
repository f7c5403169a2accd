"""
Equality comparers that ignore minor floating point arithmetic errors.

Two values are equal when each lies strictly within `sensitivity` of the other:

    x + sensitivity > y and x - sensitivity < y

Use them with `arr.array_equals()` to compare resized or interpolated arrays.
"""
from typing import Any

import numpy as np

DOUBLE_SENSITIVITY = 1e-6
SINGLE_SENSITIVITY = 1e-5

class DoubleComparer:
    """
    Tolerant equality for double precision values.

    >>> DoubleComparer()(0.1 + 0.2, 0.3)
    True
    >>> DoubleComparer(1e-9).equals(1.0, 1.000001)
    False
    """
    def __init__(self, sensitivity: float = DOUBLE_SENSITIVITY) -> None:
        self.sensitivity = sensitivity

    def _coerce(self, v: Any) -> Any:
        return float(v)

    def equals(self, x: Any, y: Any) -> bool:
        x = self._coerce(x)
        y = self._coerce(y)
        return bool(x + self.sensitivity > y and x - self.sensitivity < y)

    def __call__(self, x: Any, y: Any) -> bool:
        return self.equals(x, y)

    def hash(self, v: Any) -> int:
        return hash(self._coerce(v))

class SingleComparer(DoubleComparer):
    """
    Tolerant equality for single precision values. Arithmetic is carried out
    in float32.
    """
    def __init__(self, sensitivity: float = SINGLE_SENSITIVITY) -> None:
        super().__init__(sensitivity)
        self.sensitivity = np.float32(sensitivity)

    def _coerce(self, v: Any) -> Any:
        return np.float32(v)
