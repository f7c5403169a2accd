"""
Argument validation shared by every transform. All checks run eagerly at call
entry, before any output is allocated.
"""
from typing import Any, Collection, Optional

import numpy as np

from dense.errors import (InvalidRangeError, NullArgumentError,
                          UnsupportedElementTypeError)

# numpy kinds with a well-defined item size: bool, int, uint, float, complex
FIXED_WIDTH_KINDS = "biufc"

def is_fixed_width(dtype: Any) -> bool:
    return np.dtype(dtype).kind in FIXED_WIDTH_KINDS

def check_not_none(value: Any, name: str) -> None:
    if value is None:
        raise NullArgumentError(name)

def check_range(value: int, low: Optional[int], high: Optional[int], name: str) -> None:
    """
    Inclusive range check. Either bound may be None to leave that side open.

    >>> check_range(3, 1, 5, 'x')
    >>> check_range(7, 1, 5, 'x_step')
    Traceback (most recent call last):
    ...
    dense.errors.InvalidRangeError: INVALID RANGE: 'x_step' must be between 1 and 5, got 7
    """
    if (low is not None and value < low) or (high is not None and value > high):
        raise InvalidRangeError(name, value, low, high)

def check_rank(array: Any, ranks: Collection[int], name: str = 'source') -> None:
    if array.rank not in ranks:
        raise InvalidRangeError(f'{name}.rank', array.rank, min(ranks), max(ranks))

def check_fixed_width(array: Any, caller: str) -> None:
    if not is_fixed_width(array.dtype):
        raise UnsupportedElementTypeError(caller, array.dtype)
