"""
Error taxonomy for the dense array transforms.

Every operation validates its arguments on entry and raises one of these
before allocating or copying anything.
"""
from typing import Any, Optional


class ArrayError(Exception):
    pass


class NullArgumentError(ArrayError):
    def __init__(self, param: str) -> None:
        self.param = param
        super().__init__(f"NULL ARGUMENT: '{param}' is required")


class InvalidRangeError(ArrayError):
    def __init__(self, param: str, value: Any, low: Optional[int] = None, high: Optional[int] = None) -> None:
        self.param = param
        self.value = value
        self.low = low
        self.high = high
        if low is not None and high is not None:
            detail = f"must be between {low} and {high}, got {value}"
        elif low is not None:
            detail = f"must be at least {low}, got {value}"
        elif high is not None:
            detail = f"must be at most {high}, got {value}"
        else:
            detail = f"is invalid: {value}"
        super().__init__(f"INVALID RANGE: '{param}' {detail}")


class UnsupportedElementTypeError(ArrayError):
    def __init__(self, caller: str, dtype: Any, need: str = "a fixed-width element type") -> None:
        self.caller = caller
        self.dtype = dtype
        super().__init__(f"UNSUPPORTED ELEMENT TYPE: {caller}() needs {need}, got {dtype}")


class InvalidAngleError(ArrayError):
    def __init__(self, angle: Any) -> None:
        self.angle = angle
        super().__init__(f"INVALID ANGLE: {angle} is not a multiple of 90")


class InvalidAxisError(ArrayError):
    def __init__(self, axis: Any, rank: Optional[int] = None) -> None:
        self.axis = axis
        self.rank = rank
        where = f" for a rank {rank} array" if rank is not None else ""
        super().__init__(f"INVALID AXIS: {axis!r} is not valid{where}")
