from math import floor, isfinite
from .errors import InvalidSampleError

OUT_OF_RANGE = "value exceeds the supported numeric range"


def round_half_up(value) -> int:
    """
    Round to the nearest integer, ties go towards +infinity (same as javascript's Math.round).
    e.g 2.5 -> 3, -2.5 -> -2, 0.5 -> 1, -0.5 -> 0
    Raises OverflowError for inf and nan.
    """
    if isinstance(value, int):
        return value
    if not isfinite(value):
        raise OverflowError(f"cannot round {value}")
    return int(floor(value + 0.5))


def check_in_float_range(x, y):
    # the interpolation works in floats, y values past ~1.8e308 cannot take part
    try:
        float(y)
    except OverflowError as e:
        raise InvalidSampleError(x, OUT_OF_RANGE) from e
