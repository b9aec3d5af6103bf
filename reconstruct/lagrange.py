from math import prod
from .errors import InvalidSampleError, SingularInputError, InsufficientSamplesError
from .rounding import round_half_up, check_in_float_range, OUT_OF_RANGE

# formulas taken from https://en.wikipedia.org/wiki/Lagrange_polynomial
# evaluated at x = 0, so each basis polynomial l_j(0) = prod(-x_m) / ((-x_j) * prod(x_j - x_m))  (m != j)
#
# known limitation: this works in floating point, and the products of differences grow very quickly.
# fine for tens of samples with values in native range, precision degrades beyond that


def check_samples(samples):
    if not samples:
        raise InsufficientSamplesError(1, 0)

    seen = set()
    for s in samples:
        if s.x == 0:
            # l_j(0) would divide by -x_j = 0
            raise InvalidSampleError(s.x, "x = 0 cannot be used to evaluate the polynomial at 0")
        check_in_float_range(s.x, s.y)
        if s.x in seen:
            raise SingularInputError(s.x)
        seen.add(s.x)


def lagrange_weights_at_zero(xs: list[int]) -> list[float]:
    # called l_j(0) in the wikipedia article
    numerator = prod(-x for x in xs)
    return [
        numerator / (-x_j * prod(x_j - x_m for x_m in xs if x_m != x_j))
        for x_j in xs
    ]


def evaluate_at_zero(samples) -> int:
    """
    Value at x = 0 of the polynomial through every given sample (the secret), rounded half up.
    Uses all the samples passed in, not only the first k.
    """
    samples = list(samples)
    check_samples(samples)

    try:
        weights = lagrange_weights_at_zero([s.x for s in samples])
        secret = 0.0
        for w, s in zip(weights, samples):
            secret += w * s.y
        return round_half_up(secret)
    except OverflowError as e:
        # intermediate products left the float range
        raise InvalidSampleError(None, OUT_OF_RANGE) from e
