from .errors import InvalidSampleError, SingularInputError
from .rounding import round_half_up, check_in_float_range, OUT_OF_RANGE

# Newton divided differences, then conversion from the Newton basis
#   c_0 + c_1(x-x_0) + c_2(x-x_0)(x-x_1) + ...
# to the monomial basis 1, x, x^2, ...


def check_points(xs, ys):
    if len(xs) != len(ys):
        raise InvalidSampleError(None, f"number of x values ({len(xs)}) and y values ({len(ys)}) must match")
    if not xs:
        raise InvalidSampleError(None, "need at least one point to interpolate")

    seen = set()
    for x in xs:
        if x in seen:
            raise SingularInputError(x)
        seen.add(x)

    for x, y in zip(xs, ys):
        check_in_float_range(x, y)


def divided_differences(xs: list[int], ys: list) -> list[float]:
    """
    Returns the Newton coefficients c_0..c_{n-1}, the diagonal of the divided differences table.
    The table is computed one column at a time, overwriting from the bottom up
    so table[i-1] still holds the previous column when table[i] is updated.
    """
    n = len(xs)
    table = list(ys)
    for j in range(1, n):
        for i in range(n - 1, j - 1, -1):
            table[i] = (table[i] - table[i - 1]) / (xs[i] - xs[i - j])
    return table


def multiply_by_linear(poly: list, root) -> list:
    # poly * (x - root), coefficients lowest power first
    result = [0.0] * (len(poly) + 1)
    for power, c in enumerate(poly):
        result[power + 1] += c
        result[power] -= root * c
    return result


def newton_to_monomial(xs: list[int], newton_coefficients: list) -> list[float]:
    n = len(newton_coefficients)
    coefficients = [0.0] * n
    # product (x - x_0)...(x - x_{i-1}), starts as the constant 1
    basis = [1.0]

    for i, c in enumerate(newton_coefficients):
        for power, b in enumerate(basis):
            coefficients[power] += c * b
        if i < n - 1:
            basis = multiply_by_linear(basis, xs[i])

    return coefficients


def solve(xs: list[int], ys: list) -> list[int]:
    """
    Coefficients of the unique degree len(xs)-1 polynomial through the points (xs[i], ys[i]).
    Index 0 is the constant term, the last index is the leading coefficient.
    Each coefficient is rounded half up on its own.
    """
    xs = list(xs)
    ys = list(ys)
    check_points(xs, ys)

    try:
        newton_coefficients = divided_differences(xs, ys)
        return [round_half_up(c) for c in newton_to_monomial(xs, newton_coefficients)]
    except OverflowError as e:
        raise InvalidSampleError(None, OUT_OF_RANGE) from e
