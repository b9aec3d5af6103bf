import pytest
from reconstruct.newton import solve, divided_differences, newton_to_monomial
from reconstruct.polynomial import evaluate
from reconstruct.errors import SingularInputError, InvalidSampleError


def test_quadratic():
    # x^2 + 2x + 3 passes through (1, 6), (2, 11), (3, 18)
    assert solve([1, 2, 3], [6, 11, 18]) == [3, 2, 1]


def test_divided_differences():
    assert divided_differences([1, 2, 3], [6, 11, 18]) == [6, 5, 1]


def test_newton_to_monomial():
    # 6 + 5(x-1) + (x-1)(x-2)
    assert newton_to_monomial([1, 2, 3], [6, 5, 1]) == [3, 2, 1]


def test_reproduces_points():
    xs = [1, 2, 4, 7, 9]
    ys = [10, -3, 22, 8, 41]
    assert len(solve(xs, ys)) == len(xs)

    # before rounding the polynomial goes through every point
    coefficients = newton_to_monomial(xs, divided_differences(xs, ys))
    for x, y in zip(xs, ys):
        assert evaluate(coefficients, x) == pytest.approx(y, abs=1e-6)


def test_exact_integer_polynomial():
    poly = [-8, 0, 5, -2, 1]
    xs = [1, 2, 3, 5, 8]
    ys = [evaluate(poly, x) for x in xs]
    assert solve(xs, ys) == poly
    for x, y in zip(xs, ys):
        assert evaluate(solve(xs, ys), x) == y


def test_single_point():
    assert solve([4], [9]) == [9]


def test_coefficients_rounded_independently():
    # y = 0.5x + 0.5 through (1, 1) and (3, 2)
    assert solve([1, 3], [1, 2]) == [1, 1]
    # y = -1.5x through (1, -1.5) and (2, -3)
    assert solve([1, 2], [-1.5, -3]) == [0, -1]


def test_large_values():
    secret = 123456789
    poly = [secret, 7, 3]
    xs = [1, 2, 3]
    assert solve(xs, [evaluate(poly, x) for x in xs]) == poly


def test_idempotent():
    assert solve([1, 2, 3], [6, 11, 18]) == solve([1, 2, 3], [6, 11, 18])


def test_shared_x_is_singular():
    with pytest.raises(SingularInputError) as excinfo:
        solve([1, 5, 5], [2, 3, 4])
    assert excinfo.value.x == 5


def test_mismatched_lengths():
    with pytest.raises(InvalidSampleError):
        solve([1, 2], [3])
    with pytest.raises(InvalidSampleError):
        solve([], [])


def test_value_too_large_for_floats():
    with pytest.raises(InvalidSampleError) as excinfo:
        solve([1, 2], [5, 16**300])
    assert excinfo.value.x == 2


def test_coefficients_too_large_for_floats():
    with pytest.raises(InvalidSampleError):
        solve([1, 2], [-10**308, 10**308])
