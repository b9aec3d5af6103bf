def evaluate(coefficients: list, x):
    # horner's method, coefficients lowest power first
    result = 0
    for c in reversed(coefficients):
        result = result * x + c
    return result


def mismatched_samples(samples, coefficients: list) -> list:
    """returns the samples that do not lie on the polynomial"""
    return [s for s in samples if evaluate(coefficients, s.x) != s.y]
