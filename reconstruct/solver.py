from dataclasses import dataclass
from .samples import Sample, SampleSet, ShareInput, build_sample_set
from .lagrange import evaluate_at_zero
from .newton import solve
from .polynomial import mismatched_samples

SECRET_BASES = ("all", "k")


@dataclass(frozen=True)
class Reconstruction:
    secret: int
    coefficients: tuple[int, ...]  # index 0 = constant term
    basis: tuple[Sample, ...]
    inconsistent: tuple[Sample, ...] = ()  # samples outside the basis that are not on the polynomial


def reconstruct_samples(sample_set: SampleSet, secret_basis: str = "all", check_consistency: bool = True) -> Reconstruction:
    if secret_basis not in SECRET_BASES:
        raise ValueError(f"secret_basis must be one of {'/'.join(SECRET_BASES)}, got {secret_basis!r}")

    basis = sample_set.basis
    # the secret is computed independently of the coefficients, they only agree for consistent input
    secret = evaluate_at_zero(sample_set.samples if secret_basis == "all" else basis)
    coefficients = solve([s.x for s in basis], [s.y for s in basis])

    inconsistent = ()
    if check_consistency:
        inconsistent = tuple(mismatched_samples(sample_set.samples[len(basis):], coefficients))

    return Reconstruction(secret=secret,
                          coefficients=tuple(coefficients),
                          basis=basis,
                          inconsistent=inconsistent)


def reconstruct(share_input: ShareInput, drop_zero_values: bool = True, duplicate_x: str = "reject",
                secret_basis: str = "all", check_consistency: bool = True) -> Reconstruction:
    """
    Full pipeline: decode and sort the shares, then compute the secret and the coefficients.

    Args:
        drop_zero_values, duplicate_x: see build_sample_set
        secret_basis: "all" evaluates the secret over every sample, "k" only over the first k (the basis)
        check_consistency: if True, list the samples beyond the basis that the polynomial does not pass through
    """
    sample_set = build_sample_set(share_input, drop_zero_values=drop_zero_values, duplicate_x=duplicate_x)
    return reconstruct_samples(sample_set, secret_basis=secret_basis, check_consistency=check_consistency)
