from fractions import Fraction
from typing import List, Sequence, Tuple

from ..errors import DuplicateAbscissa, InsufficientShares, NonIntegerResult
from ..models import ReconstructionProblem, Secret, Share


def _check_distinct(shares: Sequence[Share]) -> None:
    seen = set()
    for share in shares:
        if share.x in seen:
            raise DuplicateAbscissa(f"Duplicate share index x={share.x}", share_id=str(share.x))
        seen.add(share.x)


def select_shares(shares: Sequence[Share], threshold: int) -> List[Share]:
    """Return the `threshold` shares with the smallest x, in ascending order."""
    if len(shares) < threshold:
        raise InsufficientShares(f"Need {threshold} shares to reconstruct, got {len(shares)}")
    return sorted(shares, key=lambda share: share.x)[:threshold]


def lagrange_coefficients(xs: Sequence[int]) -> List[Fraction]:
    """
    Lagrange basis polynomials evaluated at zero: L_i(0) = prod_{j != i} -x_j / (x_i - x_j).
    """
    coeffs: List[Fraction] = []
    for i, xi in enumerate(xs):
        numerator = 1
        denominator = 1
        for j, xj in enumerate(xs):
            if j == i:
                continue
            if xi == xj:
                raise DuplicateAbscissa(f"Duplicate share index x={xi}", share_id=str(xi))
            numerator *= -xj
            denominator *= xi - xj
        coeffs.append(Fraction(numerator, denominator))
    return coeffs


def interpolate_at_zero(points: Sequence[Tuple[int, int]]) -> Fraction:
    """Exact value at x=0 of the unique polynomial of degree < len(points) through points."""
    if not points:
        raise InsufficientShares("At least one share is required to reconstruct")
    xs = [x for x, _ in points]
    total = Fraction(0)
    for (_, y), coeff in zip(points, lagrange_coefficients(xs)):
        total += y * coeff
    return total


def reconstruct(problem: ReconstructionProblem) -> Secret:
    """
    Reconstruct the secret (the polynomial's constant term) from a problem instance.

    Raises DuplicateAbscissa, InsufficientShares or NonIntegerResult; the value is
    never rounded.
    """
    _check_distinct(problem.shares)
    selected = select_shares(problem.shares, problem.threshold)
    value = interpolate_at_zero([(share.x, share.y) for share in selected])
    if value.denominator != 1:
        raise NonIntegerResult(
            f"Interpolation over x={[share.x for share in selected]} is not an integer "
            f"(denominator {value.denominator}); shares are inconsistent or threshold is wrong"
        )
    return int(value.numerator)
