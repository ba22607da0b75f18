from .shamir import interpolate_at_zero, lagrange_coefficients, reconstruct, select_shares

__all__ = [
    "interpolate_at_zero",
    "lagrange_coefficients",
    "reconstruct",
    "select_shares",
]
