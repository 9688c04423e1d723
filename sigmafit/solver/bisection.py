"""
Log-space bisection bracket for the sigma search.
"""

import numpy as np

from ..exceptions import UnreachableTargetError
from ..model import ratio
from utils.logger import log_debug

SIGMA_LOW = 0.01
SIGMA_HIGH = 1_000_000.0
BISECT_ITERATIONS = 20


def geometric_midpoint(a, b):
    """Midpoint of [a, b] on a logarithmic scale, exp((ln a + ln b) / 2)."""
    return float(np.exp((np.log(a) + np.log(b)) / 2.0))


def bracket_and_bisect(request, sigma_low=SIGMA_LOW, sigma_high=SIGMA_HIGH,
                       iterations=BISECT_ITERATIONS):
    """
    Robust low-precision estimate of the sigma matching the target ratio.

    The residual ratio(sigma) - target is classified by its sign bit at both
    ends of [sigma_low, sigma_high]; the bracket is then halved in log space a
    fixed number of times, keeping the half whose ends disagree in sign.

    Parameters
    ----------
    request : FitRequest
        Request to solve
    sigma_low, sigma_high : float, optional
        Search bracket, default [0.01, 1e6]
    iterations : int, optional
        Number of bisection steps, default 20

    Returns
    -------
    float
        Geometric midpoint of the final bracket

    Raises
    ------
    UnreachableTargetError
        If the residual has the same sign at both ends of the bracket
    """
    if not 0.0 < sigma_low < sigma_high:
        raise ValueError(f"Invalid sigma bracket [{sigma_low}, {sigma_high}]")

    def negative(sigma):
        return bool(np.signbit(ratio(request, sigma) - request.target_ratio))

    a, b = sigma_low, sigma_high
    sign_a = negative(a)
    sign_b = negative(b)
    if sign_a == sign_b:
        raise UnreachableTargetError(request.target_ratio, ratio(request, a), ratio(request, b))

    for _ in range(iterations):
        mid = geometric_midpoint(a, b)
        if negative(mid) == sign_a:
            a = mid
        else:
            b = mid

    estimate = geometric_midpoint(a, b)
    log_debug(f"Bisection bracket [{a:.6g}, {b:.6g}] after {iterations} steps, estimate {estimate:.6g}")
    return estimate
