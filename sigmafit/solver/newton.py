"""
Newton-Raphson refinement of a sigma estimate.
"""

import math
import warnings

from scipy.optimize import newton

from ..exceptions import ConvergenceError
from ..model import ratio, ratio_derivative
from utils.logger import log_debug

NEWTON_ITERATIONS = 50
STEP_TOLERANCE = 1e-12
STEP_RTOL = 1e-14


def newton_refine(request, sigma_init, iterations=NEWTON_ITERATIONS, tol=STEP_TOLERANCE):
    """
    Polish a sigma estimate with Newton's method.

    Each step applies sigma <- sigma - (ratio(sigma) - target) / ratio'(sigma).
    Iteration stops early once a step is smaller than `tol` plus a
    relative allowance of a few ulps; otherwise it runs to the
    `iterations` ceiling.

    Parameters
    ----------
    request : FitRequest
        Request to solve
    sigma_init : float
        Starting point, typically from `bracket_and_bisect`
    iterations : int, optional
        Maximum number of Newton steps, default 50
    tol : float, optional
        Absolute step size below which iteration stops, default 1e-12

    Returns
    -------
    sigma : float
        Refined sigma
    iterations_done : int
        Number of steps taken
    converged : bool
        Whether the step-size criterion was met

    Raises
    ------
    ConvergenceError
        If the derivative vanishes or sigma becomes non-finite
    """
    def residual(sigma):
        return ratio(request, sigma) - request.target_ratio

    def slope(sigma):
        return ratio_derivative(request, sigma)

    with warnings.catch_warnings():
        # zero derivative is reported through the result flag instead
        warnings.simplefilter('ignore', RuntimeWarning)
        sigma, info = newton(residual, sigma_init, fprime=slope, tol=tol, rtol=STEP_RTOL,
                             maxiter=iterations, full_output=True, disp=False)

    sigma = float(sigma)
    log_debug(f"Newton: {info.iterations} steps from {sigma_init:.6g} to {sigma:.12g} ({info.flag})")

    if not math.isfinite(sigma):
        raise ConvergenceError(f"Newton refinement diverged from sigma={sigma_init:.6g}")
    if not info.converged and slope(sigma) == 0.0:
        raise ConvergenceError(f"Ratio derivative vanished at sigma={sigma:.6g}")

    return sigma, info.iterations, bool(info.converged)
