"""
Sigma solver combining the bisection bracket with Newton refinement.
"""

import math

from ..exceptions import ConvergenceError
from ..model import ratio
from ..request import FitResult
from .bisection import BISECT_ITERATIONS, SIGMA_HIGH, SIGMA_LOW, bracket_and_bisect
from .newton import NEWTON_ITERATIONS, STEP_TOLERANCE, newton_refine
from utils.logger import log_info, log_warning

RATIO_TOLERANCE = 1e-6


class SigmaSolver:
    """
    Finds the sigma at which a discretized Gaussian puts the target share of
    its mass inside [from, to].

    Attributes
    ----------
    sigma_low, sigma_high : float
        Bisection search bracket
    bisect_iterations : int
        Number of log-space bisection steps
    newton_iterations : int
        Ceiling on Newton steps
    step_tolerance : float
        Newton step size that counts as converged
    ratio_tolerance : float
        Largest accepted |ratio(sigma) - target| for the final answer

    Examples
    --------
    >>> solver = SigmaSolver()
    >>> sigma = solver.solve(FitRequest(10, 30, 20.0, 15, 25, 0.7)).sigma
    """

    def __init__(self, sigma_low=SIGMA_LOW, sigma_high=SIGMA_HIGH,
                 bisect_iterations=BISECT_ITERATIONS, newton_iterations=NEWTON_ITERATIONS,
                 step_tolerance=STEP_TOLERANCE, ratio_tolerance=RATIO_TOLERANCE):
        if bisect_iterations < 0 or newton_iterations < 1:
            raise ValueError("Iteration counts must be non-negative (Newton needs at least one)")
        self.sigma_low = sigma_low
        self.sigma_high = sigma_high
        self.bisect_iterations = bisect_iterations
        self.newton_iterations = newton_iterations
        self.step_tolerance = step_tolerance
        self.ratio_tolerance = ratio_tolerance

    def bracket_and_bisect(self, request):
        """Phase 1: robust estimate from the log-space bisection bracket."""
        return bracket_and_bisect(request, sigma_low=self.sigma_low,
                                  sigma_high=self.sigma_high,
                                  iterations=self.bisect_iterations)

    def newton_refine(self, request, sigma_init):
        """
        Phase 2: Newton refinement with diagnostics.

        Returns a (sigma, iterations, converged) tuple rather than the bare
        sigma so `solve` can record the step count on the `FitResult`. Use
        `refine` when only the refined value is wanted.
        """
        return newton_refine(request, sigma_init, iterations=self.newton_iterations,
                             tol=self.step_tolerance)

    def refine(self, request, sigma_init):
        """Phase 2 returning only the refined sigma."""
        return self.newton_refine(request, sigma_init)[0]

    def solve(self, request):
        """
        Solve a request end to end.

        Parameters
        ----------
        request : FitRequest
            Request to solve

        Returns
        -------
        FitResult
            Solved sigma with diagnostics

        Raises
        ------
        UnreachableTargetError
            If the target ratio cannot be bracketed
        ConvergenceError
            If refinement degenerates or misses the target
        """
        initial = self.bracket_and_bisect(request)
        sigma, iterations, converged = self.newton_refine(request, initial)

        if sigma <= 0.0:
            raise ConvergenceError(f"Newton refinement left the positive axis (sigma={sigma:.6g})")

        achieved = ratio(request, sigma)
        if not math.isfinite(achieved) or abs(achieved - request.target_ratio) >= self.ratio_tolerance:
            raise ConvergenceError(
                f"Failed to converge: ratio at sigma={sigma:.6g} is {achieved:.6g}, "
                f"target {request.target_ratio:.6g}")

        if not converged:
            log_warning(f"Newton step did not settle within {iterations} iterations; "
                        f"residual {achieved - request.target_ratio:.3e} accepted")

        log_info(f"Solved sigma={sigma:.12g} (initial {initial:.6g}, {iterations} Newton steps)")
        return FitResult(
            sigma=sigma,
            request=request,
            initial_sigma=initial,
            achieved_ratio=achieved,
            iterations=iterations,
            converged=converged,
        )


def solve(request, **solver_options):
    """Solve a request with a `SigmaSolver` built from `solver_options`."""
    return SigmaSolver(**solver_options).solve(request)
