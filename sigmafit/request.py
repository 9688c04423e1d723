"""
Input and output records of a sigma fit.
"""

import math
from dataclasses import dataclass
from typing import Optional

from .exceptions import InvalidRequestError


@dataclass(frozen=True)
class FitRequest:
    """
    Parameters of one discretized-Gaussian ratio fit.

    Attributes
    ----------
    min_value, max_value : int
        Inclusive integer bounds of the distribution's support
    mean : float
        Gaussian center (μ); may lie outside [min_value, max_value]
    from_value, to_value : int
        Inclusive integer sub-range whose share of the mass is measured
    target_ratio : float
        Desired fraction of the mass inside [from_value, to_value], in (0, 1)
    """

    min_value: int
    max_value: int
    mean: float
    from_value: int
    to_value: int
    target_ratio: float

    def __post_init__(self):
        for name in ('min_value', 'max_value', 'from_value', 'to_value'):
            value = getattr(self, name)
            if isinstance(value, bool) or int(value) != value:
                raise InvalidRequestError(f"{name} must be an integer, got {value!r}")
            object.__setattr__(self, name, int(value))
        object.__setattr__(self, 'mean', float(self.mean))
        object.__setattr__(self, 'target_ratio', float(self.target_ratio))

        if self.min_value > self.max_value:
            raise InvalidRequestError(
                f"min ({self.min_value}) must not exceed max ({self.max_value})")
        if self.from_value > self.to_value:
            raise InvalidRequestError(
                f"from ({self.from_value}) must not exceed to ({self.to_value})")
        if not math.isfinite(self.mean):
            raise InvalidRequestError(f"mean must be finite, got {self.mean}")
        if not 0.0 < self.target_ratio < 1.0:
            raise InvalidRequestError(
                f"ratio must lie strictly between 0 and 1, got {self.target_ratio}")
        # Disjoint ranges are rejected here rather than surfacing later as
        # an unreachable target.
        if self.to_value < self.min_value or self.from_value > self.max_value:
            raise InvalidRequestError(
                f"range [{self.from_value}, {self.to_value}] does not overlap "
                f"[{self.min_value}, {self.max_value}]")

    @classmethod
    def from_percentage(cls, min_value, max_value, mean, from_value, to_value, ratio_percent):
        """Build a request whose ratio is given in percent (60 -> 0.60)."""
        return cls(min_value, max_value, mean, from_value, to_value, ratio_percent / 100.0)


@dataclass
class FitResult:
    """
    Outcome of a sigma fit.

    Attributes
    ----------
    sigma : float
        Solved standard deviation
    request : FitRequest
        Request that was solved
    initial_sigma : float
        Estimate produced by the log-space bisection phase
    achieved_ratio : float
        Ratio of the model evaluated at `sigma`
    iterations : int
        Newton steps taken
    converged : bool
        Whether Newton's step-size criterion was met before the ceiling
    """

    sigma: float
    request: Optional[FitRequest] = None
    initial_sigma: float = math.nan
    achieved_ratio: float = math.nan
    iterations: int = 0
    converged: bool = False

    @property
    def residual(self):
        """Achieved ratio minus target ratio."""
        if self.request is None:
            return math.nan
        return self.achieved_ratio - self.request.target_ratio

    @property
    def sigma_x1000(self):
        """Sigma scaled by 1000, rounded half away from zero."""
        return int(math.floor(self.sigma * 1000 + 0.5))
