"""
Error types raised by the sigma fitting engine.
"""


class SigmaFitError(ValueError):
    """Base class for every error raised while building or solving a fit."""


class InvalidRequestError(SigmaFitError):
    """The fit request is malformed (bad bounds, ratio, or mean)."""


class UnknownPresetError(SigmaFitError, KeyError):
    """The requested preset name is not registered."""

    def __str__(self):
        # KeyError repr-quotes its message otherwise
        return str(self.args[0]) if self.args else ''


class UnreachableTargetError(SigmaFitError):
    """
    The target ratio has no sign change over the sigma search bracket.

    Attributes
    ----------
    target_ratio : float
        Requested ratio
    ratio_low : float
        Ratio at the lower end of the bracket
    ratio_high : float
        Ratio at the upper end of the bracket
    """

    def __init__(self, target_ratio, ratio_low, ratio_high):
        self.target_ratio = target_ratio
        self.ratio_low = ratio_low
        self.ratio_high = ratio_high
        super().__init__(
            f"CAN NOT find the solution: target ratio {target_ratio:.6g} is outside "
            f"the reachable range [{min(ratio_low, ratio_high):.6g}, "
            f"{max(ratio_low, ratio_high):.6g}]"
        )


class ConvergenceError(SigmaFitError):
    """Newton refinement degenerated or did not reach the target ratio."""
