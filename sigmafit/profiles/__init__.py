"""
Kernel functions for the discretized distribution model.
"""

from .gaussian import (
    gaussian_exponent,
    gaussian_density,
    gaussian_density_dsigma,
    sigma_sensitivity,
)

__all__ = [
    'gaussian_exponent',
    'gaussian_density',
    'gaussian_density_dsigma',
    'sigma_sensitivity',
]
