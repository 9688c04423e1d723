"""
Unnormalized Gaussian kernel and its derivative with respect to sigma.
"""

import numpy as np


def gaussian_exponent(x, mean, sigma):
    """
    Exponent of the unnormalized Gaussian kernel.

    Parameters
    ----------
    x : array_like
        Evaluation points
    mean : float
        Kernel center (μ)
    sigma : float
        Kernel width (standard deviation, σ)

    Returns
    -------
    array_like
        -(x - μ)² / (2σ²)
    """
    dx = np.asarray(x, dtype=float) - mean
    return -(dx * dx) / (2.0 * sigma * sigma)


def gaussian_density(x, mean, sigma):
    """
    Unnormalized Gaussian density.

    Parameters
    ----------
    x : array_like
        Evaluation points
    mean : float
        Kernel center (μ)
    sigma : float
        Kernel width (standard deviation, σ)

    Returns
    -------
    array_like
        Density values at x, with peak value 1 at x = μ

    Notes
    -----
    Mathematical form: f(x) = exp(-((x - μ)² / (2σ²)))

    The 1/(σ√(2π)) normalization is omitted. Every quantity built on this
    kernel is a ratio of sums of the same kernel, so the factor cancels.
    """
    return np.exp(gaussian_exponent(x, mean, sigma))


def sigma_sensitivity(x, mean, sigma):
    """Logarithmic derivative of the kernel with respect to sigma, (x - μ)² / σ³."""
    dx = np.asarray(x, dtype=float) - mean
    return (dx * dx) / (sigma * sigma * sigma)


def gaussian_density_dsigma(x, mean, sigma):
    """
    Partial derivative of `gaussian_density` with respect to sigma.

    Parameters
    ----------
    x : array_like
        Evaluation points
    mean : float
        Kernel center (μ)
    sigma : float
        Kernel width (σ)

    Returns
    -------
    array_like
        ∂f/∂σ = f(x) * (x - μ)² / σ³
    """
    return gaussian_density(x, mean, sigma) * sigma_sensitivity(x, mean, sigma)
