"""
Discretized Gaussian distribution model.

The support is the set of integers in [min, max]. Every quantity here is a
sum of the unnormalized Gaussian kernel over consecutive integers, so the
model is exact for the discrete problem and never approximates it with a
continuous integral.
"""

import numpy as np

from .profiles import gaussian_density, gaussian_density_dsigma, gaussian_exponent, sigma_sensitivity

# Points evaluated per block when summing over a range
CHUNK_SIZE = 1 << 20


def integer_points(start, stop):
    """Consecutive integers from start to stop, both inclusive, as floats."""
    return np.arange(start, stop + 1, dtype=float)


def integer_chunks(start, stop, chunk_size=None):
    """Yield `integer_points(start, stop)` in consecutive blocks of at most chunk_size points."""
    chunk_size = chunk_size or CHUNK_SIZE
    for block_start in range(start, stop + 1, chunk_size):
        yield integer_points(block_start, min(block_start + chunk_size - 1, stop))


def density(x, mean, sigma):
    """Unnormalized Gaussian density, exp(-(x - mean)² / (2σ²))."""
    return gaussian_density(x, mean, sigma)


def density_dsigma(x, mean, sigma):
    """Partial derivative of `density` with respect to sigma."""
    return gaussian_density_dsigma(x, mean, sigma)


def _peak_exponent(start, stop, mean, sigma):
    """Largest kernel exponent over the integers start..stop."""
    nearest = np.clip([np.floor(mean), np.ceil(mean)], start, stop)
    return gaussian_exponent(nearest, mean, sigma).max()


def _common_shift(request, sigma):
    """
    Exponent of the largest kernel value found in either range.

    Dividing every kernel value by exp(shift) leaves at least one entry equal
    to 1, so the support and band sums cannot underflow to zero together.
    """
    return max(_peak_exponent(request.min_value, request.max_value, request.mean, sigma),
               _peak_exponent(request.from_value, request.to_value, request.mean, sigma))


def _range_sums(start, stop, mean, sigma, shift, with_derivative=False):
    """
    Scaled kernel sum over start..stop, and optionally the sum of its sigma derivative.

    Points are processed in blocks of `CHUNK_SIZE`, so memory stays bounded
    however wide the range is.
    """
    total = 0.0
    dtotal = 0.0
    for points in integer_chunks(start, stop):
        weights = np.exp(gaussian_exponent(points, mean, sigma) - shift)
        total += weights.sum()
        if with_derivative:
            dtotal += (weights * sigma_sensitivity(points, mean, sigma)).sum()
    return total, dtotal


def ratio(request, sigma):
    """
    Fraction of the discretized mass lying in [from, to].

    Parameters
    ----------
    request : FitRequest
        Support, mean and measured band
    sigma : float
        Standard deviation, must be > 0

    Returns
    -------
    float
        A / S with S = Σ density over min..max and A = Σ density over from..to

    Notes
    -----
    Cost is linear in the widths of both ranges; memory is bounded by
    `CHUNK_SIZE` points.
    """
    shift = _common_shift(request, sigma)
    s, _ = _range_sums(request.min_value, request.max_value, request.mean, sigma, shift)
    a, _ = _range_sums(request.from_value, request.to_value, request.mean, sigma, shift)
    return float(a / s)


def ratio_derivative(request, sigma):
    """
    Derivative of `ratio` with respect to sigma.

    Parameters
    ----------
    request : FitRequest
        Support, mean and measured band
    sigma : float
        Standard deviation, must be > 0

    Returns
    -------
    float
        (dA·S - A·dS) / S², where dA and dS sum ∂density/∂σ over the
        band and the support respectively

    Notes
    -----
    Scaling every kernel value by a common factor c multiplies A, S, dA and
    dS by c, which cancels in the quotient rule.
    """
    shift = _common_shift(request, sigma)
    s, ds = _range_sums(request.min_value, request.max_value, request.mean, sigma, shift,
                        with_derivative=True)
    a, da = _range_sums(request.from_value, request.to_value, request.mean, sigma, shift,
                        with_derivative=True)
    return float((da * s - a * ds) / (s * s))


def mass(request, sigma):
    """
    Normalized probability mass assigned to every integer of the support.

    Parameters
    ----------
    request : FitRequest
        Support and mean
    sigma : float
        Standard deviation, must be > 0

    Returns
    -------
    points : ndarray
        Integer points min..max
    probabilities : ndarray
        Mass at each point, summing to 1
    """
    support = integer_points(request.min_value, request.max_value)
    weights = np.exp(gaussian_exponent(support, request.mean, sigma)
                     - _common_shift(request, sigma))
    return support.astype(int), weights / weights.sum()
