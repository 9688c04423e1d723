import numpy as np
import pytest

from sigmafit.profiles import gaussian_density, gaussian_density_dsigma, sigma_sensitivity


def test_density_peaks_at_mean():
    assert gaussian_density(4.0, 4.0, 2.5) == 1.0
    assert gaussian_density(np.array([3.0, 5.0]), 4.0, 2.5) == pytest.approx(
        [np.exp(-1 / 12.5), np.exp(-1 / 12.5)])


def test_density_is_symmetric_around_mean():
    x = np.arange(0, 10)
    left = gaussian_density(5.0 - x, 5.0, 1.7)
    right = gaussian_density(5.0 + x, 5.0, 1.7)
    assert np.allclose(left, right)


def test_density_dsigma_matches_finite_difference():
    x = np.arange(-3, 12, dtype=float)
    sigma = 3.2
    h = 1e-6
    numeric = (gaussian_density(x, 4.0, sigma + h) - gaussian_density(x, 4.0, sigma - h)) / (2 * h)
    assert np.allclose(gaussian_density_dsigma(x, 4.0, sigma), numeric, rtol=1e-6, atol=1e-10)


def test_sigma_sensitivity_is_zero_at_mean():
    assert sigma_sensitivity(7.0, 7.0, 2.0) == 0.0
    assert sigma_sensitivity(9.0, 7.0, 2.0) == pytest.approx(0.5)
