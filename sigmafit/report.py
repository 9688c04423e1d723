"""
Text rendering of fit requests and results.
"""

import numpy as np

from .model import mass


def format_value(value):
    """Shortest round-trip decimal form of a float, never in exponent notation."""
    return np.format_float_positional(float(value), trim='-')


def format_request(request, ratio_percent=None):
    """Lines describing a direct request."""
    ratio_percent = request.target_ratio * 100.0 if ratio_percent is None else ratio_percent
    return '\n'.join([
        f"min = {request.min_value}",
        f"max = {request.max_value}",
        f"mean_value = {format_value(request.mean)}",
        f"from = {request.from_value}",
        f"to = {request.to_value}",
        f"ratio = {ratio_percent:.2f}%",
    ])


def format_preset(preset):
    """
    Lines describing a preset derivation.

    Parameters
    ----------
    preset : Preset
        Derived preset parameters

    Returns
    -------
    str
        Bounds, formulas and derived values
    """
    lines = []
    lines.append(f"min = {preset.min_value}")
    lines.append(f"max = {preset.max_value}")
    lines.append(f"mode = {preset.label}")
    lines.append("-" * 29)
    lines.append(f"average = (min+max)/2 = {format_value(preset.average)}")
    lines.append(f"mean_value = {preset.mean_formula} = {format_value(preset.mean)}")
    lines.append(f"from = {preset.from_formula} = {preset.from_value}")
    lines.append(f"to = {preset.to_formula} = {preset.to_value}")
    lines.append(f"ratio = {preset.ratio_percent:.2f}%")
    lines.append("-" * 29)
    return '\n'.join(lines)


def format_result(result, verbose=False):
    """
    Format a fit result for display.

    Parameters
    ----------
    result : FitResult
        Solved fit
    verbose : bool, optional
        Include solver diagnostics

    Returns
    -------
    str
        Formatted result string
    """
    lines = [f"Deviation Value = {result.sigma!r}"]
    if verbose:
        lines.append(f"Initial estimate = {result.initial_sigma:.6g}")
        lines.append(f"Achieved ratio = {result.achieved_ratio * 100.0:.6f}%")
        lines.append(f"Residual = {result.residual:.3e}")
        lines.append(f"Newton steps = {result.iterations} "
                     f"({'converged' if result.converged else 'ceiling reached'})")
    lines.append("=" * 46)
    lines.append(f"mean_value (x1000) = {format_value(result.request.mean * 1000)}")
    lines.append(f"Deviation Value (x1000 & Rounded) = {result.sigma_x1000}")
    return '\n'.join(lines)


def format_mass_table(result, mark=True):
    """
    Per-integer probability table of the fitted distribution.

    Values are percentages. The integer nearest the mean is marked when it
    lies inside the support.
    """
    request = result.request
    points, probabilities = mass(request, result.sigma)
    center = int(round(request.mean))

    lines = ['  n: value (%)', '---:----------']
    for x, p in zip(points, probabilities):
        marker = ' <--' if mark and x == center else ''
        lines.append(f"{str(x).rjust(3)}: {p * 100.0:0.4f}{marker}")
    lines.append(f"Mass in [{request.from_value}, {request.to_value}]: "
                 f"{result.achieved_ratio * 100.0:0.4f}%")
    return '\n'.join(lines)
