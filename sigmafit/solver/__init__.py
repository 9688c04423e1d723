"""Root-finding engine for sigma fits."""

from .bisection import bracket_and_bisect, geometric_midpoint
from .newton import newton_refine
from .sigma_solver import SigmaSolver, solve

__all__ = [
    'SigmaSolver',
    'solve',
    'bracket_and_bisect',
    'geometric_midpoint',
    'newton_refine',
]
