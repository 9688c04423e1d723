"""Sigma fitting for discretized Gaussian distributions."""

from . import profiles
from . import model
from . import solver
from . import presets
from . import report
from .exceptions import (
    SigmaFitError,
    InvalidRequestError,
    UnknownPresetError,
    UnreachableTargetError,
    ConvergenceError,
)
from .request import FitRequest, FitResult
from .solver import SigmaSolver, solve

__all__ = [
    'profiles',
    'model',
    'solver',
    'presets',
    'report',
    'FitRequest',
    'FitResult',
    'SigmaSolver',
    'solve',
    'SigmaFitError',
    'InvalidRequestError',
    'UnknownPresetError',
    'UnreachableTargetError',
    'ConvergenceError',
]
