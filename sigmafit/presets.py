"""
Named presets deriving a fit request from the support bounds alone.

Each preset places the mean and the measured band relative to
average = (min + max) / 2 and delta = (max - min) / 4, and fixes the share
of mass the band should receive.
"""

from dataclasses import dataclass

from .exceptions import UnknownPresetError
from .request import FitRequest

DELTA_FORMULA = "[(max-min)/4]"


@dataclass(frozen=True)
class Preset:
    """
    Request parameters derived from a preset, with their formulas.

    Attributes
    ----------
    name : str
        Registry key (e.g. 'medium')
    label : str
        Display name (e.g. 'Medium')
    average, delta : float
        (min + max) / 2 and (max - min) / 4
    mean : float
        Derived Gaussian center
    from_value, to_value : int
        Derived band, truncated toward zero
    ratio_percent : float
        Target share of mass in percent
    mean_formula, from_formula, to_formula : str
        Human-readable derivations
    """

    name: str
    label: str
    min_value: int
    max_value: int
    average: float
    delta: float
    mean: float
    mean_formula: str
    from_value: int
    from_formula: str
    to_value: int
    to_formula: str
    ratio_percent: float

    @property
    def target_ratio(self):
        return self.ratio_percent / 100.0

    def to_request(self):
        """Build the `FitRequest` this preset describes."""
        return FitRequest(self.min_value, self.max_value, self.mean,
                          self.from_value, self.to_value, self.target_ratio)


def _super_low(min_value, max_value, average, delta):
    return dict(label="Super Low",
                mean=float(min_value), mean_formula="min",
                from_value=min_value, from_formula="min",
                to_value=int(min_value + delta), to_formula="min + " + DELTA_FORMULA,
                ratio_percent=95.0)


def _low(min_value, max_value, average, delta):
    return dict(label="Low",
                mean=average - delta, mean_formula="average - " + DELTA_FORMULA,
                from_value=min_value, from_formula="min",
                to_value=int(average), to_formula="average",
                ratio_percent=80.0)


def _medium(min_value, max_value, average, delta):
    return dict(label="Medium",
                mean=average, mean_formula="average",
                from_value=int(average - delta), from_formula="average - " + DELTA_FORMULA,
                to_value=int(average + delta), to_formula="average + " + DELTA_FORMULA,
                ratio_percent=70.0)


def _high(min_value, max_value, average, delta):
    return dict(label="High",
                mean=average + delta, mean_formula="average + " + DELTA_FORMULA,
                from_value=int(average), from_formula="average",
                to_value=max_value, to_formula="max",
                ratio_percent=80.0)


def _super_high(min_value, max_value, average, delta):
    return dict(label="Super High",
                mean=float(max_value), mean_formula="max",
                from_value=int(average + delta), from_formula="average + " + DELTA_FORMULA,
                to_value=max_value, to_formula="max",
                ratio_percent=95.0)


# Preset registry - maps preset names to derivation functions
PRESET_REGISTRY = {
    'super_low': _super_low,
    'low': _low,
    'medium': _medium,
    'high': _high,
    'super_high': _super_high,
}


def list_presets():
    """
    List all available preset names.

    Returns
    -------
    list
        Preset names, from lowest to highest mean
    """
    return list(PRESET_REGISTRY.keys())


def get_preset(name, min_value, max_value):
    """
    Derive request parameters from a preset.

    Parameters
    ----------
    name : str
        Preset name, one of `list_presets()`
    min_value, max_value : int
        Support bounds

    Returns
    -------
    Preset
        Derived parameters and their formulas

    Raises
    ------
    UnknownPresetError
        If the name is not registered
    """
    if name not in PRESET_REGISTRY:
        raise UnknownPresetError(
            f'"mode" MUST BE one of values: {", ".join(list_presets())} (got {name!r})')

    average = (float(min_value) + float(max_value)) / 2.0
    delta = (float(max_value) - float(min_value)) / 4.0
    fields = PRESET_REGISTRY[name](min_value, max_value, average, delta)
    return Preset(name=name, min_value=min_value, max_value=max_value,
                  average=average, delta=delta, **fields)


def build_request(name, min_value, max_value):
    """Shortcut for `get_preset(name, min_value, max_value).to_request()`."""
    return get_preset(name, min_value, max_value).to_request()
