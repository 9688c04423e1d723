import pytest

from sigmafit import FitRequest, SigmaFitError, UnknownPresetError
from sigmafit.presets import build_request, get_preset, list_presets


def test_list_presets_order():
    assert list_presets() == ['super_low', 'low', 'medium', 'high', 'super_high']


def test_medium_preset_derivation():
    preset = get_preset('medium', 10, 30)
    assert preset.average == 20.0
    assert preset.delta == 5.0
    assert preset.mean == 20.0
    assert (preset.from_value, preset.to_value) == (15, 25)
    assert preset.target_ratio == pytest.approx(0.70)
    assert preset.label == 'Medium'
    assert preset.from_formula == 'average - [(max-min)/4]'


@pytest.mark.parametrize("name, mean, from_value, to_value, ratio", [
    ('super_low', 10.0, 10, 15, 0.95),
    ('low', 15.0, 10, 20, 0.80),
    ('medium', 20.0, 15, 25, 0.70),
    ('high', 25.0, 20, 30, 0.80),
    ('super_high', 30.0, 25, 30, 0.95),
])
def test_preset_requests(name, mean, from_value, to_value, ratio):
    request = build_request(name, 10, 30)
    assert request == FitRequest(10, 30, mean, from_value, to_value, ratio)


def test_band_bounds_truncate_toward_zero():
    preset = get_preset('medium', 0, 7)
    assert (preset.average, preset.delta) == (3.5, 1.75)
    assert (preset.from_value, preset.to_value) == (1, 5)

    negative = get_preset('medium', -7, 0)
    assert (negative.from_value, negative.to_value) == (-5, -1)


def test_unknown_preset_lists_valid_names():
    with pytest.raises(UnknownPresetError) as excinfo:
        get_preset('extreme', 10, 30)
    message = str(excinfo.value)
    for name in list_presets():
        assert name in message
    assert isinstance(excinfo.value, KeyError)
    assert isinstance(excinfo.value, SigmaFitError)
