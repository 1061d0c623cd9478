import math
import warnings

import numpy as np
import pytest

from chromabyte import Color, black_body, planck_law, band_mean, band_ratios, normalization_peak
from chromabyte import blackbody
from chromabyte.samples.colors import samples_black_body

SUN = 5778.0


def test_black_body_is_deterministic():
    first = black_body(SUN)
    second = black_body(SUN)
    assert first == second
    assert first.to_bytes() == second.to_bytes()


def test_black_body_dominant_channel_is_full():
    for temperature in (1000.0, 2000.0, SUN, 6500.0, 10000.0, 40000.0):
        color = black_body(temperature)
        assert max(color.r(), color.g(), color.b()) == 255


def test_black_body_alpha_saturates_for_realistic_temperatures():
    assert black_body(SUN).a() == 255


def test_black_body_classmethod_matches_function():
    assert Color.black_body(SUN) == black_body(SUN)
    assert Color.black_body(3000) == black_body(3000.0)


def test_black_body_hue_shifts_with_temperature():
    cool = black_body(2000.0)
    assert cool.r() == 255
    assert cool.b() < cool.g() < cool.r()

    hot = black_body(20000.0)
    assert hot.b() == 255
    assert hot.r() < hot.g() < hot.b()


def test_black_body_matches_band_ratios():
    red, green, blue, total = band_ratios(SUN)
    peak = max(red, green, blue)
    expected = Color.rgba_f64(red / peak, green / peak, blue / peak, total)
    assert black_body(SUN) == expected


def test_black_body_red_wins_tie(monkeypatch):
    monkeypatch.setattr(blackbody, "band_ratios", lambda temperature: (0.5, 0.5, 0.25, 2.0))
    color = black_body(SUN)
    assert color.r() == 255
    assert color.g() == 255
    assert color.b() == 127
    assert color.a() == 255


def test_normalization_peak_order():
    assert normalization_peak(0.5, 0.5, 0.25) == 0.5
    assert normalization_peak(0.3, 0.2, 0.1) == 0.3
    assert normalization_peak(0.1, 0.3, 0.2) == 0.3
    assert normalization_peak(0.1, 0.2, 0.2) == 0.2
    assert normalization_peak(0.4, 0.2, 0.4) == 0.4


def test_normalization_peak_comparison_chain():
    # Equal values, distinguishable objects
    red, green, blue = np.float64(0.5), np.float64(0.5), np.float64(0.1)
    assert normalization_peak(red, green, blue) is green
    green_tie, blue_tie = np.float64(0.7), np.float64(0.7)
    assert normalization_peak(np.float64(0.1), green_tie, blue_tie) is blue_tie
    assert normalization_peak(np.float64(0.9), green_tie, blue_tie) == 0.9


def _reference_band_mean(start, end, temperature):
    total = 0.0
    for i in range(101):
        w = start + (end - start) * i / 100
        w2 = w * w
        total += 1.0e10 / (w2 * w2 * w * (math.exp(143877.68775 / (w * temperature)) - 1.0))
    return total / 101.0


def test_planck_law_literal_formula():
    assert planck_law(5.5, SUN) == 21710.08420748987
    w = 4.37
    expected = 1.0e10 / ((w * w) * (w * w) * w * (math.exp(143877.68775 / (w * SUN)) - 1.0))
    assert planck_law(w, SUN) == expected


def test_band_mean_matches_scalar_loop_exactly():
    assert band_mean(5.0, 6.0, 4000.0) == 2852.0509912424945
    for temperature in (800.0, 1500.0, SUN, 9000.0, 33333.0):
        for start, end in ((3.8, 7.5), (6.0, 7.0), (5.0, 6.0), (3.8, 5.0)):
            assert band_mean(start, end, temperature) == _reference_band_mean(start, end, temperature)


def test_band_ratios_match_reference_bits():
    for temperature, (total, red, green, blue, _) in samples_black_body.items():
        assert band_ratios(temperature) == (red, green, blue, total)


def test_black_body_reference_bytes():
    for temperature, (*_, expected) in samples_black_body.items():
        assert black_body(temperature).value == expected
        assert black_body(int(temperature)).value == expected


def test_band_mean_of_point_interval():
    value = planck_law(5.0, SUN)
    assert band_mean(5.0, 5.0, SUN) == pytest.approx(value)


def test_huge_integer_temperature_saturates():
    with pytest.warns(RuntimeWarning):
        color = black_body(10 ** 400)
    assert isinstance(color, Color)
    with pytest.warns(RuntimeWarning):
        assert black_body(-10 ** 400) == black_body(float("-inf"))


def test_zero_temperature_warns_and_propagates():
    with pytest.warns(RuntimeWarning, match="not a positive finite number"):
        color = black_body(0.0)
    assert color == Color.TRANSPARENT


def test_negative_and_nan_temperatures_do_not_raise():
    for temperature in (-5778.0, float("nan"), float("inf")):
        with pytest.warns(RuntimeWarning):
            color = black_body(temperature)
        assert isinstance(color, Color)


def test_positive_temperature_emits_no_warning():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        black_body(SUN)
        black_body(300.0)


def test_black_body_rejects_non_numbers():
    with pytest.raises(TypeError):
        black_body("5778")
