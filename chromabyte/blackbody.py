"""
Black-body color estimation.

The visible spectrum of an ideal radiator is sampled with a simplified Planck
law over three wavelength bands (red, green, blue). Each band mean is divided by
the mean over the whole visible band, and the three ratios are scaled so the
strongest one becomes 1.0 before conversion to bytes.

Wavelengths are expressed in units of 100 nm (``3.8`` is 380 nm), which is the
unit the two law constants are folded into. Temperatures are in kelvin.
"""
from __future__ import annotations
from numbers import Real
from typing import Tuple
import math
import warnings
import numpy as np
from .colors.color import Color

PLANCK_SCALE = 1.0e10
SECOND_RADIATION = 143877.68775

SAMPLE_INTERVALS = 100
# One more sample than intervals, but the sum is divided by 101 regardless of
# the band width. Kept as-is so outputs stay identical to existing data.
SAMPLE_DIVISOR = 101.0

Band = Tuple[float, float]
VISIBLE_BAND: Band = (3.8, 7.5)
RED_BAND: Band = (6.0, 7.0)
GREEN_BAND: Band = (5.0, 6.0)
BLUE_BAND: Band = (3.8, 5.0)


def _exp(x: float) -> float:
    """libm ``exp`` that overflows to ``inf`` instead of raising ``OverflowError``."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def planck_law(wavelength: float, temperature: float) -> np.float64:
    """
    Unnormalized spectral radiance at ``wavelength`` for ``temperature``.

    The fifth power is two squarings and a multiply, and ``exp`` is the scalar
    libm one, so results match existing data to the last bit. Floating-point
    faults (zero temperature, overflow in the exponent) follow IEEE semantics
    and produce ``inf``/``nan``/``0`` rather than raising.
    """
    with np.errstate(all="ignore"):
        wavelength = np.float64(wavelength)
        exponent = np.float64(SECOND_RADIATION) / (wavelength * np.float64(temperature))
        w2 = wavelength * wavelength
        return np.float64(PLANCK_SCALE) / (w2 * w2 * wavelength * (_exp(exponent) - 1.0))


def band_mean(start: float, end: float, temperature: float) -> np.float64:
    """
    Mean radiance over ``[start, end]`` from 101 evenly spaced samples.

    Args:
        start: Lower wavelength, inclusive.
        end: Upper wavelength, inclusive.
        temperature: Radiator temperature in kelvin.

    Returns:
        Sum of the samples, in sample order, divided by :data:`SAMPLE_DIVISOR`.
    """
    total = np.float64(0.0)
    with np.errstate(all="ignore"):
        for i in range(SAMPLE_INTERVALS + 1):
            wavelength = start + (end - start) * i / SAMPLE_INTERVALS
            total += planck_law(wavelength, temperature)
        return total / np.float64(SAMPLE_DIVISOR)


def band_ratios(temperature: float) -> Tuple[np.float64, np.float64, np.float64, np.float64]:
    """Return ``(red, green, blue, total)`` where each band is relative to ``total``."""
    total = band_mean(*VISIBLE_BAND, temperature)
    with np.errstate(all="ignore"):
        red = band_mean(*RED_BAND, temperature) / total
        green = band_mean(*GREEN_BAND, temperature) / total
        blue = band_mean(*BLUE_BAND, temperature) / total
    return red, green, blue, total


def normalization_peak(red, green, blue):
    """
    Pick the channel the other two are scaled against.

    Red is taken only when strictly greater than both others, then green when
    strictly greater than blue, else blue. Tied channels hold the same value,
    so the normalized result is the same whichever of them is returned.
    """
    if red > green and red > blue:
        return red
    if green > blue:
        return green
    return blue


def black_body(temperature: Real) -> Color:
    """
    Approximate the visible color of a black body at ``temperature`` kelvin.

    The strongest band maps to 255. Alpha carries the unnormalized visible-band
    mean through the usual clamp, so anything much hotter than 1000 K comes
    out opaque.

    Non-positive or non-finite temperatures are not rejected: a
    ``RuntimeWarning`` is issued and the IEEE result (usually NaN, which
    becomes 0) is converted as-is.
    """
    if isinstance(temperature, bool) or not isinstance(temperature, Real):
        raise TypeError(f"temperature must be a real number, got {type(temperature).__name__}")
    try:
        temperature = float(temperature)
    except OverflowError:
        # Integers past the float64 range saturate like an int-to-float cast
        temperature = math.inf if temperature > 0 else -math.inf
    if not (math.isfinite(temperature) and temperature > 0):
        warnings.warn(
            f"black_body temperature {temperature!r} is not a positive finite number; "
            "the result is not physically meaningful",
            RuntimeWarning,
            stacklevel=2,
        )

    red, green, blue, total = band_ratios(temperature)
    peak = normalization_peak(red, green, blue)
    with np.errstate(all="ignore"):
        return Color.rgba_f64(red / peak, green / peak, blue / peak, total)
