# utmgrs/utils/trig.py
"""
Angle conversions and the inverse hyperbolic tangent used by the projection.

Every helper accepts a scalar or a numpy array. Scalars come back as plain
Python floats.
"""
import numpy as np


def _unwrap(value):
    if np.ndim(value) == 0:
        return float(value)
    return value


def deg_to_rad(degrees):
    return _unwrap(np.asarray(degrees, dtype=float) * np.pi / 180.0)


def rad_to_deg(radians):
    return _unwrap(np.asarray(radians, dtype=float) * 180.0 / np.pi)


def atanh(x):
    """
    Inverse hyperbolic tangent, split so the |x| >= 1 branch never divides by zero.

    Returns +/-inf at exactly +/-1 and NaN beyond.
    """
    x = np.asarray(x, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        inside = np.log((1 + x) / (1 - x)) / 2
        outside = (np.log(1 + x) - np.log(1 - x)) / 2
        result = np.where(np.abs(x) < 1, inside, outside)
    return _unwrap(result)
