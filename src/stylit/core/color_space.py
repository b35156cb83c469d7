"""
Color Space Conversions and Perceptual Distance

This module converts garment colors between the representations the engine
works with and measures how different two colors look:

- hex  -> RGB (0-255)
- RGB  -> CIE XYZ (sRGB primaries, D65, scaled x100)
- XYZ  -> CIE Lab (D65 white point)
- ΔE76 (Euclidean distance in Lab) and CIEDE2000

Malformed hex input never raises: the conversion helpers return None and the
callers turn that into an explicit status.
"""

import logging
import re
from typing import Optional, Sequence, Tuple

import numpy as np

from .models import ColorSample

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]
XYZ = Tuple[float, float, float]
Lab = Tuple[float, float, float]

# D65 reference white (2° observer), same scale as rgb_to_xyz output
D65_WHITE = np.array([95.047, 100.000, 108.883])

# Linear sRGB -> XYZ
SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])

_DELTA = 6.0 / 29.0
_HEX_RE = re.compile(r'^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')


def hex_to_rgb(hex_code: str) -> Optional[RGB]:
    """
    Parse a hex color into an (R, G, B) tuple.

    Accepts 3- or 6-digit hex with an optional leading '#', in any case.

    Args:
        hex_code: e.g. "#FF6F61", "ff6f61", "#F00"

    Returns:
        (R, G, B) with channels in 0-255, or None for any other shape
    """
    if not isinstance(hex_code, str):
        return None

    match = _HEX_RE.match(hex_code.strip())
    if not match:
        return None

    digits = match.group(1)
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)

    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def normalize_hex(hex_code: str) -> Optional[str]:
    """Return the canonical '#RRGGBB' form of a hex color, or None."""
    rgb = hex_to_rgb(hex_code)
    if rgb is None:
        return None
    return rgb_to_hex(rgb)


def rgb_to_hex(rgb: Sequence[float]) -> str:
    """Format an RGB triple as '#RRGGBB', clamping channels to 0-255."""
    r, g, b = (int(round(min(255, max(0, c)))) for c in rgb)
    return f"#{r:02X}{g:02X}{b:02X}"


def rgb_to_xyz(rgb: Sequence[float]) -> XYZ:
    """
    Convert an sRGB triple (0-255) to CIE XYZ scaled x100.

    Each channel is gamma-decoded before the fixed sRGB matrix is applied.
    """
    c = np.asarray(rgb, dtype=float) / 255.0
    linear = np.where(c <= 0.04045, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)
    x, y, z = SRGB_TO_XYZ.dot(linear) * 100.0
    return (float(x), float(y), float(z))


def _lab_f(t: np.ndarray) -> np.ndarray:
    return np.where(t > _DELTA ** 3, np.cbrt(t), t / (3 * _DELTA ** 2) + 4.0 / 29.0)


def xyz_to_lab(xyz: Sequence[float]) -> Lab:
    """Convert CIE XYZ (x100 scale) to CIE Lab relative to the D65 white point."""
    fx, fy, fz = _lab_f(np.asarray(xyz, dtype=float) / D65_WHITE)
    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)
    return (float(L), float(a), float(b))


def rgb_to_lab(rgb: Sequence[float]) -> Lab:
    return xyz_to_lab(rgb_to_xyz(rgb))


def hex_to_lab(hex_code: str) -> Optional[Lab]:
    """Convert a hex color straight to Lab; None when the hex is malformed."""
    rgb = hex_to_rgb(hex_code)
    if rgb is None:
        return None
    return rgb_to_lab(rgb)


def color_sample(hex_code: str) -> Optional[ColorSample]:
    """Build an immutable ColorSample for a hex color, or None."""
    rgb = hex_to_rgb(hex_code)
    if rgb is None:
        return None
    L, a, b = rgb_to_lab(rgb)
    return ColorSample(hex=rgb_to_hex(rgb), L=L, a=a, b=b)


def chroma(lab: Sequence[float]) -> float:
    """Chroma C*ab = sqrt(a² + b²)."""
    return float(np.hypot(lab[1], lab[2]))


def hue_angle(lab: Sequence[float]) -> float:
    """Hue angle h_ab in degrees, 0-360."""
    return float(np.degrees(np.arctan2(lab[2], lab[1])) % 360.0)


# ---------------------------------------------------------------------------
# Perceptual distance
# ---------------------------------------------------------------------------

def delta_e_76(lab1: Sequence[float], lab2: Sequence[float]) -> float:
    """
    CIE76 color difference: Euclidean distance in Lab.

    ΔE interpretation:
    - < 1: not perceptible
    - 1-2: perceptible on close observation
    - 2-10: perceptible at a glance
    - > 50: opposite colors
    """
    diff = np.asarray(lab1, dtype=float) - np.asarray(lab2, dtype=float)
    return float(np.sqrt(np.dot(diff, diff)))


def delta_e_76_many(lab: Sequence[float], labs: np.ndarray) -> np.ndarray:
    """ΔE76 from one Lab color to every row of an N x 3 array."""
    return np.linalg.norm(np.asarray(labs, dtype=float) - np.asarray(lab, dtype=float), axis=1)


def delta_e_2000_many(lab: Sequence[float], labs: np.ndarray) -> np.ndarray:
    """
    CIEDE2000 color difference from one Lab color to every row of an N x 3 array.

    Reference conditions (kL = kC = kH = 1).
    """
    labs = np.atleast_2d(np.asarray(labs, dtype=float))
    L1, a1, b1 = (float(v) for v in lab)
    L2, a2, b2 = labs[:, 0], labs[:, 1], labs[:, 2]

    C1 = np.hypot(a1, b1)
    C2 = np.hypot(a2, b2)
    C_bar7 = ((C1 + C2) / 2.0) ** 7
    G = 0.5 * (1.0 - np.sqrt(C_bar7 / (C_bar7 + 25.0 ** 7)))

    a1p = a1 * (1.0 + G)
    a2p = a2 * (1.0 + G)
    C1p = np.hypot(a1p, b1)
    C2p = np.hypot(a2p, b2)
    h1p = np.degrees(np.arctan2(b1, a1p)) % 360.0
    h2p = np.degrees(np.arctan2(b2, a2p)) % 360.0

    dLp = L2 - L1
    dCp = C2p - C1p

    chroma_product = C1p * C2p
    dh = h2p - h1p
    dhp = np.where(dh > 180.0, dh - 360.0, np.where(dh < -180.0, dh + 360.0, dh))
    dhp = np.where(chroma_product == 0, 0.0, dhp)
    dHp = 2.0 * np.sqrt(chroma_product) * np.sin(np.radians(dhp / 2.0))

    Lp_bar = (L1 + L2) / 2.0
    Cp_bar = (C1p + C2p) / 2.0

    h_sum = h1p + h2p
    hp_bar = np.where(
        np.abs(h1p - h2p) <= 180.0,
        h_sum / 2.0,
        np.where(h_sum < 360.0, (h_sum + 360.0) / 2.0, (h_sum - 360.0) / 2.0),
    )
    hp_bar = np.where(chroma_product == 0, h_sum, hp_bar)

    T = (1.0
         - 0.17 * np.cos(np.radians(hp_bar - 30.0))
         + 0.24 * np.cos(np.radians(2.0 * hp_bar))
         + 0.32 * np.cos(np.radians(3.0 * hp_bar + 6.0))
         - 0.20 * np.cos(np.radians(4.0 * hp_bar - 63.0)))

    d_theta = 30.0 * np.exp(-(((hp_bar - 275.0) / 25.0) ** 2))
    Cp_bar7 = Cp_bar ** 7
    R_C = 2.0 * np.sqrt(Cp_bar7 / (Cp_bar7 + 25.0 ** 7))
    S_L = 1.0 + (0.015 * (Lp_bar - 50.0) ** 2) / np.sqrt(20.0 + (Lp_bar - 50.0) ** 2)
    S_C = 1.0 + 0.045 * Cp_bar
    S_H = 1.0 + 0.015 * Cp_bar * T
    R_T = -np.sin(np.radians(2.0 * d_theta)) * R_C

    l_term = dLp / S_L
    c_term = dCp / S_C
    h_term = dHp / S_H
    squared = l_term ** 2 + c_term ** 2 + h_term ** 2 + R_T * c_term * h_term
    return np.sqrt(np.maximum(squared, 0.0))


def delta_e_2000(lab1: Sequence[float], lab2: Sequence[float]) -> float:
    """CIEDE2000 color difference between two Lab colors."""
    return float(delta_e_2000_many(lab1, np.asarray([lab2], dtype=float))[0])
