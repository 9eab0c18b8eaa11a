import math

from boundednumbers import clamp

from ..types.format_type import HUE_360, PERCENT_MAX
from ..types.color_types import UnitTriple


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    h = h % HUE_360
    # a tiny negative input wraps to exactly 360.0
    if h >= HUE_360:
        h -= HUE_360
    return h


def normalize_hsl(h: float, s: float, l: float) -> UnitTriple:
    """Wrap hue into [0, 360) and clamp saturation and lightness into [0, 100]."""
    return (
        normalize_hue(h),
        float(clamp(s, 0.0, PERCENT_MAX)),
        float(clamp(l, 0.0, PERCENT_MAX)),
    )


## RGB to HSL conversions

def unit_rgb_to_hsl(r: float, g: float, b: float) -> UnitTriple:
    """
    Convert RGB to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,100], lightness [0,100])
        already passed through ``normalize_hsl``.
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    lightness = (max_c + min_c) / 2.0

    if max_c == min_c:
        # achromatic
        hue = 0.0
        saturation = 0.0
    else:
        delta = max_c - min_c
        denom = 2.0 - max_c - min_c if lightness > 0.5 else max_c + min_c
        # only out-of-range channels reach a zero denominator; normalize_hsl clamps inf to 100
        saturation = delta / denom if denom != 0.0 else math.inf

        if max_c == r:
            hue = (g - b) / delta + (6.0 if g < b else 0.0)
        elif max_c == g:
            hue = (b - r) / delta + 2.0
        else:
            hue = (r - g) / delta + 4.0
        hue = hue / 6.0

    return normalize_hsl(
        HUE_360 * hue,
        PERCENT_MAX * saturation,
        PERCENT_MAX * lightness,
    )
