from ..types.format_type import HUE_360, PERCENT_MAX
from ..types.color_types import UnitTriple

ONE_THIRD = 1.0 / 3.0
ONE_SIXTH = 1.0 / 6.0
TWO_THIRDS = 2.0 / 3.0


def hue_to_rgb(p: float, q: float, t: float) -> float:
    """
    Evaluate one channel of the hexagonal hue ramp.

    ``t`` is a hue fraction offset by the channel's rotation. Only a single
    wrap is applied in each direction, so ``t`` must lie in ``[-1, 2)``.

    Args:
        p: Lower ramp bound, ``2 * l - q``
        q: Upper ramp bound
        t: Hue fraction for this channel

    Returns:
        Channel value between ``p`` and ``q``
    """
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0
    if t < ONE_SIXTH:
        return p + (q - p) * 6.0 * t
    if t < 0.5:
        return q
    if t < TWO_THIRDS:
        return p + (q - p) * (TWO_THIRDS - t) * 6.0
    return p


## HSL to RGB conversions

def hsl_to_unit_rgb(h: float, s: float, l: float) -> UnitTriple:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in percent [0, 100]
        l: Lightness in percent [0, 100]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = h / HUE_360
    s = s / PERCENT_MAX
    l = l / PERCENT_MAX

    if s == 0.0:
        # achromatic
        return l, l, l

    q = l * (1.0 + s) if l < 0.5 else l + s - l * s
    p = 2.0 * l - q
    r = hue_to_rgb(p, q, h + ONE_THIRD)
    g = hue_to_rgb(p, q, h)
    b = hue_to_rgb(p, q, h - ONE_THIRD)
    return r, g, b
