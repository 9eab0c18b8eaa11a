"""
rgbhsl Color Space Conversions
==============================

Scalar RGB <-> HSL conversion math operating on plain tuples.

Conversion Functions
-------------------

RGB → HSL:
    unit_rgb_to_hsl(r, g, b)
        r, g, b in [0, 1] -> hue [0, 360), saturation and lightness [0, 100]

HSL → RGB:
    hsl_to_unit_rgb(h, s, l)
        Inverse of the above; achromatic when s == 0
    hue_to_rgb(p, q, t)
        Single-channel hexagonal hue ramp used by hsl_to_unit_rgb

Bytes:
    bytes_to_unit_rgb(values)
        (0-255, 0-255, 0-255) -> unit floats
    unit_rgb_to_bytes(values)
        unit floats -> bytes, saturating out-of-range channels

High-Level API
-------------
    convert(color, from_space, to_space)
        Dispatch between "rgb", "hsl" and "bytes"

Examples
--------
>>> from rgbhsl.conversions import unit_rgb_to_hsl, hsl_to_unit_rgb
>>> tuple(round(c, 6) for c in unit_rgb_to_hsl(1.0, 0.5, 0.25))
(20.0, 100.0, 62.5)
>>> tuple(round(c, 6) for c in hsl_to_unit_rgb(20.0, 100.0, 62.5))
(1.0, 0.5, 0.25)
"""

# RGB → HSL conversions
from .to_hsl import (
    unit_rgb_to_hsl,
    normalize_hsl,
    normalize_hue,
)

# HSL → RGB conversions
from .to_rgb import (
    hsl_to_unit_rgb,
    hue_to_rgb,
)

# Byte conversions
from .to_bytes import bytes_to_unit_rgb, unit_rgb_to_bytes

# High-level API
from .wrapper import convert

__all__ = [
    # RGB → HSL
    'unit_rgb_to_hsl',
    'normalize_hsl',
    'normalize_hue',

    # HSL → RGB
    'hsl_to_unit_rgb',
    'hue_to_rgb',

    # Bytes
    'bytes_to_unit_rgb',
    'unit_rgb_to_bytes',

    # High-level API
    'convert',
]
