"""rgbhsl: RGBA <-> HSLA color value types and conversions."""

from .colors.rgb import RgbaColor
from .colors.hsl import HslaColor
from .colors.color_base import ColorBase
from .colors.color import color_convert, get_color_class

from .conversions import (
    unit_rgb_to_hsl,
    hsl_to_unit_rgb,
    hue_to_rgb,
    normalize_hsl,
    normalize_hue,
    bytes_to_unit_rgb,
    unit_rgb_to_bytes,
    convert,
)

__version__ = "1.0.0"

__all__ = [
    # core color types
    "ColorBase",
    "RgbaColor",
    "HslaColor",
    "color_convert",
    "get_color_class",
    # conversions
    "unit_rgb_to_hsl",
    "hsl_to_unit_rgb",
    "hue_to_rgb",
    "normalize_hsl",
    "normalize_hue",
    "bytes_to_unit_rgb",
    "unit_rgb_to_bytes",
    "convert",
    "__version__",
]
