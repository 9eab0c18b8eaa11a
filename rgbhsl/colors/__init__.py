"""
rgbhsl Color Classes
====================

Immutable RGBA and HSLA value types.

Usage
-----
>>> from rgbhsl.colors import RgbaColor, HslaColor
>>> color = RgbaColor(1.0, 0.5, 0.25)
>>> print(color)
RGB(1.0, 0.5, 0.25)
>>> color.to_byte_triple()
(255, 128, 64)
>>> HslaColor(400, 150, -20).value
(40.0, 100.0, 0.0, 1.0)

Notes
-----
- Both types are frozen after ``__init__`` and compare by exact value.
- ``RgbaColor`` stores channels verbatim; ``HslaColor`` wraps hue and
  clamps saturation/lightness.
- Conversions and ``complement`` always produce an opaque (alpha 1.0) result.
"""

from .color_base import ColorBase
from .rgb import RgbaColor
from .hsl import HslaColor
from .color import color_convert, get_color_class


__all__ = ['ColorBase', 'RgbaColor', 'HslaColor', 'color_convert', 'get_color_class']
