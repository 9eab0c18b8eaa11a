from __future__ import annotations
from .color_base import ColorBase
from .rgb import RgbaColor
from .hsl import HslaColor
from ..conversions import convert
from ..types.color_types import ColorMode

unified_mode_to_class: dict[str, type[ColorBase]] = {
    "rgba": RgbaColor,
    "hsla": HslaColor,
}


def get_color_class(color_space: str) -> type[ColorBase]:
    color_class = unified_mode_to_class.get(color_space)
    if color_class is None:
        raise ValueError(f"Unsupported color space: {color_space}")
    return color_class


def color_convert(self: ColorBase, to_space: ColorMode | str | None = None) -> ColorBase:
    """
    Convert this color to another color space.

    Args:
        to_space: Target color space ("rgba"/"hsla"; "rgb"/"hsl" are accepted).
            Defaults to the current space.

    Returns:
        New ColorBase instance in the target space. The result is always
        opaque: alpha is not carried across spaces.
    """
    to_space = (to_space or self.mode).lower()
    if to_space in ("rgb", "hsl"):
        to_space += "a"
    cls = get_color_class(to_space)
    if to_space == self.mode:
        return self
    result = convert(self.channels, self.mode, to_space)
    return cls(*result)


ColorBase.convert = color_convert
