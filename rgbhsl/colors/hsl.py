from __future__ import annotations
from typing import ClassVar, Tuple, TYPE_CHECKING

from ..conversions import normalize_hsl
from ..types.color_types import ColorMode, UnitTriple
from .color_base import ColorBase, WithAlpha

if TYPE_CHECKING:
    from .rgb import RgbaColor


class HslaColor(ColorBase, WithAlpha):
    """
    Hue in degrees, saturation and lightness in percent, plus opacity.

    The constructor normalizes: hue wraps into [0, 360) and saturation and
    lightness clamp into [0, 100]. Alpha defaults to 1.0 and is stored as given.
    """
    __slots__ = ()

    mode:          ClassVar[ColorMode] = "hsla"
    channel_names: ClassVar[Tuple[str, str, str]] = ("h", "s", "l")

    @classmethod
    def _normalize(cls, c1: float, c2: float, c3: float) -> UnitTriple:
        return normalize_hsl(c1, c2, c3)

    @property
    def h(self) -> float:
        return self.value[0]

    @property
    def s(self) -> float:
        return self.value[1]

    @property
    def l(self) -> float:
        return self.value[2]

    @property
    def hsl(self) -> UnitTriple:
        return self.channels

    @classmethod
    def from_rgba(cls, color: RgbaColor) -> HslaColor:
        from .rgb import RgbaColor
        if not isinstance(color, RgbaColor):
            raise TypeError(f"from_rgba expects RgbaColor, got {type(color).__name__}")
        return color.convert("hsla")

    def to_rgba(self) -> RgbaColor:
        return self.convert("rgba")
