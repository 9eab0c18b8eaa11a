from __future__ import annotations
from typing import ClassVar, Sequence, Tuple, TYPE_CHECKING

from ..conversions import bytes_to_unit_rgb, unit_rgb_to_bytes
from ..types.color_types import ByteTriple, ColorMode, UnitTriple
from .color_base import ColorBase, WithAlpha

if TYPE_CHECKING:
    from .hsl import HslaColor


class RgbaColor(ColorBase, WithAlpha):
    """
    Red, green and blue intensity fractions plus opacity.

    Construction is permissive: channels are stored verbatim, even outside
    [0, 1]. Alpha defaults to 1.0.
    """
    __slots__ = ()

    mode:          ClassVar[ColorMode] = "rgba"
    channel_names: ClassVar[Tuple[str, str, str]] = ("r", "g", "b")

    @property
    def r(self) -> float:
        return self.value[0]

    @property
    def g(self) -> float:
        return self.value[1]

    @property
    def b(self) -> float:
        return self.value[2]

    @property
    def rgb(self) -> UnitTriple:
        return self.channels

    @classmethod
    def from_unit_triple(cls, values: Sequence[float]) -> RgbaColor:
        """Same as ``RgbaColor(r, g, b)`` for an ordered ``(r, g, b)`` triple."""
        return cls.from_triple(values)

    @classmethod
    def from_byte_triple(cls, values: Sequence[int]) -> RgbaColor:
        """Build a color from ``(r, g, b)`` bytes, mapping each ``v`` to ``v / 255``."""
        return cls(*bytes_to_unit_rgb(values))

    @classmethod
    def from_hsla(cls, color: HslaColor) -> RgbaColor:
        from .hsl import HslaColor
        if not isinstance(color, HslaColor):
            raise TypeError(f"from_hsla expects HslaColor, got {type(color).__name__}")
        return color.convert("rgba")

    def to_byte_triple(self) -> ByteTriple:
        """
        Export ``(r, g, b)`` as bytes using ``round(c * 255)``.

        Alpha is dropped. Out-of-range channels saturate with a ``RuntimeWarning``.
        """
        return unit_rgb_to_bytes(self.channels)

    def to_hsla(self) -> HslaColor:
        return self.convert("hsla")

    def complement(self) -> RgbaColor:
        """
        Invert each of r, g and b (``1 - c``).

        The result is always opaque; the original alpha is not carried over.
        """
        r, g, b = self.channels
        return RgbaColor(1.0 - r, 1.0 - g, 1.0 - b)

    def __str__(self) -> str:
        r, g, b = self.channels
        return f"RGB({r!r}, {g!r}, {b!r})"
