from typing import Callable, Dict, Sequence, Tuple

from .to_hsl import unit_rgb_to_hsl, normalize_hsl
from .to_rgb import hsl_to_unit_rgb
from .to_bytes import bytes_to_unit_rgb, unit_rgb_to_bytes
from ..types.color_types import ColorSpace
from ..utils import expect_triple


def _bytes_to_hsl(r: int, g: int, b: int) -> Tuple[float, float, float]:
    return unit_rgb_to_hsl(*bytes_to_unit_rgb((r, g, b)))


def _hsl_to_bytes(h: float, s: float, l: float) -> Tuple[int, int, int]:
    return unit_rgb_to_bytes(hsl_to_unit_rgb(h, s, l))


CONVERT_DIRECT: Dict[Tuple[str, str], Callable[..., tuple]] = {
    ("rgb", "hsl"): unit_rgb_to_hsl,
    ("hsl", "rgb"): hsl_to_unit_rgb,
    ("bytes", "rgb"): lambda r, g, b: bytes_to_unit_rgb((r, g, b)),
    ("rgb", "bytes"): lambda r, g, b: unit_rgb_to_bytes((r, g, b)),
    ("bytes", "hsl"): _bytes_to_hsl,
    ("hsl", "bytes"): _hsl_to_bytes,
}


def _base_space(space: str) -> str:
    space = space.lower()
    # alpha is never carried through the tuple-level math
    if space in ("rgba", "hsla"):
        return space[:3]
    return space


def convert(
    color: Sequence[float],
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> tuple:
    """
    Convert a 3-channel tuple between ``rgb`` (unit floats), ``hsl``
    (degrees and percentages) and ``bytes`` (0-255 integers).

    ``rgba``/``hsla`` are accepted as aliases of ``rgb``/``hsl``; a fourth
    channel is not accepted.
    HSL input is normalized (hue wrapped, saturation and lightness clamped)
    before conversion.

    Raises:
        ValueError: for an unknown space pair or a value that is not a triple.
    """
    fs, ts = _base_space(from_space), _base_space(to_space)
    values = expect_triple(color, "convert")
    if fs == "hsl":
        # hsl_to_unit_rgb expects hue already in [0, 360)
        values = normalize_hsl(*values)

    if fs == ts:
        return values  # No conversion needed

    key = (fs, ts)
    if key not in CONVERT_DIRECT:
        raise ValueError(f"Unsupported conversion: {from_space} -> {to_space}")
    return CONVERT_DIRECT[key](*values)
