from __future__ import annotations
from typing import Literal, Tuple

UnitTriple = Tuple[float, float, float]
ByteTriple = Tuple[int, int, int]
ColorValue = Tuple[float, float, float, float]
ColorSpace = Literal["rgb", "rgba", "hsl", "hsla", "bytes"]
ColorMode = Literal["rgba", "hsla"]
