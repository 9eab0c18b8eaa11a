import warnings
from typing import Sequence

import numpy as np

from ..types.format_type import BYTE_MAX, UNIT_MAX, byte_dtype
from ..types.color_types import ByteTriple, UnitTriple
from ..utils import expect_triple


def bytes_to_unit_rgb(values: Sequence[int]) -> UnitTriple:
    """
    Map three bytes (0-255) to unit floats by dividing by 255.

    Raises:
        ValueError: if there are not exactly three values or one is not an integer in 0-255.
    """
    values = expect_triple(values, "bytes_to_unit_rgb")
    for v in values:
        if not 0 <= v <= BYTE_MAX or v != int(v):
            raise ValueError(f"byte channel must be an integer in 0-{BYTE_MAX}: {v!r}")
    r, g, b = (int(v) / float(BYTE_MAX) for v in values)
    return r, g, b


def unit_rgb_to_bytes(values: Sequence[float]) -> ByteTriple:
    """
    Map three unit floats to bytes with ``round(c * 255)``.

    Rounding is half away from zero. Channels outside [0, 1] saturate to
    0 or 255 and emit a ``RuntimeWarning``.
    """
    arr = np.asarray(expect_triple(values, "unit_rgb_to_bytes"), dtype=float)
    if np.any((arr < 0.0) | (arr > UNIT_MAX)):
        warnings.warn(
            f"Channels {tuple(arr.tolist())} fall outside [0, 1]; saturating byte export",
            RuntimeWarning,
            stacklevel=2,
        )
        arr = np.clip(arr, 0.0, UNIT_MAX)
    scaled = np.floor(arr * BYTE_MAX + 0.5).astype(byte_dtype)
    r, g, b = (int(v) for v in scaled)
    return r, g, b
