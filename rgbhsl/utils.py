from typing import Any
from collections.abc import Sized

def get_dimension(element: Any) -> int:
    if element is None:
        return 0
    if isinstance(element, Sized):
        return len(element)
    return 1


def expect_triple(values: Any, what: str) -> tuple:
    """Return ``values`` as a tuple, raising ``ValueError`` unless it has three items."""
    dim = get_dimension(values)
    if dim != 3:
        raise ValueError(f"{what} expects a 3-channel value, got {dim} channel(s): {values!r}")
    return tuple(values)
