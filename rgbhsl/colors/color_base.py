from __future__ import annotations
from typing import Any, ClassVar, Tuple, Callable, Self
from abc import ABC

from ..types.color_types import ColorValue, ColorMode, UnitTriple
from ..utils import expect_triple


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 4
    mode:          ClassVar[ColorMode]
    channel_names: ClassVar[Tuple[str, str, str]]
    # def color_convert(self: ColorBase, to_space: ColorMode | None = None) -> ColorBase:
    convert: Callable[..., ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __init__(self, c1: float, c2: float, c3: float, alpha: float = 1.0) -> None:
        channels = self._normalize(float(c1), float(c2), float(c3))
        self._value = (*channels, float(alpha))

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _normalize(cls, c1: float, c2: float, c3: float) -> UnitTriple:
        """Hook for subclasses that repair their channels on construction."""
        return c1, c2, c3

    @classmethod
    def new(cls, c1: float, c2: float, c3: float) -> Self:
        """Build a fully opaque color from three channel values."""
        return cls(c1, c2, c3)

    @classmethod
    def from_triple(cls, values: Any) -> Self:
        c1, c2, c3 = expect_triple(values, cls.__name__)
        return cls(c1, c2, c3)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorValue:
        return self._value

    @property
    def channels(self) -> UnitTriple:
        """The three color channels without alpha."""
        c1, c2, c3, _ = self._value
        return c1, c2, c3

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __iter__(self):
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={v!r}" for name, v in zip(self.channel_names + ("alpha",), self._value)
        )
        return f"{self.__class__.__name__}({fields})"


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """
    __slots__ = ()

    # Tell static checkers these come from the real subclass (ColorBase)
    value: ColorValue
    channels: UnitTriple

    alpha_index: ClassVar[int] = -1

    @property
    def alpha(self) -> float:
        return self.value[self.alpha_index]

    def with_alpha(self, alpha: float) -> Self:
        """
        Return a new instance with modified alpha channel.

        Alpha is stored as given, without clamping.
        """
        return self.__class__(*self.channels, alpha)  # type: ignore
