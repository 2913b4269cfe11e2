"""Easing functions that shape the progression of an animation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional


class EasingVariety(Enum):
    """The acceleration curve used by a non-linear easing."""

    QUADRATIC = "quadratic"
    CUBIC = "cubic"
    QUARTIC = "quartic"
    QUINTIC = "quintic"
    EXPONENTIAL = "exponential"
    CIRCULAR = "circular"
    SIN = "sin"


class EasingKind(Enum):
    """Where an easing applies its acceleration."""

    LINEAR = "linear"
    IN = "in"
    OUT = "out"
    IN_OUT = "in_out"


def _in_exponential(x: float) -> float:
    return 0.0 if x == 0.0 else 2.0 ** (10.0 * x - 10.0)


def _out_exponential(x: float) -> float:
    return 1.0 if x == 1.0 else 1.0 - 2.0 ** (-10.0 * x)


def _in_out_power(power: int, factor: float) -> Callable[[float], float]:
    def ease(x: float) -> float:
        if x < 0.5:
            return factor * x**power
        return 1.0 - (-2.0 * x + 2.0) ** power / 2.0

    return ease


def _in_out_exponential(x: float) -> float:
    if x == 0.0:
        return 0.0
    if x == 1.0:
        return 1.0
    if x < 0.5:
        return 2.0 ** (20.0 * x - 10.0) / 2.0
    return (2.0 - 2.0 ** (-20.0 * x + 10.0)) / 2.0


def _in_out_circular(x: float) -> float:
    if x < 0.5:
        return (1.0 - math.sqrt(1.0 - (2.0 * x) ** 2)) / 2.0
    return (math.sqrt(1.0 - (-2.0 * x + 2.0) ** 2) + 1.0) / 2.0


_EaseFn = Callable[[float], float]

_IN: Dict[EasingVariety, _EaseFn] = {
    EasingVariety.QUADRATIC: lambda x: x**2,
    EasingVariety.CUBIC: lambda x: x**3,
    EasingVariety.QUARTIC: lambda x: x**4,
    EasingVariety.QUINTIC: lambda x: x**5,
    EasingVariety.EXPONENTIAL: _in_exponential,
    EasingVariety.CIRCULAR: lambda x: 1.0 - math.sqrt(1.0 - x**2),
    EasingVariety.SIN: lambda x: 1.0 - math.cos((x * math.pi) / 2.0),
}

_OUT: Dict[EasingVariety, _EaseFn] = {
    EasingVariety.QUADRATIC: lambda x: 1.0 - (1.0 - x) ** 2,
    EasingVariety.CUBIC: lambda x: 1.0 - (1.0 - x) ** 3,
    EasingVariety.QUARTIC: lambda x: 1.0 - (1.0 - x) ** 4,
    EasingVariety.QUINTIC: lambda x: 1.0 - (1.0 - x) ** 5,
    EasingVariety.EXPONENTIAL: _out_exponential,
    EasingVariety.CIRCULAR: lambda x: math.sqrt(1.0 - (x - 1.0) ** 2),
    EasingVariety.SIN: lambda x: math.sin((x * math.pi) / 2.0),
}

_IN_OUT: Dict[EasingVariety, _EaseFn] = {
    EasingVariety.QUADRATIC: _in_out_power(2, 2.0),
    EasingVariety.CUBIC: _in_out_power(3, 4.0),
    EasingVariety.QUARTIC: _in_out_power(4, 8.0),
    EasingVariety.QUINTIC: _in_out_power(5, 16.0),
    EasingVariety.EXPONENTIAL: _in_out_exponential,
    EasingVariety.CIRCULAR: _in_out_circular,
    EasingVariety.SIN: lambda x: -((math.cos(x * math.pi) - 1.0) / 2.0),
}

_TABLES = {
    EasingKind.IN: _IN,
    EasingKind.OUT: _OUT,
    EasingKind.IN_OUT: _IN_OUT,
}


@dataclass(frozen=True)
class Easing:
    """The easing of an animation; linear by default."""

    kind: EasingKind = EasingKind.LINEAR
    variety: Optional[EasingVariety] = None

    def __post_init__(self) -> None:
        if self.kind is EasingKind.LINEAR and self.variety is not None:
            raise ValueError("a linear easing takes no variety")
        if self.kind is not EasingKind.LINEAR and self.variety is None:
            raise ValueError(f"a {self.kind.value} easing needs a variety")

    @classmethod
    def linear(cls) -> "Easing":
        return cls()

    @classmethod
    def ease_in(cls, variety: EasingVariety) -> "Easing":
        """Slow at the start, then speeds up."""
        return cls(EasingKind.IN, variety)

    @classmethod
    def ease_out(cls, variety: EasingVariety) -> "Easing":
        """Fast at the start, then slows down."""
        return cls(EasingKind.OUT, variety)

    @classmethod
    def ease_in_out(cls, variety: EasingVariety) -> "Easing":
        """Fast at both ends, slow in the middle."""
        return cls(EasingKind.IN_OUT, variety)

    def get(self, x: float) -> float:
        """Apply the easing to ``x``, clamped to [0, 1]; the result is in [0, 1]."""
        x = min(max(float(x), 0.0), 1.0)
        if self.kind is EasingKind.LINEAR:
            return x
        return _TABLES[self.kind][self.variety](x)