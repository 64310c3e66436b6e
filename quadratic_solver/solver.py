"""Discriminant, vertex and root classification for ax^2 + bx + c = 0."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple, Union

from . import config
from .errors import InvalidArguments
from .logger import get_logger

logger = get_logger(__name__)

TWO_REAL = "two_real"
ONE_REAL = "one_real"
TWO_COMPLEX = "two_complex"


def round2(value: float) -> float:
    rounded = round(value, config.DISPLAY_DECIMALS)
    if rounded == 0.0:
        # drops the sign of -0.0
        rounded = 0.0
    return rounded


@dataclass(frozen=True)
class Equation:
    """Coefficients of a quadratic; ``a`` must be non-zero."""

    a: float
    b: float
    c: float

    def __post_init__(self) -> None:
        for name in ("a", "b", "c"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidArguments(f"coefficient '{name}' is not a number: {value!r}")
            if not math.isfinite(value):
                raise InvalidArguments(f"coefficient '{name}' must be finite, got {value!r}")
            object.__setattr__(self, name, float(value))
        if self.a == 0:
            raise InvalidArguments(
                "coefficient 'a' must be non-zero (a = 0 is a linear equation, not a quadratic)"
            )

    def evaluate(self, x: float) -> float:
        return self.a * x * x + self.b * x + self.c


@dataclass(frozen=True)
class TwoRealRoots:
    x1: float
    x2: float

    kind = TWO_REAL
    classification = "Two real roots"


@dataclass(frozen=True)
class OneRealRoot:
    x: float

    kind = ONE_REAL
    classification = "One real root"

    @property
    def x1(self) -> float:
        return self.x

    @property
    def x2(self) -> float:
        return self.x


@dataclass(frozen=True)
class ComplexRoots:
    real: float
    imag: float

    kind = TWO_COMPLEX
    classification = "Two complex roots"

    def as_complex(self) -> Tuple[complex, complex]:
        return complex(self.real, self.imag), complex(self.real, -self.imag)


Roots = Union[TwoRealRoots, OneRealRoot, ComplexRoots]


@dataclass(frozen=True)
class QuadraticSolution:
    equation: Equation
    discriminant: float
    vertex: Tuple[float, float]
    roots: Roots

    @property
    def display_discriminant(self) -> float:
        return round2(self.discriminant)

    @property
    def display_vertex(self) -> Tuple[float, float]:
        return round2(self.vertex[0]), round2(self.vertex[1])


def discriminant(a: float, b: float, c: float) -> float:
    return b * b - 4 * a * c


def display_discriminant(a: float, b: float, c: float) -> float:
    return round2(discriminant(a, b, c))


def vertex(a: float, b: float, c: float) -> Tuple[float, float]:
    if a == 0:
        raise InvalidArguments("coefficient 'a' must be non-zero to have a vertex")
    xv = -b / (2 * a)
    yv = a * xv * xv + b * xv + c
    return xv, yv


def classify_and_solve(a: float, b: float, c: float) -> Roots:
    """
    Pick the root case from the sign of the unrounded discriminant.

    The comparison against zero is exact: only D == 0.0 yields a repeated root.
    """
    if a == 0:
        raise InvalidArguments("coefficient 'a' must be non-zero to solve a quadratic")
    disc = discriminant(a, b, c)
    if disc > 0:
        sqrt_disc = math.sqrt(disc)
        roots: Roots = TwoRealRoots((-b + sqrt_disc) / (2 * a), (-b - sqrt_disc) / (2 * a))
    elif disc == 0:
        roots = OneRealRoot(-b / (2 * a))
    else:
        roots = ComplexRoots(-b / (2 * a), math.sqrt(abs(disc)) / (2 * a))
    logger.debug("D=%r -> %s", disc, roots.kind)
    return roots


def solve(equation: Equation) -> QuadraticSolution:
    a, b, c = equation.a, equation.b, equation.c
    return QuadraticSolution(
        equation=equation,
        discriminant=discriminant(a, b, c),
        vertex=vertex(a, b, c),
        roots=classify_and_solve(a, b, c),
    )
