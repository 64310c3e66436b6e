"""Console report for a solved equation."""

from __future__ import annotations

import math
from typing import List

from .solver import ComplexRoots, Equation, OneRealRoot, QuadraticSolution, round2

TITLE = "Quadratic equation solver"
COMPLEX_ROOTS_NOTE = "Complex roots are not plotted"


def format_number(value: float) -> str:
    if value == 0:
        return "0"
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def format_signed(value: float) -> str:
    text = format_number(value)
    return text if text.startswith("-") else f"+{text}"


def equation_caption(eq: Equation) -> str:
    return (
        f"Solving {format_number(eq.a)}x^2 "
        f"{format_signed(eq.b)}x {format_signed(eq.c)} = 0"
    )


def _discriminant_sign_line(disc: float) -> str:
    if disc > 0:
        return "Discriminant > 0"
    if disc == 0:
        return "Discriminant = 0"
    return "Discriminant < 0"


def root_lines(solution: QuadraticSolution) -> List[str]:
    roots = solution.roots
    if isinstance(roots, ComplexRoots):
        real = format_number(round2(roots.real))
        imag = round2(roots.imag)
        return [
            f"x_1 = {real} {format_signed(imag)}i",
            f"x_2 = {real} {format_signed(-imag)}i",
        ]
    if isinstance(roots, OneRealRoot):
        return [f"x = {format_number(round2(roots.x))}"]
    return [f"x_1 = {format_number(round2(roots.x1))}, x_2 = {format_number(round2(roots.x2))}"]


def report_lines(solution: QuadraticSolution) -> List[str]:
    eq = solution.equation
    xv, yv = solution.display_vertex
    return [
        TITLE,
        "",
        "User input",
        f"a = {format_number(eq.a)}",
        f"b = {format_number(eq.b)}",
        f"c = {format_number(eq.c)}",
        equation_caption(eq),
        "",
        f"Discriminant = {format_number(solution.display_discriminant)}",
        "",
        _discriminant_sign_line(solution.discriminant),
        solution.roots.classification,
        *root_lines(solution),
        "",
        f"Vertex ({format_number(xv)}, {format_number(yv)})",
    ]
