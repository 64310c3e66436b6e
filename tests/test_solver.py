"""
Tests for discriminant, vertex and root classification.
"""

import math

import pytest

from quadratic_solver.errors import InvalidArguments
from quadratic_solver.solver import (
    ComplexRoots,
    Equation,
    OneRealRoot,
    TwoRealRoots,
    classify_and_solve,
    discriminant,
    display_discriminant,
    round2,
    solve,
    vertex,
)


class TestRound2:
    """Tests for display rounding."""

    def test_rounds_to_two_places(self):
        assert round2(1.23456) == 1.23
        assert round2(-0.333) == -0.33

    def test_negative_zero_normalised(self):
        result = round2(-0.001)
        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0


class TestEquation:
    """Tests for the Equation record."""

    def test_coefficients_stored_as_float(self):
        eq = Equation(1, -3, 2)
        assert (eq.a, eq.b, eq.c) == (1.0, -3.0, 2.0)
        assert isinstance(eq.a, float)

    def test_zero_a_rejected(self):
        with pytest.raises(InvalidArguments, match="'a' must be non-zero"):
            Equation(0, 1, 1)

    def test_non_finite_rejected(self):
        with pytest.raises(InvalidArguments, match="finite"):
            Equation(1, float("nan"), 1)

    def test_non_numeric_rejected(self):
        with pytest.raises(InvalidArguments, match="not a number"):
            Equation(1, "2", 1)

    def test_immutable(self):
        eq = Equation(1, 2, 3)
        with pytest.raises(AttributeError):
            eq.a = 5.0

    def test_evaluate(self):
        assert Equation(2, -1, 3).evaluate(2.0) == 9.0


class TestDiscriminant:
    """Tests for the discriminant."""

    @pytest.mark.parametrize(
        "a, b, c, expected",
        [(1, -3, 2, 1.0), (1, 2, 1, 0.0), (1, 0, 1, -4.0), (2.5, 1.1, -0.3, 4.21)],
    )
    def test_display_value(self, a, b, c, expected):
        assert display_discriminant(a, b, c) == pytest.approx(expected)

    def test_raw_value_not_rounded(self):
        assert discriminant(1, 0.111, 0) == pytest.approx(0.012321)
        assert display_discriminant(1, 0.111, 0) == 0.01


class TestVertex:
    """Tests for the vertex."""

    def test_vertex(self):
        assert vertex(1, -3, 2) == pytest.approx((1.5, -0.25))
        assert vertex(-2, 4, 1) == pytest.approx((1.0, 3.0))

    def test_zero_a_rejected(self):
        with pytest.raises(InvalidArguments):
            vertex(0, 1, 1)


class TestClassifyAndSolve:
    """Tests for the three root cases."""

    def test_two_real_roots(self):
        roots = classify_and_solve(1, -3, 2)
        assert isinstance(roots, TwoRealRoots)
        assert roots.x1 == pytest.approx(2.0)
        assert roots.x2 == pytest.approx(1.0)
        assert roots.classification == "Two real roots"

    def test_uses_full_two_a_denominator(self):
        roots = classify_and_solve(2, -6, 4)
        assert (roots.x1, roots.x2) == pytest.approx((2.0, 1.0))

    def test_one_real_root_is_exact(self):
        roots = classify_and_solve(1, 2, 1)
        assert isinstance(roots, OneRealRoot)
        assert roots.x == -1.0
        assert roots.x1 == roots.x2
        assert roots.classification == "One real root"

    def test_complex_roots(self):
        roots = classify_and_solve(1, 0, 1)
        assert isinstance(roots, ComplexRoots)
        assert roots.real == 0.0
        assert roots.imag == pytest.approx(1.0)
        assert roots.classification == "Two complex roots"

    @pytest.mark.parametrize("a, b, c", [(1, 0, 1), (3, 2, 5), (-2, 1, -4), (0.5, -1.5, 7)])
    def test_complex_roots_satisfy_equation(self, a, b, c):
        for z in classify_and_solve(a, b, c).as_complex():
            assert abs(a * z * z + b * z + c) == pytest.approx(0.0, abs=1e-9)

    @pytest.mark.parametrize("a, b, c", [(1, -3, 2), (-1, 4, 5), (2, 7, -3), (0.3, 0.1, -2)])
    def test_real_roots_symmetric_about_vertex(self, a, b, c):
        roots = classify_and_solve(a, b, c)
        xv, _ = vertex(a, b, c)
        assert (roots.x1 + roots.x2) / 2 == pytest.approx(xv, abs=0.01)

    @pytest.mark.parametrize(
        "a, b, c, kind",
        [(1, -3, 2, "two_real"), (1, 2, 1, "one_real"), (1, 0, 1, "two_complex"), (4, 4, 1, "one_real")],
    )
    def test_case_selected_by_sign(self, a, b, c, kind):
        assert classify_and_solve(a, b, c).kind == kind

    def test_zero_a_rejected(self):
        with pytest.raises(InvalidArguments):
            classify_and_solve(0, 1, 1)


class TestSolve:
    """End-to-end scenarios for solve()."""

    def test_two_real(self):
        solution = solve(Equation(1, -3, 2))
        assert solution.display_discriminant == 1.0
        assert (solution.roots.x1, solution.roots.x2) == pytest.approx((2.0, 1.0))
        assert solution.display_vertex == (1.5, -0.25)

    def test_one_real(self):
        solution = solve(Equation(1, 2, 1))
        assert solution.display_discriminant == 0.0
        assert solution.roots.x == -1.0
        assert solution.display_vertex == (-1.0, 0.0)

    def test_complex(self):
        solution = solve(Equation(1, 0, 1))
        assert solution.display_discriminant == -4.0
        assert solution.roots.as_complex() == (complex(0, 1), complex(0, -1))
        assert solution.display_vertex == (0.0, 1.0)
