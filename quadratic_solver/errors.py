"""Error types raised by the solver, the renderer and the command line."""

from __future__ import annotations

from typing import Optional


class QuadraticSolverError(Exception):
    """Base class for every expected failure of the program."""

    kind = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArguments(QuadraticSolverError):
    """Wrong argument count, a non-numeric coefficient, or ``a == 0``."""

    kind = "invalid_arguments"


class PlottingError(QuadraticSolverError):
    """Any failure while computing plot bounds, drawing, or writing the image."""

    kind = "plotting"

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause
