"""Error types raised by the solver and its components."""

from __future__ import annotations

import inspect
from typing import Optional

from farsa.enums import ReportLevel, ReportType
from farsa.reporter import Reporter


def _caller_location(depth: int) -> tuple[str, int]:
    """Return file name and line number ``depth`` frames above the caller."""
    frame = inspect.currentframe()
    try:
        target = frame.f_back if frame is not None else None
        for _ in range(depth):
            if target is None:
                break
            target = target.f_back
        if target is None:
            return "<unknown>", 0
        return target.f_code.co_filename, target.f_lineno
    finally:
        del frame


class FaRSAError(Exception):
    """Base error carrying a message and the place where it was raised."""

    def __init__(
        self,
        message: str,
        file_name: Optional[str] = None,
        line_number: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        if file_name is None or line_number is None:
            found_file, found_line = _caller_location(2)
            file_name = found_file if file_name is None else file_name
            line_number = found_line if line_number is None else line_number
        self.message = message
        self.file_name = file_name
        self.line_number = line_number

    @property
    def kind(self) -> str:
        """Name of the error type."""
        return type(self).__name__

    def print(
        self,
        reporter: Reporter,
        report_type: ReportType,
        level: ReportLevel = ReportLevel.BASIC,
    ) -> None:
        """Describe the error through ``reporter``."""
        reporter.printf(
            report_type,
            level,
            "\nException of type \"%s\" in file \"%s\" at line %d\nException message: %s\n",
            self.kind,
            self.file_name,
            self.line_number,
            self.message,
        )


class SuccessException(FaRSAError):
    """A stationary point was found."""


class CpuTimeLimitException(FaRSAError):
    """The CPU time limit was reached."""


class IterateNormLimitException(FaRSAError):
    """The iterates appear to diverge."""


class IterationLimitException(FaRSAError):
    """The iteration limit was reached."""


class FunctionEvaluationLimitException(FaRSAError):
    """The function evaluation limit was reached."""


class GradientEvaluationLimitException(FaRSAError):
    """The gradient evaluation limit was reached."""


class InitializationFailureException(FaRSAError):
    """Initialization of the solver failed."""


class FunctionEvaluationFailureException(FaRSAError):
    """The objective could not be evaluated."""


class GradientEvaluationFailureException(FaRSAError):
    """The gradient could not be evaluated."""


class FunctionEvaluationAssertException(FaRSAError):
    """An internal check on a function evaluation failed."""


class GradientEvaluationAssertException(FaRSAError):
    """An internal check on a gradient evaluation failed."""


class MatrixException(FaRSAError):
    """A matrix operation failed."""


class MatrixAssertException(FaRSAError):
    """An internal check on a matrix failed."""


class VectorException(FaRSAError):
    """A vector operation failed."""


class VectorAssertException(FaRSAError):
    """An internal check on a vector failed."""


class DirectionComputationFailureException(FaRSAError):
    """The direction computation failed."""


class LineSearchFailureException(FaRSAError):
    """The line search failed."""


class DCSuccessException(FaRSAError):
    """The direction computation finished successfully."""


class DCEvaluationFailureException(FaRSAError):
    """An evaluation failed during the direction computation."""


class DCIterationLimitException(FaRSAError):
    """The direction computation hit its iteration limit."""


class LSSuccessException(FaRSAError):
    """The line search finished successfully."""


class LSEvaluationFailureException(FaRSAError):
    """An evaluation failed during the line search."""


class LSStepsizeTooSmallException(FaRSAError):
    """The line search step size became too small."""


class LSIterationLimitException(FaRSAError):
    """The line search hit its iteration limit."""


def require(
    condition: bool,
    error_type: type[FaRSAError],
    message: str,
    condition_text: str = "condition",
) -> None:
    """Raise ``error_type`` unless ``condition`` holds.

    The raised message names the failed condition, and the location is that
    of the caller.
    """
    if condition:
        return
    file_name, line_number = _caller_location(1)
    raise error_type(f"{condition_text} evaluated false: {message}", file_name, line_number)