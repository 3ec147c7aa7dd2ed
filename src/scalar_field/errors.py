"""Exceptions raised by the scalar field interpolation core."""


class ScalarFieldError(Exception):
    """Base class for all scalar field errors."""


class InvalidArgumentError(ScalarFieldError, ValueError):
    """A required argument is missing or out of range."""


class EmptyInputError(ScalarFieldError, ValueError):
    """An operation needs at least one sample but the point set is empty."""


class ParseFailureError(ScalarFieldError, ValueError):
    """A data row could not be parsed into three floating-point fields."""

    def __init__(self, line_number: int, row: str, reason: str):
        self.line_number = line_number
        self.row = row
        self.reason = reason
        super().__init__(f"Failed to parse line {line_number}: {row!r} ({reason})")


class EvaluationCancelledError(ScalarFieldError):
    """Grid evaluation was cancelled before all columns were computed."""
