"""Exceptions raised by the 2048 engine."""


class BoardFormatError(ValueError):
    """Raised when a board text or grid cannot be decoded."""
