"""
Core Exceptions

Error types raised by the network model, the planners and the network repository.
"""

from typing import Optional


class IllegalRequestError(ValueError):
    """Raised when an operation is called with arguments that break its contract."""

    pass


class NetworkFormatError(IllegalRequestError):
    """Raised when a network resource cannot be parsed."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
