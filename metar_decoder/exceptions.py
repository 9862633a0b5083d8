"""Exceptions raised by the METAR decoder."""

from typing import Optional


class MetarDecodeError(Exception):
    """Exception raised when a report cannot be decoded as a whole."""

    def __init__(self, message: str, report: Optional[str] = None):
        """
        Initialize decode error.

        Args:
            message: Error message
            report: Text of the report that failed
        """
        super().__init__(message)
        self.report = report

    def __str__(self) -> str:
        if self.report:
            return f"{super().__str__()}, report: {self.report}"
        return super().__str__()
