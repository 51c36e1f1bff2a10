"""Custom exceptions for the calculation engine."""

from typing import Optional, Any, Dict


class AppException(Exception):
    """Base exception for engine errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidInputError(AppException):
    """Exception raised when a parameter has an invalid magnitude."""

    pass


class PolicyViolationError(AppException):
    """Exception raised when valid inputs jointly break a lending regulation."""

    pass


class LoanCapExceededError(PolicyViolationError):
    """Exception raised when the loan-to-value ratio exceeds the bolånetak."""

    pass


class ConfigurationError(AppException):
    """Exception raised when configuration is invalid."""

    pass
