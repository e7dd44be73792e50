"""
Custom exceptions for LeadFlow API.
Provides consistent error handling across the application.

Services raise these; the handler registered in main.py turns them into
a JSON ``{"detail": ...}`` response with the matching status code.
"""
from typing import Optional, Dict

from fastapi import status


class LeadFlowException(Exception):
    """Base exception for LeadFlow"""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    headers: Optional[Dict[str, str]] = None

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class NotFoundError(LeadFlowException):
    """Resource not found"""
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str = "Resource", resource_id: str = None):
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(message)


class AlreadyExistsError(LeadFlowException):
    """Resource already exists"""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, resource: str = "Resource", field: str = None, value: str = None):
        if field and value:
            message = f"{resource} with {field} '{value}' already exists"
        else:
            message = f"{resource} already exists"
        super().__init__(message)


class UnauthorizedError(LeadFlowException):
    """Authentication failed"""
    status_code = status.HTTP_401_UNAUTHORIZED
    headers = {"WWW-Authenticate": "Bearer"}

    def __init__(self, message: str = "Could not validate credentials"):
        super().__init__(message)


class InvalidCredentialsError(UnauthorizedError):
    """Unknown email or wrong password; deliberately indistinguishable"""

    def __init__(self):
        super().__init__("Invalid credentials")


class ForbiddenError(LeadFlowException):
    """Access denied"""
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)


class ValidationError(LeadFlowException):
    """Validation failed"""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Validation failed", field: str = None):
        if field:
            message = f"Validation failed for field '{field}': {message}"
        super().__init__(message)


class TokenExpiredError(UnauthorizedError):
    """Token has expired"""

    def __init__(self, token_type: str = "Token"):
        super().__init__(f"{token_type} has expired")


class TokenInvalidError(UnauthorizedError):
    """Token is invalid"""

    def __init__(self, token_type: str = "Token"):
        super().__init__(f"{token_type} is invalid")
