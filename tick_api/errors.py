"""
Error types raised by the Tick client.
"""
from typing import Any, Dict, List, Optional


class TickAPIError(Exception):
    """Base exception for Tick client errors."""
    def __init__(self, code: str, message: str, status_code: Optional[int] = None):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ConfigurationError(TickAPIError):
    """Missing or invalid credentials."""
    def __init__(self, message: str, fields: Optional[List[str]] = None):
        self.fields = list(fields or [])
        super().__init__("configuration_error", message)


class ValidationError(TickAPIError):
    """Caller input rejected before any request was sent."""
    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        self.errors = list(errors or [])
        super().__init__("validation_error", message)


class ForbiddenError(TickAPIError):
    """Remote API answered 403."""
    def __init__(self, message: str):
        super().__init__("forbidden", message, 403)


class ConflictError(TickAPIError):
    """Remote API refused a delete with 406 because of dependent records."""
    def __init__(self, message: str):
        super().__init__("conflict", message, 406)


class RequestError(TickAPIError):
    """Any other non-success status."""
    def __init__(self, message: str, status_code: int, status_text: str = ""):
        self.status_text = status_text
        super().__init__("request_failed", message, status_code)


class ResponseValidationError(TickAPIError):
    """A successful response body did not match the declared shape."""
    def __init__(self, message: str, errors: List[Dict[str, Any]]):
        self.errors = errors
        super().__init__("invalid_response", message)
