"""
Application Custom Exceptions

Purpose:
    - Standardize error handling across the search pipeline
    - Prevent leaking internal errors (provider payloads, SQL, tracebacks)
    - Maintain consistent API error format: {"error": str, "data"?: any}
"""

# Python Packages
from typing import Any

# Messages
from . import messages





class AppException(Exception):
    """
    Base application exception.
    """

    def __init__(
        self,
        error_code: str,
        message: str,
        status_code: int = 400,
        data: Any = None,
        details: Any = None
    ):
        """
        Args:
            error_code (str): Unique error identifier (used in logs only)
            message (str): User-facing error message
            status_code (int): HTTP status code (default: 400)
            data (Any): Optional user-facing context, echoed to the caller
            details (Any): Optional internal/debug details, never serialized
        """

        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.data = data
        self.details = details

        super().__init__(message)



    def to_dict(self) -> dict:
        """
        Convert exception to standardized API response format.
        """

        response = {"error": self.message}

        if self.data is not None:
            response["data"] = self.data

        return response





# --------------------------------------------
# Specific Exception Types
# --------------------------------------------

class UserError(AppException):
    """
    Raised when the caller's input is unusable. Not a system fault.
    """

    def __init__(self, message: str, data: Any = None):
        super().__init__(
            error_code = "USER_ERROR",
            message = message,
            status_code = 400,
            data = data
        )





class ProviderError(AppException):
    """
    Raised when the embedding or completion provider fails
    or returns a malformed payload.
    """

    def __init__(self, reason: str, details: Any = None):
        super().__init__(
            error_code = "PROVIDER_ERROR",
            message = messages.ERROR["GENERIC_FAILURE"],
            status_code = 500,
            details = details
        )
        self.reason = reason



    def __str__(self):
        return self.reason





class StoreError(AppException):
    """
    Raised when a document store query or write fails.
    """

    def __init__(self, reason: str, details: Any = None):
        super().__init__(
            error_code = "STORE_ERROR",
            message = messages.ERROR["GENERIC_FAILURE"],
            status_code = 500,
            details = details
        )
        self.reason = reason



    def __str__(self):
        return self.reason





class ProviderTimeout(AppException):
    """
    Raised when an external call exceeds its time bound.
    """

    def __init__(self, reason: str, details: Any = None):
        super().__init__(
            error_code = "PROVIDER_TIMEOUT",
            message = messages.ERROR["TIMEOUT"],
            status_code = 504,
            details = details
        )
        self.reason = reason



    def __str__(self):
        return self.reason





class InternalError(AppException):
    """
    Raised for unexpected system errors.
    """

    def __init__(self, details: Any = None):
        super().__init__(
            error_code = "INTERNAL_SERVER_ERROR",
            message = messages.ERROR["GENERIC_FAILURE"],
            status_code = 500,
            details = details
        )
