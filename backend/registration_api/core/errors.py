"""Error Hierarchy — typed, categorized exceptions for registration failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the flat {"error": message} envelope clients see
    - Messages come from a fixed set; no request data is echoed in them

Design Decisions:
    - Single hierarchy with RegistrationError base: one global handler catches all
    - http_status lives on the error so routes never pick status codes themselves
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"


INVALID_REQUEST_MESSAGE = "Invalid request"
INVALID_EMAIL_MESSAGE = "Invalid email format"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class RegistrationError(Exception):
    """Base exception for all registration errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"error": self.message}


class InvalidRequestError(RegistrationError):
    """Payload could not be read as a registration request."""
    def __init__(self, reason: str = ""):
        super().__init__(
            INVALID_REQUEST_MESSAGE, "INVALID_REQUEST", ErrorCategory.VALIDATION,
            ErrorSeverity.INFO, 400,
        )
        # internal only, never sent to the client
        self.reason = reason


class InvalidEmailError(RegistrationError):
    """Email does not match the accepted address syntax."""
    def __init__(self):
        super().__init__(
            INVALID_EMAIL_MESSAGE, "INVALID_EMAIL", ErrorCategory.VALIDATION,
            ErrorSeverity.INFO, 422,
        )
