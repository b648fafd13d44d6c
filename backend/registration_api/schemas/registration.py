"""Registration Schemas — Pydantic models for the /register boundary.

Invariants:
    - RegistrationRequest fields are strict strings (no coercion from int/bool/null)
    - RegistrationResponse never carries the password
    - ErrorResponse is the flat {"error": message} body

Design Decisions:
    - Presence (non-blank) is checked in core.registration, not here, so the
      schema stays a pure shape description and the rule is testable on its own
"""

from pydantic import BaseModel, ConfigDict

REGISTRATION_SUCCESS_MESSAGE = "User registered successfully"


class RegistrationRequest(BaseModel):
    """Incoming registration payload."""
    model_config = ConfigDict(strict=True, extra="ignore")

    name: str
    email: str
    password: str


class RegisteredUser(BaseModel):
    """Public view of a registered user."""
    name: str
    email: str


class RegistrationResponse(BaseModel):
    """Successful registration body."""
    message: str = REGISTRATION_SUCCESS_MESSAGE
    user: RegisteredUser


class ErrorResponse(BaseModel):
    error: str
