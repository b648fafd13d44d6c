"""Registration Handler — turns a raw request body into a registration result.

Invariants:
    - Order is fixed: deserialize, presence check, email check
    - A RegistrationResponse is only built after all three pass
    - name and email are echoed verbatim (no trimming, no case folding)
    - password is read for the presence check and then dropped

Design Decisions:
    - Errors raised as RegistrationError subclasses; the API layer maps them to
      status codes, so this module has no FastAPI imports
    - Empty email falls through to the format check (422), blank name or
      password is a presence failure (400)
"""

from pydantic import ValidationError

from registration_api.core.email_format import is_valid_email
from registration_api.core.errors import InvalidEmailError, InvalidRequestError
from registration_api.schemas.registration import (
    RegisteredUser,
    RegistrationRequest,
    RegistrationResponse,
)

REQUIRED_FIELDS = ("name", "password")


def parse_registration(raw_body: bytes | str) -> RegistrationRequest:
    """Deserialize a JSON body into a RegistrationRequest.

    Malformed JSON, a non-object document, missing keys and non-string values
    all raise InvalidRequestError.
    """
    try:
        return RegistrationRequest.model_validate_json(raw_body)
    except ValidationError as exc:
        raise InvalidRequestError(_summarize(exc)) from exc


def check_required_fields(request: RegistrationRequest) -> None:
    """Reject blank required fields."""
    for field in REQUIRED_FIELDS:
        if not getattr(request, field).strip():
            raise InvalidRequestError(f"{field} is blank")


def handle_registration(raw_body: bytes | str) -> RegistrationResponse:
    """Validate a registration body and build the success response."""
    request = parse_registration(raw_body)
    check_required_fields(request)
    if not is_valid_email(request.email):
        raise InvalidEmailError()
    return RegistrationResponse(
        user=RegisteredUser(name=request.name, email=request.email),
    )


def _summarize(exc: ValidationError) -> str:
    """Field-level reasons without input values (the password may be among them)."""
    return "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc']) or 'body'}: {e['type']}"
        for e in exc.errors(include_input=False, include_url=False)
    )
