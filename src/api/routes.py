"""
API routes - Registration endpoint.

This module defines the HTTP endpoint:
- POST /api/register - Run the registration pipeline for one submission
"""

from fastapi import APIRouter, Body, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.api.dependencies import get_registration_service
from src.api.errors import error_response
from src.api.models import APIResponse, RegisterRequest
from src.domain.outcomes import (
    Conflict,
    InternalFailure,
    Registered,
    RegistrationOutcome,
    ValidationFailure,
)
from src.domain.ports import RegistrationInput
from src.domain.registration import RegistrationService

router = APIRouter(tags=["registration"])

# Outcome variant -> HTTP status
OUTCOME_STATUS: dict[type, int] = {
    Registered: status.HTTP_201_CREATED,
    ValidationFailure: status.HTTP_400_BAD_REQUEST,
    Conflict: status.HTTP_409_CONFLICT,
    InternalFailure: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def require_body(request: Request) -> None:
    """Reject an empty body as malformed; a JSON null body is an empty submission."""
    if not (await request.body()).strip():
        raise RequestValidationError(
            [{"type": "missing", "loc": ("body",), "msg": "Field required", "input": None}]
        )


def outcome_response(outcome: RegistrationOutcome) -> JSONResponse:
    """Convert a pipeline outcome to its HTTP status and APIResponse body."""
    status_code = OUTCOME_STATUS[type(outcome)]
    if isinstance(outcome, Registered):
        body = APIResponse(ok=True, message=outcome.message)
        return JSONResponse(status_code=status_code, content=body.model_dump())
    return error_response(status_code, outcome.message)


@router.post(
    "/register",
    response_model=APIResponse,
    dependencies=[Depends(require_body)],
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": APIResponse, "description": "Validation failure or malformed body"},
        409: {"model": APIResponse, "description": "Email already exists"},
        500: {"model": APIResponse, "description": "Internal error"},
    },
    summary="Register a new user",
    description="Submit first name, last name, email and password to create an account.",
)
def register(
    request_data: RegisterRequest | None = Body(default=None),
    service: RegistrationService = Depends(get_registration_service),
) -> JSONResponse:
    """
    Register a new user.

    - **first_name**, **last_name**: at least 2 characters after trimming
    - **email**: valid address, stored trimmed and lowercased
    - **password**: 8+ characters with an uppercase, a lowercase and a digit

    Declared with plain ``def`` so FastAPI runs it in its threadpool;
    bcrypt hashing and the insert block the worker thread, not the event loop.
    """
    if request_data is None:
        request_data = RegisterRequest()
    outcome = service.register(
        RegistrationInput(
            first_name=request_data.first_name,
            last_name=request_data.last_name,
            email=request_data.email,
            password=request_data.password,
        )
    )
    return outcome_response(outcome)
