"""Client-facing briefing intake endpoints.

``GET`` tells the form what to render (login, form, or thank-you page);
``POST`` submits the briefing.
"""

from uuid import UUID

from fastapi import APIRouter, status
from starlette.requests import Request

from src.briefdesk.api.dependencies import IntakeServiceDep, OptionalAuth
from src.briefdesk.core.rate_limit import limiter, login_rate_limit
from src.briefdesk.schemas.auth import LoginResponse
from src.briefdesk.schemas.briefing import BriefingSubmission
from src.briefdesk.schemas.intake import (
    IntakeLoginRequest,
    IntakeProject,
    IntakeStateResponse,
    SubmissionResponse,
)
from src.briefdesk.services.intake_service import AccessState

router = APIRouter(prefix="/intake", tags=["intake"])


@router.get(
    "/{project_id}",
    response_model=IntakeStateResponse,
    responses={
        200: {
            "description": "Access state for the caller",
            "content": {
                "application/json": {
                    "example": {
                        "state": "temporary",
                        "project": {
                            "id": "550e8400-e29b-41d4-a716-446655440000",
                            "name": "Company website",
                            "description": None,
                            "status": "awaiting_briefing",
                        },
                    }
                }
            },
        },
        404: {"description": "Project not found"},
    },
)
async def get_intake_state(
    project_id: UUID, auth: OptionalAuth, service: IntakeServiceDep
) -> IntakeStateResponse:
    """Access state: unauthenticated, temporary, owner or submitted.

    Project details are only returned to callers allowed to fill in the form.
    """
    state, project = await service.evaluate(project_id, auth)
    if state in (AccessState.TEMPORARY, AccessState.OWNER):
        return IntakeStateResponse(state=state, project=IntakeProject.model_validate(project))
    return IntakeStateResponse(state=state)


@router.post(
    "/{project_id}/login",
    response_model=LoginResponse,
    responses={401: {"description": "Invalid credentials"}, 429: {"description": "Too many attempts"}},
)
@limiter.limit(login_rate_limit)
async def intake_login(
    request: Request,
    project_id: UUID,
    login_data: IntakeLoginRequest,
    service: IntakeServiceDep,
) -> LoginResponse:
    """Sign in with the temporary credentials sent to the client."""
    session = await service.login(project_id, login_data.email, login_data.password)
    return LoginResponse(
        access_token=session.access_token,
        refresh_token=session.refresh_token,
        token_type=session.token_type,
        expires_in=session.expires_in,
    )


@router.post(
    "/{project_id}",
    response_model=SubmissionResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        401: {"description": "Not signed in for this project"},
        404: {"description": "Project not found"},
        409: {"description": "Briefing already submitted"},
        500: {"description": "Submission failed, please retry"},
    },
)
async def submit_briefing(
    project_id: UUID,
    payload: BriefingSubmission,
    auth: OptionalAuth,
    service: IntakeServiceDep,
) -> SubmissionResponse:
    """Submit the briefing. A temporary identity is revoked afterwards."""
    result = await service.submit(project_id, payload, auth)
    return SubmissionResponse(
        briefing_id=result.briefing_id,
        client_id=result.client_id,
        signed_out=result.signed_out,
    )
