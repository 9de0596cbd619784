"""Owner authentication endpoints."""

from fastapi import APIRouter, status
from starlette.requests import Request

from src.briefdesk.api.dependencies import AuthServiceDep, OwnerUser
from src.briefdesk.core.rate_limit import limiter, login_rate_limit
from src.briefdesk.schemas.auth import IdentityRead, LoginRequest, LoginResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        200: {
            "description": "Successful authentication",
            "content": {
                "application/json": {
                    "example": {
                        "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "refresh_token": "v1.MWY0ZmQ2...",
                        "token_type": "bearer",
                        "expires_in": 3600,
                    }
                }
            },
        },
        401: {"description": "Invalid credentials"},
        429: {"description": "Too many attempts"},
    },
)
@limiter.limit(login_rate_limit)
async def login(request: Request, login_data: LoginRequest, service: AuthServiceDep) -> LoginResponse:
    """Sign in the owner with email and password."""
    session = await service.login(login_data.email, login_data.password)
    return LoginResponse(
        access_token=session.access_token,
        refresh_token=session.refresh_token,
        token_type=session.token_type,
        expires_in=session.expires_in,
    )


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(owner: OwnerUser, service: AuthServiceDep) -> None:
    """End the owner's session at the identity provider."""
    await service.logout(owner.access_token)


@router.get("/me", response_model=IdentityRead)
async def me(owner: OwnerUser) -> IdentityRead:
    return IdentityRead(id=owner.user.id, email=owner.user.email, is_temporary=False)
