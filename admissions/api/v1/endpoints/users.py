"""User API: thin routes delegating to UserService."""

from fastapi import APIRouter, Request

from admissions.api.v1.dependencies import UserServiceDep
from admissions.core.limiter import limit_create_user
from admissions.schemas.flow import StepResponse
from admissions.schemas.user import (
    CurrentPositionResponse,
    UserCreateRequest,
    UserCreatedResponse,
    UserResponse,
    UserStatusResponse,
)

router = APIRouter()


@router.post("", response_model=UserCreatedResponse, status_code=201)
@limit_create_user
def create_user(
    request: Request,
    body: UserCreateRequest,
    user_service: UserServiceDep,
) -> UserCreatedResponse:
    """Create a user with an empty progress record. 409 if the email is taken."""
    user = user_service.create_user(str(body.email)).unwrap()
    return UserCreatedResponse(id=user.id)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: str, user_service: UserServiceDep) -> UserResponse:
    """Get user by id."""
    user = user_service.get_user(user_id).unwrap()
    return UserResponse(
        id=user.id,
        email=user.email,
        completed_tasks=len(user.completed_tasks),
    )


@router.get("/{user_id}/flow", response_model=list[StepResponse])
def get_user_flow(user_id: str, user_service: UserServiceDep) -> list[StepResponse]:
    """Steps with only the tasks currently visible to this user."""
    steps = user_service.visible_steps_for(user_id).unwrap()
    return [StepResponse.from_step(step) for step in steps]


@router.get("/{user_id}/current", response_model=CurrentPositionResponse)
def get_current_position(
    user_id: str, user_service: UserServiceDep
) -> CurrentPositionResponse:
    """Where the user should act next; position fields are null once finished."""
    summary = user_service.progress_for(user_id).unwrap()
    return CurrentPositionResponse.from_summary(summary)


@router.get("/{user_id}/status", response_model=UserStatusResponse)
def get_user_status(user_id: str, user_service: UserServiceDep) -> UserStatusResponse:
    """Aggregate status: accepted, rejected, or in_progress."""
    return UserStatusResponse(status=user_service.status_for(user_id).unwrap())
