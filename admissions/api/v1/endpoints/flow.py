"""Flow API: the full flow definition as loaded at startup."""

from fastapi import APIRouter

from admissions.api.v1.dependencies import FlowDep
from admissions.schemas.flow import FlowResponse

router = APIRouter()


@router.get("", response_model=FlowResponse)
def get_flow(flow: FlowDep) -> FlowResponse:
    """Return every step and task, ignoring visibility."""
    return FlowResponse.from_flow(flow)
