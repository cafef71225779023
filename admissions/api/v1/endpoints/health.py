"""Health check endpoint. No dependencies beyond app state; used for liveness probes."""

from fastapi import APIRouter

from admissions.api.v1.dependencies import FlowDep
from admissions.core.config import get_settings
from admissions.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check(flow: FlowDep) -> HealthResponse:
    """Return ok status with the app version and the loaded flow id."""
    return HealthResponse(version=get_settings().app_version, flow_id=flow.id)
