"""Step API: the task completion transaction."""

from fastapi import APIRouter, Request

from admissions.api.v1.dependencies import CompleteTaskDep
from admissions.core.limiter import limit_complete_task
from admissions.schemas.step import CompleteTaskRequest, CompleteTaskResponse

router = APIRouter()


@router.put("/complete", response_model=CompleteTaskResponse)
@limit_complete_task
def complete_task(
    request: Request,
    body: CompleteTaskRequest,
    use_case: CompleteTaskDep,
) -> CompleteTaskResponse:
    """Complete one task (by id or name) for a user.

    400 for unknown, out-of-order, already-completed, or incomplete
    submissions; 404 for an unknown user.
    """
    result = use_case.execute(body.user_id, body.task_id, body.task_payload).unwrap()
    return CompleteTaskResponse.from_result(result)
