"""Flow definition loading: JSON document schema and compilation to entities."""

from admissions.infrastructure.flow.document import (
    ConditionDocument,
    FlowDocument,
    StepDocument,
    TaskDocument,
)
from admissions.infrastructure.flow.flow_loader import (
    build_flow,
    load_flow,
    load_flow_from_dict,
)

__all__ = [
    "ConditionDocument",
    "FlowDocument",
    "StepDocument",
    "TaskDocument",
    "build_flow",
    "load_flow",
    "load_flow_from_dict",
]
