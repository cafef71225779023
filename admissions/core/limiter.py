"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. Limit strings come from settings and are
resolved per request, so tests can change them after import.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from admissions.core.config import get_settings

limiter = Limiter(
    key_func=get_remote_address,
    enabled=get_settings().rate_limit_enabled,
)


def _create_user_limit() -> str:
    return get_settings().create_user_rate_limit


def _complete_task_limit() -> str:
    return get_settings().complete_task_rate_limit


limit_create_user = limiter.limit(_create_user_limit)
limit_complete_task = limiter.limit(_complete_task_limit)
