from .leetcode import leetcode_router
from .problem import problem_router
from .stats import stats_router
from .study_session import study_session_router
from .transfer import transfer_router

__all__ = [
    "leetcode_router",
    "problem_router",
    "stats_router",
    "study_session_router",
    "transfer_router",
]
