from .base import BaseModel, UTCDateTime
from .enums import Difficulty, SortField, SortOrder
from .filter import DateRange, FilterCriteria, SortParams
from .leetcode import LeetCodePageRequest, LeetCodeProfile, LeetCodeProfileRequest
from .problem import (
    Problem,
    ProblemCreate,
    ProblemResponse,
    ProblemUpdate,
    Solution,
    SolutionCreate,
    SolutionResponse,
)
from .stats import ProgressStats
from .study_session import StudySession, StudySessionCreate, StudySessionResponse
from .transfer import EXPORT_VERSION, ExportBundle, ImportResult

__all__ = [
    "BaseModel",
    "UTCDateTime",
    "Difficulty",
    "SortField",
    "SortOrder",
    "DateRange",
    "FilterCriteria",
    "SortParams",
    "LeetCodePageRequest",
    "LeetCodeProfile",
    "LeetCodeProfileRequest",
    "Problem",
    "ProblemCreate",
    "ProblemResponse",
    "ProblemUpdate",
    "Solution",
    "SolutionCreate",
    "SolutionResponse",
    "ProgressStats",
    "StudySession",
    "StudySessionCreate",
    "StudySessionResponse",
    "EXPORT_VERSION",
    "ExportBundle",
    "ImportResult",
]
