from .database import get_session, init_db
from .problem import (
    add_solution_to_problem,
    create_problem_in_db,
    delete_problem_from_db,
    get_problem_by_id,
    list_problems_from_db,
    update_problem_in_db,
)
from .store import RecordStore, get_record_store
from .study_session import (
    create_study_session_in_db,
    delete_study_session_from_db,
    list_study_sessions_from_db,
)
from .transfer import replace_all_records

__all__ = [
    "get_session",
    "init_db",
    "RecordStore",
    "get_record_store",
    "add_solution_to_problem",
    "create_problem_in_db",
    "delete_problem_from_db",
    "get_problem_by_id",
    "list_problems_from_db",
    "update_problem_in_db",
    "create_study_session_in_db",
    "delete_study_session_from_db",
    "list_study_sessions_from_db",
    "replace_all_records",
]
