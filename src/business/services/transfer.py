from typing import Any, List, Tuple

from pydantic import ValidationError
from sqlmodel.ext.asyncio.session import AsyncSession

from src.config import logger
from src.data.repositories.store import RecordStore
from src.data.repositories.transfer import replace_all_records
from src.data.schemas import (
    ExportBundle,
    ImportResult,
    ProblemResponse,
    StudySessionResponse,
)

transfer_logger = logger.getChild("transfer")

REQUIRED_PROBLEM_FIELDS = ("id", "title", "difficulty")


def _has_minimal_structure(raw: Any) -> bool:
    if not isinstance(raw, dict):
        return False
    if not all(raw.get(field) for field in REQUIRED_PROBLEM_FIELDS):
        return False
    return isinstance(raw.get("category"), list)


def parse_problems(raw_problems: List[Any]) -> Tuple[List[ProblemResponse], int]:
    """
    Parse exported problems, returning the valid records and the invalid count.

    A problem is invalid when its id, or the id of one of its solutions, was
    already seen earlier in the bundle.
    """
    valid: List[ProblemResponse] = []
    seen_ids = set()
    seen_solution_ids = set()
    invalid = 0
    for raw in raw_problems:
        if not _has_minimal_structure(raw):
            invalid += 1
            continue
        try:
            problem = ProblemResponse.model_validate(raw)
        except ValidationError as e:
            transfer_logger.warning(f"Rejected problem {raw.get('id')}: {e.error_count()} errors")
            invalid += 1
            continue
        solution_ids = [solution.id for solution in problem.solutions]
        if (
            problem.id in seen_ids
            or len(set(solution_ids)) != len(solution_ids)
            or seen_solution_ids.intersection(solution_ids)
        ):
            transfer_logger.warning(f"Rejected problem {problem.id}: duplicate id")
            invalid += 1
            continue
        seen_ids.add(problem.id)
        seen_solution_ids.update(solution_ids)
        valid.append(problem)
    return valid, invalid


def parse_sessions(raw_sessions: List[Any]) -> Tuple[List[StudySessionResponse], int]:
    valid: List[StudySessionResponse] = []
    seen_ids = set()
    invalid = 0
    for raw in raw_sessions:
        try:
            study_session = StudySessionResponse.model_validate(raw)
        except ValidationError:
            invalid += 1
            continue
        if study_session.id in seen_ids:
            invalid += 1
            continue
        seen_ids.add(study_session.id)
        valid.append(study_session)
    return valid, invalid


async def export_data_service(store: RecordStore) -> ExportBundle:
    """
    Export every problem and study session.

    Args:
        store: Record store to read from

    Returns:
        Export bundle with problems, sessions, export date and format version
    """
    problems = await store.get_all_problems()
    sessions = await store.get_all_study_sessions()
    transfer_logger.info(f"Exporting {len(problems)} problems and {len(sessions)} sessions")
    return ExportBundle(problems=problems, sessions=sessions)


async def import_data_service(db: AsyncSession, payload: Any) -> ImportResult:
    """
    Replace stored records with an exported bundle.

    Nothing is written unless every problem (and every session, when the
    bundle carries them) is structurally valid.

    Args:
        db: Database session
        payload: Decoded JSON document

    Returns:
        Import result with counts of imported and rejected records
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("problems"), list):
        transfer_logger.warning("Import rejected: missing problems array")
        return ImportResult(
            success=False, message="Invalid data format: missing problems array"
        )

    raw_problems = payload["problems"]
    problems, invalid_problems = parse_problems(raw_problems)
    if invalid_problems:
        transfer_logger.warning(
            f"Import rejected: {invalid_problems} of {len(raw_problems)} problems invalid"
        )
        return ImportResult(
            success=False,
            message="Some problems have invalid structure",
            valid_problems=len(problems),
            invalid_problems=invalid_problems,
        )

    sessions = None
    raw_sessions = payload.get("sessions")
    if isinstance(raw_sessions, list):
        sessions, invalid_sessions = parse_sessions(raw_sessions)
        if invalid_sessions:
            transfer_logger.warning(
                f"Import rejected: {invalid_sessions} of {len(raw_sessions)} sessions invalid"
            )
            return ImportResult(
                success=False, message="Some sessions have invalid structure"
            )

    await replace_all_records(db, problems, sessions)
    transfer_logger.info(f"Imported {len(problems)} problems")
    return ImportResult(
        success=True,
        message=f"Imported {len(problems)} problems successfully",
        imported_problems=len(problems),
        valid_problems=len(problems),
        imported_sessions=len(sessions) if sessions is not None else 0,
    )
