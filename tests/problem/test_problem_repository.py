import uuid

import pytest
from sqlalchemy import DateTime
from sqlmodel import select

from src.data.repositories import (
    RecordStore,
    add_solution_to_problem,
    create_problem_in_db,
    create_study_session_in_db,
    delete_problem_from_db,
    update_problem_in_db,
)
from src.data.schemas import (
    Difficulty,
    Problem,
    ProblemCreate,
    Solution,
    SolutionCreate,
    StudySession,
    StudySessionCreate,
)
from src.errors import ResourceNotFoundException


def problem_data(**overrides) -> ProblemCreate:
    data = {"title": "Valid Parentheses", "difficulty": Difficulty.EASY, "category": ["Stack"]}
    data.update(overrides)
    return ProblemCreate(**data)


def solution_data(**overrides) -> SolutionCreate:
    data = {
        "language": "python",
        "code": "stack = []",
        "approach": "Stack",
        "time_complexity": "O(n)",
        "space_complexity": "O(n)",
    }
    data.update(overrides)
    return SolutionCreate(**data)


@pytest.mark.asyncio
async def test_add_solution_updates_problem(test_db):
    problem = await create_problem_in_db(test_db, problem_data())

    await add_solution_to_problem(test_db, problem.id, solution_data())
    await add_solution_to_problem(test_db, problem.id, solution_data(language="rust"))

    store = RecordStore(test_db)
    [stored] = await store.get_all_problems()
    assert stored.solved is True
    assert stored.attempts == 2
    assert [s.language for s in stored.solutions] == ["python", "rust"]
    assert stored.first_solved_at <= stored.last_solved_at


@pytest.mark.asyncio
async def test_delete_problem_removes_solutions(test_db):
    problem = await create_problem_in_db(test_db, problem_data())
    await add_solution_to_problem(test_db, problem.id, solution_data())

    await delete_problem_from_db(test_db, problem.id)

    remaining = (await test_db.exec(select(Solution))).all()
    assert remaining == []
    assert await RecordStore(test_db).get_all_problems() == []


@pytest.mark.asyncio
async def test_update_does_not_touch_solved_state(test_db):
    problem = await create_problem_in_db(test_db, problem_data())

    updated = await update_problem_in_db(
        test_db, problem.id, {"difficulty": Difficulty.MEDIUM, "description": "Balanced brackets"}
    )

    assert updated.difficulty == Difficulty.MEDIUM
    assert updated.description == "Balanced brackets"
    assert updated.solved is False
    assert updated.attempts == 0
    assert updated.updated_at >= problem.updated_at


@pytest.mark.asyncio
async def test_missing_problem_raises_not_found(test_db):
    with pytest.raises(ResourceNotFoundException):
        await add_solution_to_problem(test_db, uuid.uuid4(), solution_data())
    with pytest.raises(ResourceNotFoundException):
        await delete_problem_from_db(test_db, uuid.uuid4())


@pytest.mark.parametrize(
    "table, column",
    [
        (Problem, "created_at"),
        (Problem, "updated_at"),
        (Solution, "created_at"),
        (StudySession, "created_at"),
        (StudySession, "updated_at"),
        (StudySession, "date"),
    ],
)
def test_timestamp_columns_are_plain_datetime(table, column):
    column_type = table.__table__.c[column].type
    assert type(column_type) is DateTime
    assert column_type.timezone is False


@pytest.mark.asyncio
async def test_writes_store_naive_utc_timestamps(test_db):
    problem = await create_problem_in_db(test_db, problem_data())
    solution = await add_solution_to_problem(test_db, problem.id, solution_data())
    study_session = await create_study_session_in_db(
        test_db, StudySessionCreate(problems_solved=[str(problem.id)], time_spent=15)
    )

    [stored] = await RecordStore(test_db).get_all_problems()
    assert stored.created_at.tzinfo is None
    assert stored.last_solved_at.tzinfo is None
    assert solution.created_at.tzinfo is None
    assert study_session.date.tzinfo is None
    assert study_session.time_spent == 15
