import pytest

from conftest import InMemoryStore

from src.business.services.problem import list_problems_service
from src.data.schemas import Difficulty, FilterCriteria, SortField, SortOrder, SortParams


@pytest.mark.asyncio
async def test_list_problems_service_filters_then_sorts(make_problem):
    store = InMemoryStore(
        [
            make_problem(title="b", difficulty=Difficulty.EASY),
            make_problem(title="x", difficulty=Difficulty.HARD),
            make_problem(title="a", difficulty=Difficulty.EASY),
        ],
        [],
    )

    result = await list_problems_service(
        store,
        FilterCriteria(difficulty=[Difficulty.EASY]),
        SortParams(sort_by=SortField.TITLE, order=SortOrder.ASC),
    )

    assert [p.title for p in result] == ["a", "b"]


@pytest.mark.asyncio
async def test_list_problems_service_keeps_store_order_without_sort(make_problem):
    store = InMemoryStore([make_problem(title="z"), make_problem(title="m")], [])

    result = await list_problems_service(store, FilterCriteria(), None)

    assert [p.title for p in result] == ["z", "m"]
