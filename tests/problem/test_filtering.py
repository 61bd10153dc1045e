from datetime import datetime, timedelta, timezone

from conftest import NOW

from src.business.services.filtering import filter_problems, sort_problems
from src.data.schemas import DateRange, Difficulty, FilterCriteria, SortField, SortOrder


def test_difficulty_filter(make_problem):
    easy = make_problem(difficulty=Difficulty.EASY, solved=True)
    hard = make_problem(difficulty=Difficulty.HARD, solved=False)

    result = filter_problems([easy, hard], FilterCriteria(difficulty=[Difficulty.EASY]))

    assert result == [easy]


def test_absent_criteria_returns_input_unchanged(make_problem):
    problems = [make_problem(title=f"Problem {i}") for i in range(3)]

    assert filter_problems(problems, FilterCriteria()) == problems
    assert filter_problems(problems) == problems


def test_empty_label_lists_do_not_filter(make_problem):
    problems = [make_problem(category=["Array"], tags=[]), make_problem(category=[], tags=["DP"])]

    result = filter_problems(problems, FilterCriteria(categories=[], tags=[]))

    assert result == problems


def test_category_filter_is_case_insensitive_substring(make_problem):
    dp = make_problem(category=["Dynamic Programming"])
    graph = make_problem(category=["Graph"])

    result = filter_problems([dp, graph], FilterCriteria(categories=["dynamic", "tree"]))

    assert result == [dp]


def test_tag_filter_matches_any_tag(make_problem):
    tagged = make_problem(tags=["Sliding Window", "Two Pointers"])
    untagged = make_problem(tags=[])

    result = filter_problems([tagged, untagged], FilterCriteria(tags=["POINTER"]))

    assert result == [tagged]


def test_solved_filter_matches_exactly(make_problem):
    solved = make_problem(solved=True)
    unsolved = make_problem(solved=False)

    assert filter_problems([solved, unsolved], FilterCriteria(solved=False)) == [unsolved]
    assert filter_problems([solved, unsolved], FilterCriteria(solved=True)) == [solved]


def test_search_checks_title_description_and_notes(make_problem):
    by_title = make_problem(title="Merge Intervals")
    by_description = make_problem(title="A", description="Sort then MERGE overlapping ranges")
    by_notes = make_problem(title="B", notes="remember to merge")
    no_match = make_problem(title="C")

    result = filter_problems(
        [by_title, by_description, by_notes, no_match], FilterCriteria(search="merge")
    )

    assert result == [by_title, by_description, by_notes]


def test_date_range_uses_last_solved_at_before_created_at(make_problem):
    created_inside = make_problem(created_at=NOW)
    solved_outside = make_problem(created_at=NOW, last_solved_at=NOW + timedelta(days=10))
    solved_inside = make_problem(
        created_at=NOW - timedelta(days=30), last_solved_at=NOW + timedelta(days=1)
    )
    date_range = DateRange(start=NOW - timedelta(days=1), end=NOW + timedelta(days=2))

    result = filter_problems(
        [created_inside, solved_outside, solved_inside], FilterCriteria(date_range=date_range)
    )

    assert result == [created_inside, solved_inside]


def test_date_range_bounds_are_inclusive(make_problem):
    at_start = make_problem(created_at=NOW)
    at_end = make_problem(created_at=NOW + timedelta(days=1))

    result = filter_problems(
        [at_start, at_end],
        FilterCriteria(date_range=DateRange(start=NOW, end=NOW + timedelta(days=1))),
    )

    assert result == [at_start, at_end]


def test_inverted_date_range_matches_nothing(make_problem):
    problem = make_problem(created_at=NOW)

    result = filter_problems(
        [problem],
        FilterCriteria(date_range=DateRange(start=NOW + timedelta(days=1), end=NOW - timedelta(days=1))),
    )

    assert result == []


def test_half_open_date_range(make_problem):
    old = make_problem(created_at=NOW - timedelta(days=5))
    new = make_problem(created_at=NOW)

    result = filter_problems([old, new], FilterCriteria(date_range=DateRange(start=NOW)))

    assert result == [new]


def test_aware_range_bounds_are_compared_in_utc(make_problem):
    problem = make_problem(created_at=NOW)
    plus_two = timezone(timedelta(hours=2))
    # 14:00 at UTC+2 is 12:00 UTC
    date_range = DateRange(start=datetime(2024, 3, 15, 14, 0, tzinfo=plus_two))

    assert filter_problems([problem], FilterCriteria(date_range=date_range)) == [problem]


def test_criteria_are_combined_with_and(make_problem):
    match = make_problem(difficulty=Difficulty.MEDIUM, category=["Graph"], solved=True)
    wrong_difficulty = make_problem(difficulty=Difficulty.HARD, category=["Graph"], solved=True)
    unsolved = make_problem(difficulty=Difficulty.MEDIUM, category=["Graph"], solved=False)
    criteria = FilterCriteria(
        difficulty=[Difficulty.MEDIUM], categories=["graph"], solved=True
    )

    assert filter_problems([match, wrong_difficulty, unsolved], criteria) == [match]


def test_filter_preserves_order_and_is_idempotent(make_problem):
    problems = [
        make_problem(title="b", difficulty=Difficulty.EASY),
        make_problem(title="a", difficulty=Difficulty.HARD),
        make_problem(title="c", difficulty=Difficulty.EASY),
    ]
    criteria = FilterCriteria(difficulty=[Difficulty.EASY])

    once = filter_problems(problems, criteria)

    assert [p.title for p in once] == ["b", "c"]
    assert filter_problems(once, criteria) == once
    assert [p.title for p in problems] == ["b", "a", "c"]


def test_sort_by_difficulty_ascending(make_problem):
    hard = make_problem(difficulty=Difficulty.HARD)
    easy = make_problem(difficulty=Difficulty.EASY)
    medium = make_problem(difficulty=Difficulty.MEDIUM)

    result = sort_problems([hard, easy, medium], SortField.DIFFICULTY, SortOrder.ASC)

    assert result == [easy, medium, hard]


def test_sort_by_date_descending_by_default(make_problem):
    older = make_problem(updated_at=NOW - timedelta(days=1))
    newer = make_problem(updated_at=NOW)

    assert sort_problems([older, newer]) == [newer, older]


def test_sort_by_category_puts_uncategorised_first(make_problem):
    graph = make_problem(category=["Graph"])
    none = make_problem(category=[])
    array = make_problem(category=["Array"])

    result = sort_problems([graph, none, array], SortField.CATEGORY, SortOrder.ASC)

    assert result == [none, array, graph]
