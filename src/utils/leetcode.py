import re
from typing import List, Optional

from src.data.schemas import Difficulty, LeetCodeProfile, ProblemCreate

BASE_URL = "https://leetcode.com"

PROBLEM_URL_PATTERN = re.compile(r"^https?://(www\.)?leetcode\.com/problems/([^/]+)/?$")
TITLE_PATTERN = re.compile(r"<h1[^>]*>([^<]+)</h1>", re.IGNORECASE)
DIFFICULTY_PATTERN = re.compile(r"difficulty[^>]*>\s*(Easy|Medium|Hard)", re.IGNORECASE)
DESCRIPTION_PATTERN = re.compile(
    r"<div[^>]*class=\"[^\"]*description[^\"]*\"[^>]*>([\s\S]*?)</div>", re.IGNORECASE
)
HTML_TAG_PATTERN = re.compile(r"<[^>]*>")
PROBLEM_NUMBER_PATTERN = re.compile(r"problems/[^/]+/(\d+)")
SOLVED_PATTERN = re.compile(r"solved[^>]*>\s*(\d+)", re.IGNORECASE)
TOTAL_PATTERN = re.compile(r"total[^>]*>\s*(\d+)", re.IGNORECASE)
RANKING_PATTERN = re.compile(r"ranking[^>]*>\s*(\d+)", re.IGNORECASE)

DESCRIPTION_LIMIT = 500

COMMON_TAGS = [
    "Array", "String", "Hash Table", "Dynamic Programming", "Math",
    "Two Pointers", "Binary Search", "Sorting", "Greedy", "Tree",
    "Binary Tree", "Binary Search Tree", "Breadth-First Search",
    "Depth-First Search", "Backtracking", "Sliding Window", "Graph",
    "Linked List", "Stack", "Queue", "Heap", "Trie", "Union Find",
    "Bit Manipulation", "Recursion", "Divide and Conquer",
]

CATEGORY_MAP = {
    "Data Structures": [
        "Array", "String", "Linked List", "Stack", "Queue", "Tree", "Graph",
        "Hash Table", "Heap", "Trie",
    ],
    "Algorithms": [
        "Sorting", "Binary Search", "Two Pointers", "Sliding Window", "Greedy",
        "Divide and Conquer",
    ],
    "Search & Traversal": ["Breadth-First Search", "Depth-First Search", "Backtracking"],
    "Dynamic Programming": ["Dynamic Programming"],
    "Math & Logic": ["Math", "Bit Manipulation"],
    "Tree Problems": ["Binary Tree", "Binary Search Tree"],
    "Graph Problems": ["Graph", "Union Find"],
}

DEFAULT_CATEGORY = "General"


def validate_problem_url(url: str) -> bool:
    return PROBLEM_URL_PATTERN.match(url) is not None


def extract_problem_slug(url: str) -> Optional[str]:
    """``two-sum`` for ``https://leetcode.com/problems/two-sum/``."""
    match = PROBLEM_URL_PATTERN.match(url)
    return match.group(2) if match else None


def extract_problem_number_from_url(url: str) -> Optional[int]:
    """``42`` for ``https://leetcode.com/problems/trapping-rain-water/42``."""
    match = PROBLEM_NUMBER_PATTERN.search(url)
    return int(match.group(1)) if match else None


def generate_problem_url(problem_number: int) -> str:
    return f"{BASE_URL}/problems/{problem_number}/"


def extract_tags_from_content(content: str) -> List[str]:
    lowered = content.lower()
    return [tag for tag in COMMON_TAGS if tag.lower() in lowered]


def infer_categories_from_tags(tags: List[str]) -> List[str]:
    categories = [
        category
        for category, category_tags in CATEGORY_MAP.items()
        if any(tag in tags for tag in category_tags)
    ]
    return categories or [DEFAULT_CATEGORY]


def _extract_description(content: str) -> Optional[str]:
    match = DESCRIPTION_PATTERN.search(content)
    if not match:
        return None
    description = HTML_TAG_PATTERN.sub("", match.group(1)).strip()
    if len(description) > DESCRIPTION_LIMIT:
        description = description[:DESCRIPTION_LIMIT] + "..."
    return description or None


def parse_problem_page(url: str, content: str) -> ProblemCreate:
    """
    Build a problem draft from the HTML of a LeetCode problem page.

    The title comes from the first ``<h1>``, falling back to the URL slug when
    the page has none. Difficulty defaults to Medium when it cannot be found.
    """
    title_match = TITLE_PATTERN.search(content)
    title = title_match.group(1).strip() if title_match else ""
    if not title:
        slug = extract_problem_slug(url) or ""
        title = slug.replace("-", " ").title()

    difficulty_match = DIFFICULTY_PATTERN.search(content)
    difficulty = (
        Difficulty(difficulty_match.group(1).capitalize())
        if difficulty_match
        else Difficulty.MEDIUM
    )

    tags = extract_tags_from_content(content)
    return ProblemCreate(
        title=title,
        difficulty=difficulty,
        category=infer_categories_from_tags(tags),
        tags=tags,
        url=url,
        description=_extract_description(content),
    )


def _first_int(pattern: re.Pattern, content: str) -> int:
    match = pattern.search(content)
    return int(match.group(1)) if match else 0


def parse_profile_page(username: str, content: str) -> LeetCodeProfile:
    """Read the solved, total and ranking counters from a profile page."""
    return LeetCodeProfile(
        username=username,
        solved_problems=_first_int(SOLVED_PATTERN, content),
        total_problems=_first_int(TOTAL_PATTERN, content),
        ranking=_first_int(RANKING_PATTERN, content),
    )
