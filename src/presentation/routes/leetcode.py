from fastapi import APIRouter

from src.config import logger
from src.data.schemas import (
    LeetCodePageRequest,
    LeetCodeProfile,
    LeetCodeProfileRequest,
    ProblemCreate,
)
from src.errors import BadRequestException
from src.utils.leetcode import (
    parse_problem_page,
    parse_profile_page,
    validate_problem_url,
)

leetcode_logger = logger.getChild("leetcode")
leetcode_router = APIRouter(prefix="/leetcode", tags=["leetcode"])


@leetcode_router.post(
    "/parse",
    response_model=ProblemCreate,
    summary="Parse a LeetCode problem page",
    description="Builds a problem draft (title, difficulty, tags, categories) from a fetched problem page.",
)
async def parse_leetcode_page(page: LeetCodePageRequest):
    if not validate_problem_url(page.url):
        leetcode_logger.warning(f"Rejected LeetCode URL: {page.url}")
        raise BadRequestException(detail="Not a LeetCode problem URL")
    draft = parse_problem_page(page.url, page.content)
    leetcode_logger.info(f"Parsed LeetCode problem: {draft.title} ({len(draft.tags)} tags)")
    return draft


@leetcode_router.post(
    "/profile",
    response_model=LeetCodeProfile,
    summary="Parse a LeetCode profile page",
    description="Reads solved, total and ranking counters from a fetched profile page.",
)
async def parse_leetcode_profile(page: LeetCodeProfileRequest):
    profile = parse_profile_page(page.username, page.content)
    leetcode_logger.info(
        f"Parsed LeetCode profile: {profile.username} "
        f"({profile.solved_problems}/{profile.total_problems} solved)"
    )
    return profile
