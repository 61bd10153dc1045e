from pydantic import BaseModel, Field


class LeetCodePageRequest(BaseModel):
    """A LeetCode problem URL together with the page content fetched for it."""

    url: str = Field(..., examples=["https://leetcode.com/problems/two-sum/"])
    content: str


class LeetCodeProfileRequest(BaseModel):
    username: str = Field(..., min_length=1, examples=["alice"])
    content: str


class LeetCodeProfile(BaseModel):
    """Counters read from a LeetCode profile page; missing values are 0."""

    username: str
    solved_problems: int = 0
    total_problems: int = 0
    ranking: int = 0
    reputation: int = 0
