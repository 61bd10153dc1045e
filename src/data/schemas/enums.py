from enum import Enum


class Difficulty(str, Enum):
    """Difficulty levels a problem can be tagged with."""
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class SortField(str, Enum):
    TITLE = "title"
    DIFFICULTY = "difficulty"
    DATE = "date"
    CATEGORY = "category"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"
