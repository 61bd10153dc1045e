from .filtering import filter_problems, sort_problems
from .problem import list_problems_service
from .progress import compute_stats
from .stats import get_progress_stats_service
from .transfer import export_data_service, import_data_service

__all__ = [
    "filter_problems",
    "sort_problems",
    "list_problems_service",
    "compute_stats",
    "get_progress_stats_service",
    "export_data_service",
    "import_data_service",
]
