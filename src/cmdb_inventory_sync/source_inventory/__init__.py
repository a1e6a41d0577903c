"""Source inventory exports."""

from .paginated_listing import DEFAULT_PAGE_SIZE, list_all_ids
from .source_client import SourceApi, SourceApiClient, SourceApiError
from .source_models import SourcePage, SourceRecord

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "SourceApi",
    "SourceApiClient",
    "SourceApiError",
    "SourcePage",
    "SourceRecord",
    "list_all_ids",
]
