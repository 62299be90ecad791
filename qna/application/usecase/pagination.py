"""Query-string pagination parsing."""

from qna.config import PaginationSettings
from qna.application.usecase.base import PageRequest


class Pagination:
    """Turns raw ``page``/``limit`` query values into a valid page request.

    Missing or non-positive values fall back to the defaults; ``limit`` is
    capped at the configured maximum instead of being rejected.
    """

    def __init__(self, settings: PaginationSettings) -> None:
        self.settings = settings

    def params(self, page: int | None = None, limit: int | None = None) -> PageRequest:
        page = page if page and page > 0 else self.settings.default_page
        limit = limit if limit and limit > 0 else self.settings.default_limit
        return PageRequest(page=page, limit=min(limit, self.settings.max_limit))
