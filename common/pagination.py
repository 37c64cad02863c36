# common/pagination.py
import math
from typing import Any, List, Optional

from config import settings
from common.utils import serialize


class Pagination:
    """Turns page/limit request values into skip/limit for the store.

    Page values below 1 are treated as 1; the limit is kept between 1 and
    the configured maximum.
    """

    def __init__(self, page: Optional[int] = None, limit: Optional[int] = None):
        page = 1 if page is None else int(page)
        limit = settings.default_page_limit if limit is None else int(limit)
        self._page = max(page, 1)
        self._limit = min(max(limit, 1), settings.max_page_limit)

    def skip(self) -> int:
        return (self._page - 1) * self._limit

    def limit(self) -> int:
        return self._limit

    def page(self) -> int:
        return self._page

    def total_pages(self, total: int) -> int:
        return math.ceil(total / self._limit)


class PaginatedResponse:
    def __init__(self, data: List[Any], page: int, limit: int, total: int, total_pages: int):
        self.data = data
        self.page = page
        self.limit = limit
        self.total = total
        self.total_pages = total_pages

    def to_dict(self):
        return {
            "data": serialize(self.data),
            "meta": {
                "page": self.page,
                "limit": self.limit,
                "total": self.total,
                "totalPages": self.total_pages,
            },
        }
