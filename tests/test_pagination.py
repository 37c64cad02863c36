import pytest

from common.pagination import Pagination, PaginatedResponse
from config import settings


@pytest.mark.parametrize("page,limit,skip", [(1, 10, 0), (2, 10, 10), (3, 25, 50), (7, 1, 6)])
def test_skip_is_page_offset(page, limit, skip):
    assert Pagination(page, limit).skip() == skip


@pytest.mark.parametrize("total,pages", [(0, 0), (1, 1), (10, 1), (11, 2), (15, 2), (100, 10)])
def test_total_pages_rounds_up(total, pages):
    assert Pagination(1, 10).total_pages(total) == pages


def test_defaults():
    pagination = Pagination()
    assert pagination.page() == 1
    assert pagination.limit() == settings.default_page_limit
    assert pagination.skip() == 0


def test_out_of_range_values_are_clamped():
    pagination = Pagination(page=0, limit=-5)
    assert pagination.page() == 1
    assert pagination.limit() == 1
    assert pagination.skip() == 0

    assert Pagination(page=-3, limit=10).skip() == 0
    assert Pagination(limit=settings.max_page_limit + 500).limit() == settings.max_page_limit


def test_paginated_response_envelope():
    response = PaginatedResponse([{"ho_ten": "A"}], page=2, limit=10, total=11, total_pages=2)
    assert response.to_dict() == {
        "data": [{"ho_ten": "A"}],
        "meta": {"page": 2, "limit": 10, "total": 11, "totalPages": 2},
    }
