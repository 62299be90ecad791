"""Unit tests for query-string pagination."""

import pytest

from qna.application.usecase.base import PaginationMeta
from qna.application.usecase.pagination import Pagination
from qna.config import PaginationSettings


@pytest.fixture
def pagination():
    return Pagination(PaginationSettings())


class TestPagination:
    """Tests for Pagination.params."""

    def test_defaults(self, pagination):
        params = pagination.params()
        assert (params.page, params.limit, params.offset) == (1, 10, 0)

    def test_limit_capped(self, pagination):
        params = pagination.params(page=3, limit=500)
        assert params.limit == 100
        assert params.offset == 200

    @pytest.mark.parametrize("page,limit", [(0, 0), (-2, -5)])
    def test_non_positive_values_fall_back(self, pagination, page, limit):
        params = pagination.params(page=page, limit=limit)
        assert (params.page, params.limit) == (1, 10)


class TestPaginationMeta:
    """Tests for PaginationMeta.build."""

    def test_serialized_keys(self):
        meta = PaginationMeta.build(total=25, page=1, limit=10)
        assert meta.model_dump(by_alias=True) == {
            "total": 25,
            "page": 1,
            "limit": 10,
            "totalPages": 3,
            "hasNext": True,
            "hasPrev": False,
        }

    def test_empty(self):
        meta = PaginationMeta.build(total=0, page=1, limit=10)
        assert meta.total_pages == 0
        assert meta.has_next is False
