"""Base use case and wire models."""

import math
from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class ApiModel(BaseModel):
    """Request/response model serialized with camelCase keys.

    Accepts either snake_case or camelCase on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PageRequest(ApiModel):
    """Page-based pagination parameters.

    Routes clamp raw query values through ``Pagination.params`` before
    building this.
    """

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class PaginationMeta(ApiModel):
    """Pagination metadata returned with every list."""

    total: int
    page: int
    limit: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def build(cls, total: int, page: int, limit: int) -> "PaginationMeta":
        total_pages = math.ceil(total / limit) if limit else 0
        return cls(
            total=total,
            page=page,
            limit=limit,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        )
