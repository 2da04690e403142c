"""Pagination cursor and metadata."""

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
# Keeps the offset inside a 32-bit signed integer at MAX_LIMIT
MAX_PAGE = (2**31 - 1) // MAX_LIMIT


@dataclass(frozen=True)
class PageRequest:
    """Normalized page/limit pair.

    Use ``PageRequest.of`` to build one from raw query values; the
    constructor does not normalize.
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def of(cls, page: int | None = None, limit: int | None = None) -> "PageRequest":
        if page is None or page < 1:
            page = DEFAULT_PAGE
        elif page > MAX_PAGE:
            page = MAX_PAGE
        if limit is None or limit < 1:
            limit = DEFAULT_LIMIT
        elif limit > MAX_LIMIT:
            limit = MAX_LIMIT
        return cls(page=page, limit=limit)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class PaginationMeta:
    current_page: int
    per_page: int
    total: int
    total_pages: int

    @classmethod
    def build(cls, request: PageRequest, total: int) -> "PaginationMeta":
        return cls(
            current_page=request.page,
            per_page=request.limit,
            total=total,
            total_pages=math.ceil(total / request.limit) if total > 0 else 0,
        )


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    items: list[T]
    meta: PaginationMeta
