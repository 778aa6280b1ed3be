"""Application pagination – PageRequest, Sort, SortDirection."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Sequence, TypeVar

from taskbus.kernel.errors import ValidationError

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 1000


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @property
    def descending(self) -> bool:
        return self is SortDirection.DESC


@dataclasses.dataclass(frozen=True)
class Sort:
    """Order results by one attribute."""

    field: str
    direction: SortDirection = SortDirection.ASC


@dataclasses.dataclass(frozen=True)
class PageRequest:
    """1-based page number plus page size."""

    page: int = 1
    size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        errors = []
        if self.page < 1:
            errors.append({"field": "page", "error": "must be >= 1"})
        if not 1 <= self.size <= MAX_PAGE_SIZE:
            errors.append({"field": "size", "error": f"must be between 1 and {MAX_PAGE_SIZE}"})
        if errors:
            raise ValidationError("Invalid page request", errors=errors)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size

    def slice(self, items: Sequence[T]) -> list[T]:
        return list(items[self.offset:self.offset + self.size])


__all__ = ["DEFAULT_PAGE_SIZE", "MAX_PAGE_SIZE", "PageRequest", "Sort", "SortDirection"]
