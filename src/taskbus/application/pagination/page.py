"""Application pagination – Page."""
from __future__ import annotations

import dataclasses
from typing import Generic, Iterator, Sequence, TypeVar

from taskbus.application.pagination.page_request import PageRequest

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class Page(Generic[T]):
    """One page cut from an already filtered and ordered result."""

    items: list[T]
    total: int
    page: int
    size: int

    @classmethod
    def of(cls, ordered: Sequence[T], request: PageRequest) -> "Page[T]":
        return cls(items=request.slice(ordered), total=len(ordered), page=request.page, size=request.size)

    @property
    def total_pages(self) -> int:
        if not self.total:
            return 0
        return -(-self.total // self.size)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)


__all__ = ["Page"]
