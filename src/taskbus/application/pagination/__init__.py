"""Application pagination – offset pages and sort criteria."""
from taskbus.application.pagination.page import Page
from taskbus.application.pagination.page_request import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    PageRequest,
    Sort,
    SortDirection,
)

__all__ = ["DEFAULT_PAGE_SIZE", "MAX_PAGE_SIZE", "Page", "PageRequest", "Sort", "SortDirection"]
