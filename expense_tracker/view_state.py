"""Ephemeral per-widget state: pagination, trend overlay and highlight."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, Sequence, TypeVar

from . import samples
from .config import PAGE_SIZE

T = TypeVar("T")

OVERLAY_ALL = "all"
OVERLAY_NONE = "none"
DIMMED_OPACITY = 0.3


@dataclass
class Paginator(Generic[T]):
    """1-indexed pager over a bound sequence.

    The page always stays within ``[1, total_pages]`` and rebinding to a
    different sequence object resets it to 1.
    """

    page_size: int = PAGE_SIZE
    page: int = 1
    _items: Sequence[T] = field(default_factory=tuple, repr=False)

    def bind(self, items: Sequence[T]) -> None:
        if items is not self._items:
            self._items = items
            self.page = 1

    @property
    def items(self) -> Sequence[T]:
        return self._items

    @property
    def total_pages(self) -> int:
        return math.ceil(len(self._items) / self.page_size)

    @property
    def last_page(self) -> int:
        return max(self.total_pages, 1)

    @property
    def start_index(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def end_index(self) -> int:
        return min(self.start_index + self.page_size, len(self._items))

    def current_items(self) -> list[T]:
        return list(self._items[self.start_index : self.start_index + self.page_size])

    def go_to(self, page: int) -> int:
        self.page = min(max(page, 1), self.last_page)
        return self.page

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.last_page

    def next_page(self) -> int:
        if self.has_next:
            self.page += 1
        return self.page

    def previous_page(self) -> int:
        if self.has_previous:
            self.page -= 1
        return self.page

    @property
    def needs_controls(self) -> bool:
        return len(self._items) > self.page_size

    def range_label(self) -> str:
        if not self._items:
            return "No transactions"
        return f"Showing {self.start_index + 1}-{self.end_index} of {len(self._items)} transactions"


@dataclass
class OverlaySelection:
    """Which trend series the spending chart draws."""

    categories: tuple[str, ...] = samples.TREND_CATEGORIES
    selected: str = OVERLAY_ALL

    @property
    def options(self) -> list[str]:
        return [OVERLAY_ALL, OVERLAY_NONE, *self.categories]

    def select(self, key: str) -> str:
        if key in self.options:
            self.selected = key
        return self.selected

    @property
    def stacked(self) -> bool:
        return self.selected == OVERLAY_ALL

    def series(self) -> list[str]:
        if self.selected == OVERLAY_ALL:
            return list(self.categories)
        if self.selected == OVERLAY_NONE:
            return ["total"]
        return ["total", self.selected]

    def label(self, key: str) -> str:
        if key == OVERLAY_ALL:
            return "All Categories"
        if key == OVERLAY_NONE:
            return "Total Only"
        return samples.CATEGORY_LABELS.get(key, key.replace("_", " ").title())


@dataclass
class HighlightState:
    """At most one active slice or legend row; the rest are dimmed."""

    active_index: int | None = None

    def activate(self, index: int | None) -> None:
        self.active_index = index

    def clear(self) -> None:
        self.active_index = None

    def is_active(self, index: int) -> bool:
        return self.active_index == index

    def opacity(self, index: int) -> float:
        if self.active_index is None or self.active_index == index:
            return 1.0
        return DIMMED_OPACITY


def highlight_choices(count: int) -> list[int | None]:
    """Selectable highlight values: ``None`` then one index per slice."""

    return [None, *range(count)]
