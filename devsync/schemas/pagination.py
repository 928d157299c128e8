from __future__ import annotations

import dataclasses
import math
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class Pagination(Generic[T]):
    page_number: int
    page_size: int
    total_elements: int
    items: list[T]

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0 or self.total_elements <= 0:
            return 0
        return math.ceil(self.total_elements / self.page_size)

    def map(self, fn: Callable[[T], Any]) -> "Pagination[Any]":
        return Pagination(
            page_number=self.page_number,
            page_size=self.page_size,
            total_elements=self.total_elements,
            items=[fn(item) for item in self.items],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "pageNumber": self.page_number,
            "pageSize": self.page_size,
            "totalElements": self.total_elements,
            "totalPages": self.total_pages,
            "items": list(self.items),
        }
