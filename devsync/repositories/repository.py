from __future__ import annotations

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import and_, true
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from devsync.core.errors import InvalidIdError, NotFoundError
from devsync.schemas.pagination import Pagination
from devsync.schemas.search import PageRequest, SearchQuery
from devsync.services.search import engine
from devsync.services.search.fields import SearchSpec

T = TypeVar("T")


class Repository(Generic[T]):
    """Store for one entity type bound to a request-scoped session.

    Subclasses set ``search_spec``; the model and entity name come from it.
    """

    search_spec: SearchSpec

    def __init__(self, db: Session):
        self.db = db

    @property
    def model(self) -> Any:
        return self.search_spec.model

    @property
    def entity_name(self) -> str:
        return self.search_spec.entity

    def _require_id(self, entity_id: str | None, label: str | None = None) -> str:
        value = str(entity_id or "").strip()
        if not value:
            raise InvalidIdError(label or self.entity_name)
        return value

    def exists(self, entity_id: str) -> bool:
        entity_id = self._require_id(entity_id)
        return self.db.query(self.model.id).filter(self.model.id == entity_id).first() is not None

    def find_by_id(self, entity_id: str) -> T | None:
        entity_id = self._require_id(entity_id)
        return self.db.get(self.model, entity_id)

    def get_or_404(self, entity_id: str) -> T:
        row = self.find_by_id(entity_id)
        if row is None:
            raise NotFoundError(self.entity_name, entity_id)
        return row

    def create(self, row: T) -> T:
        if row is None:
            raise ValueError(f"{self.entity_name} must not be null")
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        return row

    def update(self, row: T) -> T:
        if row is None:
            raise ValueError(f"{self.entity_name} must not be null")
        row = self.db.merge(row)
        self.db.commit()
        self.db.refresh(row)
        return row

    def delete_by_id(self, entity_id: str) -> None:
        row = self.find_by_id(entity_id)
        if row is None:
            return
        self.db.delete(row)
        self.db.commit()

    def query(
        self,
        predicate: ColumnElement,
        order_by: list,
        page_number: int,
        page_size: int,
    ) -> tuple[Sequence[T], int]:
        q = self.db.query(self.model).filter(predicate)
        total = q.count()
        rows = q.order_by(*order_by).offset(page_number * page_size).limit(page_size).all()
        return rows, total

    def search(self, query: SearchQuery | None = None) -> Pagination[T]:
        return engine.search(self, self.search_spec, query)

    def _page_where(self, page: PageRequest | None, *criteria: ColumnElement) -> Pagination[T]:
        page = page or PageRequest()
        order_by = engine.resolve_order_by(self.search_spec, page)
        page_size = engine.resolve_page_size(page)
        predicate = and_(*criteria) if criteria else true()
        items, total = self.query(predicate, order_by, page.page_number, page_size)
        return Pagination(
            page_number=page.page_number,
            page_size=page_size,
            total_elements=total,
            items=list(items),
        )
