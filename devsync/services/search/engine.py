from __future__ import annotations

import logging
from typing import Any, Protocol, Sequence

from sqlalchemy import asc, desc
from sqlalchemy.sql.elements import ColumnElement

from devsync.core.config import settings
from devsync.core.errors import InvalidSortError
from devsync.schemas.pagination import Pagination
from devsync.schemas.search import PageRequest, SearchQuery
from devsync.services.search.fields import SearchSpec
from devsync.services.search.terms import normalize_terms, parse_terms

_LOG = logging.getLogger("devsync.search")

_DIRECTIONS = {
    "asc": asc,
    "ascending": asc,
    "desc": desc,
    "descending": desc,
}


class QueryStore(Protocol):
    def query(
        self,
        predicate: ColumnElement,
        order_by: list,
        page_number: int,
        page_size: int,
    ) -> tuple[Sequence[Any], int]: ...


def resolve_terms(query: SearchQuery) -> dict[str, str]:
    if query.filters is not None:
        return normalize_terms(query.filters)
    return parse_terms(query.terms)


def resolve_order_by(spec: SearchSpec, page: PageRequest) -> list:
    sort = str(page.sort or "").strip()
    direction = str(page.direction or "").strip()
    if not direction:
        sort, order = spec.default_sort, asc
    else:
        order = _DIRECTIONS.get(direction.lower())
        if order is None:
            raise InvalidSortError(f"Invalid sort direction: '{direction}'. Expected 'asc' or 'desc'.")
        sort = sort or spec.default_sort
    column = spec.sort_fields.get(sort)
    if column is None:
        raise InvalidSortError(f"Invalid sort field provided: '{sort}'")
    clauses = [order(column)]
    if sort != "id":
        # Stable page boundaries when the sort column has duplicates.
        clauses.append(asc(spec.model.id))
    return clauses


def resolve_page_size(page: PageRequest) -> int:
    return min(page.page_size, settings.SEARCH_MAX_PAGE_SIZE)


def search(store: QueryStore, spec: SearchSpec, query: SearchQuery | None = None) -> Pagination:
    query = query or SearchQuery()
    page = query.page or PageRequest()

    terms = resolve_terms(query)
    criteria = spec.build_criteria(terms)
    order_by = resolve_order_by(spec, page)
    page_size = resolve_page_size(page)

    _LOG.debug(
        "search entity=%s mode=%s fields=%s page=%s size=%s",
        spec.entity,
        spec.mode.value,
        sorted(terms),
        page.page_number,
        page_size,
    )
    items, total = store.query(criteria, order_by, page.page_number, page_size)
    return Pagination(
        page_number=page.page_number,
        page_size=page_size,
        total_elements=total,
        items=list(items),
    )
