from typing import Callable, Optional, TypeVar

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from devsync.core.config import settings
from devsync.db.session import get_db
from devsync.repositories.repository import Repository
from devsync.schemas.search import PageRequest, SearchQuery

R = TypeVar("R", bound=Repository)


def page_params(
    pageNumber: int = Query(0, ge=0, le=settings.SEARCH_MAX_PAGE_NUMBER),
    pageSize: int = Query(
        settings.SEARCH_DEFAULT_PAGE_SIZE,
        ge=1,
        description=(
            f"Requested page size. Values above {settings.SEARCH_MAX_PAGE_SIZE} are clamped; "
            "the response pageSize reports the size actually applied."
        ),
    ),
    sort: Optional[str] = Query(None),
    direction: Optional[str] = Query(None),
) -> PageRequest:
    return PageRequest(page_number=pageNumber, page_size=pageSize, sort=sort, direction=direction)


def search_params(
    page: PageRequest = Depends(page_params),
    terms: Optional[str] = Query(None),
) -> SearchQuery:
    return SearchQuery(page=page, terms=terms)


def repository(cls: type[R]) -> Callable[[Session], R]:
    def _inner(db: Session = Depends(get_db)) -> R:
        return cls(db)
    return _inner
