from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from devsync.core.config import settings


class PageRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    page_number: int = Field(0, ge=0, le=settings.SEARCH_MAX_PAGE_NUMBER)
    page_size: int = Field(
        default_factory=lambda: settings.SEARCH_DEFAULT_PAGE_SIZE,
        ge=1,
        description="Clamped to SEARCH_MAX_PAGE_SIZE; the response reports the size applied.",
    )
    sort: Optional[str] = None
    direction: Optional[str] = None


class SearchQuery(BaseModel):
    page: PageRequest = PageRequest()
    terms: Optional[str] = None
    filters: Optional[Dict[str, str]] = None

    @model_validator(mode="after")
    def _one_filter_form(self):
        if self.terms is not None and self.filters is not None:
            raise ValueError("terms and filters are mutually exclusive")
        return self
