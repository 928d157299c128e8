from __future__ import annotations

from devsync.models.note import Note
from devsync.repositories.repository import Repository
from devsync.schemas.pagination import Pagination
from devsync.schemas.search import PageRequest
from devsync.services.search.catalog import NOTE_SEARCH


class NoteRepository(Repository[Note]):
    search_spec = NOTE_SEARCH

    def find_all_by_project_id(self, page: PageRequest | None, project_id: str) -> Pagination[Note]:
        project_id = self._require_id(project_id, "Project")
        return self._page_where(page, Note.project_id == project_id)
