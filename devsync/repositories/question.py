from __future__ import annotations

from devsync.models.question import Question
from devsync.repositories.repository import Repository
from devsync.schemas.pagination import Pagination
from devsync.schemas.search import PageRequest
from devsync.services.search.catalog import QUESTION_SEARCH


class QuestionRepository(Repository[Question]):
    search_spec = QUESTION_SEARCH

    def find_all_by_project_id(self, page: PageRequest | None, project_id: str) -> Pagination[Question]:
        project_id = self._require_id(project_id, "Project")
        return self._page_where(page, Question.project_id == project_id)
