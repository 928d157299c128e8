from __future__ import annotations

from devsync.models.answer import Answer
from devsync.repositories.repository import Repository
from devsync.schemas.pagination import Pagination
from devsync.schemas.search import PageRequest
from devsync.services.search.catalog import ANSWER_SEARCH


class AnswerRepository(Repository[Answer]):
    search_spec = ANSWER_SEARCH

    def find_all_by_question_id(self, page: PageRequest | None, question_id: str) -> Pagination[Answer]:
        question_id = self._require_id(question_id, "Question")
        return self._page_where(page, Answer.question_id == question_id)

    def delete_all_by_question_id(self, question_id: str) -> int:
        question_id = self._require_id(question_id, "Question")
        deleted = self.db.query(Answer).filter(Answer.question_id == question_id).delete(synchronize_session=False)
        self.db.commit()
        return int(deleted or 0)
