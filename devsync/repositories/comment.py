from __future__ import annotations

from devsync.models.comment import Comment
from devsync.models.enums import TargetType
from devsync.repositories.repository import Repository
from devsync.schemas.pagination import Pagination
from devsync.schemas.search import PageRequest
from devsync.services.search.catalog import COMMENT_SEARCH


class CommentRepository(Repository[Comment]):
    search_spec = COMMENT_SEARCH

    def find_all_by_target(
        self, page: PageRequest | None, target_type: TargetType, target_id: str
    ) -> Pagination[Comment]:
        if target_type is None:
            raise ValueError("Target type must not be null")
        target_id = self._require_id(target_id, "Target")
        return self._page_where(
            page,
            Comment.target_type == target_type,
            Comment.target_id == target_id,
        )

    def delete_all_by_target(self, target_type: TargetType, target_id: str) -> int:
        if target_type is None:
            raise ValueError("Target type must not be null")
        target_id = self._require_id(target_id, "Target")
        deleted = (
            self.db.query(Comment)
            .filter(Comment.target_type == target_type, Comment.target_id == target_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return int(deleted or 0)
