from devsync.models.workspace import Workspace, workspace_members
from devsync.repositories.repository import Repository
from devsync.services.search.catalog import WORKSPACE_SEARCH


class WorkspaceRepository(Repository[Workspace]):
    search_spec = WORKSPACE_SEARCH

    def has_members(self, workspace_id: str) -> bool:
        workspace_id = self._require_id(workspace_id, "Workspace")
        row = (
            self.db.query(workspace_members.c.user_id)
            .filter(workspace_members.c.workspace_id == workspace_id)
            .first()
        )
        return row is not None
