from fastapi import APIRouter, Depends

from devsync.api.deps import repository, search_params
from devsync.api.serializers import workspace_out
from devsync.core.errors import BusinessError
from devsync.repositories.project import ProjectRepository
from devsync.repositories.workspace import WorkspaceRepository
from devsync.schemas.pagination import Pagination
from devsync.schemas.search import SearchQuery

router = APIRouter()
get_repository = repository(WorkspaceRepository)
get_project_repository = repository(ProjectRepository)


def _with_project_counts(page: Pagination, projects: ProjectRepository) -> dict:
    counts = projects.count_by_workspace_ids([row.id for row in page.items])
    return page.map(
        lambda row: {
            **workspace_out(row),
            "ownerName": row.owner.name if row.owner is not None else None,
            "projectCount": counts.get(row.id, 0),
        }
    ).to_dict()


@router.get("")
def search_workspaces(
    query: SearchQuery = Depends(search_params),
    repo: WorkspaceRepository = Depends(get_repository),
    projects: ProjectRepository = Depends(get_project_repository),
):
    return _with_project_counts(repo.search(query), projects)


@router.post("/search")
def search_workspaces_by_filters(
    query: SearchQuery,
    repo: WorkspaceRepository = Depends(get_repository),
    projects: ProjectRepository = Depends(get_project_repository),
):
    return _with_project_counts(repo.search(query), projects)


@router.get("/{id}")
def get_workspace(id: str, repo: WorkspaceRepository = Depends(get_repository)):
    return workspace_out(repo.get_or_404(id))


@router.delete("/{id}", status_code=204)
def delete_workspace(
    id: str,
    repo: WorkspaceRepository = Depends(get_repository),
    projects: ProjectRepository = Depends(get_project_repository),
):
    repo.get_or_404(id)
    if repo.has_members(id):
        raise BusinessError("Cannot delete a workspace that has members. Please remove all members first.")
    if projects.exists_by_workspace_id(id):
        raise BusinessError("Cannot delete a workspace that has associated projects. Please move or delete them first.")
    repo.delete_by_id(id)
