from fastapi import APIRouter, Depends

from devsync.api.deps import page_params, repository, search_params
from devsync.api.serializers import comment_out
from devsync.models.enums import TargetType
from devsync.repositories.comment import CommentRepository
from devsync.schemas.search import PageRequest, SearchQuery

router = APIRouter()
get_repository = repository(CommentRepository)


@router.get("")
def search_comments(query: SearchQuery = Depends(search_params), repo: CommentRepository = Depends(get_repository)):
    return repo.search(query).map(comment_out).to_dict()


@router.post("/search")
def search_comments_by_filters(query: SearchQuery, repo: CommentRepository = Depends(get_repository)):
    return repo.search(query).map(comment_out).to_dict()


@router.get("/target/{target_type}/{target_id}")
def list_target_comments(
    target_type: TargetType,
    target_id: str,
    page: PageRequest = Depends(page_params),
    repo: CommentRepository = Depends(get_repository),
):
    return repo.find_all_by_target(page, target_type, target_id).map(comment_out).to_dict()


@router.get("/{id}")
def get_comment(id: str, repo: CommentRepository = Depends(get_repository)):
    return comment_out(repo.get_or_404(id))
