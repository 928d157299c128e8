from fastapi import APIRouter, Depends

from devsync.api.deps import repository, search_params
from devsync.api.serializers import tag_out
from devsync.repositories.tag import TagRepository
from devsync.schemas.search import SearchQuery

router = APIRouter()
get_repository = repository(TagRepository)


@router.get("")
def search_tags(query: SearchQuery = Depends(search_params), repo: TagRepository = Depends(get_repository)):
    return repo.search(query).map(tag_out).to_dict()


@router.post("/search")
def search_tags_by_filters(query: SearchQuery, repo: TagRepository = Depends(get_repository)):
    return repo.search(query).map(tag_out).to_dict()


@router.get("/{id}")
def get_tag(id: str, repo: TagRepository = Depends(get_repository)):
    return tag_out(repo.get_or_404(id))
