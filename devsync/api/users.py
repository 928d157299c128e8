from fastapi import APIRouter, Depends

from devsync.api.deps import repository, search_params
from devsync.api.serializers import user_out
from devsync.repositories.user import UserRepository
from devsync.schemas.search import SearchQuery

router = APIRouter()
get_repository = repository(UserRepository)


@router.get("")
def search_users(query: SearchQuery = Depends(search_params), repo: UserRepository = Depends(get_repository)):
    return repo.search(query).map(user_out).to_dict()


@router.post("/search")
def search_users_by_filters(query: SearchQuery, repo: UserRepository = Depends(get_repository)):
    return repo.search(query).map(user_out).to_dict()


@router.get("/{id}")
def get_user(id: str, repo: UserRepository = Depends(get_repository)):
    return user_out(repo.get_or_404(id))
