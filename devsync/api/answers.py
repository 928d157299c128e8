from fastapi import APIRouter, Depends

from devsync.api.deps import repository, search_params
from devsync.api.serializers import answer_out
from devsync.repositories.answer import AnswerRepository
from devsync.schemas.search import SearchQuery

router = APIRouter()
get_repository = repository(AnswerRepository)


@router.get("")
def search_answers(query: SearchQuery = Depends(search_params), repo: AnswerRepository = Depends(get_repository)):
    return repo.search(query).map(answer_out).to_dict()


@router.post("/search")
def search_answers_by_filters(query: SearchQuery, repo: AnswerRepository = Depends(get_repository)):
    return repo.search(query).map(answer_out).to_dict()


@router.get("/{id}")
def get_answer(id: str, repo: AnswerRepository = Depends(get_repository)):
    return answer_out(repo.get_or_404(id))
