from fastapi import APIRouter, Depends

from devsync.api.deps import page_params, repository, search_params
from devsync.api.serializers import answer_out, question_out
from devsync.models.enums import TargetType
from devsync.repositories.answer import AnswerRepository
from devsync.repositories.comment import CommentRepository
from devsync.repositories.question import QuestionRepository
from devsync.schemas.search import PageRequest, SearchQuery

router = APIRouter()
get_repository = repository(QuestionRepository)
get_answer_repository = repository(AnswerRepository)
get_comment_repository = repository(CommentRepository)


@router.get("")
def search_questions(query: SearchQuery = Depends(search_params), repo: QuestionRepository = Depends(get_repository)):
    return repo.search(query).map(question_out).to_dict()


@router.post("/search")
def search_questions_by_filters(query: SearchQuery, repo: QuestionRepository = Depends(get_repository)):
    return repo.search(query).map(question_out).to_dict()


@router.get("/{id}")
def get_question(id: str, repo: QuestionRepository = Depends(get_repository)):
    return question_out(repo.get_or_404(id))


@router.get("/{id}/answers")
def list_question_answers(
    id: str,
    page: PageRequest = Depends(page_params),
    repo: QuestionRepository = Depends(get_repository),
    answers: AnswerRepository = Depends(get_answer_repository),
):
    repo.get_or_404(id)
    return answers.find_all_by_question_id(page, id).map(answer_out).to_dict()


@router.delete("/{id}", status_code=204)
def delete_question(
    id: str,
    repo: QuestionRepository = Depends(get_repository),
    answers: AnswerRepository = Depends(get_answer_repository),
    comments: CommentRepository = Depends(get_comment_repository),
):
    repo.get_or_404(id)
    comments.delete_all_by_target(TargetType.QUESTION, id)
    answers.delete_all_by_question_id(id)
    repo.delete_by_id(id)
