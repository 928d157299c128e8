from fastapi import APIRouter, Depends

from devsync.api.deps import page_params, repository, search_params
from devsync.api.serializers import note_out, project_out, question_out
from devsync.repositories.note import NoteRepository
from devsync.repositories.project import ProjectRepository
from devsync.repositories.question import QuestionRepository
from devsync.schemas.search import PageRequest, SearchQuery

router = APIRouter()
get_repository = repository(ProjectRepository)
get_question_repository = repository(QuestionRepository)
get_note_repository = repository(NoteRepository)


@router.get("")
def search_projects(query: SearchQuery = Depends(search_params), repo: ProjectRepository = Depends(get_repository)):
    return repo.search(query).map(project_out).to_dict()


@router.post("/search")
def search_projects_by_filters(query: SearchQuery, repo: ProjectRepository = Depends(get_repository)):
    return repo.search(query).map(project_out).to_dict()


@router.get("/{id}")
def get_project(id: str, repo: ProjectRepository = Depends(get_repository)):
    return project_out(repo.get_or_404(id))


@router.get("/{id}/questions")
def list_project_questions(
    id: str,
    page: PageRequest = Depends(page_params),
    repo: ProjectRepository = Depends(get_repository),
    questions: QuestionRepository = Depends(get_question_repository),
):
    repo.get_or_404(id)
    return questions.find_all_by_project_id(page, id).map(question_out).to_dict()


@router.get("/{id}/notes")
def list_project_notes(
    id: str,
    page: PageRequest = Depends(page_params),
    repo: ProjectRepository = Depends(get_repository),
    notes: NoteRepository = Depends(get_note_repository),
):
    repo.get_or_404(id)
    return notes.find_all_by_project_id(page, id).map(note_out).to_dict()
