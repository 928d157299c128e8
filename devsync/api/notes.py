from fastapi import APIRouter, Depends

from devsync.api.deps import repository, search_params
from devsync.api.serializers import note_out
from devsync.repositories.note import NoteRepository
from devsync.schemas.search import SearchQuery

router = APIRouter()
get_repository = repository(NoteRepository)


@router.get("")
def search_notes(query: SearchQuery = Depends(search_params), repo: NoteRepository = Depends(get_repository)):
    return repo.search(query).map(note_out).to_dict()


@router.post("/search")
def search_notes_by_filters(query: SearchQuery, repo: NoteRepository = Depends(get_repository)):
    return repo.search(query).map(note_out).to_dict()


@router.get("/{id}")
def get_note(id: str, repo: NoteRepository = Depends(get_repository)):
    return note_out(repo.get_or_404(id))
