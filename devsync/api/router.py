from fastapi import APIRouter
from devsync.api import answers, comments, notes, projects, questions, tags, users, workspaces

router = APIRouter()
router.include_router(tags.router, prefix="/tags", tags=["Tags"])
router.include_router(users.router, prefix="/users", tags=["Users"])
router.include_router(workspaces.router, prefix="/workspaces", tags=["Workspaces"])
router.include_router(projects.router, prefix="/projects", tags=["Projects"])
router.include_router(questions.router, prefix="/questions", tags=["Questions"])
router.include_router(answers.router, prefix="/answers", tags=["Answers"])
router.include_router(notes.router, prefix="/notes", tags=["Notes"])
router.include_router(comments.router, prefix="/comments", tags=["Comments"])
