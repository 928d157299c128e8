from typing import Any

from devsync.models.answer import Answer
from devsync.models.comment import Comment
from devsync.models.note import Note
from devsync.models.project import Project
from devsync.models.question import Question
from devsync.models.tag import Tag
from devsync.models.user import User
from devsync.models.workspace import Workspace


def _ts(value) -> str | None:
    return value.isoformat() if value else None


def _enum(value) -> str | None:
    return value.value if value is not None else None


def _timestamps(row) -> dict[str, Any]:
    return {"createdAt": _ts(row.created_at), "updatedAt": _ts(row.updated_at)}


def tag_out(row: Tag) -> dict[str, Any]:
    return {
        "id": row.id,
        "name": row.name,
        "color": row.color,
        "description": row.description,
        "category": row.category,
        "amountUsed": row.amount_used,
        **_timestamps(row),
    }


def user_out(row: User) -> dict[str, Any]:
    return {
        "id": row.id,
        "name": row.name,
        "email": row.email,
        "profilePictureUrl": row.profile_picture_url,
        "role": _enum(row.role),
        **_timestamps(row),
    }


def workspace_out(row: Workspace) -> dict[str, Any]:
    return {
        "id": row.id,
        "name": row.name,
        "description": row.description,
        "isPrivate": row.is_private,
        "ownerId": row.owner_id,
        "membersId": sorted(member.id for member in row.members),
        **_timestamps(row),
    }


def project_out(row: Project) -> dict[str, Any]:
    return {
        "id": row.id,
        "name": row.name,
        "description": row.description,
        "workspaceId": row.workspace_id,
        **_timestamps(row),
    }


def question_out(row: Question) -> dict[str, Any]:
    return {
        "id": row.id,
        "title": row.title,
        "description": row.description,
        "status": _enum(row.status),
        "projectId": row.project_id,
        "authorId": row.author_id,
        "tagsId": sorted(tag.id for tag in row.tags),
        **_timestamps(row),
    }


def answer_out(row: Answer) -> dict[str, Any]:
    return {
        "id": row.id,
        "content": row.content,
        "isAccepted": row.is_accepted,
        "questionId": row.question_id,
        "authorId": row.author_id,
        **_timestamps(row),
    }


def note_out(row: Note) -> dict[str, Any]:
    return {
        "id": row.id,
        "title": row.title,
        "content": row.content,
        "version": row.version,
        "projectId": row.project_id,
        "authorId": row.author_id,
        "tagsId": sorted(tag.id for tag in row.tags),
        **_timestamps(row),
    }


def comment_out(row: Comment) -> dict[str, Any]:
    return {
        "id": row.id,
        "content": row.content,
        "targetType": _enum(row.target_type),
        "targetId": row.target_id,
        "authorId": row.author_id,
        **_timestamps(row),
    }
