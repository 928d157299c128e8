from __future__ import annotations

from typing import Any

from devsync.models.answer import Answer
from devsync.models.comment import Comment
from devsync.models.enums import QuestionStatus, TargetType
from devsync.models.note import Note
from devsync.models.project import Project
from devsync.models.question import Question
from devsync.models.tag import Tag
from devsync.models.user import User
from devsync.models.workspace import Workspace
from devsync.services.search.fields import (
    SearchMode,
    SearchSpec,
    any_contains,
    any_equals,
    boolean,
    contains,
    enum_equals,
    equals,
    integer,
    related_contains,
)


def _sort_fields(model, **extra: Any) -> dict[str, Any]:
    fields = {
        "id": model.id,
        "createdAt": model.created_at,
        "updatedAt": model.updated_at,
    }
    fields.update(extra)
    return fields


# Free-text entities: every field is a substring match, any match wins.

TAG_SEARCH = SearchSpec(
    entity="Tag",
    model=Tag,
    mode=SearchMode.OR,
    fields={
        "name": contains(Tag.name),
        "color": contains(Tag.color),
        "description": contains(Tag.description),
        "category": contains(Tag.category),
    },
    sort_fields=_sort_fields(
        Tag,
        name=Tag.name,
        color=Tag.color,
        category=Tag.category,
        amountUsed=Tag.amount_used,
    ),
    default_sort="name",
)

USER_SEARCH = SearchSpec(
    entity="User",
    model=User,
    mode=SearchMode.OR,
    fields={
        "name": contains(User.name),
        "email": contains(User.email),
        "role": contains(User.role),
    },
    sort_fields=_sort_fields(User, name=User.name, email=User.email, role=User.role),
    default_sort="name",
)

WORKSPACE_SEARCH = SearchSpec(
    entity="Workspace",
    model=Workspace,
    mode=SearchMode.OR,
    fields={
        "id": contains(Workspace.id),
        "name": contains(Workspace.name),
        "description": contains(Workspace.description),
        # Exact true/false, never a substring.
        "isPrivate": boolean(Workspace.is_private),
        "ownerId": related_contains(Workspace.owner, User.id),
        "ownerName": related_contains(Workspace.owner, User.name),
        "memberId": any_contains(Workspace.members, User.id),
        "memberName": any_contains(Workspace.members, User.name),
    },
    sort_fields=_sort_fields(Workspace, name=Workspace.name, isPrivate=Workspace.is_private),
    default_sort="name",
)

# Typed entities: every field keeps its own semantics, all must match.

PROJECT_SEARCH = SearchSpec(
    entity="Project",
    model=Project,
    mode=SearchMode.AND,
    fields={
        "id": contains(Project.id),
        "name": contains(Project.name),
        "description": contains(Project.description),
        "workspaceId": equals(Project.workspace_id),
    },
    sort_fields=_sort_fields(Project, name=Project.name),
    default_sort="name",
)

QUESTION_SEARCH = SearchSpec(
    entity="Question",
    model=Question,
    mode=SearchMode.AND,
    fields={
        "id": equals(Question.id),
        "title": contains(Question.title),
        "description": contains(Question.description),
        "projectId": equals(Question.project_id),
        "authorId": equals(Question.author_id),
        "status": enum_equals(Question.status, QuestionStatus),
        "tagsId": any_equals(Question.tags, Tag.id),
        "tagsName": any_equals(Question.tags, Tag.name),
    },
    sort_fields=_sort_fields(Question, title=Question.title, status=Question.status),
    default_sort="createdAt",
)

ANSWER_SEARCH = SearchSpec(
    entity="Answer",
    model=Answer,
    mode=SearchMode.AND,
    fields={
        "id": equals(Answer.id),
        "content": contains(Answer.content),
        "isAccepted": boolean(Answer.is_accepted),
        "authorId": equals(Answer.author_id),
        "authorName": related_contains(Answer.author, User.name),
        "questionId": equals(Answer.question_id),
    },
    sort_fields=_sort_fields(Answer, isAccepted=Answer.is_accepted),
    default_sort="createdAt",
)

NOTE_SEARCH = SearchSpec(
    entity="Note",
    model=Note,
    mode=SearchMode.AND,
    fields={
        "title": contains(Note.title),
        "content": contains(Note.content),
        "authorId": equals(Note.author_id),
        "projectId": equals(Note.project_id),
        "version": integer(Note.version),
        "tagsId": any_equals(Note.tags, Tag.id),
        "tagsName": any_equals(Note.tags, Tag.name),
    },
    sort_fields=_sort_fields(Note, title=Note.title, version=Note.version),
    default_sort="createdAt",
)

COMMENT_SEARCH = SearchSpec(
    entity="Comment",
    model=Comment,
    mode=SearchMode.AND,
    fields={
        "targetType": enum_equals(Comment.target_type, TargetType),
        "targetId": equals(Comment.target_id),
        "content": contains(Comment.content),
        "authorId": equals(Comment.author_id),
    },
    sort_fields=_sort_fields(Comment, targetType=Comment.target_type),
    default_sort="createdAt",
)
