from typing import Annotated

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from noteboard.core.modules.note.models import Note, NoteSort, NoteView
from noteboard.web.deps import ActorIdDep, AppDep
from noteboard.web.openapi import CreatedResponse, ErrorResponse

router: APIRouter = APIRouter(tags=["notes"])


class NoteContentRequest(BaseModel):
    """Title and text of a note."""

    title: str = Field(..., description="Note title")
    text: str = Field(..., description="Note text")

    model_config = {"json_schema_extra": {"examples": [{"title": "Groceries", "text": "Milk, eggs, bread"}]}}


class UpdateNotePrivacyRequest(BaseModel):
    """Request to change who may comment on a note."""

    comment_privacy: int = Field(
        ...,
        description=(
            "Comment privacy tier:\n"
            "- `0` everyone\n"
            "- `1` friends only\n"
            "- `2` friends and friends-of-friends\n"
            "- `3` owner only\n\n"
            "Other values are stored but deny commenting to everyone except the owner."
        ),
    )


@router.get(
    "/notes",
    summary="List notes",
    description="""Get undeleted notes ordered by latest comment activity.

**Sorting** (`sort`):
- `0` - most recently commented first (notes without comments last)
- `1` - least recently commented first
- any other value keeps creation order

Filters are applied before sorting, `offset`/`count` after.""",
    operation_id="listNotes",
    responses={200: {"description": "Window of matching notes"}},
)
def list_notes(
    app: AppDep,
    ids: Annotated[list[int] | None, Query(description="Restrict to these note ids")] = None,
    user_id: Annotated[int | None, Query(description="Restrict to notes of this owner")] = None,
    offset: Annotated[int, Query(ge=0, description="Number of notes to skip")] = 0,
    count: Annotated[int | None, Query(ge=0, description="Maximum notes to return")] = None,
    sort: Annotated[int, Query(description="Sort order, see description")] = NoteSort.ACTIVITY_DESC,
) -> list[Note]:
    return app.get(ids, user_id, offset, count, sort)


@router.post(
    "/notes",
    summary="Create note",
    description="Create a note owned by the acting user.",
    operation_id="createNote",
    status_code=201,
    responses={
        201: {"description": "Note created successfully"},
        401: {"model": ErrorResponse, "description": "Actor not identified"},
    },
)
def create_note(request: NoteContentRequest, app: AppDep, actor_id: ActorIdDep) -> CreatedResponse:
    return CreatedResponse(id=app.add(actor_id, request.title, request.text))


@router.get(
    "/users/{owner_id}/notes/{note_id}",
    summary="Get note",
    description="Get an undeleted note of the given owner, including whether the acting user may comment on it.",
    operation_id="getNote",
    responses={
        200: {"description": "Note details"},
        401: {"model": ErrorResponse, "description": "Actor not identified"},
        404: {"model": ErrorResponse, "description": "Note not found, not owned by owner_id, or deleted"},
    },
)
def get_note(
    owner_id: int,
    note_id: int,
    app: AppDep,
    actor_id: ActorIdDep,
    need_wiki: Annotated[bool, Query(description="Reserved for wiki formatting, no effect")] = False,
) -> NoteView:
    return app.get_by_id(actor_id, note_id, owner_id, need_wiki)


@router.put(
    "/notes/{note_id}",
    summary="Edit note",
    description="Overwrite title and text. Only the owner can edit, and deleted notes cannot be edited.",
    operation_id="editNote",
    responses={
        200: {"description": "Note updated successfully"},
        401: {"model": ErrorResponse, "description": "Actor not identified"},
        403: {"model": ErrorResponse, "description": "Note is deleted"},
        404: {"model": ErrorResponse, "description": "Note not found or not owned by the actor"},
    },
)
def edit_note(note_id: int, request: NoteContentRequest, app: AppDep, actor_id: ActorIdDep) -> Note:
    return app.edit(actor_id, note_id, request.title, request.text)


@router.delete(
    "/notes/{note_id}",
    summary="Delete note",
    description="Soft-delete a note. Only the owner can delete. Deleting a deleted note succeeds.",
    operation_id="deleteNote",
    status_code=204,
    responses={
        204: {"description": "Note deleted successfully"},
        401: {"model": ErrorResponse, "description": "Actor not identified"},
        404: {"model": ErrorResponse, "description": "Note not found or not owned by the actor"},
    },
)
def delete_note(note_id: int, app: AppDep, actor_id: ActorIdDep) -> None:
    app.delete(actor_id, note_id)


@router.patch(
    "/notes/{note_id}/privacy",
    summary="Update comment privacy",
    description="Set the comment privacy tier of a note. Ownership is not checked.",
    operation_id="updateNotePrivacy",
    responses={
        200: {"description": "Note updated successfully"},
        404: {"model": ErrorResponse, "description": "Note not found"},
    },
)
def update_note_privacy(note_id: int, request: UpdateNotePrivacyRequest, app: AppDep) -> Note:
    return app.update_note_privacy(note_id, request.comment_privacy)
