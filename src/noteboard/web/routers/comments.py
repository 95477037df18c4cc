"""Comment-related API endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from noteboard.core.modules.comment.models import Comment
from noteboard.web.deps import ActorIdDep, AppDep
from noteboard.web.openapi import CreatedResponse, ErrorResponse

router: APIRouter = APIRouter(tags=["comments"])


class CreateCommentRequest(BaseModel):
    """Request to create a new comment."""

    message: str = Field(..., description="The comment text")
    reply_to: int | None = Field(None, description="Optional id of the comment being replied to")


class EditCommentRequest(BaseModel):
    """Request to replace a comment's text."""

    owner_id: int = Field(..., description="Id of the commented note's owner")
    message: str = Field(..., description="New comment text, at least 2 characters")


@router.get(
    "/notes/{note_id}/comments",
    summary="List note comments",
    description="Get undeleted comments of an undeleted note in creation order.",
    operation_id="listComments",
    responses={
        200: {"description": "List of comments"},
        404: {"model": ErrorResponse, "description": "Note not found or deleted"},
    },
)
def list_comments(note_id: int, app: AppDep) -> list[Comment]:
    return app.get_comments(note_id)


@router.post(
    "/notes/{note_id}/comments",
    summary="Create comment",
    description=(
        "Add a comment by the acting user to a note. The note's comment privacy is not "
        "enforced here; check `can_comment` on the note first."
    ),
    operation_id="createComment",
    status_code=201,
    responses={
        201: {"description": "Comment created successfully"},
        401: {"model": ErrorResponse, "description": "Actor not identified"},
        404: {"model": ErrorResponse, "description": "Note not found or deleted"},
    },
)
def create_comment(
    note_id: int, request: CreateCommentRequest, app: AppDep, actor_id: ActorIdDep
) -> CreatedResponse:
    return CreatedResponse(id=app.create_comment(actor_id, note_id, request.message, request.reply_to))


@router.put(
    "/comments/{comment_id}",
    summary="Edit comment",
    description="Replace the text of a comment. Only its author can edit, and deleted comments cannot be edited.",
    operation_id="editComment",
    responses={
        200: {"description": "Comment updated successfully"},
        400: {"model": ErrorResponse, "description": "Message too short"},
        401: {"model": ErrorResponse, "description": "Actor not identified"},
        403: {"model": ErrorResponse, "description": "Not the author, or comment is deleted"},
        404: {"model": ErrorResponse, "description": "Comment not found or owner_id mismatch"},
    },
)
def edit_comment(comment_id: int, request: EditCommentRequest, app: AppDep, actor_id: ActorIdDep) -> Comment:
    return app.edit_comment(actor_id, comment_id, request.owner_id, request.message)


@router.delete(
    "/comments/{comment_id}",
    summary="Delete comment",
    description="Soft-delete a comment. Only its author can delete, and only once.",
    operation_id="deleteComment",
    status_code=204,
    responses={
        204: {"description": "Comment deleted successfully"},
        401: {"model": ErrorResponse, "description": "Actor not identified"},
        403: {"model": ErrorResponse, "description": "Not the author, or already deleted"},
        404: {"model": ErrorResponse, "description": "Comment not found"},
    },
)
def delete_comment(comment_id: int, app: AppDep, actor_id: ActorIdDep) -> None:
    app.delete_comment(actor_id, comment_id)


@router.post(
    "/comments/{comment_id}/restore",
    summary="Restore comment",
    description="Undo a comment deletion. Only its author can restore.",
    operation_id="restoreComment",
    responses={
        200: {"description": "Comment restored successfully"},
        401: {"model": ErrorResponse, "description": "Actor not identified"},
        403: {"model": ErrorResponse, "description": "Not the author, or comment is not deleted"},
        404: {"model": ErrorResponse, "description": "Comment not found"},
    },
)
def restore_comment(comment_id: int, app: AppDep, actor_id: ActorIdDep) -> Comment:
    return app.restore_comment(actor_id, comment_id)
