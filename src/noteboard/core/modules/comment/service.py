import structlog

from noteboard.config import Config
from noteboard.core.core import Service
from noteboard.core.modules.comment.models import Comment
from noteboard.core.modules.counter.models import CounterType
from noteboard.errors import AccessDeniedError, NotFoundError, ValidationError
from noteboard.utils import now, timestamp_ms

logger = structlog.get_logger(__name__)


class CommentService(Service):
    """Manages the comment table. Only a comment's author may change it."""

    def __init__(self, config: Config) -> None:
        super().__init__(config)
        self._comments: list[Comment] = []

    def on_start(self) -> None:
        logger.debug("comment_service_started", comment_count=len(self._comments))

    def get_comment(self, comment_id: int) -> Comment:
        """Get comment by ID, deleted or not."""
        comment = next((c for c in self._comments if c.id == comment_id), None)
        if comment is None:
            raise NotFoundError(f"Comment not found: {comment_id}")
        return comment

    def create_comment(self, note_id: int, user_id: int, message: str, reply_to: int | None = None) -> Comment:
        """Add a comment by user_id to an undeleted note."""
        note = self.core.services.note.get_active_note(note_id)

        comment_id = self.core.services.counter.get_next_sequence(CounterType.COMMENT)
        comment = Comment(
            id=comment_id,
            note_id=note_id,
            owner_id=note.owner_id,
            user_id=user_id,
            message=message,
            reply_to=reply_to,
            date=now(),
        )
        self._comments.append(comment)
        logger.debug("comment_created", comment_id=comment.id, note_id=note_id, user_id=user_id, reply_to=reply_to)
        return comment

    def delete_comment(self, comment_id: int, user_id: int) -> Comment:
        """Soft-delete a comment. Fails if it is already deleted."""
        comment = self._get_authored_comment(comment_id, user_id)
        if comment.deleted:
            raise AccessDeniedError(f"Comment already deleted: {comment_id}")

        comment.deleted = True
        logger.debug("comment_deleted", comment_id=comment_id, user_id=user_id)
        return comment

    def restore_comment(self, comment_id: int, user_id: int) -> Comment:
        """Undo a soft delete. Fails if the comment is not deleted."""
        comment = self._get_authored_comment(comment_id, user_id)
        if not comment.deleted:
            raise AccessDeniedError(f"Comment is not deleted: {comment_id}")

        comment.deleted = False
        logger.debug("comment_restored", comment_id=comment_id, user_id=user_id)
        return comment

    def get_note_comments(self, note_id: int) -> list[Comment]:
        """Get undeleted comments of an undeleted note in creation order."""
        self.core.services.note.get_active_note(note_id)
        return [c for c in self._comments if c.note_id == note_id and not c.deleted]

    def edit_comment(self, comment_id: int, note_owner_id: int, user_id: int, message: str) -> Comment:
        """Overwrite the message of an undeleted comment written by user_id.

        note_owner_id must match the owner of the commented note, as stored on the comment.
        """
        min_length = self.config.comment_min_length
        if len(message) < min_length:
            raise ValidationError(f"Message must be at least {min_length} characters long")

        comment = next((c for c in self._comments if c.id == comment_id and c.owner_id == note_owner_id), None)
        if comment is None:
            raise NotFoundError(f"Comment not found or owner mismatch: id={comment_id}, owner_id={note_owner_id}")
        if comment.user_id != user_id:
            raise AccessDeniedError(f"Comment {comment_id} was not written by user {user_id}")
        if comment.deleted:
            raise AccessDeniedError(f"Cannot edit deleted comment: {comment_id}")

        comment.message = message
        logger.debug("comment_edited", comment_id=comment_id, user_id=user_id)
        return comment

    def get_activity_at(self, note_id: int) -> int:
        """Creation time in ms of the newest undeleted comment on a note, 0 if none."""
        dates = [c.date for c in self._comments if c.note_id == note_id and not c.deleted]
        return timestamp_ms(max(dates)) if dates else 0

    def _get_authored_comment(self, comment_id: int, user_id: int) -> Comment:
        comment = self.get_comment(comment_id)
        if comment.user_id != user_id:
            raise AccessDeniedError(f"Comment {comment_id} was not written by user {user_id}")
        return comment
