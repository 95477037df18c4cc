from collections.abc import Collection, Generator
from contextlib import contextmanager

from noteboard.config import Config
from noteboard.core.core import Core
from noteboard.core.modules.comment.models import Comment
from noteboard.core.modules.note.models import Note, NoteSort, NoteView
from noteboard.core.modules.relationship.service import RelationshipQuery


class App:
    """Facade for all note and comment operations.

    The acting user is passed explicitly to every operation that depends on
    it. Each operation runs under the core's lock, so one App may be shared
    between threads. Returned notes and comments are copies; changing them
    does not touch stored state.
    """

    def __init__(self, config: Config, relationships: RelationshipQuery | None = None) -> None:
        self._core = Core(config, relationships)

    @contextmanager
    def lifespan(self) -> Generator[None]:
        """Application lifespan management - delegates to Core."""
        with self._core.lifespan():
            yield

    # === Notes ===
    def add(self, actor_id: int, title: str, text: str) -> int:
        """Create a note owned by the actor and return its id."""
        with self._core.transaction():
            return self._core.services.note.create_note(actor_id, title, text).id

    def edit(self, actor_id: int, note_id: int, title: str, text: str) -> Note:
        """Overwrite title and text of the actor's note (owner only, not deleted)."""
        with self._core.transaction():
            return self._core.services.note.edit_note(note_id, actor_id, title, text).model_copy()

    def delete(self, actor_id: int, note_id: int) -> Note:
        """Soft-delete the actor's note (owner only)."""
        with self._core.transaction():
            return self._core.services.note.delete_note(note_id, actor_id).model_copy()

    def get(
        self,
        note_ids: Collection[int] | None = None,
        user_id: int | None = None,
        offset: int = 0,
        count: int | None = None,
        sort: int = NoteSort.ACTIVITY_DESC,
    ) -> list[Note]:
        """List undeleted notes ordered by latest comment activity, then paginate."""
        if count is None:
            count = self._core.config.default_page_size
        with self._core.transaction():
            notes = self._core.services.note.list_notes(note_ids, user_id, offset, count, sort)
            return [note.model_copy() for note in notes]

    def get_by_id(self, actor_id: int, note_id: int, owner_id: int, need_wiki: bool = False) -> NoteView:
        """Get an undeleted note with the actor's can_comment flag."""
        with self._core.transaction():
            return self._core.services.note.get_note_view(actor_id, note_id, owner_id, need_wiki)

    def update_note_privacy(self, note_id: int, comment_privacy: int) -> Note:
        """Set the comment privacy tier of a note. Ownership is not checked."""
        with self._core.transaction():
            return self._core.services.note.update_comment_privacy(note_id, comment_privacy).model_copy()

    # === Comments ===
    def create_comment(self, actor_id: int, note_id: int, message: str, reply_to: int | None = None) -> int:
        """Add the actor's comment to an undeleted note and return its id."""
        with self._core.transaction():
            return self._core.services.comment.create_comment(note_id, actor_id, message, reply_to).id

    def delete_comment(self, actor_id: int, comment_id: int) -> Comment:
        """Soft-delete the actor's comment (author only, not already deleted)."""
        with self._core.transaction():
            return self._core.services.comment.delete_comment(comment_id, actor_id).model_copy()

    def restore_comment(self, actor_id: int, comment_id: int) -> Comment:
        """Restore the actor's deleted comment (author only)."""
        with self._core.transaction():
            return self._core.services.comment.restore_comment(comment_id, actor_id).model_copy()

    def get_comments(self, note_id: int) -> list[Comment]:
        """Get undeleted comments of an undeleted note in creation order."""
        with self._core.transaction():
            comments = self._core.services.comment.get_note_comments(note_id)
            return [comment.model_copy() for comment in comments]

    def edit_comment(self, actor_id: int, comment_id: int, note_owner_id: int, message: str) -> Comment:
        """Overwrite the message of the actor's comment on a note owned by note_owner_id."""
        with self._core.transaction():
            return self._core.services.comment.edit_comment(comment_id, note_owner_id, actor_id, message).model_copy()

    def ensure_can_comment(self, actor_id: int, note_id: int) -> None:
        """Policy check for callers that enforce comment privacy before creating or listing comments."""
        with self._core.transaction():
            self._core.services.access.ensure_can_comment(actor_id, note_id)
