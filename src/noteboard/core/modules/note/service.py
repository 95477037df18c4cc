from collections.abc import Collection

import structlog

from noteboard.config import Config
from noteboard.core.core import Service
from noteboard.core.modules.counter.models import CounterType
from noteboard.core.modules.note.models import CommentPrivacy, Note, NoteSort, NoteView
from noteboard.errors import AccessDeniedError, NotFoundError

logger = structlog.get_logger(__name__)


class NoteService(Service):
    """Manages the note table with ownership checks and soft deletion."""

    def __init__(self, config: Config) -> None:
        super().__init__(config)
        self._notes: list[Note] = []

    def on_start(self) -> None:
        logger.debug("note_service_started", note_count=len(self._notes))

    def get_note(self, note_id: int) -> Note:
        """Get note by ID, deleted or not."""
        note = next((n for n in self._notes if n.id == note_id), None)
        if note is None:
            raise NotFoundError(f"Note not found: {note_id}")
        return note

    def get_active_note(self, note_id: int) -> Note:
        """Get note by ID, treating a deleted note as missing."""
        note = next((n for n in self._notes if n.id == note_id and not n.deleted), None)
        if note is None:
            raise NotFoundError(f"Note not found or deleted: {note_id}")
        return note

    def get_owned_note(self, note_id: int, owner_id: int) -> Note:
        """Get note by ID and owner. Deleted notes still match."""
        note = next((n for n in self._notes if n.id == note_id and n.owner_id == owner_id), None)
        if note is None:
            raise NotFoundError(f"Note not found: id={note_id}, owner_id={owner_id}")
        return note

    def create_note(self, owner_id: int, title: str, text: str) -> Note:
        """Create a note with default privacy tiers."""
        note_id = self.core.services.counter.get_next_sequence(CounterType.NOTE)
        note = Note(id=note_id, owner_id=owner_id, title=title, text=text)
        self._notes.append(note)
        logger.debug("note_created", note_id=note.id, owner_id=owner_id)
        return note

    def edit_note(self, note_id: int, owner_id: int, title: str, text: str) -> Note:
        """Overwrite title and text of an owned, undeleted note."""
        note = self.get_owned_note(note_id, owner_id)
        if note.deleted:
            raise AccessDeniedError(f"Cannot edit deleted note: {note_id}")

        note.title = title
        note.text = text
        logger.debug("note_edited", note_id=note_id, owner_id=owner_id)
        return note

    def delete_note(self, note_id: int, owner_id: int) -> Note:
        """Soft-delete an owned note. Deleting an already deleted note is a no-op."""
        note = self.get_owned_note(note_id, owner_id)
        note.deleted = True
        logger.debug("note_deleted", note_id=note_id, owner_id=owner_id)
        return note

    def list_notes(
        self,
        note_ids: Collection[int] | None = None,
        user_id: int | None = None,
        offset: int = 0,
        count: int = 10,
        sort: int = NoteSort.ACTIVITY_DESC,
    ) -> list[Note]:
        """List undeleted notes ordered by latest comment activity.

        Args:
            note_ids: Optional set of note ids to restrict to
            user_id: Optional owner id to restrict to
            offset: Number of notes to skip
            count: Maximum number of notes to return
            sort: NoteSort value; any other value keeps insertion order

        Returns:
            The requested window of the filtered, ordered notes
        """
        notes = self._notes
        if note_ids is not None:
            wanted = set(note_ids)
            notes = [n for n in notes if n.id in wanted]
        if user_id is not None:
            notes = [n for n in notes if n.owner_id == user_id]
        notes = [n for n in notes if not n.deleted]

        activity_at = self.core.services.comment.get_activity_at
        if sort == NoteSort.ACTIVITY_DESC:
            notes = sorted(notes, key=lambda n: activity_at(n.id), reverse=True)
        elif sort == NoteSort.ACTIVITY_ASC:
            notes = sorted(notes, key=lambda n: activity_at(n.id))

        offset = max(offset, 0)
        count = max(count, 0)
        items = notes[offset : offset + count]

        logger.debug(
            "list_notes",
            note_ids=note_ids,
            user_id=user_id,
            sort=sort,
            total=len(notes),
            offset=offset,
            count=count,
            returned=len(items),
        )
        return items

    def get_note_view(self, actor_id: int, note_id: int, owner_id: int, need_wiki: bool = False) -> NoteView:
        """Get an undeleted note by ID and owner, with the actor's comment permission.

        need_wiki is accepted for callers that format wiki markup and does not change the result.
        """
        note = next(
            (n for n in self._notes if n.id == note_id and n.owner_id == owner_id and not n.deleted),
            None,
        )
        if note is None:
            raise NotFoundError(f"Note not found or deleted: id={note_id}, owner_id={owner_id}")

        can_comment = self.core.services.access.can_comment(actor_id, note)
        return NoteView.from_domain(note, can_comment)

    def update_comment_privacy(self, note_id: int, comment_privacy: int) -> Note:
        """Set the comment privacy tier of any existing note, deleted or not."""
        note = self.get_note(note_id)
        note.comment_privacy = comment_privacy
        if comment_privacy not in CommentPrivacy:
            logger.warning("unknown_comment_privacy", note_id=note_id, comment_privacy=comment_privacy)
        logger.debug("note_comment_privacy_updated", note_id=note_id, comment_privacy=comment_privacy)
        return note
