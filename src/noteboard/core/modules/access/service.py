from noteboard.core.core import Service
from noteboard.core.modules.note.models import CommentPrivacy, Note
from noteboard.errors import AccessDeniedError


class AccessService(Service):
    def can_comment(self, actor_id: int, note: Note) -> bool:
        """Check whether the actor may comment on the note under its comment privacy tier."""
        if actor_id == note.owner_id:
            return True

        relationships = self.core.relationships
        match note.comment_privacy:
            case CommentPrivacy.EVERYONE:
                return True
            case CommentPrivacy.FRIENDS:
                return relationships.is_friend(actor_id, note.owner_id)
            case CommentPrivacy.FRIENDS_OF_FRIENDS:
                return relationships.is_friend(actor_id, note.owner_id) or relationships.is_friend_of_friend(
                    actor_id, note.owner_id
                )
            case _:
                # OWNER_ONLY and unknown tiers
                return False

    def ensure_can_comment(self, actor_id: int, note_id: int) -> None:
        """Ensure the actor may comment on an undeleted note, raise AccessDeniedError if not.

        Comment creation and listing do not call this; callers that gate on
        comment privacy must invoke it first.
        """
        note = self.core.services.note.get_active_note(note_id)
        if not self.can_comment(actor_id, note):
            raise AccessDeniedError(f"Access denied: user '{actor_id}' may not comment on note '{note_id}'")
