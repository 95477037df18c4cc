from enum import IntEnum

from pydantic import BaseModel, Field


class CommentPrivacy(IntEnum):
    """Who may comment on a note."""

    EVERYONE = 0
    FRIENDS = 1
    FRIENDS_OF_FRIENDS = 2  # Friends and friends-of-friends
    OWNER_ONLY = 3


class NoteSort(IntEnum):
    """Ordering of note listings by latest comment activity."""

    ACTIVITY_DESC = 0
    ACTIVITY_ASC = 1


class Note(BaseModel):
    """User-authored note, soft-deleted rather than removed."""

    id: int = Field(frozen=True)
    owner_id: int = Field(frozen=True)  # Creator
    title: str
    text: str
    privacy: int = 0  # Stored and returned only, read gating belongs to the caller
    comment_privacy: int = 0  # CommentPrivacy value; unknown tiers are kept and deny commenting
    deleted: bool = False


class NoteView(BaseModel):
    """Note as seen by a specific actor (API representation)."""

    id: int = Field(..., description="Note ID")
    owner_id: int = Field(..., description="Note owner ID")
    title: str = Field(..., description="Note title")
    text: str = Field(..., description="Note text")
    privacy: int = Field(..., description="Note privacy tier")
    comment_privacy: int = Field(..., description="Comment privacy tier (0-3)")
    can_comment: int = Field(..., description="1 if the actor may comment on the note, else 0")

    @classmethod
    def from_domain(cls, note: Note, can_comment: bool) -> "NoteView":
        """Create view model from domain model."""
        return cls(
            id=note.id,
            owner_id=note.owner_id,
            title=note.title,
            text=note.text,
            privacy=note.privacy,
            comment_privacy=note.comment_privacy,
            can_comment=int(can_comment),
        )
