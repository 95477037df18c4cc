from datetime import datetime

from pydantic import BaseModel, Field

from noteboard.utils import now


class Comment(BaseModel):
    """Comment on a note with threading support."""

    id: int = Field(frozen=True)
    note_id: int = Field(frozen=True)
    owner_id: int = Field(frozen=True)  # Owner of the note at creation time, not the commenter
    user_id: int = Field(frozen=True)  # Author of the comment
    message: str
    reply_to: int | None = Field(None, frozen=True)  # Comment id being replied to, not validated
    date: datetime = Field(default_factory=now, frozen=True)
    deleted: bool = False
