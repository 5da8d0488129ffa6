"""Note models."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from lockstepsdk.models.common import LockstepModel


class NoteModel(LockstepModel):
    """A free text note attached to a record."""

    note_id: UUID | None = None
    group_key: UUID | None = None
    table_key: str | None = None
    object_key: UUID | None = None
    note_text: str | None = None
    note_type: str | None = None
    is_archived: bool | None = None
    created: datetime | None = None
    created_user_id: UUID | None = None
    created_user_name: str | None = None
    recipient_name: str | None = None
    app_enrollment_id: UUID | None = None
