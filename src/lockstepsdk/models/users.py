"""User accounts and magic links."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from lockstepsdk.models.common import LockstepModel


class UserAccountModel(LockstepModel):
    """A user with access to a Lockstep Platform account."""

    user_id: UUID | None = None
    group_key: UUID | None = None
    user_name: str | None = None
    email: str | None = None
    status: str | None = None
    user_role: UUID | None = None
    is_magic_link_user: bool | None = None
    created: datetime | None = None
    created_user_id: UUID | None = None
    modified: datetime | None = None
    modified_user_id: UUID | None = None


class MagicLinkModel(LockstepModel):
    """A single use link that signs a user into a limited portal session."""

    magic_link_id: UUID | None = None
    group_key: UUID | None = None
    user_id: UUID | None = None
    user_role: UUID | None = None
    application_id: UUID | None = None
    expires: datetime | None = None
    revoked: datetime | None = None
    created: datetime | None = None
    created_user_id: UUID | None = None
    modified: datetime | None = None
    modified_user_id: UUID | None = None
    company_id: UUID | None = None
    accounting_profile_id: UUID | None = None
    magic_link_url: str | None = None
    user: UserAccountModel | None = None
    visits: int | None = None
    status: str | None = None
