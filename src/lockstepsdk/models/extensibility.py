"""Attachments and custom fields that can hang off any record."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from lockstepsdk.models.common import Amount, LockstepModel


class AttachmentModel(LockstepModel):
    """A file attached to a record; the content is stored separately."""

    attachment_id: UUID | None = None
    group_key: UUID | None = None
    table_key: str | None = None
    object_key: UUID | None = None
    file_name: str | None = None
    file_ext: str | None = None
    attachment_type_id: UUID | None = None
    attachment_type: str | None = None
    is_archived: bool | None = None
    origin_attachment_id: UUID | None = None
    view_internal: bool | None = None
    view_external: bool | None = None
    erp_key: str | None = None
    app_enrollment_id: UUID | None = None
    created: datetime | None = None
    created_user_id: UUID | None = None


class CustomFieldDefinitionModel(LockstepModel):
    """Label and data type of a custom field."""

    custom_field_definition_id: UUID | None = None
    group_key: UUID | None = None
    table_key: str | None = None
    app_id: UUID | None = None
    custom_field_label: str | None = None
    data_type: str | None = None
    sort_order: int | None = None
    created: datetime | None = None
    created_user_id: UUID | None = None
    modified: datetime | None = None
    modified_user_id: UUID | None = None


class CustomFieldValueModel(LockstepModel):
    """Value of a custom field for one record."""

    custom_field_definition_id: UUID | None = None
    group_key: UUID | None = None
    record_key: UUID | None = None
    string_value: str | None = None
    numeric_value: Amount | None = None
    created: datetime | None = None
    created_user_id: UUID | None = None
    modified: datetime | None = None
    modified_user_id: UUID | None = None
    custom_field_definition: CustomFieldDefinitionModel | None = None
