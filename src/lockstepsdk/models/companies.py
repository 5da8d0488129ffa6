"""Company, contact and customer view models."""

from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from lockstepsdk.models.common import Amount, LockstepModel
from lockstepsdk.models.extensibility import (
    AttachmentModel,
    CustomFieldDefinitionModel,
    CustomFieldValueModel,
)
from lockstepsdk.models.notes import NoteModel


class ContactModel(LockstepModel):
    """A person who works for a company."""

    contact_id: UUID | None = None
    company_id: UUID | None = None
    group_key: UUID | None = None
    erp_key: str | None = None
    contact_name: str | None = None
    contact_code: str | None = None
    title: str | None = None
    role_code: str | None = None
    email_address: str | None = None
    phone: str | None = None
    fax: str | None = None
    address1: str | None = None
    address2: str | None = None
    address3: str | None = None
    city: str | None = None
    state_region: str | None = None
    postal_code: str | None = None
    country_code: str | None = None
    is_active: bool | None = None
    webpage_url: str | None = None
    picture_url: str | None = None
    app_enrollment_id: UUID | None = None
    created: datetime | None = None
    created_user_id: UUID | None = None
    modified: datetime | None = None
    modified_user_id: UUID | None = None


class CompanyModel(LockstepModel):
    """A customer, a vendor, or a company within the account holder's organization."""

    company_id: UUID | None = None
    group_key: UUID | None = None
    erp_key: str | None = None
    company_name: str | None = None
    company_type: str | None = None
    company_status: str | None = None
    parent_company_id: UUID | None = None
    enterprise_id: UUID | None = None
    is_active: bool | None = None
    default_currency_code: str | None = None
    company_logo_url: str | None = None
    primary_contact_id: UUID | None = None
    address1: str | None = None
    address2: str | None = None
    address3: str | None = None
    city: str | None = None
    state_region: str | None = None
    postal_code: str | None = None
    country: str | None = None
    time_zone: str | None = None
    phone_number: str | None = None
    fax_number: str | None = None
    tax_id: str | None = None
    duns_number: str | None = None
    ap_email_address: str | None = None
    ar_email_address: str | None = None
    domain_name: str | None = None
    description: str | None = None
    website: str | None = None
    app_enrollment_id: UUID | None = None
    created: datetime | None = None
    created_user_id: UUID | None = None
    modified: datetime | None = None
    modified_user_id: UUID | None = None
    notes: list[NoteModel] | None = None
    attachments: list[AttachmentModel] | None = None
    contacts: list[ContactModel] | None = None
    custom_field_definitions: list[CustomFieldDefinitionModel] | None = None
    custom_field_values: list[CustomFieldValueModel] | None = None


class CustomerSummaryModel(LockstepModel):
    """Accounts receivable figures for one customer."""

    group_key: UUID | None = None
    company_id: UUID | None = None
    company_name: str | None = None
    app_enrollment_id: UUID | None = None
    primary_contact: str | None = None
    closed_invoices: int | None = None
    amount_collected: Amount | None = None
    outstanding_invoices: int | None = None
    total_invoices_open: int | None = None
    total_invoices_past_due: int | None = None
    outstanding_amount: Amount | None = None
    amount_past_due: Amount | None = None
    unapplied_payments: Amount | None = None
    percent_of_total_ar: Amount | None = None
    dso: Amount | None = None
    newest_activity: date | None = None


class CustomerDetailsPaymentModel(LockstepModel):
    """A payment shown on the customer details view."""

    group_key: UUID | None = None
    payment_id: UUID | None = None
    payment_applied_id: UUID | None = None
    payment_type: str | None = None
    invoice_id: UUID | None = None
    invoice_type_code: str | None = None
    invoice_reference_code: str | None = None
    invoice_total_amount: Amount | None = None
    payment_date: date | None = None
    payment_amount: Amount | None = None


class CustomerDetailsModel(LockstepModel):
    """A customer with contact information and outstanding balances."""

    group_key: UUID | None = None
    customer_id: UUID | None = None
    name: str | None = None
    address1: str | None = None
    address2: str | None = None
    address3: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
    phone_number: str | None = None
    fax_number: str | None = None
    email: str | None = None
    contact_id: UUID | None = None
    contact_name: str | None = None
    contact_email: str | None = None
    outstanding_invoices: int | None = None
    outstanding_amount: Amount | None = None
    amount_past_due: Amount | None = None
    payments: list[CustomerDetailsPaymentModel] | None = None
