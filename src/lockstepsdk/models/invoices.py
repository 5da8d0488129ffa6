"""Invoice models and invoice views."""

from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from lockstepsdk.models.common import Amount, LockstepModel
from lockstepsdk.models.companies import CompanyModel, ContactModel
from lockstepsdk.models.extensibility import (
    AttachmentModel,
    CustomFieldDefinitionModel,
    CustomFieldValueModel,
)
from lockstepsdk.models.notes import NoteModel


class InvoiceAddressModel(LockstepModel):
    """An address printed on an invoice."""

    invoice_address_id: UUID | None = None
    group_key: UUID | None = None
    invoice_id: UUID | None = None
    line1: str | None = None
    line2: str | None = None
    line3: str | None = None
    city: str | None = None
    region: str | None = None
    postal_code: str | None = None
    country: str | None = None
    latitude: Amount | None = None
    longitude: Amount | None = None
    app_enrollment_id: UUID | None = None
    created: datetime | None = None
    created_user_id: UUID | None = None
    modified: datetime | None = None
    modified_user_id: UUID | None = None


class InvoiceLineModel(LockstepModel):
    """One line item on an invoice."""

    invoice_line_id: UUID | None = None
    group_key: UUID | None = None
    invoice_id: UUID | None = None
    erp_key: str | None = None
    line_number: str | None = None
    item_code: str | None = None
    description: str | None = None
    unit_measure_code: str | None = None
    unit_price: Amount | None = None
    quantity: Amount | None = None
    quantity_shipped: Amount | None = None
    quantity_received: Amount | None = None
    total_amount: Amount | None = None
    exemption_code: str | None = None
    reporting_date: date | None = None
    override_origin_address_id: UUID | None = None
    override_bill_to_address_id: UUID | None = None
    override_ship_to_address_id: UUID | None = None
    app_enrollment_id: UUID | None = None
    created: datetime | None = None
    created_user_id: UUID | None = None
    modified: datetime | None = None
    modified_user_id: UUID | None = None


class InvoicePaymentDetailModel(LockstepModel):
    """A payment applied to an invoice."""

    group_key: UUID | None = None
    payment_applied_id: UUID | None = None
    invoice_id: UUID | None = None
    payment_id: UUID | None = None
    apply_to_invoice_date: date | None = None
    payment_applied_amount: Amount | None = None
    reference_code: str | None = None
    company_id: UUID | None = None
    payment_amount: Amount | None = None
    unapplied_amount: Amount | None = None


class CreditMemoInvoiceModel(LockstepModel):
    """A credit memo applied to an invoice."""

    group_key: UUID | None = None
    credit_memo_applied_id: UUID | None = None
    invoice_id: UUID | None = None
    credit_memo_invoice_id: UUID | None = None
    invoice_erp_key: str | None = None
    credit_memo_erp_key: str | None = None
    apply_to_invoice_date: date | None = None
    credit_memo_applied_amount: Amount | None = None
    reference_code: str | None = None


class InvoiceModel(LockstepModel):
    """A bill sent from one company to another.

    ``company_id`` identifies the creator and ``customer_id`` the recipient.
    ``total_amount`` and ``outstanding_balance_amount`` differ once payments
    have been applied.
    """

    group_key: UUID | None = None
    invoice_id: UUID | None = None
    company_id: UUID | None = None
    customer_id: UUID | None = None
    erp_key: str | None = None
    purchase_order_code: str | None = None
    reference_code: str | None = None
    salesperson_code: str | None = None
    salesperson_name: str | None = None
    invoice_type_code: str | None = None
    invoice_status_code: str | None = None
    terms_code: str | None = None
    special_terms: str | None = None
    currency_code: str | None = None
    total_amount: Amount | None = None
    sales_tax_amount: Amount | None = None
    discount_amount: Amount | None = None
    outstanding_balance_amount: Amount | None = None
    invoice_date: date | None = None
    discount_date: date | None = None
    posted_date: date | None = None
    invoice_closed_date: date | None = None
    payment_due_date: date | None = None
    imported_date: datetime | None = None
    primary_origin_address_id: UUID | None = None
    primary_bill_to_address_id: UUID | None = None
    primary_ship_to_address_id: UUID | None = None
    created: datetime | None = None
    created_user_id: UUID | None = None
    modified: datetime | None = None
    modified_user_id: UUID | None = None
    app_enrollment_id: UUID | None = None
    is_voided: bool | None = None
    in_dispute: bool | None = None
    exclude_from_aging: bool | None = None
    preferred_delivery_method: str | None = None
    currency_rate: Amount | None = None
    addresses: list[InvoiceAddressModel] | None = None
    lines: list[InvoiceLineModel] | None = None
    payments: list[InvoicePaymentDetailModel] | None = None
    notes: list[NoteModel] | None = None
    attachments: list[AttachmentModel] | None = None
    company: CompanyModel | None = None
    customer: CompanyModel | None = None
    customer_primary_contact: ContactModel | None = None
    credit_memos: list[CreditMemoInvoiceModel] | None = None
    custom_field_values: list[CustomFieldValueModel] | None = None
    custom_field_definitions: list[CustomFieldDefinitionModel] | None = None


class InvoiceSummaryModel(LockstepModel):
    """One row of the invoice summary view."""

    group_key: UUID | None = None
    customer_id: UUID | None = None
    invoice_id: UUID | None = None
    invoice_number: str | None = None
    invoice_date: date | None = None
    customer_name: str | None = None
    status: str | None = None
    payment_due_date: date | None = None
    invoice_amount: Amount | None = None
    outstanding_balance: Amount | None = None
    invoice_type_code: str | None = None
    newest_payment_date: date | None = None
    days_past_due: int | None = None
    payment_numbers: list[str] | None = None
    payment_ids: list[UUID] | None = None


class InvoiceSummaryTotalsModel(LockstepModel):
    """Totals across every invoice matched by a summary view query."""

    total_invoices_open: int | None = None
    total_invoices_past_due: int | None = None
    total_invoice_amount: Amount | None = None
    total_outstanding_amount: Amount | None = None


class AtRiskInvoiceSummaryModel(LockstepModel):
    """One row of the at risk invoice view."""

    report_date: date | None = None
    group_key: UUID | None = None
    customer_id: UUID | None = None
    invoice_id: UUID | None = None
    invoice_number: str | None = None
    invoice_date: date | None = None
    customer_name: str | None = None
    invoice_type_code: str | None = None
    payment_due_date: date | None = None
    invoice_amount: Amount | None = None
    outstanding_balance: Amount | None = None
    invoice_status: str | None = None
    days_past_due: int | None = None
    payment_numbers: list[str] | None = None
    payment_ids: list[UUID] | None = None
