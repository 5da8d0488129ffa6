"""Data models for the Lockstep Platform API."""

from lockstepsdk.models.common import (
    ActionResultModel,
    AgingModel,
    Amount,
    BulkDeleteRequestModel,
    DeleteResult,
    FetchResult,
    LockstepModel,
    SummaryFetchResult,
)
from lockstepsdk.models.companies import (
    CompanyModel,
    ContactModel,
    CustomerDetailsModel,
    CustomerDetailsPaymentModel,
    CustomerSummaryModel,
)
from lockstepsdk.models.extensibility import (
    AttachmentModel,
    CustomFieldDefinitionModel,
    CustomFieldValueModel,
)
from lockstepsdk.models.invoices import (
    AtRiskInvoiceSummaryModel,
    CreditMemoInvoiceModel,
    InvoiceAddressModel,
    InvoiceLineModel,
    InvoiceModel,
    InvoicePaymentDetailModel,
    InvoiceSummaryModel,
    InvoiceSummaryTotalsModel,
)
from lockstepsdk.models.notes import NoteModel
from lockstepsdk.models.users import MagicLinkModel, UserAccountModel

__all__ = [
    "ActionResultModel",
    "AgingModel",
    "Amount",
    "AtRiskInvoiceSummaryModel",
    "AttachmentModel",
    "BulkDeleteRequestModel",
    "CompanyModel",
    "ContactModel",
    "CreditMemoInvoiceModel",
    "CustomFieldDefinitionModel",
    "CustomFieldValueModel",
    "CustomerDetailsModel",
    "CustomerDetailsPaymentModel",
    "CustomerSummaryModel",
    "DeleteResult",
    "FetchResult",
    "InvoiceAddressModel",
    "InvoiceLineModel",
    "InvoiceModel",
    "InvoicePaymentDetailModel",
    "InvoiceSummaryModel",
    "InvoiceSummaryTotalsModel",
    "LockstepModel",
    "MagicLinkModel",
    "NoteModel",
    "SummaryFetchResult",
    "UserAccountModel",
]
