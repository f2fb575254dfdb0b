"""Ledger domain use cases"""
from .save_customer import SaveCustomer
from .save_credit import SaveCredit
from .save_payment import SavePayment
from .toggle_reminder import ToggleReminder
from .advance_date import AdvanceDate
from .reset_ledger import ResetLedger
from .get_dashboard import GetDashboard
from .get_customer_overview import GetCustomerOverview
from .dtos import (
    RiskTier,
    SaveCustomerCommandDTO,
    SaveCreditCommandDTO,
    SavePaymentCommandDTO,
    SaveCustomerResponseDTO,
    SaveCreditResponseDTO,
    SavePaymentResponseDTO,
    ToggleReminderResponseDTO,
    ClockDTO,
    CustomerTotalsDTO,
    GlobalTotalsDTO,
    AgingBucketsDTO,
    CustomerRiskDTO,
    CustomerSummaryDTO,
    OverdueCreditDTO,
    LedgerRowDTO,
    DashboardDTO,
    LimitCheckDTO,
)

__all__ = [
    "SaveCustomer",
    "SaveCredit",
    "SavePayment",
    "ToggleReminder",
    "AdvanceDate",
    "ResetLedger",
    "GetDashboard",
    "GetCustomerOverview",
    "RiskTier",
    "SaveCustomerCommandDTO",
    "SaveCreditCommandDTO",
    "SavePaymentCommandDTO",
    "SaveCustomerResponseDTO",
    "SaveCreditResponseDTO",
    "SavePaymentResponseDTO",
    "ToggleReminderResponseDTO",
    "ClockDTO",
    "CustomerTotalsDTO",
    "GlobalTotalsDTO",
    "AgingBucketsDTO",
    "CustomerRiskDTO",
    "CustomerSummaryDTO",
    "OverdueCreditDTO",
    "LedgerRowDTO",
    "DashboardDTO",
    "LimitCheckDTO",
]
