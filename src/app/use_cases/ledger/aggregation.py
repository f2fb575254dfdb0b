"""Ledger Aggregation

Pure derivations over a LedgerStore and its clock. Nothing here mutates the
store or caches results, and nothing raises for an empty store or an
unknown customer id: missing data folds to zeros.
"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Optional

from src.app.repositories.ledger_store import LedgerStore
from src.domain.credit_entry import CreditEntry
from src.domain.customer import Customer
from src.domain.history_entry import HistoryType
from .dtos import (
    AgingBucketsDTO,
    CustomerRiskDTO,
    CustomerSummaryDTO,
    CustomerTotalsDTO,
    GlobalTotalsDTO,
    LedgerRowDTO,
    OverdueCreditDTO,
    RiskTier,
)

ZERO = Decimal("0")

# Risk score parameters
RISK_BASELINE = Decimal("95")
RISK_FLOOR = 15
OVERDUE_PENALTY_PER_DAY = Decimal("1.2")
OVERDUE_PENALTY_CAP = Decimal("60")
UTILIZATION_THRESHOLD = Decimal("0.7")
UTILIZATION_PENALTY_FACTOR = Decimal("60")

TIER_COLORS: dict[RiskTier, str] = {
    RiskTier.LOW: "green",
    RiskTier.MEDIUM: "yellow",
    RiskTier.HIGH: "red",
}

DEFAULT_NEW_CUSTOMER_WINDOW_DAYS = 7


def _sum(amounts: Iterable[Decimal]) -> Decimal:
    return sum(amounts, ZERO)


def is_overdue(credit: CreditEntry, today: date) -> bool:
    """Due date strictly before today"""
    return credit.due_date < today


def customer_totals(store: LedgerStore, customer_id: int) -> CustomerTotalsDTO:
    """
    Fold a customer's credits and payments into totals

    Payments are applied against overdue credit first, in aggregate:
    overdue_amount = max(0, overdue credit - all payments).
    """
    today = store.clock.today
    credits = store.credits(customer_id)

    total_credit = _sum(c.amount for c in credits)
    total_payments = _sum(p.amount for p in store.payments(customer_id))
    balance = total_credit - total_payments

    overdue = [c for c in credits if is_overdue(c, today)]
    overdue_amount = max(ZERO, _sum(c.amount for c in overdue) - total_payments)
    max_overdue_days = max((store.clock.days_since(c.due_date) for c in overdue), default=0)

    utilization = balance / total_credit if total_credit > 0 else ZERO

    return CustomerTotalsDTO(
        customer_id=customer_id,
        total_credit=total_credit,
        total_payments=total_payments,
        balance=balance,
        overdue_amount=overdue_amount,
        max_overdue_days=max_overdue_days,
        utilization=utilization,
    )


def global_totals(
    store: LedgerStore,
    new_customer_window_days: int = DEFAULT_NEW_CUSTOMER_WINDOW_DAYS,
) -> GlobalTotalsDTO:
    """
    Portfolio-wide totals over all known customers

    Entries whose customer does not exist are left out, so outstanding
    always equals the sum of customer balances.

    new_customers_this_week counts creation dates at most
    new_customer_window_days before today. A creation date after today
    gives a negative difference and is counted too.
    """
    customers = store.customers()
    per_customer = [customer_totals(store, c.id) for c in customers]

    total_credit = _sum(t.total_credit for t in per_customer)
    total_payments = _sum(t.total_payments for t in per_customer)

    return GlobalTotalsDTO(
        customer_count=len(customers),
        total_credit=total_credit,
        total_payments=total_payments,
        outstanding=total_credit - total_payments,
        overdue_total=_sum(t.overdue_amount for t in per_customer),
        overdue_customer_count=sum(1 for t in per_customer if t.has_overdue),
        new_customers_this_week=sum(
            1 for c in customers
            if store.clock.days_since(c.created_date) <= new_customer_window_days
        ),
    )


def score_from_totals(totals: CustomerTotalsDTO) -> int:
    overdue_penalty = min(OVERDUE_PENALTY_CAP, totals.max_overdue_days * OVERDUE_PENALTY_PER_DAY)
    utilization_penalty = max(ZERO, (totals.utilization - UTILIZATION_THRESHOLD) * UTILIZATION_PENALTY_FACTOR)
    raw = RISK_BASELINE - overdue_penalty - utilization_penalty
    return max(RISK_FLOOR, int(raw.quantize(Decimal("1"), rounding=ROUND_HALF_UP)))


def risk_score(store: LedgerStore, customer_id: int) -> int:
    """Heuristic score in [15, 95]; higher is safer"""
    return score_from_totals(customer_totals(store, customer_id))


def risk_tier(score: int) -> RiskTier:
    if score > 75:
        return RiskTier.LOW
    if score > 55:
        return RiskTier.MEDIUM
    return RiskTier.HIGH


def customer_risk(store: LedgerStore, customer_id: int) -> CustomerRiskDTO:
    score = risk_score(store, customer_id)
    tier = risk_tier(score)
    return CustomerRiskDTO(customer_id=customer_id, score=score, tier=tier, color=TIER_COLORS[tier])


def _bucket(buckets: AgingBucketsDTO, days: int, amount: Decimal) -> None:
    if days < 1:
        return
    if days <= 7:
        buckets.within7 += amount
    elif days <= 30:
        buckets.within30 += amount
    else:
        buckets.over30 += amount


def upcoming_due_aging(store: LedgerStore) -> AgingBucketsDTO:
    """
    Credit not yet due, bucketed by days until the due date

    Every credit entry counts, including entries whose customer is unknown,
    so with lenient references the buckets can exceed global_totals.
    """
    today = store.clock.today
    buckets = AgingBucketsDTO()
    for credit in store.credits():
        if credit.due_date > today:
            _bucket(buckets, (credit.due_date - today).days, credit.amount)
    return buckets


def past_due_aging(store: LedgerStore) -> AgingBucketsDTO:
    """
    Overdue credit, bucketed by days since the due date

    Like upcoming_due_aging, entries of unknown customers are included.
    """
    today = store.clock.today
    buckets = AgingBucketsDTO()
    for credit in store.credits():
        if is_overdue(credit, today):
            _bucket(buckets, store.clock.days_since(credit.due_date), credit.amount)
    return buckets


def limit_exceeded(
    store: LedgerStore,
    customer_id: int,
    candidate_amount: Decimal,
    excluding_credit_id: Optional[int] = None,
) -> bool:
    """
    Whether adding candidate_amount would push the balance above the limit

    When editing a credit entry, pass its id as excluding_credit_id so its
    current amount is taken out of the projection. Unknown customers never
    exceed, and neither does a non-finite candidate. Reaching the limit
    exactly is not a breach.
    """
    customer = store.get_customer(customer_id)
    if customer is None:
        return False

    candidate = Decimal(str(candidate_amount))
    if not candidate.is_finite():
        return False

    projected = customer_totals(store, customer_id).balance + candidate
    if excluding_credit_id is not None:
        excluded = store.get_credit(excluding_credit_id)
        if excluded is not None and excluded.customer_id == customer_id:
            projected -= excluded.amount

    return projected > customer.credit_limit


def customer_summary(store: LedgerStore, customer: Customer) -> CustomerSummaryDTO:
    totals = customer_totals(store, customer.id)
    score = score_from_totals(totals)
    tier = risk_tier(score)
    return CustomerSummaryDTO(
        customer_id=customer.id,
        name=customer.name,
        contact=customer.contact,
        credit_limit=customer.credit_limit,
        totals=totals,
        risk=CustomerRiskDTO(customer_id=customer.id, score=score, tier=tier, color=TIER_COLORS[tier]),
        status="Overdue" if totals.has_overdue else "OK",
    )


def customer_summaries(store: LedgerStore) -> List[CustomerSummaryDTO]:
    return [customer_summary(store, c) for c in store.customers()]


def overdue_credit_lines(store: LedgerStore) -> List[OverdueCreditDTO]:
    """
    One row per past-due credit whose customer still owes money

    outstanding is capped at the customer's balance. Credits of unknown
    customers are listed under their raw id; global_totals leaves them out.
    """
    today = store.clock.today
    rows = []
    for credit in store.credits():
        if not is_overdue(credit, today):
            continue
        balance = customer_totals(store, credit.customer_id).balance
        if balance <= 0:
            continue
        rows.append(
            OverdueCreditDTO(
                credit_id=credit.id,
                customer_id=credit.customer_id,
                customer_label=store.customer_label(credit.customer_id),
                due_date=credit.due_date,
                days_overdue=store.clock.days_since(credit.due_date),
                outstanding=min(credit.amount, balance),
                reminder_sent=credit.reminder_sent,
            )
        )
    return rows


def running_ledger(store: LedgerStore, customer_id: Optional[int] = None) -> List[LedgerRowDTO]:
    """
    History entries with a running balance

    Credits add to the balance, payments subtract, customer events add 0.
    History is written on insert only, so after an entry is edited the
    running balance no longer matches customer_totals().balance.
    """
    balance = ZERO
    rows = []
    for entry in store.history(customer_id):
        if entry.type == HistoryType.CREDIT:
            balance += entry.amount
        elif entry.type == HistoryType.PAYMENT:
            balance -= entry.amount
        rows.append(
            LedgerRowDTO(
                timestamp=entry.timestamp,
                customer_id=entry.customer_id,
                customer_label=store.customer_label(entry.customer_id),
                type=entry.type,
                amount=entry.amount,
                marker=entry.marker,
                running_balance=balance,
            )
        )
    return rows
