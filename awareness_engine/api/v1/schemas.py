"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date
from typing import List, Literal, Optional

from awareness_engine.domain.models import (
    Account,
    Debt,
    FinancialSnapshot,
    Institution,
    Subscription,
    Transaction,
)
from awareness_engine.domain.periods import ChartPeriod


class InstitutionSchema(BaseModel):
    id: str
    name: str


class AccountSchema(BaseModel):
    id: str
    institution_id: str
    name: str
    type: Literal["checking", "savings", "credit", "cd"]
    balance: float


class TransactionSchema(BaseModel):
    id: str
    date: date
    merchant: str
    category: str
    amount: float = Field(..., ge=0, description="Unsigned amount; direction comes from type")
    type: Literal["income", "expense"]
    account_id: str
    is_recurring: bool = False

    def to_domain(self) -> Transaction:
        return Transaction(**self.model_dump())


class SubscriptionSchema(BaseModel):
    id: str
    merchant: str
    monthly_cost: float = Field(..., ge=0)
    last_charge_date: date
    status: Literal["active", "trial", "cancelled"]
    category: str
    account_id: str


class DebtSchema(BaseModel):
    id: str
    name: str
    type: Literal["student", "mortgage", "credit", "auto", "personal", "other"]
    balance: float
    apr: Optional[float] = None
    minimum_payment: Optional[float] = None
    due_day: Optional[int] = Field(None, ge=1, le=31)
    status: Literal["active", "paused", "paid_off"] = "active"


class SnapshotSchema(BaseModel):
    """A user's financial snapshot as supplied by the caller"""

    institutions: List[InstitutionSchema] = []
    accounts: List[AccountSchema] = []
    transactions: List[TransactionSchema] = []
    subscriptions: List[SubscriptionSchema] = []
    debts: List[DebtSchema] = []
    monthly_income: float = 0.0

    def to_domain(self) -> FinancialSnapshot:
        return FinancialSnapshot(
            institutions=[Institution(**i.model_dump()) for i in self.institutions],
            accounts=[Account(**a.model_dump()) for a in self.accounts],
            transactions=[t.to_domain() for t in self.transactions],
            subscriptions=[Subscription(**s.model_dump()) for s in self.subscriptions],
            debts=[Debt(**d.model_dump()) for d in self.debts],
            monthly_income=self.monthly_income,
        )


class AwarenessRequest(SnapshotSchema):
    """Request body for POST /v1/awareness"""

    selected_institution_id: Optional[str] = Field(None, description="Institution filter; null means all")
    period: ChartPeriod = ChartPeriod.THIS_MONTH
    top_n: Optional[int] = Field(None, ge=0, description="Named spending segments before 'Other'")
    as_of: Optional[date] = Field(None, description="Reference date; defaults to today")


class BreakdownRequest(BaseModel):
    """Request body for POST /v1/spending/breakdown"""

    transactions: List[TransactionSchema]
    period: ChartPeriod = ChartPeriod.THIS_MONTH
    top_n: Optional[int] = Field(None, ge=0)
    as_of: Optional[date] = None


class CategorySegmentSchema(BaseModel):
    name: str
    amount: float
    color: str


class CategoryBreakdownResponse(BaseModel):
    total: float
    segments: List[CategorySegmentSchema]


class CashControlSchema(BaseModel):
    expenses_this_month: float
    expenses_last_month: float
    expenses_change_pct: Optional[float]
    balance_current: float
    balance_last_month: float
    balance_change_pct: Optional[float]
    status: str
    combined_score: int
    filled_segments: int


class ClarityBreakdownSchema(BaseModel):
    visibility: int
    behavior: int
    stability: int


class ClaritySchema(BaseModel):
    score: int
    label: str
    subtext: str
    breakdown: ClarityBreakdownSchema


class SubscriptionSummarySchema(BaseModel):
    monthly_total: float
    annual_cost: float
    load_percent: Optional[float]


class InsightSchema(BaseModel):
    type: str
    message: str


class NextPaymentSchema(BaseModel):
    name: str
    amount: float
    due_day: int


class DebtSummarySchema(BaseModel):
    total: float
    next_payment: Optional[NextPaymentSchema]


class BudgetSchema(BaseModel):
    monthly_income: float
    needs_target: float
    wants_target: float
    savings_target: float
    needs_spent: float
    wants_spent: float
    savings_spent: float


class AwarenessResponse(BaseModel):
    """Response for POST /v1/awareness and GET /v1/users/{user_id}/awareness"""

    visible_account_ids: List[str]
    spending: CategoryBreakdownResponse
    cash_control: CashControlSchema
    clarity: ClaritySchema
    subscriptions: SubscriptionSummarySchema
    insights: List[InsightSchema]
    debts: DebtSummarySchema
    budget: BudgetSchema
