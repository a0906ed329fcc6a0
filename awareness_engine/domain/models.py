"""Domain models - pure Python dataclasses representing the user's financial snapshot"""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Set


@dataclass
class Institution:
    """Bank or card issuer that groups accounts"""

    id: str
    name: str


@dataclass
class Account:
    """Linked account; credit balances may be negative (amount owed)"""

    id: str
    institution_id: str
    name: str
    type: str  # "checking", "savings", "credit" or "cd"
    balance: float


@dataclass
class Transaction:
    """Posted transaction; amount is unsigned, direction is carried by type"""

    id: str
    date: date
    merchant: str
    category: str
    amount: float
    type: str  # "income" or "expense"
    account_id: str
    is_recurring: bool = False


@dataclass
class Subscription:
    """Recurring charge detected on an account"""

    id: str
    merchant: str
    monthly_cost: float
    last_charge_date: date
    status: str  # "active", "trial" or "cancelled"
    category: str
    account_id: str


@dataclass
class Debt:
    """Debt tracked by the user for coaching"""

    id: str
    name: str
    type: str  # "student", "mortgage", "credit", "auto", "personal" or "other"
    balance: float
    apr: Optional[float] = None
    minimum_payment: Optional[float] = None
    due_day: Optional[int] = None  # 1-31
    status: str = "active"  # "active", "paused" or "paid_off"


@dataclass
class FinancialSnapshot:
    """Everything the caller supplies for one scoring invocation"""

    institutions: List[Institution] = field(default_factory=list)
    accounts: List[Account] = field(default_factory=list)
    transactions: List[Transaction] = field(default_factory=list)
    subscriptions: List[Subscription] = field(default_factory=list)
    debts: List[Debt] = field(default_factory=list)
    monthly_income: float = 0.0


@dataclass
class CategorySegment:
    """One slice of the spending donut"""

    name: str
    amount: float
    color: str


@dataclass
class CategoryBreakdown:
    """Ranked spending by category; segments always sum to total"""

    total: float
    segments: List[CategorySegment]


@dataclass
class CashControlData:
    """Month-over-month expense and balance movement"""

    expenses_this_month: float
    expenses_last_month: float
    expenses_change_pct: Optional[float]
    balance_current: float
    balance_last_month: float
    balance_change_pct: Optional[float]
    status: str  # "good", "moderate" or "high"
    combined_score: int
    filled_segments: int


@dataclass
class ClarityBreakdown:
    """Sub-scores of the clarity score"""

    visibility: int  # max 40
    behavior: int  # max 20
    stability: int  # max 40


@dataclass
class FinancialClarityResult:
    score: int
    breakdown: ClarityBreakdown


@dataclass
class ClarityScope:
    """Inputs to the clarity score; transactions are already scoped"""

    institutions: List[Institution]
    accounts: List[Account]
    visible_account_ids: Set[str]
    subscriptions: List[Subscription]
    visible_transactions: List[Transaction]
    monthly_income: float


@dataclass
class BehavioralInsight:
    type: str
    message: str


@dataclass
class InsightScope:
    """Inputs to the insight engine; already scoped to visible accounts"""

    visible_transactions: List[Transaction]
    visible_subscriptions: List[Subscription]
    monthly_income: float


@dataclass
class NextPayment:
    name: str
    amount: float
    due_day: int


@dataclass
class Budget:
    """50/30/20 targets derived from monthly income"""

    monthly_income: float
    needs_target: float
    wants_target: float
    savings_target: float


@dataclass
class BudgetUsage:
    needs: float
    wants: float
    savings: float


@dataclass
class AwarenessReport:
    """Output of a full scoring run over one scope"""

    visible_account_ids: Set[str]
    spending: CategoryBreakdown
    cash_control: CashControlData
    clarity: FinancialClarityResult
    clarity_label: str
    clarity_subtext: str
    monthly_subscription_total: float
    annual_subscription_cost: float
    subscription_load_percent: Optional[float]
    insights: List[BehavioralInsight]
    total_debt: float
    next_payment: Optional[NextPayment]
    budget: Budget
    budget_usage: BudgetUsage
