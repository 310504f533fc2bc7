"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional


@dataclass
class Transaction:
    """Single purchase made by a customer"""

    amount: Optional[Decimal]
    date: Optional[date]
    transaction_id: Optional[int] = None
    customer_id: Optional[int] = None  # back-reference, never serialized


@dataclass
class Customer:
    """Owner of a batch of transactions"""

    customer_name: str
    customer_id: Optional[int] = None
    transactions: List[Transaction] = field(default_factory=list)


@dataclass
class MonthlyRewards:
    """Points earned in one calendar month of the query window"""

    month: str
    points: int


@dataclass
class RewardsSummary:
    """Output of aggregation: per-month points in first-seen order plus total"""

    per_month: Dict[str, int]
    total: int

    @property
    def breakdown(self) -> List[MonthlyRewards]:
        return [MonthlyRewards(month=m, points=p) for m, p in self.per_month.items()]


@dataclass
class RewardsReport:
    """Result of a rewards calculation for one customer"""

    customer: Customer
    summary: RewardsSummary
