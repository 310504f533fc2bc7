"""Monthly rewards aggregation over a date window"""

from datetime import date
from typing import Dict, Iterable

from customer_rewards.domain.models import RewardsSummary, Transaction
from customer_rewards.domain.points import calculate_points
from customer_rewards.utils.date_utils import month_name


def aggregate_rewards(transactions: Iterable[Transaction], start: date, end: date) -> RewardsSummary:
    """
    Group transactions by calendar month and sum their reward points.

    The store query has already restricted `transactions` to [start, end];
    the window is accepted so callers pass the same arguments they queried
    with. Months appear in the order they are first encountered, not in
    calendar order, e.g. March then January gives [MARCH, JANUARY].

    An empty input produces an empty summary; reporting that as "not found"
    is up to the caller.
    """
    per_month: Dict[str, int] = {}
    for txn in transactions:
        month = month_name(txn.date)
        per_month[month] = per_month.get(month, 0) + calculate_points(txn.amount)

    return RewardsSummary(per_month=per_month, total=sum(per_month.values()))
